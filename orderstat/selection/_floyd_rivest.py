"""
Floyd-Rivest sample bracketing.

For a large region, the k-th element is first selected inside a small
window around k whose size grows like n^(2/3). After that recursive call
the element sitting at k is, with high probability, very close in rank to
the true k-th order statistic, so partitioning the full region around it
discards almost everything in one pass.

Only efficiency depends on the estimate; correctness never does.

Reference:
    Floyd, R.W. and Rivest, R.L. (1975) "Algorithm 489: The algorithm
    SELECT - for finding the ith smallest of n elements",
    Comm. ACM 18(3), 173.
"""

from __future__ import annotations

import math
from typing import Any, MutableSequence

from orderstat.selection._median_of_medians import SelectFn

# Regions of at most this many elements are partitioned directly.
FLOYD_RIVEST_CUTOFF = 600


def sample_bounds(lo: int, hi: int, k: int) -> tuple[int, int]:
    """
    Window ``[new_lo, new_hi]`` within ``[lo, hi]`` expected to hold the
    k-th order statistic after sampling. Always contains ``k``.
    """
    n = hi - lo + 1
    i = k - lo + 1
    z = math.log(n)
    s = 0.5 * math.exp(2.0 * z / 3.0)
    sd = 0.5 * math.sqrt(z * s * (n - s) / n)
    if i < n / 2:
        sd = -sd
    elif i == n / 2:
        sd = 0.0

    new_lo = max(lo, int(math.floor(k - i * s / n + sd)))
    new_hi = min(hi, int(math.floor(k + (n - i) * s / n + sd)))
    return min(new_lo, k), max(new_hi, k)


def narrow(
    seq: MutableSequence[Any],
    lo: int,
    hi: int,
    k: int,
    select: SelectFn,
) -> tuple[int, int]:
    """
    Select within the sample window so that ``seq[k]`` becomes a good pivot.

    Returns the window used. No-op when the window would not be smaller
    than the region.
    """
    new_lo, new_hi = sample_bounds(lo, hi, k)
    if new_hi - new_lo < hi - lo:
        select(seq, new_lo, new_hi, k)
    return new_lo, new_hi
