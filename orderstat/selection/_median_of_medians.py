"""
Median-of-medians pivot estimation (Blum, Floyd, Pratt, Rivest, Tarjan 1973).

The region is cut into groups of five, the last of which may be shorter.
Each complete group's median is found with a fixed nine-comparison network
and swapped to the front of the region, then the median of those medians is
selected exactly by the caller's selection routine.

The short trailing group is insertion-sorted and its middle element joins
the medians when the number of complete groups is even, so the count of
medians is odd whenever there is a trailing group.

The estimate is >= at least ceil(0.3 * n) elements of the region
and <= at least ceil(0.3 * n), counting itself on both sides. Regions
shorter than one group are insertion-sorted and their upper median returned
directly.

Reference:
    Blum, M., Floyd, R.W., Pratt, V., Rivest, R.L. and Tarjan, R.E. (1973)
    "Time bounds for selection", J. Comput. System Sci. 7(4), 448-461.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

from orderstat.selection._order import Less
from orderstat.selection._partition import insertion_sort

GROUP_SIZE = 5

# select(seq, lo, hi, k): place the k-th order statistic of seq[lo:hi + 1] at k
SelectFn = Callable[[MutableSequence[Any], int, int, int], None]


def median5(seq: MutableSequence[Any], start: int, less: Less) -> int:
    """
    Index of the median of ``seq[start:start + 5]``, without moving anything.

    Three passes of a min-finding network over index handles: after pass p
    the handle in slot p refers to the (p+1)-th smallest element.
    """
    idx = [start, start + 1, start + 2, start + 3, start + 4]
    for p in range(3):
        for q in range(p + 1, 5):
            if less(seq[idx[q]], seq[idx[p]]):
                idx[p], idx[q] = idx[q], idx[p]
    return idx[2]


def num_medians(n: int) -> int:
    """Number of group medians gathered from an n-element region, n >= 5."""
    full, rest = divmod(n, GROUP_SIZE)
    if rest and full % 2 == 0:
        return full + 1
    return full


def median_of_medians(
    seq: MutableSequence[Any],
    lo: int,
    hi: int,
    less: Less,
    select: SelectFn,
) -> int:
    """
    Approximate median of ``seq[lo:hi + 1]``; returns its index.

    Parameters
    ----------
    seq : mutable sequence
        Rearranged within ``[lo, hi]``.
    lo, hi : int
        Inclusive region bounds.
    less : callable
        Strict order predicate.
    select : callable
        Exact selection routine used on the gathered group medians.

    Returns
    -------
    int
        Index in ``[lo, hi]`` of the estimate.
    """
    n = hi - lo + 1
    if n < GROUP_SIZE:
        insertion_sort(seq, lo, hi, less)
        return lo + n // 2

    full = n // GROUP_SIZE
    for g in range(full):
        m = median5(seq, lo + GROUP_SIZE * g, less)
        # slot lo + g lies in a group that has already been visited
        seq[lo + g], seq[m] = seq[m], seq[lo + g]

    count = num_medians(n)
    if count > full:
        tail = lo + GROUP_SIZE * full
        insertion_sort(seq, tail, hi, less)
        m = tail + (hi - tail + 1) // 2
        seq[lo + full], seq[m] = seq[m], seq[lo + full]

    mid = lo + count // 2
    select(seq, lo, lo + count - 1, mid)
    return mid
