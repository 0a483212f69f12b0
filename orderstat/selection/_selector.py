"""
Selection control loop.

Repeatedly partitions a shrinking region around an estimated pivot until
the requested rank falls inside the band of elements equal to the pivot.
On return the element at index k is the k-th order statistic, everything
before it is <= and everything after it is >= (the nth_element contract).

Two pivot strategies:
    floyd_rivest: narrow by sample selection (regions above the cutoff),
                  then pivot on whatever sits at k. Expected n + min(k, n-k)
                  comparisons.
    median_of_medians: pivot on the median-of-medians estimate of the
                  region. Worst-case linear, deterministic.
"""

from __future__ import annotations

from typing import Any, Iterable, Literal, MutableSequence

from orderstat.core.exceptions import ValidationError
from orderstat.selection._floyd_rivest import FLOYD_RIVEST_CUTOFF, narrow
from orderstat.selection._median_of_medians import median_of_medians
from orderstat.selection._order import Less
from orderstat.selection._partition import partition

Method = Literal['floyd_rivest', 'median_of_medians']
METHODS: tuple[str, ...] = ('floyd_rivest', 'median_of_medians')


def check_method(method: str) -> Method:
    """Validate a pivot strategy name."""
    if method not in METHODS:
        raise ValidationError(
            f"Unknown method: {method!r}. Must be one of {METHODS}"
        )
    return method


class Selector:
    """
    In-place selection engine bound to one order relation.

    Holds no reference to any sequence between calls; the counters only
    accumulate statistics about the work done so far.

    Attributes:
        partitions: Number of partition passes performed
        narrowings: Number of Floyd-Rivest sample selections started
    """

    def __init__(
        self,
        less: Less,
        method: Method = 'floyd_rivest',
        cutoff: int = FLOYD_RIVEST_CUTOFF,
    ):
        self.less = less
        self.method = check_method(method)
        self.cutoff = cutoff
        self.partitions = 0
        self.narrowings = 0

    def select(self, seq: MutableSequence[Any], lo: int, hi: int, k: int) -> None:
        """Place the k-th order statistic of ``seq[lo:hi + 1]`` at index k."""
        less = self.less
        while lo < hi:
            if self.method == 'median_of_medians':
                pivot = seq[median_of_medians(seq, lo, hi, less, self.select)]
            else:
                if hi - lo + 1 > self.cutoff:
                    self.narrowings += 1
                    narrow(seq, lo, hi, k, self.select)
                pivot = seq[k]

            lt, gt = partition(seq, lo, hi, pivot, less)
            self.partitions += 1
            if lt > hi or gt < lo:
                # less(pivot, pivot) held: not a strict order, stop narrowing
                return
            if k < lt:
                hi = lt - 1
            elif k > gt:
                lo = gt + 1
            else:
                return

    def select_many(self, seq: MutableSequence[Any], ranks: Iterable[int]) -> None:
        """
        Place every requested order statistic at its index.

        Ranks are processed in ascending order, each over the region to the
        right of the previous one, so earlier placements are never disturbed.
        """
        lo = 0
        hi = len(seq) - 1
        for k in sorted(set(ranks)):
            self.select(seq, lo, hi, k)
            lo = k + 1
