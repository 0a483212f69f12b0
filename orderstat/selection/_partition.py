"""
Three-way in-place partitioning.

Two forward passes: the first gathers elements less than the pivot at the
low end, the second gathers elements equal to it right after them. Only
swaps are performed; the pivot value itself is the one extra reference
held. A region that is already partitioned around the pivot is left
exactly as it was, so repeating a selection changes nothing.
"""

from __future__ import annotations

from typing import Any, MutableSequence

from orderstat.selection._order import Less


def partition(
    seq: MutableSequence[Any],
    lo: int,
    hi: int,
    pivot: Any,
    less: Less,
) -> tuple[int, int]:
    """
    Partition ``seq[lo:hi + 1]`` around ``pivot``.

    Returns
    -------
    (lt, gt) : tuple of int
        ``seq[lo:lt]`` < pivot, ``seq[lt:gt + 1]`` == pivot and
        ``seq[gt + 1:hi + 1]`` > pivot. When the pivot does not occur in the
        region the equal band is empty and ``lt == gt + 1``.
    """
    lt = lo
    for i in range(lo, hi + 1):
        if less(seq[i], pivot):
            seq[lt], seq[i] = seq[i], seq[lt]
            lt += 1

    end = lt
    for i in range(lt, hi + 1):
        if not less(pivot, seq[i]):
            seq[end], seq[i] = seq[i], seq[end]
            end += 1

    return lt, end - 1


def insertion_sort(seq: MutableSequence[Any], lo: int, hi: int, less: Less) -> None:
    """Sort ``seq[lo:hi + 1]`` in place by adjacent swaps. For tiny regions."""
    for i in range(lo + 1, hi + 1):
        j = i
        while j > lo and less(seq[j], seq[j - 1]):
            seq[j], seq[j - 1] = seq[j - 1], seq[j]
            j -= 1
