"""
Public entry points for selection.

kth / kth_by, median_of_medians / median_of_medians_by and
locate_median_of_medians are thin, fast wrappers over the engine returning
the selected element (and, for the locate variant, its index). select() and
quantile() go through the design/backend pipeline and return a
SelectionSolution carrying ranks, counters and timing.

All functions rearrange the given sequence in place. The sequence must not
be read or written by anyone else while a call is running.
"""

from __future__ import annotations

from typing import Any, MutableSequence
from numpy.typing import ArrayLike

from orderstat.core.validation import check_rank, check_sequence
from orderstat.selection._floyd_rivest import FLOYD_RIVEST_CUTOFF
from orderstat.selection._median_of_medians import median_of_medians as _estimate
from orderstat.selection._order import Comparator, Less, natural_less, order_from
from orderstat.selection._selector import Method, Selector
from orderstat.selection.backends.cpu import CPUSelectionBackend
from orderstat.selection.design import SelectionDesign
from orderstat.selection.solution import SelectionSolution


def _kth(sequence: MutableSequence[Any], k: Any, less: Less) -> Any:
    n = check_sequence(sequence, 'sequence')
    k = check_rank(k, n, 'k')
    Selector(less).select(sequence, 0, n - 1, k)
    return sequence[k]


def _median(sequence: MutableSequence[Any], less: Less) -> tuple[int, Any]:
    n = check_sequence(sequence, 'sequence')
    selector = Selector(less)
    index = _estimate(sequence, 0, n - 1, less, selector.select)
    return index, sequence[index]


def kth(sequence: MutableSequence[Any], k: int) -> Any:
    """
    Compute the k-th order statistic (k-th smallest element, zero-based)
    of ``sequence`` with the Floyd-Rivest algorithm.

    The sequence is rearranged in place so that ``sequence[k]`` holds the
    element that would be there after sorting, every element before index
    k is <= it and every element after is >= it.

    Parameters
    ----------
    sequence : mutable sequence
        List, 1D numpy array or any sequence supporting item assignment.
    k : int
        Rank in [0, len(sequence)).

    Returns
    -------
    The element now at ``sequence[k]``.

    Raises
    ------
    EmptyInputError
        If the sequence is empty.
    RankOutOfBoundsError
        If k is not in [0, len(sequence)).

    Examples
    --------
    >>> x = [2, 0, 3, 1]
    >>> kth(x, 2)
    2
    >>> x[2]
    2
    """
    return _kth(sequence, k, natural_less)


def kth_by(sequence: MutableSequence[Any], k: int, cmp: Comparator) -> Any:
    """
    Compute the k-th order statistic in the ordering defined by ``cmp``,
    i.e. ``sorted(sequence, key=functools.cmp_to_key(cmp))[k]``.

    ``cmp(a, b)`` returns a negative number if a < b, zero if they are
    equivalent and a positive number if a > b. It must define a total
    order; otherwise the returned element is unspecified.

    See kth() for the in-place contract and errors.

    Examples
    --------
    >>> x = [2, 0, 3, 1]
    >>> kth_by(x, 0, lambda a, b: b - a)   # largest first
    3
    """
    less, _ = order_from(cmp)
    return _kth(sequence, k, less)


def median_of_medians(sequence: MutableSequence[Any]) -> Any:
    """
    Calculate an approximate median of ``sequence``.

    The result is an element guaranteed to lie between the 30th and 70th
    percentiles: with c = ceil(0.3 * len(sequence)) it is >= at least c
    elements and <= at least c elements, itself included. This is NOT the
    exact median; use ``kth(x, len(x) // 2)`` for that. For fewer than five
    elements the exact upper median is returned.

    The sequence is rearranged in place.

    Raises
    ------
    EmptyInputError
        If the sequence is empty.

    Examples
    --------
    >>> x = list(range(100, -1, -1))
    >>> 30 <= median_of_medians(x) <= 70
    True
    """
    return _median(sequence, natural_less)[1]


def median_of_medians_by(sequence: MutableSequence[Any], cmp: Comparator) -> Any:
    """
    Calculate an approximate median of ``sequence`` in the ordering
    defined by ``cmp``. See median_of_medians() and kth_by().
    """
    less, _ = order_from(cmp)
    return _median(sequence, less)[1]


def locate_median_of_medians(
    sequence: MutableSequence[Any],
    *,
    cmp: Comparator | None = None,
) -> tuple[int, Any]:
    """
    Median-of-medians estimate together with the index it now occupies.

    Same estimate and in-place rearrangement as median_of_medians() (or
    median_of_medians_by() when ``cmp`` is given). The index lets the
    caller use the estimate as a pivot without searching for it.

    Returns
    -------
    (index, value) : tuple
        ``sequence[index] == value`` on return.

    Examples
    --------
    >>> x = [4, 1, 3, 2]
    >>> locate_median_of_medians(x)
    (2, 3)
    """
    less, _ = order_from(cmp)
    return _median(sequence, less)


def select(
    sequence: MutableSequence[Any],
    ranks: int | ArrayLike,
    *,
    cmp: Comparator | None = None,
    method: Method = 'floyd_rivest',
    cutoff: int = FLOYD_RIVEST_CUTOFF,
) -> SelectionSolution:
    """
    Select one or several order statistics in place.

    Parameters
    ----------
    sequence : mutable sequence
    ranks : int or sequence of int
        Zero-based ranks. Several ranks are placed in one sweep; afterwards
        the sequence is partitioned between consecutive requested ranks.
    cmp : callable, optional
        Three-way comparator; natural order if None.
    method : str
        'floyd_rivest' (expected fewest comparisons) or
        'median_of_medians' (worst-case linear, deterministic).
    cutoff : int
        Region size above which Floyd-Rivest sampling is used.

    Returns
    -------
    SelectionSolution
    """
    design = SelectionDesign.from_ranks(sequence, ranks, cmp=cmp)
    be = CPUSelectionBackend(method=method, cutoff=cutoff)
    result = be.solve(design)
    return SelectionSolution(_result=result, _design=design)


def quantile(
    sequence: MutableSequence[Any],
    probs: ArrayLike,
    *,
    cmp: Comparator | None = None,
    method: Method = 'floyd_rivest',
    cutoff: int = FLOYD_RIVEST_CUTOFF,
) -> SelectionSolution:
    """
    Element-valued sample quantiles. Matches R quantile(type=1).

    Each probability p maps to the smallest element whose empirical CDF is
    >= p, so no interpolation takes place and any orderable element type
    works.

    Parameters
    ----------
    sequence : mutable sequence
    probs : float or array-like of float
        Probabilities in [0, 1].
    cmp, method, cutoff
        As for select().

    Returns
    -------
    SelectionSolution with probs populated.
    """
    design = SelectionDesign.from_probabilities(sequence, probs, cmp=cmp)
    be = CPUSelectionBackend(method=method, cutoff=cutoff)
    result = be.solve(design)
    return SelectionSolution(_result=result, _design=design)
