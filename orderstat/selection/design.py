"""
SelectionDesign: validated inputs for one selection call.

Wraps the caller's sequence (by reference, it is mutated in place), the
requested ranks and the order relation. Follows the Design pattern used
across the package: construct through a classmethod, validate everything
up front, immutable afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableSequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from orderstat.core.exceptions import ValidationError
from orderstat.core.validation import (
    check_probabilities,
    check_rank,
    check_sequence,
)
from orderstat.selection._order import Comparator, Less, order_from
from orderstat.selection._quantile import type1_ranks


@dataclass(frozen=True)
class SelectionDesign:
    """
    Design for order-statistic selection.

    Construction:
        SelectionDesign.from_ranks(x, 3)
        SelectionDesign.from_ranks(x, [0, 10, 99], cmp=by_length)
        SelectionDesign.from_probabilities(x, [0.1, 0.5, 0.9])
    """
    _sequence: MutableSequence[Any]
    _n: int
    _ranks: tuple[int, ...]
    _less: Less
    _order: str
    _probs: NDArray[np.floating[Any]] | None = None

    @classmethod
    def from_ranks(
        cls,
        sequence: MutableSequence[Any],
        ranks: int | ArrayLike,
        *,
        cmp: Comparator | None = None,
    ) -> SelectionDesign:
        """
        Build a design selecting one or more zero-based ranks.

        Parameters
        ----------
        sequence : mutable sequence
            List, 1D numpy array or any sequence with item assignment.
        ranks : int or sequence of int
            Ranks in [0, len(sequence)).
        cmp : callable, optional
            Three-way comparator; natural order if None.
        """
        n = check_sequence(sequence, 'sequence')
        if np.ndim(ranks) == 0:
            raw = [ranks]
        else:
            raw = list(np.asarray(ranks).ravel()) if isinstance(ranks, np.ndarray) else list(ranks)
        if not raw:
            raise ValidationError("ranks: no ranks given")
        checked = tuple(check_rank(k, n, 'ranks') for k in raw)
        less, order = order_from(cmp)
        return cls(_sequence=sequence, _n=n, _ranks=checked, _less=less, _order=order)

    @classmethod
    def from_probabilities(
        cls,
        sequence: MutableSequence[Any],
        probs: ArrayLike,
        *,
        cmp: Comparator | None = None,
    ) -> SelectionDesign:
        """
        Build a design selecting the type-1 sample quantiles at ``probs``.

        Parameters
        ----------
        sequence : mutable sequence
        probs : float or array-like of float
            Probabilities in [0, 1].
        cmp : callable, optional
        """
        n = check_sequence(sequence, 'sequence')
        p = check_probabilities(probs, 'probs')
        less, order = order_from(cmp)
        return cls(
            _sequence=sequence,
            _n=n,
            _ranks=type1_ranks(n, p),
            _less=less,
            _order=order,
            _probs=p,
        )

    @property
    def sequence(self) -> MutableSequence[Any]:
        """The caller's sequence (mutated by selection)."""
        return self._sequence

    @property
    def n(self) -> int:
        """Number of elements."""
        return self._n

    @property
    def ranks(self) -> tuple[int, ...]:
        """Requested ranks, in the caller's order."""
        return self._ranks

    @property
    def less(self) -> Less:
        return self._less

    @property
    def order(self) -> str:
        """'natural' or 'custom'."""
        return self._order

    @property
    def probs(self) -> NDArray[np.floating[Any]] | None:
        """Quantile probabilities, or None for a rank design."""
        return self._probs

    def __repr__(self) -> str:
        return (
            f"SelectionDesign(n={self._n}, ranks={len(self._ranks)}, "
            f"order={self._order})"
        )
