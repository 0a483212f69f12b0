"""
Selection solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from orderstat.core.result import Result

if TYPE_CHECKING:
    from orderstat.selection.design import SelectionDesign


@dataclass(frozen=True)
class SelectionParams:
    """
    Parameter payload for selection.

    values[i] is the order statistic of rank ranks[i]; for a quantile
    design, probs[i] is the probability that produced ranks[i].
    """
    values: tuple[Any, ...]
    ranks: tuple[int, ...]
    probs: NDArray[np.floating[Any]] | None = None


@dataclass
class SelectionSolution:
    """
    User-facing selection results.

    Wraps Result[SelectionParams] and provides convenient accessors.
    """
    _result: Result[SelectionParams]
    _design: 'SelectionDesign'

    @property
    def values(self) -> tuple[Any, ...]:
        """Selected elements, one per requested rank, in request order."""
        return self._result.params.values

    @property
    def value(self) -> Any:
        """The selected element when exactly one rank was requested."""
        values = self._result.params.values
        if len(values) != 1:
            raise ValueError(
                f"value is only defined for a single rank, got {len(values)}; "
                f"use values"
            )
        return values[0]

    @property
    def ranks(self) -> tuple[int, ...]:
        """Zero-based ranks, which are also the indices of the values."""
        return self._result.params.ranks

    @property
    def probs(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.probs

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def partitions(self) -> int:
        """Partition passes performed."""
        return self._result.info['partitions']

    @property
    def comparisons(self) -> int:
        """Calls made to the order predicate."""
        return self._result.info['comparisons']

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, Any]:
        return self._result.provenance

    def summary(self) -> str:
        """Human-readable table of the selected order statistics."""
        lines = [
            f"Order statistics ({self.method}, n={self.n})",
        ]
        probs = self.probs
        for i, (k, v) in enumerate(zip(self.ranks, self.values)):
            if probs is not None:
                lines.append(f"  p={probs[i]:<8.4g} rank {k:>6}: {v!r}")
            else:
                lines.append(f"  rank {k:>6}: {v!r}")
        lines.append(
            f"partitions={self.partitions}, comparisons={self.comparisons}"
        )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SelectionSolution(n={self.n}, ranks={list(self.ranks)}, "
            f"method={self.method!r})"
        )
