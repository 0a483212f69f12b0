"""
Generic result container for orderstat computations.

The Result class provides a standardized envelope for backend output:
parameter payload, metadata, timing and non-fatal warnings.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (iterations, comparisons)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for selection computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (selected values, ranks)
        info: Structured metadata (method, partitions, comparisons)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: How the result was produced (algorithm, order)

    Examples:
        >>> Result(
        ...     params=SelectionParams(values=(3,), ranks=(2,)),
        ...     info={'method': 'floyd_rivest', 'partitions': 4},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_floyd_rivest'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=dict)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
