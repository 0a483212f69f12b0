"""
Core protocols for orderstat.

We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend only has to look like one.
"""

from typing import Protocol, TypeVar, runtime_checkable

D = TypeVar('D')  # Design type
P = TypeVar('P')  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a domain-specific design and produces a Result
    wrapping a domain-specific parameter payload.

    A backend is configured once, at construction (pivot method, cutoff),
    and keeps no state between solve() calls; the data and the requested
    ranks arrive with the design.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_floyd_rivest', 'cpu_median_of_medians'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated input container

        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...
