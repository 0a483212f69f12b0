"""
Exception hierarchy for orderstat.

All exceptions inherit from OrderStatError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Every check runs before the caller's sequence is touched
"""


class OrderStatError(Exception):
    """Base exception for all orderstat errors."""
    pass


class ValidationError(OrderStatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a numpy array passed as the sequence is not 1-dimensional.
    """
    pass


class EmptyInputError(ValidationError):
    """
    The sequence has no elements.

    No order statistic exists for an empty sequence.

    Attributes:
        name: Parameter name of the empty input
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class RankOutOfBoundsError(ValidationError, IndexError):
    """
    Requested rank lies outside [0, length).

    Also an IndexError, since a rank is an index into the sorted order.

    Attributes:
        rank: The offending rank
        length: Length of the sequence
    """

    def __init__(
        self,
        message: str,
        rank: int | None = None,
        length: int | None = None,
    ):
        super().__init__(message)
        self.rank = rank
        self.length = length
