"""
Core infrastructure for orderstat.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from orderstat.core.protocols import Backend
from orderstat.core.result import Result
from orderstat.core.exceptions import (
    OrderStatError,
    ValidationError,
    DimensionError,
    EmptyInputError,
    RankOutOfBoundsError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "OrderStatError",
    "ValidationError",
    "DimensionError",
    "EmptyInputError",
    "RankOutOfBoundsError",
]
