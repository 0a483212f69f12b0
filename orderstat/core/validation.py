"""
Input validation utilities for orderstat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. None of them mutate their input.

Design principles:
    - No silent coercion of the caller's sequence (it is mutated in place)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from orderstat.core.exceptions import (
    DimensionError,
    EmptyInputError,
    RankOutOfBoundsError,
    ValidationError,
)


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_mutable(sequence: Any, name: str) -> None:
    """
    Verify the input is a mutable, indexable sequence.

    Selection rearranges elements in place, so the sequence must support
    len(), integer indexing and item assignment.

    Args:
        sequence: Input to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If the input is not a mutable sequence
    """
    missing = [
        attr for attr in ('__len__', '__getitem__', '__setitem__')
        if not hasattr(sequence, attr)
    ]
    if missing:
        raise ValidationError(
            f"{name}: expected a mutable sequence, got {type(sequence).__name__} "
            f"(missing {', '.join(missing)})"
        )
    if isinstance(sequence, dict):
        raise ValidationError(f"{name}: expected a mutable sequence, got dict")


def check_sequence(sequence: Any, name: str) -> int:
    """
    Validate a sequence for in-place selection and return its length.

    Args:
        sequence: Input to validate
        name: Parameter name for error messages

    Returns:
        Length of the sequence

    Raises:
        ValidationError: If the input is not a mutable sequence
        DimensionError: If the input is a numpy array that is not 1D
        EmptyInputError: If the sequence has no elements
    """
    check_mutable(sequence, name)
    if isinstance(sequence, np.ndarray):
        check_1d(sequence, name)

    n = len(sequence)
    if n == 0:
        raise EmptyInputError(f"{name}: sequence is empty", name=name)
    return n


def check_rank(rank: Any, length: int, name: str) -> int:
    """
    Validate a zero-based rank against a sequence length.

    Args:
        rank: Requested rank (any integer type, including numpy integers)
        length: Length of the sequence
        name: Parameter name for error messages

    Returns:
        The rank as a Python int

    Raises:
        ValidationError: If rank is not an integer
        RankOutOfBoundsError: If rank is not in [0, length)
    """
    if isinstance(rank, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer rank, got bool")
    try:
        k = operator.index(rank)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer rank, got {type(rank).__name__}"
        ) from e

    if not 0 <= k < length:
        raise RankOutOfBoundsError(
            f"{name}: rank {k} out of bounds for sequence of length {length} "
            f"(valid range 0..{length - 1})",
            rank=k,
            length=length,
        )
    return k


def check_probabilities(probs: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate probabilities and convert to a 1D float64 array.

    Args:
        probs: Scalar or array-like of probabilities
        name: Parameter name for error messages

    Returns:
        1D float64 array of probabilities

    Raises:
        ValidationError: If any probability is non-finite or outside [0, 1]
    """
    try:
        result = np.atleast_1d(np.asarray(probs, dtype=np.float64))
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    check_1d(result, name)
    if result.size == 0:
        raise EmptyInputError(f"{name}: no probabilities given", name=name)
    if not np.all(np.isfinite(result)):
        raise ValidationError(f"{name}: contains non-finite values")
    bad = result[(result < 0.0) | (result > 1.0)]
    if bad.size > 0:
        raise ValidationError(
            f"{name}: probabilities must lie in [0, 1], got {bad.tolist()}"
        )
    return result


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1.

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def has_nan(sequence: Any) -> bool:
    """True if a float sequence contains NaN (natural order is then not total)."""
    if isinstance(sequence, np.ndarray):
        if np.issubdtype(sequence.dtype, np.floating):
            return bool(np.isnan(sequence).any())
        return False
    return any(isinstance(v, float) and math.isnan(v) for v in sequence)
