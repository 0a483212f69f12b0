"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_1d: dimensionality
    - check_mutable / check_sequence: mutability, emptiness, numpy shape
    - check_rank: integer type and range
    - check_probabilities: range and finiteness
    - check_positive_int
    - has_nan
"""

import array

import numpy as np
import pytest

from orderstat.core.exceptions import (
    DimensionError,
    EmptyInputError,
    RankOutOfBoundsError,
    ValidationError,
)
from orderstat.core.validation import (
    check_1d,
    check_mutable,
    check_positive_int,
    check_probabilities,
    check_rank,
    check_sequence,
    has_nan,
)


# ═══════════════════════════════════════════════════════════════════════
# check_sequence
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSequence:

    def test_list_returns_length(self):
        assert check_sequence([3, 1, 2], "x") == 3

    def test_numpy_1d(self):
        assert check_sequence(np.arange(7), "x") == 7

    def test_array_module(self):
        assert check_sequence(array.array('i', [1, 2]), "x") == 2

    def test_empty_list(self):
        with pytest.raises(EmptyInputError, match="x: sequence is empty"):
            check_sequence([], "x")

    def test_empty_numpy(self):
        with pytest.raises(EmptyInputError):
            check_sequence(np.array([]), "x")

    def test_rejects_tuple(self):
        with pytest.raises(ValidationError, match="mutable sequence"):
            check_sequence((1, 2, 3), "x")

    def test_rejects_string(self):
        with pytest.raises(ValidationError, match="mutable sequence"):
            check_sequence("abc", "x")

    def test_rejects_dict(self):
        with pytest.raises(ValidationError, match="dict"):
            check_mutable({0: 1}, "x")

    def test_rejects_2d_numpy(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_sequence(np.zeros((2, 3)), "x")

    def test_immutable_checked_before_empty(self):
        with pytest.raises(ValidationError) as exc:
            check_sequence((), "x")
        assert not isinstance(exc.value, EmptyInputError)


class TestCheck1d:

    def test_accepts_1d(self):
        check_1d(np.zeros(3), "x")

    def test_rejects_0d(self):
        with pytest.raises(DimensionError, match="0D"):
            check_1d(np.array(1.0), "x")


# ═══════════════════════════════════════════════════════════════════════
# check_rank
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRank:

    @pytest.mark.parametrize("k", [0, 1, 4])
    def test_in_range(self, k):
        assert check_rank(k, 5, "k") == k

    def test_numpy_integer(self):
        result = check_rank(np.int64(2), 5, "k")
        assert result == 2
        assert type(result) is int

    def test_equal_to_length(self):
        with pytest.raises(RankOutOfBoundsError) as exc:
            check_rank(5, 5, "k")
        assert exc.value.rank == 5
        assert exc.value.length == 5

    def test_negative(self):
        with pytest.raises(RankOutOfBoundsError, match="rank -1"):
            check_rank(-1, 5, "k")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="integer rank"):
            check_rank(2.0, 5, "k")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="bool"):
            check_rank(True, 5, "k")

    def test_string_rejected(self):
        with pytest.raises(ValidationError):
            check_rank("2", 5, "k")


# ═══════════════════════════════════════════════════════════════════════
# check_probabilities
# ═══════════════════════════════════════════════════════════════════════


class TestCheckProbabilities:

    def test_scalar(self):
        result = check_probabilities(0.5, "probs")
        np.testing.assert_array_equal(result, [0.5])
        assert result.dtype == np.float64

    def test_list(self):
        result = check_probabilities([0, 0.25, 1], "probs")
        np.testing.assert_array_equal(result, [0.0, 0.25, 1.0])

    def test_out_of_range(self):
        with pytest.raises(ValidationError, match=r"\[0, 1\]"):
            check_probabilities([0.5, 1.5], "probs")

    def test_negative(self):
        with pytest.raises(ValidationError):
            check_probabilities([-0.1], "probs")

    def test_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            check_probabilities([np.nan], "probs")

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            check_probabilities([], "probs")

    def test_non_numeric(self):
        with pytest.raises(ValidationError, match="cannot convert"):
            check_probabilities(["a"], "probs")


# ═══════════════════════════════════════════════════════════════════════
# Misc
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPositiveInt:

    def test_accepts(self):
        assert check_positive_int(600, "cutoff") == 600

    def test_zero(self):
        with pytest.raises(ValidationError, match=">= 1"):
            check_positive_int(0, "cutoff")

    def test_float(self):
        with pytest.raises(ValidationError):
            check_positive_int(1.5, "cutoff")


class TestHasNan:

    def test_list_with_nan(self):
        assert has_nan([1.0, float('nan')])

    def test_list_without_nan(self):
        assert not has_nan([1.0, 2.0, 3])

    def test_numpy_float(self):
        assert has_nan(np.array([1.0, np.nan]))

    def test_numpy_int(self):
        assert not has_nan(np.arange(3))

    def test_non_numeric(self):
        assert not has_nan(["a", "b"])
