"""
Tests for the Result[P] envelope, the Backend protocol and timing.

Validates:
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
    - CPUSelectionBackend satisfies Backend
    - Timer accumulation and misuse errors
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from orderstat.core.compute.timing import Timer
from orderstat.core.protocols import Backend
from orderstat.core.result import Result
from orderstat.selection.backends.cpu import CPUSelectionBackend
from orderstat.selection.design import SelectionDesign


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: int


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=3),
            info={"method": "floyd_rivest"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_floyd_rivest",
        )
        assert result.params.value == 3
        assert result.info["method"] == "floyd_rivest"
        assert result.backend_name == "cpu_floyd_rivest"
        assert result.warnings == ()
        assert result.provenance == {}

    def test_frozen(self):
        result = Result(params=FakeParams(1), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("sequence contains NaN; natural order is not total",),
        )
        assert result.has_warning("NaN")
        assert not result.has_warning("converge")


class TestBackendProtocol:

    def test_cpu_backend_is_backend(self):
        assert isinstance(CPUSelectionBackend(), Backend)

    @pytest.mark.parametrize("method", ["floyd_rivest", "median_of_medians"])
    def test_backend_name(self, method):
        assert CPUSelectionBackend(method=method).name == f"cpu_{method}"

    def test_one_backend_serves_many_designs(self):
        be = CPUSelectionBackend(method="median_of_medians", cutoff=50)
        first = be.solve(SelectionDesign.from_ranks([3, 1, 2], 1))
        second = be.solve(SelectionDesign.from_ranks([9, 7, 8, 6], [0, 3]))
        assert first.params.values == (2,)
        assert second.params.values == (6, 9)
        assert second.info["method"] == "median_of_medians"
        assert second.info["cutoff"] == 50
        assert second.info["n"] == 4


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("a"):
            pass
        with timer.section("a"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "a"}
        assert result["a"] >= 0.0
        assert result["total_seconds"] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()
