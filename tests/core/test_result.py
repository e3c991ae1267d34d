"""
Tests for the Result[P] envelope.

Validates:
    - Generic payload works with decomposition parameter types
    - Frozen immutability
    - Default warnings tuple
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest

from pylinalg.core.result import Result


@dataclass(frozen=True)
class FactorPair:
    """Minimal two-factor payload for testing."""
    left: np.ndarray
    right: np.ndarray


def _make(**overrides):
    fields = dict(
        params=FactorPair(left=np.eye(2), right=np.eye(2)),
        info={"method": "test"},
        timing=None,
        backend_name="cpu_hqr",
    )
    fields.update(overrides)
    return Result(**fields)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_payload_access(self):
        result = _make()
        np.testing.assert_array_equal(result.params.left, np.eye(2))
        assert result.info["method"] == "test"
        assert result.backend_name == "cpu_hqr"

    def test_timing_breakdown(self):
        result = _make(timing={"total_seconds": 0.3, "hessenberg": 0.1, "schur": 0.2})
        assert result.timing["hessenberg"] == 0.1
        assert result.timing["schur"] == 0.2

    def test_info_arbitrary_keys(self):
        result = _make(info={"n_iterations": 12, "max_window_iterations": 4})
        assert result.info["n_iterations"] == 12


# ═══════════════════════════════════════════════════════════════════════
# Defaults and immutability
# ═══════════════════════════════════════════════════════════════════════


class TestDefaults:

    def test_warnings_default_empty(self):
        result = _make()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_warnings_explicit(self):
        result = _make(warnings=("P0 is not orthogonal",))
        assert result.warnings == ("P0 is not orthogonal",)


class TestImmutability:
    """Result is frozen."""

    def test_cannot_set_params(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.params = None

    def test_cannot_set_backend_name(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "cpu_lapack"

    def test_cannot_set_warnings(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new",)


# ═══════════════════════════════════════════════════════════════════════
# has_warning()
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:

    def test_no_warnings_returns_false(self):
        assert _make().has_warning("anything") is False

    def test_substring_match(self):
        result = _make(warnings=("P0: orthogonality error 1.0e-03 exceeds 1.0e-08",))
        assert result.has_warning("orthogonality") is True
        assert result.has_warning("exceeds") is True

    def test_no_match(self):
        result = _make(warnings=("P0: orthogonality error",))
        assert result.has_warning("singular") is False
