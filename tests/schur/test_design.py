"""
Tests for SchurDesign construction and validation.
"""

import warnings

import numpy as np
import pytest

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.protocols import MatrixSource
from pylinalg.schur import SchurDesign, schur_from_hessenberg


# ═══════════════════════════════════════════════════════════════════════
# from_array
# ═══════════════════════════════════════════════════════════════════════


class TestFromArray:

    def test_basic(self, general_matrix):
        design = SchurDesign.from_array(general_matrix)
        assert design.n == 6
        assert design.source == 'general'
        assert design.is_hessenberg is False
        assert design.transform is None
        assert design.warnings == ()
        np.testing.assert_array_equal(design.matrix, general_matrix)

    def test_copies_input(self, general_matrix):
        design = SchurDesign.from_array(general_matrix)
        general_matrix[0, 0] = 1e6
        assert design.matrix[0, 0] != 1e6

    def test_integer_input_promoted(self):
        design = SchurDesign.from_array([[1, 2], [3, 4]])
        assert design.matrix.dtype == np.float64

    def test_rejects_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            SchurDesign.from_array(np.ones((3, 2)))

    def test_rejects_empty(self):
        with pytest.raises(DimensionError):
            SchurDesign.from_array(np.ones((0, 0)))

    def test_rejects_1d(self):
        with pytest.raises(DimensionError):
            SchurDesign.from_array(np.ones(4))

    def test_rejects_nan(self):
        A = np.eye(3)
        A[2, 1] = np.nan
        with pytest.raises(ValidationError, match="non-finite"):
            SchurDesign.from_array(A)

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            SchurDesign.from_array(np.eye(2) + 1j)

    def test_metadata(self, general_matrix):
        design = SchurDesign.from_array(general_matrix)
        assert design.metadata == {
            'n': 6,
            'source': 'general',
            'hessenberg_reduced': False,
        }

    def test_satisfies_matrix_source(self, general_matrix):
        assert isinstance(SchurDesign.from_array(general_matrix), MatrixSource)

    def test_repr(self, general_matrix):
        assert repr(SchurDesign.from_array(general_matrix)) == (
            "SchurDesign(n=6, source='general')"
        )


# ═══════════════════════════════════════════════════════════════════════
# from_hessenberg
# ═══════════════════════════════════════════════════════════════════════


class TestFromHessenberg:

    def test_default_transform_is_identity(self, scenario_hessenberg):
        design = SchurDesign.from_hessenberg(scenario_hessenberg)
        assert design.is_hessenberg is True
        assert design.source == 'hessenberg'
        np.testing.assert_array_equal(design.transform, np.eye(3))

    def test_explicit_transform_kept(self, scenario_hessenberg):
        c, s = np.cos(0.4), np.sin(0.4)
        P0 = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
        design = SchurDesign.from_hessenberg(scenario_hessenberg, P0)
        np.testing.assert_array_equal(design.transform, P0)
        assert design.warnings == ()

    def test_rejects_non_hessenberg(self):
        with pytest.raises(ValidationError, match="not upper Hessenberg"):
            SchurDesign.from_hessenberg(np.ones((3, 3)))

    def test_rejects_shape_mismatch(self, scenario_hessenberg):
        with pytest.raises(DimensionError, match="Inconsistent"):
            SchurDesign.from_hessenberg(scenario_hessenberg, np.eye(4))

    def test_rejects_non_square_transform(self, scenario_hessenberg):
        with pytest.raises(DimensionError):
            SchurDesign.from_hessenberg(scenario_hessenberg, np.ones((3, 2)))

    def test_rejects_non_finite_transform(self, scenario_hessenberg):
        P0 = np.eye(3)
        P0[0, 1] = np.inf
        with pytest.raises(ValidationError):
            SchurDesign.from_hessenberg(scenario_hessenberg, P0)

    def test_orthogonal_transform_does_not_warn(self, scenario_hessenberg):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            SchurDesign.from_hessenberg(scenario_hessenberg, np.eye(3)[::-1])

    def test_non_orthogonal_transform_warns(self, scenario_hessenberg):
        with pytest.warns(UserWarning, match="not orthogonal"):
            design = SchurDesign.from_hessenberg(scenario_hessenberg, 2.0 * np.eye(3))
        assert len(design.warnings) == 1

    def test_warning_reaches_solution(self, scenario_hessenberg):
        with pytest.warns(UserWarning):
            sol = schur_from_hessenberg(scenario_hessenberg, 2.0 * np.eye(3))
        assert len(sol.warnings) == 1
        assert "not orthogonal" in sol.warnings[0]
        assert "warning:" in sol.summary()
