"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def general_matrix(rng):
    """Dense nonsymmetric 6x6 matrix (has complex eigenvalues)."""
    return rng.standard_normal((6, 6))


@pytest.fixture
def symmetric_matrix(rng):
    """Symmetric 5x5 matrix (real spectrum)."""
    B = rng.standard_normal((5, 5))
    return B + B.T


@pytest.fixture
def scenario_hessenberg():
    """3x3 upper Hessenberg matrix used as a worked example."""
    return np.array([
        [4.0, 1.0, 0.0],
        [3.0, 4.0, 1.0],
        [0.0, 2.0, 3.0],
    ])


@pytest.fixture
def rotation_hessenberg():
    """Quarter-turn block (eigenvalues ±i) above a real eigenvalue 2."""
    return np.array([
        [0.0, -1.0, 0.0],
        [1.0, 0.0, 0.0],
        [0.0, 0.0, 2.0],
    ])
