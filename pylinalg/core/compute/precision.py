"""
Numerical precision constants and utilities.

Provides machine epsilon, unit roundoff, the near-zero comparison used by
the iterative kernels and the orthogonality measure for transforms.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64 (spacing of 1.0 and the next double)
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Unit roundoff for float64: half of machine epsilon, 2**-53
UNIT_ROUNDOFF_64: float = EPSILON_64 / 2.0  # ~1.11e-16


def is_negligible(value: float, epsilon: float) -> bool:
    """
    Check whether a scalar is zero to within an absolute epsilon.

    Matches the behaviour of ``|value - 0| <= epsilon``; exact zero always
    qualifies.
    """
    return value == 0.0 or abs(value) <= epsilon


def orthogonality_error(Q: NDArray[np.floating[Any]]) -> float:
    """
    Departure of Q from orthogonality, ``max |QᵀQ - I|``.

    Args:
        Q: Square matrix

    Returns:
        Largest absolute entry of QᵀQ - I
    """
    n = Q.shape[0]
    return float(np.max(np.abs(Q.T @ Q - np.eye(n))))
