"""
Shared compute infrastructure for pylinalg.

This module provides timing utilities, precision constants, tolerance
tiers and dense linear algebra kernels shared across decompositions.

IMPORTANT: This is NOT where decomposition backends live. Those go in
{decomposition}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    precision: Numerical precision constants and utilities
    tolerances: Tolerance tiers for validation
    linalg: Linear algebra kernels (Hessenberg reduction)
"""

from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.precision import EPSILON_64, UNIT_ROUNDOFF_64

__all__ = [
    # Timing
    "Timer",
    # Precision
    "EPSILON_64",
    "UNIT_ROUNDOFF_64",
]
