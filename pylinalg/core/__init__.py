"""
Core infrastructure for pylinalg.

This module provides shared abstractions, utilities, and compute
infrastructure used by all decomposition subpackages (schur, ...).

Key components:
    protocols: MatrixSource, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, precision, tolerances, linear algebra kernels
"""

from pylinalg.core.protocols import MatrixSource, Backend
from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    StructureError,
    NumericalError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "MatrixSource",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "StructureError",
    "NumericalError",
    "ConvergenceError",
]
