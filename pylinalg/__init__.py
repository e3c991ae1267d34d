"""
pylinalg: dense real linear algebra built around the Schur decomposition.

Submodules:
    schur: Real Schur decomposition (implicit double-shift QR iteration)
    hessenberg: Orthogonal reduction to upper Hessenberg form
    core: Exceptions, result envelope, validation, numeric infrastructure

Usage:
    from pylinalg.schur import schur
    solution = schur(A)
    solution.T, solution.P
"""

__version__ = "0.1.0"

# Submodule imports
from pylinalg import schur
from pylinalg import hessenberg

__all__ = [
    "__version__",
    "schur",
    "hessenberg",
]
