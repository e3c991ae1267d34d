"""
Real Schur decomposition.

Transforms a real square matrix into A = P·T·Pᵀ with P orthogonal and T
quasi-upper-triangular, by Householder reduction to Hessenberg form
followed by the implicit double-shift (Francis) QR iteration.

Public API:
    schur(A)                     general square matrix
    schur_from_hessenberg(H, P0) output of a Hessenberg reduction
"""

from pylinalg.schur._common import MAX_ITERATIONS
from pylinalg.schur.design import SchurDesign
from pylinalg.schur.solution import SchurSolution
from pylinalg.schur.solvers import schur, schur_from_hessenberg

__all__ = [
    "schur",
    "schur_from_hessenberg",
    "SchurDesign",
    "SchurSolution",
    "MAX_ITERATIONS",
]
