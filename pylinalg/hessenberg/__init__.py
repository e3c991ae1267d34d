"""
Hessenberg reduction.

Public API:
    hessenberg(A)  - orthogonal reduction A = P·H·Pᵀ to upper Hessenberg form
"""

from pylinalg.hessenberg.solution import HessenbergSolution
from pylinalg.hessenberg.solvers import hessenberg

__all__ = [
    "hessenberg",
    "HessenbergSolution",
]
