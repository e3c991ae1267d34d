"""
Linear algebra kernels for pylinalg.

This module provides the shared dense kernels that decompositions build on.

All functions follow these conventions:
    - CPU functions use NumPy (float64, C-contiguous working copies)
    - Each operation returns a structured result dataclass
    - Inputs are never modified in place

Submodules:
    hessenberg: Householder reduction to upper Hessenberg form
"""

from pylinalg.core.compute.linalg.hessenberg import (
    HessenbergResult,
    hessenberg_cpu,
)

__all__ = [
    # Hessenberg reduction
    "HessenbergResult",
    "hessenberg_cpu",
]
