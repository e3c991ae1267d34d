"""
Schur decomposition backends.

Available backends:
    CPUSchurBackend: CPU reference implementation (implicit double-shift QR)
    LAPACKSchurBackend: SciPy/LAPACK dgees, used as an independent reference
"""

from pylinalg.schur.backends.cpu import CPUSchurBackend
from pylinalg.schur.backends.lapack import LAPACKSchurBackend

__all__ = [
    "CPUSchurBackend",
    "LAPACKSchurBackend",
]
