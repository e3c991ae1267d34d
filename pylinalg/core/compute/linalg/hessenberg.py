"""
Hessenberg reduction.

Reduces a general real square matrix to upper Hessenberg form by an
orthogonal similarity transformation, A = P·H·Pᵀ. This is the
preprocessing step for the Schur QR iteration, which consumes both H
and the accumulated P.

Uses Householder reflections with column scaling (the EISPACK ``orthes``
scheme as used by JAMA), applied with NumPy slice operations.

References:
    Golub, G. H., & Van Loan, C. F. (2013). Matrix Computations (4th ed.),
        section 7.4.
    Smith, B. T. et al. (1976). Matrix Eigensystem Routines - EISPACK Guide.
"""

from dataclasses import dataclass
from typing import Any
import math
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class HessenbergResult:
    """
    Result of Hessenberg reduction.

    Attributes:
        H: Upper Hessenberg matrix (n x n), exact zeros below the first
           subdiagonal
        P: Orthogonal transform (n x n) with A = P @ H @ P.T
        n_reflections: Number of Householder reflections applied
    """
    H: NDArray[np.floating[Any]]
    P: NDArray[np.floating[Any]]
    n_reflections: int


def hessenberg_cpu(A: NDArray[np.floating[Any]]) -> HessenbergResult:
    """
    Householder reduction to upper Hessenberg form.

    For each column m-1 (m = 1 .. n-2) the part below the diagonal is
    scaled by its L1 norm and annihilated with one reflector
    G = I - u·uᵀ/h, applied from both sides to H and accumulated into P.
    Columns that are entirely zero from the subdiagonal down are skipped.
    A column holding only its subdiagonal entry still gets a reflection,
    which flips signs, so Hessenberg input comes back as D·A·D with P = D
    for some diagonal D of ±1.

    Args:
        A: Square matrix (n x n). Not modified.

    Returns:
        HessenbergResult with H, P and the number of reflections applied
    """
    H = np.array(A, dtype=np.float64, order='C', copy=True)
    n = H.shape[0]
    P = np.eye(n, dtype=np.float64)
    n_reflections = 0

    for m in range(1, n - 1):
        column = H[m:, m - 1]
        scale = float(np.sum(np.abs(column)))
        if scale == 0.0:
            continue

        u = column / scale
        h = float(u @ u)
        g = -math.sqrt(h) if u[0] > 0 else math.sqrt(h)
        h -= u[0] * g
        u[0] -= g

        # H = (I - u·uᵀ/h) · H · (I - u·uᵀ/h)
        f = (u @ H[m:, m:]) / h
        H[m:, m:] -= np.outer(u, f)
        f = (H[:, m:] @ u) / h
        H[:, m:] -= np.outer(f, u)

        # P = P · (I - u·uᵀ/h)
        f = (P[:, m:] @ u) / h
        P[:, m:] -= np.outer(f, u)

        H[m, m - 1] = scale * g
        H[m + 1:, m - 1] = 0.0
        n_reflections += 1

    return HessenbergResult(H=H, P=P, n_reflections=n_reflections)
