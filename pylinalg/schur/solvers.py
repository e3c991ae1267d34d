"""
Solver dispatch for the real Schur decomposition.

Public API:
    schur()                  decompose a general real square matrix
    schur_from_hessenberg()  decompose the output of a Hessenberg reduction
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pylinalg.core.exceptions import ValidationError
from pylinalg.schur._common import MAX_ITERATIONS
from pylinalg.schur.design import SchurDesign
from pylinalg.schur.solution import SchurSolution
from pylinalg.schur.backends.cpu import CPUSchurBackend
from pylinalg.schur.backends.lapack import LAPACKSchurBackend


BackendChoice = Literal['cpu', 'lapack']


def _get_backend(backend: BackendChoice, max_iterations: int):
    """Select backend based on preference."""
    if backend == 'cpu':
        return CPUSchurBackend(max_iterations=max_iterations)
    if backend == 'lapack':
        return LAPACKSchurBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def _check_max_iterations(max_iterations: int) -> None:
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, int):
        raise ValidationError(
            f"max_iterations: expected int, got {type(max_iterations).__name__}"
        )
    if max_iterations < 0:
        raise ValidationError(f"max_iterations: must be >= 0, got {max_iterations}")


def schur(
    A: ArrayLike | SchurDesign,
    *,
    backend: BackendChoice = 'cpu',
    max_iterations: int = MAX_ITERATIONS,
) -> SchurSolution:
    """
    Real Schur decomposition of a general square matrix.

    Computes A = P·T·Pᵀ with P orthogonal and T quasi-upper-triangular
    (1x1 blocks for real eigenvalues, 2x2 blocks for complex-conjugate
    pairs). The 'cpu' backend reduces A to Hessenberg form and then runs
    the implicit double-shift QR iteration.

    Parameters
    ----------
    A : array-like or SchurDesign
        Real square matrix (n x n).
    backend : str
        'cpu' (reference iteration) or 'lapack' (SciPy dgees).
    max_iterations : int
        Sweeps allowed per deflation window ('cpu' only).

    Returns
    -------
    SchurSolution

    Raises
    ------
    ValidationError
        If A is not a finite real matrix, or an option is invalid.
    DimensionError
        If A is not square.
    ConvergenceError
        If a deflation window exceeds ``max_iterations`` sweeps.
    """
    _check_max_iterations(max_iterations)
    design = A if isinstance(A, SchurDesign) else SchurDesign.from_array(A)
    be = _get_backend(backend, max_iterations)
    result = be.solve(design)
    return SchurSolution(_result=result, _design=design)


def schur_from_hessenberg(
    H: ArrayLike,
    P0: ArrayLike | None = None,
    *,
    backend: BackendChoice = 'cpu',
    max_iterations: int = MAX_ITERATIONS,
) -> SchurSolution:
    """
    Real Schur decomposition of an upper Hessenberg matrix.

    Consumes the two outputs of a Hessenberg reduction A = P0·H·P0ᵀ and
    returns T and the accumulated P with A = P·T·Pᵀ.

    Parameters
    ----------
    H : array-like
        Upper Hessenberg matrix (n x n).
    P0 : array-like, optional
        Orthogonal transform of the reduction. Identity if omitted.
    backend : str
        'cpu' or 'lapack'.
    max_iterations : int
        Sweeps allowed per deflation window ('cpu' only).

    Returns
    -------
    SchurSolution

    Raises
    ------
    ValidationError
        If H or P0 is not a finite real matrix.
    StructureError
        If H has a nonzero entry below the first subdiagonal.
    DimensionError
        If H or P0 is not square, or their shapes differ.
    ConvergenceError
        If a deflation window exceeds ``max_iterations`` sweeps.
    """
    _check_max_iterations(max_iterations)
    design = SchurDesign.from_hessenberg(H, P0)
    be = _get_backend(backend, max_iterations)
    result = be.solve(design)
    return SchurSolution(_result=result, _design=design)
