"""
Solver dispatch for Hessenberg reduction.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pylinalg.core.result import Result
from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.linalg.hessenberg import hessenberg_cpu, HessenbergResult
from pylinalg.core.validation import check_square_matrix
from pylinalg.hessenberg.solution import HessenbergSolution


def hessenberg(A: ArrayLike) -> HessenbergSolution:
    """
    Reduce a real square matrix to upper Hessenberg form.

    Computes A = P·H·Pᵀ with P orthogonal and H zero below the first
    subdiagonal, using Householder reflections.

    Parameters
    ----------
    A : array-like
        Real square matrix (n x n).

    Returns
    -------
    HessenbergSolution

    Raises
    ------
    ValidationError
        If A is not a finite real matrix.
    DimensionError
        If A is not square.
    """
    matrix = check_square_matrix(A, 'A')

    timer = Timer()
    timer.start()
    with timer.section('hessenberg'):
        reduced = hessenberg_cpu(matrix)
    timer.stop()

    result: Result[HessenbergResult] = Result(
        params=reduced,
        info={
            'method': 'householder',
            'n': matrix.shape[0],
            'n_reflections': reduced.n_reflections,
        },
        timing=timer.result(),
        backend_name='cpu_householder',
    )
    return HessenbergSolution(_result=result)
