"""
Real Schur form by implicit double-shift QR iteration.

Transforms an upper Hessenberg matrix H = T₀ (with accumulated transform
P₀) in place into the quasi-upper-triangular Schur form T, keeping
A = P·T·Pᵀ. The active window ``[il, iu]`` shrinks from the bottom, and
the negligible subdiagonal entry that ends each converged block is
written as an exact zero:

- ``il == iu``: a real eigenvalue has converged (1x1 block).
- ``il == iu - 1``: the trailing 2x2 block has converged. Real
  eigenvalues are split by one explicit rotation; a complex-conjugate
  pair is left as a 2x2 block.
- otherwise: one shifted QR sweep over the window.

Adapted from the EISPACK ``hqr2`` routine as restated in JAMA.

References:
    Wilkinson, J. H., & Reinsch, C. (1971). Handbook for Automatic
        Computation, Vol. II: Linear Algebra. Contribution II/15.
    Golub, G. H., & Van Loan, C. F. (2013). Matrix Computations (4th ed.),
        section 7.5.
"""

from __future__ import annotations

import math

from numpy.typing import NDArray

from pylinalg.core.exceptions import ConvergenceError
from pylinalg.schur._common import (
    EPSILON,
    MAX_ITERATIONS,
    IterationStats,
    ShiftInfo,
)
from pylinalg.schur._scan import matrix_norm, find_small_subdiagonal
from pylinalg.schur._shift import compute_shift
from pylinalg.schur._qr_step import init_qr_step, perform_double_qr_step


def schur_transform(
    T: NDArray,
    P: NDArray,
    max_iterations: int = MAX_ITERATIONS,
    epsilon: float = EPSILON,
) -> IterationStats:
    """Reduce upper Hessenberg T to real Schur form, in place.

    Parameters
    ----------
    T : NDArray
        (n, n) float64 upper Hessenberg matrix. Overwritten with the Schur
        form.
    P : NDArray
        (n, n) float64 orthogonal matrix from the Hessenberg reduction.
        Overwritten with the accumulated Schur transform.
    max_iterations : int
        Sweeps allowed per deflation window.
    epsilon : float
        Relative threshold for negligible subdiagonal entries.

    Returns
    -------
    IterationStats

    Raises
    ------
    ConvergenceError
        If a window needs more than ``max_iterations`` sweeps. T and P are
        left partially transformed.
    """
    n = T.shape[0]
    norm = matrix_norm(T)
    shift = ShiftInfo()
    stats = IterationStats()

    iteration = 0
    iu = n - 1
    while iu >= 0:
        il = find_small_subdiagonal(T, iu, norm, epsilon)

        if il == iu:
            # One root found
            if iu > 0:
                T[iu, iu - 1] = 0.0
            T[iu, iu] += shift.ex_shift
            stats.n_real_blocks += 1
            stats.blocks.append((iu, 1))
            iu -= 1
            iteration = 0

        elif il == iu - 1:
            # Two roots found
            if iu > 1:
                T[iu - 1, iu - 2] = 0.0
            if _deflate_pair(T, P, iu, shift):
                stats.n_real_blocks += 2
                stats.n_real_pairs += 1
                stats.blocks.extend([(iu, 1), (iu - 1, 1)])
            else:
                stats.n_complex_blocks += 1
                stats.blocks.append((iu - 1, 2))
            iu -= 2
            iteration = 0

        else:
            if compute_shift(T, il, iu, iteration, shift):
                stats.n_exceptional_shifts += 1
            iteration += 1
            if iteration > max_iterations:
                raise ConvergenceError(
                    f"Schur decomposition did not converge: window "
                    f"[{il}, {iu}] exceeded {max_iterations} iterations",
                    iterations=iteration,
                    max_iterations=max_iterations,
                    reason='max_iterations',
                    window=(il, iu),
                )
            stats.n_iterations += 1
            stats.max_window_iterations = max(stats.max_window_iterations, iteration)

            im, hvec = init_qr_step(T, il, iu, shift, epsilon)
            perform_double_qr_step(T, P, il, im, iu, shift, hvec, epsilon)

    return stats


def _deflate_pair(T: NDArray, P: NDArray, iu: int, shift: ShiftInfo) -> bool:
    """Finish the converged 2x2 block in rows/columns ``iu-1, iu``.

    Restores the exceptional shift on both diagonal entries. When the
    block has real eigenvalues, rotates it to upper triangular form and
    mirrors the rotation into P.

    Returns:
        True if the block had real eigenvalues and was split.
    """
    p = (T[iu - 1, iu - 1] - T[iu, iu]) / 2.0
    q = p * p + T[iu, iu - 1] * T[iu - 1, iu]
    T[iu, iu] += shift.ex_shift
    T[iu - 1, iu - 1] += shift.ex_shift

    if q < 0.0:
        # Complex-conjugate pair, the 2x2 block stays
        return False

    z = math.sqrt(abs(q))
    if p >= 0:
        z = p + z
    else:
        z = p - z
    x = T[iu, iu - 1]
    s = abs(x) + abs(z)
    p = x / s
    q = z / s
    r = math.sqrt(p * p + q * q)
    p /= r
    q /= r

    # Row modification
    upper = T[iu - 1, iu - 1:].copy()
    T[iu - 1, iu - 1:] = q * upper + p * T[iu, iu - 1:]
    T[iu, iu - 1:] = q * T[iu, iu - 1:] - p * upper

    # Column modification
    left = T[:iu + 1, iu - 1].copy()
    T[:iu + 1, iu - 1] = q * left + p * T[:iu + 1, iu]
    T[:iu + 1, iu] = q * T[:iu + 1, iu] - p * left

    # Accumulate transformations
    left = P[:, iu - 1].copy()
    P[:, iu - 1] = q * left + p * P[:, iu]
    P[:, iu] = q * P[:, iu] - p * left

    # The rotation annihilates T[iu, iu-1] up to round-off
    T[iu, iu - 1] = 0.0
    return True
