"""
Implicit double-shift QR sweep (Francis step) on an upper Hessenberg window.

One sweep over the active window ``[il, iu]`` is performed in two stages:

1. :func:`init_qr_step` forms the first column of (H - σ₁I)(H - σ₂I),
   which has only three nonzeros, and looks upward from ``iu - 2`` for the
   lowest row ``im`` where two consecutive subdiagonal entries are small
   enough that the sweep can start there instead of at ``il``.

2. :func:`perform_double_qr_step` introduces the bulge with a 3x3
   Householder reflector at row ``im`` and chases it down to ``iu`` with
   one reflector per row. Every reflector is applied to the rows of T,
   the columns of T and the columns of P, so A = P·T·Pᵀ holds after each
   step.

Each reflector touches at most three rows/columns; row and column updates
are applied as NumPy slice expressions whose element-wise arithmetic is
the same as the scalar ``hqr2`` loops.

References:
    Francis, J. G. F. (1961). The QR transformation, parts I and II.
        The Computer Journal, 4(3), 265-271 and 4(4), 332-345.
    Golub, G. H., & Van Loan, C. F. (2013). Matrix Computations (4th ed.),
        algorithm 7.5.1.
"""

from __future__ import annotations

import math

from numpy.typing import NDArray

from pylinalg.core.compute.precision import is_negligible
from pylinalg.schur._common import ShiftInfo


def init_qr_step(
    T: NDArray,
    il: int,
    iu: int,
    shift: ShiftInfo,
    epsilon: float,
) -> tuple[int, tuple[float, float, float]]:
    """Find the bulge start row and the initial reflector vector.

    Requires ``il <= iu - 2``.

    Args:
        T: Working matrix, read only.
        il: First row of the active window.
        iu: Last row of the active window.
        shift: Current shift (x, y, w).
        epsilon: Relative threshold (unit roundoff).

    Returns:
        ``(im, (p, q, r))``: the row where the sweep starts and the
        leading three entries of the shifted double-product column.
    """
    im = iu - 2
    while im >= il:
        z = T[im, im]
        r = shift.x - z
        s = shift.y - z
        h0 = (r * s - shift.w) / T[im + 1, im] + T[im, im + 1]
        h1 = T[im + 1, im + 1] - z - r - s
        h2 = T[im + 2, im + 1]

        if im == il:
            break

        # Starting at im is equivalent when T[im, im-1] couples negligibly
        lhs = abs(T[im, im - 1]) * (abs(h1) + abs(h2))
        rhs = abs(h0) * (abs(T[im - 1, im - 1]) + abs(z) + abs(T[im + 1, im + 1]))
        if lhs < epsilon * rhs:
            break
        im -= 1

    return im, (h0, h1, h2)


def perform_double_qr_step(
    T: NDArray,
    P: NDArray,
    il: int,
    im: int,
    iu: int,
    shift: ShiftInfo,
    hvec: tuple[float, float, float],
    epsilon: float,
) -> None:
    """Chase the double-shift bulge from row ``im`` down to row ``iu``.

    Args:
        T: Working matrix, modified in place.
        P: Accumulated orthogonal transform, modified in place.
        il: First row of the active window.
        im: Row where the bulge is introduced (from :func:`init_qr_step`).
        iu: Last row of the active window.
        shift: Scratch register; ``x`` and ``y`` are overwritten with
            reflector coefficients.
        hvec: Initial reflector vector for row ``im``.
        epsilon: Absolute threshold below which a column scale is treated
            as zero.
    """
    for k in range(im, iu):
        _chase_step(T, P, il, im, iu, k, shift, hvec, epsilon)

    # Clear round-off left in the bulge positions below the subdiagonal
    for i in range(im + 2, iu + 1):
        T[i, i - 2] = 0.0
        if i > im + 2:
            T[i, i - 3] = 0.0


def _chase_step(
    T: NDArray,
    P: NDArray,
    il: int,
    im: int,
    iu: int,
    k: int,
    shift: ShiftInfo,
    hvec: tuple[float, float, float],
    epsilon: float,
) -> None:
    """Apply the reflector for row ``k`` of the sweep."""
    notlast = k != iu - 1

    if k == im:
        p, q, r = hvec
    else:
        p = T[k, k - 1]
        q = T[k + 1, k - 1]
        r = T[k + 2, k - 1] if notlast else 0.0
        shift.x = abs(p) + abs(q) + abs(r)
        if is_negligible(shift.x, epsilon):
            return
        p /= shift.x
        q /= shift.x
        r /= shift.x

    s = math.sqrt(p * p + q * q + r * r)
    if p < 0.0:
        s = -s
    if s == 0.0:
        return

    if k != im:
        T[k, k - 1] = -s * shift.x
    elif il != im:
        T[k, k - 1] = -T[k, k - 1]

    p += s
    shift.x = p / s
    shift.y = q / s
    z = r / s
    q /= p
    r /= p
    x = shift.x
    y = shift.y

    # Row modification
    if notlast:
        v = T[k, k:] + q * T[k + 1, k:] + r * T[k + 2, k:]
        T[k + 2, k:] -= v * z
    else:
        v = T[k, k:] + q * T[k + 1, k:]
    T[k, k:] -= v * x
    T[k + 1, k:] -= v * y

    # Column modification
    high = min(iu, k + 3) + 1
    _apply_columns(T, k, high, x, y, z, q, r, notlast)

    # Accumulate transformations
    _apply_columns(P, k, P.shape[0], x, y, z, q, r, notlast)


def _apply_columns(
    M: NDArray,
    k: int,
    high: int,
    x: float,
    y: float,
    z: float,
    q: float,
    r: float,
    notlast: bool,
) -> None:
    """Apply the reflector to columns k..k+2 of M over rows [0, high)."""
    if notlast:
        v = x * M[:high, k] + y * M[:high, k + 1] + z * M[:high, k + 2]
        M[:high, k + 2] -= v * r
    else:
        v = x * M[:high, k] + y * M[:high, k + 1]
    M[:high, k] -= v
    M[:high, k + 1] -= v * q
