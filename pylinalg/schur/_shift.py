"""
Shift selection for the implicit double-shift QR sweep.

The regular shift is the trailing 2x2 block of the active window,
encoded as ``x = T[iu, iu]``, ``y = T[iu-1, iu-1]`` and
``w = T[iu, iu-1]·T[iu-1, iu]`` (the two shifts are the roots of
λ² - (x + y)λ + (xy - w)). Two exceptional shifts break cycles in which
the regular shift stagnates:

- Wilkinson's ad hoc shift (EISPACK ``hqr``), at window iteration 10.
- MATLAB's ad hoc shift, at window iteration 30.

Both subtract a value from the window diagonal and record it in
``ShiftInfo.ex_shift`` so that it is restored when eigenvalues deflate.
"""

from __future__ import annotations

import math

from numpy.typing import NDArray

from pylinalg.schur._common import (
    ShiftInfo,
    WILKINSON_SHIFT_ITERATION,
    WILKINSON_SHIFT_SCALE,
    WILKINSON_SHIFT_SQUARE,
    MATLAB_SHIFT_ITERATION,
    MATLAB_SHIFT_VALUE,
)


def compute_shift(
    T: NDArray,
    il: int,
    iu: int,
    iteration: int,
    shift: ShiftInfo,
) -> bool:
    """Form the shift for the next sweep over window ``[il, iu]``.

    Updates ``shift`` in place and, when an exceptional shift fires,
    subtracts it from ``T[i, i]`` for ``i <= iu``.

    Args:
        T: Working matrix, modified on exceptional shifts.
        il: First row of the active window.
        iu: Last row of the active window.
        iteration: Sweeps already spent on this window.
        shift: Scratch shift register.

    Returns:
        True if an exceptional shift was applied.
    """
    shift.x = T[iu, iu]
    shift.y = 0.0
    shift.w = 0.0
    if il < iu:
        shift.y = T[iu - 1, iu - 1]
        shift.w = T[iu, iu - 1] * T[iu - 1, iu]

    exceptional = False

    if iteration == WILKINSON_SHIFT_ITERATION:
        shift.ex_shift += shift.x
        for i in range(iu + 1):
            T[i, i] -= shift.x
        s = abs(T[iu, iu - 1]) + abs(T[iu - 1, iu - 2])
        shift.x = WILKINSON_SHIFT_SCALE * s
        shift.y = WILKINSON_SHIFT_SCALE * s
        shift.w = WILKINSON_SHIFT_SQUARE * s * s
        exceptional = True

    if iteration == MATLAB_SHIFT_ITERATION:
        s = (shift.y - shift.x) / 2.0
        s = s * s + shift.w
        if s > 0.0:
            s = math.sqrt(s)
            if shift.y < shift.x:
                s = -s
            s = shift.x - shift.w / ((shift.y - shift.x) / 2.0 + s)
            for i in range(iu + 1):
                T[i, i] -= s
            shift.ex_shift += s
            shift.x = shift.y = shift.w = MATLAB_SHIFT_VALUE
            exceptional = True

    return exceptional
