"""
Norm and deflation-boundary scans over the working Schur matrix.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def matrix_norm(T: NDArray) -> float:
    """L1 sum of the Hessenberg part of T.

    Entries below the first subdiagonal are structurally zero and are not
    read. The value is only used as the fallback scale when both diagonal
    neighbours of a subdiagonal entry vanish.
    """
    n = T.shape[0]
    norm = 0.0
    for i in range(n):
        norm += float(np.sum(np.abs(T[i, max(i - 1, 0):])))
    return norm


def find_small_subdiagonal(
    T: NDArray,
    iu: int,
    norm: float,
    epsilon: float,
) -> int:
    """Locate the top of the unconverged window ending at row ``iu``.

    Scans ``l`` from ``iu`` down to 1 and returns the first ``l`` whose
    subdiagonal entry ``T[l, l-1]`` is negligible against the local scale
    ``|T[l-1, l-1]| + |T[l, l]|`` (or ``norm`` when that scale is zero).
    An exactly zero entry always qualifies. Returns 0 if no such entry
    exists.

    Parameters
    ----------
    T : NDArray
        Working matrix, read only.
    iu : int
        Bottom row of the active window.
    norm : float
        Fallback scale from :func:`matrix_norm`.
    epsilon : float
        Relative threshold (unit roundoff).

    Returns
    -------
    int
        ``il``, the first row of the active window.
    """
    l = iu
    while l > 0:
        s = abs(T[l - 1, l - 1]) + abs(T[l, l])
        if s == 0.0:
            s = norm
        # exact zeros split even when norm == 0
        if abs(T[l, l - 1]) < epsilon * s or T[l, l - 1] == 0.0:
            break
        l -= 1
    return l
