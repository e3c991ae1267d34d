"""
LAPACK backend for the real Schur decomposition (via SciPy).

Wraps ``scipy.linalg.schur(output='real')`` (LAPACK ``dgees``). Used as an
independent reference for the CPU iteration; it does not report iteration
counters. Block structure is read from the standardized LAPACK output,
whose subdiagonal is exactly zero outside 2x2 blocks.
"""

from __future__ import annotations

import numpy as np
import scipy.linalg as sla
from numpy.typing import NDArray

from pylinalg.core.exceptions import NumericalError
from pylinalg.core.result import Result
from pylinalg.core.compute.timing import Timer
from pylinalg.schur._common import SchurParams
from pylinalg.schur.design import SchurDesign


class LAPACKSchurBackend:
    """SciPy/LAPACK ``dgees`` backend."""

    @property
    def name(self) -> str:
        return 'cpu_lapack'

    def solve(self, design: SchurDesign) -> Result[SchurParams]:
        """
        Compute the real Schur form with LAPACK.

        For Hessenberg designs the Schur vectors of H are composed with P0,
        so that A = P·T·Pᵀ holds for the original matrix as well.

        Raises
        ------
        NumericalError
            If LAPACK reports that the QR iteration failed.
        """
        timer = Timer()
        timer.start()

        with timer.section('schur'):
            try:
                T, Z = sla.schur(design.matrix, output='real')
            except sla.LinAlgError as e:
                raise NumericalError(f"LAPACK Schur decomposition failed: {e}") from e

        if design.is_hessenberg:
            P = design.transform @ Z
        else:
            P = Z

        timer.stop()

        blocks = _blocks_from_subdiagonal(T)
        n_complex = sum(1 for _, size in blocks if size == 2)

        params = SchurParams(
            T=np.ascontiguousarray(T, dtype=np.float64),
            P=np.ascontiguousarray(P, dtype=np.float64),
            blocks=blocks,
            n_real_blocks=len(blocks) - n_complex,
            n_complex_blocks=n_complex,
            n_iterations=None,
            max_window_iterations=None,
            n_exceptional_shifts=None,
        )

        return Result(
            params=params,
            info={
                'method': 'lapack_dgees',
                'n': design.n,
                'source': design.source,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=design.warnings,
        )


def _blocks_from_subdiagonal(T: NDArray) -> tuple[tuple[int, int], ...]:
    """Diagonal block layout (start, size) of a standardized real Schur form."""
    n = T.shape[0]
    blocks = []
    i = 0
    while i < n:
        if i + 1 < n and T[i + 1, i] != 0.0:
            blocks.append((i, 2))
            i += 2
        else:
            blocks.append((i, 1))
            i += 1
    return tuple(blocks)
