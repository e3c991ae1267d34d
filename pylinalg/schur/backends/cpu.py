"""
CPU reference backend for the real Schur decomposition.

Runs the Householder Hessenberg reduction (for general inputs) followed
by the implicit double-shift QR iteration, on float64 working copies.
Deterministic: identical inputs give bit-identical T and P.
"""

from __future__ import annotations

import numpy as np

from pylinalg.core.result import Result
from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.linalg.hessenberg import hessenberg_cpu
from pylinalg.schur._common import EPSILON, MAX_ITERATIONS, SchurParams
from pylinalg.schur._transform import schur_transform
from pylinalg.schur.design import SchurDesign


class CPUSchurBackend:
    """CPU reference backend: EISPACK-style ``hqr2`` iteration."""

    def __init__(self, max_iterations: int = MAX_ITERATIONS):
        self._max_iterations = max_iterations

    @property
    def name(self) -> str:
        return 'cpu_hqr'

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    def solve(self, design: SchurDesign) -> Result[SchurParams]:
        """
        Compute the real Schur form of the design's matrix.

        Parameters
        ----------
        design : SchurDesign

        Returns
        -------
        Result[SchurParams]

        Raises
        ------
        ConvergenceError
            If a deflation window exceeds ``max_iterations`` sweeps.
        """
        timer = Timer()
        timer.start()

        n_reflections = 0
        if design.is_hessenberg:
            T = np.array(design.matrix, dtype=np.float64, order='C', copy=True)
            P = np.array(design.transform, dtype=np.float64, order='C', copy=True)
        else:
            with timer.section('hessenberg'):
                reduced = hessenberg_cpu(design.matrix)
            T, P = reduced.H, reduced.P
            n_reflections = reduced.n_reflections

        with timer.section('schur'):
            stats = schur_transform(T, P, max_iterations=self._max_iterations,
                                    epsilon=EPSILON)

        timer.stop()

        params = SchurParams(
            T=T,
            P=P,
            blocks=tuple(sorted(stats.blocks)),
            n_real_blocks=stats.n_real_blocks,
            n_complex_blocks=stats.n_complex_blocks,
            n_iterations=stats.n_iterations,
            max_window_iterations=stats.max_window_iterations,
            n_exceptional_shifts=stats.n_exceptional_shifts,
        )

        return Result(
            params=params,
            info={
                'method': 'francis_double_shift',
                'n': design.n,
                'source': design.source,
                'hessenberg_reflections': n_reflections,
                'n_iterations': stats.n_iterations,
                'max_window_iterations': stats.max_window_iterations,
                'max_iterations': self._max_iterations,
                'n_real_pairs_split': stats.n_real_pairs,
                'n_exceptional_shifts': stats.n_exceptional_shifts,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=design.warnings,
        )
