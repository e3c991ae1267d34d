"""
Hessenberg reduction solution type.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.result import Result
from pylinalg.core.compute.linalg.hessenberg import HessenbergResult


@dataclass
class HessenbergSolution:
    """
    Hessenberg reduction A = P·H·Pᵀ.

    Wraps Result[HessenbergResult]. ``H``, ``P`` and ``PT`` are cached
    read-only views; pass ``H`` and ``P`` to ``schur_from_hessenberg`` to
    continue to the Schur form.
    """
    _result: Result[HessenbergResult]

    @cached_property
    def H(self) -> NDArray[np.floating[Any]]:
        """Upper Hessenberg matrix (n, n)."""
        view = self._result.params.H.view()
        view.flags.writeable = False
        return view

    @cached_property
    def P(self) -> NDArray[np.floating[Any]]:
        """Orthogonal transform (n, n)."""
        view = self._result.params.P.view()
        view.flags.writeable = False
        return view

    @cached_property
    def PT(self) -> NDArray[np.floating[Any]]:
        """Transpose of P."""
        return self.P.T

    @property
    def n_reflections(self) -> int:
        return self._result.params.n_reflections

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    def __repr__(self) -> str:
        n = self._result.params.H.shape[0]
        return f"HessenbergSolution(n={n}, reflections={self.n_reflections})"
