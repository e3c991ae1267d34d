"""
Schur decomposition solution type.

User-facing wrapper around Result[SchurParams].
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.result import Result
from pylinalg.schur._common import SchurParams

if TYPE_CHECKING:
    from pylinalg.schur.design import SchurDesign


def _read_only(array: NDArray) -> NDArray:
    view = array.view()
    view.flags.writeable = False
    return view


@dataclass
class SchurSolution:
    """
    Real Schur decomposition A = P·T·Pᵀ.

    ``T`` is quasi-upper-triangular: real eigenvalues sit on the diagonal
    and complex-conjugate pairs occupy 2x2 diagonal blocks. ``P`` is
    orthogonal. The matrix accessors are built on first access and cached;
    they are read-only views of the decomposition.
    """
    _result: Result[SchurParams]
    _design: 'SchurDesign'

    # --- Factors ---

    @cached_property
    def T(self) -> NDArray[np.floating[Any]]:
        """Quasi-upper-triangular Schur matrix (n, n)."""
        return _read_only(self._result.params.T)

    @cached_property
    def P(self) -> NDArray[np.floating[Any]]:
        """Orthogonal transform (n, n); its inverse is its transpose."""
        return _read_only(self._result.params.P)

    @cached_property
    def PT(self) -> NDArray[np.floating[Any]]:
        """Transpose of P (n, n)."""
        return _read_only(self.P.T)

    # --- Block structure ---

    @property
    def blocks(self) -> tuple[tuple[int, int], ...]:
        """Diagonal blocks of T as (start index, size), top down."""
        return self._result.params.blocks

    @property
    def n_real_blocks(self) -> int:
        return self._result.params.n_real_blocks

    @property
    def n_complex_blocks(self) -> int:
        return self._result.params.n_complex_blocks

    # --- Iteration diagnostics ---

    @property
    def n_iterations(self) -> int | None:
        """Total QR sweeps (None for the LAPACK backend)."""
        return self._result.params.n_iterations

    @property
    def max_window_iterations(self) -> int | None:
        """Most sweeps spent on a single deflation window."""
        return self._result.params.max_window_iterations

    @property
    def n_exceptional_shifts(self) -> int | None:
        return self._result.params.n_exceptional_shifts

    # --- Metadata ---

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def reconstruct(self) -> NDArray[np.floating[Any]]:
        """P·T·Pᵀ, the matrix the decomposition represents."""
        return self.P @ self.T @ self.PT

    def summary(self) -> str:
        """Plain-text summary of the decomposition."""
        lines = [
            "Real Schur decomposition",
            f"  n:              {self.n}",
            f"  backend:        {self.backend_name}",
            f"  real blocks:    {self.n_real_blocks}",
            f"  complex blocks: {self.n_complex_blocks}",
        ]
        if self.n_iterations is not None:
            lines.append(f"  QR sweeps:      {self.n_iterations}")
            lines.append(f"  max per window: {self.max_window_iterations}")
            lines.append(f"  ad hoc shifts:  {self.n_exceptional_shifts}")
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SchurSolution(n={self.n}, real_blocks={self.n_real_blocks}, "
            f"complex_blocks={self.n_complex_blocks}, backend={self.backend_name!r})"
        )
