"""
SchurDesign: validated input for the real Schur decomposition.

Two construction paths:
    SchurDesign.from_array(A)             general square matrix, reduced to
                                          Hessenberg form by the backend
    SchurDesign.from_hessenberg(H, P0)    output of an external Hessenberg
                                          reduction, consumed directly

All validation happens here. The decomposition kernels assume a finite,
square, float64 input.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.compute.precision import orthogonality_error
from pylinalg.core.compute.tolerances import ORTHOGONALITY_WARNING_THRESHOLD
from pylinalg.core.validation import (
    check_square_matrix,
    check_same_shape,
    check_upper_hessenberg,
)


@dataclass(frozen=True)
class SchurDesign:
    """
    Design for the real Schur decomposition.

    Immutable after construction; the arrays it holds are private copies
    and are never modified by a backend.
    """
    _matrix: NDArray[np.floating[Any]]
    _transform: NDArray[np.floating[Any]] | None
    _n: int
    _source: str
    _warnings: tuple[str, ...] = ()

    @classmethod
    def from_array(cls, A: ArrayLike) -> SchurDesign:
        """
        Build SchurDesign from a general square matrix.

        Parameters
        ----------
        A : array-like
            Real square matrix (n x n), n >= 1.
        """
        matrix = check_square_matrix(A, 'A')
        return cls(
            _matrix=matrix,
            _transform=None,
            _n=matrix.shape[0],
            _source='general',
        )

    @classmethod
    def from_hessenberg(
        cls,
        H: ArrayLike,
        P0: ArrayLike | None = None,
    ) -> SchurDesign:
        """
        Build SchurDesign from an upper Hessenberg matrix and its transform.

        Parameters
        ----------
        H : array-like
            Upper Hessenberg matrix (n x n); entries below the first
            subdiagonal must be exactly zero.
        P0 : array-like, optional
            Orthogonal matrix of the Hessenberg reduction, A = P0·H·P0ᵀ.
            Defaults to the identity (H itself is the matrix to decompose).
            A P0 that is not orthogonal to within 1e-8 is accepted with a
            UserWarning.
        """
        hess = check_square_matrix(H, 'H')
        check_upper_hessenberg(hess, 'H')
        n = hess.shape[0]

        warnings_list: list[str] = []
        if P0 is None:
            transform = np.eye(n, dtype=np.float64)
        else:
            transform = check_square_matrix(P0, 'P0')
            check_same_shape(hess, transform, ('H', 'P0'))
            error = orthogonality_error(transform)
            if error > ORTHOGONALITY_WARNING_THRESHOLD:
                msg = (
                    f"P0 is not orthogonal (max |P0ᵀP0 - I| = {error:.3e}); "
                    f"the returned P will not be orthogonal either"
                )
                warnings.warn(msg, UserWarning, stacklevel=2)
                warnings_list.append(msg)

        return cls(
            _matrix=hess,
            _transform=transform,
            _n=n,
            _source='hessenberg',
            _warnings=tuple(warnings_list),
        )

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """Input matrix: general A, or H for Hessenberg designs."""
        return self._matrix

    @property
    def transform(self) -> NDArray[np.floating[Any]] | None:
        """P0 for Hessenberg designs, None for general designs."""
        return self._transform

    @property
    def n(self) -> int:
        """Matrix dimension."""
        return self._n

    @property
    def source(self) -> str:
        """'general' or 'hessenberg'."""
        return self._source

    @property
    def is_hessenberg(self) -> bool:
        """Whether the input is already in upper Hessenberg form."""
        return self._source == 'hessenberg'

    @property
    def warnings(self) -> tuple[str, ...]:
        """Non-fatal issues found while validating the input."""
        return self._warnings

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'n': self._n,
            'source': self._source,
            'hessenberg_reduced': self.is_hessenberg,
        }

    def __repr__(self) -> str:
        return f"SchurDesign(n={self._n}, source={self._source!r})"

