"""
Input validation for matrix decompositions.

Validators raise immediately with the parameter name and the offending
value in the message; nothing is silently repaired. They run at the public
API boundary (designs and solvers) only. The numerical kernels trust their
inputs.

Every decomposition in pylinalg works on real float64 square matrices, so
the usual entry point is ``check_square_matrix``, which chains the
individual checks and hands back a private working copy.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import ValidationError, DimensionError, StructureError


def check_array(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert an array-like to a real floating-point ndarray.

    Integer input is promoted to float64. Object, string, boolean and
    complex input is refused: the decompositions here are real-valued and
    there is no safe implicit conversion.

    Args:
        array: Input to convert
        name: Parameter name for error messages

    Returns:
        Real floating ndarray (not necessarily a copy)

    Raises:
        ValidationError: If the input is not real numeric data
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )
    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)
    return result


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Require a matrix (2-D array).

    Raises:
        DimensionError: If ``array.ndim != 2``
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Require a non-empty square matrix.

    Args:
        array: 2-D array
        name: Parameter name for error messages

    Raises:
        DimensionError: If the matrix is rectangular or has no rows
    """
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape {array.shape}"
        )
    if rows == 0:
        raise DimensionError(f"{name}: matrix is empty, got shape {array.shape}")


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Require every entry to be finite.

    The message counts NaN and Inf entries separately and names the first
    offending position, since a single bad entry is the common case.

    Raises:
        ValidationError: If any entry is NaN or ±Inf
    """
    bad = ~np.isfinite(array)
    if bad.any():
        n_nan = int(np.isnan(array).sum())
        n_inf = int(np.isinf(array).sum())
        first = tuple(int(i) for i in np.argwhere(bad)[0])
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf), "
            f"first at index {first}"
        )


def check_same_shape(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    names: tuple[str, str],
) -> None:
    """
    Require two matrices of identical shape (e.g. H and its transform P0).

    Raises:
        DimensionError: If the shapes differ
    """
    if a.shape != b.shape:
        raise DimensionError(
            f"Inconsistent shapes: {names[0]}={a.shape}, {names[1]}={b.shape}"
        )


def check_upper_hessenberg(H: NDArray[np.floating[Any]], name: str) -> None:
    """
    Require exact zeros below the first subdiagonal.

    No tolerance is applied: a Hessenberg reduction writes these entries
    as exact zeros, and the Schur iteration never reads them.

    Raises:
        StructureError: If a nonzero entry lies below the first subdiagonal
    """
    below = np.tril(H, k=-2)
    if np.any(below != 0.0):
        rows, cols = np.nonzero(below)
        raise StructureError(
            f"{name}: not upper Hessenberg, {len(rows)} nonzero entries below the "
            f"first subdiagonal (first at row {rows[0]}, col {cols[0]})",
            position=(int(rows[0]), int(cols[0])),
            n_violations=len(rows),
        )


def check_square_matrix(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate a decomposition input and return a float64 working copy.

    Runs check_array, check_2d, check_square and check_finite in that
    order. The returned array is C-contiguous and owned by the caller, so
    kernels may overwrite it in place.

    Args:
        array: Candidate square matrix
        name: Parameter name for error messages

    Returns:
        (n, n) float64 C-contiguous copy

    Raises:
        ValidationError: Non-real or non-finite data
        DimensionError: Not a non-empty square matrix
    """
    result = check_array(array, name)
    check_2d(result, name)
    check_square(result, name)
    check_finite(result, name)
    return np.array(result, dtype=np.float64, order='C', copy=True)
