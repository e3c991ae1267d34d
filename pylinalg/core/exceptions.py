"""
Exception hierarchy for pylinalg.

Everything raised on purpose by the library derives from PyLinalgError.
Input problems are ValidationError (with DimensionError and StructureError
for shape and sparsity-pattern problems); failures during a computation
are NumericalError or ConvergenceError.

Exceptions carry their diagnostics as attributes so callers can react
without parsing messages.
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """An input was rejected before any computation started."""
    pass


class DimensionError(ValidationError):
    """
    Array shape is wrong.

    Not 2-D, not square, empty, or inconsistent with a companion array
    (such as a Hessenberg matrix and its transform).
    """
    pass


class StructureError(ValidationError):
    """
    A matrix lacks a required zero pattern.

    Raised when an input declared as upper Hessenberg has a nonzero entry
    below the first subdiagonal.

    Attributes:
        position: (row, col) of the first offending entry
        n_violations: Number of offending entries
    """

    def __init__(
        self,
        message: str,
        position: tuple[int, int],
        n_violations: int = 1,
    ):
        super().__init__(message)
        self.position = position
        self.n_violations = n_violations


class NumericalError(PyLinalgError):
    """A computation failed for numerical reasons (e.g. a LAPACK error code)."""
    pass


class ConvergenceError(PyLinalgError):
    """
    The Schur QR iteration exceeded its iteration bound.

    The bound applies per deflation window: the counter restarts whenever
    an eigenvalue or a 2x2 block splits off. The working arrays of the
    failed run are only partially transformed and are discarded.

    Attributes:
        iterations: Window iteration count at which the failure was detected
            (one more than the bound)
        max_iterations: The bound that was exceeded
        reason: Short machine-readable cause, e.g. 'max_iterations'
        window: Active (il, iu) rows that failed to deflate, if known
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        max_iterations: int | None = None,
        reason: str | None = None,
        window: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.max_iterations = max_iterations
        self.reason = reason
        self.window = window
