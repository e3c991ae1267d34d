"""
Shared constants, scratch state and payloads for the Schur decomposition.

The numeric constants below are the empirically tuned values of the
EISPACK/JAMA ``hqr2`` iteration. They are reproduced exactly.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from numpy.typing import NDArray

from pylinalg.core.compute.precision import UNIT_ROUNDOFF_64


# Sweeps allowed for one deflation window before the iteration is abandoned
MAX_ITERATIONS = 100

# Wilkinson's ad hoc shift: fired once, at this window iteration count
WILKINSON_SHIFT_ITERATION = 10
WILKINSON_SHIFT_SCALE = 0.75
WILKINSON_SHIFT_SQUARE = -0.4375

# MATLAB's ad hoc shift: fired once, at this window iteration count
MATLAB_SHIFT_ITERATION = 30
MATLAB_SHIFT_VALUE = 0.964

# Relative threshold for negligible subdiagonal entries (2**-53)
EPSILON = UNIT_ROUNDOFF_64


@dataclass
class ShiftInfo:
    """
    Scratch register for the current shift.

    Created once per decomposition and mutated every outer iteration.
    ``x``, ``y`` and ``w`` describe the trailing 2x2 eigenproblem (and are
    reused as reflector coefficients inside a sweep); ``ex_shift`` is the
    total exceptional shift subtracted from the diagonal so far, added back
    to each eigenvalue as it deflates.
    """
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    ex_shift: float = 0.0


@dataclass
class IterationStats:
    """Counters and block structure collected by the outer loop."""
    n_iterations: int = 0            # QR sweeps over the whole run
    max_window_iterations: int = 0   # most sweeps spent on one window
    n_real_blocks: int = 0           # 1x1 diagonal blocks
    n_complex_blocks: int = 0        # 2x2 blocks kept (complex pair)
    n_real_pairs: int = 0            # 2x2 windows split by an explicit rotation
    n_exceptional_shifts: int = 0    # ad hoc shifts that fired
    blocks: list[tuple[int, int]] = field(default_factory=list)  # (start, size), bottom up


@dataclass(frozen=True)
class SchurParams:
    """Real Schur decomposition payload, A = P·T·Pᵀ.

    Iteration counters are None for backends that do not expose them
    (LAPACK).
    """

    T: NDArray                          # (n, n) quasi-upper-triangular Schur form
    P: NDArray                          # (n, n) orthogonal transform
    blocks: tuple[tuple[int, int], ...]  # diagonal blocks (start, size), top down
    n_real_blocks: int                  # 1x1 blocks
    n_complex_blocks: int               # 2x2 blocks (complex-conjugate pairs)
    n_iterations: int | None            # total QR sweeps
    max_window_iterations: int | None   # most sweeps spent on a single window
    n_exceptional_shifts: int | None    # ad hoc shifts applied
