"""
Generic result container for all pylinalg computations.

The Result class provides a standardized envelope that all decomposition
results use. This enables shared tooling for timing, diagnostics and
reproducibility while allowing each decomposition to define its own
payload structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (iterations, block counts, method)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix decompositions.

    Type Parameters:
        P: The decomposition-specific payload type

    Attributes:
        params: Decomposition payload (factor matrices, counters)
        info: Structured metadata (method, iterations, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Iterative method
        >>> Result(
        ...     params=SchurParams(T=T, P=P, n_iterations=12, ...),
        ...     info={'method': 'francis_double_shift', 'n_iterations': 12},
        ...     timing={'total_seconds': 0.01, 'schur': 0.009},
        ...     backend_name='cpu_hqr'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
