"""
Core protocols for pylinalg.

These define structural interfaces that decomposition-specific
implementations must satisfy. We use Protocol (structural typing) rather
than ABC (nominal typing) to allow flexibility while maintaining type safety.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # MatrixSource type


@runtime_checkable
class MatrixSource(Protocol):
    """
    Minimal protocol for a validated matrix input to a decomposition.

    Decomposition-specific designs (SchurDesign) implement this protocol
    and add their own accessors for the arrays they carry.
    """

    @property
    def n(self) -> int:
        """Matrix dimension (the input is n x n)."""
        ...

    @property
    def metadata(self) -> dict[str, Any]:
        """
        Decomposition-specific metadata.

        Examples:
            Schur: {'n': 5, 'source': 'general', 'hessenberg_reduced': True}
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a MatrixSource and produce a
    decomposition payload. Backends are stateless apart from construction
    time configuration, which makes them easy to test and swap.

    Type Parameters:
        D: The MatrixSource type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_hqr', 'cpu_lapack'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the decomposition.

        Args:
            design: Validated input implementing MatrixSource

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            ConvergenceError: If the iteration bound is exceeded
        """
        ...
