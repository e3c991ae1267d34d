"""
Tolerance tiers for numerical validation.

Defines precision expectations for the decomposition checks:
- Orthogonality of accumulated transforms (PᵀP ≈ I)
- Similarity reconstruction (P·T·Pᵀ ≈ A), scaled by the matrix norm
- Agreement with the LAPACK reference on spectra

Used by the test suite and by the design layer's transform sanity check.
"""

from dataclasses import dataclass

from pylinalg.core.compute.precision import EPSILON_64


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str

    def scaled(self, n: int, scale: float = 1.0) -> float:
        """Absolute bound ``atol * n * scale``, the form used for n-dependent checks."""
        return self.atol * max(n, 1) * max(scale, 1.0)


# Orthogonality of P: error grows like n·eps per accumulated reflection sweep
ORTHOGONALITY = ToleranceTier(
    rtol=0.0,
    atol=100 * EPSILON_64,
    name='orthogonality',
    description='Accumulated orthogonal transform, scaled by n',
)

# Reconstruction P·T·Pᵀ against the input, scaled by n and the matrix norm
SIMILARITY = ToleranceTier(
    rtol=0.0,
    atol=100 * EPSILON_64,
    name='similarity',
    description='Backward error of the similarity transform, scaled by n·‖A‖',
)

# Eigenvalues recovered from the Schur blocks against LAPACK
SPECTRUM = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='spectrum',
    description='Eigenvalues from Schur blocks vs LAPACK reference',
)

# Threshold above which a user-supplied transform is not treated as orthogonal
ORTHOGONALITY_WARNING_THRESHOLD = 1e-8
