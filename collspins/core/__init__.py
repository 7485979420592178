"""
Core domain models for collspins.

This module contains the fundamental building blocks:
- System: Spin, SpinCollection, CavityMode, CavitySpinCollection
- Interaction: dipole-dipole Omega/Gamma kernels
- Errors: validation failures raised at construction
"""

from .errors import (
    ConstructionError,
    DimensionMismatchError,
    InvalidGeometryError,
)

from .system import (
    Spin,
    SpinCollection,
    CavityMode,
    CavitySpinCollection,
)

from .interaction import (
    omega_kernel,
    gamma_kernel,
    omega_matrix,
    gamma_matrix,
)

__all__ = [
    # Errors
    'ConstructionError',
    'DimensionMismatchError',
    'InvalidGeometryError',

    # Systems
    'Spin',
    'SpinCollection',
    'CavityMode',
    'CavitySpinCollection',

    # Interaction
    'omega_kernel',
    'gamma_kernel',
    'omega_matrix',
    'gamma_matrix',
]
