"""
collspins: Collective Spins Package

A Python package describing ensembles of dipole emitters (spins), optionally
coupled to a cavity mode, and computing the effective collective frequency
shift and decay rate of symmetric spin arrangements.

Main Components
---------------
core : System value objects (Spin, SpinCollection, CavityMode,
       CavitySpinCollection) and the dipole-dipole kernels
geometry : Position generators for finite shapes and truncated lattices
effective : Effective-interaction engine and per-shape shortcuts
config : Defaults and InteractionSettings
utils : Logging setup, vector validation

Quick Start
-----------
>>> from collspins import SpinCollection, effective_interactions
>>> from collspins.geometry import chain_positions
>>>
>>> # Chain of spins around a reference spin at the origin
>>> positions = chain_positions(a=0.3, N=50)
>>> collection = SpinCollection.from_positions(positions, polarization=[0, 0, 1])
>>>
>>> omega_eff, gamma_eff = effective_interactions(collection)

Units: positions in transition wavelengths, rates in units of the
single-spin decay rate.

Current Version: 0.1.0
"""

__version__ = "0.1.0"

# High-level API exports
from .core import (
    # Systems
    Spin,
    SpinCollection,
    CavityMode,
    CavitySpinCollection,

    # Kernels
    omega_kernel,
    gamma_kernel,
    omega_matrix,
    gamma_matrix,

    # Errors
    ConstructionError,
    DimensionMismatchError,
    InvalidGeometryError,
)

from .config import InteractionSettings, DEFAULT_SETTINGS

from .effective import (
    effective_interactions,
    effective_shape,
    triangle_orthogonal,
    square_orthogonal,
    rectangle_orthogonal,
    polygon_orthogonal,
    cube_orthogonal,
    box_orthogonal,
    chain,
    chain_orthogonal,
    squarelattice_orthogonal,
    hexagonallattice_orthogonal,
    cubiclattice_orthogonal,
    tetragonallattice_orthogonal,
    hexagonallattice3d_orthogonal,
)

from .utils import setup_logging

__all__ = [
    # Version info
    '__version__',

    # Systems
    'Spin',
    'SpinCollection',
    'CavityMode',
    'CavitySpinCollection',

    # Kernels
    'omega_kernel',
    'gamma_kernel',
    'omega_matrix',
    'gamma_matrix',

    # Errors
    'ConstructionError',
    'DimensionMismatchError',
    'InvalidGeometryError',

    # Configuration
    'InteractionSettings',
    'DEFAULT_SETTINGS',

    # Effective interactions
    'effective_interactions',
    'effective_shape',
    'triangle_orthogonal',
    'square_orthogonal',
    'rectangle_orthogonal',
    'polygon_orthogonal',
    'cube_orthogonal',
    'box_orthogonal',
    'chain',
    'chain_orthogonal',
    'squarelattice_orthogonal',
    'hexagonallattice_orthogonal',
    'cubiclattice_orthogonal',
    'tetragonallattice_orthogonal',
    'hexagonallattice3d_orthogonal',

    # Utilities
    'setup_logging',
]
