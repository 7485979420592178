"""
Effective interactions of common symmetric arrangements.

Every function builds the positions with :mod:`collspins.geometry`, puts
them into a SpinCollection and delegates to
:func:`~collspins.effective.engine.effective_interactions`.

"Orthogonal" means the polarization is ``settings.polarization``, by
default e_z, i.e. perpendicular to planar shapes.
"""

from typing import Optional, Tuple

import numpy as np

from ..config.settings import InteractionSettings, resolve_settings
from ..core.system import SpinCollection
from ..geometry import (
    triangle_positions,
    square_positions,
    rectangle_positions,
    polygon_positions,
    cube_positions,
    box_positions,
    chain_positions,
    square_lattice_positions,
    hexagonal_lattice_positions,
    cubic_lattice_positions,
    tetragonal_lattice_positions,
    hexagonal_lattice3d_positions,
    create_positions,
)
from .engine import effective_interactions


def _evaluate(positions: np.ndarray,
              settings: Optional[InteractionSettings],
              polarization=None) -> Tuple[float, float]:
    settings = resolve_settings(settings)
    if polarization is None:
        polarization = settings.polarization
    collection = SpinCollection.from_positions(positions, polarization,
                                               gamma=settings.gamma)
    return effective_interactions(collection, settings)


# Finite symmetric systems

def triangle_orthogonal(a: float, settings: Optional[InteractionSettings] = None):
    """Equilateral triangle with side length ``a``."""
    return _evaluate(triangle_positions(a), settings)


def square_orthogonal(a: float, settings: Optional[InteractionSettings] = None):
    """Square with side length ``a``."""
    return _evaluate(square_positions(a), settings)


def rectangle_orthogonal(a: float, b: float,
                         settings: Optional[InteractionSettings] = None):
    """Rectangle with side lengths ``a`` and ``b``."""
    return _evaluate(rectangle_positions(a, b), settings)


def polygon_orthogonal(N: int, a: float,
                       settings: Optional[InteractionSettings] = None):
    """
    Regular polygon with ``N`` vertices and side length ``a``.

    Raises
    ------
    InvalidGeometryError
        If N <= 2
    """
    return _evaluate(polygon_positions(N, a), settings)


def cube_orthogonal(a: float, settings: Optional[InteractionSettings] = None):
    """Cube with edge length ``a``."""
    return _evaluate(cube_positions(a), settings)


def box_orthogonal(a: float, b: float, c: float,
                   settings: Optional[InteractionSettings] = None):
    """Box with edge lengths ``a``, ``b`` and ``c``."""
    return _evaluate(box_positions(a, b, c), settings)


# Infinite 1D symmetric systems

def chain(a: float, theta: float, N: int,
          settings: Optional[InteractionSettings] = None):
    """
    Chain along x with polarization at angle ``theta`` in the xz-plane.

    The polarization is [cos(theta), 0, sin(theta)], so theta=0 points
    along the chain and theta=π/2 is orthogonal to it.
    ``settings.polarization`` is ignored.
    """
    polarization = [np.cos(theta), 0., np.sin(theta)]
    return _evaluate(chain_positions(a, N), settings, polarization)


def chain_orthogonal(a: float, N: int,
                     settings: Optional[InteractionSettings] = None):
    """Chain along x with spacing ``a``, truncated at ``N`` spins per side."""
    return _evaluate(chain_positions(a, N), settings)


# Infinite 2D symmetric systems

def squarelattice_orthogonal(a: float, N: int,
                             settings: Optional[InteractionSettings] = None):
    """Square lattice with lattice constant ``a``."""
    return _evaluate(square_lattice_positions(a, N), settings)


def hexagonallattice_orthogonal(a: float, N: int,
                                settings: Optional[InteractionSettings] = None):
    """Hexagonal lattice with nearest-neighbor distance ``a``."""
    return _evaluate(hexagonal_lattice_positions(a, N), settings)


# Infinite 3D symmetric systems

def cubiclattice_orthogonal(a: float, N: int,
                            settings: Optional[InteractionSettings] = None):
    """Simple cubic lattice with lattice constant ``a``."""
    return _evaluate(cubic_lattice_positions(a, N), settings)


def tetragonallattice_orthogonal(a: float, b: float, N: int,
                                 settings: Optional[InteractionSettings] = None):
    """Tetragonal lattice, spacing ``a`` in-plane and ``b`` along z."""
    return _evaluate(tetragonal_lattice_positions(a, b, N), settings)


def hexagonallattice3d_orthogonal(a: float, b: float, N: int,
                                  settings: Optional[InteractionSettings] = None):
    """Hexagonal layers with spacing ``a`` stacked along z with spacing ``b``."""
    return _evaluate(hexagonal_lattice3d_positions(a, b, N), settings)


def effective_shape(shape: str,
                    settings: Optional[InteractionSettings] = None,
                    **kwargs) -> Tuple[float, float]:
    """
    Effective interactions of a shape selected by name.

    Parameters
    ----------
    shape : str
        A key of :data:`collspins.geometry.SHAPE_REGISTRY`
    settings : InteractionSettings, optional
        Polarization, reference origin and kernel rate
    **kwargs
        Geometric parameters of the shape

    Examples
    --------
    >>> effective_shape('square_lattice', a=0.2, N=20)  # doctest: +SKIP
    """
    return _evaluate(create_positions(shape, **kwargs), settings)
