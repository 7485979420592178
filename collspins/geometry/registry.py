"""
Name-based access to position generators.

Mirrors the shape names listed in ``collspins.config.defaults``.
"""

import numpy as np

from .finite import (
    triangle_positions,
    square_positions,
    rectangle_positions,
    polygon_positions,
    cube_positions,
    box_positions,
)
from .lattices import (
    chain_positions,
    square_lattice_positions,
    hexagonal_lattice_positions,
    cubic_lattice_positions,
    tetragonal_lattice_positions,
    hexagonal_lattice3d_positions,
)

# Shape registry for name-based construction
SHAPE_REGISTRY = {
    'triangle': triangle_positions,
    'square': square_positions,
    'rectangle': rectangle_positions,
    'polygon': polygon_positions,
    'cube': cube_positions,
    'box': box_positions,
    'chain': chain_positions,
    'square_lattice': square_lattice_positions,
    'hexagonal_lattice': hexagonal_lattice_positions,
    'cubic_lattice': cubic_lattice_positions,
    'tetragonal_lattice': tetragonal_lattice_positions,
    'hexagonal_lattice3d': hexagonal_lattice3d_positions,
}


def create_positions(shape: str, **kwargs) -> np.ndarray:
    """
    Factory function to generate positions from a shape name.

    Parameters
    ----------
    shape : str
        Name of the shape ('triangle', 'chain', 'hexagonal_lattice', ...)
    **kwargs
        Geometric parameters passed to the generator
        (e.g., a=0.3, N=10)

    Returns
    -------
    positions : np.ndarray, shape (n, 3)

    Examples
    --------
    >>> positions = create_positions('cube', a=0.5)
    >>> positions.shape
    (7, 3)

    Raises
    ------
    ValueError
        If shape is not recognized
    """
    if shape not in SHAPE_REGISTRY:
        available = ', '.join(SHAPE_REGISTRY.keys())
        raise ValueError(f"Unknown shape '{shape}'. "
                         f"Available shapes: {available}")

    generator = SHAPE_REGISTRY[shape]
    return generator(**kwargs)
