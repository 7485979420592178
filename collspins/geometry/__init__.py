"""
Position generators for symmetric spin arrangements.

This module only produces coordinates; it knows nothing about
polarizations or interactions. The origin is reserved for the reference
spin and is never returned.

Available shapes:
- finite: triangle, square, rectangle, polygon, cube, box
- lattices: chain, square, hexagonal, cubic, tetragonal, hexagonal 3D
"""

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
from .registry import SHAPE_REGISTRY, create_positions

__all__ = [
    'triangle_positions',
    'square_positions',
    'rectangle_positions',
    'polygon_positions',
    'cube_positions',
    'box_positions',
    'chain_positions',
    'square_lattice_positions',
    'hexagonal_lattice_positions',
    'cubic_lattice_positions',
    'tetragonal_lattice_positions',
    'hexagonal_lattice3d_positions',
    'SHAPE_REGISTRY',
    'create_positions',
]
