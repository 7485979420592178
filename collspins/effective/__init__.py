"""
Effective collective interactions.

- engine: summation of kernels around a reference emitter
- shapes: ready-made finite shapes and truncated lattices
"""

from .engine import effective_interactions
from .shapes import (
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
    effective_shape,
)

__all__ = [
    'effective_interactions',
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
    'effective_shape',
]
