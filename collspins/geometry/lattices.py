"""
Truncated infinite lattices around a reference spin at the origin.

Each lattice is approximated by a symmetric window of lattice indices
-N..N per axis, skipping the all-zero index. Larger N approaches the
infinite lattice.

Available lattices:
- chain (1D)
- square and hexagonal (2D, in the xy-plane)
- cubic, tetragonal and stacked hexagonal (3D)
"""

from typing import List

import numpy as np

from .base import check_count, check_length, to_array


def chain_positions(a: float, N: int) -> np.ndarray:
    """
    Linear chain along x with spacing ``a``.

    Returns
    -------
    positions : np.ndarray, shape (2N, 3)
    """
    a = check_length(a, "a")
    N = check_count(N, "N", minimum=0)

    positions = []
    for ix in range(-N, N + 1):
        if ix == 0:
            continue
        positions.append([ix * a, 0., 0.])
    return to_array(positions)


def square_lattice_positions(a: float, N: int) -> np.ndarray:
    """
    Square lattice in the xy-plane with lattice constant ``a``.

    Returns
    -------
    positions : np.ndarray, shape ((2N+1)² - 1, 3)
    """
    a = check_length(a, "a")
    N = check_count(N, "N", minimum=0)

    positions = []
    for ix in range(-N, N + 1):
        for iy in range(-N, N + 1):
            if ix == 0 and iy == 0:
                continue
            positions.append([ix * a, iy * a, 0.])
    return to_array(positions)


def _hexagonal_layer(a: float, N: int, z: float) -> List[List[float]]:
    """
    One hexagonal layer at height ``z``, built column by column.

    Columns are spaced by √3/2 a along x. Odd columns are shifted by a/2
    along y relative to even ones. The point [0, 0, z] is never included.
    """
    ax = np.sqrt(3.0 / 4) * a
    positions = []

    # Central column
    for iy in range(1, N + 1):
        positions.append([0., iy * a, z])
        positions.append([0., -iy * a, z])

    # Odd columns, half-offset rows
    odd_columns = list(range(-1, -N - 1, -2)) + list(range(1, N + 1, 2))
    for ix in odd_columns:
        Ny = (2 * N + 1 - abs(ix)) // 2
        for iy in range(Ny):
            positions.append([ax * ix, (0.5 + iy) * a, z])
            positions.append([ax * ix, -(0.5 + iy) * a, z])

    # Even columns, including their on-axis site
    even_columns = list(range(-2, -N - 1, -2)) + list(range(2, N + 1, 2))
    for ix in even_columns:
        Ny = (2 * N - abs(ix)) // 2
        positions.append([ax * ix, 0., z])
        for iy in range(1, Ny + 1):
            positions.append([ax * ix, iy * a, z])
            positions.append([ax * ix, -iy * a, z])

    return positions


def hexagonal_lattice_positions(a: float, N: int) -> np.ndarray:
    """
    Hexagonal (triangular Bravais) lattice in the xy-plane.

    Parameters
    ----------
    a : float
        Nearest-neighbor distance
    N : int
        Truncation: number of columns on each side of the origin

    Notes
    -----
    The window is a hexagon-like patch of columns, not a parallelogram of
    primitive-vector indices. For N=1 this gives the 6 nearest neighbors.
    """
    a = check_length(a, "a")
    N = check_count(N, "N", minimum=0)
    return to_array(_hexagonal_layer(a, N, 0.))


def cubic_lattice_positions(a: float, N: int) -> np.ndarray:
    """Simple cubic lattice with lattice constant ``a``: (2N+1)³ - 1 positions."""
    a = check_length(a, "a")
    return tetragonal_lattice_positions(a, a, N)


def tetragonal_lattice_positions(a: float, b: float, N: int) -> np.ndarray:
    """
    Tetragonal lattice: spacing ``a`` in the xy-plane and ``b`` along z.

    Returns
    -------
    positions : np.ndarray, shape ((2N+1)³ - 1, 3)
    """
    a = check_length(a, "a")
    b = check_length(b, "b")
    N = check_count(N, "N", minimum=0)

    positions = []
    for ix in range(-N, N + 1):
        for iy in range(-N, N + 1):
            for iz in range(-N, N + 1):
                if ix == 0 and iy == 0 and iz == 0:
                    continue
                positions.append([ix * a, iy * a, iz * b])
    return to_array(positions)


def hexagonal_lattice3d_positions(a: float, b: float, N: int) -> np.ndarray:
    """
    Hexagonal layers with in-plane spacing ``a`` stacked along z by ``b``.

    Notes
    -----
    Every layer iz = -N..N uses the same column pattern as
    :func:`hexagonal_lattice_positions`, so the on-axis points [0, 0, iz b]
    are absent from every layer, not only from iz = 0.
    """
    a = check_length(a, "a")
    b = check_length(b, "b")
    N = check_count(N, "N", minimum=0)

    positions = []
    for iz in range(-N, N + 1):
        positions.extend(_hexagonal_layer(a, N, iz * b))
    return to_array(positions)
