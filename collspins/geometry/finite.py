"""
Finite symmetric arrangements of spins.

Each function returns the positions of all spins except the one at the
origin, which plays the role of the reference emitter. All shapes lie in
the xy-plane except cube and box.
"""

import numpy as np

from .base import check_count, check_length, to_array


def triangle_positions(a: float) -> np.ndarray:
    """
    Equilateral triangle with side length ``a``.

    Returns
    -------
    positions : np.ndarray, shape (2, 3)
        [a, 0, 0] and [a/2, √3/2 a, 0]
    """
    a = check_length(a, "a")
    return to_array([[a, 0., 0.], [a / 2, np.sqrt(3. / 4) * a, 0.]])


def square_positions(a: float) -> np.ndarray:
    """Square with side length ``a``: 3 positions."""
    a = check_length(a, "a")
    return to_array([[a, 0., 0.], [0., a, 0.], [a, a, 0.]])


def rectangle_positions(a: float, b: float) -> np.ndarray:
    """Rectangle with side lengths ``a`` (along x) and ``b`` (along y)."""
    a = check_length(a, "a")
    b = check_length(b, "b")
    return to_array([[a, 0., 0.], [0., b, 0.], [a, b, 0.]])


def polygon_positions(N: int, a: float) -> np.ndarray:
    """
    Regular polygon with ``N`` vertices and side length ``a``.

    The polygon is placed so that the origin is one of its vertices; the
    remaining N-1 vertices are returned.

    Parameters
    ----------
    N : int
        Number of vertices, must be larger than 2
    a : float
        Side length

    Returns
    -------
    positions : np.ndarray, shape (N-1, 3)

    Raises
    ------
    InvalidGeometryError
        If N <= 2
    """
    N = check_count(N, "N", minimum=3)
    a = check_length(a, "a")

    dalpha = 2 * np.pi / N
    R = a / (2 * np.sin(dalpha / 2))
    positions = []
    for i in range(1, N):
        x = R * np.cos(i * dalpha)
        y = R * np.sin(i * dalpha)
        # Shift the circle so that vertex 0 sits at the origin
        positions.append([x - R, y, 0.])
    return to_array(positions)


def box_positions(a: float, b: float, c: float) -> np.ndarray:
    """Rectangular box with edges ``a``, ``b``, ``c``: the 7 non-origin corners."""
    a = check_length(a, "a")
    b = check_length(b, "b")
    c = check_length(c, "c")

    positions = []
    for ix in (0, 1):
        for iy in (0, 1):
            for iz in (0, 1):
                if ix == 0 and iy == 0 and iz == 0:
                    continue
                positions.append([ix * a, iy * b, iz * c])
    return to_array(positions)


def cube_positions(a: float) -> np.ndarray:
    """Cube with edge length ``a``: the 7 non-origin corners."""
    a = check_length(a, "a")
    return box_positions(a, a, a)
