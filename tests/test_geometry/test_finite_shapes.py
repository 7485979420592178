"""
Unit tests for finite shape position generators.

Tests:
- Number of generated positions
- Distances between vertices
- Origin exclusion
- Parameter validation
"""

import numpy as np
import pytest
from collspins.core import InvalidGeometryError
from collspins.geometry import (
    triangle_positions,
    square_positions,
    rectangle_positions,
    polygon_positions,
    cube_positions,
    box_positions,
)


class TestTriangle:
    """Test equilateral triangle."""

    def test_two_positions(self):
        assert triangle_positions(1.0).shape == (2, 3)

    def test_equilateral(self):
        """Test that all three sides (including the origin vertex) equal a."""
        p1, p2 = triangle_positions(0.7)

        assert np.isclose(np.linalg.norm(p1), 0.7)
        assert np.isclose(np.linalg.norm(p2), 0.7)
        assert np.isclose(np.linalg.norm(p1 - p2), 0.7)


class TestSquareAndRectangle:
    """Test planar quadrilaterals."""

    def test_square_positions(self):
        positions = square_positions(2.0)

        assert np.allclose(positions, [[2, 0, 0], [0, 2, 0], [2, 2, 0]])

    def test_rectangle_positions(self):
        positions = rectangle_positions(1.0, 3.0)

        assert np.allclose(positions, [[1, 0, 0], [0, 3, 0], [1, 3, 0]])

    def test_rectangle_with_equal_sides_is_square(self):
        assert np.array_equal(rectangle_positions(0.4, 0.4), square_positions(0.4))


class TestPolygon:
    """Test regular polygons with a vertex at the origin."""

    @pytest.mark.parametrize("N", [3, 4, 5, 8, 17])
    def test_vertex_count(self, N):
        """Test that N-1 vertices are generated."""
        assert polygon_positions(N, 1.0).shape == (N - 1, 3)

    @pytest.mark.parametrize("N", [3, 6, 11])
    def test_regular(self, N):
        """Test all sides equal a and all vertices lie on one circle."""
        a = 0.5
        vertices = np.vstack([np.zeros(3), polygon_positions(N, a)])

        sides = np.linalg.norm(np.roll(vertices, -1, axis=0) - vertices, axis=1)
        assert np.allclose(sides, a)

        R = a / (2 * np.sin(np.pi / N))
        center = np.array([-R, 0.0, 0.0])
        assert np.allclose(np.linalg.norm(vertices - center, axis=1), R)

    def test_triangle_matches_polygon(self):
        """Test that a 3-gon has the same vertex distances as the triangle."""
        polygon = np.linalg.norm(polygon_positions(3, 1.0), axis=1)
        triangle = np.linalg.norm(triangle_positions(1.0), axis=1)

        assert np.allclose(sorted(polygon), sorted(triangle))

    @pytest.mark.parametrize("N", [2, 1, 0, -4])
    def test_degenerate_polygon_raises(self, N):
        """Test that polygons need more than 2 vertices."""
        with pytest.raises(InvalidGeometryError, match="at least 3"):
            polygon_positions(N, 1.0)


class TestCubeAndBox:
    """Test polyhedra."""

    def test_cube_has_seven_positions(self):
        assert cube_positions(1.0).shape == (7, 3)

    def test_box_has_seven_positions(self):
        assert box_positions(1.0, 2.0, 3.0).shape == (7, 3)

    def test_box_corners(self):
        """Test every non-origin corner appears exactly once."""
        positions = box_positions(1.0, 2.0, 3.0)
        expected = {
            (ix * 1.0, iy * 2.0, iz * 3.0)
            for ix in (0, 1) for iy in (0, 1) for iz in (0, 1)
        } - {(0.0, 0.0, 0.0)}

        assert {tuple(p) for p in positions} == expected

    def test_cube_is_equal_sided_box(self):
        assert np.array_equal(cube_positions(0.3), box_positions(0.3, 0.3, 0.3))


class TestFiniteShapeValidation:
    """Test parameter validation shared by all shapes."""

    @pytest.mark.parametrize("generator, args", [
        (triangle_positions, (0.0,)),
        (square_positions, (0,)),
        (rectangle_positions, (1.0, 0.0)),
        (polygon_positions, (4, 0.0)),
        (cube_positions, (0.0,)),
        (box_positions, (1.0, 1.0, 0.0)),
    ])
    def test_zero_length_raises(self, generator, args):
        with pytest.raises(InvalidGeometryError, match="must be non-zero"):
            generator(*args)

    @pytest.mark.parametrize("generator, args", [
        (triangle_positions, (1.0,)),
        (rectangle_positions, (1.0, 2.0)),
        (polygon_positions, (5, 1.0)),
        (box_positions, (1.0, 2.0, 3.0)),
    ])
    def test_negative_lengths_mirror(self, generator, args):
        """Test that negating every length mirrors the shape through the origin."""
        mirrored = generator(*[-x if isinstance(x, float) else x for x in args])

        assert np.allclose(mirrored, -generator(*args))

    def test_non_finite_length_raises(self):
        with pytest.raises(InvalidGeometryError, match="finite"):
            square_positions(float("inf"))

    @pytest.mark.parametrize("generator, args", [
        (triangle_positions, (1.0,)),
        (square_positions, (1.0,)),
        (rectangle_positions, (1.0, 2.0)),
        (polygon_positions, (7, 1.0)),
        (cube_positions, (1.0,)),
        (box_positions, (1.0, 2.0, 3.0)),
    ])
    def test_origin_excluded(self, generator, args):
        positions = generator(*args)
        assert np.all(np.linalg.norm(positions, axis=1) > 0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
