import math

import pytest

from meshcore.exceptions import InvalidInputException
from meshcore.tessellation import squared_triangle_area, tessellate


def _regular_polygon(n, radius=1.0):
    return [
        (radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n), 0.0)
        for i in range(n)
    ]


def _signed_area(a, b, c):
    return 0.5 * ((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0]))


def _polygon_area(points):
    total = 0.0
    for (x0, y0, _), (x1, y1, _) in zip(points, points[1:] + points[:1]):
        total += x0 * y1 - x1 * y0
    return 0.5 * total


def test_squared_area_of_right_triangle():
    assert squared_triangle_area((0, 0, 0), (1, 0, 0), (0, 1, 0)) == pytest.approx(1.0)


def test_squared_area_of_degenerate_triangle_is_zero():
    assert squared_triangle_area((0, 0, 0), (1, 0, 0), (2, 0, 0)) == 0.0


def test_squared_area_scales_with_fourth_power():
    p = [(0.1, 0.2, 0.3), (1.0, -0.5, 0.7), (0.4, 1.3, -0.2)]
    base = squared_triangle_area(*p)
    scaled = squared_triangle_area(*[tuple(2 * c for c in q) for q in p])
    assert scaled == pytest.approx(16 * base)


def test_triangle_is_returned_unchanged():
    assert tessellate([(0, 0, 0), (1, 0, 0), (0, 1, 0)]) == [(0, 1, 2)]


def test_square_with_equal_options_uses_second_split():
    square = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
    assert tessellate(square) == [(0, 1, 3), (1, 2, 3)]


def test_concave_quad_does_not_fold():
    dart = [(0, 0, 0), (2, -1, 0), (1, 0, 0), (2, 1, 0)]
    tris = tessellate(dart)
    assert len(tris) == 2
    for i, j, k in tris:
        assert _signed_area(dart[i], dart[j], dart[k]) > 0


@pytest.mark.parametrize("n", [5, 6, 7, 10, 16])
def test_regular_polygon_triangulation_invariants(n):
    pts = _regular_polygon(n)
    tris = tessellate(pts)
    assert len(tris) == n - 2
    for i, m, k in tris:
        assert 0 <= i < m < k < n
        assert _signed_area(pts[i], pts[m], pts[k]) > 0
    total = sum(_signed_area(pts[i], pts[m], pts[k]) for i, m, k in tris)
    assert total == pytest.approx(_polygon_area(pts))


@pytest.mark.parametrize("n", [5, 8, 12])
def test_each_boundary_edge_in_exactly_one_triangle(n):
    pts = _regular_polygon(n, radius=2.5)
    tris = tessellate(pts)
    boundary = [(i, i + 1) for i in range(n - 1)] + [(0, n - 1)]
    for a, b in boundary:
        count = sum(1 for t in tris if a in t and b in t)
        assert count == 1


def test_every_corner_is_used():
    pts = _regular_polygon(9)
    tris = tessellate(pts)
    used = {idx for t in tris for idx in t}
    assert used == set(range(9))


@pytest.mark.parametrize("count", [0, 1, 2])
def test_too_few_points_raises(count):
    with pytest.raises(InvalidInputException):
        tessellate([(float(i), 0.0, 0.0) for i in range(count)])