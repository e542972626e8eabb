import numpy as np
import pytest

from meshcore.barycentric import barycentric_coordinates

# triangles lying in each coordinate plane, so every projection branch is hit
TRIANGLES = [
    ((0, 0, 0), (1, 0, 0), (0, 1, 0)),  # xy plane
    ((0, 0, 0), (0, 1, 0), (0, 0, 1)),  # yz plane
    ((0, 0, 0), (0, 0, 1), (1, 0, 0)),  # xz plane
    ((1, 2, 3), (4, -1, 2), (0, 5, -2)),  # general position
]


@pytest.mark.parametrize("tri", TRIANGLES)
def test_corners_map_to_unit_vectors(tri):
    u, v, w = tri
    np.testing.assert_allclose(barycentric_coordinates(u, u, v, w), [1, 0, 0], atol=1e-12)
    np.testing.assert_allclose(barycentric_coordinates(v, u, v, w), [0, 1, 0], atol=1e-12)
    np.testing.assert_allclose(barycentric_coordinates(w, u, v, w), [0, 0, 1], atol=1e-12)


@pytest.mark.parametrize("tri", TRIANGLES)
def test_reconstructs_point_in_plane(tri):
    u, v, w = (np.array(x, dtype=float) for x in tri)
    weights = np.array([0.2, 0.5, 0.3])
    p = weights[0] * u + weights[1] * v + weights[2] * w
    b = barycentric_coordinates(p, u, v, w)
    np.testing.assert_allclose(b, weights, atol=1e-12)
    np.testing.assert_allclose(b[0] * u + b[1] * v + b[2] * w, p, atol=1e-12)


@pytest.mark.parametrize("tri", TRIANGLES)
def test_coordinates_sum_to_one(tri):
    u, v, w = tri
    b = barycentric_coordinates((3.0, -7.0, 0.5), u, v, w)
    assert b.sum() == pytest.approx(1.0)


def test_degenerate_triangle_gives_barycenter():
    b = barycentric_coordinates((5, 5, 5), (0, 0, 0), (1, 0, 0), (2, 0, 0))
    np.testing.assert_allclose(b, [1 / 3, 1 / 3, 1 / 3])


def test_point_outside_has_negative_coordinate():
    b = barycentric_coordinates((2, 2, 0), (0, 0, 0), (1, 0, 0), (0, 1, 0))
    assert b.min() < 0
    assert b.sum() == pytest.approx(1.0)