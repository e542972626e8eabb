"""Barycentric coordinates of a point with respect to a triangle."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def barycentric_coordinates(
    p: Sequence[float],
    u: Sequence[float],
    v: Sequence[float],
    w: Sequence[float],
) -> np.ndarray:
    """Return the barycentric coordinates of ``p`` in triangle ``(u, v, w)``.

    The problem is projected onto the coordinate plane where the triangle has
    the largest extent. For a degenerate triangle the barycenter
    ``(1/3, 1/3, 1/3)`` is returned.
    """
    p_, u_, v_, w_ = (np.asarray(x, dtype=float) for x in (p, u, v, w))
    result = np.full(3, 1.0 / 3.0)

    vu = v_ - u_
    wu = w_ - u_
    pu = p_ - u_

    nx = vu[1] * wu[2] - vu[2] * wu[1]
    ny = vu[2] * wu[0] - vu[0] * wu[2]
    nz = vu[0] * wu[1] - vu[1] * wu[0]
    ax, ay, az = abs(nx), abs(ny), abs(nz)

    if ax > ay:
        axis = 0 if ax > az else 2
    else:
        axis = 1 if ay > az else 2

    if axis == 0:
        if 1.0 + ax != 1.0:
            result[1] = 1.0 + (pu[1] * wu[2] - pu[2] * wu[1]) / nx - 1.0
            result[2] = 1.0 + (vu[1] * pu[2] - vu[2] * pu[1]) / nx - 1.0
            result[0] = 1.0 - result[1] - result[2]
    elif axis == 1:
        if 1.0 + ay != 1.0:
            result[1] = 1.0 + (pu[2] * wu[0] - pu[0] * wu[2]) / ny - 1.0
            result[2] = 1.0 + (vu[2] * pu[0] - vu[0] * pu[2]) / ny - 1.0
            result[0] = 1.0 - result[1] - result[2]
    else:
        if 1.0 + az != 1.0:
            result[1] = 1.0 + (pu[0] * wu[1] - pu[1] * wu[0]) / nz - 1.0
            result[2] = 1.0 + (vu[0] * pu[1] - vu[1] * pu[0]) / nz - 1.0
            result[0] = 1.0 - result[1] - result[2]

    return result