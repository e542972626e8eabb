"""Triangulation of polygons that keeps the sum of squared triangle areas low."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from meshcore.exceptions import InvalidInputException

Triangle = tuple[int, int, int]


def squared_triangle_area(
    p0: Sequence[float], p1: Sequence[float], p2: Sequence[float]
) -> float:
    """Squared norm of the cross product of the triangle's edge vectors.

    This is four times the squared triangle area; only its ordering matters
    when comparing triangulations.
    """
    a = np.asarray(p0, dtype=float)
    b = np.asarray(p1, dtype=float)
    c = np.asarray(p2, dtype=float)
    n = np.atleast_1d(np.cross(b - a, c - a))
    return float(np.dot(n, n))


def tessellate(points: Sequence[Sequence[float]]) -> list[Triangle]:
    """Split a polygon given by its corner points into triangles.

    Returns index triples into ``points``. Triangles and quads are handled
    directly; larger polygons are triangulated by dynamic programming so that
    the sum of squared triangle areas is minimal, which avoids overlapping or
    folded triangles for non-convex polygons.
    """
    pts = [np.asarray(p, dtype=float) for p in points]
    n = len(pts)
    if n < 3:
        raise InvalidInputException(
            f"A polygon needs at least 3 corners to be tessellated, got {n}."
        )

    def area(i: int, j: int, k: int) -> float:
        return squared_triangle_area(pts[i], pts[j], pts[k])

    if n == 3:
        return [(0, 1, 2)]

    if n == 4:
        if area(0, 1, 2) + area(0, 2, 3) < area(0, 1, 3) + area(1, 2, 3):
            return [(0, 1, 2), (0, 2, 3)]
        return [(0, 1, 3), (1, 2, 3)]

    # best[i][k]: minimal cost of triangulating the sub-polygon i..k
    # split[i][k]: the apex m used for the triangle on edge (i, k)
    best = [[0.0] * n for _ in range(n)]
    split = [[-1] * n for _ in range(n)]

    for j in range(2, n):
        for i in range(n - j):
            k = i + j
            costs = {
                m: best[i][m] + area(i, m, k) + best[m][k] for m in range(i + 1, k)
            }
            m_best = min(costs, key=costs.__getitem__)
            best[i][k] = costs[m_best]
            split[i][k] = m_best

    triangles: list[Triangle] = []
    todo = [(0, n - 1)]
    while todo:
        start, end = todo.pop()
        if end - start < 2:
            continue
        m = split[start][end]
        triangles.append((start, m, end))
        todo.append((start, m))
        todo.append((m, end))
    return triangles