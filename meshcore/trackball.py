"""Draw-mode bookkeeping and a virtual trackball camera for mesh viewers."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np

from meshcore.exceptions import InvalidInputException


def _normalize(v: np.ndarray) -> np.ndarray:
    n = float(np.linalg.norm(v))
    return v / n if n > np.finfo(float).tiny else np.zeros_like(v)


def _translation_matrix(t: Sequence[float]) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = np.asarray(t, dtype=float)
    return m


def _rotation_matrix(axis: Sequence[float], angle: float) -> np.ndarray:
    """Rotation by ``angle`` degrees around ``axis``."""
    a = _normalize(np.asarray(axis, dtype=float))
    radians = angle * math.pi / 180.0
    c, s = math.cos(radians), math.sin(radians)
    one_m_c = 1.0 - c
    x, y, z = a
    m = np.identity(4)
    m[0, 0] = x * x * one_m_c + c
    m[0, 1] = x * y * one_m_c - z * s
    m[0, 2] = x * z * one_m_c + y * s
    m[1, 0] = y * x * one_m_c + z * s
    m[1, 1] = y * y * one_m_c + c
    m[1, 2] = y * z * one_m_c - x * s
    m[2, 0] = z * x * one_m_c - y * s
    m[2, 1] = z * y * one_m_c + x * s
    m[2, 2] = z * z * one_m_c + c
    return m


def _perspective_matrix(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    top = near * math.tan(fovy * math.pi / 360.0)
    bottom = -top
    left = bottom * aspect
    right = top * aspect
    m = np.zeros((4, 4))
    m[0, 0] = 2.0 * near / (right - left)
    m[1, 1] = 2.0 * near / (top - bottom)
    m[0, 2] = (right + left) / (right - left)
    m[1, 2] = (top + bottom) / (top - bottom)
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -2.0 * far * near / (far - near)
    m[3, 2] = -1.0
    return m


class DrawModes:
    """An ordered list of named draw modes with one of them active."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: list[str] = list(names)
        self._index = 0

    def clear(self) -> None:
        """Remove all draw modes."""
        self._names.clear()
        self._index = 0

    def add(self, name: str) -> int:
        """Append a draw mode and return its index."""
        self._names.append(name)
        return len(self._names) - 1

    def set(self, name: str) -> None:
        """Activate the first mode called ``name``; unknown names are ignored."""
        for i, mode in enumerate(self._names):
            if mode == name:
                self._index = i
                break

    def current(self) -> str:
        """Name of the active mode, or an empty string if there is none."""
        if self._index < len(self._names):
            return self._names[self._index]
        return ""

    def cycle(self) -> str:
        """Activate the next mode, wrapping around, and return its name."""
        if not self._names:
            raise InvalidInputException("There are no draw modes to cycle through.")
        self._index += 1
        if self._index >= len(self._names):
            self._index = 0
        return self._names[self._index]

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self):
        return iter(self._names)


class TrackballCamera:
    """Camera state driven by trackball-style mouse interaction."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise InvalidInputException(
                f"Viewport size must be positive, got {width}x{height}."
            )
        self.width = width
        self.height = height
        self.center = np.zeros(3)
        self.radius = 1.0
        self.fovy = 45.0
        self.near = 0.01 * self.radius
        self.far = 10.0 * self.radius
        self.modelview_matrix = np.identity(4)
        self.projection_matrix = np.identity(4)
        self._last_point_2d = (0, 0)
        self._last_point_3d = np.zeros(3)
        self._last_point_ok = False

    def _eye_center(self) -> np.ndarray:
        return self.modelview_matrix @ np.append(self.center, 1.0)

    def set_scene(self, center: Sequence[float], radius: float) -> None:
        """Define the scene's bounding sphere and frame it."""
        self.center = np.asarray(center, dtype=float).copy()
        self.radius = float(radius)
        self.view_all()

    def view_all(self) -> None:
        """Move the camera so the whole scene sphere is visible."""
        t = self._eye_center()
        self.translate((-t[0], -t[1], -t[2] - 2.5 * self.radius))

    def update_projection(self) -> np.ndarray:
        """Fit the clipping planes to the scene sphere and return the projection."""
        z = -self._eye_center()[2]
        self.fovy = 45.0
        self.near = max(0.001 * self.radius, z - self.radius)
        self.far = max(0.002 * self.radius, z + self.radius)
        self.projection_matrix = _perspective_matrix(
            self.fovy, self.width / self.height, self.near, self.far
        )
        return self.projection_matrix

    def map_to_sphere(self, x: float, y: float) -> np.ndarray | None:
        """Map a window position onto the unit hemisphere; None if outside."""
        if not (0 <= x <= self.width and 0 <= y <= self.height):
            return None
        w = float(self.width)
        h = float(self.height)
        px = (x - 0.5 * w) / w
        py = (0.5 * h - y) / h
        sinx = math.sin(math.pi * px * 0.5)
        siny = math.sin(math.pi * py * 0.5)
        sum_sq = sinx * sinx + siny * siny
        z = math.sqrt(1.0 - sum_sq) if sum_sq < 1.0 else 0.0
        return np.array([sinx, siny, z])

    def translate(self, t: Sequence[float]) -> None:
        """Translate the scene in eye coordinates."""
        self.modelview_matrix = _translation_matrix(t) @ self.modelview_matrix

    def rotate(self, axis: Sequence[float], angle: float) -> None:
        """Rotate the scene by ``angle`` degrees around its center."""
        ec = self._eye_center()
        c = ec[:3] / ec[3]
        self.modelview_matrix = (
            _translation_matrix(c)
            @ _rotation_matrix(axis, angle)
            @ _translation_matrix(-c)
            @ self.modelview_matrix
        )

    def rotation(self, x: int, y: int) -> None:
        """Rotate according to a drag from the last point to ``(x, y)``."""
        if not self._last_point_ok:
            return
        new_point = self.map_to_sphere(x, y)
        if new_point is None:
            return
        axis = np.cross(self._last_point_3d, new_point)
        cos_angle = float(np.dot(self._last_point_3d, new_point))
        if abs(cos_angle) < 1.0:
            angle = 2.0 * math.acos(cos_angle) * 180.0 / math.pi
            self.rotate(axis, angle)

    def translation(self, x: int, y: int) -> None:
        """Pan in the view plane so the scene follows the cursor."""
        dx = x - self._last_point_2d[0]
        dy = y - self._last_point_2d[1]
        ec = self._eye_center()
        z = -(ec[2] / ec[3])
        aspect = self.width / self.height
        up = math.tan(self.fovy / 2.0 * math.pi / 180.0) * self.near
        right = aspect * up
        self.translate(
            (
                2.0 * dx / self.width * right / self.near * z,
                -2.0 * dy / self.height * up / self.near * z,
                0.0,
            )
        )

    def zoom(self, x: int, y: int) -> None:
        """Move along the view direction according to vertical mouse motion."""
        dy = y - self._last_point_2d[1]
        self.translate((0.0, 0.0, self.radius * dy * 3.0 / self.height))

    def scroll(self, yoffset: float) -> None:
        """Move along the view direction according to a scroll offset."""
        d = yoffset * 0.12 * self.radius
        self.translate((0.0, 0.0, d))

    def motion(
        self,
        x: float,
        y: float,
        left: bool = False,
        middle: bool = False,
        right: bool = False,
        shift: bool = False,
        alt: bool = False,
    ) -> None:
        """Handle cursor motion with the given buttons and modifiers held."""
        ix, iy = int(x), int(y)
        if self._last_point_ok:
            if right or (left and shift):
                self.zoom(ix, iy)
            elif middle or (left and alt):
                self.translation(ix, iy)
            elif left:
                self.rotation(ix, iy)

        self._last_point_2d = (ix, iy)
        point = self.map_to_sphere(ix, iy)
        self._last_point_ok = point is not None
        if point is not None:
            self._last_point_3d = point