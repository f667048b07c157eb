"""Two-dimensional orthographic camera."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np


def _ortho(left: float, right: float, bottom: float, top: float,
           near: float = -1.0, far: float = 1.0) -> np.ndarray:
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def _translate(v: np.ndarray) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = v
    return m


def _rotate_z(degrees: float) -> np.ndarray:
    theta = math.radians(degrees)
    c, s = math.cos(theta), math.sin(theta)
    m = np.identity(4)
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


class OrthographicCamera:
    """Camera with an orthographic projection, a position and a z rotation."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = _ortho(left, right, bottom, top)
        self._view = np.identity(4)
        self._view_projection = self._projection @ self._view
        self._position = np.zeros(3)
        self._rotation = 0.0

    def set_projection(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = _ortho(left, right, bottom, top)
        self._view_projection = self._projection @ self._view

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        vec = np.array(value, dtype=float).ravel()
        if vec.shape != (3,):
            raise ValueError("Camera position needs three components")
        self._position = vec
        self._recalculate_view()

    @property
    def rotation(self) -> float:
        """Rotation about the z axis, in degrees."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)
        self._recalculate_view()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection.copy()

    def _recalculate_view(self) -> None:
        transform = _translate(self._position) @ _rotate_z(self._rotation)
        self._view = np.linalg.inv(transform)
        self._view_projection = self._projection @ self._view