"""Keyboard- and mouse-driven control of an orthographic camera."""

from __future__ import annotations

import numpy as np

from .camera import OrthographicCamera
from .events import Event, EventDispatcher, MouseScrolledEvent, WindowResizeEvent
from .input import Input, InputState
from .keycodes import Key
from .timestep import Timestep


class OrthographicCameraController:
    """Moves with WASD, rotates with Q/E when enabled, zooms with the wheel."""

    TRANSLATION_SPEED = 5.0
    ROTATION_SPEED = 180.0
    ZOOM_STEP = 0.25
    MIN_ZOOM = 0.25

    def __init__(self, aspect_ratio: float, rotation: bool = False,
                 input_source: Input | None = None) -> None:
        self._aspect_ratio = float(aspect_ratio)
        self._zoom_level = 1.0
        self._rotation_enabled = rotation
        self._input = input_source if input_source is not None else InputState()
        self._position = np.zeros(3)
        self._rotation = 0.0
        self._camera = OrthographicCamera(*self._bounds())

    @property
    def camera(self) -> OrthographicCamera:
        return self._camera

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def zoom_level(self) -> float:
        return self._zoom_level

    @zoom_level.setter
    def zoom_level(self, level: float) -> None:
        self._zoom_level = float(level)

    def _bounds(self) -> tuple[float, float, float, float]:
        a, z = self._aspect_ratio, self._zoom_level
        return -a * z, a * z, -z, z

    def on_update(self, ts: Timestep | float) -> None:
        dt = float(ts)
        step = self.TRANSLATION_SPEED * dt
        pressed = self._input.is_key_pressed

        if pressed(Key.A):
            self._position[0] -= step
        elif pressed(Key.D):
            self._position[0] += step

        if pressed(Key.W):
            self._position[1] += step
        elif pressed(Key.S):
            self._position[1] -= step

        if self._rotation_enabled:
            if pressed(Key.Q):
                self._rotation += self.ROTATION_SPEED * dt
            if pressed(Key.E):
                self._rotation -= self.ROTATION_SPEED * dt
            self._camera.rotation = self._rotation

        self._camera.position = self._position

    def on_event(self, event: Event) -> None:
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(MouseScrolledEvent, self._on_mouse_scrolled)
        dispatcher.dispatch(WindowResizeEvent, self._on_window_resized)

    def _on_mouse_scrolled(self, event: MouseScrolledEvent) -> bool:
        self._zoom_level -= event.y_offset * self.ZOOM_STEP
        self._zoom_level = max(self._zoom_level, self.MIN_ZOOM)
        self._camera.set_projection(*self._bounds())
        return False

    def _on_window_resized(self, event: WindowResizeEvent) -> bool:
        # A minimised window reports a zero size; keep the last aspect ratio.
        if event.width == 0 or event.height == 0:
            return False
        self._aspect_ratio = event.width / event.height
        self._camera.set_projection(*self._bounds())
        return False