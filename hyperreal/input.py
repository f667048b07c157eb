"""Polling of keyboard and mouse state."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
)


class Input(ABC):
    """Source of current key, button and cursor state."""

    @abstractmethod
    def is_key_pressed(self, keycode: int) -> bool:
        """True while the key is held down (including auto-repeat)."""

    @abstractmethod
    def is_mouse_button_pressed(self, button: int) -> bool:
        """True while the mouse button is held down."""

    @abstractmethod
    def mouse_position(self) -> tuple[float, float]:
        """Cursor position in window coordinates."""

    def mouse_x(self) -> float:
        return self.mouse_position()[0]

    def mouse_y(self) -> float:
        return self.mouse_position()[1]


class InputState(Input):
    """Input state kept up to date from the window's events."""

    def __init__(self) -> None:
        self._keys: set[int] = set()
        self._buttons: set[int] = set()
        self._position = (0.0, 0.0)

    def on_event(self, event: Event) -> None:
        """Record the event; it is never marked handled."""
        if isinstance(event, KeyPressedEvent):
            self._keys.add(int(event.key_code))
        elif isinstance(event, KeyReleasedEvent):
            self._keys.discard(int(event.key_code))
        elif isinstance(event, MouseButtonPressedEvent):
            self._buttons.add(int(event.button))
        elif isinstance(event, MouseButtonReleasedEvent):
            self._buttons.discard(int(event.button))
        elif isinstance(event, MouseMovedEvent):
            self._position = (float(event.x), float(event.y))

    def is_key_pressed(self, keycode: int) -> bool:
        return int(keycode) in self._keys

    def is_mouse_button_pressed(self, button: int) -> bool:
        return int(button) in self._buttons

    def mouse_position(self) -> tuple[float, float]:
        return self._position