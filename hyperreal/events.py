"""Window, application, keyboard and mouse events and their dispatcher."""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Callable, ClassVar, TypeVar


class EventType(IntEnum):
    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15


class EventCategory(IntFlag):
    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


class Event:
    """Base of all events; ``handled`` stops propagation through layers."""

    event_type: ClassVar[EventType] = EventType.NONE
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        self.handled = False

    @property
    def name(self) -> str:
        return "".join(part.capitalize() for part in self.event_type.name.split("_"))

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self}>"


def _num(value: float) -> str:
    return f"{value:g}"


class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    category_flags = EventCategory.APPLICATION

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    category_flags = EventCategory.APPLICATION


class AppTickEvent(Event):
    event_type = EventType.APP_TICK
    category_flags = EventCategory.APPLICATION


class AppUpdateEvent(Event):
    event_type = EventType.APP_UPDATE
    category_flags = EventCategory.APPLICATION


class AppRenderEvent(Event):
    event_type = EventType.APP_RENDER
    category_flags = EventCategory.APPLICATION


class KeyEvent(Event):
    """Base of keyboard events."""

    category_flags = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self.key_code = key_code


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED

    def __init__(self, key_code: int, repeat_count: int) -> None:
        super().__init__(key_code)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} ({self.repeat_count} repeats)"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.key_code}"


class KeyTypedEvent(KeyEvent):
    event_type = EventType.KEY_TYPED

    def __str__(self) -> str:
        return f"Keytyped event:{self.key_code}"


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_num(self.x)}, {_num(self.y)}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self.x_offset = x_offset
        self.y_offset = y_offset

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_num(self.x_offset)}, {_num(self.y_offset)}"


class MouseButtonEvent(Event):
    """Base of mouse button events."""

    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, button: int) -> None:
        super().__init__()
        self.button = button


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self.button}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self.button}"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to a handler if it is of the requested class."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` when the event matches; its result sets ``handled``."""
        if self.event.event_type is not event_class.event_type:
            return False
        self.event.handled = bool(func(self.event))  # type: ignore[arg-type]
        return True