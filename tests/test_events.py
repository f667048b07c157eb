import pytest

from hyperreal.events import (
    AppRenderEvent,
    AppTickEvent,
    AppUpdateEvent,
    EventCategory,
    EventDispatcher,
    EventType,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)


def test_window_resize_string_and_fields():
    event = WindowResizeEvent(1280, 720)
    assert event.width == 1280
    assert event.height == 720
    assert str(event) == "WindowResizeEvent: 1280, 720"
    assert event.event_type is EventType.WINDOW_RESIZE


@pytest.mark.parametrize(
    "event, name",
    [
        (WindowCloseEvent(), "WindowClose"),
        (AppTickEvent(), "AppTick"),
        (AppUpdateEvent(), "AppUpdate"),
        (AppRenderEvent(), "AppRender"),
        (MouseButtonPressedEvent(0), "MouseButtonPressed"),
        (KeyTypedEvent(65), "KeyTyped"),
    ],
)
def test_names(event, name):
    assert event.name == name


def test_default_string_is_name():
    event = WindowCloseEvent()
    assert str(event) == event.name


def test_key_event_strings():
    assert str(KeyPressedEvent(65, 1)) == "KeyPressedEvent: 65 (1 repeats)"
    assert str(KeyReleasedEvent(65)) == f"KeyReleasedEvent: {65}"
    assert str(KeyTypedEvent(65)) == f"Keytyped event:{65}"


def test_mouse_event_strings():
    assert str(MouseMovedEvent(1.5, 2.0)) == "MouseMovedEvent: 1.5, 2"
    assert str(MouseScrolledEvent(0.5, -1.0)) == "MouseScrolledEvent: 0.5, -1"
    assert str(MouseButtonPressedEvent(2)) == f"MouseButtonPressedEvent: {2}"
    assert str(MouseButtonReleasedEvent(2)) == f"MouseButtonReleasedEvent: {2}"


def test_categories():
    key = KeyPressedEvent(65, 0)
    assert key.is_in_category(EventCategory.KEYBOARD)
    assert key.is_in_category(EventCategory.INPUT)
    assert not key.is_in_category(EventCategory.MOUSE)
    mouse = MouseMovedEvent(0.0, 0.0)
    assert mouse.is_in_category(EventCategory.MOUSE)
    assert not mouse.is_in_category(EventCategory.APPLICATION)
    assert WindowCloseEvent().is_in_category(EventCategory.APPLICATION)


def test_new_event_is_not_handled():
    assert WindowCloseEvent().handled is False


def test_dispatch_matching_type_sets_handled():
    event = WindowResizeEvent(10, 20)
    seen = []

    def handler(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(WindowResizeEvent, handler) is True
    assert seen == [event]
    assert event.handled is True


def test_dispatch_other_type_does_nothing():
    event = WindowCloseEvent()
    seen = []
    assert EventDispatcher(event).dispatch(WindowResizeEvent, seen.append) is False
    assert seen == []
    assert event.handled is False


def test_dispatch_overwrites_handled():
    event = MouseScrolledEvent(0.0, 1.0)
    event.handled = True
    EventDispatcher(event).dispatch(MouseScrolledEvent, lambda e: False)
    assert event.handled is False