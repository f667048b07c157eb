import numpy as np

from hyperreal.camera import OrthographicCamera
from hyperreal.camera_controller import OrthographicCameraController
from hyperreal.events import MouseScrolledEvent, WindowResizeEvent
from hyperreal.input import Input
from hyperreal.keycodes import Key
from hyperreal.timestep import Timestep

ASPECT = 1280.0 / 720.0


class HeldKeys(Input):
    def __init__(self, *keys):
        self.keys = set(keys)

    def is_key_pressed(self, keycode):
        return keycode in self.keys

    def is_mouse_button_pressed(self, button):
        return False

    def mouse_position(self):
        return (0.0, 0.0)


def expected_projection(aspect, zoom):
    return OrthographicCamera(-aspect * zoom, aspect * zoom, -zoom, zoom).projection_matrix


def test_initial_projection_uses_aspect_and_unit_zoom():
    controller = OrthographicCameraController(ASPECT)
    assert controller.zoom_level == 1.0
    assert controller.aspect_ratio == ASPECT
    assert np.allclose(controller.camera.projection_matrix, expected_projection(ASPECT, 1.0))


def test_moving_right_for_one_second():
    controller = OrthographicCameraController(ASPECT, input_source=HeldKeys(Key.D))
    controller.on_update(Timestep(1.0))
    assert np.allclose(controller.camera.position, [5.0, 0.0, 0.0])


def test_left_and_right_mirror_each_other():
    left = OrthographicCameraController(ASPECT, input_source=HeldKeys(Key.A))
    right = OrthographicCameraController(ASPECT, input_source=HeldKeys(Key.D))
    left.on_update(0.3)
    right.on_update(0.3)
    assert np.allclose(left.camera.position, -right.camera.position)


def test_left_wins_over_right_and_up_over_down():
    both = OrthographicCameraController(ASPECT, input_source=HeldKeys(Key.A, Key.D, Key.W, Key.S))
    only = OrthographicCameraController(ASPECT, input_source=HeldKeys(Key.A, Key.W))
    both.on_update(0.2)
    only.on_update(0.2)
    assert np.allclose(both.camera.position, only.camera.position)


def test_rotation_ignored_when_disabled():
    controller = OrthographicCameraController(ASPECT, input_source=HeldKeys(Key.Q))
    controller.on_update(1.0)
    assert controller.camera.rotation == 0.0


def test_rotation_when_enabled():
    controller = OrthographicCameraController(ASPECT, rotation=True, input_source=HeldKeys(Key.Q))
    controller.on_update(1.0)
    assert controller.camera.rotation == 180.0

    reverse = OrthographicCameraController(ASPECT, rotation=True, input_source=HeldKeys(Key.E))
    reverse.on_update(1.0)
    assert reverse.camera.rotation == -controller.camera.rotation


def test_scroll_zooms_in_and_updates_projection():
    controller = OrthographicCameraController(ASPECT)
    event = MouseScrolledEvent(0.0, 1.0)
    controller.on_event(event)
    assert controller.zoom_level < 1.0
    assert np.allclose(
        controller.camera.projection_matrix,
        expected_projection(ASPECT, controller.zoom_level),
    )
    assert event.handled is False


def test_zoom_is_clamped():
    controller = OrthographicCameraController(ASPECT)
    controller.on_event(MouseScrolledEvent(0.0, 100.0))
    assert controller.zoom_level == 0.25


def test_resize_changes_aspect_ratio():
    controller = OrthographicCameraController(ASPECT)
    controller.on_event(WindowResizeEvent(1600, 800))
    assert controller.aspect_ratio == 2.0
    assert np.allclose(controller.camera.projection_matrix, expected_projection(2.0, 1.0))


def test_zero_size_resize_is_ignored():
    controller = OrthographicCameraController(ASPECT)
    controller.on_event(WindowResizeEvent(1280, 0))
    assert controller.aspect_ratio == ASPECT


def test_zoom_setter_does_not_touch_projection():
    controller = OrthographicCameraController(ASPECT)
    before = controller.camera.projection_matrix
    controller.zoom_level = 3.0
    assert controller.zoom_level == 3.0
    assert np.allclose(controller.camera.projection_matrix, before)