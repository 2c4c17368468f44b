import pytest

from particlesim.camera import Camera2D
from particlesim.constants import ZOOM_MAX, ZOOM_MIN
from particlesim.field import Field
from particlesim.input import (
    KEY_COUNT,
    MOUSE_BUTTON_LEFT,
    MOUSE_BUTTON_RIGHT,
    ZOOM_STEP,
    InputManager,
)
from particlesim.vector import Dimensions, Vector3


@pytest.fixture
def manager():
    resolution = Dimensions(800, 600)
    world = Field(resolution)
    camera = Camera2D(world)
    return InputManager(world, camera, resolution)


def test_key_press_and_release(manager):
    manager.on_key(65, True)
    assert manager.is_key_pressed(65)
    manager.on_key(65, False)
    assert not manager.is_key_pressed(65)


def test_out_of_range_key_ignored(manager):
    manager.on_key(KEY_COUNT + 5, True)
    assert manager.is_key_pressed(KEY_COUNT + 5) is False
    assert manager.is_key_pressed(-1) is False


def test_mouse_button_tracking(manager):
    manager.on_mouse(MOUSE_BUTTON_LEFT, True, 0, 0)
    assert manager.is_mouse_button(MOUSE_BUTTON_LEFT)
    manager.on_mouse(MOUSE_BUTTON_LEFT, False, 0, 0)
    assert not manager.is_mouse_button(MOUSE_BUTTON_LEFT)


def test_captured_mouse_ignored(manager):
    manager.on_mouse(MOUSE_BUTTON_RIGHT, True, 0, 0, captured=True)
    assert manager.panning is False
    assert not manager.is_mouse_button(MOUSE_BUTTON_RIGHT)


def test_right_button_pans_camera(manager):
    manager.camera.set_zoom(ZOOM_MAX)
    manager.on_mouse(MOUSE_BUTTON_RIGHT, True, 100, 100)
    assert manager.panning
    manager.on_cursor(110, 95)
    assert manager.camera.offset == Vector3(-20.0, -10.0, 0.0)
    assert manager.cursor_pos == (110, 95)


def test_release_stops_panning(manager):
    manager.camera.set_zoom(ZOOM_MAX)
    manager.on_mouse(MOUSE_BUTTON_RIGHT, True, 100, 100)
    manager.on_mouse(MOUSE_BUTTON_RIGHT, False, 100, 100)
    manager.on_cursor(150, 150)
    assert manager.panning is False
    assert manager.camera.offset == Vector3()


def test_captured_cursor_does_not_pan(manager):
    manager.camera.set_zoom(ZOOM_MAX)
    manager.on_mouse(MOUSE_BUTTON_RIGHT, True, 100, 100)
    manager.on_cursor(140, 140, captured=True)
    assert manager.camera.offset == Vector3()
    assert manager.cursor_pos == (140, 140)


def test_pan_clamped_at_min_zoom(manager):
    manager.on_mouse(MOUSE_BUTTON_RIGHT, True, 0, 0)
    manager.on_cursor(300, 300)
    assert manager.camera.offset == Vector3()


def test_scroll_zooms(manager):
    manager.on_scroll(1)
    assert manager.camera.zoom == pytest.approx(ZOOM_STEP)
    manager.on_scroll(-1)
    assert manager.camera.zoom == pytest.approx(ZOOM_MIN)
    manager.on_scroll(-1)
    assert manager.camera.zoom == pytest.approx(ZOOM_MIN)


def test_scroll_captured_ignored(manager):
    manager.on_scroll(1, captured=True)
    assert manager.camera.zoom == ZOOM_MIN


def test_resize_updates_world(manager):
    manager.on_resize(1024, 768)
    expected = Dimensions(1024, 768)
    assert manager.resolution == expected
    assert manager.world.size == expected
    assert manager.world.position == expected.center_as_vector()