"""Keyboard, mouse and window input driving the camera and the world."""

from __future__ import annotations

from particlesim.camera import Camera2D
from particlesim.field import Field
from particlesim.vector import Dimensions, Vector3

KEY_COUNT = 1024
MOUSE_BUTTON_COUNT = 16
MOUSE_BUTTON_LEFT = 0
MOUSE_BUTTON_RIGHT = 1
MOUSE_BUTTON_MIDDLE = 2
ZOOM_STEP = 1.1


class InputManager:
    """Tracks pressed keys and buttons; pans and zooms the camera."""

    def __init__(self, world: Field, camera: Camera2D, resolution: Dimensions) -> None:
        self.world = world
        self.camera = camera
        self.resolution = resolution
        self._keys = [False] * KEY_COUNT
        self._mouse = [False] * MOUSE_BUTTON_COUNT
        self._cursor = (0.0, 0.0)
        self._previous = (0.0, 0.0)
        self.panning = False

    @property
    def cursor_pos(self) -> tuple[float, float]:
        return self._cursor

    def is_key_pressed(self, key: int) -> bool:
        return 0 <= key < KEY_COUNT and self._keys[key]

    def is_mouse_button(self, button: int) -> bool:
        return 0 <= button < MOUSE_BUTTON_COUNT and self._mouse[button]

    def on_cursor(self, x: float, y: float, captured: bool = False) -> None:
        """Record the cursor; while panning, drag the camera with it."""
        if self.panning and not captured:
            dx = x - self._previous[0]
            dy = y - self._previous[1]
            self._previous = (x, y)

            size = self.world.size
            zoom = self.camera.zoom
            world_dx = -dx * (size.width // self.resolution.width) * zoom
            world_dy = dy * (size.height // self.resolution.height) * zoom
            self.camera.move(Vector3(world_dx, world_dy, 0.0))

        self._cursor = (x, y)

    def on_resize(self, width: int, height: int) -> None:
        """Resize the world to the new framebuffer and recentre it."""
        self.resolution = Dimensions(width, height)
        self.world.size = self.resolution
        self.world.position = self.resolution.center_as_vector()

    def on_key(self, key: int, pressed: bool) -> None:
        if 0 <= key < KEY_COUNT:
            self._keys[key] = pressed

    def on_mouse(
        self,
        button: int,
        pressed: bool,
        x: float,
        y: float,
        captured: bool = False,
    ) -> None:
        """Handle a button change; the right button starts and stops panning."""
        if captured:
            return

        if button == MOUSE_BUTTON_RIGHT:
            self.panning = pressed
            if self.panning:
                self._previous = (x, y)

        if 0 <= button < MOUSE_BUTTON_COUNT:
            self._mouse[button] = pressed

    def on_scroll(self, yoffset: float, captured: bool = False) -> None:
        """Zoom in on upward scroll, out on downward scroll."""
        if captured:
            return
        if yoffset > 0:
            self.camera.set_zoom(ZOOM_STEP)
        elif yoffset < 0:
            self.camera.set_zoom(1.0 / ZOOM_STEP)