"""A 2D camera mapping world coordinates to normalised device coordinates."""

from __future__ import annotations

from particlesim.constants import ZOOM_MAX, ZOOM_MIN
from particlesim.field import Field
from particlesim.vector import Vector3


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class Camera2D:
    """Zoomable, pannable view over a field."""

    def __init__(self, field: Field) -> None:
        self._field = field
        self._zoom = 1.0
        self._offset = Vector3()

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def offset(self) -> Vector3:
        return self._offset

    def set_zoom(self, factor: float) -> None:
        """Multiply the zoom by a positive factor, clamped to the zoom range."""
        if factor > 0.0:
            self._zoom = _clamp(self._zoom * factor, ZOOM_MIN, ZOOM_MAX)
            self._clamp_offset()

    def move(self, delta: Vector3) -> None:
        """Pan by delta in the x/y plane, keeping the view inside the field."""
        self._offset = Vector3(
            self._offset.x + delta.x, self._offset.y + delta.y, self._offset.z
        )
        self._clamp_offset()

    def world_to_ndc(self, position: Vector3) -> Vector3:
        """Map a world position to normalised device coordinates."""
        relative = self._field.relative_position(position) - self._offset
        size = self._field.size
        x = (relative.x / (size.width * 0.5)) * self._zoom
        y = (relative.y / (size.height * 0.5)) * self._zoom
        return Vector3(x, y, 0.0)

    def _clamp_offset(self) -> None:
        size = self._field.size
        half_w = size.width * 0.5
        half_h = size.height * 0.5
        max_x = max(0.0, half_w - half_w / self._zoom)
        max_y = max(0.0, half_h - half_h / self._zoom)
        self._offset = Vector3(
            _clamp(self._offset.x, -max_x, max_x),
            _clamp(self._offset.y, -max_y, max_y),
            self._offset.z,
        )