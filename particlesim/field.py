"""The rectangular world that particles live in."""

from __future__ import annotations

from particlesim.constants import (
    DYNAMIC_FRICTION_COEFFICIENT,
    GRAVITY,
    RESTITUTION_COEFFICIENT,
)
from particlesim.particle import Particle
from particlesim.vector import Dimensions, Vector3


class Field:
    """A bounded region with its own physical constants.

    The field is centred on ``position``; its extents are ``size``.
    """

    def __init__(
        self,
        size: Dimensions,
        gravity: float = GRAVITY,
        friction: float = DYNAMIC_FRICTION_COEFFICIENT,
        restitution: float = RESTITUTION_COEFFICIENT,
    ) -> None:
        self.size = size
        self.position = size.center_as_vector()
        self.gravity = gravity
        self.friction = friction
        self.restitution = restitution

    def __repr__(self) -> str:
        return (
            f"Field(size={self.size!r}, position={self.position!r}, "
            f"gravity={self.gravity}, friction={self.friction}, "
            f"restitution={self.restitution})"
        )

    def reset(self) -> None:
        """Restore the default constants and recentre on the current size."""
        self.gravity = GRAVITY
        self.friction = DYNAMIC_FRICTION_COEFFICIENT
        self.restitution = RESTITUTION_COEFFICIENT
        self.position = self.size.center_as_vector()

    def contains(self, target: Vector3 | Particle) -> bool:
        """Whether a point or a particle's centre lies inside the field."""
        point = target.position if isinstance(target, Particle) else target
        relative = self.relative_position(point)
        half_w = self.size.width * 0.5
        half_h = self.size.height * 0.5
        return -half_w <= relative.x <= half_w and -half_h <= relative.y <= half_h

    def relative_position(self, position: Vector3) -> Vector3:
        """The position relative to the field's centre."""
        return position - self.position