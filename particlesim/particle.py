"""Point masses with radius, integrated under accumulated forces."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Callable

from particlesim.vector import Vector3

_ids = itertools.count()


@dataclass(eq=False)
class Particle:
    """A disc-shaped body that accumulates forces and integrates them."""

    position: Vector3 = field(default_factory=Vector3)
    velocity: Vector3 = field(default_factory=Vector3)
    mass: float = 1.0
    radius: float = 1.0
    id: int = field(init=False, default_factory=lambda: next(_ids))
    force: Vector3 = field(init=False, default_factory=Vector3)

    def add_force(self, force: Vector3) -> None:
        self.force = self.force + force

    def clear_forces(self) -> None:
        self.force = Vector3()

    def integrate(self, dt: float) -> None:
        """Advance by dt under the accumulated force, then clear it."""
        acceleration = self.force * (1.0 / self.mass)
        self.position = self.position + self.velocity * dt + acceleration * (0.5 * dt * dt)
        self.velocity = self.velocity + acceleration * dt
        self.clear_forces()


ForceFunc = Callable[[Particle, float], None]
"""A force generator applied to a particle for a time step."""