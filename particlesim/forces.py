"""Force generators acting on particles inside a field."""

from __future__ import annotations

from particlesim.field import Field
from particlesim.particle import ForceFunc, Particle
from particlesim.vector import Vector3

_MIN_SPEED = 0.0001


def gravity(field: Field) -> ForceFunc:
    """Weight force pulling along -y, read from the field at each call."""

    def apply(particle: Particle, dt: float) -> None:
        particle.add_force(Vector3(0.0, -1.0, 0.0) * field.gravity * particle.mass)

    return apply


def friction(field: Field) -> ForceFunc:
    """Dynamic friction opposing the particle's velocity."""

    def apply(particle: Particle, dt: float) -> None:
        velocity = particle.velocity
        if velocity.length() > _MIN_SPEED:
            direction = -velocity.normalized()
            particle.add_force(direction * field.friction * particle.mass * field.gravity)

    return apply


def combine(*forces: ForceFunc) -> ForceFunc:
    """A force generator applying each of the given ones in order."""

    def apply(particle: Particle, dt: float) -> None:
        for force in forces:
            force(particle, dt)

    return apply