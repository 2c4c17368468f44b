"""A cluster of particles falling, bouncing and colliding inside a field."""

from __future__ import annotations

import itertools
import math
import random

from particlesim.constants import CLUSTER_RADIUS, MASS_MAX, MASS_MIN, PI
from particlesim.field import Field
from particlesim.forces import combine, friction, gravity
from particlesim.particle import Particle
from particlesim.vector import Vector3


class Motion:
    """Owns the particles of one simulation run and advances them in time."""

    def __init__(
        self,
        particle_count: int,
        field: Field,
        rng: random.Random | None = None,
    ) -> None:
        self.field = field
        rng = rng if rng is not None else random.Random()
        center = field.position
        self.particles: list[Particle] = [
            self._spawn(center, rng) for _ in range(particle_count)
        ]
        self._force = combine(gravity(field), friction(field))

    @staticmethod
    def _spawn(center: Vector3, rng: random.Random) -> Particle:
        r = rng.uniform(0.0, CLUSTER_RADIUS)
        angle = rng.uniform(0.0, 2.0 * PI)
        mass = rng.uniform(MASS_MIN, MASS_MAX)
        position = Vector3(center.x + r * math.cos(angle), center.y - r * math.sin(angle), 0.0)
        return Particle(position, Vector3(), mass, mass ** (1.0 / 3.0) * 0.3)

    def update(self, dt: float) -> None:
        """Apply forces, integrate, bounce off walls, then resolve pair collisions."""
        for particle in self.particles:
            self._force(particle, dt)
            particle.integrate(dt)
            self.resolve_bounds(particle)

        for a, b in itertools.combinations(self.particles, 2):
            self.resolve_collision(a, b)

    def resolve_bounds(self, particle: Particle) -> None:
        """Clamp a particle inside the field, reflecting and damping its velocity."""
        restitution = self.field.restitution
        rel = self.field.relative_position(particle.position)
        vel = particle.velocity
        rx, ry, vx, vy = rel.x, rel.y, vel.x, vel.y
        half_w = self.field.size.width * 0.5
        half_h = self.field.size.height * 0.5
        hit = False

        if rx < -half_w:
            rx, vx, hit = -half_w, -vx * restitution, True
        elif rx > half_w:
            rx, vx, hit = half_w, -vx * restitution, True

        if ry < -half_h:
            ry, vy, hit = -half_h, -vy * restitution, True
        elif ry > half_h:
            ry, vy, hit = half_h, -vy * restitution, True

        if hit:
            particle.position = Vector3(rx, ry, rel.z) + self.field.position
            particle.velocity = Vector3(vx, vy, vel.z)

    def resolve_collision(self, a: Particle, b: Particle) -> None:
        """Separate two overlapping discs and exchange an impulse between them."""
        delta = b.position - a.position
        distance_sq = delta.dot(delta)
        radius_sum = a.radius + b.radius

        if distance_sq >= radius_sum * radius_sum:
            return

        dist = math.sqrt(distance_sq)
        if dist == 0.0:
            return

        normal = delta * (1.0 / dist)
        penetration = radius_sum - dist

        inv_a = 1.0 / a.mass
        inv_b = 1.0 / b.mass
        inv_sum = inv_a + inv_b

        a.position = a.position - normal * (penetration * inv_a / inv_sum)
        b.position = b.position + normal * (penetration * inv_b / inv_sum)

        rel_normal = (b.velocity - a.velocity).dot(normal)
        if rel_normal >= 0.0:
            return

        j = -(1.0 + self.field.restitution) * rel_normal / inv_sum
        impulse = normal * j
        a.velocity = a.velocity - impulse * inv_a
        b.velocity = b.velocity + impulse * inv_b