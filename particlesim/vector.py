"""Three-component vectors and integer extents."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from particlesim.constants import EPSILON


@dataclass(frozen=True, eq=False, slots=True)
class Vector3:
    """An immutable 3D vector; equality tolerates differences below EPSILON."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (
            abs(self.x - other.x) < EPSILON
            and abs(self.y - other.y) < EPSILON
            and abs(self.z - other.z) < EPSILON
        )

    def distance(self, other: Vector3) -> float:
        """Euclidean distance to another vector."""
        return (self - other).length()

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector3:
        """Unit vector in the same direction, or the zero vector."""
        length = self.length()
        if length > 0:
            return Vector3(self.x / length, self.y / length, self.z / length)
        return Vector3()


def _half(value: int) -> int:
    # Integer halving that truncates toward zero.
    return int(value / 2)


@dataclass(frozen=True, slots=True)
class Dimensions:
    """Integer extents of a region."""

    width: int
    height: int
    depth: int = 0

    def to_vector(self) -> Vector3:
        return Vector3(float(self.width), float(self.height), float(self.depth))

    def center(self) -> Dimensions:
        """Integer centre of the extents."""
        return Dimensions(_half(self.width), _half(self.height), _half(self.depth))

    def center_as_vector(self) -> Vector3:
        """Exact centre of the extents as a vector."""
        return self.to_vector() * 0.5