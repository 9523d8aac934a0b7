"""Points, vectors and rays in three-dimensional space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True, slots=True)
class Vector:
    """A direction (or colour) with three components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"<{_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)}>"

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector:
        """Unit vector in the same direction; the zero vector stays zero."""
        mag = self.magnitude()
        if mag == 0:
            return Vector(0.0, 0.0, 0.0)
        return Vector(self.x / mag, self.y / mag, self.z / mag)

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Point):
            return other + self
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Point):
            # Vector - Point is defined as Point - Vector.
            return other - self
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar):
        if isinstance(scalar, Real):
            return Vector(scalar * self.x, scalar * self.y, scalar * self.z)
        return NotImplemented

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if isinstance(scalar, Real):
            return Vector(self.x / scalar, self.y / scalar, self.z / scalar)
        return NotImplemented


@dataclass(frozen=True, slots=True)
class Point:
    """A location in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"

    def __add__(self, other):
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line starting at ``origin`` and running along ``direction``."""

    origin: Point
    direction: Vector

    def point_at(self, t: float) -> Point:
        """Point reached after travelling ``t`` times the direction."""
        return self.origin + t * self.direction


def dot(v1: Vector, v2: Vector) -> float:
    """Scalar product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def cross(v1: Vector, v2: Vector) -> Vector:
    """Vector product of two vectors."""
    return Vector(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )