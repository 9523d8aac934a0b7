"""Objects that rays can hit."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from raycaster.geometry import Point, Ray, Vector, dot


@dataclass
class HitRecord:
    """Details of a ray-object intersection."""

    t: float
    hit_point: Point
    normal: Vector
    material_color: Vector


class Hittable(ABC):
    """Something a ray can intersect; carries a ``color``."""

    color: Vector

    @abstractmethod
    def hit(self, ray: Ray) -> bool:
        """Whether ``ray`` meets this object."""


@dataclass
class Sphere(Hittable):
    center: Point
    radius: float
    color: Vector

    def __str__(self) -> str:
        return f"{self.center}, {self.radius:g}, {self.color}"

    def hit(self, ray: Ray) -> bool:
        oc = ray.origin - self.center
        a = dot(ray.direction, ray.direction)
        b = 2.0 * dot(ray.direction, oc)
        c = dot(oc, oc) - self.radius * self.radius
        return b * b - 4 * a * c > 0


@dataclass
class Plane(Hittable):
    point: Point
    normal: Vector
    color: Vector

    def hit(self, ray: Ray) -> bool:
        numerator = dot(self.point - ray.origin, self.normal)
        denominator = dot(ray.direction, self.normal)
        if denominator == 0:
            # Parallel ray: the parameter is infinite (or undefined when on the plane).
            if numerator == 0:
                return False
            return math.copysign(1.0, numerator) * math.copysign(1.0, denominator) > 0
        return numerator / denominator >= 0