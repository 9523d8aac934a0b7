"""A pinhole camera with an orthonormal basis and a projection screen."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raycaster.geometry import Point, Ray, Vector, cross


@dataclass(frozen=True)
class Screen:
    """Projection window in front of the camera."""

    lower_left_corner: Point
    horizontal: Vector
    vertical: Vector


class Camera:
    """Camera at ``location`` looking towards ``pointing_at``.

    ``w`` points backwards, ``u`` to the right and ``v`` up.
    """

    def __init__(
        self,
        location: Point,
        pointing_at: Point,
        world_up: Vector,
        distance: float,
        h_res: int,
        v_res: int,
        field_of_view: float,
    ) -> None:
        self._location = location
        self._pointing_at = pointing_at
        self.world_up = world_up
        self.distance = distance
        self.h_res = h_res
        self.v_res = v_res
        self.field_of_view = field_of_view
        self.u = Vector()
        self.v = Vector()
        self.w = Vector()
        self._calculate_basis()

        # Resolutions are whole numbers, so the ratio is truncated.
        self.aspect_ratio = float(h_res // v_res)
        theta = math.radians(field_of_view)
        half_height = math.tan(theta / 2)
        half_width = self.aspect_ratio * half_height
        corner = (
            location
            - distance * self.w
            - half_width * self.u
            - half_height * self.v
        )
        self.screen = Screen(corner, 2 * half_width * self.u, 2 * half_height * self.v)

    @property
    def location(self) -> Point:
        return self._location

    @location.setter
    def location(self, value: Point) -> None:
        self._location = value
        self._calculate_basis()

    @property
    def pointing_at(self) -> Point:
        return self._pointing_at

    @pointing_at.setter
    def pointing_at(self, value: Point) -> None:
        self._pointing_at = value
        self._calculate_basis()

    def _calculate_basis(self) -> None:
        self.w = (self._location - self._pointing_at).normalized()
        self.u = cross(self.world_up, self.w).normalized()
        self.v = cross(self.w, self.u)

    def ray_through(self, u: float, v: float) -> Ray:
        """Ray from the camera through screen coordinates ``(u, v)`` in [0, 1]."""
        screen = self.screen
        target = screen.lower_left_corner + u * screen.horizontal + v * screen.vertical
        return Ray(self._location, target - self._location)