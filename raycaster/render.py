"""Render a scene into a plain-text PPM image."""

from __future__ import annotations

import argparse
from typing import Sequence

from raycaster.camera import Camera
from raycaster.geometry import Point, Ray, Vector
from raycaster.shapes import Hittable, Plane, Sphere

BACKGROUND = Vector(238, 238, 228)

Pixel = tuple[int, int, int]


def colour(objects: Sequence[Hittable], ray: Ray) -> Vector:
    """Colour of the first object the ray hits, or the background."""
    for obj in objects:
        if obj.hit(ray):
            return obj.color
    return BACKGROUND


def render(camera: Camera, objects: Sequence[Hittable]) -> list[list[Pixel]]:
    """Pixel rows from top to bottom, each from left to right."""
    rows = []
    for j in reversed(range(camera.v_res)):
        row = []
        for i in range(camera.h_res):
            ray = camera.ray_through(i / camera.h_res, j / camera.v_res)
            col = colour(objects, ray)
            row.append((int(col.x), int(col.y), int(col.z)))
        rows.append(row)
    return rows


def to_ppm(camera: Camera, objects: Sequence[Hittable]) -> str:
    """The rendered image as a P3 (ASCII) PPM document."""
    parts = [f"P3\n{camera.h_res} {camera.v_res}\n255\n"]
    for row in render(camera, objects):
        parts.extend(f"{r} {g} {b}\n" for r, g, b in row)
    return "".join(parts)


def default_scene() -> tuple[Camera, list[Hittable]]:
    """The built-in scene: a red sphere above a green floor."""
    camera = Camera(Point(0, 0, 0), Point(1, 0, 0), Vector(0, 1, 0), 1, 400, 200, 90)
    objects: list[Hittable] = [
        Sphere(Point(0, 2, 0), 1, Vector(255, 0, 0)),
        Plane(Point(0, -1, 0), Vector(0, 1, 0), Vector(0, 255, 0)),
    ]
    return camera, objects


def main(argv: Sequence[str] | None = None) -> int:
    """Render the built-in scene to a PPM file."""
    parser = argparse.ArgumentParser(description="Render the built-in scene.")
    parser.add_argument(
        "-o", "--output", default="imagem.ppm", help="image file to write"
    )
    args = parser.parse_args(argv)
    camera, objects = default_scene()
    with open(args.output, "w", encoding="ascii") as image:
        image.write(to_ppm(camera, objects))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())