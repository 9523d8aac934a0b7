"""Reader for triangle meshes in the Wavefront ``.obj`` format.

Only ``v``, ``vn``, ``f``, ``mtllib`` and ``usemtl`` are used. Faces are
triangles written as ``v/vt/vn``; texture indices are ignored and each face
takes the material active when it is read.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable

from raycaster.geometry import Point, Vector
from raycaster.materials import MaterialLibrary, MaterialProperties, load_mtl


@dataclass(frozen=True)
class Face:
    """A triangle: zero-based vertex and normal indices plus its material."""

    vertex_indices: tuple[int, int, int] = (0, 0, 0)
    normal_indices: tuple[int, int, int] = (0, 0, 0)
    ka: Vector = Vector()
    kd: Vector = Vector()
    ks: Vector = Vector()
    ke: Vector = Vector()
    ns: float = 0.0
    ni: float = 0.0
    d: float = 0.0


@dataclass
class ObjModel:
    """Vertices, normals and faces of a mesh; ``material`` is the last one used."""

    vertices: list[Point] = field(default_factory=list)
    normals: list[Vector] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)
    material: MaterialProperties = field(default_factory=MaterialProperties)

    def face_points(self) -> list[tuple[Point, Point, Point]]:
        """The three corner points of every face."""
        return [
            tuple(self.vertices[index] for index in face.vertex_indices)
            for face in self.faces
        ]

    def format_faces(self) -> str:
        """One line per face listing its corner points."""
        return "\n".join(
            f"Face {number}: " + "".join(str(point) for point in points)
            for number, points in enumerate(self.face_points(), start=1)
        )


def _read_floats(args: list[str], line: str) -> list[float]:
    if len(args) < 3:
        raise ValueError(f"expected 3 numbers in line {line.strip()!r}")
    try:
        return [float(token) for token in args[:3]]
    except ValueError:
        raise ValueError(f"malformed number in line {line.strip()!r}") from None


def _parse_face(args: list[str], material: MaterialProperties, line: str) -> Face:
    if len(args) < 3:
        raise ValueError(f"a face needs three vertices: {line.strip()!r}")
    vertex_indices = []
    normal_indices = []
    for token in args[:3]:
        parts = token.split("/")
        if len(parts) != 3:
            raise ValueError(f"face vertex {token!r} is not in v/vt/vn form")
        try:
            vertex_indices.append(int(parts[0]) - 1)
            normal_indices.append(int(parts[2]) - 1)
        except ValueError:
            raise ValueError(f"malformed face vertex {token!r}") from None
    return Face(
        vertex_indices=tuple(vertex_indices),
        normal_indices=tuple(normal_indices),
        ka=material.ka,
        kd=material.kd,
        ks=material.ks,
        ke=material.ke,
        ns=material.ns,
        ni=material.ni,
        d=material.d,
    )


def parse_obj(
    lines: Iterable[str], materials: MaterialLibrary | None = None
) -> ObjModel:
    """Build a model from ``.obj`` lines.

    ``materials`` becomes available once an ``mtllib`` line is seen; a
    ``usemtl`` naming an unknown material raises ``UnknownMaterialError``.
    """
    library = materials if materials is not None else MaterialLibrary()
    active = MaterialLibrary()
    model = ObjModel()
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        prefix, args = tokens[0], tokens[1:]
        if prefix == "mtllib":
            active = library
        elif prefix == "usemtl":
            if not args:
                raise ValueError("usemtl without a material name")
            model.material = active.properties(args[0])
        elif prefix == "v":
            model.vertices.append(Point(*_read_floats(args, line)))
        elif prefix == "vn":
            model.normals.append(Vector(*_read_floats(args, line)))
        elif prefix == "f":
            model.faces.append(_parse_face(args, model.material, line))

    count = len(model.vertices)
    for face in model.faces:
        for index in face.vertex_indices:
            if not 0 <= index < count:
                raise ValueError(
                    f"face refers to vertex {index + 1}, but there are {count}"
                )
    return model


def read_obj(path: str | os.PathLike[str]) -> ObjModel:
    """Read an ``.obj`` file; its materials come from the ``.mtl`` file of the same name."""
    path_text = os.fspath(path)
    with open(path_text, encoding="utf-8") as handle:
        lines = handle.read().splitlines()
    materials = None
    if any(line.split()[:1] == ["mtllib"] for line in lines):
        materials = load_mtl(path_text[:-3] + "mtl")
    return parse_obj(lines, materials)