"""Material libraries in the Wavefront ``.mtl`` format.

Recognised keywords: ``Kd`` (diffuse colour), ``Ks`` (specular), ``Ke``
(emissive), ``Ka`` (ambient), ``Ns`` (shininess), ``Ni`` (refraction index)
and ``d`` (opacity).
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from typing import Iterable

from raycaster.geometry import Vector

_COLOUR_KEYS = {"Kd": "kd", "Ks": "ks", "Ke": "ke", "Ka": "ka"}
_SCALAR_KEYS = {"Ns": "ns", "Ni": "ni", "d": "d"}


@dataclass
class MaterialProperties:
    """Colours and optical properties of one material."""

    kd: Vector = field(default_factory=Vector)
    ks: Vector = field(default_factory=Vector)
    ke: Vector = field(default_factory=Vector)
    ka: Vector = field(default_factory=Vector)
    ns: float = 0.0
    ni: float = 0.0
    d: float = 0.0


class UnknownMaterialError(KeyError):
    """A material name is not defined in the library."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


@dataclass
class MaterialLibrary:
    """Materials by name."""

    materials: dict[str, MaterialProperties] = field(default_factory=dict)

    def __contains__(self, name: object) -> bool:
        return name in self.materials

    def __len__(self) -> int:
        return len(self.materials)

    def properties(self, name: str) -> MaterialProperties:
        """A copy of the properties of material ``name``."""
        try:
            found = self.materials[name]
        except KeyError:
            raise UnknownMaterialError(
                f"material {name!r} is not defined in the .mtl file"
            ) from None
        return dataclasses.replace(found)

    def color(self, name: str) -> Vector:
        """Diffuse colour of material ``name``."""
        return self.properties(name).kd


def _read_floats(args: list[str], count: int, line: str) -> list[float]:
    if len(args) < count:
        raise ValueError(f"expected {count} numbers in line {line.strip()!r}")
    try:
        return [float(token) for token in args[:count]]
    except ValueError:
        raise ValueError(f"malformed number in line {line.strip()!r}") from None


def parse_mtl(lines: Iterable[str]) -> MaterialLibrary:
    """Build a material library from the lines of an ``.mtl`` file."""
    materials: dict[str, MaterialProperties] = {}
    current = ""
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        keyword, args = tokens[0], tokens[1:]
        if keyword == "newmtl":
            if args:
                current = args[0]
            if current:
                materials[current] = MaterialProperties()
        elif keyword in _COLOUR_KEYS:
            colour = Vector(*_read_floats(args, 3, line))
            if current:
                setattr(materials[current], _COLOUR_KEYS[keyword], colour)
        elif keyword in _SCALAR_KEYS:
            (value,) = _read_floats(args, 1, line)
            target = materials.setdefault(current, MaterialProperties())
            setattr(target, _SCALAR_KEYS[keyword], value)
    return MaterialLibrary(materials)


def load_mtl(path: str | os.PathLike[str]) -> MaterialLibrary:
    """Read an ``.mtl`` file from disk."""
    with open(path, encoding="utf-8") as handle:
        return parse_mtl(handle)