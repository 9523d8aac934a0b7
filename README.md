# raycaster

A small ray caster. It fires one ray through every pixel of a pinhole camera and
colours the pixel with the first object in the scene list that the ray hits (spheres
and planes). The result is written as a plain-text PPM (`P3`) image. A pixel whose
ray hits nothing gets the background colour (238, 238, 228).

It also has readers for Wavefront `.obj` meshes and their `.mtl` material libraries.

## Install

```
pip install .
```

## Render the built-in scene

```
raycaster
```

This writes `imagem.ppm` in the current directory. Use `-o` / `--output` to choose
another file:

```
raycaster --output scene.ppm
```

The image is 400×200 pixels and shows a red sphere above a green ground plane, seen
from the origin looking along the x axis with a 90° field of view.

## Use it from Python

```python
from raycaster.geometry import Point, Vector
from raycaster.camera import Camera
from raycaster.shapes import Sphere, Plane
from raycaster.render import to_ppm

camera = Camera(Point(0, 0, 0), Point(1, 0, 0), Vector(0, 1, 0), 1, 400, 200, 90)
scene = [
    Sphere(Point(0, 2, 0), 1, Vector(255, 0, 0)),
    Plane(Point(0, -1, 0), Vector(0, 1, 0), Vector(0, 255, 0)),
]

with open("scene.ppm", "w") as out:
    out.write(to_ppm(camera, scene))
```

- `render(camera, objects)` returns the pixels as rows of `(r, g, b)` integer tuples,
  from the top row down, each row from left to right.
- `colour(objects, ray)` returns the colour of the first object in the list that the
  ray hits, or `BACKGROUND`.
- `default_scene()` returns the camera and objects that the `raycaster` command uses.

### Geometry

`raycaster.geometry` has immutable `Point`, `Vector` and `Ray` types. Points and
vectors support point + vector, point − vector, point − point (a vector), vector ±
vector, negation, multiplication by a number on either side and division by a
number. `Vector.magnitude()` gives the length and `Vector.normalized()` a unit vector
(the zero vector stays zero). `dot` and `cross` compute the scalar and vector
products, and `Ray.point_at(t)` gives `origin + t * direction`.

### Camera

`Camera(location, pointing_at, world_up, distance, h_res, v_res, field_of_view)` builds
an orthonormal basis (`u` to the right, `v` up, `w` backwards) and a `Screen` with
`lower_left_corner`, `horizontal` and `vertical`. The field of view is vertical, in
degrees; the aspect ratio is the whole-number ratio `h_res // v_res`.
`camera.ray_through(u, v)` gives the ray from the camera through screen coordinates
`u` and `v` in [0, 1]. Setting `location` or `pointing_at` recomputes the basis but
not the screen.

### Shapes

`Sphere(center, radius, color)` and `Plane(point, normal, color)` derive from the
abstract `Hittable`, whose `hit(ray)` returns whether the ray meets the object. A
sphere is hit when the ray's line crosses it; a plane is hit when the crossing lies
at or ahead of the ray's origin.

## Reading meshes and materials

```python
from raycaster.objreader import read_obj
from raycaster.materials import load_mtl

model = read_obj("model.obj")
for triangle in model.face_points():
    print(triangle)
print(model.format_faces())

materials = load_mtl("model.mtl")
print(materials.color("Red"))
```

`parse_obj(lines, materials)` and `parse_mtl(lines)` do the same work on any iterable
of lines.

The `.mtl` reader keeps `Kd`, `Ks`, `Ke`, `Ka`, `Ns`, `Ni` and `d` for every
`newmtl` block in a `MaterialLibrary`. `properties(name)` returns a copy of a
material's `MaterialProperties` and `color(name)` its diffuse colour; an unknown
name raises `UnknownMaterialError` (a `KeyError`).

The `.obj` reader keeps `v`, `vn`, `f`, `mtllib` and `usemtl` lines. Faces must be
triangles written as `v/vt/vn`; texture indices are ignored and indices are stored
zero-based in each `Face`. Each face takes the material that was current when it was
read, and `ObjModel.material` holds the last one used. When the file has an `mtllib`
line, `read_obj` loads the `.mtl` file with the same name as the `.obj` file, next to
it. Malformed numbers, faces that are not in `v/vt/vn` form and faces that refer to
missing vertices raise `ValueError`.

## What it does not do

- There is no lighting or shading: a pixel takes the flat colour of the object hit.
- Objects are tested in list order, not by distance, so the first object in the list
  that the ray meets wins. `hit` only answers yes or no; `HitRecord` exists as a data
  type but nothing fills it in.
- Meshes read from `.obj` files cannot be rendered: there is no triangle shape.

## Tests

```
pip install ".[test]"
pytest
```