import pytest

from raycaster.geometry import Point, Vector
from raycaster.materials import UnknownMaterialError, parse_mtl
from raycaster.objreader import Face, ObjModel, parse_obj, read_obj

OBJ = """\
mtllib scene.mtl
v 0 0 0
v 1 0 0
v 0 1 0
vn 0 0 1
usemtl red
f 1/1/1 2/1/1 3/1/1
"""

MTL = """\
newmtl red
Kd 1 0 0
Ns 10
"""


def _library():
    return parse_mtl(MTL.splitlines())


def test_vertices_and_normals():
    model = parse_obj(OBJ.splitlines(), _library())
    assert model.vertices == [Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0)]
    assert model.normals == [Vector(0, 0, 1)]


def test_face_indices_are_zero_based():
    model = parse_obj(OBJ.splitlines(), _library())
    assert len(model.faces) == 1
    assert model.faces[0].vertex_indices == (0, 1, 2)
    assert model.faces[0].normal_indices == (0, 0, 0)


def test_face_carries_material():
    model = parse_obj(OBJ.splitlines(), _library())
    face = model.faces[0]
    assert face.kd == Vector(1, 0, 0)
    assert face.ns == 10
    assert model.material.kd == Vector(1, 0, 0)


def test_face_points():
    model = parse_obj(OBJ.splitlines(), _library())
    assert model.face_points() == [(Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0))]


def test_format_faces():
    model = parse_obj(OBJ.splitlines(), _library())
    assert model.format_faces() == "Face 1: (0, 0, 0)(1, 0, 0)(0, 1, 0)"


def test_face_without_material_has_defaults():
    lines = ["v 0 0 0", "v 1 0 0", "v 0 1 0", "f 1/1/1 2/1/1 3/1/1"]
    model = parse_obj(lines)
    assert model.faces[0] == Face(vertex_indices=(0, 1, 2))


def test_material_applies_only_to_later_faces():
    lines = [
        "mtllib scene.mtl",
        "v 0 0 0",
        "v 1 0 0",
        "v 0 1 0",
        "f 1/1/1 2/1/1 3/1/1",
        "usemtl red",
        "f 3/1/1 2/1/1 1/1/1",
    ]
    model = parse_obj(lines, _library())
    assert model.faces[0].kd == Vector()
    assert model.faces[1].kd == Vector(1, 0, 0)


def test_usemtl_without_mtllib_raises():
    lines = ["usemtl red"]
    with pytest.raises(UnknownMaterialError):
        parse_obj(lines, _library())


def test_unknown_material_raises():
    with pytest.raises(KeyError):
        parse_obj(["mtllib scene.mtl", "usemtl green"], _library())


def test_face_out_of_range_raises():
    lines = ["v 0 0 0", "v 1 0 0", "f 1/1/1 2/1/1 3/1/1"]
    with pytest.raises(ValueError):
        parse_obj(lines)


def test_face_in_wrong_form_raises():
    lines = ["v 0 0 0", "v 1 0 0", "v 0 1 0", "f 1 2 3"]
    with pytest.raises(ValueError):
        parse_obj(lines)


def test_empty_model():
    model = parse_obj([])
    assert model == ObjModel()
    assert model.format_faces() == ""


def test_read_obj_loads_sibling_mtl(tmp_path):
    (tmp_path / "scene.obj").write_text(OBJ, encoding="utf-8")
    (tmp_path / "scene.mtl").write_text(MTL, encoding="utf-8")
    model = read_obj(tmp_path / "scene.obj")
    assert model == parse_obj(OBJ.splitlines(), _library())


def test_read_obj_without_mtl_file_raises(tmp_path):
    (tmp_path / "scene.obj").write_text(OBJ, encoding="utf-8")
    with pytest.raises(FileNotFoundError):
        read_obj(tmp_path / "scene.obj")


def test_read_missing_obj_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_obj(tmp_path / "absent.obj")