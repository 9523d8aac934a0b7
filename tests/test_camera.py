import pytest

from raycaster.camera import Camera
from raycaster.geometry import Point, Vector, dot


def make_camera(h_res=400, v_res=200, fov=90):
    return Camera(Point(0, 0, 0), Point(1, 0, 0), Vector(0, 1, 0), 1, h_res, v_res, fov)


def test_basis_is_orthonormal():
    cam = make_camera()
    for axis in (cam.u, cam.v, cam.w):
        assert axis.magnitude() == pytest.approx(1.0)
    assert dot(cam.u, cam.v) == pytest.approx(0)
    assert dot(cam.u, cam.w) == pytest.approx(0)
    assert dot(cam.v, cam.w) == pytest.approx(0)


def test_w_points_away_from_target():
    cam = make_camera()
    expected = (cam.location - cam.pointing_at).normalized()
    assert cam.w == expected


def test_screen_width_to_height_follows_truncated_aspect_ratio():
    for h_res, v_res in ((400, 200), (300, 200)):
        cam = make_camera(h_res, v_res)
        ratio = cam.screen.horizontal.magnitude() / cam.screen.vertical.magnitude()
        assert ratio == pytest.approx(h_res // v_res)


def test_ninety_degree_field_of_view_gives_height_two():
    cam = make_camera()
    assert cam.screen.vertical.magnitude() == pytest.approx(2.0)


def test_ray_through_centre_points_at_target():
    cam = make_camera()
    ray = cam.ray_through(0.5, 0.5)
    assert ray.origin == cam.location
    direction = ray.direction.normalized()
    expected = (cam.pointing_at - cam.location).normalized()
    for a, b in zip(direction, expected):
        assert a == pytest.approx(b)


def test_ray_through_origin_corner_hits_lower_left_corner():
    cam = make_camera()
    ray = cam.ray_through(0, 0)
    assert ray.point_at(1) == cam.screen.lower_left_corner


def test_screen_centre_is_at_distance_along_view():
    cam = Camera(Point(1, 2, 3), Point(1, 2, -5), Vector(0, 1, 0), 3, 200, 100, 60)
    centre = cam.ray_through(0.5, 0.5).point_at(1)
    offset = centre - cam.location
    assert offset.magnitude() == pytest.approx(cam.distance)
    assert dot(offset.normalized(), cam.w) == pytest.approx(-1.0)


def test_moving_location_recomputes_basis():
    cam = make_camera()
    cam.location = Point(0, 0, 5)
    assert cam.w == (Point(0, 0, 5) - cam.pointing_at).normalized()
    assert dot(cam.u, cam.w) == pytest.approx(0)


def test_changing_target_recomputes_basis():
    cam = make_camera()
    cam.pointing_at = Point(0, 0, -1)
    assert cam.w == (cam.location - Point(0, 0, -1)).normalized()
    assert cam.u.magnitude() == pytest.approx(1.0)