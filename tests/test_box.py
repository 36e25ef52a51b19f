import pytest

from enginecore.box import FLT_MAX, Box
from enginecore.vector import Vector


def unit_box():
    return Box(Vector(-1.0, -1.0, -1.0), Vector(1.0, 1.0, 1.0))


def test_from_points_takes_component_extremes():
    points = [Vector(3.0, -2.0, 5.0), Vector(-1.0, 4.0, 0.5), Vector(2.0, 1.0, -7.0)]
    box = Box.from_points(points)
    assert box.minimum == Vector(-1.0, -2.0, -7.0)
    assert box.maximum == Vector(3.0, 4.0, 5.0)


def test_from_points_contains_every_point():
    points = [Vector(0.1, 9.0, -3.0), Vector(-4.0, 2.5, 8.0), Vector(6.0, -1.0, 0.0)]
    box = Box.from_points(points)
    for p in points:
        assert box.minimum.x <= p.x <= box.maximum.x
        assert box.minimum.y <= p.y <= box.maximum.y
        assert box.minimum.z <= p.z <= box.maximum.z


def test_from_no_points_is_inverted():
    box = Box.from_points([])
    assert box.minimum == Vector(FLT_MAX, FLT_MAX, FLT_MAX)
    assert box.maximum == Vector(-FLT_MAX, -FLT_MAX, -FLT_MAX)


def test_build_aabb_center_and_extent():
    origin = Vector(2.0, -3.0, 4.0)
    half = Vector(1.5, 0.5, 2.0)
    box = Box.build_aabb(origin, half)
    assert box.center() == origin
    assert box.extent() == half * 2.0


def test_default_box_is_degenerate_at_origin():
    box = Box()
    assert box.center() == Vector.zero()
    assert box.extent() == Vector.zero()


def test_ray_hits_from_outside():
    distance = unit_box().intersects(Vector(-5.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0))
    assert distance == pytest.approx(4.0)


def test_hit_point_lies_on_box_surface():
    origin = Vector(-5.0, 0.3, -0.2)
    direction = Vector(2.0, 0.0, 0.0)
    t = unit_box().intersects(origin, direction)
    hit = origin + direction * t
    assert hit.x == pytest.approx(unit_box().minimum.x)


def test_ray_pointing_away_misses():
    assert unit_box().intersects(Vector(5.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0)) is None


def test_ray_passing_beside_misses():
    assert unit_box().intersects(Vector(-5.0, 3.0, 0.0), Vector(1.0, 0.0, 0.0)) is None


def test_parallel_ray_outside_slab_misses():
    assert unit_box().intersects(Vector(0.0, 5.0, 0.0), Vector(0.0, 0.0, 1.0)) is None


def test_ray_from_inside_has_negative_entry():
    t = unit_box().intersects(Vector(0.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0))
    assert t < 0


def test_zero_direction_inside_reports_lowest_bound():
    t = unit_box().intersects(Vector(0.0, 0.0, 0.0), Vector(0.0, 0.0, 0.0))
    assert t == -FLT_MAX