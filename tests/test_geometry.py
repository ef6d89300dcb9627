import math

import pytest

from zappyview.geometry import BoundingBox, Ray, Rectangle, Vector3


def test_scaled_multiplies_length():
    v = Vector3(1.5, -2.0, 0.5)
    assert math.isclose(v.scaled(3.0).length(), 3.0 * v.length())


def test_scaled_components():
    assert Vector3(1.0, 2.0, 3.0).scaled(2.0) == Vector3(2.0, 4.0, 6.0)


def test_add_and_sub_round_trip():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 7.0)
    assert (a + b) - b == a


def test_zero_vector_has_zero_length():
    assert Vector3().length() == 0.0


@pytest.fixture
def unit_box():
    return BoundingBox(Vector3(-1.0, 0.0, -1.0), Vector3(1.0, 1.0, 1.0))


def test_ray_towards_box_hits(unit_box):
    ray = Ray(Vector3(0.0, 0.5, -5.0), Vector3(0.0, 0.0, 1.0))
    assert unit_box.intersects(ray) is True


def test_ray_away_from_box_misses(unit_box):
    ray = Ray(Vector3(0.0, 0.5, -5.0), Vector3(0.0, 0.0, -1.0))
    assert unit_box.intersects(ray) is False


def test_ray_passing_beside_box_misses(unit_box):
    ray = Ray(Vector3(3.0, 0.5, -5.0), Vector3(0.0, 0.0, 1.0))
    assert unit_box.intersects(ray) is False


def test_ray_from_inside_hits(unit_box):
    ray = Ray(Vector3(0.0, 0.5, 0.0), Vector3(1.0, 0.0, 0.0))
    assert unit_box.intersects(ray) is True


def test_diagonal_ray_hits(unit_box):
    ray = Ray(Vector3(-5.0, 5.5, -5.0), Vector3(1.0, -1.0, 1.0))
    assert unit_box.intersects(ray) is True


def test_rectangle_left_top_edge_included():
    rect = Rectangle(10.0, 20.0, 30.0, 40.0)
    assert rect.contains(10.0, 20.0) is True


def test_rectangle_right_bottom_edge_excluded():
    rect = Rectangle(10.0, 20.0, 30.0, 40.0)
    assert rect.contains(40.0, 30.0) is False
    assert rect.contains(20.0, 60.0) is False


def test_rectangle_outside_point():
    rect = Rectangle(0.0, 0.0, 5.0, 5.0)
    assert rect.contains(-0.1, 2.0) is False