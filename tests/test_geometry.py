import math

import pytest

from flyby_planner.geometry import (
    PointMap,
    PointSet,
    UnobservablePairSet,
    Vector3,
    calculate_orientation,
    points_match,
)


def test_closed_insert():
    key_inside = Vector3(-6.900000095, -2.5, 0.5)
    closed = PointMap()
    closed[key_inside] = "node"
    assert len(closed) == 1
    assert key_inside in closed
    assert closed[key_inside] == "node"
    to_find = Vector3(-7, -1.599999905, 0.200000003)
    assert to_find not in closed
    assert closed.get(to_find, "missing") == "missing"


def test_map_insert_duplicate():
    closed = PointMap()
    closed[Vector3(-6.3000002, -3.0999999, 0.5000001)] = "first"
    closed[Vector3(-6.3000002, -3.0999999, 0.5000000)] = "second"
    assert len(closed) == 1


def test_map_missing_key_raises():
    closed = PointMap()
    closed[Vector3(0, 0, 0)] = 1
    with pytest.raises(KeyError):
        closed[Vector3(1, 1, 1)]


def test_map_keeps_first_key_and_updates_value():
    closed = PointMap()
    first = Vector3(1.0, 2.0, 3.0)
    closed[first] = "a"
    closed[Vector3(1.00005, 2.0, 3.0)] = "b"
    assert list(closed) == [first]
    assert closed[first] == "b"


def test_point_set_add_reports_uniqueness():
    points = PointSet()
    assert points.add(Vector3(1, 1, 1)) is True
    assert points.add(Vector3(1.00001, 1, 1)) is False
    assert points.add((2, 1, 1)) is True
    assert len(points) == 2
    assert Vector3(2, 1, 1) in points
    assert list(points) == [Vector3(1, 1, 1), Vector3(2, 1, 1)]


def test_point_set_across_cell_boundary():
    points = PointSet([Vector3(-0.00001, 0, 0)])
    assert Vector3(0.00002, 0, 0) in points
    assert Vector3(0.001, 0, 0) not in points


def test_non_positive_tolerance_rejected():
    with pytest.raises(ValueError):
        PointSet(tolerance=0)


def test_vector_operations():
    a = Vector3(1, 0, 0)
    b = Vector3(0, 1, 0)
    assert a.cross(b) == Vector3(0, 0, 1)
    assert a.dot(b) == 0
    assert Vector3(0, 0, 0).distance(Vector3(3, 4, 0)) == pytest.approx(5.0)
    assert Vector3(3, 4, 0).norm() == pytest.approx(5.0)
    assert a + b - a == b
    assert 2 * a == Vector3(2, 0, 0)


@pytest.mark.parametrize(
    "end, expected",
    [
        ((1, 0), 0.0),
        ((0, 1), math.pi / 2),
        ((0, -1), -math.pi / 2),
        ((-1, 0), math.pi),
        ((0, 0), 0.0),
    ],
)
def test_calculate_orientation(end, expected):
    assert calculate_orientation((0, 0), end) == pytest.approx(expected)


def test_calculate_orientation_accepts_vectors():
    result = calculate_orientation(Vector3(1, 1, 5), Vector3(2, 2, -3))
    assert result == pytest.approx(math.pi / 4)


def test_orientation_within_range():
    for angle in range(-179, 181, 7):
        rad = math.radians(angle)
        yaw = calculate_orientation((0, 0), (math.cos(rad), math.sin(rad)))
        assert -math.pi < yaw <= math.pi
        assert yaw == pytest.approx(rad, abs=1e-9)


def test_points_match():
    assert points_match(Vector3(0, 0, 0), Vector3(0.5, 0, 0), 1.0)
    assert not points_match(Vector3(0, 0, 0), Vector3(1.5, 0, 0), 1.0)


def test_unobservable_pair_set():
    pairs = UnobservablePairSet()
    assert pairs.add(Vector3(0, 0, 0), Vector3(5, 5, 5)) is True
    assert pairs.contains(Vector3(0.5, 0, 0), Vector3(5, 5.5, 5))
    assert not pairs.contains(Vector3(0, 0, 0), Vector3(8, 5, 5))
    assert not pairs.contains(Vector3(3, 0, 0), Vector3(5, 5, 5))
    assert pairs.add(Vector3(0.2, 0.2, 0), Vector3(5, 5, 5)) is False
    assert len(pairs) == 1


def test_unobservable_pair_nan_counts_as_match():
    pairs = UnobservablePairSet()
    pairs.add(Vector3(0, 0, 0), Vector3(5, 5, 5))
    assert pairs.contains(Vector3(float("nan"), 0, 0), Vector3(5, 5, 5))