import math

import pytest

from flyby_planner.geometry import Vector3
from flyby_planner.observation import (
    ObservationPair,
    ObservationPairs,
    generate_circle_points,
    precalculation,
    translate,
    translate_adjust_direction,
)

TOLERANCE = 0.0000000001
HALF = 1.0 / 2.0
ROOT = math.sqrt(3) / 2


def test_generate_circle_12():
    points = generate_circle_points(12)
    assert len(points) == 12
    expected = {
        1: (ROOT, HALF),
        2: (HALF, ROOT),
        4: (-HALF, ROOT),
        5: (-ROOT, HALF),
        6: (-1, 0),
        7: (-ROOT, -HALF),
        8: (-HALF, -ROOT),
        9: (0, -1),
        10: (HALF, -ROOT),
        11: (ROOT, -HALF),
    }
    for index, (x, y) in expected.items():
        assert points[index].x == pytest.approx(x, abs=TOLERANCE)
        assert points[index].y == pytest.approx(y, abs=TOLERANCE)
        assert points[index].z == 0


def test_generate_circle_4():
    points = generate_circle_points(4)
    assert len(points) == 4
    assert points[0].x == 1
    assert points[0].y == pytest.approx(0, abs=TOLERANCE)
    assert points[0].z == 0
    assert points[1].x == pytest.approx(0, abs=TOLERANCE)
    assert points[1].y == pytest.approx(1, abs=TOLERANCE)
    assert points[2].x == pytest.approx(-1, abs=TOLERANCE)
    assert points[2].y == pytest.approx(0, abs=TOLERANCE)
    assert points[3].x == pytest.approx(0, abs=TOLERANCE)
    assert points[3].y == pytest.approx(-1, abs=TOLERANCE)
    assert all(p.z == 0 for p in points)


def test_generate_circle_rejects_negative_count():
    with pytest.raises(ValueError):
        generate_circle_points(-1)


def test_directions():
    _, _, directions = precalculation(1, 4, 1, 1)
    expected = [(0, 1, 0), (-1, 0, 0), (0, -1, 0), (1, 0, 0)]
    for direction, (x, y, z) in zip(directions, expected):
        assert direction.x == pytest.approx(x, abs=TOLERANCE)
        assert direction.y == pytest.approx(y, abs=TOLERANCE)
        assert direction.z == pytest.approx(z, abs=TOLERANCE)


def test_precalculation_segment_lengths_and_radius():
    starts, ends, directions = precalculation(2.0, 8, 1.5, 0.5)
    for start, end, direction in zip(starts, ends, directions):
        assert start.distance(end) == pytest.approx(2.0)
        midpoint_offset = (end - start).normalized()
        assert midpoint_offset.distance(direction) == pytest.approx(0, abs=TOLERANCE)


def test_translate_moves_to_frontier():
    frontier = Vector3(1, 2, 3)
    pair = translate(Vector3(1, 0, 0), Vector3(1, -1, 0), Vector3(1, 1, 0), Vector3(0, 1, 0), frontier)
    assert pair == ObservationPair(Vector3(2, 1, 3), Vector3(2, 3, 3))


def test_translate_adjust_direction_swaps_when_against_motion():
    frontier = Vector3(0, 12, 0)
    start_zero, end_zero, direction = Vector3(1, -1, 0), Vector3(1, 1, 0), Vector3(0, 1, 0)
    along = translate_adjust_direction(Vector3(0, 12, 0), start_zero, end_zero, direction, frontier)
    against = translate_adjust_direction(Vector3(0, -12, 0), start_zero, end_zero, direction, frontier)
    assert along == translate(Vector3(0, 12, 0), start_zero, end_zero, direction, frontier)
    assert against.start == along.end
    assert against.end == along.start


def test_pairs_empty_before_frontier():
    pairs = ObservationPairs(4, 1, 1, 1)
    assert pairs.next() is False
    assert list(pairs) == []


def test_pairs_iterate_each_division_once():
    pairs = ObservationPairs(6, 2.0, 1.0, 1.0, translate_adjust_direction)
    pairs.new_frontier(Vector3(0, 12, 0), Vector3(0, 0, 0))
    found = list(pairs)
    assert len(found) == 6
    assert pairs.next() is False
    motion = Vector3(0, 12, 0)
    for pair in found:
        assert (pair.end - pair.start).dot(motion) >= -TOLERANCE


def test_pairs_current_tracks_next():
    pairs = ObservationPairs(4, 1, 1, 1)
    pairs.new_frontier(Vector3(0, 12, 0), Vector3(0, 0, 0))
    assert pairs.next() is True
    assert pairs.current_start().x == pytest.approx(1)
    assert pairs.current_start().y == pytest.approx(11)
    assert pairs.current_end().y == pytest.approx(13)


def test_pairs_rewind_on_new_frontier():
    pairs = ObservationPairs(3, 1, 1, 1)
    pairs.new_frontier(Vector3(0, 0, 0), Vector3(-1, 0, 0))
    first = list(pairs)
    pairs.new_frontier(Vector3(0, 0, 0), Vector3(-1, 0, 0))
    assert list(pairs) == first