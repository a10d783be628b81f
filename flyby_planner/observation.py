"""Observation manoeuvres: fly-by segments placed on a circle around a frontier."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from flyby_planner.geometry import Vector3, as_vector

_UP = Vector3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class ObservationPair:
    """A straight fly-by segment, from start to end."""

    start: Vector3 = field(default_factory=Vector3)
    end: Vector3 = field(default_factory=Vector3)


TranslateFunc = Callable[[Vector3, Vector3, Vector3, Vector3, Vector3], ObservationPair]


def generate_circle_points(point_number: int) -> list[Vector3]:
    """Evenly spaced points on the unit circle in the horizontal plane, starting at (1, 0, 0)."""
    if point_number < 0:
        raise ValueError(f"point_number must not be negative, got {point_number!r}")
    if point_number == 0:
        return []
    interval = (2 * math.pi) / point_number
    return [
        Vector3(math.cos(interval * index), math.sin(interval * index), 0.0)
        for index in range(point_number)
    ]


def precalculation(
    radius: float, point_number: int, distance_in_front: float, distance_behind: float
) -> tuple[list[Vector3], list[Vector3], list[Vector3]]:
    """Fly-by templates around the origin.

    Returns the segment starts, the segment ends and the unit flight directions,
    one of each per circle point. Each direction is tangent to the circle.
    """
    circle = generate_circle_points(point_number)
    directions = [_UP.cross(point) for point in circle]
    starts = [point * radius - direction * distance_behind
              for point, direction in zip(circle, directions)]
    ends = [point * radius + direction * distance_in_front
            for point, direction in zip(circle, directions)]
    return starts, ends, directions


def translate(motion_direction: Any, start_zero: Any, end_zero: Any, direction_zero: Any,
              frontier: Any) -> ObservationPair:
    """Move a template segment so that it circles the frontier."""
    frontier = as_vector(frontier)
    return ObservationPair(frontier + as_vector(start_zero), frontier + as_vector(end_zero))


def translate_adjust_direction(motion_direction: Any, start_zero: Any, end_zero: Any,
                               direction_zero: Any, frontier: Any) -> ObservationPair:
    """Move a template segment to the frontier, reversed when it points against the motion."""
    frontier = as_vector(frontier)
    start = frontier + as_vector(start_zero)
    end = frontier + as_vector(end_zero)
    if as_vector(direction_zero).dot(as_vector(motion_direction)) >= 0:
        return ObservationPair(start, end)
    return ObservationPair(end, start)


class ObservationPairs:
    """Walks through the fly-by segments around the current frontier, one at a time."""

    def __init__(self, circle_divisions: int, distance_to_target: float,
                 distance_in_front: float, distance_behind: float,
                 translate_func: TranslateFunc = translate) -> None:
        self.circle_divisions = circle_divisions
        self.translate_func = translate_func
        self._starts, self._ends, self._directions = precalculation(
            distance_to_target, circle_divisions, distance_in_front, distance_behind
        )
        self._index = circle_divisions
        self.frontier = Vector3()
        self.motion_direction = Vector3()
        self._current = ObservationPair()

    def new_frontier(self, frontier: Any, uav_position: Any) -> None:
        """Aim at a new frontier, approached from the given position, and rewind."""
        self.frontier = as_vector(frontier)
        self.motion_direction = self.frontier - as_vector(uav_position)
        self._index = 0

    def next(self) -> bool:
        """Advance to the next segment; False once every segment has been visited."""
        if self._index >= self.circle_divisions:
            return False
        i = self._index
        self._current = self.translate_func(
            self.motion_direction, self._starts[i], self._ends[i], self._directions[i],
            self.frontier,
        )
        self._index += 1
        return True

    def __iter__(self) -> Iterator[ObservationPair]:
        while self.next():
            yield self._current

    def current_start(self) -> Vector3:
        return self._current.start

    def current_end(self) -> Vector3:
        return self._current.end