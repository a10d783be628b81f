"""Vector arithmetic and point containers that compare points within a tolerance."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import product
from typing import Any, Generic, TypeVar

POINT_TOLERANCE = 0.0001
PAIR_TOLERANCE = 1.0

T = TypeVar("T")

_OFFSETS = tuple(product((-1, 0, 1), repeat=3))


@dataclass(frozen=True)
class Vector3:
    """An immutable point or direction in three dimensions."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def distance(self, other: Vector3) -> float:
        return (self - other).norm()

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; a zero vector is returned unchanged."""
        length = self.norm()
        if length == 0:
            return self
        return self / length


def as_vector(point: Any) -> Vector3:
    """Accept a Vector3 or any three-number sequence."""
    if isinstance(point, Vector3):
        return point
    x, y, z = point
    return Vector3(float(x), float(y), float(z))


def _planar(point: Any) -> tuple[float, float]:
    if isinstance(point, Vector3):
        return point.x, point.y
    x, y, *_ = point
    return float(x), float(y)


def calculate_orientation(start: Any, end: Any) -> float:
    """Yaw in radians, within (-pi, pi], of the planar direction from start to end.

    Identical points give 0.
    """
    sx, sy = _planar(start)
    ex, ey = _planar(end)
    dx, dy = ex - sx, ey - sy
    length = math.hypot(dx, dy)
    if length == 0 or math.isnan(length):
        return 0.0
    dx /= length
    dy /= length
    result = math.acos(max(-1.0, min(1.0, dx)))
    if dy < 0:
        result = 2 * math.pi - result
    if result > math.pi:
        result = -(2 * math.pi - result)
    return result


def points_match(lhs: Vector3, rhs: Vector3, tolerance: float) -> bool:
    """True when the two points lie within tolerance of each other."""
    return as_vector(lhs).distance(as_vector(rhs)) <= tolerance


def _lenient_distance(lhs: Vector3, rhs: Vector3) -> float:
    distance = lhs.distance(rhs)
    return 0.0 if math.isnan(distance) else distance


class _Grid(Generic[T]):
    """Buckets items by the cell their point falls in, for neighbourhood lookups."""

    def __init__(self, tolerance: float) -> None:
        if not tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {tolerance!r}")
        self._cell = 2 * tolerance
        self._buckets: dict[tuple[int, int, int], list[T]] = {}
        self._unplaced: list[T] = []

    def _key(self, point: Vector3) -> tuple[int, int, int] | None:
        try:
            return (
                math.floor(point.x / self._cell),
                math.floor(point.y / self._cell),
                math.floor(point.z / self._cell),
            )
        except (ValueError, OverflowError):
            return None

    def near(self, point: Vector3) -> Iterator[T]:
        yield from self._unplaced
        key = self._key(point)
        if key is None:
            for bucket in self._buckets.values():
                yield from bucket
            return
        kx, ky, kz = key
        for ox, oy, oz in _OFFSETS:
            bucket = self._buckets.get((kx + ox, ky + oy, kz + oz))
            if bucket:
                yield from bucket

    def insert(self, point: Vector3, item: T) -> None:
        key = self._key(point)
        if key is None:
            self._unplaced.append(item)
        else:
            self._buckets.setdefault(key, []).append(item)


class PointSet:
    """A set of points in which points closer than the tolerance count as one."""

    def __init__(self, points: Iterable[Any] = (), tolerance: float = POINT_TOLERANCE) -> None:
        self.tolerance = tolerance
        self._grid: _Grid[Vector3] = _Grid(tolerance)
        self._points: list[Vector3] = []
        for point in points:
            self.add(point)

    def _find(self, point: Vector3) -> Vector3 | None:
        return next(
            (p for p in self._grid.near(point) if p.distance(point) <= self.tolerance),
            None,
        )

    def add(self, point: Any) -> bool:
        """Add the point unless a matching one is present; report whether it was added."""
        point = as_vector(point)
        if self._find(point) is not None:
            return False
        self._grid.insert(point, point)
        self._points.append(point)
        return True

    def __contains__(self, point: Any) -> bool:
        return self._find(as_vector(point)) is not None

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Vector3]:
        return iter(self._points)


class PointMap:
    """A mapping keyed by points, where keys closer than the tolerance are the same key."""

    def __init__(self, tolerance: float = POINT_TOLERANCE) -> None:
        self.tolerance = tolerance
        self._grid: _Grid[list[Any]] = _Grid(tolerance)
        self._entries: list[list[Any]] = []

    def _find(self, point: Vector3) -> list[Any] | None:
        return next(
            (e for e in self._grid.near(point) if e[0].distance(point) <= self.tolerance),
            None,
        )

    def __setitem__(self, point: Any, value: Any) -> None:
        point = as_vector(point)
        entry = self._find(point)
        if entry is not None:
            entry[1] = value
            return
        entry = [point, value]
        self._grid.insert(point, entry)
        self._entries.append(entry)

    def __getitem__(self, point: Any) -> Any:
        entry = self._find(as_vector(point))
        if entry is None:
            raise KeyError(point)
        return entry[1]

    def __contains__(self, point: Any) -> bool:
        return self._find(as_vector(point)) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Vector3]:
        return (entry[0] for entry in self._entries)

    def get(self, point: Any, default: Any = None) -> Any:
        entry = self._find(as_vector(point))
        return default if entry is None else entry[1]

    def items(self) -> Iterator[tuple[Vector3, Any]]:
        return ((entry[0], entry[1]) for entry in self._entries)


class UnobservablePairSet:
    """Pairs of an unobservable point and a viewpoint, matched loosely.

    Two pairs match when both their points lie within the tolerance of each other;
    a distance that cannot be computed counts as zero.
    """

    def __init__(self, tolerance: float = PAIR_TOLERANCE) -> None:
        self.tolerance = tolerance
        self._grid: _Grid[tuple[Vector3, Vector3]] = _Grid(tolerance)
        self._pairs: list[tuple[Vector3, Vector3]] = []

    def _matches(self, unobservable: Vector3, viewpoint: Vector3) -> bool:
        return any(
            _lenient_distance(u, unobservable) <= self.tolerance
            and _lenient_distance(v, viewpoint) <= self.tolerance
            for u, v in self._grid.near(unobservable)
        )

    def add(self, unobservable: Any, viewpoint: Any) -> bool:
        """Record the pair unless a matching one is present; report whether it was added."""
        unobservable, viewpoint = as_vector(unobservable), as_vector(viewpoint)
        if self._matches(unobservable, viewpoint):
            return False
        pair = (unobservable, viewpoint)
        self._grid.insert(unobservable, pair)
        self._pairs.append(pair)
        return True

    def contains(self, unobservable: Any, viewpoint: Any) -> bool:
        return self._matches(as_vector(unobservable), as_vector(viewpoint))

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[tuple[Vector3, Vector3]]:
        return iter(self._pairs)