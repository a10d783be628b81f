"""How much of a set of cubic cells lies inside an axis-aligned geofence."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from flyby_planner.geometry import Vector3, as_vector
from flyby_planner.voxel import Voxel


def size_inside_geofence_min(side_min: float, side_max: float, size: float, minimum: float) -> float:
    """Length of a cell side that lies above the geofence's lower bound on one axis."""
    if side_max <= minimum:
        return 0.0
    if side_min >= minimum:
        return size
    return abs(minimum - side_max)


def size_inside_geofence_max(side_min: float, side_max: float, size: float, maximum: float) -> float:
    """Length of a cell side that lies below the geofence's upper bound on one axis."""
    if side_min >= maximum:
        return 0.0
    if side_max <= maximum:
        return size
    return abs(maximum - side_min)


def one_side(side_min: float, side_max: float, size: float, minimum: float, maximum: float) -> float:
    """Length of a cell side that lies between both geofence bounds on one axis."""
    inside_min = size_inside_geofence_min(side_min, side_max, size, minimum)
    inside_max = size_inside_geofence_max(side_min, side_max, size, maximum)
    if inside_min > 0 and inside_max > 0:
        return min(inside_min, inside_max)
    return 0.0


def volume_inside_geofence(minimum: Any, maximum: Any, center: Any, size: float) -> float:
    """Volume of the cube with this centre and side length that lies inside the geofence."""
    minimum, maximum, center = as_vector(minimum), as_vector(maximum), as_vector(center)
    half = size / 2
    offset = Vector3(half, half, half)
    side_max = center + offset
    side_min = center - offset

    side_x = one_side(side_min.x, side_max.x, size, minimum.x, maximum.x)
    if side_x == 0:
        return 0.0
    side_y = one_side(side_min.y, side_max.y, size, minimum.y, maximum.y)
    if side_y == 0:
        return 0.0
    side_z = one_side(side_min.z, side_max.z, size, minimum.z, maximum.z)
    return side_x * side_y * side_z


def _leaf_center_and_size(leaf: Any) -> tuple[Vector3, float]:
    if isinstance(leaf, Voxel):
        return Vector3(leaf.x, leaf.y, leaf.z), leaf.size
    center, size = leaf
    return as_vector(center), float(size)


def calculate_volume(leaves: Iterable[Any], minimum: Any, maximum: Any) -> float:
    """Total volume of the leaves inside the geofence.

    Each leaf is a Voxel or a (centre, side length) pair.
    """
    total = 0.0
    for leaf in leaves:
        center, size = _leaf_center_and_size(leaf)
        total += volume_inside_geofence(minimum, maximum, center, size)
    return total