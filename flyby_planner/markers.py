"""Visualisation markers and builders for geofences, arrows and waypoints."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from flyby_planner.geometry import Vector3, as_vector

FRAME_ID = "/map"


class MarkerType(IntEnum):
    ARROW = 0
    CUBE = 1
    SPHERE = 2
    CYLINDER = 3
    LINE_STRIP = 4
    LINE_LIST = 5
    CUBE_LIST = 6
    SPHERE_LIST = 7
    POINTS = 8
    TEXT_VIEW_FACING = 9
    MESH_RESOURCE = 10
    TRIANGLE_LIST = 11


class MarkerAction(IntEnum):
    ADD = 0
    DELETE = 2
    DELETEALL = 3


@dataclass(frozen=True)
class Point:
    """A position in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def of(cls, value: Any) -> Point:
        if isinstance(value, Point):
            return value
        vector = as_vector(value)
        return cls(vector.x, vector.y, vector.z)

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass
class Color:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}


@dataclass
class Marker:
    """A single visualisation marker."""

    frame_id: str = ""
    stamp: float = 0.0
    seq: int = 0
    ns: str = ""
    id: int = 0
    type: MarkerType = MarkerType.ARROW
    action: MarkerAction = MarkerAction.ADD
    position: Point = field(default_factory=Point)
    orientation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    scale: Vector3 = field(default_factory=Vector3)
    color: Color = field(default_factory=Color)
    points: list[Point] = field(default_factory=list)
    lifetime: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        ox, oy, oz, ow = self.orientation
        return {
            "header": {"frame_id": self.frame_id, "stamp": self.stamp, "seq": self.seq},
            "ns": self.ns,
            "id": self.id,
            "type": int(self.type),
            "action": int(self.action),
            "pose": {
                "position": self.position.to_dict(),
                "orientation": {"x": ox, "y": oy, "z": oz, "w": ow},
            },
            "scale": {"x": self.scale.x, "y": self.scale.y, "z": self.scale.z},
            "color": self.color.to_dict(),
            "points": [p.to_dict() for p in self.points],
            "lifetime": self.lifetime,
        }


@dataclass
class MarkerArray:
    markers: list[Marker] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"markers": [m.to_dict() for m in self.markers]}


def _stamp(marker: Marker) -> None:
    marker.frame_id = FRAME_ID
    marker.stamp = time.time()


def build_cube_wire(marker: Marker, geofence_min: Any, geofence_max: Any,
                    color: Any = (1.0, 1.0, 1.0)) -> Marker:
    """Fill the marker with the twelve edges of the box between the two corners."""
    lo, hi = as_vector(geofence_min), as_vector(geofence_max)
    red, green, blue = as_vector(color)
    _stamp(marker)
    marker.type = MarkerType.LINE_LIST
    marker.action = MarkerAction.ADD
    marker.scale = Vector3(0.1, 0.1, 0.1)
    marker.color = Color(red, green, blue, 1.0)
    a = Point(lo.x, lo.y, lo.z)
    b = Point(hi.x, lo.y, lo.z)
    c = Point(lo.x, hi.y, lo.z)
    d = Point(hi.x, hi.y, lo.z)
    e = Point(lo.x, hi.y, hi.z)
    f = Point(hi.x, hi.y, hi.z)
    g = Point(lo.x, lo.y, hi.z)
    h = Point(hi.x, lo.y, hi.z)
    for start, end in ((a, b), (a, g), (a, c), (b, h), (b, d), (g, h),
                       (h, f), (c, d), (c, e), (f, d), (g, e), (e, f)):
        marker.points.extend((start, end))
    return marker


def publish_geofence(geofence_min: Any, geofence_max: Any, marker_array: MarkerArray) -> Marker:
    """Append a white wire box for the geofence to the array."""
    marker = Marker(ns="geofence", id=20, lifetime=0.0)
    build_cube_wire(marker, geofence_min, geofence_max)
    marker_array.markers.append(marker)
    return marker


def build_geofence(geofence_min: Any, geofence_max: Any, marker: Marker, marker_id: int,
                   ns: str, red: float, green: float, blue: float) -> Marker:
    """Fill the marker with a coloured wire box."""
    marker.lifetime = 0.0
    build_cube_wire(marker, geofence_min, geofence_max)
    marker.color.r = red
    marker.color.g = green
    marker.color.b = blue
    marker.ns = ns
    marker.id = marker_id
    return marker


def publish_safety_margin(frontier: Any, safety_margin: float, marker_array: MarkerArray,
                          marker_id: int) -> Marker:
    """Append a wire box of half-side safety_margin around the frontier."""
    center = as_vector(frontier)
    offset = Vector3(safety_margin, safety_margin, safety_margin)
    marker = Marker(ns="frontier_safety_margin", id=marker_id, lifetime=0.0)
    build_cube_wire(marker, center + offset, center - offset)
    marker_array.markers.append(marker)
    return marker


def build_arrow_path(start: Any, goal: Any, request_id: int, marker: Marker, series: int = 9,
                     ns: str = "lazy_theta_star_path") -> Marker:
    """Fill the marker with an arrow from start to goal."""
    _stamp(marker)
    marker.ns = ns
    marker.id = request_id
    marker.type = MarkerType.ARROW
    marker.points.append(Point.of(start))
    marker.points.append(Point.of(goal))
    marker.orientation = (0.0, 0.0, 0.0, 1.0)
    marker.scale = Vector3(0.01, 0.03, 0.0)
    marker.color = Color(series * 0.1, 1.0, 0.0, 1.0)
    marker.action = MarkerAction.ADD
    marker.lifetime = 0.0
    return marker


def build_waypoint(candidate: Any, size: float, color: int, waypoint_id: int, marker: Marker,
                   series: int = 9) -> Marker:
    """Fill the marker with a cube for a path waypoint; series sets its id range and hue."""
    _stamp(marker)
    marker.ns = "lazy_theta_star_waypoint"
    marker.id = waypoint_id + series * 1000
    marker.type = MarkerType.CUBE
    marker.action = MarkerAction.ADD
    marker.position = Point.of(candidate)
    marker.orientation = (0.0, 0.0, 0.0, 1.0)
    marker.scale = Vector3(size, size, size)
    marker.color = Color(series * 0.1, color + 0.4, 1.0, 0.8)
    marker.lifetime = 0.0
    return marker


def create_empty_line_strip(marker_id: int) -> Marker:
    """A line strip with no points, for logging a travelled path."""
    step = 0.2
    marker = Marker(ns="position_log", id=marker_id, type=MarkerType.LINE_STRIP,
                    action=MarkerAction.ADD)
    _stamp(marker)
    marker.position = Point(0.0, 0.0, 0.0)
    marker.orientation = (0.0, 0.0, 0.0, 1.0)
    marker.scale = Vector3(step, step, step)
    marker.color = Color(248, 50, 50, 1.0)
    marker.seq += 1
    return marker