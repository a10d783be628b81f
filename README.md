# flyby_planner

Building blocks for autonomous aerial exploration. The package plans
observation flybys around unexplored frontiers. It also does the geometry
and geofence volume calculations that such a planner needs, and it builds
visualization marker objects for geofences, arrows and waypoints.

## Installation

```
pip install .
```

To install the test suite's requirements and run it:

```
pip install ".[test]"
pytest
```

## Modules

### `flyby_planner.geometry`

- `Vector3` is an immutable 3-D vector. It supports `+`, `-` and scalar `*`
  and `/`, and has the methods `dot`, `cross`, `norm`, `distance` and
  `normalized`.
- `calculate_orientation(start, end)` returns the yaw, in radians within
  (-pi, pi], of the planar direction from `start` to `end`. It returns 0
  when the two points are the same.
- `points_match(lhs, rhs, tolerance)` reports whether two points lie
  within `tolerance` of each other.
- `PointSet` and `PointMap` are a set and a mapping. Points closer than
  the tolerance count as the same point or the same key. The default
  tolerance is 0.0001.
- `UnobservablePairSet` holds pairs of an unobservable point and a
  viewpoint. Two pairs match when both of their points lie within the
  tolerance of each other. The default tolerance is 1.0.

### `flyby_planner.voxel`

- `Voxel` is a cube given by its centre and side length. `is_in_z_level`
  tells whether a horizontal plane cuts through the cube.
- `OrderedNeighbors` keeps voxels sorted by their distance from a fixed
  position. Each stored voxel carries that distance as its `size`.
  `build_message_list(n)` returns the `n` nearest voxels.

### `flyby_planner.volume`

Works out how much of a cubic cell, or of a set of cells, lies inside an
axis-aligned geofence. It provides `size_inside_geofence_min`,
`size_inside_geofence_max`, `one_side`, `volume_inside_geofence` and
`calculate_volume`. `calculate_volume` accepts `Voxel`s or
`(centre, side length)` pairs.

### `flyby_planner.observation`

- `generate_circle_points(n)` returns `n` evenly spaced points on the
  horizontal unit circle.
- `precalculation(radius, n, distance_in_front, distance_behind)` returns
  three lists for the flyby segments laid out around the origin: the
  starts, the ends and the tangent directions.
- `translate` moves a segment onto a frontier. `translate_adjust_direction`
  does the same, and reverses the segment when it points against the
  vehicle's motion.
- `ObservationPairs` walks through the segments around a frontier. Call
  `new_frontier(frontier, uav_position)` first, then step with `next()` or
  iterate over the object to get `ObservationPair`s.

### `flyby_planner.markers`

`Marker` and `MarkerArray` are plain data classes. Each has a `to_dict`
method. Builders fill them in:

- `build_cube_wire`, `publish_geofence`, `build_geofence` and
  `publish_safety_margin` draw wire boxes.
- `build_arrow_path` draws arrows.
- `build_waypoint` draws waypoint cubes.
- `create_empty_line_strip` creates an empty line strip for a path log.

## Example

```python
from flyby_planner.observation import ObservationPairs, translate_adjust_direction
from flyby_planner.volume import one_side

# A cell spans 0..2 on one axis and the fence spans 1..5 on that axis.
print(one_side(0, 2, 2, 1, 5))  # 1

pairs = ObservationPairs(4, 1.0, 1.0, 1.0, translate_adjust_direction)
pairs.new_frontier((0, 12, 0), (0, 0, 0))
for pair in pairs:
    print(pair.start, pair.end)
```

## What this package does not do

This is a library only. It installs no command and runs no service. It
does not connect to any messaging system. The marker builders return or
fill in objects in memory, and sending them anywhere is left to the
caller. The package does not read or keep occupancy maps, so it does not
search a map for frontiers or plan paths through one.