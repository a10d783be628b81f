"""Voxels and a distance-ordered collection of neighbouring voxels."""

from __future__ import annotations

import bisect
import math
from collections.abc import Iterator
from dataclasses import dataclass, replace


@dataclass
class Voxel:
    """An axis-aligned cube given by its centre and side length."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    size: float = 0.0

    def is_in_z_level(self, z_level: float) -> bool:
        """True when the horizontal plane at z_level cuts through the voxel."""
        half = self.size / 2
        return self.z - half <= z_level <= self.z + half

    def display_string(self) -> str:
        return f"({self.x:f}; {self.y:f} )"

    def __str__(self) -> str:
        return f"({self.x:g}; {self.y:g}; {self.z:g} ) x {self.size:g}"


def _distance(a: Voxel, b: Voxel) -> float:
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2)


class OrderedNeighbors:
    """Voxels kept in order of their distance from a fixed position.

    Each stored voxel carries that distance as its size; a voxel at the same
    distance as one already held is not added.
    """

    def __init__(self, current_position: Voxel) -> None:
        self.current_position = current_position
        self._distances: list[float] = []
        self._neighbors: list[Voxel] = []

    def insert(self, neighbor: Voxel) -> bool:
        """Store the neighbour with its distance as size; report whether it was added."""
        distance = _distance(neighbor, self.current_position)
        index = bisect.bisect_left(self._distances, distance)
        if index < len(self._distances) and self._distances[index] == distance:
            return False
        self._distances.insert(index, distance)
        self._neighbors.insert(index, replace(neighbor, size=distance))
        return True

    def build_message_list(self, frontier_amount: int) -> list[Voxel]:
        """The nearest neighbours, at most frontier_amount of them."""
        if frontier_amount <= 0:
            return []
        return self._neighbors[:frontier_amount]

    def __len__(self) -> int:
        return len(self._neighbors)

    def __iter__(self) -> Iterator[Voxel]:
        return iter(self._neighbors)