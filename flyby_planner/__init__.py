"""Observation flyby planning, frontier geometry, geofence volumes and marker building."""

__version__ = "0.1.0"