[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flyby_planner"
version = "0.1.0"
description = "Observation flyby planning, frontier geometry, geofence volumes and visualization markers for aerial exploration"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exploration",
    "uav",
    "frontiers",
    "geofence",
    "path-planning",
    "visualization",
    "markers",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flyby_planner"]

[tool.hatch.build.targets.sdist]
include = ["flyby_planner", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
