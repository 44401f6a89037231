[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trafsim"
version = "0.1.0"
description = "Building blocks for a grid-based road traffic simulation: tiles, roads, traffic lights, buildings and cars"
requires-python = ">=3.10"
dependencies = []
keywords = ["traffic", "simulation", "roads", "traffic-lights", "pathfinding", "grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trafsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
