[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "delve"
version = "0.1.0"
description = "A small terminal roguelike with random rooms and corridors, field of view, and monsters that close in on the player."
requires-python = ">=3.10"
keywords = ["roguelike", "game", "terminal", "dungeon", "ecs", "pathfinding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
delve = "delve.app:main"

[tool.hatch.build.targets.wheel]
packages = ["delve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
