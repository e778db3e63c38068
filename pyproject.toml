[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubmaze"
version = "0.1.0"
description = "Grid maze explorer: parses .cub scene files and shows a top-down minimap with a movable player and a view ray"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["maze", "minimap", "cub", "xpm", "game", "grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubmaze = "cubmaze.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cubmaze"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
