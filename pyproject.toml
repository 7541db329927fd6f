[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifegrid"
version = "0.1.0"
description = "Conway's Game of Life on a wrapping grid, driven by PGM images, with a live window and keyboard control"
requires-python = ">=3.10"
keywords = ["game of life", "cellular automaton", "pgm", "simulation", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lifegrid = "lifegrid.main:main"

[tool.hatch.build.targets.wheel]
packages = ["lifegrid"]

[tool.pytest.ini_options]
addopts = "-ra"
