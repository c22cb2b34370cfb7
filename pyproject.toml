[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent24"
version = "0.1.0"
description = "Solvers for a December 2024 set of grid, machine and circuit puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "grid", "pathfinding", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent24-day14 = "advent24.day14:main"
advent24-day15 = "advent24.day15:main"
advent24-day15-wide = "advent24.day15_wide:main"
advent24-day16 = "advent24.day16:main"
advent24-day17 = "advent24.day17:main"
advent24-day18 = "advent24.day18:main"
advent24-day19 = "advent24.day19:main"
advent24-day20 = "advent24.day20:main"
advent24-day22 = "advent24.day22:main"
advent24-day24 = "advent24.day24:main"

[tool.hatch.build.targets.wheel]
packages = ["advent24"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
