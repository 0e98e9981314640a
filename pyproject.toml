[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yulepuzzles"
version = "0.1.0"
description = "Solvers for thirteen days of grid, number and parsing puzzles, each with two parts."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "grid", "solver", "recreational"]
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
yulepuzzles-day01 = "yulepuzzles.day01:main"
yulepuzzles-day02 = "yulepuzzles.day02:main"
yulepuzzles-day03 = "yulepuzzles.day03:main"
yulepuzzles-day04 = "yulepuzzles.day04:main"
yulepuzzles-day05 = "yulepuzzles.day05:main"
yulepuzzles-day06 = "yulepuzzles.day06:main"
yulepuzzles-day07 = "yulepuzzles.day07:main"
yulepuzzles-day08 = "yulepuzzles.day08:main"
yulepuzzles-day09 = "yulepuzzles.day09:main"
yulepuzzles-day10 = "yulepuzzles.day10:main"
yulepuzzles-day11 = "yulepuzzles.day11:main"
yulepuzzles-day12 = "yulepuzzles.day12:main"
yulepuzzles-day13 = "yulepuzzles.day13:main"

[tool.hatch.build.targets.wheel]
packages = ["yulepuzzles"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
