[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoctools"
version = "0.1.0"
description = "Small helpers for puzzle solving: validated ASCII letters, VM registers and operands, and shortest-path search."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "pathfinding", "dijkstra", "astar", "floyd-warshall", "registers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aoctools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
