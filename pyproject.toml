[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphpaths"
version = "0.1.0"
description = "Graph algorithms: grid searches, shortest paths, cycles, spanning trees and strongly connected components"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "algorithms",
    "shortest-path",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "union-find",
    "scc",
    "bfs",
    "dfs",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["graphpaths"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
