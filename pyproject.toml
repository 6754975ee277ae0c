[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphwork"
version = "0.1.0"
description = "Classic graph algorithms: traversals, shortest paths, spanning trees, union-find and grid problems."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "algorithms",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "union-find",
    "bfs",
    "dfs",
    "topological-sort",
    "mst",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["graphwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
