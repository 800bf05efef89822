[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchlab"
version = "0.1.0"
description = "Classic search and optimisation algorithms: A* 8-puzzle, BFS/DFS, greedy graph algorithms, N-Queens and a small expert system"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "a-star",
    "8-puzzle",
    "bfs",
    "dfs",
    "dijkstra",
    "prim",
    "kruskal",
    "n-queens",
    "expert-system",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchlab-puzzle = "searchlab.puzzle:main"
searchlab-expert = "searchlab.expert:main"
searchlab-greedy = "searchlab.greedy:main"
searchlab-queens = "searchlab.queens:main"

[tool.hatch.build.targets.wheel]
packages = ["searchlab"]

[tool.pytest.ini_options]
addopts = "-ra"
