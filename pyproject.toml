[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snsgraph"
version = "1.0.0"
description = "Undirected social-network graphs read from text files, with set, degree, list, matrix and BFS/DFS reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "social network", "adjacency list", "adjacency matrix", "bfs", "dfs"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
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

[project.scripts]
snsgraph = "snsgraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["snsgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
