[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grafo"
version = "0.1.0"
description = "Simple undirected graphs on an adjacency matrix: walks, paths, bipartiteness checks and greedy vertex colouring"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bipartite", "coloring", "adjacency matrix"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grafo-demo = "grafo.demo:main"
grafo-bipartite = "grafo.bipartite_cli:main"
grafo-coloring = "grafo.coloring_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["grafo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
