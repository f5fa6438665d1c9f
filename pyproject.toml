[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "hyperpress"
version = "0.1.0"
description = "Hybrid Huffman and fixed-width compression of hypergraphs, with component, BFS, k-core, label propagation and PageRank analyses"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hypergraph",
    "compression",
    "huffman",
    "graph-analytics",
    "pagerank",
    "k-core",
    "label-propagation",
    "bfs",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hyperpress = "hyperpress.cli:main"

[tool.setuptools.packages.find]
include = ["hyperpress*"]

[tool.pytest.ini_options]
addopts = "-ra"
