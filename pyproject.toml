[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algonotes"
version = "0.1.0"
description = "Classic data structures and algorithms for study: lists, trees, graphs, flows, dynamic programming and a Rubik's cube model with a layer-by-layer solver."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "graphs",
    "avl-tree",
    "union-find",
    "huffman",
    "max-flow",
    "minimum-spanning-tree",
    "rubiks-cube",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algonotes-union-find = "algonotes.disjoint_set:main"
algonotes-permutations = "algonotes.permutation:main"
algonotes-gcd = "algonotes.number_theory:main"
algonotes-hanoi = "algonotes.hanoi:main"
algonotes-knapsack = "algonotes.knapsack:main"
algonotes-closure = "algonotes.closure:main"
algonotes-bridges = "algonotes.bridges:main"
algonotes-mst = "algonotes.mst:main"
algonotes-euler = "algonotes.euler:main"
algonotes-maxflow = "algonotes.maxflow:main"
algonotes-persistent = "algonotes.persistent:main"
algonotes-huffman = "algonotes.huffman:main"
algonotes-abc = "algonotes.abc_sequence:main"
algonotes-avl = "algonotes.avl:main"
algonotes-tree = "algonotes.bracket_tree:main"
algonotes-threaded = "algonotes.threaded:main"
algonotes-rebuild-tree = "algonotes.traversal_tree:main"
algonotes-cube = "algonotes.solve_upper:main"
algonotes-cube-survey = "algonotes.cube_survey:main"

[tool.hatch.build.targets.wheel]
packages = ["algonotes"]

[tool.hatch.build.targets.sdist]
include = ["algonotes", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
