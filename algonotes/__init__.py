"""Classic data structures and algorithms for study: containers, trees, graphs, flows, dynamic programming and a cube solver."""

__version__ = "0.1.0"