"""Bridges of an undirected graph by Tarjan's low-link values."""

from __future__ import annotations

import argparse
import itertools
import sys

from algonotes.graph import Graph


def find_bridges(graph: Graph) -> list[tuple[int, int]]:
    """Bridges as ``(parent, child)`` pairs of the depth-first tree.

    ``graph`` holds each undirected edge as two directed edges.
    """
    index: dict[int, int] = {}
    low: dict[int, int] = {}
    bridges: list[tuple[int, int]] = []
    clock = itertools.count(1)
    for root in range(graph.size):
        if root in index:
            continue
        index[root] = low[root] = next(clock)
        stack = [(root, -1, iter(graph.neighbours(root)))]
        while stack:
            v, parent, pending = stack[-1]
            for p in pending:
                if p not in index:
                    index[p] = low[p] = next(clock)
                    stack.append((p, v, iter(graph.neighbours(p))))
                    break
                if p != parent:
                    low[v] = min(low[v], index[p])
            else:
                stack.pop()
                if stack:
                    u = stack[-1][0]
                    low[u] = min(low[u], low[v])
                    if low[v] > index[u]:
                        bridges.append((u, v))
    return bridges


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and m undirected edges; print every bridge."""
    argparse.ArgumentParser(description="Find bridges of an undirected graph.").parse_args(argv)
    tokens = [int(tok) for tok in sys.stdin.read().split()]
    n, m = tokens[0], tokens[1]
    graph = Graph(n)
    flat = tokens[2 : 2 + 2 * m]
    for x, y in zip(flat[::2], flat[1::2]):
        graph.add_edge(x, y)
        graph.add_edge(y, x)
    for u, v in find_bridges(graph):
        print(f"Bridge: {u} - {v}")