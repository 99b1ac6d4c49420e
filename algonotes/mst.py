"""Minimum spanning trees by Prim's and Kruskal's algorithms."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections.abc import Iterable

from algonotes.disjoint_set import UnionFind

Edge = tuple[int, int, int]


class DisconnectedGraphError(ValueError):
    """Raised when a graph has no spanning tree."""


def _checked(n: int, edges: Iterable[Edge]) -> list[Edge]:
    if n < 0:
        raise ValueError("node count must not be negative")
    edge_list = list(edges)
    for u, v, _ in edge_list:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) leaves the nodes 1..{n}")
    return edge_list


def prim(n: int, edges: Iterable[Edge]) -> int:
    """Weight of a minimum spanning tree of the undirected graph on nodes 1..n.

    Raises DisconnectedGraphError when some node cannot be reached from node 1.
    """
    edge_list = _checked(n, edges)
    if n == 0:
        return 0
    adjacency: dict[int, list[tuple[int, int]]] = {node: [] for node in range(1, n + 1)}
    for u, v, w in edge_list:
        adjacency[u].append((v, w))
        adjacency[v].append((u, w))

    best: dict[int, float] = {node: math.inf for node in adjacency}
    best[1] = 0
    visited: set[int] = set()
    total = 0
    heap = [(0, 1)]
    while heap and len(visited) < n:
        _, u = heapq.heappop(heap)
        if u in visited:
            continue
        visited.add(u)
        total += best[u]
        for v, w in adjacency[u]:
            if v not in visited and best[v] > w:
                best[v] = w
                heapq.heappush(heap, (w, v))
    if len(visited) < n:
        raise DisconnectedGraphError("the graph is not connected")
    return int(total)


def kruskal(n: int, edges: Iterable[Edge]) -> int:
    """Weight of a minimum spanning forest of the undirected graph on nodes 1..n."""
    edge_list = _checked(n, edges)
    sets = UnionFind(n + 1)
    total = 0
    for u, v, w in sorted(edge_list, key=lambda edge: edge[2]):
        if sets.find(u) != sets.find(v):
            sets.union(u, v)
            total += w
    return total


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and m edges ``u v w``; print the spanning tree weight."""
    parser = argparse.ArgumentParser(description="Minimum spanning tree weight.")
    parser.add_argument("--kruskal", action="store_true", help="use Kruskal's algorithm")
    args = parser.parse_args(argv)
    tokens = [int(tok) for tok in sys.stdin.read().split()]
    n, m = tokens[0], tokens[1]
    flat = tokens[2 : 2 + 3 * m]
    edges = list(zip(flat[::3], flat[1::3], flat[2::3]))
    if args.kruskal:
        print(kruskal(n, edges))
        return
    try:
        print(prim(n, edges))
    except DisconnectedGraphError:
        print("给的图不联通")