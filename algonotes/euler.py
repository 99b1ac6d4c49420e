"""Euler paths by Fleury's algorithm."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable

Adjacency = dict[int, list[tuple[int, int]]]


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> tuple[Adjacency, int]:
    if n < 1:
        raise ValueError("the graph needs at least one node")
    adjacency: Adjacency = {node: [] for node in range(1, n + 1)}
    count = 0
    for index, (u, v) in enumerate(edges):
        if u not in adjacency or v not in adjacency:
            raise ValueError(f"edge ({u}, {v}) leaves the nodes 1..{n}")
        adjacency[u].append((v, index))
        adjacency[v].append((u, index))
        count += 1
    return adjacency, count


def find_start(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """The first node of odd degree, else the first node with an edge, else 1."""
    adjacency, _ = _adjacency(n, edges)
    for node, arcs in adjacency.items():
        if len(arcs) % 2 == 1:
            return node
    for node, arcs in adjacency.items():
        if arcs:
            return node
    return 1


def _reachable(adjacency: Adjacency, start: int, goal: int, blocked: set[int]) -> bool:
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        if node == goal:
            return True
        for neighbour, index in adjacency[node]:
            if index not in blocked and neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return False


def fleury(n: int, edges: Iterable[tuple[int, int]], start: int) -> list[int] | None:
    """Walk every edge once from ``start``, crossing bridges only as a last resort.

    Returns the nodes of the walk, or None when the walk cannot use every edge.
    """
    adjacency, count = _adjacency(n, edges)
    if start not in adjacency:
        raise ValueError(f"start {start} is not a node")
    used: set[int] = set()
    path = [start]
    current = start
    while True:
        fallback: tuple[int, int] | None = None
        chosen: tuple[int, int] | None = None
        for neighbour, index in adjacency[current]:
            if index in used:
                continue
            fallback = (neighbour, index)
            if _reachable(adjacency, current, neighbour, used | {index}):
                chosen = fallback
                break
        if chosen is None:
            chosen = fallback
        if chosen is None:
            break
        used.add(chosen[1])
        current = chosen[0]
        path.append(current)
    return path if len(path) == count + 1 else None


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and m edges ``u v``; print an Euler path if there is one."""
    argparse.ArgumentParser(description="Euler path by Fleury's algorithm.").parse_args(argv)
    tokens = [int(tok) for tok in sys.stdin.read().split()]
    n, m = tokens[0], tokens[1]
    flat = tokens[2 : 2 + 2 * m]
    edges = list(zip(flat[::2], flat[1::2]))
    start = find_start(n, edges)
    print(f"start_node:{start}")
    path = fleury(n, edges, start)
    if path is None:
        print("No Euler Path")
    else:
        print("Exist Euler Path:")
        print("".join(f"{node} " for node in path))