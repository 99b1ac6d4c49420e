"""Maximum flow by Dinic's algorithm."""

from __future__ import annotations

import argparse
import math
import sys
from collections import deque
from collections.abc import Iterable


def max_flow(n: int, edges: Iterable[tuple[int, int, int]], source: int, sink: int) -> int:
    """Value of a maximum flow from ``source`` to ``sink`` over nodes 1..n."""
    nodes = range(1, n + 1)
    if source not in nodes or sink not in nodes:
        raise ValueError("source and sink must be nodes")
    if source == sink:
        raise ValueError("source and sink must differ")

    heads: list[int] = []
    capacity: list[int] = []
    adjacency: dict[int, list[int]] = {node: [] for node in nodes}
    for u, v, w in edges:
        if u not in adjacency or v not in adjacency:
            raise ValueError(f"edge ({u}, {v}) leaves the nodes 1..{n}")
        if w < 0:
            raise ValueError("capacity must not be negative")
        adjacency[u].append(len(heads))
        heads.append(v)
        capacity.append(w)
        adjacency[v].append(len(heads))
        heads.append(u)
        capacity.append(0)

    def build_levels() -> dict[int, int] | None:
        level = {source: 0}
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for arc in adjacency[u]:
                v = heads[arc]
                if v not in level and capacity[arc] > 0:
                    level[v] = level[u] + 1
                    queue.append(v)
        return level if sink in level else None

    def push(u: int, limit: float, level: dict[int, int], cursor: dict[int, int]) -> int:
        if u == sink:
            return int(limit)
        sent = 0
        arcs = adjacency[u]
        while cursor[u] < len(arcs):
            arc = arcs[cursor[u]]
            v = heads[arc]
            if capacity[arc] > 0 and level.get(v) == level[u] + 1:
                got = push(v, min(capacity[arc], limit - sent), level, cursor)
                if got:
                    capacity[arc] -= got
                    capacity[arc ^ 1] += got
                    sent += got
                    if sent == limit:
                        return sent
            cursor[u] += 1
        return sent

    total = 0
    while (level := build_levels()) is not None:
        cursor = {node: 0 for node in nodes}
        total += push(source, math.inf, level, cursor)
    return total


def main(argv: list[str] | None = None) -> None:
    """Read ``n m s t`` and m edges ``u v w``; print the maximum flow."""
    argparse.ArgumentParser(description="Maximum flow by Dinic's algorithm.").parse_args(argv)
    tokens = [int(tok) for tok in sys.stdin.read().split()]
    n, m, s, t = tokens[:4]
    flat = tokens[4 : 4 + 3 * m]
    edges = list(zip(flat[::3], flat[1::3], flat[2::3]))
    print(max_flow(n, edges, s, t))