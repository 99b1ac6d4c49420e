"""Unweighted directed graph with depth-first reachability."""

from __future__ import annotations


class Graph:
    """Directed graph over vertices ``0 .. size-1`` kept as adjacency lists."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._adj: list[list[int]] = [[] for _ in range(size)]

    def _check(self, v: int) -> None:
        if not 0 <= v < self.size:
            raise IndexError(f"vertex {v} out of range")

    def add_edge(self, v: int, w: int) -> None:
        """Add the edge v -> w."""
        self._check(v)
        self._check(w)
        self._adj[v].append(w)

    def neighbours(self, v: int) -> list[int]:
        """The heads of v's edges in insertion order."""
        self._check(v)
        return list(self._adj[v])

    def component(self, p: int) -> list[int]:
        """Vertices reachable from ``p`` in depth-first preorder."""
        self._check(p)
        visited = {p}
        order = [p]
        stack = [iter(self._adj[p])]
        while stack:
            for w in stack[-1]:
                if w not in visited:
                    visited.add(w)
                    order.append(w)
                    stack.append(iter(self._adj[w]))
                    break
            else:
                stack.pop()
        return order