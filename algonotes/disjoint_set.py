"""Disjoint-set forest with path halving and union by rank."""

from __future__ import annotations

import argparse


class UnionFind:
    """Disjoint sets over the elements ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n))
        self._rank = [0] * n

    def _check(self, p: int) -> None:
        if not 0 <= p < len(self._parent):
            raise IndexError(f"element {p} out of range")

    def find(self, p: int) -> int:
        """Return the representative of the set holding ``p``."""
        self._check(p)
        parent = self._parent
        while p != parent[p]:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p

    def union(self, p: int, q: int) -> None:
        """Merge the sets holding ``p`` and ``q``."""
        i = self.find(p)
        j = self.find(q)
        if i == j:
            return
        if self._rank[i] < self._rank[j]:
            self._parent[i] = j
        elif self._rank[i] > self._rank[j]:
            self._parent[j] = i
        else:
            self._parent[j] = i
            self._rank[i] += 1


def main(argv: list[str] | None = None) -> None:
    """Run the ten-element demonstration and print each representative."""
    argparse.ArgumentParser(description="Union-find demonstration.").parse_args(argv)
    uf = UnionFind(10)
    for p, q in ((1, 2), (3, 4), (5, 6), (7, 8), (7, 9), (2, 8), (0, 5), (1, 9)):
        uf.union(p, q)
    print("".join(f"{uf.find(i)} " for i in range(10)))