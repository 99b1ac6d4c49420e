"""A persistent array kept as a path-copying segment tree."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import Any


class PersistentArray:
    """Versioned array with positions 1..n; version 0 holds the initial values."""

    def __init__(self, values: Iterable[Any]) -> None:
        items = list(values)
        if not items:
            raise ValueError("a persistent array needs at least one value")
        self._size = len(items)
        self._roots: dict[int, Any] = {0: self._build(items, 0, self._size - 1)}

    @classmethod
    def _build(cls, items: list[Any], lo: int, hi: int) -> Any:
        if lo == hi:
            return items[lo]
        mid = (lo + hi) // 2
        return (cls._build(items, lo, mid), cls._build(items, mid + 1, hi))

    def _root(self, version: int) -> Any:
        try:
            return self._roots[version]
        except KeyError:
            raise KeyError(f"unknown version {version}") from None

    def _index(self, pos: int) -> int:
        if not 1 <= pos <= self._size:
            raise IndexError(f"position {pos} out of range 1..{self._size}")
        return pos - 1

    def get(self, version: int, pos: int) -> Any:
        """The value at ``pos`` in ``version``."""
        node = self._root(version)
        index = self._index(pos)
        lo, hi = 0, self._size - 1
        while lo < hi:
            mid = (lo + hi) // 2
            if index <= mid:
                node, hi = node[0], mid
            else:
                node, lo = node[1], mid + 1
        return node

    @classmethod
    def _assign(cls, node: Any, lo: int, hi: int, index: int, value: Any) -> Any:
        if lo == hi:
            return value
        mid = (lo + hi) // 2
        left, right = node
        if index <= mid:
            return (cls._assign(left, lo, mid, index, value), right)
        return (left, cls._assign(right, mid + 1, hi, index, value))

    def set(self, version: int, new_version: int, pos: int, value: Any) -> None:
        """Make ``new_version`` a copy of ``version`` with ``pos`` set to ``value``."""
        root = self._root(version)
        index = self._index(pos)
        self._roots[new_version] = self._assign(root, 0, self._size - 1, index, value)

    def copy(self, version: int, new_version: int) -> None:
        """Make ``new_version`` share every value of ``version``."""
        self._roots[new_version] = self._root(version)


def main(argv: list[str] | None = None) -> None:
    """Read ``n m``, n values and m operations; print every queried value.

    Operation i is ``v 1 x y`` (version i is v with position x set to y)
    or ``v 2 k`` (version i copies v, and v's value at k is printed).
    """
    argparse.ArgumentParser(description="Persistent array operations.").parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    n, m = int(next(tokens)), int(next(tokens))
    array = PersistentArray(int(next(tokens)) for _ in range(n))
    answers: list[str] = []
    for i in range(1, m + 1):
        version, op = int(next(tokens)), int(next(tokens))
        if op == 1:
            pos, value = int(next(tokens)), int(next(tokens))
            array.set(version, i, pos, value)
        else:
            pos = int(next(tokens))
            array.copy(version, i)
            answers.append(str(array.get(version, pos)))
    if answers:
        sys.stdout.write("\n".join(answers) + "\n")