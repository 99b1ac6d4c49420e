"""Lexicographic next permutation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any


def next_permutation(items: MutableSequence[Any]) -> bool:
    """Rearrange ``items`` in place into the next lexicographic order.

    Returns False when ``items`` was the last permutation; it is then
    left sorted ascending.
    """
    i = len(items) - 2
    while i >= 0 and items[i] >= items[i + 1]:
        i -= 1
    if i >= 0:
        j = len(items) - 1
        while items[j] <= items[i]:
            j -= 1
        items[i], items[j] = items[j], items[i]
    items[i + 1 :] = items[i + 1 :][::-1]
    return i >= 0


def lexicographic_permutations(items: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Yield ``items`` and each following permutation up to the last one."""
    current = list(items)
    yield tuple(current)
    while next_permutation(current):
        yield tuple(current)


def main(argv: list[str] | None = None) -> None:
    """Read n from standard input and print every permutation of 1..n."""
    argparse.ArgumentParser(description="List permutations of 1..n.").parse_args(argv)
    n = int(sys.stdin.read().split()[0])
    for perm in lexicographic_permutations(range(1, n + 1)):
        print("".join(f"{value} " for value in perm))