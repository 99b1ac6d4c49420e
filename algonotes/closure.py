"""Transitive closure of a relation over the letters A..Z."""

from __future__ import annotations

import argparse
import string
import sys
from collections.abc import Iterable

_LETTERS = string.ascii_uppercase


def transitive_closure(pairs: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
    """All pairs ``(x, y)`` with a path from x to y, sorted by x then y."""
    reach: dict[str, set[str]] = {letter: set() for letter in _LETTERS}
    for x, y in pairs:
        if x not in reach or y not in reach:
            raise ValueError(f"pair ({x!r}, {y!r}) is not two letters A..Z")
        reach[x].add(y)
    for k in _LETTERS:
        for i in _LETTERS:
            if k in reach[i]:
                reach[i] |= reach[k]
    return [(i, j) for i in _LETTERS for j in sorted(reach[i])]


def main(argv: list[str] | None = None) -> None:
    """Read m and m letter pairs; print every pair of the closure."""
    argparse.ArgumentParser(description="Transitive closure of letter pairs.").parse_args(argv)
    tokens = sys.stdin.read().split()
    m = int(tokens[0])
    letters = "".join(tokens[1:])[: 2 * m]
    pairs = list(zip(letters[::2], letters[1::2]))
    for x, y in transitive_closure(pairs):
        print(f"{x}->{y}")