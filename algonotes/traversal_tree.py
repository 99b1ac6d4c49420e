"""Rebuild bracket notation of a tree from its preorder and postorder."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable


def from_traversals(preorder: Iterable[int], postorder: Iterable[int]) -> str:
    """Bracket notation such as ``1(2,3)`` for the given traversals.

    A node with a single child cannot be told apart from either side, so
    such a child is written alone in brackets.
    """
    pre = list(preorder)
    post = deque(postorder)
    if not pre:
        raise ValueError("the traversals are empty")
    if len(pre) != len(post) or sorted(pre) != sorted(post):
        raise ValueError("the traversals hold different values")
    pieces: list[str] = []
    seen: set[int] = set()
    for value in pre:
        pieces.append(str(value))
        seen.add(value)
        if post and post[0] == value:
            post.popleft()
            pieces.append(",")
        else:
            pieces.append("(")
        while post and post[0] in seen:
            post.popleft()
            pieces.insert(len(pieces) - 1, ")")
    return "".join(pieces)[:-1]


def main(argv: list[str] | None = None) -> None:
    """Read n, the preorder and the postorder; print the bracketed tree."""
    argparse.ArgumentParser(description="Tree from preorder and postorder.").parse_args(argv)
    tokens = [int(tok) for tok in sys.stdin.read().split()]
    n = tokens[0]
    pre = tokens[1 : 1 + n]
    post = tokens[1 + n : 1 + 2 * n]
    sys.stdout.write(from_traversals(pre, post))