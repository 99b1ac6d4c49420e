"""Letter frequencies and Huffman codes."""

from __future__ import annotations

import argparse
import string
import sys
from collections import Counter, deque
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass
class _Node:
    weight: int
    symbol: str | None = None
    left: _Node | None = None
    right: _Node | None = None


def letter_counts(text: str) -> dict[str, int]:
    """Counts of the lowercase letters a..z that occur in ``text``, in order."""
    counts = Counter(text)
    return {letter: counts[letter] for letter in string.ascii_lowercase if counts[letter]}


def huffman_codes(weights: Mapping[str, int]) -> dict[str, str]:
    """Huffman code of each symbol, listed level by level from the root.

    At each step the two lightest nodes are merged, the lighter one on the
    left ("0"); on equal weights the second taken goes left.
    """
    pending = [_Node(weight, symbol) for symbol, weight in sorted(weights.items())]
    if not pending:
        return {}
    while len(pending) > 1:
        pending.sort(key=lambda node: node.weight)
        first, second = pending[0], pending[1]
        del pending[:2]
        if first.weight < second.weight:
            left, right = first, second
        else:
            left, right = second, first
        pending.append(_Node(first.weight + second.weight, left=left, right=right))

    codes: dict[str, str] = {}
    queue: deque[tuple[_Node, str]] = deque([(pending[0], "")])
    while queue:
        node, code = queue.popleft()
        if node.left is not None and node.right is not None:
            queue.append((node.left, code + "0"))
            queue.append((node.right, code + "1"))
        else:
            assert node.symbol is not None
            codes[node.symbol] = code
    return codes


def main(argv: list[str] | None = None) -> None:
    """Read one line, print letter counts and the Huffman code of each letter."""
    argparse.ArgumentParser(description="Huffman codes of letter counts.").parse_args(argv)
    line = sys.stdin.readline()
    counts = letter_counts(line)
    for letter, times in counts.items():
        print(f'char :"{letter}";times:{times}')
    for letter, code in huffman_codes(counts).items():
        print(f"word: {letter};times {counts[letter]};code: {code}")