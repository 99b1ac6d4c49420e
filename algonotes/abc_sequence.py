"""Strings over a small alphabet that contain every length-3 word exactly once."""

from __future__ import annotations

import argparse
import itertools


def abc_sequence() -> tuple[int, str]:
    """Search from ``AAA`` for a string over A, B, C holding each triple once.

    Returns the number of triples used and the first complete string found,
    trying continuations in alphabetical order; the string is empty if none
    covers all 27 triples.
    """
    triples = ["".join(t) for t in itertools.product("ABC", repeat=3)]
    total = len(triples)
    path = list(triples[0])
    used = {triples[0]}
    best = 1
    stack = [iter(triples)]
    while stack:
        tail = "".join(path[-2:])
        for triple in stack[-1]:
            if triple not in used and triple[:2] == tail:
                used.add(triple)
                path.append(triple[2])
                stack.append(iter(triples))
                break
        else:
            depth = len(stack)
            best = max(best, depth)
            if depth == total:
                return depth, "".join(path)
            stack.pop()
            if stack:
                used.discard("".join(path[-3:]))
                path.pop()
    return best, ""


def longest_sequence(n: int) -> list[int]:
    """Longest sequence over 1..n starting with 1 in which no triple repeats.

    The search stops as soon as the sequence holds all n**3 triples.
    """
    if n < 1:
        return []
    stack: list[tuple[tuple[int, ...], frozenset[tuple[int, int, int]]]] = [
        ((1, j, k), frozenset({(1, j, k)}))
        for j in range(1, min(n, 2) + 1)
        for k in range(1, min(n, 3) + 1)
    ]
    best: tuple[int, ...] = ()
    target = n**3 + 2
    while stack:
        sequence, seen = stack.pop()
        if len(sequence) > len(best):
            best = sequence
        if len(sequence) >= target:
            break
        a, b = sequence[-2], sequence[-1]
        for c in range(1, n + 1):
            if (a, b, c) not in seen:
                stack.append((sequence + (c,), seen | {(a, b, c)}))
    return list(best)


def main(argv: list[str] | None = None) -> None:
    """Print the A/B/C covering string, or the longest sequences for 1..N."""
    parser = argparse.ArgumentParser(description="Sequences covering every triple once.")
    parser.add_argument("--cases", type=int, metavar="N",
                        help="print the longest sequence over 1..n for n = 1..N")
    args = parser.parse_args(argv)
    if args.cases is None:
        count, sequence = abc_sequence()
        print(f"{count} {sequence}")
        return
    for n in range(1, args.cases + 1):
        answer = longest_sequence(n)
        print(f"Case #{n}: {len(answer)}")
        print("".join(f"{value} " for value in answer))