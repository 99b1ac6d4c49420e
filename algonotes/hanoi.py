"""Iterative Tower of Hanoi from the binary counter."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator


def lowbit(x: int) -> int:
    """The lowest set bit of ``x``."""
    return x & -x


def hanoi_moves(n: int) -> Iterator[tuple[int, int, int]]:
    """Yield ``(plate, from_tower, to_tower)`` moving n plates from 1 to 3.

    Plates are numbered 1 (smallest) to n.
    """
    for step in range(1, 1 << n):
        plate = lowbit(step).bit_length()
        origin, middle, target = 1, 2, 3
        for j in range(n - 1, plate - 1, -1):
            if step & (1 << j):
                middle, origin = origin, middle
            else:
                middle, target = target, middle
        yield plate, origin, target


def main(argv: list[str] | None = None) -> None:
    """Read n from standard input and print each move."""
    argparse.ArgumentParser(description="Tower of Hanoi moves.").parse_args(argv)
    n = int(sys.stdin.read().split()[0])
    for plate, origin, target in hanoi_moves(n):
        print(f"plate_id:{plate} from tower({origin}) to tower({target})")