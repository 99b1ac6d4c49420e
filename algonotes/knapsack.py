"""0/1 and unbounded knapsack by one-dimensional dynamic programming."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable


def zero_one_knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Best total worth of ``(volume, worth)`` items, each used at most once."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for volume, worth in items:
        if volume < 0:
            raise ValueError("volume must not be negative")
        for j in range(capacity, volume - 1, -1):
            best[j] = max(best[j], best[j - volume] + worth)
    return best[capacity]


def unbounded_knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Best total worth of ``(volume, worth)`` items, each used any number of times."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for volume, worth in items:
        if volume <= 0:
            raise ValueError("volume must be positive")
        for j in range(volume, capacity + 1):
            best[j] = max(best[j], best[j - volume] + worth)
    return best[capacity]


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` then n ``volume worth`` pairs and print the best worth."""
    parser = argparse.ArgumentParser(description="Knapsack solver.")
    parser.add_argument("--unbounded", action="store_true", help="allow items to repeat")
    args = parser.parse_args(argv)
    tokens = [int(tok) for tok in sys.stdin.read().split()]
    n, capacity = tokens[0], tokens[1]
    values = tokens[2 : 2 + 2 * n]
    items = list(zip(values[::2], values[1::2]))
    solver = unbounded_knapsack if args.unbounded else zero_one_knapsack
    print(solver(items, capacity))