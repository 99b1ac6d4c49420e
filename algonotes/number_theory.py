"""Euclid's algorithm and its extended form via 2x2 matrix products."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

Matrix = tuple[tuple[int, int], tuple[int, int]]


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def gcd_steps(a: int, b: int) -> Iterator[tuple[int, int]]:
    """Yield every ``(a, b)`` pair Euclid's algorithm passes through."""
    while b:
        yield a, b
        a, b = b, _trunc_divmod(a, b)[1]
    yield a, b


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by repeated remainders."""
    for a, b in gcd_steps(a, b):
        pass
    return a


def _multiply(m: Matrix, n: Matrix) -> Matrix:
    return (
        (m[0][0] * n[0][0] + m[0][1] * n[1][0], m[0][0] * n[0][1] + m[0][1] * n[1][1]),
        (m[1][0] * n[0][0] + m[1][1] * n[1][0], m[1][0] * n[0][1] + m[1][1] * n[1][1]),
    )


def _extended_steps(a: int, b: int) -> Iterator[tuple[Matrix, int, int]]:
    matrix: Matrix = ((1, 0), (0, 1))
    while b:
        quotient, remainder = _trunc_divmod(a, b)
        matrix = _multiply(matrix, ((0, 1), (1, -quotient)))
        yield matrix, a, b
        a, b = b, remainder


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g``."""
    matrix: Matrix = ((1, 0), (0, 1))
    g = a
    for matrix, _, divisor in _extended_steps(a, b):
        g = divisor
    return g, matrix[0][0], matrix[1][0]


def main(argv: list[str] | None = None) -> None:
    """Read a and b, print the running matrix for each step and x, y."""
    argparse.ArgumentParser(description="Extended Euclid.").parse_args(argv)
    tokens = sys.stdin.read().split()
    a, b = int(tokens[0]), int(tokens[1])
    print("a:", end="")
    print("b:", end="")
    x, y = 1, 0
    for matrix, step_a, step_b in _extended_steps(a, b):
        for row in matrix:
            print("".join(f"{value} " for value in row))
        print(f"a:{step_a} b:{step_b}")
        x, y = matrix[0][0], matrix[1][0]
    print(f"x={x},y={y}")