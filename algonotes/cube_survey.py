"""Count which cubes with a scrambled top corner and edges the layer method solves."""

from __future__ import annotations

import argparse
import copy
import itertools
import sys
from collections.abc import Iterator

from algonotes.cube import Cube
from algonotes.solve_upper import solve

_CORNER_COLOURS = "UBR"
_CORNER_CELLS = (("U", 0, 2), ("B", 0, 0), ("R", 0, 2))
_FLIP_SWAPS = (
    (("U", 2, 1), ("R", 1, 0)),
    (("U", 1, 0), ("B", 1, 2)),
    (("B", 2, 1), ("R", 2, 1)),
)
_EDGE_PAIRS = (("U", "R"), ("R", "B"), ("B", "U"))
_EDGE_CELLS = (
    (("U", 1, 2), ("R", 0, 1)),
    (("R", 1, 2), ("B", 1, 0)),
    (("B", 0, 1), ("U", 0, 1)),
)


def _swap(cube: Cube, first: tuple[str, int, int], second: tuple[str, int, int]) -> None:
    fa, ra, ca = first
    fb, rb, cb = second
    faces = cube.faces
    faces[fa][ra][ca], faces[fb][rb][cb] = faces[fb][rb][cb], faces[fa][ra][ca]


def candidate_cubes() -> Iterator[Cube]:
    """Yield the 1152 cubes of the survey, each a fresh copy.

    The corner twist and the edge swaps are applied to a working cube that
    is reset after every cube yielded, and the edge flips accumulate within
    each ordering of the three top edges.
    """
    template = Cube()
    for j in range(3):
        template.reset()
        for offset, (face, row, col) in enumerate(_CORNER_CELLS, start=1):
            template.faces[face][row][col] = _CORNER_COLOURS[(offset + j) % 3]
        for b in range(8):
            for bit, (first, second) in enumerate(_FLIP_SWAPS):
                if (b >> bit) & 1:
                    _swap(template, first, second)
            for order in itertools.permutations(range(3)):
                pairs = [list(_EDGE_PAIRS[k]) for k in order]
                for i in range(8):
                    for bit, pair in enumerate(pairs):
                        if (i >> bit) & 1:
                            pair.reverse()
                    for (cell_a, cell_b), (colour_a, colour_b) in zip(_EDGE_CELLS, pairs):
                        template.faces[cell_a[0]][cell_a[1]][cell_a[2]] = colour_a
                        template.faces[cell_b[0]][cell_b[1]][cell_b[2]] = colour_b
                    yield copy.deepcopy(template)
                    template.reset()


def _solves(cube: Cube) -> bool:
    try:
        return solve(cube)
    except (LookupError, RuntimeError):
        return False


def count_solvable() -> int:
    """How many of the candidate cubes the layer method restores."""
    return sum(1 for cube in candidate_cubes() if _solves(cube))


def main(argv: list[str] | None = None) -> None:
    """Print every candidate cube, whether it was solved, and the total."""
    parser = argparse.ArgumentParser(description="Survey of cubes the layer method solves.")
    parser.add_argument("-o", "--output", help="write the report to this file")
    parser.add_argument("--no-color", action="store_true", help="print without colours")
    args = parser.parse_args(argv)
    color = not args.no_color
    out = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
    try:
        solved = 0
        for number, cube in enumerate(candidate_cubes(), start=1):
            out.write(f"第{number}个魔方的形式：\n")
            out.write(cube.render(color))
            if _solves(cube):
                solved += 1
                out.write("魔方已被复原\n")
            else:
                out.write("魔方不可被复原\n")
        out.write(f"共有{solved}种魔方可以被复原\n")
    finally:
        if out is not sys.stdout:
            out.close()