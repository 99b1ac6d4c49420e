"""A 3x3x3 cube stored as six 3x3 faces of sticker letters."""

from __future__ import annotations

import itertools
from functools import cache

FACES = "UDFBLR"

# Offset from a face's centre towards each neighbouring face, in that face's grid.
NEIGHBOURS: dict[str, dict[str, tuple[int, int]]] = {
    "F": {"L": (0, -1), "U": (-1, 0), "R": (0, 1), "D": (1, 0)},
    "R": {"U": (-1, 0), "F": (0, -1), "D": (1, 0), "B": (0, 1)},
    "B": {"R": (0, -1), "U": (-1, 0), "L": (0, 1), "D": (1, 0)},
    "L": {"U": (-1, 0), "B": (0, -1), "D": (1, 0), "F": (0, 1)},
    "U": {"B": (-1, 0), "L": (0, -1), "R": (0, 1), "F": (1, 0)},
    "D": {"B": (-1, 0), "R": (0, -1), "L": (0, 1), "F": (1, 0)},
}

_COLOURS = {
    "U": "\033[1;37m",
    "D": "\033[1;33m",
    "R": "\033[1;31m",
    "B": "\033[1;34m",
    "F": "\033[1;32m",
    "L": "\033[1;35m",
}
_RESET = "\033[0m"

Cell = tuple[str, int, int]


@cache
def _line(spec: str) -> tuple[Cell, ...]:
    """Cells named by e.g. ``"U r0"`` (row 0), ``"B c2-"`` (column 2, bottom up)."""
    face, rest = spec.split()
    index = int(rest[1])
    order = (2, 1, 0) if rest.endswith("-") else (0, 1, 2)
    if rest[0] == "r":
        return tuple((face, index, i) for i in order)
    return tuple((face, i, index) for i in order)


def _face_steps(face: str, first: str = "r0") -> tuple[str, tuple[tuple[str, str], ...]]:
    return (
        f"{face} r0",
        (
            (f"{face} {first}", f"{face} c0"),
            (f"{face} c0", f"{face} r2"),
            (f"{face} r2", f"{face} c2-"),
            (f"{face} c2", "T"),
        ),
    )


# Each turn: parts of (saved line, assignments done in order); "T" is the saved line.
_MOVES = {
    "L": (
        _face_steps("L"),
        ("U c0", (("U c0", "B c2-"), ("B c2", "D c2"), ("D c2", "F c0-"), ("F c0", "T"))),
    ),
    "R": (
        _face_steps("R"),
        ("U c2", (("U c2", "F c2"), ("F c2", "D c0-"), ("D c0", "B c0"), ("B c0", "T-"))),
    ),
    "F": (
        _face_steps("F"),
        ("U r2", (("U r2", "L c2-"), ("L c2", "D r2-"), ("D r2-", "R c0-"), ("R c0", "T"))),
    ),
    "B": (
        _face_steps("B", "r0-"),
        ("U r0", (("U r0", "R c2"), ("R c2", "D r0"), ("D r0", "L c0-"), ("L c0-", "T"))),
    ),
    "U": (
        _face_steps("U", "r0-"),
        ("B r0", (("B r0", "L r0"), ("L r0", "F r0"), ("F r0", "R r0"), ("R r0", "T"))),
    ),
    "D": (
        _face_steps("D"),
        ("B r2", (("B r2", "R r2"), ("R r2", "F r2"), ("F r2", "L r2"), ("L r2", "T"))),
    ),
}


class Cube:
    """Cube whose faces map each face letter to a 3x3 grid of sticker letters."""

    def __init__(self) -> None:
        self.faces: dict[str, list[list[str]]] = {
            face: [[face] * 3 for _ in range(3)] for face in FACES
        }

    def _get(self, cell: Cell) -> str:
        face, row, col = cell
        return self.faces[face][row][col]

    def _set(self, cell: Cell, value: str) -> None:
        face, row, col = cell
        self.faces[face][row][col] = value

    def perform_moves(self, moves: str) -> None:
        """Apply moves such as ``"R U' F2"``: a face, then ``'`` or ``2`` optionally."""
        for move in moves.split():
            count = 1
            if len(move) > 1:
                if move[1] == "'":
                    count = 3
                elif move[1] == "2":
                    count = 2
            for _ in range(count):
                self.turn(move[0])

    def turn(self, face: str) -> None:
        """Turn one face a quarter turn clockwise."""
        try:
            parts = _MOVES[face]
        except KeyError:
            raise ValueError(f"Invalid move: {face}") from None
        for save, steps in parts:
            temp = [self._get(cell) for cell in _line(save)]
            for dst, src in steps:
                if src.startswith("T"):
                    values = temp if src == "T" else temp[::-1]
                    for cell, value in zip(_line(dst), values):
                        self._set(cell, value)
                else:
                    for target, source in zip(_line(dst), _line(src)):
                        self._set(target, self._get(source))

    def is_solved(self) -> bool:
        """True when every sticker matches the face it lies on."""
        return all(
            sticker == face
            for face, grid in self.faces.items()
            for row in grid
            for sticker in row
        )

    def reset(self) -> None:
        """Return every sticker to its home face."""
        for face, grid in self.faces.items():
            for row in grid:
                row[:] = [face] * 3

    def format_face(self, side: str) -> str:
        """One face as text, headed ``Side X:``."""
        if side not in self.faces:
            raise ValueError(f"unknown side {side!r}")
        rows = "".join("".join(f"{c} " for c in row) + "\n" for row in self.faces[side])
        return f"Side {side}:\n{rows}"

    @staticmethod
    def _sticker(c: str, color: bool) -> str:
        if not color:
            return f"{c} "
        return f"{_COLOURS.get(c, _RESET)}{c}{_RESET} "

    def render(self, color: bool = True) -> str:
        """The unfolded net: U on top, then L F R B, then D turned half round."""
        blank = self._sticker(" ", color) * 3
        lines = []
        for row in self.faces["U"]:
            lines.append(blank + "".join(self._sticker(c, color) for c in row))
        for j in range(3):
            lines.append("".join(
                self._sticker(c, color) for face in "LFRB" for c in self.faces[face][j]
            ))
        for row in reversed(self.faces["D"]):
            lines.append(blank + "".join(self._sticker(c, color) for c in reversed(row)))
        return "\n".join(lines) + "\n"

    def _edge_sticker(self, face: str, towards: str) -> str:
        dr, dc = NEIGHBOURS[face][towards]
        return self.faces[face][1 + dr][1 + dc]

    def find_edge(self, col_1: str, col_2: str) -> tuple[str, str]:
        """Faces ``(i, j)`` of the edge showing ``col_1`` on i and ``col_2`` on j."""
        for i, j in itertools.product(FACES, repeat=2):
            if j in NEIGHBOURS[i]:
                if self._edge_sticker(i, j) == col_1 and self._edge_sticker(j, i) == col_2:
                    return i, j
        raise LookupError(f"no edge shows {col_1}{col_2}")

    def _corner_sticker(self, face: str, a: str, b: str) -> str:
        ra, ca = NEIGHBOURS[face][a]
        rb, cb = NEIGHBOURS[face][b]
        return self.faces[face][1 + ra + rb][1 + ca + cb]

    def find_corner(self, col_1: str, col_2: str, col_3: str) -> tuple[str, str, str]:
        """Faces ``(i, j, k)`` of the corner showing the three colours in order."""
        for i, j, k in itertools.product(FACES, repeat=3):
            if j in NEIGHBOURS[i] and k in NEIGHBOURS[j] and i in NEIGHBOURS[k]:
                if (
                    self._corner_sticker(i, j, k) == col_1
                    and self._corner_sticker(j, k, i) == col_2
                    and self._corner_sticker(k, i, j) == col_3
                ):
                    return i, j, k
        raise LookupError(f"no corner shows {col_1}{col_2}{col_3}")