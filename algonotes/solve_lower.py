"""Layer-by-layer solving of the cube's bottom and middle layers."""

from __future__ import annotations

from algonotes.cube import Cube

# Side faces in ring order; the next one along is the left-hand neighbour.
_RING = "LBRF"
_RING_INDEX = {face: index for index, face in enumerate(_RING)}


def _turns(cube: Cube, faces: str) -> None:
    for face in faces:
        cube.turn(face)


def _ring_index(face: str) -> int:
    return _RING_INDEX.get(face, 0)


def fix_bottom_cross(cube: Cube) -> None:
    """Bring each side colour's bottom edge home, forming the D cross."""
    for i, color in enumerate(_RING):
        opposite = _RING[(i + 2) % 4]
        a, b = cube.find_edge(color, "D")
        if a == "D":
            _turns(cube, b * 2)
        if b == "D":
            _turns(cube, a * 2)
        a, b = cube.find_edge(color, "D")
        if opposite in (a, b):
            times = 0
            while "U" not in (a, b):
                times += 1
                cube.turn(opposite)
                a, b = cube.find_edge(color, "D")
            cube.perform_moves("U2")
            _turns(cube, opposite * ((4 - times) % 4))
            a, b = cube.find_edge(color, "D")
        if "U" in (a, b):
            while color not in (a, b):
                cube.perform_moves("U")
                a, b = cube.find_edge(color, "D")
            _turns(cube, color * 2)
        while "D" not in (a, b):
            cube.turn(color)
            a, b = cube.find_edge(color, "D")
        if a == "D" and b == color:
            right = _RING[(i + 1) % 4]
            _turns(cube, color * 2 + "U" + color * 2 + right + color * 3 + right * 3)


def _corner_placed(corner: tuple[str, str, str], first: str, second: str) -> bool:
    c1, c2, c3 = corner
    return (
        (c1 == first and c2 == second)
        or (c2 == first and c3 == second)
        or (c3 == first and c1 == second)
    )


def fix_bottom_total(cube: Cube) -> None:
    """Place and orient the four bottom corners."""
    for i, color in enumerate(_RING):
        left = _RING[(i + 1) % 4]
        corner = cube.find_corner(color, left, "D")
        if not _corner_placed(corner, color, left):
            c1, c2, c3 = corner
            if "D" in corner:
                first = c3 if c1 == "D" else c1
                second = c3 if c2 == "D" else c2
                if _ring_index(first) < _ring_index(second):
                    first, second = second, first
                if _ring_index(first) == 3 and _ring_index(second) == 0:
                    first, second = second, first
                _turns(cube, second + "U" + second * 3)
                corner = cube.find_corner(color, left, "D")
            while not _corner_placed(corner, left, color):
                cube.turn("U")
                corner = cube.find_corner(color, left, "D")
            _turns(cube, color + "U" + color * 3)
            corner = cube.find_corner(color, left, "D")
        while corner[0] == "D" or corner[1] == "D":
            _turns(cube, color + "U" + color * 3 + "UUU" + color + "U" + color * 3)
            corner = cube.find_corner(color, left, "D")


def fix_middle(cube: Cube) -> None:
    """Place and orient the four middle-layer edges."""
    for i, color in enumerate(_RING):
        left = _RING[(i + 1) % 4]
        a, b = cube.find_edge(color, left)
        if not ((a == color and b == left) or (a == left and b == color)):
            if "U" not in (a, b):
                high = _ring_index(a)
                low = _ring_index(b)
                if high < low:
                    high, low = low, high
                if low == 0 and high == 3:
                    high, low = low, high
                lo_face, hi_face = _RING[low], _RING[high]
                _turns(cube, lo_face + "UUU" + lo_face * 3 + "UUU" + hi_face * 3 + "U" + hi_face)
                a, b = cube.find_edge(color, left)
            while color not in (a, b):
                cube.turn("U")
                a, b = cube.find_edge(color, left)
            _turns(cube, "UUU" + left * 3 + "U" + left + "U" + color + "UUU" + color * 3)
            a, b = cube.find_edge(color, left)
        if a != color and b != left:
            _turns(
                cube,
                color + "U" + color * 3 + "UUU" + left * 3 + "UUU" + left + "UUU"
                + color + "UUU" + color * 3 + "UUU" + left * 3 + "U" + left,
            )