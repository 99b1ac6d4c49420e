"""Layer-by-layer solving of the cube's top layer, and the whole solve."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from algonotes.cube import NEIGHBOURS, Cube
from algonotes.solve_lower import fix_bottom_cross, fix_bottom_total, fix_middle

# Side faces in ring order; the next one along is the left-hand neighbour.
_RING = "LBRF"
_RING_INDEX = {face: index for index, face in enumerate(_RING)}

# Offsets from the U centre to its edge stickers, in the order they are counted.
_EDGE_OFFSETS = ((1, 0), (0, 1), (-1, 0), (0, -1))

_EDGE_FLIP = "FRURRRUUUFFF"
_EDGE_FLIP_ADJACENT = "FURUUURRRFFF"
_EDGE_FLIP_LEFT = "LULLLUUULLL"
_EDGE_SWAP_R = "RURRRURUURRRUU"
_EDGE_SWAP_B = "BUBBBUBUUBBB"
_CORNER_CYCLE = "URUUULLLURRRUUUL"
_CORNER_TWIST = "RRRDDDRD"

_SCRAMBLE = "D2 L' F' L2 U2 B2 D2 B U2 L2 D2 R2 B' L' D L2 D2 F2 U' F2"
_SOLVED_MESSAGE = "魔方已被复原"
_UNSOLVED_MESSAGE = "魔方不可被复原"


def _turns(cube: Cube, faces: str) -> None:
    for face in faces:
        cube.turn(face)


def _repeat_until(done: Callable[[], bool], action: Callable[[], None],
                  limit: int, what: str) -> None:
    """Apply ``action`` until ``done``; the action cycles back after ``limit`` steps."""
    for _ in range(limit):
        if done():
            return
        action()
    if not done():
        raise RuntimeError(f"cannot {what}")


def _up_edges(cube: Cube) -> tuple[int, int]:
    """How many U edge stickers show U, and the sum of their positions."""
    grid = cube.faces["U"]
    hits = [i for i, (dr, dc) in enumerate(_EDGE_OFFSETS) if grid[1 + dr][1 + dc] == "U"]
    return len(hits), sum(hits)


def _side_edges(cube: Cube) -> tuple[int, int]:
    """How many side faces show their own colour on their top edge, and the sum of their ring positions."""
    hits = []
    for i, face in enumerate(_RING):
        dr, dc = NEIGHBOURS[face]["U"]
        if cube.faces[face][1 + dr][1 + dc] == face:
            hits.append(i)
    return len(hits), sum(hits)


def _ring_index(face: str) -> int:
    return _RING_INDEX.get(face, 0)


def fix_upper_cross(cube: Cube) -> bool:
    """Make the U cross and align its edges with the side centres.

    Returns False, leaving the edges unaligned, when no cross can be formed.
    """
    times, flag = _up_edges(cube)
    if times == 1:
        _turns(cube, _EDGE_FLIP)
    times, flag = _up_edges(cube)
    if times == 2:
        up = cube.faces
        if flag % 2:
            _repeat_until(
                lambda: up["U"][0][1] == "U" and up["U"][1][0] == "U",
                lambda: cube.turn("U"), 4, "place the U edges",
            )
            _turns(cube, _EDGE_FLIP_ADJACENT)
        else:
            _repeat_until(
                lambda: up["U"][1][2] == "U" and up["U"][1][0] == "U",
                lambda: cube.turn("U"), 4, "place the U edges",
            )
            _turns(cube, _EDGE_FLIP + "UUU" + _EDGE_FLIP_LEFT)
        times, flag = _up_edges(cube)
    if times != 4:
        return False

    times, flag = _side_edges(cube)
    if times < 2:
        _repeat_until(
            lambda: _side_edges(cube)[0] >= 2,
            lambda: cube.turn("U"), 4, "align the U edges",
        )
        times = _side_edges(cube)[0]
    if times == 2:
        faces = cube.faces
        if flag % 2 == 0:
            front_home = faces["F"][0][1] == "F"
            if front_home:
                cube.turn("U")
            _turns(cube, _EDGE_SWAP_R + _EDGE_SWAP_B)
            if not front_home:
                cube.turn("U")
        else:
            _repeat_until(
                lambda: (_ring_index(faces["R"][0][1]) - _ring_index(faces["B"][0][1])) % 4 == 1,
                lambda: cube.turn("U"), 4, "set up the edge swap",
            )
            _turns(cube, _EDGE_SWAP_R)
        _repeat_until(
            lambda: faces["F"][0][1] == "F",
            lambda: cube.turn("U"), 4, "align the front edge",
        )
    return True


def _corner_placed(corner: tuple[str, str, str], first: str, second: str) -> bool:
    c1, c2, c3 = corner
    return (
        (c1 == first and c2 == second)
        or (c2 == first and c3 == second)
        or (c3 == first and c1 == second)
    )


def _placed_up_corners(cube: Cube) -> list[int]:
    hits = []
    for i, color in enumerate(_RING):
        left = _RING[(i + 1) % 4]
        if _corner_placed(cube.find_corner(color, left, "U"), color, left):
            hits.append(i)
    return hits


def fix_upper_total(cube: Cube) -> None:
    """Cycle the U corners until each sits between its own colours."""
    hits = _placed_up_corners(cube)
    flag = hits[-1] if hits else 0
    if len(hits) == 4:
        return
    if not hits:
        _turns(cube, _CORNER_CYCLE)
    hits = _placed_up_corners(cube)
    if hits:
        flag = hits[-1]
    if len(hits) != 1:
        return
    for _ in range(12):
        count = (6 - flag) % 4
        _turns(cube, "U" * count + _CORNER_CYCLE + "U" * ((4 - count) % 4))
        hits = _placed_up_corners(cube)
        if hits:
            flag = hits[-1]
        if len(hits) != 1:
            return
    raise RuntimeError("cannot place the U corners")


def fix_final(cube: Cube) -> None:
    """Twist each U corner in turn until it shows U on top."""
    for _ in range(4):
        _repeat_until(
            lambda: cube.faces["U"][2][2] == "U",
            lambda: _turns(cube, _CORNER_TWIST), 6, "twist the U corner",
        )
        cube.turn("U")


def solve(cube: Cube) -> bool:
    """Run every stage of the layer method; True if the cube ends solved."""
    fix_bottom_cross(cube)
    fix_bottom_total(cube)
    fix_middle(cube)
    if fix_upper_cross(cube):
        fix_upper_total(cube)
        fix_final(cube)
    return cube.is_solved()


def main(argv: list[str] | None = None) -> None:
    """Scramble a cube, then solve it stage by stage, printing the net each time."""
    parser = argparse.ArgumentParser(description="Solve a scrambled cube layer by layer.")
    parser.add_argument("--moves", default=_SCRAMBLE, help="scramble to apply")
    parser.add_argument("--no-color", action="store_true", help="print without colours")
    args = parser.parse_args(argv)
    color = not args.no_color
    cube = Cube()
    print("打乱前的魔方：")
    print(cube.render(color), end="")
    cube.perform_moves(args.moves)
    print("被打乱的魔方：")
    print(cube.render(color), end="")
    stages = (
        ("步骤一：拼个底面十字", fix_bottom_cross),
        ("步骤二：拼完底面", fix_bottom_total),
        ("步骤三：拼中间层", fix_middle),
    )
    for heading, stage in stages:
        print(heading)
        stage(cube)
        print(cube.render(color), end="")
    print("步骤四：拼顶面十字并对齐")
    crossed = fix_upper_cross(cube)
    print(cube.render(color), end="")
    if crossed:
        print("步骤五：拼顶面")
        fix_upper_total(cube)
        print(cube.render(color), end="")
        print("步骤六：顶面棱角对齐")
        fix_final(cube)
        print(cube.render(color), end="")
    print(_SOLVED_MESSAGE if cube.is_solved() else _UNSOLVED_MESSAGE)