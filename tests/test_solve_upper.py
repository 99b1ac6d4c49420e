import copy

from algonotes.cube import Cube
from algonotes.solve_upper import (
    fix_final,
    fix_upper_cross,
    fix_upper_total,
    main,
    solve,
)

SCRAMBLE = "D2 L' F' L2 U2 B2 D2 B U2 L2 D2 R2 B' L' D L2 D2 F2 U' F2"


def test_solve_leaves_solved_cube_solved():
    cube = Cube()
    assert solve(cube) is True
    assert cube.is_solved()


def test_solve_scrambled_cube():
    cube = Cube()
    cube.perform_moves(SCRAMBLE)
    assert not cube.is_solved()
    assert solve(cube) is True
    assert cube.is_solved()


def test_upper_cross_on_solved_cube():
    cube = Cube()
    assert fix_upper_cross(cube) is True
    assert cube.is_solved()


def test_upper_cross_realigns_turned_top():
    cube = Cube()
    cube.perform_moves("U")
    assert fix_upper_cross(cube) is True
    assert cube.is_solved()


def test_upper_cross_without_top_edges_returns_false():
    cube = Cube()
    for row, col in ((0, 1), (1, 0), (1, 2), (2, 1)):
        cube.faces["U"][row][col] = "X"
    before = copy.deepcopy(cube.faces)
    assert fix_upper_cross(cube) is False
    assert cube.faces == before


def test_upper_total_and_final_keep_solved_cube():
    cube = Cube()
    fix_upper_total(cube)
    fix_final(cube)
    assert cube.is_solved()


def test_solve_keeps_sticker_counts():
    cube = Cube()
    cube.perform_moves(SCRAMBLE)
    solve(cube)
    for face in "UDFBLR":
        assert sum(row.count(face) for grid in cube.faces.values() for row in grid) == 9


def test_main_reports_solved(capsys):
    main(["--no-color"])
    out = capsys.readouterr().out
    assert out.rstrip().endswith("魔方已被复原")
    assert "步骤一：拼个底面十字" in out