import io

import pytest

from algonotes.closure import main, transitive_closure

PAIRS = [("A", "F"), ("B", "D"), ("C", "E"), ("F", "D"), ("D", "E")]
EXPECTED = ["A->D", "A->E", "A->F", "B->D", "B->E", "C->E", "D->E", "F->D", "F->E"]


def test_worked_example():
    result = transitive_closure(PAIRS)
    assert [f"{x}->{y}" for x, y in result] == EXPECTED


def test_closure_contains_input_and_is_transitive():
    result = set(transitive_closure(PAIRS))
    assert set(PAIRS) <= result
    for x, y in result:
        for y2, z in result:
            if y == y2:
                assert (x, z) in result


def test_closure_is_idempotent():
    once = transitive_closure(PAIRS)
    assert transitive_closure(once) == once


def test_empty_relation():
    assert transitive_closure([]) == []


def test_invalid_letter_raises():
    with pytest.raises(ValueError):
        transitive_closure([("a", "B")])


def test_main(monkeypatch, capsys):
    text = "5\n" + "\n".join(f"{x} {y}" for x, y in PAIRS)
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    main([])
    assert capsys.readouterr().out.splitlines() == EXPECTED