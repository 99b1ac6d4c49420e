import itertools

import pytest

from algonotes.abc_sequence import abc_sequence, longest_sequence, main


def _windows(seq):
    return [tuple(seq[i : i + 3]) for i in range(len(seq) - 2)]


def test_abc_sequence_matches_documented_output():
    assert abc_sequence() == (27, "AAABAACABBABCACBACCBBBCBCCCAA")


def test_abc_sequence_covers_every_triple_once():
    count, sequence = abc_sequence()
    windows = _windows(sequence)
    assert len(windows) == count
    assert set(windows) == set(itertools.product("ABC", repeat=3))


@pytest.mark.parametrize("n", [1, 2, 3])
def test_longest_sequence_covers_all_triples(n):
    seq = longest_sequence(n)
    assert len(seq) == n**3 + 2
    windows = _windows(seq)
    assert len(set(windows)) == len(windows)
    assert set(windows) == set(itertools.product(range(1, n + 1), repeat=3))
    assert seq[0] == 1


@pytest.mark.parametrize("n", [0, -4])
def test_longest_sequence_empty_for_small_n(n):
    assert longest_sequence(n) == []


def test_main_default(capsys):
    main([])
    assert capsys.readouterr().out.strip() == "27 AAABAACABBABCACBACCBBBCBCCCAA"


def test_main_cases(capsys):
    main(["--cases", "2"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    for n in (1, 2):
        expected = longest_sequence(n)
        assert lines[2 * (n - 1)] == f"Case #{n}: {len(expected)}"
        assert lines[2 * (n - 1) + 1] == "".join(f"{v} " for v in expected)