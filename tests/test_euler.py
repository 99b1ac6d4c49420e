import io
from collections import Counter

import pytest

from algonotes.euler import find_start, fleury, main

EXAMPLE = [(2, 3), (3, 4), (4, 5), (5, 1), (1, 3)]
BROKEN = [(2, 3), (3, 4), (5, 1), (1, 3)]


def _walked_edges(path):
    return Counter(frozenset(pair) for pair in zip(path, path[1:]))


def test_find_start_example():
    assert find_start(5, EXAMPLE) == 2


def test_fleury_example():
    assert fleury(5, EXAMPLE, 2) == [2, 3, 4, 5, 1, 3]


def test_broken_graph_has_no_path():
    assert find_start(5, BROKEN) == 2
    assert fleury(5, BROKEN, 2) is None


def test_circuit_returns_to_start():
    square = [(1, 2), (2, 3), (3, 4), (4, 1)]
    start = find_start(4, square)
    path = fleury(4, square, start)
    assert path[0] == path[-1] == start
    assert _walked_edges(path) == Counter(frozenset(edge) for edge in square)


def test_path_uses_every_edge_once():
    bowtie = [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 3), (5, 6)]
    start = find_start(6, bowtie)
    path = fleury(6, bowtie, start)
    assert len(path) == len(bowtie) + 1
    assert _walked_edges(path) == Counter(frozenset(edge) for edge in bowtie)


def test_start_has_odd_degree_when_one_exists():
    path_graph = [(1, 2), (2, 3)]
    start = find_start(3, path_graph)
    degree = sum(start in edge for edge in path_graph)
    assert degree % 2 == 1


def test_edge_outside_nodes_is_rejected():
    with pytest.raises(ValueError):
        fleury(3, [(1, 4)], 1)


def test_unknown_start_is_rejected():
    with pytest.raises(ValueError):
        fleury(3, [(1, 2)], 9)


def test_main_prints_path(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 5\n2 3\n3 4\n4 5\n5 1\n1 3\n"))
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "start_node:2"
    assert lines[1] == "Exist Euler Path:"
    assert lines[2].split() == ["2", "3", "4", "5", "1", "3"]


def test_main_reports_missing_path(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 4\n2 3\n3 4\n5 1\n1 3\n"))
    main([])
    assert capsys.readouterr().out.splitlines() == ["start_node:2", "No Euler Path"]