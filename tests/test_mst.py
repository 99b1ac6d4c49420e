import io
import random

import pytest

from algonotes.mst import DisconnectedGraphError, kruskal, main, prim

TRIANGLE = [(1, 2, 1), (2, 3, 2), (1, 3, 3)]


def _random_connected(rng, n):
    chain = [(i, i + 1, rng.randint(1, 20)) for i in range(1, n)]
    extras = [
        (rng.randint(1, n), rng.randint(1, n), rng.randint(1, 20))
        for _ in range(rng.randint(0, 2 * n))
    ]
    edges = chain + extras
    rng.shuffle(edges)
    return chain, edges


def test_prim_triangle():
    assert prim(3, TRIANGLE) == 3


def test_kruskal_triangle():
    assert kruskal(3, TRIANGLE) == prim(3, TRIANGLE)


def test_single_edge_weight_is_tree_weight():
    assert prim(2, [(1, 2, 7)]) == 7
    assert kruskal(2, [(1, 2, 7)]) == 7


def test_parallel_edges_use_cheapest():
    assert prim(2, [(1, 2, 9), (1, 2, 4)]) == 4
    assert kruskal(2, [(1, 2, 9), (1, 2, 4)]) == 4


def test_single_node_has_empty_tree():
    assert prim(1, []) == 0


def test_prim_raises_on_disconnected_graph():
    with pytest.raises(DisconnectedGraphError):
        prim(4, [(1, 2, 5), (3, 4, 6)])


def test_disconnected_error_is_value_error():
    with pytest.raises(ValueError):
        prim(3, [(1, 2, 1)])


def test_kruskal_spans_a_forest():
    forest = kruskal(4, [(1, 2, 5), (3, 4, 6)])
    assert forest == kruskal(2, [(1, 2, 5)]) + kruskal(2, [(1, 2, 6)])


def test_prim_matches_kruskal_on_random_graphs():
    rng = random.Random(7)
    for _ in range(50):
        n = rng.randint(2, 9)
        chain, edges = _random_connected(rng, n)
        tree = prim(n, edges)
        assert tree == kruskal(n, edges)
        assert tree <= sum(w for _, _, w in chain)
        assert tree >= (n - 1) * min(w for _, _, w in edges)


def test_edge_outside_nodes_is_rejected():
    with pytest.raises(ValueError):
        prim(2, [(1, 3, 1)])
    with pytest.raises(ValueError):
        kruskal(2, [(0, 1, 1)])


def test_main_prints_prim_weight(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 3\n1 2 1\n2 3 2\n1 3 3\n"))
    main([])
    assert capsys.readouterr().out.strip() == str(prim(3, TRIANGLE))


def test_main_kruskal_flag(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 3\n1 2 1\n2 3 2\n1 3 3\n"))
    main(["--kruskal"])
    assert capsys.readouterr().out.strip() == str(kruskal(3, TRIANGLE))


def test_main_reports_disconnected_graph(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1\n1 2 1\n"))
    main([])
    assert capsys.readouterr().out.strip() == "给的图不联通"