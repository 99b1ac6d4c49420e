import io
import random

import pytest

from algonotes.maxflow import main, max_flow

EXAMPLE = [(4, 2, 30), (4, 3, 20), (2, 3, 20), (2, 1, 30), (1, 3, 30)]


def _random_graph(rng, n):
    return [
        (rng.randint(1, n), rng.randint(1, n), rng.randint(0, 15))
        for _ in range(rng.randint(1, 3 * n))
    ]


def test_example_flow():
    assert max_flow(4, EXAMPLE, 4, 3) == 50


def test_single_edge_carries_its_capacity():
    assert max_flow(2, [(1, 2, 17)], 1, 2) == 17


def test_chain_is_limited_by_bottleneck():
    assert max_flow(3, [(1, 2, 5), (2, 3, 3)], 1, 3) == 3


def test_no_path_gives_zero():
    assert max_flow(3, [(1, 2, 5)], 1, 3) == 0


def test_edges_are_directed():
    assert max_flow(2, [(2, 1, 8)], 1, 2) == max_flow(2, [], 1, 2)


def test_flow_bounded_by_cuts_around_terminals():
    rng = random.Random(3)
    for _ in range(40):
        n = rng.randint(2, 7)
        edges = _random_graph(rng, n)
        flow = max_flow(n, edges, 1, n)
        assert 0 <= flow <= sum(w for u, v, w in edges if u == 1 and v != 1)
        assert flow <= sum(w for u, v, w in edges if v == n and u != n)


def test_scaling_capacities_scales_flow():
    rng = random.Random(11)
    for _ in range(40):
        n = rng.randint(2, 7)
        edges = _random_graph(rng, n)
        doubled = [(u, v, 2 * w) for u, v, w in edges]
        assert max_flow(n, doubled, 1, n) == 2 * max_flow(n, edges, 1, n)


def test_same_source_and_sink_is_rejected():
    with pytest.raises(ValueError):
        max_flow(2, [(1, 2, 1)], 1, 1)


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        max_flow(2, [(1, 2, -1)], 1, 2)


def test_edge_outside_nodes_is_rejected():
    with pytest.raises(ValueError):
        max_flow(2, [(1, 5, 1)], 1, 2)


def test_main_prints_flow(monkeypatch, capsys):
    text = "4 5 4 3\n4 2 30\n4 3 20\n2 3 20\n2 1 30\n1 3 30\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    main([])
    assert capsys.readouterr().out.strip() == "50"