import pytest

from algonotes.graph import Graph


@pytest.fixture
def demo_graph():
    g = Graph(10)
    for v, w in [(0, 1), (2, 3), (3, 4), (5, 6), (6, 7), (8, 9)]:
        g.add_edge(v, w)
    return g


def test_demo_components(demo_graph):
    assert demo_graph.component(0) == [0, 1]
    assert demo_graph.component(2) == [2, 3, 4]
    assert demo_graph.component(5) == [5, 6, 7]
    assert demo_graph.component(8) == [8, 9]


def test_edges_are_directed(demo_graph):
    assert demo_graph.component(1) == [1]
    assert demo_graph.neighbours(0) == [1]
    assert demo_graph.neighbours(1) == []


def test_depth_first_order():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(1, 3)
    g.add_edge(3, 0)
    order = g.component(0)
    assert order == [0, 1, 3, 2]
    assert len(order) == len(set(order))


def test_neighbours_is_a_copy(demo_graph):
    demo_graph.neighbours(2).append(9)
    assert demo_graph.neighbours(2) == [3]


def test_out_of_range():
    g = Graph(2)
    with pytest.raises(IndexError):
        g.add_edge(0, 2)
    with pytest.raises(IndexError):
        g.component(5)