import io

import pytest

from algonotes.bracket_tree import TreeNode, parse_tree, preorder
from algonotes.threaded import ThreadedTree, main

EXAMPLE = "1(2,3(4,5(6,7)))"


def test_forward_walk_of_example():
    tree = ThreadedTree(parse_tree(EXAMPLE))
    assert tree.forward() == [2, 1, 4, 3, 6, 5, 7]


def test_backward_walk_of_example():
    tree = ThreadedTree(parse_tree(EXAMPLE))
    assert tree.backward() == [7, 5, 6, 3, 4, 1, 2]


def test_size_counts_nodes():
    tree = ThreadedTree(parse_tree(EXAMPLE))
    assert tree.size == 7


def test_describe_shows_threads():
    tree = ThreadedTree(parse_tree(EXAMPLE))
    assert tree.describe() == [
        (1, 2, 3),
        (2, None, 1),
        (3, 4, 5),
        (4, 1, 3),
        (5, 6, 7),
        (6, 3, 5),
        (7, 5, None),
    ]


@pytest.mark.parametrize("text", [EXAMPLE, "1(2,3(4(5,6),7))", "8(9)", "4(5,6)"])
def test_backward_is_forward_reversed(text):
    tree = ThreadedTree(parse_tree(text))
    assert tree.backward() == tree.forward()[::-1]


@pytest.mark.parametrize("text", [EXAMPLE, "1(2,3(4(5,6),7))", "8(9)"])
def test_forward_visits_every_node_once(text):
    root = parse_tree(text)
    tree = ThreadedTree(root)
    assert sorted(tree.forward()) == sorted(preorder(root))
    assert tree.size == len(preorder(root))


def test_single_node():
    tree = ThreadedTree(TreeNode(5))
    assert tree.forward() == [5]
    assert tree.backward() == [5]
    assert tree.describe() == [(5, None, None)]


def test_missing_root_is_rejected():
    with pytest.raises(ValueError):
        ThreadedTree(None)


def test_main_prints_source_example(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(EXAMPLE + "\n"))
    main([])
    out = capsys.readouterr().out
    assert out == (
        "forward head:2\n"
        "reverse head:7\n"
        "size of tree:7\n"
        "1 l:2 r:3 \n"
        "2 r:1 \n"
        "3 l:4 r:5 \n"
        "4 l:1 r:3 \n"
        "5 l:6 r:7 \n"
        "6 l:3 r:5 \n"
        "7 l:5 \n"
        "2 1 4 3 6 5 7 \n"
        "7 5 6 3 4 1 2 "
    )