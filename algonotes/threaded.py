"""In-order threaded binary trees built from bracket notation."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from algonotes.bracket_tree import TreeNode, parse_tree


@dataclass(eq=False)
class _ThreadedNode:
    value: int
    left: _ThreadedNode | None = None
    right: _ThreadedNode | None = None
    left_is_child: bool = False
    right_is_child: bool = False


def _copy(root: TreeNode) -> _ThreadedNode:
    top = _ThreadedNode(root.value)
    stack = [(root, top)]
    while stack:
        source, target = stack.pop()
        if source.left is not None:
            target.left = _ThreadedNode(source.left.value)
            target.left_is_child = True
            stack.append((source.left, target.left))
        if source.right is not None:
            target.right = _ThreadedNode(source.right.value)
            target.right_is_child = True
            stack.append((source.right, target.right))
    return top


def _thread(root: _ThreadedNode) -> tuple[_ThreadedNode, _ThreadedNode, int]:
    """Fill empty links with in-order neighbours; return first, last and count."""
    previous: _ThreadedNode | None = None
    first: _ThreadedNode | None = None
    count = 0
    stack: list[_ThreadedNode] = []
    node: _ThreadedNode | None = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left if node.left_is_child else None
        node = stack.pop()
        count += 1
        if node.left is None:
            node.left = previous
        if previous is not None and previous.right is None:
            previous.right = node
        if previous is None:
            first = node
        previous = node
        node = node.right if node.right_is_child else None
    assert first is not None and previous is not None
    return first, previous, count


class ThreadedTree:
    """A binary tree whose empty links point to its in-order neighbours."""

    def __init__(self, root: TreeNode) -> None:
        if root is None:
            raise ValueError("a threaded tree needs a root")
        self._root = _copy(root)
        self._first, self._last, self.size = _thread(self._root)

    def forward(self) -> list[int]:
        """Values in in-order, found by following the threads forwards."""
        result: list[int] = []
        node = self._first
        while node is not None:
            result.append(node.value)
            if node.right_is_child:
                node = node.right
                assert node is not None
                while node.left_is_child:
                    assert node.left is not None
                    node = node.left
            else:
                node = node.right
        return result

    def backward(self) -> list[int]:
        """Values in reverse in-order, found by following the threads backwards."""
        result: list[int] = []
        node = self._last
        while node is not None:
            result.append(node.value)
            if node.left_is_child:
                node = node.left
                assert node is not None
                while node.right_is_child:
                    assert node.right is not None
                    node = node.right
            else:
                node = node.left
        return result

    def describe(self) -> list[tuple[int, int | None, int | None]]:
        """``(value, left, right)`` of each node in preorder; links include threads."""
        result: list[tuple[int, int | None, int | None]] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            result.append((
                node.value,
                node.left.value if node.left is not None else None,
                node.right.value if node.right is not None else None,
            ))
            if node.right_is_child:
                assert node.right is not None
                stack.append(node.right)
            if node.left_is_child:
                assert node.left is not None
                stack.append(node.left)
        return result


def _join(values: list[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> None:
    """Read a bracketed tree, thread it and print its links and both walks."""
    argparse.ArgumentParser(description="Threaded binary tree walks.").parse_args(argv)
    tokens = sys.stdin.read().split()
    tree = ThreadedTree(parse_tree(tokens[0] if tokens else ""))
    forward = tree.forward()
    backward = tree.backward()
    print(f"forward head:{forward[0]}")
    print(f"reverse head:{backward[0]}")
    print(f"size of tree:{tree.size}")
    for value, left, right in tree.describe():
        line = f"{value} "
        if left is not None:
            line += f"l:{left} "
        if right is not None:
            line += f"r:{right} "
        print(line)
    print(_join(forward))
    sys.stdout.write(_join(backward))