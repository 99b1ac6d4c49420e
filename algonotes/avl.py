"""AVL tree whose nodes also record the sizes of their subtrees."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class AVLNode:
    """A tree node with its height and the node counts of both subtrees."""

    data: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1
    left_size: int = 0
    right_size: int = 0


def _height(node: AVLNode | None) -> int:
    return 0 if node is None else node.height


def _size(node: AVLNode | None) -> int:
    return 0 if node is None else node.left_size + node.right_size + 1


def _refresh(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1
    node.left_size = _size(node.left)
    node.right_size = _size(node.right)


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    _refresh(node)
    balance = _height(node.left) - _height(node.right)
    if balance > 1:
        assert node.left is not None
        if _height(node.left.left) < _height(node.left.right):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if _height(node.right.right) < _height(node.right.left):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: AVLNode | None, value: Any) -> AVLNode:
    if node is None:
        return AVLNode(value)
    if node.data < value:
        node.right = _insert(node.right, value)
    else:
        node.left = _insert(node.left, value)
    return _rebalance(node)


def _delete(node: AVLNode | None, value: Any) -> AVLNode | None:
    if node is None:
        raise KeyError(value)
    if value == node.data:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        if _height(node.left) > _height(node.right):
            replacement = node.left
            while replacement.right is not None:
                replacement = replacement.right
            node.data = replacement.data
            node.left = _delete(node.left, replacement.data)
        else:
            replacement = node.right
            while replacement.left is not None:
                replacement = replacement.left
            node.data = replacement.data
            node.right = _delete(node.right, replacement.data)
    elif value > node.data:
        node.right = _delete(node.right, value)
    else:
        node.left = _delete(node.left, value)
    return _rebalance(node)


class AVLTree:
    """Self-balancing binary search tree; equal values go to the left."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def insert(self, value: Any) -> None:
        """Add ``value``, rotating to keep the tree balanced."""
        self.root = _insert(self.root, value)

    def delete(self, value: Any) -> None:
        """Remove one occurrence of ``value``; KeyError if it is absent."""
        self.root = _delete(self.root, value)

    def preorder(self) -> list[tuple[Any, int, int, int]]:
        """``(data, left_size, right_size, height)`` of each node in preorder."""
        result = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append((node.data, node.left_size, node.right_size, node.height))
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result


def main(argv: list[str] | None = None) -> None:
    """Insert 1..7 and print each node's data, subtree sizes and height."""
    argparse.ArgumentParser(description="AVL tree demonstration.").parse_args(argv)
    tree = AVLTree()
    for value in range(1, 8):
        tree.insert(value)
    for data, left_size, right_size, height in tree.preorder():
        print(f"{data} {left_size} {right_size} {height}")