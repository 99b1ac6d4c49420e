"""Binary trees written in bracket notation such as ``1(2,3(4,5))``."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def parse_tree(text: str) -> TreeNode:
    """Build a tree from bracket notation.

    ``a(b,c)`` gives ``a`` the children ``b`` and ``c``; a lone child in
    brackets, ``a(c)``, is the right child. Characters other than digits,
    brackets and commas are ignored.
    """
    root: TreeNode | None = None
    current: TreeNode | None = None
    open_nodes: list[TreeNode] = []
    digits = ""
    for ch in text:
        if ch.isdigit():
            digits += ch
            continue
        if ch == "(":
            if digits:
                node = TreeNode(int(digits))
                digits = ""
                if current is None:
                    root = node
                elif current.left is not None:
                    current.right = node
                else:
                    current.left = node
                open_nodes.append(node)
                current = node
        elif ch == ",":
            if digits:
                if current is None:
                    raise ValueError("a child appears before any parent")
                current.left = TreeNode(int(digits))
                digits = ""
        elif ch == ")":
            if open_nodes:
                if digits:
                    current = open_nodes[-1]
                    current.right = TreeNode(int(digits))
                    digits = ""
                open_nodes.pop()
                if open_nodes:
                    current = open_nodes[-1]
    if root is None:
        raise ValueError("the text holds no tree")
    if open_nodes:
        raise ValueError("unbalanced brackets")
    return root


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def preorder(root: TreeNode | None) -> list[int]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[int]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def level_order(root: TreeNode | None) -> list[int]:
    """Values level by level, left to right."""
    result: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def _join(values: list[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> None:
    """Read a bracketed tree and print its postorder, preorder and level order."""
    argparse.ArgumentParser(description="Traversals of a bracketed tree.").parse_args(argv)
    tokens = sys.stdin.read().split()
    root = parse_tree(tokens[0] if tokens else "")
    print(f"后序遍历: {_join(postorder(root))}")
    print(f"先序遍历: {_join(preorder(root))}")
    print(f"层次遍历: {_join(level_order(root))}")