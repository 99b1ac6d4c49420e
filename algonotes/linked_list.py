"""A singly linked list with positional insert, delete and lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList:
    """Singly linked list addressed by zero-based position."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        tail: _Node | None = None
        for item in items:
            node = _Node(item)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert position {index} out of range")
        if index == 0:
            self._head = _Node(value, self._head)
        else:
            before = self._node_at(index - 1)
            before.next = _Node(value, before.next)
        self._size += 1

    def delete(self, index: int) -> Any:
        """Remove the element at ``index`` and return it."""
        if not 0 <= index < self._size:
            raise IndexError(f"delete position {index} out of range")
        if index == 0:
            assert self._head is not None
            removed = self._head
            self._head = removed.next
        else:
            before = self._node_at(index - 1)
            removed = before.next
            assert removed is not None
            before.next = removed.next
        self._size -= 1
        return removed.value

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"position {index} out of range")
        return self._node_at(index).value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def display(self) -> int:
        """Print the elements on one line and return how many there are."""
        print("".join(f"{value} " for value in self))
        return self._size