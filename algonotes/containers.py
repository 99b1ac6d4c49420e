"""Stack and double-ended queue built on the linked list."""

from __future__ import annotations

from typing import Any

from algonotes.linked_list import LinkedList


class Stack:
    """Last-in first-out stack; the top is the head of the list."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def push(self, value: Any) -> None:
        self._items.insert(0, value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.delete(0)

    def top(self) -> Any:
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items.get(0)

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def __len__(self) -> int:
        return len(self._items)

    def display(self) -> int:
        """Print from top to bottom and return the size."""
        return self._items.display()


class Queue:
    """Queue with access at both ends."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items.get(0)

    def back(self) -> Any:
        if not self._items:
            raise IndexError("back of an empty queue")
        return self._items.get(len(self._items) - 1)

    def push(self, value: Any) -> None:
        """Append at the back."""
        self._items.insert(len(self._items), value)

    def push_front(self, value: Any) -> None:
        self._items.insert(0, value)

    def pop(self) -> Any:
        """Remove and return the front element."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.delete(0)

    def pop_back(self) -> Any:
        """Remove and return the back element."""
        if not self._items:
            raise IndexError("pop_back from an empty queue")
        return self._items.delete(len(self._items) - 1)

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def __len__(self) -> int:
        return len(self._items)

    def display(self) -> int:
        """Print from front to back and return the size."""
        return self._items.display()