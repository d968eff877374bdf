"""A circular singly linked list whose last node links back to the first."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node = self


class CircularList:
    """A ring of nodes; iteration starts at the head and stops on returning to it.

    The constructor keeps the order of the given values, while ``insert`` places
    a new value in front of the current head and makes it the new head.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert value in front of the head; it becomes the new head."""
        node = _Node(value)
        if self._head is None or self._tail is None:
            self._tail = node
        else:
            node.next = self._head
            self._tail.next = node
        self._head = node
        self._size += 1

    def find(self, value: Any) -> int | None:
        """Return the position of the first node holding value, or None."""
        return next((index for index, item in enumerate(self) if item == value), None)

    def remove(self, value: Any) -> None:
        """Unlink the first node holding value; raise ValueError if there is none."""
        if self._head is None or self._tail is None:
            raise ValueError(f"{value!r} is not in the list")
        previous, node = self._tail, self._head
        for _ in range(self._size):
            if node.value == value:
                break
            previous, node = node, node.next
        else:
            raise ValueError(f"{value!r} is not in the list")
        if self._size == 1:
            self._head = self._tail = None
        else:
            previous.next = node.next
            if node is self._head:
                self._head = node.next
            if node is self._tail:
                self._tail = previous
        self._size -= 1

    def insert_before(self, value: Any, target: Any) -> None:
        """Link value in just before the node holding target.

        The search begins at the node after the head and reaches the head last.
        When the target is the head, the new node closes the ring behind the
        last node, so the head stays the same. Raises ValueError if target is
        absent.
        """
        if self._head is None or self._tail is None:
            raise ValueError(f"{target!r} is not in the list")
        previous, node = self._head, self._head.next
        for _ in range(self._size):
            if node.value == target:
                break
            previous, node = node, node.next
        else:
            raise ValueError(f"{target!r} is not in the list")
        new = _Node(value)
        new.next = node
        previous.next = new
        if previous is self._tail:
            self._tail = new
        self._size += 1

    def remove_duplicates(self) -> None:
        """Keep only the first occurrence of each value, preserving order."""
        if self._head is None:
            return
        seen: set[Hashable] = {self._head.value}
        previous, node = self._head, self._head.next
        while node is not self._head:
            if node.value in seen:
                previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
            else:
                seen.add(node.value)
                previous = node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        if self._head is None:
            return
        node = self._head
        while True:
            yield node.value
            node = node.next
            if node is self._head:
                break

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"