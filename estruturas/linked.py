"""Singly and doubly linked lists built from explicit nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None
        self.prev: _Node | None = None


class SinglyLinkedList:
    """A list of values chained through forward links only."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add a value at the front."""
        node = _Node(value)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def find(self, value: Any) -> int | None:
        """Return the position of the first node holding value, or None."""
        return next((index for index, item in enumerate(self) if item == value), None)

    def remove(self, value: Any) -> None:
        """Unlink the first node holding value; raise ValueError if there is none."""
        previous: _Node | None = None
        node = self._head
        while node is not None and node.value != value:
            previous, node = node, node.next
        if node is None:
            raise ValueError(f"{value!r} is not in the list")
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1

    def evens(self) -> SinglyLinkedList:
        """Return a new list with the even values, in order."""
        return SinglyLinkedList(value for value in self if value % 2 == 0)

    def odds(self) -> SinglyLinkedList:
        """Return a new list with the odd values, in order."""
        return SinglyLinkedList(value for value in self if value % 2 != 0)

    def count(self, value: Any) -> int:
        """Return how many nodes hold value."""
        return sum(1 for item in self if item == value)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyLinkedList:
    """A list of values chained through forward and backward links."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        node = _Node(value)
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add a value at the front."""
        node = _Node(value)
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def find(self, value: Any) -> int | None:
        """Return the position of the first node holding value, or None."""
        return next((index for index, item in enumerate(self) if item == value), None)

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def remove(self, value: Any) -> None:
        """Unlink the first node holding value; raise ValueError if there is none."""
        node = self._head
        while node is not None and node.value != value:
            node = node.next
        if node is None:
            raise ValueError("Elemento não encontrado")
        self._unlink(node)

    def remove_non_positive(self) -> int:
        """Unlink every node whose value is zero or negative; return how many went."""
        removed = 0
        node = self._head
        while node is not None:
            following = node.next
            if node.value <= 0:
                self._unlink(node)
                removed += 1
            node = following
        return removed

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"