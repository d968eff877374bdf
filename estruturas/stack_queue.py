"""A FIFO queue and a LIFO stack, both kept in a doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from estruturas.linked import DoublyLinkedList


class Queue:
    """First in, first out: values join at the back and leave from the front."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = DoublyLinkedList(values)

    def enqueue(self, value: Any) -> None:
        """Add a value at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front; raise IndexError if empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        front = next(iter(self._items))
        self._items.remove(front)
        return front

    def find(self, value: Any) -> int | None:
        """Return how many values stand before the first one equal to value, or None."""
        return self._items.find(value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class Stack:
    """Last in, first out: values are pushed onto and popped from the top."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = DoublyLinkedList()
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        self._items.prepend(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        top = next(iter(self._items))
        self._items.remove(top)
        return top

    def find(self, value: Any) -> int | None:
        """Return the depth from the top of the first value equal to value, or None."""
        return self._items.find(value)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"