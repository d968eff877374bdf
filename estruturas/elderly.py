"""A single-teller queue where elderly customers may overtake a few others."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum

MAX_OVERTAKEN = 2
"""How many elderly customers may pass ahead of one general customer."""


class Category(IntEnum):
    """Kinds of customer."""

    GENERAL = 1
    ELDERLY = 2


@dataclass
class Customer:
    """A customer with arrival order and current place in the service order."""

    category: Category
    arrival: int
    service: int

    @property
    def overtaken(self) -> int:
        """How many places this customer has been pushed back."""
        return self.service - self.arrival


class ServiceQueue:
    """Customers served in arrival order, with limited priority for the elderly."""

    def __init__(self) -> None:
        self._customers: list[Customer] = []
        self._arrivals = 0

    def _renumber(self) -> None:
        for position, customer in enumerate(self._customers, start=1):
            customer.service = position

    def _insertion_point(self) -> int:
        for index, current in enumerate(self._customers):
            if (
                current.category is Category.GENERAL
                and current.overtaken < MAX_OVERTAKEN
            ):
                return index
            self._renumber()
        return len(self._customers)

    def enqueue(self, category: Category | int) -> Customer:
        """Add a newly arrived customer and return it.

        A general customer goes to the back. An elderly customer goes in front
        of the first general customer who has been overtaken fewer than
        ``MAX_OVERTAKEN`` times, or to the back when there is none.
        """
        category = Category(category)
        self._arrivals += 1
        customer = Customer(category, self._arrivals, self._arrivals)
        if not self._customers:
            self._customers.append(customer)
            return customer
        if category is Category.GENERAL:
            self._customers.append(customer)
        else:
            self._customers.insert(self._insertion_point(), customer)
        self._renumber()
        return customer

    def dequeue(self) -> Customer:
        """Serve and return the customer at the front; raise IndexError if empty."""
        if not self._customers:
            raise IndexError("Fila Vazia!")
        return self._customers.pop(0)

    def __iter__(self) -> Iterator[Customer]:
        return iter(self._customers)

    def __len__(self) -> int:
        return len(self._customers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._customers!r})"


def service_order(categories: Iterable[Category | int]) -> list[int]:
    """Return the arrival numbers (from 1) in the order they will be served."""
    queue = ServiceQueue()
    for category in categories:
        queue.enqueue(category)
    return [customer.arrival for customer in queue]