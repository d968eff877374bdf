"""Classic in-memory sorting algorithms and small recursive helpers."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy using the plain bubble sort (always n full passes)."""
    items = list(values)
    for _ in items:
        for left in range(len(items) - 1):
            if items[left] > items[left + 1]:
                items[left], items[left + 1] = items[left + 1], items[left]
    return items


def bubble_sort_early_exit(values: Iterable[T]) -> list[T]:
    """Return a sorted copy using bubble sort that stops after a pass with no swaps."""
    items = list(values)
    swapped = True
    while swapped:
        swapped = False
        for left in range(len(items) - 1):
            if items[left] > items[left + 1]:
                items[left], items[left + 1] = items[left + 1], items[left]
                swapped = True
    return items


def bubble_sort_from_middle(values: Iterable[T]) -> list[T]:
    """Return a sorted copy using a bubble sort whose passes start at the middle.

    Each pass first walks from the middle towards the right end, then from the
    middle towards the left end, until a full pass makes no swaps.
    """
    items = list(values)
    middle = max(len(items) // 2, 1)

    def swap_if_needed(right: int) -> bool:
        if items[right - 1] > items[right]:
            items[right - 1], items[right] = items[right], items[right - 1]
            return True
        return False

    swapped = True
    while swapped:
        swapped = False
        for right in range(middle, len(items)):
            swapped |= swap_if_needed(right)
        for right in range(middle - 1, 0, -1):
            swapped |= swap_if_needed(right)
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy using selection sort."""
    items = list(values)
    for split in range(len(items)):
        smallest = min(range(split, len(items)), key=items.__getitem__)
        items[split], items[smallest] = items[smallest], items[split]
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy using insertion sort."""
    items = list(values)
    for start in range(1, len(items)):
        position = start
        while position > 0 and items[position] < items[position - 1]:
            items[position], items[position - 1] = items[position - 1], items[position]
            position -= 1
    return items


def _partition(items: list[T], low: int, high: int) -> int:
    pivot = items[high]
    pivot_index = low
    for current in range(low, high):
        if items[current] <= pivot:
            items[current], items[pivot_index] = items[pivot_index], items[current]
            pivot_index += 1
    items[pivot_index], items[high] = items[high], items[pivot_index]
    return pivot_index


def quick_sort(values: Iterable[T], rng: random.Random | None = None) -> list[T]:
    """Return a sorted copy using quicksort with a randomly chosen pivot."""
    items = list(values)
    rng = rng if rng is not None else random.Random()
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        chosen = rng.randint(low, high)
        items[chosen], items[high] = items[high], items[chosen]
        pivot_index = _partition(items, low, high)
        pending.append((low, pivot_index - 1))
        pending.append((pivot_index + 1, high))
    return items


def adjacent_duplicates(values: Iterable[T]) -> list[tuple[int, int, T]]:
    """Sort the values and report each pair of equal neighbours.

    Each entry is ``(index, index + 1, value)`` with indices into the sorted list.
    """
    items = quick_sort(values)
    return [
        (index, index + 1, left)
        for index, (left, right) in enumerate(zip(items, items[1:]))
        if left == right
    ]


def recursive_sum(values: Sequence[int]) -> int:
    """Sum a sequence recursively by splitting it in halves."""
    if not values:
        return 0
    if len(values) == 1:
        return values[0]
    middle = len(values) // 2
    return recursive_sum(values[:middle]) + recursive_sum(values[middle:])