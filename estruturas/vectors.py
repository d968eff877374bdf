"""Small array exercises: search, extremes, removal, grade listing and a calculator."""

from __future__ import annotations

import operator as _op
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _op.truediv,
}

_TEMPLATES = {
    "+": "{a:.1f} + {b:.1f} = {r:.1f}",
    "-": "{a:.1f} - {b:.1f} = {r:.1f}",
    "*": "{a:.1f} x {b:.1f} = {r:.1f}",
    "/": "{a:.1f}/{b:.1f} = {r:.1f}",
}


@dataclass(frozen=True)
class Extremes:
    """Largest and smallest values of a sequence with their first positions."""

    largest: int
    largest_index: int
    smallest: int
    smallest_index: int


def linear_search(values: Iterable[int], target: int) -> int | None:
    """Return the index of the first element equal to target, or None."""
    return next((index for index, value in enumerate(values) if value == target), None)


def extremes(values: Sequence[int]) -> Extremes:
    """Find the largest and smallest values and the index where each first appears."""
    if not values:
        raise ValueError("cannot find extremes of an empty sequence")
    largest_index = smallest_index = 0
    for index, value in enumerate(values):
        if value > values[largest_index]:
            largest_index = index
        if value < values[smallest_index]:
            smallest_index = index
    return Extremes(values[largest_index], largest_index, values[smallest_index], smallest_index)


def remove_first(values: Iterable[int], item: int) -> list[int]:
    """Return a copy of values without the first occurrence of item."""
    items = list(values)
    index = linear_search(items, item)
    if index is None:
        raise ValueError("Elemento não encontrado!")
    del items[index]
    return items


def format_grades(grades: Iterable[Iterable[float]]) -> str:
    """Render one line per student listing that student's grades."""
    return "\n".join(
        f"{number}º aluno: " + "".join(f"{grade:2.2f} " for grade in student)
        for number, student in enumerate(grades, start=1)
    )


def calculate(a: float, operator: str, b: float) -> float:
    """Apply one of + - * / to two numbers."""
    try:
        function = _OPERATIONS[operator]
    except KeyError:
        raise ValueError("Operação Inválida!") from None
    if operator == "/" and b == 0:
        raise ZeroDivisionError("Não é permitido realizar divisão por zero!")
    return function(a, b)


def format_operation(a: float, operator: str, b: float) -> str:
    """Compute an operation and render it the way the calculator shows it."""
    result = calculate(a, operator, b)
    return _TEMPLATES[operator].format(a=a, b=b, r=result)