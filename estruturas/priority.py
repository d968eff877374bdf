"""Priority queues: one sorted on demand, one kept in order as jobs arrive."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

_SEPARATOR = "+-------+--------------------------+------------+"
_HEADER = "| Ordem |         Elemento         | Prioridade |"


@dataclass
class Element:
    """A piece of content and its priority (lower comes first)."""

    content: str
    priority: int


class PriorityQueue:
    """Elements kept in insertion order until ``sort`` puts them in priority order."""

    def __init__(self) -> None:
        self._elements: list[Element] = []

    def add(self, content: str, priority: int) -> Element:
        """Append an element at the back without reordering; return it."""
        if priority < 0:
            raise ValueError(
                "Prioridade invalida. A prioridade deve ser igual ou maior que 0."
            )
        element = Element(content, priority)
        self._elements.append(element)
        return element

    def sort(self) -> None:
        """Order the elements by priority with a selection sort."""
        if not self._elements:
            raise IndexError("A fila esta vazia. Nao ha necessidade de enfileirar.")
        items = self._elements
        for start in range(len(items)):
            smallest = min(range(start, len(items)), key=lambda i: items[i].priority)
            if smallest != start:
                items[start], items[smallest] = items[smallest], items[start]

    def dequeue(self) -> Element:
        """Remove and return the element at the front; raise IndexError if empty."""
        if not self._elements:
            raise IndexError(
                "A fila esta vazia. Nao possui elemento para desenfileirar."
            )
        return self._elements.pop(0)

    def find(self, content: str) -> int | None:
        """Return the index of the first element with this content, or None."""
        return next(
            (i for i, element in enumerate(self._elements) if element.content == content),
            None,
        )

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elements!r})"


@dataclass
class Job:
    """A task identifier and its priority (lower comes first)."""

    job_id: int
    priority: int


class JobQueue:
    """Jobs kept in priority order; equal priorities stay in arrival order."""

    def __init__(self) -> None:
        self._jobs: list[Job] = []

    def enqueue(self, job_id: int, priority: int) -> Job:
        """Insert a job before the first job with a strictly greater priority."""
        job = Job(job_id, priority)
        position = next(
            (i for i, queued in enumerate(self._jobs) if priority < queued.priority),
            len(self._jobs),
        )
        self._jobs.insert(position, job)
        return job

    def dequeue(self) -> Job:
        """Remove and return the job at the front; raise IndexError if empty."""
        if not self._jobs:
            raise IndexError("Fila vazia!!")
        return self._jobs.pop(0)

    def __iter__(self) -> Iterator[Job]:
        return iter(self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._jobs!r})"


def format_table(rows: Iterable[tuple[Any, int]]) -> str:
    """Render (content, priority) pairs as a numbered text table."""
    lines = [_SEPARATOR, _HEADER, _SEPARATOR]
    lines.extend(
        f"| {order:5d} | {str(content):<24} | {priority:10d} |"
        for order, (content, priority) in enumerate(rows, start=1)
    )
    lines.append(_SEPARATOR)
    return "\n".join(lines)


def _clear_screen() -> None:
    if not sys.stdout.isatty():
        return
    subprocess.run("cls" if os.name == "nt" else "clear", shell=True, check=False)


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt)
        try:
            return int(text.strip())
        except ValueError:
            print("Entrada invalida.")


def _read_priority(prompt: str) -> int:
    while True:
        priority = _read_int(prompt)
        if priority >= 0:
            return priority
        print("Prioridade invalida. A prioridade deve ser igual ou maior que 0. ", end="")


def _add_elements(queue: PriorityQueue) -> None:
    before = len(queue)
    while True:
        content = input(
            f"Digite o conteudo do {len(queue) + 1}o elemento ou 0 para parar: "
        )
        if content == "0":
            break
        priority = _read_priority(f"Digite a prioridade do {len(queue) + 1}o elemento: ")
        queue.add(content, priority)
        print()
    print()
    if len(queue) == before:
        print("Nenhum novo elemento foi adicionado. Nada foi feito.")
    else:
        print("Elemento(s) adicionado(s) com sucesso")
        print(
            "OBS: A função de adicionar nao enfileira os novos elementos na lista. "
            "Chame a funcao de enfileirar (segunda opcao) para isso."
        )


def _sort(queue: PriorityQueue) -> None:
    try:
        queue.sort()
    except IndexError as error:
        print(error)
    else:
        print("A fila foi enfileirada com sucesso!")


def _dequeue(queue: PriorityQueue) -> None:
    try:
        queue.dequeue()
    except IndexError as error:
        print(error)
    else:
        print("Lista desenfileirada com sucesso.")


def _search(queue: PriorityQueue) -> None:
    content = input("Digite o conteudo do elemento a ser buscado: ")
    index = queue.find(content)
    if index is not None:
        element = list(queue)[index]
        print(
            f"Elemento {content} encontrado. [Ocupa a {index + 1}a posicao da fila. "
            f"Possui prioridade {element.priority}.]"
        )
        return
    print("O elemento nao foi encontrado na fila.")
    if _read_int("Deseja adicionar o elemento a fila? (1 - Sim, 0 - Nao): ") != 1:
        print("Nada foi feito.")
        return
    queue.add(content, _read_priority("Digite a prioridade do elemento: "))
    print("Elemento adicionado com sucesso!")
    print(
        "OBS: A funcao de insercao da busca nao enfileira os novos elementos na lista. "
        "Chame a funcao de enfileirar (segunda opcao) para isso."
    )


def _print_queue(queue: PriorityQueue) -> None:
    print()
    print(format_table((element.content, element.priority) for element in queue))


def _content_menu() -> None:
    queue = PriorityQueue()
    actions = {1: _add_elements, 2: _sort, 3: _dequeue, 4: _search, 5: _print_queue}
    while True:
        _clear_screen()
        print("======= Lista de prioridade =======\n")
        print("1 - Adicionar elementos")
        print("2 - Enfileirar")
        print("3 - Desenfileirar")
        print("4 - Buscar elemento")
        print("5 - Imprimir fila")
        print("0 - Sair\n")
        option = _read_int("Digite a opcao desejada: ")
        print()
        if option == 0:
            return
        action = actions.get(option)
        if action is None:
            print("Opcao invalida.")
        else:
            action(queue)
            print()
        input("Pressione a tecla ENTER para continuar...")


def _job_menu() -> None:
    queue = JobQueue()
    while True:
        print("======= Lista de prioridade =======\n")
        print("1 - Enfileirar")
        print("2 - Desenfileirar")
        print("3 - Imprimir fila")
        print("0 - Sair\n")
        option = _read_int("Digite a opcao desejada: ")
        if option == 0:
            return
        if option == 1:
            job_id = _read_int("\nInforme o id da tarefa: ")
            priority = _read_int("Informe a prioridade da tarefa: ")
            queue.enqueue(job_id, priority)
        elif option == 2:
            try:
                job = queue.dequeue()
            except IndexError as error:
                print(f"\n{error}")
            else:
                print(f"\nDesenfileirada a tarefa {job.job_id}!")
        elif option == 3:
            print()
            print(format_table((job.job_id, job.priority) for job in queue))
        else:
            print("Opção invalida.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive priority-queue menu."""
    parser = argparse.ArgumentParser(description="Interactive priority queue.")
    parser.add_argument(
        "--jobs",
        action="store_true",
        help="manage numbered jobs kept in priority order as they arrive",
    )
    args = parser.parse_args(argv)
    try:
        if args.jobs:
            _job_menu()
        else:
            _content_menu()
    except (EOFError, KeyboardInterrupt):
        print()
    print("Saindo...")
    return 0