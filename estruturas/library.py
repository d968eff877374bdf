"""A small lending library: books, registered readers and waiting lists."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass, field

MAX_BORROWED = 9
"""Most books a reader may hold at the same time."""


class LibraryError(Exception):
    """Raised when a library operation cannot be carried out."""


@dataclass
class Reader:
    """A registered reader and the names of the books they hold."""

    name: str
    cpf: int
    address: str
    borrowed: list[str] = field(default_factory=list)


@dataclass
class Book:
    """A single copy of a book and the readers waiting for it."""

    name: str
    available: bool = True
    waiting: deque[int] = field(default_factory=deque)


class Library:
    """Books and readers kept in registration order."""

    def __init__(self) -> None:
        self._books: list[Book] = []
        self._readers: list[Reader] = []

    def add_book(self, name: str) -> Book:
        """Register a new, available copy of a book and return it."""
        book = Book(name)
        self._books.append(book)
        return book

    def add_reader(self, name: str, cpf: int, address: str) -> Reader:
        """Register a reader and return it."""
        reader = Reader(name, cpf, address)
        self._readers.append(reader)
        return reader

    def find_book(self, name: str) -> Book | None:
        """Return the first book with this name, or None."""
        return next((book for book in self._books if book.name == name), None)

    def find_reader(self, cpf: int) -> Reader | None:
        """Return the first reader with this CPF, or None."""
        return next((reader for reader in self._readers if reader.cpf == cpf), None)

    def _resolve(self, cpf: int, book_name: str) -> tuple[Reader, Book]:
        book = self.find_book(book_name)
        if book is None:
            raise LibraryError("Livro não cadastrado!")
        reader = self.find_reader(cpf)
        if reader is None:
            raise LibraryError("Leitor não cadastrado!")
        return reader, book

    def lend(self, cpf: int, book_name: str) -> bool:
        """Lend a book to a reader.

        Returns True when the book was handed over and False when it was out,
        in which case the reader joins the book's waiting list.
        """
        reader, book = self._resolve(cpf, book_name)
        if not book.available:
            book.waiting.append(reader.cpf)
            return False
        if len(reader.borrowed) >= MAX_BORROWED:
            raise LibraryError("Leitor atingiu quantidade máxima de livros emprestados")
        book.available = False
        reader.borrowed.append(book.name)
        return True

    def give_back(self, cpf: int, book_name: str) -> None:
        """Take a book back from a reader and make it available again."""
        reader, book = self._resolve(cpf, book_name)
        book.available = True
        if book.name in reader.borrowed:
            reader.borrowed.remove(book.name)

    def readers(self) -> list[Reader]:
        """Return the registered readers in registration order."""
        return list(self._readers)

    def books(self) -> list[Book]:
        """Return the registered books in registration order."""
        return list(self._books)


def _read_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            print("Entrada inválida.")


def _register_books(library: Library) -> None:
    while True:
        print("Informe o nome do livro a ser cadastrado:")
        library.add_book(input("Nome:").strip())
        if not _read_int("Deseja cadastrar novo livro? 1-Sim/0-Não:\n"):
            return


def _register_readers(library: Library) -> None:
    while True:
        print("Informe os dados do leitor a ser cadastrado:")
        name = input("Nome:").strip()
        cpf = _read_int("CPF:")
        address = input("Endereço:").strip()
        library.add_reader(name, cpf, address)
        if not _read_int("Deseja cadastrar novo leitor? 1-Sim/0-Não:\n"):
            return


def _lend(library: Library) -> None:
    name = input("Informe o nome do livro que deseja empréstimo:\n").strip()
    if library.find_book(name) is None:
        print("Livro não cadastrado!")
        return
    cpf = _read_int("Informe o cpf do leitor cadastrado:\n")
    try:
        lent = library.lend(cpf, name)
    except LibraryError as error:
        print(error)
        return
    if not lent:
        print("Livro indisponível; leitor incluído na fila de espera.")


def _give_back(library: Library) -> None:
    name = input("Informe o nome do livro que deseja devolver:\n").strip()
    if library.find_book(name) is None:
        print("Livro não cadastrado!")
        return
    cpf = _read_int("Informe o cpf do leitor cadastrado:\n")
    try:
        library.give_back(cpf, name)
    except LibraryError as error:
        print(error)


def _check_reader(library: Library) -> None:
    cpf = _read_int("Informe o cpf do leitor cadastrado:\n")
    if library.find_reader(cpf) is None:
        print("Leitor não Cadastrado!")
    else:
        print("Leitor Cadastrado!")


def _list_readers(library: Library) -> None:
    for reader in library.readers():
        print(f"Nome: {reader.name} - CPF: {reader.cpf}")


def _list_books(library: Library) -> None:
    for book in library.books():
        print(book.name)


def _menu(library: Library) -> None:
    actions = {
        1: _register_books,
        2: _register_readers,
        3: _lend,
        4: _give_back,
        5: _check_reader,
        6: _list_readers,
        7: _list_books,
    }
    while True:
        print("Sistema de Biblioteca ")
        print("+++++++++++++++++++++ ")
        print("Informe a ação desejada:")
        print("1 - Cadastro de Livro Novo ")
        print("2 - Cadastro de Leitor ")
        print("3 - Empréstimo de Livro")
        print("4 - Devolução de Livro")
        print("5 - Verificar se Leitor tem cadastro")
        print("6 - Mostrar Leitores Cadastrados")
        print("7 - Mostrar Livros Cadastrados")
        print("0 - Sair")
        option = _read_int("")
        if option == 0:
            return
        action = actions.get(option)
        if action is None:
            print("Opção Inválida")
        else:
            action(library)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive library menu."""
    parser = argparse.ArgumentParser(description="Interactive lending library.")
    parser.parse_args(argv)
    try:
        _menu(Library())
    except (EOFError, KeyboardInterrupt):
        print()
    return 0