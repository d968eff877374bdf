"""A B-tree of integer keys holding at most three keys per page."""

from __future__ import annotations

import argparse
from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass, field

MAX_KEYS = 3
"""Largest number of keys a page may hold before it is split."""

MIN_KEYS = 1
"""Smallest number of keys a non-root page may hold after a deletion."""


class DuplicateKeyError(ValueError):
    """Raised when a key that is already in the tree is inserted again."""


@dataclass
class _Page:
    keys: list[int] = field(default_factory=list)
    children: list[_Page] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


class BTree:
    """An ordered set of integer keys stored in pages of up to ``MAX_KEYS`` keys."""

    def __init__(self) -> None:
        self._root: _Page | None = None
        self._size = 0

    def insert(self, key: int) -> None:
        """Add key to the tree; raise DuplicateKeyError if it is already there."""
        if self._root is None:
            self._root = _Page([key])
        else:
            promoted = self._insert(self._root, key)
            if promoted is not None:
                middle, right = promoted
                self._root = _Page([middle], [self._root, right])
        self._size += 1

    def _insert(self, page: _Page, key: int) -> tuple[int, _Page] | None:
        index = bisect_left(page.keys, key)
        if index < len(page.keys) and page.keys[index] == key:
            raise DuplicateKeyError("Chaves duplicadas não são permitidas")
        if page.is_leaf:
            page.keys.insert(index, key)
        else:
            promoted = self._insert(page.children[index], key)
            if promoted is None:
                return None
            middle, right = promoted
            page.keys.insert(index, middle)
            page.children.insert(index + 1, right)
        if len(page.keys) <= MAX_KEYS:
            return None
        return self._split(page)

    @staticmethod
    def _split(page: _Page) -> tuple[int, _Page]:
        split = MAX_KEYS - 1
        middle = page.keys[split]
        right = _Page(page.keys[split + 1:], page.children[split + 1:])
        page.keys = page.keys[:split]
        page.children = page.children[:split + 1]
        return middle, right

    def delete(self, key: int) -> None:
        """Remove key from the tree; raise KeyError if it is not there."""
        if self._root is None:
            raise KeyError(key)
        self._delete(self._root, key)
        self._size -= 1
        if not self._root.keys:
            self._root = self._root.children[0] if self._root.children else None

    def _delete(self, page: _Page, key: int) -> None:
        index = bisect_left(page.keys, key)
        found = index < len(page.keys) and page.keys[index] == key
        if found and page.is_leaf:
            del page.keys[index]
            return
        if found:
            successor_page = page.children[index + 1]
            while not successor_page.is_leaf:
                successor_page = successor_page.children[0]
            successor = successor_page.keys[0]
            page.keys[index] = successor
            self._delete(page.children[index + 1], successor)
            self._rebalance(page, index + 1)
            return
        if page.is_leaf:
            raise KeyError(key)
        self._delete(page.children[index], key)
        self._rebalance(page, index)

    @staticmethod
    def _rebalance(page: _Page, index: int) -> None:
        child = page.children[index]
        if len(child.keys) >= MIN_KEYS:
            return
        if index > 0 and len(page.children[index - 1].keys) > MIN_KEYS:
            left = page.children[index - 1]
            child.keys.insert(0, page.keys[index - 1])
            page.keys[index - 1] = left.keys.pop()
            if left.children:
                child.children.insert(0, left.children.pop())
            return
        if index < len(page.keys) and len(page.children[index + 1].keys) > MIN_KEYS:
            right = page.children[index + 1]
            child.keys.append(page.keys[index])
            page.keys[index] = right.keys.pop(0)
            if right.children:
                child.children.append(right.children.pop(0))
            return
        join = index - 1 if index > 0 else index
        left, right = page.children[join], page.children[join + 1]
        left.keys.append(page.keys.pop(join))
        left.keys.extend(right.keys)
        left.children.extend(right.children)
        del page.children[join + 1]

    def __contains__(self, key: object) -> bool:
        page = self._root
        while page is not None:
            index = bisect_left(page.keys, key)
            if index < len(page.keys) and page.keys[index] == key:
                return True
            page = None if page.is_leaf else page.children[index]
        return False

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in ascending order."""
        if self._root is not None:
            yield from self._walk(self._root)

    def _walk(self, page: _Page) -> Iterator[int]:
        if page.is_leaf:
            yield from page.keys
            return
        for child, key in zip(page.children, page.keys):
            yield from self._walk(child)
            yield key
        yield from self._walk(page.children[-1])

    def __len__(self) -> int:
        return self._size

    def pages(self) -> list[list[tuple[int, ...]]]:
        """Return the pages level by level from the root, each as a tuple of keys."""
        levels: list[list[tuple[int, ...]]] = []
        current = [self._root] if self._root is not None else []
        while current:
            levels.append([tuple(page.keys) for page in current])
            current = [child for page in current for child in page.children]
        return levels

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def _read_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            print("Entrada inválida.")


def _show(tree: BTree) -> None:
    print("Páginas folha da árvore B:")
    print("".join(f"{key} " for key in tree))


def main(argv: list[str] | None = None) -> int:
    """Read keys to insert until a negative one, then one key to delete."""
    parser = argparse.ArgumentParser(description="Interactive B-tree of integer keys.")
    parser.parse_args(argv)
    tree = BTree()
    try:
        while True:
            key = _read_int(
                "Informe uma chave inteira positiva a ser inserida na árvore "
                "ou -1 para sair: "
            )
            if key >= 0:
                try:
                    tree.insert(key)
                except DuplicateKeyError as error:
                    print(error)
            _show(tree)
            if key < 0:
                break
        key = _read_int(
            "Informe uma chave inteira positiva que deseja excluir ou -1 para sair: "
        )
        if key >= 0:
            try:
                tree.delete(key)
            except KeyError:
                print("Chave não existe na árvore!")
        _show(tree)
    except (EOFError, KeyboardInterrupt):
        print()
    return 0