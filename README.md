# estruturas

A small collection of classic data structures and algorithms, written in plain
Python with no third-party dependencies. It is meant for studying how these
structures behave: each keeps the rules, limits and orderings of the classroom
exercise it belongs to, and reports failures with exceptions.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `estruturas.sorting` – `bubble_sort`, `bubble_sort_early_exit`,
  `bubble_sort_from_middle`, `selection_sort`, `insertion_sort`,
  `quick_sort` (random pivot; pass a `random.Random` as `rng` for repeatable
  runs), `adjacent_duplicates` (sorts, then lists each pair of equal
  neighbours as `(index, index + 1, value)`) and `recursive_sum`. Every sort
  returns a new list and leaves its input alone.
- `estruturas.vectors` – `linear_search`, `extremes` (returns an `Extremes`
  with the largest and smallest values and the index where each first
  appears; raises `ValueError` on an empty sequence), `remove_first`,
  `format_grades`, and a small calculator: `calculate` and `format_operation`
  for `+`, `-`, `*` and `/` (division by zero raises `ZeroDivisionError`,
  an unknown operator `ValueError`).
- `estruturas.linked` – `SinglyLinkedList` (with `evens`, `odds` and `count`)
  and `DoublyLinkedList` (with `remove_non_positive` and reverse iteration).
- `estruturas.circular` – `CircularList`, where `insert` makes the new value
  the head, plus `insert_before` and `remove_duplicates`, which keeps only the
  first occurrence of each value.
- `estruturas.stack_queue` – `Stack` and `Queue`; popping or dequeuing an
  empty one raises `IndexError`.
- `estruturas.elderly` – `ServiceQueue` and `service_order`: a bank queue in
  which elderly customers get priority, but no more than two of them may pass
  ahead of a general customer.
- `estruturas.priority` – `PriorityQueue` (elements are added first and put
  in priority order only on `sort()`), `JobQueue` (jobs are kept in priority
  order as they arrive, equal priorities in arrival order) and `format_table`.
- `estruturas.btree` – `BTree`, a B-tree of integer keys with up to three keys
  per page: `insert`, `delete`, `in`, ascending iteration and `pages()` to
  look at the tree level by level. Inserting a key twice raises
  `DuplicateKeyError`; deleting a missing key raises `KeyError`.
- `estruturas.library` – `Library`, a lending system with books, readers and
  waiting lists; a reader may hold at most nine books. Failures raise
  `LibraryError`.
- `estruturas.records` – `BandRanking` of favourite `Band`s, and `GymMember`
  records built with `parse_member`.

## Example

```python
from estruturas.btree import BTree, DuplicateKeyError
from estruturas.elderly import service_order
from estruturas.stack_queue import Queue, Stack

tree = BTree()
for key in (10, 20, 5, 6, 12, 30, 7, 17):
    tree.insert(key)

print(list(tree))   # [5, 6, 7, 10, 12, 17, 20, 30]
print(6 in tree)    # True

try:
    tree.insert(6)
except DuplicateKeyError:
    print("duplicate keys are not allowed")

print(service_order([1, 1, 2, 2, 2, 1, 2]))  # arrival numbers in service order

stack = Stack([1, 2, 3])
queue = Queue([1, 2, 3])
print(stack.pop(), queue.dequeue())  # 3 1
```

## Commands

Each of these starts an interactive menu in the terminal:

```
estruturas-priority          # priority queue of elements, sorted on request
estruturas-priority --jobs   # numbered jobs kept in priority order
estruturas-btree             # insert keys into a B-tree, then delete one
estruturas-library           # register books and readers, lend and return books
estruturas-records           # favourite bands ranking
estruturas-records --gym N   # read the data of N gym members
```

## What it does not do

Everything lives in memory. The library, the band ranking and the queues are
not saved anywhere, so their contents are gone when a command ends. The
sorting, list, circular-list, stack/queue and elderly-queue modules are
libraries only and have no command of their own.