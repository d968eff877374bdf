"""Classic data structures and algorithms: sorting, lists, stacks, queues, B-trees and small records."""

__version__ = "0.1.0"

__all__ = [
    "btree",
    "circular",
    "elderly",
    "library",
    "linked",
    "priority",
    "records",
    "sorting",
    "stack_queue",
    "vectors",
]