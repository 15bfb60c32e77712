"""Classic data structures and algorithms: hashing, expressions, stacks, lists, trees and sorting."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "brackets",
    "bucket_sort",
    "hashing",
    "infix",
    "kth_largest",
    "linked_list",
    "stack",
]