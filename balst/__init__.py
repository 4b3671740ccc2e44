"""
Red-Black Tree based ordered key-value store.

This package provides a self-balancing binary search tree with:
- insert(key, value) - O(log N), duplicate and None keys rejected
- get(key) / contains(key) - O(log N) lookup
- remove(key) - O(log N), rebalanced after every delete
- In-order, pre-order, post-order and level-order traversals
- print() - level-by-level text dump
"""

from balst.models.exceptions import (
    DuplicateKeyError,
    IllegalNullKeyError,
    InvariantViolationError,
    KeyNotFoundError,
    TreeError,
)
from balst.models.node_arena import Color
from balst.models.sortedcontainers import RedBlackTree

__all__ = [
    "RedBlackTree",
    "Color",
    "TreeError",
    "IllegalNullKeyError",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "InvariantViolationError",
]
