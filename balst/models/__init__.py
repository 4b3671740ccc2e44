"""
Data models for the balanced search tree.
"""

from balst.models.exceptions import (
    DuplicateKeyError,
    IllegalNullKeyError,
    InvariantViolationError,
    KeyNotFoundError,
    TreeError,
)
from balst.models.node_arena import Color, Node, NodeArena

__all__ = [
    "Color",
    "Node",
    "NodeArena",
    "TreeError",
    "IllegalNullKeyError",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "InvariantViolationError",
]
