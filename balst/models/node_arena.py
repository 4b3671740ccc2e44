"""
Node storage for the Red-Black Tree.

Nodes are held in an arena and addressed by integer index. Child and parent
links are indices (or None), so a link to a removed node is detected on
access instead of being followed silently.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass
class Node:
    """Node in the Red-Black Tree."""

    key: Any
    value: Any
    color: Color = Color.RED
    left: int | None = None
    right: int | None = None
    parent: int | None = None


class NodeArena:
    """
    Slot storage for tree nodes.

    Released slots are kept on a free list and handed out again by
    allocate(), so the arena never grows past the peak number of live nodes.
    """

    def __init__(self) -> None:
        self._slots: list[Node | None] = []
        self._free: list[int] = []

    def allocate(
        self,
        key: Any,
        value: Any,
        color: Color = Color.RED,
        parent: int | None = None,
    ) -> int:
        """
        Store a new childless node.

        Args:
            key: The node key.
            value: The node value.
            color: Initial color, RED unless the node becomes the root.
            parent: Index of the parent node, None for the root.

        Returns:
            Index of the new node.
        """
        node = Node(key=key, value=value, color=color, parent=parent)
        if self._free:
            index = self._free.pop()
            self._slots[index] = node
        else:
            index = len(self._slots)
            self._slots.append(node)
        return index

    def release(self, index: int) -> None:
        """Drop the node at index and make its slot reusable."""
        self._lookup(index)
        self._slots[index] = None
        self._free.append(index)

    def clear(self) -> None:
        self._slots.clear()
        self._free.clear()

    def __getitem__(self, index: int) -> Node:
        return self._lookup(index)

    def _lookup(self, index: int) -> Node:
        if index < 0 or index >= len(self._slots):
            raise IndexError(f"node index {index} out of range")
        node = self._slots[index]
        if node is None:
            raise LookupError(f"node slot {index} has been released")
        return node

    def __len__(self) -> int:
        """Number of live nodes."""
        return len(self._slots) - len(self._free)

    def capacity(self) -> int:
        return len(self._slots)
