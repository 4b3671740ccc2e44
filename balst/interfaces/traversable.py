"""
Traversable protocol for trees that expose their keys in the classic orders.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class Traversable(ABC):
    """
    Protocol for binary trees that can list their keys by traversal order.

    Implementations must support:
    - In-order, pre-order, post-order and level-order key lists
    - Level-order keys grouped per depth
    - Iteration over keys in ascending order via __iter__
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all keys in ascending order."""
        pass

    @abstractmethod
    def get_in_order_traversal(self) -> list[Any]:
        """
        Return keys visiting left subtree, node, right subtree.

        Returns:
            Keys in ascending order.
        """
        pass

    @abstractmethod
    def get_pre_order_traversal(self) -> list[Any]:
        """
        Return keys visiting node, left subtree, right subtree.

        Returns:
            Keys with every node listed before its descendants.
        """
        pass

    @abstractmethod
    def get_post_order_traversal(self) -> list[Any]:
        """
        Return keys visiting left subtree, right subtree, node.

        Returns:
            Keys with every node listed after its descendants.
        """
        pass

    @abstractmethod
    def get_level_order_traversal(self) -> list[Any]:
        """
        Return keys breadth-first, root first, left to right within a level.

        Returns:
            Keys ordered by depth.
        """
        pass

    @abstractmethod
    def levels(self) -> list[list[Any]]:
        """
        Return level-order keys grouped per depth.

        Returns:
            One list per level; element 0 holds only the root key.
            Empty for an empty tree.
        """
        pass
