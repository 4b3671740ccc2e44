"""
BalancedSearchTree abstract base class for ordered key-value trees.
"""

from abc import abstractmethod
from typing import Any, TextIO

from balst.interfaces.traversable import Traversable


class BalancedSearchTree(Traversable):
    """
    Abstract base class for self-balancing binary search trees.

    Provides O(log N) insert, get, and remove on distinct, non-None,
    totally ordered keys. Inherits traversal capabilities from Traversable.

    Implementations:
    - RedBlackTree
    """

    @abstractmethod
    def insert(self, key: Any, value: Any) -> None:
        """
        Insert a new key-value pair.

        Args:
            key: The key to insert. Must not be None or already present.
            value: The value to associate with the key.

        Raises:
            IllegalNullKeyError: If key is None.
            DuplicateKeyError: If key is already stored.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, key: Any) -> bool:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            True once the key has been removed.

        Raises:
            IllegalNullKeyError: If key is None.
            KeyNotFoundError: If key is not stored.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def get(self, key: Any) -> Any:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The value stored with the key.

        Raises:
            IllegalNullKeyError: If key is None.
            KeyNotFoundError: If key is not stored.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def contains(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Raises:
            IllegalNullKeyError: If key is None.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def num_keys(self) -> int:
        """
        Return the number of stored keys.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def get_height(self) -> int:
        """
        Return the number of nodes on the longest root-to-leaf path.

        Returns:
            0 for an empty tree, 1 for a single node.
        """
        pass

    @abstractmethod
    def get_key_at_root(self) -> Any | None:
        """Return the root key, or None if the tree is empty."""
        pass

    @abstractmethod
    def get_key_of_left_child_of(self, key: Any) -> Any | None:
        """
        Return the key of the left child of the node holding key.

        Returns:
            The child key, or None if that node has no left child.

        Raises:
            IllegalNullKeyError: If key is None.
            KeyNotFoundError: If key is not stored.
        """
        pass

    @abstractmethod
    def get_key_of_right_child_of(self, key: Any) -> Any | None:
        """
        Return the key of the right child of the node holding key.

        Returns:
            The child key, or None if that node has no right child.

        Raises:
            IllegalNullKeyError: If key is None.
            KeyNotFoundError: If key is not stored.
        """
        pass

    @abstractmethod
    def print(self, file: TextIO | None = None) -> None:
        """
        Write the keys level by level, one line per level.

        Args:
            file: Text sink to write to. Defaults to sys.stdout.
        """
        pass
