"""
Abstract base classes and protocols for balanced search trees.
"""

from balst.interfaces.balanced_search_tree import BalancedSearchTree
from balst.interfaces.traversable import Traversable

__all__ = ["BalancedSearchTree", "Traversable"]
