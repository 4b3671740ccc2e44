"""
Balanced search tree implementations.
"""

from balst.models.sortedcontainers.red_black_tree import RedBlackTree

__all__ = ["RedBlackTree"]
