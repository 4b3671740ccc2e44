"""
Custom exceptions for the balanced search tree.
"""

from typing import Any


class TreeError(Exception):
    """Base class for every error raised by the tree."""


class IllegalNullKeyError(TreeError, ValueError):
    """Raised when None is passed where a key is required."""

    def __init__(self) -> None:
        super().__init__("key must not be None")


class DuplicateKeyError(TreeError):
    """
    Raised when inserting a key that is already stored.

    The tree does not update values in place; the existing entry is left
    untouched.
    """

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"duplicate key: {key!r}")


class KeyNotFoundError(TreeError, KeyError):
    """Raised when a lookup or removal names a key that is not stored."""

    def __init__(self, key: Any):
        self.key = key
        self.message = f"key not found: {key!r}"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message


class InvariantViolationError(TreeError):
    """
    Raised by RedBlackTree.validate() when the structure is corrupt.

    This is a fail-fast error: it indicates a bug in the tree code, never a
    caller mistake.
    """

    def __init__(self, invariant: str, detail: str):
        """
        Initialize violation error.

        Args:
            invariant: Short name of the broken invariant
                (e.g. "red-red", "black-height", "parent-link").
            detail: Human readable description of where it broke.
        """
        self.invariant = invariant
        self.detail = detail
        super().__init__(f"{invariant} invariant violated: {detail}")
