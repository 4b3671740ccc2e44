"""
Red-Black Tree implementation for ordered key-value storage.

Keys are distinct, non-None and totally ordered. O(log N) insert, lookup
and remove.
"""

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, TextIO

from balst.interfaces.balanced_search_tree import BalancedSearchTree
from balst.models.exceptions import (
    DuplicateKeyError,
    IllegalNullKeyError,
    InvariantViolationError,
    KeyNotFoundError,
)
from balst.models.node_arena import Color, Node, NodeArena
from balst.printer import print_levels

logger = logging.getLogger(__name__)


class RedBlackTree(BalancedSearchTree):
    """
    Red-Black Tree implementation of BalancedSearchTree.

    Properties maintained:
    1. Keys in a left subtree < node key < keys in the right subtree
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from a node to a leaf has same number of black nodes

    Nodes live in a NodeArena; every link is an arena index.
    """

    def __init__(self, items: Iterable[tuple[Any, Any]] | None = None) -> None:
        """
        Initialize the tree.

        Args:
            items: Optional (key, value) pairs inserted in order.
        """
        self._nodes = NodeArena()
        self._root: int | None = None
        self._size: int = 0

        if items is not None:
            for key, value in items:
                self.insert(key, value)

    def insert(self, key: Any, value: Any) -> None:
        """Insert a new key-value pair. O(log N)"""
        self._check_key(key)
        if self._find_node(key) is not None:
            raise DuplicateKeyError(key)

        nodes = self._nodes
        if self._root is None:
            self._root = nodes.allocate(key, value, color=Color.BLACK)
            self._size = 1
            return

        # Find insertion point
        parent = None
        current = self._root

        while current is not None:
            parent = current
            if key < nodes[current].key:
                current = nodes[current].left
            else:
                current = nodes[current].right

        new_index = nodes.allocate(key, value, parent=parent)
        if key < nodes[parent].key:
            nodes[parent].left = new_index
        else:
            nodes[parent].right = new_index

        self._size += 1
        self._fix_insert(new_index)

    def remove(self, key: Any) -> bool:
        """Remove a key-value pair. O(log N)"""
        index = self._require_node(key)
        self._delete_node(index)
        self._size -= 1
        return True

    def get(self, key: Any) -> Any:
        """Retrieve value by key. O(log N)"""
        return self._nodes[self._require_node(key)].value

    def contains(self, key: Any) -> bool:
        self._check_key(key)
        return self._find_node(key) is not None

    def num_keys(self) -> int:
        return self._size

    def get_height(self) -> int:
        return self._height(self._root)

    def get_key_at_root(self) -> Any | None:
        if self._root is None:
            return None
        return self._nodes[self._root].key

    def get_key_of_left_child_of(self, key: Any) -> Any | None:
        return self._key_of(self._nodes[self._require_node(key)].left)

    def get_key_of_right_child_of(self, key: Any) -> Any | None:
        return self._key_of(self._nodes[self._require_node(key)].right)

    def get_color_of(self, key: Any) -> Color:
        """Return the color of the node holding key."""
        return self._nodes[self._require_node(key)].color

    def get_in_order_traversal(self) -> list[Any]:
        nodes = self._nodes
        keys = []
        stack: list[int] = []
        current = self._root

        while stack or current is not None:
            # Push left path
            while current is not None:
                stack.append(current)
                current = nodes[current].left

            current = stack.pop()
            keys.append(nodes[current].key)
            current = nodes[current].right

        return keys

    def get_pre_order_traversal(self) -> list[Any]:
        nodes = self._nodes
        keys = []
        stack = [self._root] if self._root is not None else []

        while stack:
            node = nodes[stack.pop()]
            keys.append(node.key)
            # Right first so the left subtree is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

        return keys

    def get_post_order_traversal(self) -> list[Any]:
        nodes = self._nodes
        keys = []
        stack = [self._root] if self._root is not None else []

        # Collect node, right, left then reverse into left, right, node
        while stack:
            node = nodes[stack.pop()]
            keys.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)

        keys.reverse()
        return keys

    def get_level_order_traversal(self) -> list[Any]:
        return [key for level in self.levels() for key in level]

    def levels(self) -> list[list[Any]]:
        return [
            [self._nodes[index].key for index in level]
            for level in self._levels_from(self._root)
        ]

    def print(self, file: TextIO | None = None) -> None:
        print_levels(self.levels(), file)

    def validate(self) -> int:
        """
        Check the red-black and back-reference invariants.

        Returns:
            Black height of the root (0 for an empty tree).

        Raises:
            InvariantViolationError: Naming the first broken invariant.
        """
        if self._root is None:
            if self._size != 0:
                raise InvariantViolationError("size", f"empty tree reports {self._size} keys")
            return 0

        root = self._nodes[self._root]
        if root.parent is not None:
            raise InvariantViolationError("parent-link", f"root {root.key!r} has a parent")
        if root.color != Color.BLACK:
            raise InvariantViolationError("root-black", f"root {root.key!r} is red")

        black_height, count = self._check_subtree(self._root, None, None)
        if count != self._size or count != len(self._nodes):
            raise InvariantViolationError(
                "size",
                f"{count} reachable nodes, size {self._size}, "
                f"{len(self._nodes)} live arena slots",
            )
        return black_height

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return key is not None and self._find_node(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.get_in_order_traversal())

    def __repr__(self) -> str:
        return f"RedBlackTree(num_keys={self._size}, height={self.get_height()})"

    @staticmethod
    def _check_key(key: Any) -> None:
        if key is None:
            raise IllegalNullKeyError()

    def _find_node(self, key: Any) -> int | None:
        """Find node index by key."""
        nodes = self._nodes
        current = self._root
        while current is not None:
            node = nodes[current]
            if key < node.key:
                current = node.left
            elif key > node.key:
                current = node.right
            else:
                return current
        return None

    def _require_node(self, key: Any) -> int:
        """Find node index by key, raising if the key is None or absent."""
        self._check_key(key)
        index = self._find_node(key)
        if index is None:
            raise KeyNotFoundError(key)
        return index

    def _key_of(self, index: int | None) -> Any | None:
        return None if index is None else self._nodes[index].key

    def _color(self, index: int | None) -> Color:
        """Color of a node; absent children count as black."""
        return Color.BLACK if index is None else self._nodes[index].color

    def _height(self, index: int | None) -> int:
        return len(self._levels_from(index))

    def _levels_from(self, index: int | None) -> list[list[int]]:
        """Breadth-first node indices grouped per depth."""
        if index is None:
            return []

        nodes = self._nodes
        levels = []
        queue = deque([index])

        while queue:
            level = list(queue)
            levels.append(level)
            queue.clear()
            for current in level:
                node = nodes[current]
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)

        return levels

    def _rightmost(self, index: int) -> int:
        nodes = self._nodes
        while nodes[index].right is not None:
            index = nodes[index].right
        return index

    def _fix_insert(self, index: int) -> None:
        """Fix Red-Black Tree properties after insert."""
        nodes = self._nodes

        while index != self._root and nodes[nodes[index].parent].color == Color.RED:
            parent_index = nodes[index].parent
            # A red parent is never the root, so the grandparent exists
            grandparent_index = nodes[parent_index].parent
            grandparent = nodes[grandparent_index]

            if parent_index == grandparent.left:
                uncle = grandparent.right

                if self._color(uncle) == Color.RED:
                    # Case 1: Uncle is red
                    logger.debug(f"Insert fixup: recolor below {grandparent.key!r}")
                    nodes[parent_index].color = Color.BLACK
                    nodes[uncle].color = Color.BLACK
                    grandparent.color = Color.RED
                    index = grandparent_index
                    continue

                if index == nodes[parent_index].right:
                    # Case 2: Node is inner grandchild
                    index = parent_index
                    self._rotate_left(index)

                # Case 3: Node is outer grandchild
                nodes[nodes[index].parent].color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_right(grandparent_index)
            else:
                uncle = grandparent.left

                if self._color(uncle) == Color.RED:
                    logger.debug(f"Insert fixup: recolor below {grandparent.key!r}")
                    nodes[parent_index].color = Color.BLACK
                    nodes[uncle].color = Color.BLACK
                    grandparent.color = Color.RED
                    index = grandparent_index
                    continue

                if index == nodes[parent_index].left:
                    index = parent_index
                    self._rotate_right(index)

                nodes[nodes[index].parent].color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_left(grandparent_index)

        # Root absorbs any red pushed up to it
        nodes[self._root].color = Color.BLACK

    def _rotate_left(self, index: int) -> None:
        """Left rotation: promote the right child of index."""
        nodes = self._nodes
        node = nodes[index]
        pivot_index = node.right
        if pivot_index is None:
            return

        pivot = nodes[pivot_index]
        logger.debug(f"Rotate left at {node.key!r}, promoting {pivot.key!r}")

        node.right = pivot.left
        if pivot.left is not None:
            nodes[pivot.left].parent = index

        self._replace_node(index, pivot_index)

        pivot.left = index
        node.parent = pivot_index

    def _rotate_right(self, index: int) -> None:
        """Right rotation: promote the left child of index."""
        nodes = self._nodes
        node = nodes[index]
        pivot_index = node.left
        if pivot_index is None:
            return

        pivot = nodes[pivot_index]
        logger.debug(f"Rotate right at {node.key!r}, promoting {pivot.key!r}")

        node.left = pivot.right
        if pivot.right is not None:
            nodes[pivot.right].parent = index

        self._replace_node(index, pivot_index)

        pivot.right = index
        node.parent = pivot_index

    def _replace_node(self, index: int, child: int | None) -> None:
        """Hang child where index hangs, in its parent or at the root."""
        nodes = self._nodes
        parent_index = nodes[index].parent

        if parent_index is None:
            self._root = child
        elif index == nodes[parent_index].left:
            nodes[parent_index].left = child
        else:
            nodes[parent_index].right = child

        if child is not None:
            nodes[child].parent = parent_index

    def _delete_node(self, index: int) -> None:
        """Delete a node from the tree and release its slot."""
        nodes = self._nodes
        node = nodes[index]
        removed_color = node.color

        # child takes the place of the node that physically leaves its slot;
        # child_parent tracks that slot when child is None
        if node.left is None:
            logger.debug(f"Remove {node.key!r}: at most a right child")
            child = node.right
            child_parent = node.parent
            self._replace_node(index, child)
        elif node.right is None:
            logger.debug(f"Remove {node.key!r}: left child only")
            child = node.left
            child_parent = node.parent
            self._replace_node(index, child)
        else:
            # Node has two children - splice in the in-order predecessor
            predecessor_index = self._rightmost(node.left)
            predecessor = nodes[predecessor_index]
            logger.debug(f"Remove {node.key!r}: replaced by predecessor {predecessor.key!r}")
            removed_color = predecessor.color
            child = predecessor.left

            if predecessor.parent == index:
                child_parent = predecessor_index
            else:
                child_parent = predecessor.parent
                self._replace_node(predecessor_index, predecessor.left)
                predecessor.left = node.left
                nodes[predecessor.left].parent = predecessor_index

            self._replace_node(index, predecessor_index)
            predecessor.right = node.right
            nodes[predecessor.right].parent = predecessor_index
            predecessor.color = node.color

        nodes.release(index)

        if removed_color == Color.BLACK:
            self._fix_delete(child, child_parent)

    def _fix_delete(self, index: int | None, parent_index: int | None) -> None:
        """
        Fix Red-Black Tree properties after delete.

        index carries an extra black; it may be None, in which case
        parent_index names the node whose empty slot it occupies.
        """
        nodes = self._nodes

        while index != self._root and self._color(index) == Color.BLACK:
            parent = nodes[parent_index]

            if index == parent.left:
                # The sibling subtree holds at least one black node
                sibling_index = parent.right
                sibling = nodes[sibling_index]

                if sibling.color == Color.RED:
                    logger.debug(f"Delete fixup: red sibling {sibling.key!r}")
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent_index)
                    sibling_index = parent.right
                    sibling = nodes[sibling_index]

                if (
                    self._color(sibling.left) == Color.BLACK
                    and self._color(sibling.right) == Color.BLACK
                ):
                    sibling.color = Color.RED
                    index = parent_index
                    parent_index = parent.parent
                else:
                    if self._color(sibling.right) == Color.BLACK:
                        nodes[sibling.left].color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_right(sibling_index)
                        sibling_index = parent.right
                        sibling = nodes[sibling_index]

                    logger.debug(f"Delete fixup: rotate at {parent.key!r}")
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    nodes[sibling.right].color = Color.BLACK
                    self._rotate_left(parent_index)
                    index = self._root
                    parent_index = None
            else:
                sibling_index = parent.left
                sibling = nodes[sibling_index]

                if sibling.color == Color.RED:
                    logger.debug(f"Delete fixup: red sibling {sibling.key!r}")
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent_index)
                    sibling_index = parent.left
                    sibling = nodes[sibling_index]

                if (
                    self._color(sibling.left) == Color.BLACK
                    and self._color(sibling.right) == Color.BLACK
                ):
                    sibling.color = Color.RED
                    index = parent_index
                    parent_index = parent.parent
                else:
                    if self._color(sibling.left) == Color.BLACK:
                        nodes[sibling.right].color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_left(sibling_index)
                        sibling_index = parent.left
                        sibling = nodes[sibling_index]

                    logger.debug(f"Delete fixup: rotate at {parent.key!r}")
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    nodes[sibling.left].color = Color.BLACK
                    self._rotate_right(parent_index)
                    index = self._root
                    parent_index = None

        if index is not None:
            nodes[index].color = Color.BLACK

    def _check_subtree(
        self, index: int | None, lower: Any | None, upper: Any | None
    ) -> tuple[int, int]:
        """Return (black height, node count) of a subtree, raising on violations."""
        if index is None:
            return 0, 0

        nodes = self._nodes
        node: Node = nodes[index]

        if (lower is not None and not lower < node.key) or (
            upper is not None and not node.key < upper
        ):
            raise InvariantViolationError(
                "bst-order", f"key {node.key!r} outside ({lower!r}, {upper!r})"
            )

        for child_index in (node.left, node.right):
            if child_index is None:
                continue
            child = nodes[child_index]
            if child.parent != index:
                raise InvariantViolationError(
                    "parent-link", f"{child.key!r} does not point back to {node.key!r}"
                )
            if node.color == Color.RED and child.color == Color.RED:
                raise InvariantViolationError(
                    "red-red", f"red {node.key!r} has red child {child.key!r}"
                )

        left_height, left_count = self._check_subtree(node.left, lower, node.key)
        right_height, right_count = self._check_subtree(node.right, node.key, upper)
        if left_height != right_height:
            raise InvariantViolationError(
                "black-height",
                f"below {node.key!r}: left {left_height}, right {right_height}",
            )

        own = 1 if node.color == Color.BLACK else 0
        return left_height + own, left_count + right_count + 1
