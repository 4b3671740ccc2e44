"""
Tests for data models: NodeArena, Node, and exceptions.
"""

import pytest

from balst.models.exceptions import (
    DuplicateKeyError,
    IllegalNullKeyError,
    InvariantViolationError,
    KeyNotFoundError,
    TreeError,
)
from balst.models.node_arena import Color, NodeArena
from balst.models.sortedcontainers import RedBlackTree


class TestNodeArena:
    """Tests for NodeArena."""

    def test_allocate_defaults(self):
        """Test that a new node is red and unlinked."""
        arena = NodeArena()
        index = arena.allocate("key", "value")
        node = arena[index]

        assert node.key == "key"
        assert node.value == "value"
        assert node.color == Color.RED
        assert node.left is None
        assert node.right is None
        assert node.parent is None
        assert len(arena) == 1

    def test_allocate_with_parent(self):
        """Test allocating a black node with a parent link."""
        arena = NodeArena()
        root = arena.allocate(1, "a", color=Color.BLACK)
        child = arena.allocate(2, "b", parent=root)

        assert arena[root].color == Color.BLACK
        assert arena[child].parent == root

    def test_release_and_reuse(self):
        """Test that released slots are reused."""
        arena = NodeArena()
        first = arena.allocate(1, "a")
        arena.allocate(2, "b")

        arena.release(first)
        assert len(arena) == 1

        reused = arena.allocate(3, "c")
        assert reused == first
        assert arena[reused].key == 3
        assert arena.capacity() == 2

    def test_released_slot_access(self):
        """Test that reading a released slot raises."""
        arena = NodeArena()
        index = arena.allocate(1, "a")
        arena.release(index)

        with pytest.raises(LookupError):
            arena[index]
        with pytest.raises(LookupError):
            arena.release(index)

    def test_out_of_range(self):
        """Test that bad indices raise IndexError."""
        arena = NodeArena()
        arena.allocate(1, "a")

        with pytest.raises(IndexError):
            arena[5]
        with pytest.raises(IndexError):
            arena[-1]

    def test_clear(self):
        """Test clearing the arena."""
        arena = NodeArena()
        for i in range(3):
            arena.allocate(i, i)
        arena.clear()

        assert len(arena) == 0
        assert arena.capacity() == 0

    def test_tree_reuses_slots(self):
        """Test that removals do not grow the tree's arena."""
        tree = RedBlackTree((i, i) for i in range(10))
        for i in range(5):
            tree.remove(i)
        for i in range(5):
            tree.insert(i, i)

        assert tree._nodes.capacity() == 10
        assert len(tree._nodes) == 10


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        """Test every error derives from TreeError."""
        assert issubclass(IllegalNullKeyError, TreeError)
        assert issubclass(IllegalNullKeyError, ValueError)
        assert issubclass(DuplicateKeyError, TreeError)
        assert issubclass(KeyNotFoundError, TreeError)
        assert issubclass(KeyNotFoundError, KeyError)
        assert issubclass(InvariantViolationError, TreeError)

    def test_messages(self):
        """Test error messages name the key."""
        assert str(IllegalNullKeyError()) == "key must not be None"
        assert str(DuplicateKeyError(5)) == "duplicate key: 5"
        assert str(KeyNotFoundError("a")) == "key not found: 'a'"

    def test_invariant_violation(self):
        """Test InvariantViolationError carries the invariant name."""
        error = InvariantViolationError("red-red", "red 3 has red child 4")

        assert error.invariant == "red-red"
        assert error.detail == "red 3 has red child 4"
        assert str(error) == "red-red invariant violated: red 3 has red child 4"


class TestValidate:
    """Tests that validate() detects corrupted trees."""

    def test_detects_red_root(self):
        """Test a red root is reported."""
        tree = RedBlackTree([(1, "a")])
        tree._nodes[tree._root].color = Color.RED

        with pytest.raises(InvariantViolationError) as exc_info:
            tree.validate()
        assert exc_info.value.invariant == "root-black"

    def test_detects_red_red(self):
        """Test two consecutive reds are reported."""
        tree = RedBlackTree((i, i) for i in range(1, 8))
        # 4 is red with black child 6; paint 6 red
        tree._nodes[tree._find_node(6)].color = Color.RED

        with pytest.raises(InvariantViolationError) as exc_info:
            tree.validate()
        assert exc_info.value.invariant == "red-red"

    def test_detects_black_height(self):
        """Test unequal black heights are reported."""
        tree = RedBlackTree((i, i) for i in (20, 10, 30))
        tree._nodes[tree._find_node(10)].color = Color.BLACK

        with pytest.raises(InvariantViolationError) as exc_info:
            tree.validate()
        assert exc_info.value.invariant == "black-height"

    def test_detects_broken_parent_link(self):
        """Test a child not pointing back at its parent is reported."""
        tree = RedBlackTree((i, i) for i in (20, 10, 30))
        tree._nodes[tree._find_node(10)].parent = tree._find_node(30)

        with pytest.raises(InvariantViolationError) as exc_info:
            tree.validate()
        assert exc_info.value.invariant == "parent-link"

    def test_detects_order(self):
        """Test a key out of BST order is reported."""
        tree = RedBlackTree((i, i) for i in (20, 10, 30))
        tree._nodes[tree._find_node(10)].key = 25

        with pytest.raises(InvariantViolationError) as exc_info:
            tree.validate()
        assert exc_info.value.invariant == "bst-order"
