"""
Shared pytest fixtures for tree tests.
"""

import random

import pytest

from balst.models.sortedcontainers import RedBlackTree


@pytest.fixture
def tree():
    """Provide a fresh empty RedBlackTree."""
    return RedBlackTree()


@pytest.fixture
def ascending_tree():
    """Provide a tree built from keys 1..7 inserted in ascending order."""
    return RedBlackTree((i, f"value{i}") for i in range(1, 8))


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries for testing."""
    return [
        ("key1", "value1"),
        ("key2", "value2"),
        ("key3", "value3"),
    ]


@pytest.fixture
def shuffled_keys():
    """Provide 500 distinct integer keys in a fixed random order."""
    keys = list(range(500))
    random.Random(1234).shuffle(keys)
    return keys
