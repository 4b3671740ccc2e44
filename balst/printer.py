"""
Text rendering of tree levels.

The tree only produces the level-order key groups; this module turns them
into lines and writes them to a text sink.
"""

import sys
from collections.abc import Iterable
from typing import Any, TextIO


def format_level(level: Iterable[Any]) -> str:
    """Join the keys of one level with single spaces."""
    return " ".join(str(key) for key in level)


def format_levels(levels: Iterable[Iterable[Any]]) -> str:
    """
    Render every level on its own line.

    Args:
        levels: Keys grouped per depth, root level first.

    Returns:
        The rendered text, without a trailing newline. Empty for no levels.
    """
    return "\n".join(format_level(level) for level in levels)


def print_levels(levels: Iterable[Iterable[Any]], file: TextIO | None = None) -> None:
    """Write each level as a line to file (sys.stdout when None)."""
    if file is None:
        file = sys.stdout
    for level in levels:
        file.write(format_level(level) + "\n")
