"""
Command line entry point: build a tree from keys and print it level by level.

    LOG_LEVEL=DEBUG python -m balst --int 10 20 30 40 --remove 20 --check
"""

import argparse
import logging
import os
import sys

from balst.models.exceptions import TreeError
from balst.models.sortedcontainers import RedBlackTree

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="balst",
        description="Insert keys into a red-black tree and print it level by level.",
    )
    parser.add_argument("keys", nargs="*", help="keys to insert, in order")
    parser.add_argument(
        "--remove",
        action="append",
        default=[],
        metavar="KEY",
        help="key to remove after inserting (repeatable)",
    )
    parser.add_argument("--int", action="store_true", help="treat keys as integers")
    parser.add_argument(
        "--check", action="store_true", help="verify the red-black invariants"
    )
    return parser.parse_args(argv)


def build_tree(keys: list, removals: list) -> RedBlackTree:
    """Insert keys (value = insertion position), then remove removals."""
    tree = RedBlackTree()
    for position, key in enumerate(keys):
        tree.insert(key, position)
    for key in removals:
        tree.remove(key)
    return tree


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    args = parse_args(argv)

    convert = int if args.int else str
    try:
        keys = [convert(key) for key in args.keys]
        removals = [convert(key) for key in args.remove]
    except ValueError as e:
        logger.error(f"Invalid key: {e}")
        return 2

    try:
        tree = build_tree(keys, removals)
        black_height = tree.validate() if args.check else None
    except TreeError as e:
        logger.error(f"Tree operation failed: {e}")
        return 1

    logger.info(
        f"{tree.num_keys()} keys, height {tree.get_height()}, "
        f"root {tree.get_key_at_root()!r}"
    )
    if black_height is not None:
        logger.info(f"Invariants hold, black height {black_height}")

    tree.print(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
