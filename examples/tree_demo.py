#!/usr/bin/env python3
"""
Driver script showing the full OrderedTree lifecycle.

This example demonstrates:
- Building a balanced tree from random numbers
- Printing all four traversal orders
- Skewing the tree with out-of-range inserts
- Restoring balance with rebalance()

The tree is only read through get_root() and the traversal callbacks.

Usage:
    python examples/tree_demo.py             # 15 random values below 100
    python examples/tree_demo.py --seed 42   # Reproducible run
    python examples/tree_demo.py --verbose   # Show library debug logging
"""

import argparse
import logging
import random
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import OrderedTree


def pretty_print(node, prefix="", is_left=True):
    """Print a sideways view of the subtree: right branch on top."""
    if node is None:
        return
    if node.right is not None:
        pretty_print(node.right, prefix + ("│   " if is_left else "    "), False)
    print(f"{prefix}{'└── ' if is_left else '┌── '}{node.data}")
    if node.left is not None:
        pretty_print(node.left, prefix + ("    " if is_left else "│   "), True)


def print_traversals(tree):
    """Print the tree's values in level, pre, post and in order."""
    results = {"Level Order": [], "Pre Order": [], "Post Order": [], "In Order": []}
    tree.level_order_for_each(lambda node: results["Level Order"].append(node.data))
    tree.pre_order_for_each(lambda node: results["Pre Order"].append(node.data))
    tree.post_order_for_each(lambda node: results["Post Order"].append(node.data))
    tree.in_order_for_each(lambda node: results["In Order"].append(node.data))

    for name, values in results.items():
        print(f"{name + ':':<13}{', '.join(str(v) for v in values)}")


def main():
    parser = argparse.ArgumentParser(description="OrderedTree demonstration")
    parser.add_argument("--size", type=int, default=15, help="number of random values")
    parser.add_argument("--max", type=int, default=100, help="upper bound for random values")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    rng = random.Random(args.seed)

    print("--- 1. Initial Tree Setup & Confirmation ---")
    values = [rng.randrange(args.max) for _ in range(args.size)]
    print("Initial array:", ", ".join(str(v) for v in values))
    tree = OrderedTree(values)

    print("\nPretty Print Initial Tree:")
    pretty_print(tree.get_root())
    print("\nIs the tree balanced?", tree.is_balanced())

    print("\n--- 2. Traversal Output ---")
    print_traversals(tree)

    print("\n--- 3. Unbalancing the Tree ---")
    extra = [200, 300, 400, 500, 550]
    for value in extra:
        tree.insert(value)

    print(f"Pretty Print Unbalanced Tree (added {', '.join(str(v) for v in extra)}):")
    pretty_print(tree.get_root())
    print("\nIs the tree balanced now?", tree.is_balanced())

    print("\n--- 4. Rebalancing and Final Confirmation ---")
    tree.rebalance()

    print("Pretty Print Rebalanced Tree:")
    pretty_print(tree.get_root())
    print("\nIs the tree balanced after rebalance?", tree.is_balanced())

    print("\nTraversal Output after Rebalancing:")
    print_traversals(tree)
    return 0


if __name__ == "__main__":
    sys.exit(main())
