"""Unit tests for edge cases in OrderedTreeLib.

Tests skewed shapes, large trees, stale node handles and the testing
helper's ability to spot corrupted structures.
"""

import logging
import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import OrderedTree
from orderedtreelib.testing import TreeInvariantChecker


class TestSkewedTrees(unittest.TestCase):
    """Long insertion chains must not hit the recursion limit."""

    CHAIN = 2000

    def setUp(self):
        self.tree = OrderedTree()
        for value in range(self.CHAIN):
            self.tree.insert(value)

    def test_chain_queries(self):
        self.assertEqual(len(self.tree), self.CHAIN)
        self.assertEqual(self.tree.height(0), self.CHAIN - 1)
        self.assertEqual(self.tree.depth(self.CHAIN - 1), self.CHAIN - 1)
        self.assertFalse(self.tree.is_balanced())

    def test_chain_traversals(self):
        seen = []
        self.tree.post_order_for_each(lambda node: seen.append(node.data))
        self.assertEqual(seen, list(range(self.CHAIN - 1, -1, -1)))
        self.assertEqual(self.tree.values(), list(range(self.CHAIN)))

    def test_chain_rebalance(self):
        self.tree.rebalance()
        self.assertTrue(self.tree.is_balanced())
        self.assertEqual(self.tree.values(), list(range(self.CHAIN)))
        self.assertLessEqual(self.tree.height(self.tree.get_root().data), 12)

    def test_chain_delete(self):
        for value in range(0, self.CHAIN, 2):
            self.tree.delete_item(value)
        self.assertEqual(self.tree.values(), list(range(1, self.CHAIN, 2)))


class TestStaleHandles(unittest.TestCase):

    def test_find_handle_reused_after_two_child_delete(self):
        """A handle to a deleted two-child node now holds the successor's value."""
        tree = OrderedTree(range(1, 8))
        handle = tree.find(4)
        tree.delete_item(4)
        self.assertEqual(handle.data, 5)
        self.assertIs(tree.find(5), handle)

    def test_rebalance_detaches_old_nodes(self):
        tree = OrderedTree([1, 2, 3])
        handle = tree.find(2)
        tree.rebalance()
        self.assertIsNot(tree.find(2), handle)


class TestInvariantChecker(unittest.TestCase):

    def test_valid_tree_summary(self):
        tree = OrderedTree([5, 3, 8])
        tree.insert(4)
        summary = TreeInvariantChecker(tree).get_summary()
        self.assertEqual(summary['total_nodes'], 4)
        self.assertEqual(summary['values'], [3, 4, 5, 8])
        self.assertEqual(summary['height'], 2)
        self.assertTrue(summary['valid'])

    def test_empty_tree_summary(self):
        summary = TreeInvariantChecker(OrderedTree()).get_summary()
        self.assertEqual(summary['total_nodes'], 0)
        self.assertEqual(summary['height'], -1)
        self.assertTrue(summary['balanced'])

    def test_detects_order_violation(self):
        tree = OrderedTree(range(1, 8))
        tree.find(1).data = 100
        problems = TreeInvariantChecker(tree).check()
        self.assertTrue(any("not less than ancestor" in p for p in problems))
        with self.assertRaises(AssertionError):
            TreeInvariantChecker(tree).assert_valid()

    def test_detects_shared_node(self):
        tree = OrderedTree(range(1, 8))
        tree.get_root().right.left = tree.get_root().left
        problems = TreeInvariantChecker(tree).check()
        self.assertTrue(any("more than one slot" in p for p in problems))

    def test_detects_cycle_without_hanging(self):
        tree = OrderedTree(range(1, 8))
        tree.find(7).right = tree.get_root()
        problems = TreeInvariantChecker(tree).check()
        self.assertTrue(any("more than one slot" in p for p in problems))


def test_debug_logging_for_noops(caplog):
    tree = OrderedTree([1, 2, 3])
    with caplog.at_level(logging.DEBUG, logger="orderedtreelib.core.tree"):
        tree.insert(2)
        tree.delete_item(42)
        tree.rebalance()
    messages = [record.getMessage() for record in caplog.records]
    assert "Ignoring duplicate insert of 2" in messages
    assert "Ignoring delete of missing value 42" in messages
    assert "Rebalancing tree with 3 values" in messages
