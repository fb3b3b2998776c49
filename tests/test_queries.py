"""Tests for find, height, depth, is_balanced and rebalance."""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import OrderedTree, BinaryTreeAdapter, Node
from orderedtreelib.testing import TreeInvariantChecker


class TestFind(unittest.TestCase):

    def setUp(self):
        self.tree = OrderedTree(range(1, 8))

    def test_find_present(self):
        for value in range(1, 8):
            node = self.tree.find(value)
            self.assertIsNotNone(node)
            self.assertEqual(node.data, value)

    def test_find_root(self):
        self.assertIs(self.tree.find(4), self.tree.get_root())

    def test_find_missing(self):
        self.assertIsNone(self.tree.find(0))
        self.assertIsNone(self.tree.find(8))
        self.assertIsNone(self.tree.find(3.5))

    def test_find_on_empty_tree(self):
        self.assertIsNone(OrderedTree().find(1))

    def test_find_does_not_mutate(self):
        before = self.tree.values("level")
        self.tree.find(3)
        self.tree.find(99)
        self.assertEqual(self.tree.values("level"), before)


class TestHeightAndDepth(unittest.TestCase):

    def setUp(self):
        self.tree = OrderedTree(range(1, 8))

    def test_height_of_root(self):
        self.assertEqual(self.tree.height(4), 2)

    def test_height_of_internal_node(self):
        self.assertEqual(self.tree.height(2), 1)
        self.assertEqual(self.tree.height(6), 1)

    def test_height_of_leaf_is_zero(self):
        for value in (1, 3, 5, 7):
            self.assertEqual(self.tree.height(value), 0)

    def test_height_of_missing_value(self):
        self.assertIsNone(self.tree.height(99))
        self.assertIsNone(OrderedTree().height(1))

    def test_height_follows_deepest_branch(self):
        self.tree.insert(8)
        self.tree.insert(9)
        self.assertEqual(self.tree.height(4), 4)
        self.assertEqual(self.tree.height(6), 3)
        self.assertEqual(self.tree.height(2), 1)

    def test_depth_of_root_is_zero(self):
        self.assertEqual(self.tree.depth(4), 0)

    def test_depth_of_descendants(self):
        self.assertEqual(self.tree.depth(2), 1)
        self.assertEqual(self.tree.depth(6), 1)
        self.assertEqual(self.tree.depth(7), 2)

    def test_depth_of_missing_value(self):
        self.assertIsNone(self.tree.depth(0))
        self.assertIsNone(OrderedTree().depth(0))

    def test_depth_after_insert(self):
        self.tree.insert(10)
        self.assertEqual(self.tree.depth(10), 3)


class TestBalance(unittest.TestCase):

    def test_built_tree_is_balanced(self):
        for size in range(0, 40):
            self.assertTrue(OrderedTree(range(size)).is_balanced(), size)

    def test_skewed_tail_is_unbalanced(self):
        tree = OrderedTree(range(1, 8))
        for value in (8, 9, 10):
            tree.insert(value)
        self.assertFalse(tree.is_balanced())

    def test_imbalance_below_root_is_detected(self):
        """Root children have equal height but a grandchild is lopsided."""
        tree = OrderedTree([20])
        for value in (10, 30, 5, 3, 35, 40):
            tree.insert(value)
        # root: left height 2 (10-5-3), right height 2 (30-35-40)
        self.assertEqual(tree.height(10), tree.height(30))
        self.assertFalse(tree.is_balanced())

    def test_two_node_tree_is_balanced(self):
        tree = OrderedTree([1])
        tree.insert(2)
        self.assertTrue(tree.is_balanced())

    def test_three_node_chain_is_unbalanced(self):
        tree = OrderedTree([1])
        tree.insert(2)
        tree.insert(3)
        self.assertFalse(tree.is_balanced())


class TestRebalance(unittest.TestCase):

    def test_rebalance_after_skew(self):
        tree = OrderedTree(range(1, 8))
        for value in (8, 9, 10):
            tree.insert(value)
        self.assertFalse(tree.is_balanced())

        tree.rebalance()

        self.assertTrue(tree.is_balanced())
        self.assertEqual(tree.values(), list(range(1, 11)))
        self.assertEqual(tree.values("level"), [5, 2, 8, 1, 3, 6, 9, 4, 7, 10])

    def test_rebalance_preserves_values(self):
        tree = OrderedTree([50])
        for value in range(51, 80):
            tree.insert(value)
        for value in range(49, 30, -2):
            tree.insert(value)
        before = tree.values()

        tree.rebalance()

        self.assertEqual(tree.values(), before)
        TreeInvariantChecker(tree).assert_valid()
        self.assertTrue(tree.is_balanced())

    def test_rebalance_empty_tree(self):
        tree = OrderedTree()
        tree.rebalance()
        self.assertTrue(tree.is_empty())
        self.assertTrue(tree.is_balanced())

    def test_rebalance_replaces_nodes(self):
        tree = OrderedTree([1])
        tree.insert(2)
        tree.insert(3)
        old_root = tree.get_root()

        tree.rebalance()

        self.assertIsNot(tree.get_root(), old_root)
        self.assertEqual(tree.get_root().data, 2)


class TestAdapter(unittest.TestCase):

    def setUp(self):
        self.tree = OrderedTree(range(1, 8))
        self.adapter = BinaryTreeAdapter(self.tree)

    def test_children_left_first(self):
        children = [c.data for c in self.adapter.get_children(self.tree.get_root())]
        self.assertEqual(children, [2, 6])

    def test_get_parent(self):
        self.assertIs(self.adapter.get_parent(self.tree.find(1)), self.tree.find(2))
        self.assertIs(self.adapter.get_parent(self.tree.find(6)), self.tree.get_root())
        self.assertIsNone(self.adapter.get_parent(self.tree.get_root()))

    def test_get_parent_of_foreign_node(self):
        self.assertIsNone(self.adapter.get_parent(Node(3)))
        self.assertIsNone(self.adapter.get_parent(Node(99)))

    def test_get_depth(self):
        self.assertEqual(self.adapter.get_depth(self.tree.find(7)), 2)

    def test_estimated_size(self):
        self.assertEqual(self.adapter.estimated_size(self.tree.get_root()), 7)
        self.assertEqual(self.adapter.estimated_size(self.tree.find(6)), 3)
        self.assertEqual(self.adapter.estimated_size(None), 0)
