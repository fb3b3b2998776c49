"""Test helpers for OrderedTreeLib consumers.

These helpers inspect a tree's structure directly, so test suites can
verify the ordering and ownership invariants without re-implementing a
tree walk of their own.
"""

from typing import Any, Dict, List, Optional, Set, Tuple

from ..core.node import Node
from ..core.tree import OrderedTree


class TreeInvariantChecker:
    """Structural verifier for an OrderedTree.

    Example:
        tree = OrderedTree([5, 3, 8])
        tree.insert(4)
        checker = TreeInvariantChecker(tree)

        assert checker.check() == []
        assert checker.get_summary()['total_nodes'] == 4
    """

    def __init__(self, tree: OrderedTree):
        """Initialize with the tree to inspect.

        Args:
            tree: The tree under test
        """
        self._tree = tree

    def _walk(self) -> Tuple[List[Tuple[Node, Any, Any]], List[str]]:
        """Visit every reachable node once, recording its value bounds.

        Returns:
            Tuple of ((node, low, high) entries, problems found while walking)
        """
        entries = []
        problems = []
        seen: Set[int] = set()
        root = self._tree.get_root()
        stack: List[Tuple[Node, Optional[Any], Optional[Any]]] = []
        if root is not None:
            stack.append((root, None, None))

        while stack:
            node, low, high = stack.pop()
            if id(node) in seen:
                problems.append(f"node {node.data!r} is reachable from more than one slot")
                continue
            seen.add(id(node))
            entries.append((node, low, high))

            if node.left is not None:
                stack.append((node.left, low, node.data))
            if node.right is not None:
                stack.append((node.right, node.data, high))

        return entries, problems

    def check(self) -> List[str]:
        """Return a list of invariant violations (empty if the tree is valid)."""
        entries, problems = self._walk()
        values = set()

        for node, low, high in entries:
            if low is not None and not low < node.data:
                problems.append(f"node {node.data!r} is not greater than ancestor {low!r}")
            if high is not None and not node.data < high:
                problems.append(f"node {node.data!r} is not less than ancestor {high!r}")
            if node.data in values:
                problems.append(f"value {node.data!r} appears more than once")
            values.add(node.data)

        return problems

    def assert_valid(self) -> None:
        """Raise AssertionError listing every violation, if any."""
        problems = self.check()
        assert not problems, "Tree invariants violated: " + "; ".join(problems)

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - total_nodes: Number of reachable nodes
            - values: Values in ascending order
            - height: Height of the root (-1 when empty)
            - balanced: Result of tree.is_balanced()
            - valid: True if check() found no violations
        """
        entries, _ = self._walk()
        root = self._tree.get_root()
        return {
            'total_nodes': len(entries),
            'values': sorted(node.data for node, _, _ in entries),
            'height': self._tree.height(root.data) if root is not None else -1,
            'balanced': self._tree.is_balanced(),
            'valid': not self.check(),
        }


__all__ = ['TreeInvariantChecker']
