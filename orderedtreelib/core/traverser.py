"""Tree traversal strategies for OrderedTreeLib.

Traversers implement the different orders for walking an ordered tree.
They navigate through a BinaryTreeAdapter and yield ``(node, depth)``
pairs. All of them use explicit stacks or queues instead of recursion,
so a long insertion chain cannot exhaust the interpreter's call stack.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Iterator, Optional, Deque, List, Tuple
from .node import Node
from .adapter import BinaryTreeAdapter


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Each call to ``traverse`` is a fresh walk. Mutating the tree while a
    traversal is in progress is undefined; callers must finish or discard
    the iterator first.
    """

    def __init__(self, adapter: BinaryTreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: BinaryTreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None = empty tree)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1, and
    the left child before the right child within a level.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse tree breadth-first using a FIFO queue."""
        if root is None:
            return

        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node before its left subtree, then its right subtree. Good
    for copying a tree shape, since replaying the values through
    ``insert`` reproduces the same structure.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return

        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Right goes on first so left is popped first
                right = self.adapter.get_right(node)
                if right is not None:
                    stack.append((right, depth + 1))
                left = self.adapter.get_left(node)
                if left is not None:
                    stack.append((left, depth + 1))


class DepthFirstInOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal strategy.

    Visits the left subtree, then the node, then the right subtree. On an
    ordered tree this yields values in strictly ascending order, which
    ``OrderedTree.rebalance`` relies on.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        current = root
        depth = 0

        while stack or current is not None:
            # Walk down the left spine, remembering each node
            while current is not None:
                stack.append((current, depth))
                if self._should_explore(depth, max_depth):
                    current = self.adapter.get_left(current)
                    depth += 1
                else:
                    current = None

            node, node_depth = stack.pop()

            if self._should_yield(node_depth, min_depth, max_depth):
                yield (node, node_depth)

            if self._should_explore(node_depth, max_depth):
                current = self.adapter.get_right(node)
                depth = node_depth + 1


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits both subtrees before the node itself. Good for tear-down or
    computing aggregate values such as subtree heights.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return

        # Entries are (node, depth, children_already_pushed)
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                right = self.adapter.get_right(node)
                if right is not None:
                    stack.append((right, depth + 1, False))
                left = self.adapter.get_left(node)
                if left is not None:
                    stack.append((left, depth + 1, False))


# Factory function for creating traversers by name
def create_traverser(strategy: str, adapter: BinaryTreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (level, pre, in, post or an alias)
        adapter: BinaryTreeAdapter for the tree

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'level': BreadthFirstTraverser,
        'level_order': BreadthFirstTraverser,
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'pre': DepthFirstPreOrderTraverser,
        'pre_order': DepthFirstPreOrderTraverser,
        'preorder': DepthFirstPreOrderTraverser,
        'in': DepthFirstInOrderTraverser,
        'in_order': DepthFirstInOrderTraverser,
        'inorder': DepthFirstInOrderTraverser,
        'post': DepthFirstPostOrderTraverser,
        'post_order': DepthFirstPostOrderTraverser,
        'postorder': DepthFirstPostOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
