"""Ordered binary search tree with rebuild-based rebalancing.

OrderedTree owns a single root slot and every node reachable from it.
Insertion and deletion never rotate; balance is restored only by an
explicit ``rebalance()``, which discards the structure and rebuilds it
from the sorted values.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .node import Node
from .adapter import BinaryTreeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstInOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .._common.config import TraversalStrategy
from ..errors import MissingCallbackError

logger = logging.getLogger(__name__)

_TRAVERSERS = {
    TraversalStrategy.LEVEL_ORDER: BreadthFirstTraverser,
    TraversalStrategy.PRE_ORDER: DepthFirstPreOrderTraverser,
    TraversalStrategy.IN_ORDER: DepthFirstInOrderTraverser,
    TraversalStrategy.POST_ORDER: DepthFirstPostOrderTraverser,
}


def _clean_and_sort(values: Iterable[Any]) -> List[Any]:
    """Drop duplicate values and sort the rest ascending."""
    return sorted(set(values))


class OrderedTree:
    """Binary search tree over unique, totally-ordered values.

    Invariants held after every public operation:

    - every value in a node's left subtree is smaller than the node's
      value, every value in its right subtree is larger
    - no value occurs twice
    - each node hangs from exactly one slot (no sharing, no cycles)

    Example:
        >>> tree = OrderedTree([5, 3, 8, 3, 1])
        >>> tree.get_root().data
        3
        >>> list(tree)
        [1, 3, 5, 8]
    """

    def __init__(self, values: Iterable[Any] = ()):
        """Build a height-balanced tree from ``values``.

        Args:
            values: Any iterable of mutually comparable, hashable values.
                Duplicates are dropped.
        """
        self._root: Optional[Node] = None
        self._adapter = BinaryTreeAdapter(self)
        self._rebuild(_clean_and_sort(values))

    @classmethod
    def build(cls, values: Iterable[Any]) -> 'OrderedTree':
        """Alternate constructor mirroring ``OrderedTree(values)``."""
        return cls(values)

    # Construction

    def _build_tree(self, arr: List[Any], start: int, end: int) -> Optional[Node]:
        """Build a minimal-height subtree from the sorted slice arr[start..end]."""
        if start > end:
            return None

        mid = (start + end) // 2
        node = Node(arr[mid])
        node.left = self._build_tree(arr, start, mid - 1)
        node.right = self._build_tree(arr, mid + 1, end)
        return node

    def _rebuild(self, sorted_values: List[Any]) -> None:
        """Replace the whole structure with one built from sorted_values."""
        self._root = self._build_tree(sorted_values, 0, len(sorted_values) - 1)
        logger.debug(
            "Built tree from %d values (root=%r)",
            len(sorted_values),
            self._root.data if self._root is not None else None,
        )

    # Structural access

    def get_root(self) -> Optional[Node]:
        """Return the root node, or None for an empty tree.

        Intended for read-only consumers such as renderers.
        """
        return self._root

    @property
    def root(self) -> Optional[Node]:
        return self._root

    @property
    def adapter(self) -> BinaryTreeAdapter:
        return self._adapter

    def is_empty(self) -> bool:
        return self._root is None

    # Lookup and mutation

    def find(self, value: Any) -> Optional[Node]:
        """Return the node holding ``value``, or None if it is not present."""
        current = self._root
        while current is not None:
            if value < current.data:
                current = current.left
            elif value > current.data:
                current = current.right
            else:
                return current
        return None

    def insert(self, value: Any) -> None:
        """Insert ``value`` as a new leaf.

        Inserting a value that is already present is a silent no-op. The
        presence check happens during the same descent that finds the
        attachment point. Insertion never rebalances.
        """
        if self._root is None:
            self._root = Node(value)
            return

        current = self._root
        while True:
            if value < current.data:
                if current.left is None:
                    current.left = Node(value)
                    return
                current = current.left
            elif value > current.data:
                if current.right is None:
                    current.right = Node(value)
                    return
                current = current.right
            else:
                logger.debug("Ignoring duplicate insert of %r", value)
                return

    def delete_item(self, value: Any) -> None:
        """Remove ``value`` from the tree.

        Deleting a value that is not present is a silent no-op. A node
        with two children takes the value of its in-order successor, and
        the successor is then removed from the right subtree.
        """
        self._root, removed = self._remove(self._root, value)
        if not removed:
            logger.debug("Ignoring delete of missing value %r", value)

    @staticmethod
    def _find_min_node(node: Node) -> Node:
        """Return the leftmost (smallest) node of a non-empty subtree."""
        while node.left is not None:
            node = node.left
        return node

    def _remove(self, subtree: Optional[Node], value: Any) -> Tuple[Optional[Node], bool]:
        """Delete ``value`` from ``subtree``.

        Returns:
            Tuple of (new subtree root, whether a node was removed)
        """
        parent = None
        current = subtree
        while current is not None:
            if value < current.data:
                parent, current = current, current.left
            elif value > current.data:
                parent, current = current, current.right
            else:
                break

        if current is None:
            return subtree, False

        if current.left is not None and current.right is not None:
            successor = self._find_min_node(current.right)
            current.data = successor.data
            # The successor has no left child, so this removal splices it out directly
            current.right, _ = self._remove(current.right, successor.data)
            return subtree, True

        replacement = current.right if current.left is None else current.left

        if parent is None:
            return replacement, True
        if parent.left is current:
            parent.left = replacement
        else:
            parent.right = replacement
        return subtree, True

    # Traversal

    def _traverser_for(self, strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
        if isinstance(strategy, TraversalStrategy):
            return _TRAVERSERS[strategy](self._adapter)
        return create_traverser(strategy, self._adapter)

    def traverse(self,
                 strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Lazily walk the tree, yielding ``(node, depth)`` pairs.

        Every call starts a fresh walk. The tree must not be mutated
        until the iterator is exhausted or discarded.

        Args:
            strategy: TraversalStrategy member or strategy name
            max_depth: Deepest level to visit (None = unlimited)
            min_depth: Shallowest level to report
        """
        return self._traverser_for(strategy).traverse(self._root, max_depth, min_depth)

    def _for_each(self, strategy: TraversalStrategy,
                  callback: Callable[[Node], Any], operation: str) -> None:
        if callback is None or not callable(callback):
            raise MissingCallbackError(operation)
        for node, _ in self.traverse(strategy):
            callback(node)

    def level_order_for_each(self, callback: Callable[[Node], Any]) -> None:
        """Call ``callback(node)`` for every node, breadth-first.

        Raises:
            MissingCallbackError: If callback is missing or not callable
        """
        self._for_each(TraversalStrategy.LEVEL_ORDER, callback, "level_order_for_each")

    def in_order_for_each(self, callback: Callable[[Node], Any]) -> None:
        """Call ``callback(node)`` for every node in ascending value order.

        Raises:
            MissingCallbackError: If callback is missing or not callable
        """
        self._for_each(TraversalStrategy.IN_ORDER, callback, "in_order_for_each")

    def pre_order_for_each(self, callback: Callable[[Node], Any]) -> None:
        """Call ``callback(node)`` for every node, parents before children.

        Raises:
            MissingCallbackError: If callback is missing or not callable
        """
        self._for_each(TraversalStrategy.PRE_ORDER, callback, "pre_order_for_each")

    def post_order_for_each(self, callback: Callable[[Node], Any]) -> None:
        """Call ``callback(node)`` for every node, children before parents.

        Raises:
            MissingCallbackError: If callback is missing or not callable
        """
        self._for_each(TraversalStrategy.POST_ORDER, callback, "post_order_for_each")

    def values(self, order: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER) -> List[Any]:
        """Return all values as a list in the requested traversal order."""
        return [node.data for node, _ in self.traverse(order)]

    # Queries

    def height(self, value: Any) -> Optional[int]:
        """Return the height of the subtree rooted at ``value``'s node.

        Height counts edges down to the deepest leaf, so a leaf has
        height 0. Returns None if ``value`` is not in the tree.
        """
        node = self.find(value)
        if node is None:
            return None
        return self._subtree_height(node)

    def _subtree_height(self, node: Optional[Node]) -> int:
        # Deepest level reached by a breadth-first walk; empty subtree is -1
        height = -1
        for _, depth in BreadthFirstTraverser(self._adapter).traverse(node):
            height = depth
        return height

    def depth(self, value: Any) -> Optional[int]:
        """Return the number of edges from the root to ``value``'s node.

        Returns None if ``value`` is not in the tree.
        """
        current = self._root
        current_depth = 0
        while current is not None:
            if value < current.data:
                current = current.left
            elif value > current.data:
                current = current.right
            else:
                return current_depth
            current_depth += 1
        return None

    def is_balanced(self) -> bool:
        """Check that every node's subtree heights differ by at most 1.

        Computed bottom-up in a single post-order pass that records a
        ``(balanced, height)`` pair for each subtree.
        """
        results: Dict[int, Tuple[bool, int]] = {}
        empty = (True, -1)

        for node, _ in DepthFirstPostOrderTraverser(self._adapter).traverse(self._root):
            left_ok, left_height = results.pop(id(node.left), empty) if node.left is not None else empty
            right_ok, right_height = results.pop(id(node.right), empty) if node.right is not None else empty
            balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
            results[id(node)] = (balanced, max(left_height, right_height) + 1)

        if self._root is None:
            return True
        return results[id(self._root)][0]

    def rebalance(self) -> None:
        """Rebuild the tree into minimal-height shape.

        Values are gathered in order (already ascending and unique) and
        the old structure is replaced wholesale.
        """
        values: List[Any] = []
        self.in_order_for_each(lambda node: values.append(node.data))
        logger.debug("Rebalancing tree with %d values", len(values))
        self._rebuild(values)

    def min(self) -> Optional[Any]:
        """Return the smallest value, or None when empty."""
        if self._root is None:
            return None
        return self._find_min_node(self._root).data

    def max(self) -> Optional[Any]:
        """Return the largest value, or None when empty."""
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.data

    # Container protocol

    def __len__(self) -> int:
        return self._adapter.estimated_size(self._root)

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def __iter__(self) -> Iterator[Any]:
        for node, _ in self.traverse(TraversalStrategy.IN_ORDER):
            yield node.data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.values()!r})"
