"""Navigation adapter for OrderedTreeLib.

The adapter provides the navigation logic traversers and collectors rely
on, decoupling the node record from the traversal mechanism. Nodes have
no parent pointers, so upward navigation re-descends from the root.
"""

from typing import Iterator, Optional, TYPE_CHECKING
from .node import Node

if TYPE_CHECKING:
    from .tree import OrderedTree


class BinaryTreeAdapter:
    """Adapter for navigating an OrderedTree.

    Traversers only ever ask an adapter for children, so the same
    traverser classes work for a whole tree or any subtree handed to them.
    """

    def __init__(self, tree: 'OrderedTree'):
        """Initialize adapter for a tree.

        Args:
            tree: The tree whose nodes will be navigated
        """
        self.tree = tree

    def get_children(self, node: Node) -> Iterator[Node]:
        """Get the present children of a node, left before right.

        Args:
            node: The parent node

        Returns:
            Iterator yielding zero, one or two child nodes
        """
        return node.children()

    def get_left(self, node: Node) -> Optional[Node]:
        """Return the left child of a node, or None."""
        return node.left

    def get_right(self, node: Node) -> Optional[Node]:
        """Return the right child of a node, or None."""
        return node.right

    def get_parent(self, node: Node) -> Optional[Node]:
        """Get the parent node of the given node.

        Walks down from the root by comparison until the node is reached.

        Args:
            node: The child node

        Returns:
            Parent Node, or None if node is the root or not in the tree
        """
        parent = None
        current = self.tree.get_root()
        value = node.data
        while current is not None:
            if current is node:
                return parent
            parent = current
            if value < current.data:
                current = current.left
            elif value > current.data:
                current = current.right
            else:
                # Same value held by a different object: node is stale
                return None
        return None

    def get_depth(self, node: Node) -> Optional[int]:
        """Calculate the depth of a node in the tree.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0, or None if the value is not in the tree
        """
        return self.tree.depth(node.data)

    def estimated_size(self, node: Optional[Node]) -> int:
        """Count the nodes in the subtree rooted at ``node``."""
        count = 0
        stack = [node] if node is not None else []
        while stack:
            current = stack.pop()
            count += 1
            stack.extend(current.children())
        return count
