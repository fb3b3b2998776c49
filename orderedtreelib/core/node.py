"""Node record for OrderedTreeLib.

The Node is intentionally kept simple - it's a data container holding one
value and two child slots. All structural logic lives in OrderedTree,
which owns every node transitively.
"""

from typing import Any, Dict, Iterator, Optional


class Node:
    """One element of an ordered tree.

    Every value in ``left``'s subtree is smaller than ``data`` and every
    value in ``right``'s subtree is larger. Nodes carry no parent
    reference; each node is owned by exactly one slot (the tree's root or
    a parent's ``left``/``right``).

    Consumers that receive a node from a query or traversal callback must
    treat it as read-only. Any mutating tree operation may invalidate it.
    """

    __slots__ = ('data', 'left', 'right')

    def __init__(self, data: Any = None,
                 left: Optional['Node'] = None,
                 right: Optional['Node'] = None):
        self.data = data
        self.left = left
        self.right = right

    def identifier(self) -> str:
        """Return a string identifier for this node.

        Values are unique within a tree, so the string form of ``data``
        identifies the node among its siblings and ancestors.
        """
        return str(self.data)

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['Node']:
        """Yield the present children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node."""
        return {
            'data': self.data,
            'has_left': self.left is not None,
            'has_right': self.right is not None,
        }

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(data={self.data!r})"
