"""Core abstractions for OrderedTreeLib.

This module contains the node record, the tree that owns the nodes and
the navigation/traversal/collection layers built around them.
"""

from .node import Node
from .adapter import BinaryTreeAdapter
from .traverser import TreeTraverser
from .collector import DataCollector
from .tree import OrderedTree

__all__ = [
    "Node",
    "BinaryTreeAdapter",
    "TreeTraverser",
    "DataCollector",
    "OrderedTree",
]
