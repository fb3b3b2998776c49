"""Data collection strategies for OrderedTreeLib.

DataCollectors define what information to extract from nodes during
traversal, so the same walk can produce plain values, node handles or
structural summaries.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict
from .node import Node
from .adapter import BinaryTreeAdapter


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: BinaryTreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: BinaryTreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class ValueCollector(DataCollector):
    """Collects only the stored value of each node."""

    def collect(self, node: Node, depth: int) -> Any:
        return node.data


class FullNodeCollector(DataCollector):
    """Collects the node objects themselves.

    The returned nodes are only valid until the next mutation of the tree.
    """

    def collect(self, node: Node, depth: int) -> Node:
        return node


class NodeInfoCollector(DataCollector):
    """Collects value, depth and child layout for each node.

    Useful for structure analysis and for renderers that should not hold
    on to live node references.
    """

    def collect(self, node: Node, depth: int) -> Dict[str, Any]:
        """Return node info with child layout."""
        info = node.metadata()
        info['depth'] = depth
        info['is_leaf'] = node.is_leaf()
        info['child_count'] = sum(1 for _ in self.adapter.get_children(node))
        return info


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, adapter: BinaryTreeAdapter, collect_func):
        """Initialize with custom collection function.

        Args:
            adapter: BinaryTreeAdapter for tree navigation
            collect_func: Function(node, depth) -> Any
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: Node, depth: int) -> Any:
        return self.collect_func(node, depth)
