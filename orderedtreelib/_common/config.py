"""Configuration system for OrderedTreeLib.

This module defines how callers specify a traversal: which order to walk
the tree in, which depths to report, which nodes to keep and what data
to collect from each visited node.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Callable, Any, List


class TraversalStrategy(Enum):
    """Order in which tree nodes are visited."""
    LEVEL_ORDER = "level"   # Breadth-first, left before right
    PRE_ORDER = "pre"       # Node before its subtrees
    IN_ORDER = "in"         # Left subtree, node, right subtree (ascending values)
    POST_ORDER = "post"     # Both subtrees before the node


class DataRequirement(Enum):
    """Specifies what data is collected from each visited node."""
    VALUE = "value"          # Just node.data (most common)
    FULL_NODE = "full"       # The Node object itself
    NODE_INFO = "info"       # Dict with value, depth and child layout
    CUSTOM = "custom"        # User-defined collection function


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal.

    Filters only decide what is reported. Children of an excluded node
    are still explored, since a subtree of a BST can hold values on
    either side of any predicate.
    """

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    def should_include(self, node) -> bool:
        """Check if a node should be included based on filters.

        Args:
            node: Node to check

        Returns:
            True if node passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return self.include_filter(node)

        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                 # Minimum depth to yield
    max_depth: Optional[int] = None    # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded."""
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be visited."""
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    Built by the functional API from keyword arguments, or directly by
    callers that want to reuse one configuration across several trees.
    """

    strategy: TraversalStrategy = TraversalStrategy.IN_ORDER
    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    data_requirements: DataRequirement = DataRequirement.VALUE
    custom_collector: Optional[Callable[[Any, int], Any]] = None

    @classmethod
    def sorted_values(cls) -> 'TraversalConfig':
        """Config yielding every value in ascending order."""
        return cls(strategy=TraversalStrategy.IN_ORDER,
                   data_requirements=DataRequirement.VALUE)

    @classmethod
    def levels(cls, max_depth: Optional[int] = None) -> 'TraversalConfig':
        """Config for a breadth-first scan down to ``max_depth``.

        Args:
            max_depth: Deepest level to report (None = whole tree)

        Returns:
            TraversalConfig for level-order scanning
        """
        return cls(strategy=TraversalStrategy.LEVEL_ORDER,
                   depth=DepthConfig(max_depth=max_depth),
                   data_requirements=DataRequirement.NODE_INFO)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors
