"""High-level API for OrderedTreeLib.

This module provides simple, functional interfaces for building trees and
walking them. These functions wrap the object-oriented API for ease of
use in simple cases.
"""

from typing import Iterator, Optional, Callable, Any, Union, Tuple, Dict, Iterable
from .core.node import Node
from .core.tree import OrderedTree
from .core.collector import (
    DataCollector,
    ValueCollector,
    FullNodeCollector,
    NodeInfoCollector,
    CustomCollector,
)
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
)
from .errors import ConfigurationError


def build(values: Iterable[Any]) -> OrderedTree:
    """Build a balanced OrderedTree from any iterable of values.

    Duplicates are dropped and the remaining values sorted before the
    midpoint construction.

    Example:
        >>> tree = build([5, 3, 8, 3, 1])
        >>> tree.values()
        [1, 3, 5, 8]
    """
    return OrderedTree(values)


def traverse_tree(
    tree: OrderedTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Node], bool]] = None,
    exclude_filter: Optional[Callable[[Node], bool]] = None,
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to walk
        strategy: Traversal order (level, pre, in, post)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded

    Yields:
        Node instances that match the criteria

    Raises:
        ConfigurationError: If the depth limits are inconsistent

    Example:
        >>> tree = build(range(1, 8))
        >>> [node.data for node in traverse_tree(tree, "level", max_depth=1)]
        [4, 2, 6]
    """
    config = TraversalConfig(
        strategy=_parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(include_filter=include_filter, exclude_filter=exclude_filter),
        data_requirements=DataRequirement.FULL_NODE,
    )

    for node, _ in execute(config, tree):
        yield node


def collect_tree_data(
    tree: OrderedTree,
    data_requirement: DataRequirement = DataRequirement.VALUE,
    **kwargs
) -> Iterator[Tuple[Node, Any]]:
    """Traverse tree and collect specified data.

    Similar to traverse_tree but yields both nodes and collected data.

    Args:
        tree: Tree to walk
        data_requirement: What data to collect
        **kwargs: Additional traversal options (see traverse_tree), plus
            ``custom_collector`` for DataRequirement.CUSTOM

    Yields:
        Tuples of (node, collected_data)
    """
    config_kwargs = kwargs.copy()
    config_kwargs['data_requirement'] = data_requirement

    config = _build_config_from_kwargs(**config_kwargs)
    yield from execute(config, tree)


def execute(config: TraversalConfig, tree: OrderedTree) -> Iterator[Tuple[Node, Any]]:
    """Run a validated traversal described by ``config`` over ``tree``.

    Validation happens eagerly, before the first node is produced.

    Raises:
        ConfigurationError: If config.validate() reports problems
    """
    problems = config.validate()
    if problems:
        raise ConfigurationError(problems)

    collector = _select_collector(config, tree)
    return _run(config, tree, collector)


def _run(config: TraversalConfig, tree: OrderedTree,
         collector: DataCollector) -> Iterator[Tuple[Node, Any]]:
    for node, depth in tree.traverse(config.strategy,
                                     max_depth=config.depth.max_depth,
                                     min_depth=config.depth.min_depth):
        if config.filter.should_include(node):
            yield node, collector.collect(node, depth)


def count_nodes(tree: OrderedTree, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Args:
        tree: Tree to walk
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def find_nodes(
    tree: OrderedTree,
    predicate: Callable[[Node], bool],
    **kwargs
) -> Iterator[Node]:
    """Find nodes that match a predicate.

    Example:
        >>> tree = build(range(10))
        >>> [n.data for n in find_nodes(tree, lambda n: n.data % 3 == 0)]
        [0, 3, 6, 9]
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(tree, **kwargs)


def get_leaf_nodes(tree: OrderedTree, **kwargs) -> Iterator[Node]:
    """Get all leaf nodes in a tree."""
    for node in traverse_tree(tree, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_stats(tree: OrderedTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with node counts, height, per-depth counts and the
        balance flag
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': -1,
        'depths': {},
        'balanced': tree.is_balanced(),
        'min': tree.min(),
        'max': tree.max(),
    }

    for node, info in collect_tree_data(tree, DataRequirement.NODE_INFO,
                                        strategy=TraversalStrategy.LEVEL_ORDER):
        depth = info['depth']
        stats['total_nodes'] += 1
        if info['is_leaf']:
            stats['leaf_nodes'] += 1
        stats['height'] = max(stats['height'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


# Helper functions

def _select_collector(config: TraversalConfig, tree: OrderedTree) -> DataCollector:
    """Pick the collector matching config.data_requirements."""
    adapter = tree.adapter
    if config.data_requirements == DataRequirement.CUSTOM:
        return CustomCollector(adapter, config.custom_collector)

    collectors = {
        DataRequirement.VALUE: ValueCollector,
        DataRequirement.FULL_NODE: FullNodeCollector,
        DataRequirement.NODE_INFO: NodeInfoCollector,
    }
    return collectors[config.data_requirements](adapter)


def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
        'bfs': TraversalStrategy.LEVEL_ORDER,
        'breadth_first': TraversalStrategy.LEVEL_ORDER,
        'pre': TraversalStrategy.PRE_ORDER,
        'pre_order': TraversalStrategy.PRE_ORDER,
        'preorder': TraversalStrategy.PRE_ORDER,
        'in': TraversalStrategy.IN_ORDER,
        'in_order': TraversalStrategy.IN_ORDER,
        'inorder': TraversalStrategy.IN_ORDER,
        'post': TraversalStrategy.POST_ORDER,
        'post_order': TraversalStrategy.POST_ORDER,
        'postorder': TraversalStrategy.POST_ORDER,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments.

    Args:
        **kwargs: Configuration options

    Returns:
        TraversalConfig instance
    """
    config = TraversalConfig()

    if 'strategy' in kwargs:
        config.strategy = _parse_strategy(kwargs.pop('strategy'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'data_requirement' in kwargs:
        config.data_requirements = kwargs.pop('data_requirement')

    # Apply any remaining kwargs directly
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)

    return config
