"""OrderedTreeLib - Ordered Binary Search Tree Library.

OrderedTreeLib provides a binary search tree over unique, totally-ordered
values with lookup, insertion, deletion, four traversal orders,
height/depth queries, balance detection and rebuild-based rebalancing.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from orderedtreelib import OrderedTree

    tree = OrderedTree([5, 3, 8, 1])
    tree.insert(9)
    tree.in_order_for_each(lambda node: print(node.data))
    if not tree.is_balanced():
        tree.rebalance()
━━━━━━━━━━━━━━━━━━━━━━━━━━

Insertion and deletion never rotate. Balance is restored only by an
explicit ``rebalance()``.
"""

__version__ = "0.1.0"

# Core components
from .core.node import Node
from .core.tree import OrderedTree
from .core.adapter import BinaryTreeAdapter
from .core.traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstInOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .core.collector import (
    DataCollector,
    ValueCollector,
    FullNodeCollector,
    NodeInfoCollector,
    CustomCollector,
)

# Configuration and errors
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    FilterConfig,
    DepthConfig,
)
from .errors import OrderedTreeError, MissingCallbackError, ConfigurationError

# High-level API
from .api import (
    build,
    traverse_tree,
    collect_tree_data,
    execute,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'Node',
    'OrderedTree',
    'BinaryTreeAdapter',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstInOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'create_traverser',
    'DataCollector',
    'ValueCollector',
    'FullNodeCollector',
    'NodeInfoCollector',
    'CustomCollector',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'DataRequirement',
    'FilterConfig',
    'DepthConfig',
    # Errors
    'OrderedTreeError',
    'MissingCallbackError',
    'ConfigurationError',
    # API
    'build',
    'traverse_tree',
    'collect_tree_data',
    'execute',
    'count_nodes',
    'find_nodes',
    'get_leaf_nodes',
    'get_tree_stats',
]
