"""Common components shared across OrderedTreeLib.

This internal package holds pure configuration code. It should NOT be
imported directly by users; everything here is re-exported from the
top-level package.

Important: This package must NEVER import from core or api to avoid
circular dependencies.
"""

from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    FilterConfig,
    DepthConfig,
)

__all__ = [
    'TraversalConfig',
    'TraversalStrategy',
    'DataRequirement',
    'FilterConfig',
    'DepthConfig',
]
