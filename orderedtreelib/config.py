"""Configuration re-export.

Configuration lives in the internal _common package; this module is the
public import location.
"""

from ._common.config import (
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
