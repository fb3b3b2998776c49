"""Exception taxonomy for OrderedTreeLib.

Most edge conditions in the tree are defined no-ops or ``None`` results
(duplicate insert, deleting a missing value, querying a missing value).
The exceptions below cover the remaining programmer errors.
"""


class OrderedTreeError(Exception):
    """Base class for all OrderedTreeLib errors."""
    pass


class MissingCallbackError(OrderedTreeError, ValueError):
    """Raised when a traversal is invoked without a callable callback."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} requires a callback function")


class ConfigurationError(OrderedTreeError, ValueError):
    """Raised when a TraversalConfig fails validation."""

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__(f"Invalid configuration: {'; '.join(self.problems)}")
