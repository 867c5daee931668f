"""
Custom exceptions for the graph library.

This module defines the small hierarchy of exceptions raised by graph,
tree and traversal operations, plus the validation error used when graph
descriptions are loaded from external input.
"""


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on a graph or traversal tree
    encounter errors, such as references to nodes that do not exist or
    attempts to break the tree structure.

    Examples:
        * Stale or unknown node index
        * Adding a second root to a tree
        * Adding a node to a tree twice
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class InvalidIndexError(GraphOperationError):
    """
    Raised when an index does not name a live node.

    Indices are never recycled, so an index that was valid before a
    ``remove_node`` call keeps raising this error afterwards. The graph is
    left unchanged whenever it is raised.

    Attributes:
        index: The offending node index
    """

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Invalid node index: {index}")


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when a graph description fails schema
    validation before any graph is built from it.
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"
