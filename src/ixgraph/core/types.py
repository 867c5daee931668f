"""
Core type definitions and protocols.

This module provides the node index alias and the capability protocol that
traversal code is written against, so that any graph representation exposing
these operations can be traversed.
"""

from typing import Any, List, Protocol

NodeIndex = int


class GraphProtocol(Protocol):
    """Protocol defining required graph operations."""

    def add_node(self, data: Any) -> NodeIndex:
        """Insert a new node, returning its index."""
        ...

    def add_edge(self, i: NodeIndex, j: NodeIndex) -> bool:
        """Insert an edge, returning True if it was not already present."""
        ...

    def remove_node(self, i: NodeIndex) -> None:
        """Remove a node and every edge incident to it."""
        ...

    def remove_edge(self, i: NodeIndex, j: NodeIndex) -> bool:
        """Remove an edge, returning True if it had been present."""
        ...

    def adjacent(self, i: NodeIndex) -> List[NodeIndex]:
        """Get the (out-)neighbors of a node."""
        ...

    def num_nodes(self) -> int:
        """Get the number of live nodes."""
        ...

    def node_indices(self) -> List[NodeIndex]:
        """Get the indices of all live nodes."""
        ...
