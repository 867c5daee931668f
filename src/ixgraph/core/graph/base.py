"""
Shared graph machinery: the node arena and the abstract graph base.

This module provides the NodeArena that owns node payloads and hands out
stable indices, and the BaseGraph class implementing the parts of the graph
capability interface that do not depend on how adjacency is stored.
Concrete graphs only describe their adjacency relations.

Indices are never reused within one graph. Removing a node retires its index
for good, so a stale index fails loudly with InvalidIndexError instead of
silently resolving to a different node.
"""

import logging
from abc import ABC, abstractmethod
from copy import deepcopy
from typing import Dict, Generic, Iterable, Iterator, List, Set, Tuple, TypeVar

from ..exceptions import InvalidIndexError
from ..models import Node
from ..types import NodeIndex

logger = logging.getLogger(__name__)

T = TypeVar("T")
G = TypeVar("G", bound="BaseGraph")


class NodeArena(Generic[T]):
    """
    Owns node payloads and assigns them stable, monotonically increasing indices.

    Attributes:
        _nodes (Dict[NodeIndex, Node[T]]): Live nodes by index
        _next_index (NodeIndex): Index handed to the next allocated node
    """

    def __init__(self) -> None:
        self._nodes: Dict[NodeIndex, Node[T]] = {}
        self._next_index: NodeIndex = 0

    def allocate(self, data: T) -> NodeIndex:
        """Store a payload under the next unused index and return that index."""
        index = self._next_index
        self._nodes[index] = Node(data=data, index=index)
        self._next_index += 1
        return index

    def remove(self, index: NodeIndex) -> Node[T]:
        """Remove and return a node. The index is not handed out again."""
        try:
            return self._nodes.pop(index)
        except KeyError:
            raise InvalidIndexError(index) from None

    def get(self, index: NodeIndex) -> Node[T]:
        """Get a live node by index."""
        try:
            return self._nodes[index]
        except KeyError:
            raise InvalidIndexError(index) from None

    def indices(self) -> List[NodeIndex]:
        """Get all live indices in ascending order."""
        return sorted(self._nodes)

    def copy(self) -> "NodeArena[T]":
        """Copy the arena keeping every index and the index counter unchanged."""
        arena: NodeArena[T] = NodeArena()
        for index, node in self._nodes.items():
            arena._nodes[index] = Node(data=deepcopy(node.data), index=index)
        arena._next_index = self._next_index
        return arena

    def __contains__(self, index: object) -> bool:
        return index in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node[T]]:
        for index in self.indices():
            yield self._nodes[index]


class BaseGraph(ABC, Generic[T]):
    """
    Abstract index-addressed graph.

    Implements node management, index validation and display on top of
    a NodeArena. Subclasses own the adjacency relations and implement the
    edge-level operations of the capability interface.

    Attributes:
        _arena (NodeArena[T]): Node storage
    """

    def __init__(self) -> None:
        self._arena: NodeArena[T] = NodeArena()

    # Adjacency hooks implemented by concrete graphs

    @abstractmethod
    def _attach(self, index: NodeIndex) -> None:
        """Create empty adjacency entries for a new node."""

    @abstractmethod
    def _detach(self, index: NodeIndex) -> None:
        """Drop a node's adjacency entries and every edge incident to it."""

    @abstractmethod
    def add_edge(self, i: NodeIndex, j: NodeIndex) -> bool:
        """Insert an edge, returning True if it was not already present."""

    @abstractmethod
    def remove_edge(self, i: NodeIndex, j: NodeIndex) -> bool:
        """Remove an edge, returning True if it had been present."""

    @abstractmethod
    def adjacent(self, i: NodeIndex) -> List[NodeIndex]:
        """Get the neighbors reachable from a node in ascending order."""

    @abstractmethod
    def edges(self) -> Iterator[Tuple[NodeIndex, NodeIndex]]:
        """Iterate over all edges of the graph."""

    # Node operations

    def add_node(self, data: T) -> NodeIndex:
        """
        Insert a new node.

        Args:
            data (T): Payload to store

        Returns:
            NodeIndex: The index assigned to the node
        """
        index = self._arena.allocate(data)
        self._attach(index)
        logger.debug(f"Added node {index}")
        return index

    def remove_node(self, i: NodeIndex) -> None:
        """
        Remove a node and every edge incident to it.

        Args:
            i (NodeIndex): Index of the node to remove

        Raises:
            InvalidIndexError: If the index does not name a live node
        """
        self.validate_index(i)
        self._detach(i)
        self._arena.remove(i)
        logger.debug(f"Removed node {i}")

    def validate_index(self, *indices: NodeIndex) -> None:
        """Raise InvalidIndexError for the first index that is not live."""
        for index in indices:
            if index not in self._arena:
                raise InvalidIndexError(index)

    def has_node(self, i: NodeIndex) -> bool:
        """Check if an index names a live node."""
        return i in self._arena

    def get_node(self, i: NodeIndex) -> Node[T]:
        """Get the node stored under an index."""
        return self._arena.get(i)

    def get_data(self, i: NodeIndex) -> T:
        """Get the payload stored under an index."""
        return self._arena.get(i).data

    def nodes(self) -> List[Node[T]]:
        """Get all live nodes in index order."""
        return list(self._arena)

    def num_nodes(self) -> int:
        """Get the number of live nodes."""
        return len(self._arena)

    def node_indices(self) -> List[NodeIndex]:
        """Get the indices of all live nodes in ascending order."""
        return self._arena.indices()

    def num_edges(self) -> int:
        """Get the number of edges."""
        return sum(1 for _ in self.edges())

    # Derived graphs

    def _induced(self: G, nodes: Iterable[NodeIndex]) -> Tuple[G, Dict[NodeIndex, NodeIndex]]:
        """
        Build an empty-edged graph holding copies of the given nodes.

        Members are inserted in ascending index order so that the new graph
        receives densely packed indices.

        Returns:
            Tuple of the new graph and the old-to-new index mapping
        """
        members: Set[NodeIndex] = set(nodes)
        self.validate_index(*sorted(members))

        graph = type(self)()
        index_map: Dict[NodeIndex, NodeIndex] = {}
        for index in sorted(members):
            index_map[index] = graph.add_node(deepcopy(self.get_data(index)))
        return graph, index_map

    # Display

    def __len__(self) -> int:
        return self.num_nodes()

    def __contains__(self, i: object) -> bool:
        return i in self._arena

    def __str__(self) -> str:
        nodes = "".join(f" {node.data} " for node in self._arena)
        edges = "".join(
            f"({self.get_data(i)}, {self.get_data(j)})" for i, j in self.edges()
        )
        return f"{{{nodes}}}  {edges}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={self.num_nodes()}, edges={self.num_edges()})"
