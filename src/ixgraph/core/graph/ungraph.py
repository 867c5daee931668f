"""
Undirected graph with a single symmetric adjacency relation.

Each live node maps to the set of nodes it is adjacent to, and the relation is
kept symmetric: ``j in adj[i]`` exactly when ``i in adj[j]``. Self-loops are
allowed; edges carry no weight or multiplicity.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Set, Tuple, TypeVar

from ..types import NodeIndex
from .base import BaseGraph

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Ungraph(BaseGraph[T]):
    """
    Undirected graph. Allows loops.

    Attributes:
        _adj (Dict[NodeIndex, Set[NodeIndex]]): Symmetric adjacency relation
    """

    def __init__(self) -> None:
        super().__init__()
        self._adj: Dict[NodeIndex, Set[NodeIndex]] = {}

    def _attach(self, index: NodeIndex) -> None:
        self._adj[index] = set()

    def _detach(self, index: NodeIndex) -> None:
        for j in self._adj.pop(index):
            if j != index:
                self._adj[j].discard(index)

    def add_edge(self, i: NodeIndex, j: NodeIndex) -> bool:
        """
        Insert the undirected edge {i, j}.

        Args:
            i (NodeIndex): One endpoint
            j (NodeIndex): Other endpoint

        Returns:
            bool: True if the edge was newly created, False if it existed

        Raises:
            InvalidIndexError: If either endpoint is not a live node
        """
        self.validate_index(i, j)
        if j in self._adj[i]:
            return False

        self._adj[i].add(j)
        self._adj[j].add(i)
        logger.debug(f"Added edge ({i}, {j})")
        return True

    def remove_edge(self, i: NodeIndex, j: NodeIndex) -> bool:
        """
        Remove the undirected edge {i, j} if present.

        Returns:
            bool: True if the edge had existed

        Raises:
            InvalidIndexError: If either endpoint is not a live node
        """
        self.validate_index(i, j)
        if j not in self._adj[i]:
            return False

        self._adj[i].discard(j)
        self._adj[j].discard(i)
        logger.debug(f"Removed edge ({i}, {j})")
        return True

    def adjacent(self, i: NodeIndex) -> List[NodeIndex]:
        """Get all neighbors of a node in ascending order."""
        self.validate_index(i)
        return sorted(self._adj[i])

    def degree(self, i: NodeIndex) -> int:
        """Get the size of a node's adjacency set. A self-loop counts once."""
        self.validate_index(i)
        return len(self._adj[i])

    def are_adj(self, i: NodeIndex, j: NodeIndex) -> bool:
        """Check if nodes i and j are adjacent."""
        self.validate_index(i, j)
        return j in self._adj[i]

    def edges(self) -> Iterator[Tuple[NodeIndex, NodeIndex]]:
        """Iterate over each undirected edge once, as (i, j) with i <= j."""
        for i in self.node_indices():
            for j in sorted(self._adj[i]):
                if i <= j:
                    yield i, j

    def induced_subgraph(self, nodes: Iterable[NodeIndex]) -> "Ungraph[T]":
        """
        Return a new graph induced by a set of node indices.

        The new graph holds copies of the member payloads under fresh, densely
        packed indices assigned in ascending order of the original indices.
        Only edges with both endpoints in the set are kept.

        Args:
            nodes (Iterable[NodeIndex]): Indices of the nodes to keep

        Returns:
            Ungraph[T]: The induced subgraph

        Raises:
            InvalidIndexError: If any member is not a live node
        """
        graph, index_map = self._induced(nodes)
        for i, new_i in index_map.items():
            for j in self._adj[i]:
                if j in index_map:
                    graph.add_edge(new_i, index_map[j])
        return graph
