"""
Directed graph with mirrored in- and out-adjacency relations.

The two relations are always consistent: ``j in out_adj[i]`` exactly when
``i in in_adj[j]``. Self-loops are allowed.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Set, Tuple, TypeVar

from ..types import NodeIndex
from .base import BaseGraph

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Digraph(BaseGraph[T]):
    """
    Directed graph. Allows loops.

    Attributes:
        _out_adj (Dict[NodeIndex, Set[NodeIndex]]): Out-neighbors of each node
        _in_adj (Dict[NodeIndex, Set[NodeIndex]]): In-neighbors of each node
    """

    def __init__(self) -> None:
        super().__init__()
        self._out_adj: Dict[NodeIndex, Set[NodeIndex]] = {}
        self._in_adj: Dict[NodeIndex, Set[NodeIndex]] = {}

    def _attach(self, index: NodeIndex) -> None:
        self._out_adj[index] = set()
        self._in_adj[index] = set()

    def _detach(self, index: NodeIndex) -> None:
        for j in self._out_adj.pop(index):
            if j != index:
                self._in_adj[j].discard(index)
        for j in self._in_adj.pop(index):
            if j != index:
                self._out_adj[j].discard(index)

    def add_edge(self, i: NodeIndex, j: NodeIndex) -> bool:
        """
        Insert the directed edge i -> j.

        Args:
            i (NodeIndex): Source node
            j (NodeIndex): Target node

        Returns:
            bool: True if the edge was newly created, False if it existed

        Raises:
            InvalidIndexError: If either endpoint is not a live node
        """
        self.validate_index(i, j)
        if j in self._out_adj[i]:
            return False

        self._out_adj[i].add(j)
        self._in_adj[j].add(i)
        logger.debug(f"Added edge ({i}, {j})")
        return True

    def remove_edge(self, i: NodeIndex, j: NodeIndex) -> bool:
        """
        Remove the directed edge i -> j if present.

        Returns:
            bool: True if the edge had existed

        Raises:
            InvalidIndexError: If either endpoint is not a live node
        """
        self.validate_index(i, j)
        if j not in self._out_adj[i]:
            return False

        self._out_adj[i].discard(j)
        self._in_adj[j].discard(i)
        logger.debug(f"Removed edge ({i}, {j})")
        return True

    def adjacent(self, i: NodeIndex) -> List[NodeIndex]:
        """Get the out-neighbors of a node in ascending order."""
        self.validate_index(i)
        return sorted(self._out_adj[i])

    def in_adjacent(self, i: NodeIndex) -> List[NodeIndex]:
        """Get the in-neighbors of a node in ascending order."""
        self.validate_index(i)
        return sorted(self._in_adj[i])

    def out_degree(self, i: NodeIndex) -> int:
        """Get the number of out-neighbors of a node."""
        self.validate_index(i)
        return len(self._out_adj[i])

    def in_degree(self, i: NodeIndex) -> int:
        """Get the number of in-neighbors of a node."""
        self.validate_index(i)
        return len(self._in_adj[i])

    def is_out_adj_to(self, i: NodeIndex, j: NodeIndex) -> bool:
        """Check if j is an out-neighbor of i."""
        self.validate_index(i, j)
        return j in self._out_adj[i]

    def edges(self) -> Iterator[Tuple[NodeIndex, NodeIndex]]:
        """Iterate over every directed edge as (source, target)."""
        for i in self.node_indices():
            for j in sorted(self._out_adj[i]):
                yield i, j

    def induced_subgraph(self, nodes: Iterable[NodeIndex]) -> "Digraph[T]":
        """
        Return a new graph induced by a set of node indices.

        Behaves like Ungraph.induced_subgraph and preserves edge direction.

        Raises:
            InvalidIndexError: If any member is not a live node
        """
        graph, index_map = self._induced(nodes)
        for i, new_i in index_map.items():
            for j in self._out_adj[i]:
                if j in index_map:
                    graph.add_edge(new_i, index_map[j])
        return graph

    def transpose(self) -> "Digraph[T]":
        """
        Return the transpose of the graph.

        Every edge is reversed. The transpose keeps the same node indices
        (including the next index to be assigned) and copies of the payloads,
        so transposing twice reproduces the original graph.

        Returns:
            Digraph[T]: A new, independent graph
        """
        graph: Digraph[T] = Digraph()
        graph._arena = self._arena.copy()
        for index in graph.node_indices():
            graph._attach(index)
        for i, j in self.edges():
            graph._out_adj[j].add(i)
            graph._in_adj[i].add(j)
        return graph
