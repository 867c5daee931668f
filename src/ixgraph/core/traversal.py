"""
Graph traversal system using iterator pattern.

This module provides breadth-first and depth-first traversal over any graph
satisfying GraphProtocol. Iterators yield ``(index, parent)`` discovery pairs;
the builder functions turn those pairs into spanning trees and forests.

The two strategies differ in when a node is claimed:

* BFS marks a node discovered when it is enqueued and never enqueues it
  again, so a node's tree parent is the node that first discovered it.
* DFS marks a node visited when it is popped. Every neighbor is pushed
  unconditionally and already visited entries are discarded at pop time, so
  the parent is the one whose stack entry is popped first.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Dict, Iterator, List, Optional, Set, Tuple, Type

from .exceptions import InvalidIndexError
from .tree import Forest, Tree
from .types import GraphProtocol, NodeIndex

logger = logging.getLogger(__name__)

Discovery = Tuple[NodeIndex, Optional[NodeIndex]]


class GraphIterator(ABC):
    """Base class for graph traversal iterators."""

    def __init__(
        self,
        graph: GraphProtocol,
        start_node: NodeIndex,
        seen: Optional[Set[NodeIndex]] = None,
    ):
        """
        Initialize iterator.

        Args:
            graph: The graph to traverse
            start_node: Starting node for traversal
            seen: Nodes already claimed by an earlier traversal. The set is
                updated in place, which lets forest construction share it
                between trees.
        """
        self.graph = graph
        self.start = start_node
        self.seen: Set[NodeIndex] = set() if seen is None else seen

    @abstractmethod
    def __iter__(self) -> Iterator[Discovery]:
        """
        Get iterator for traversal.

        Returns:
            Iterator yielding tuples of (node_index, parent_index)
        """
        pass


class BFSIterator(GraphIterator):
    """Breadth-first traversal iterator."""

    def __iter__(self) -> Iterator[Discovery]:
        """
        Traverse graph in breadth-first order.

        Yields:
            Tuples of (node_index, parent_index) in BFS order
        """
        if self.start in self.seen:
            return

        queue = deque([(self.start, None)])
        self.seen.add(self.start)

        while queue:
            node, parent = queue.popleft()
            yield node, parent

            for neighbor in self.graph.adjacent(node):
                if neighbor not in self.seen:
                    self.seen.add(neighbor)
                    queue.append((neighbor, node))


class DFSIterator(GraphIterator):
    """Depth-first traversal iterator."""

    def __iter__(self) -> Iterator[Discovery]:
        """
        Traverse graph in depth-first order.

        Yields:
            Tuples of (node_index, parent_index) in DFS order
        """
        stack: List[Discovery] = [(self.start, None)]

        while stack:
            node, parent = stack.pop()
            if node in self.seen:
                continue
            self.seen.add(node)
            yield node, parent

            for neighbor in self.graph.adjacent(node):
                stack.append((neighbor, node))


STRATEGIES: Dict[str, Type[GraphIterator]] = {
    "bfs": BFSIterator,
    "dfs": DFSIterator,
}


def _strategy(name: str) -> Type[GraphIterator]:
    if name not in STRATEGIES:
        raise ValueError(
            f"Unknown traversal strategy '{name}'. "
            f"Must be one of: {', '.join(STRATEGIES.keys())}"
        )
    return STRATEGIES[name]


def _check_start(graph: GraphProtocol, start_node: NodeIndex) -> None:
    if start_node not in graph.node_indices():
        raise InvalidIndexError(start_node)


def _build_tree(discoveries: Iterator[Discovery]) -> Tree[NodeIndex]:
    tree: Tree[NodeIndex] = Tree()
    for node, parent in discoveries:
        if parent is None:
            tree.add_root(node)
        else:
            tree.add_child(parent, node)
    return tree


def traverse(
    graph: GraphProtocol, start_node: NodeIndex, strategy: str = "bfs"
) -> Iterator[Discovery]:
    """
    Traverse the graph from a start node.

    Args:
        graph: Graph to traverse
        start_node: Starting node for traversal
        strategy: Traversal strategy ('bfs' or 'dfs')

    Returns:
        Iterator yielding (node_index, parent_index) tuples

    Raises:
        ValueError: If strategy is not recognized
        InvalidIndexError: If the graph is not empty and start_node is not live
    """
    iterator_cls = _strategy(strategy)
    if graph.num_nodes() == 0:
        return iter(())
    _check_start(graph, start_node)
    return iter(iterator_cls(graph, start_node))


def spanning_tree(
    graph: GraphProtocol, start_node: NodeIndex, strategy: str = "bfs"
) -> Tree[NodeIndex]:
    """
    Build the traversal tree of the component reachable from a start node.

    An empty graph yields an empty tree for any start node.

    Raises:
        ValueError: If strategy is not recognized
        InvalidIndexError: If the graph is not empty and start_node is not live
    """
    tree = _build_tree(traverse(graph, start_node, strategy))
    logger.debug(f"{strategy.upper()} tree from {start_node} covers {len(tree)} nodes")
    return tree


def spanning_forest(graph: GraphProtocol, strategy: str = "bfs") -> Forest[NodeIndex]:
    """
    Build traversal trees until every live node is covered.

    Each tree starts at the smallest index not covered by an earlier tree.
    Nodes covered by earlier trees are not repeated, so the trees partition
    the node set.

    Raises:
        ValueError: If strategy is not recognized
    """
    iterator_cls = _strategy(strategy)
    seen: Set[NodeIndex] = set()
    forest: Forest[NodeIndex] = []

    for start in graph.node_indices():
        if start in seen:
            continue
        forest.append(_build_tree(iter(iterator_cls(graph, start, seen))))

    logger.debug(
        f"{strategy.upper()} forest has {len(forest)} trees over {graph.num_nodes()} nodes"
    )
    return forest


def bfs_tree(graph: GraphProtocol, start_node: NodeIndex) -> Tree[NodeIndex]:
    """Breadth-first spanning tree from a start node."""
    return spanning_tree(graph, start_node, "bfs")


def dfs_tree(graph: GraphProtocol, start_node: NodeIndex) -> Tree[NodeIndex]:
    """Depth-first spanning tree from a start node."""
    return spanning_tree(graph, start_node, "dfs")


def bfs_forest(graph: GraphProtocol) -> Forest[NodeIndex]:
    """Breadth-first spanning forest of the whole graph."""
    return spanning_forest(graph, "bfs")


def dfs_forest(graph: GraphProtocol) -> Forest[NodeIndex]:
    """Depth-first spanning forest of the whole graph."""
    return spanning_forest(graph, "dfs")
