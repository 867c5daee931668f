"""
Rooted trees and forests produced by graph traversal.

A Tree is index-addressed like the graphs it is built from: each contained
node records its payload, its parent index and the set of its children's
indices. Nodes can only be appended under a parent already in the tree and
never twice, so a tree cannot contain cycles.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, List, Optional, Set, Tuple, TypeVar

from .exceptions import GraphOperationError, InvalidIndexError
from .types import NodeIndex

T = TypeVar("T")

_MISSING: Any = object()


@dataclass
class TreeNode(Generic[T]):
    """
    A node of a traversal tree.

    Attributes:
        data (T): Payload stored for the node
        parent (Optional[NodeIndex]): Parent index, None only for the root
        children (Set[NodeIndex]): Indices of the node's children
    """

    data: T
    parent: Optional[NodeIndex] = None
    children: Set[NodeIndex] = field(default_factory=set)


class Tree(Generic[T]):
    """
    Index-addressed rooted tree.

    When a payload is omitted for a node the index itself is stored, which is
    how traversal builds its Tree[NodeIndex] results.
    """

    def __init__(self) -> None:
        self.root: Optional[NodeIndex] = None
        self._nodes: Dict[NodeIndex, TreeNode[T]] = {}

    @classmethod
    def leaf(cls, index: NodeIndex, data: Any = _MISSING) -> "Tree[T]":
        """Create a tree holding a single root node."""
        tree: Tree[T] = cls()
        tree.add_root(index, data)
        return tree

    def add_root(self, index: NodeIndex, data: Any = _MISSING) -> None:
        """
        Set the root of an empty tree.

        Raises:
            GraphOperationError: If the tree already has a root
        """
        if self.root is not None:
            raise GraphOperationError(f"Tree already has root {self.root}")
        self._nodes[index] = TreeNode(data=self._payload(index, data))
        self.root = index

    def add_child(self, parent: NodeIndex, index: NodeIndex, data: Any = _MISSING) -> None:
        """
        Append a node under an existing parent.

        Raises:
            InvalidIndexError: If the parent is not in the tree
            GraphOperationError: If the node is already in the tree
        """
        parent_node = self._get(parent)
        if index in self._nodes:
            raise GraphOperationError(f"Node {index} is already in the tree")
        self._nodes[index] = TreeNode(data=self._payload(index, data), parent=parent)
        parent_node.children.add(index)

    @staticmethod
    def _payload(index: NodeIndex, data: Any):
        return index if data is _MISSING else data

    def _get(self, index: NodeIndex) -> TreeNode[T]:
        try:
            return self._nodes[index]
        except KeyError:
            raise InvalidIndexError(index) from None

    def parent(self, index: NodeIndex) -> Optional[NodeIndex]:
        """Get the parent of a node, None for the root."""
        return self._get(index).parent

    def children(self, index: NodeIndex) -> List[NodeIndex]:
        """Get the children of a node in ascending order."""
        return sorted(self._get(index).children)

    def data(self, index: NodeIndex) -> T:
        """Get the payload of a node."""
        return self._get(index).data

    def depth(self, index: NodeIndex) -> int:
        """Get the number of edges between a node and the root."""
        depth = 0
        parent = self._get(index).parent
        while parent is not None:
            depth += 1
            parent = self._nodes[parent].parent
        return depth

    def indices(self) -> List[NodeIndex]:
        """Get the indices of all nodes in the order they were added."""
        return list(self._nodes)

    def edges(self) -> List[Tuple[NodeIndex, NodeIndex]]:
        """Get all (parent, child) pairs in the order children were added."""
        return [
            (node.parent, index)
            for index, node in self._nodes.items()
            if node.parent is not None
        ]

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, index: object) -> bool:
        return index in self._nodes

    def __iter__(self) -> Iterator[NodeIndex]:
        return iter(list(self._nodes))

    def __repr__(self) -> str:
        return f"Tree(root={self.root}, nodes={len(self)})"


Forest = List[Tree[T]]


def forest_size(forest: "Forest") -> int:
    """Get the total number of nodes across all trees of a forest."""
    return sum(len(tree) for tree in forest)
