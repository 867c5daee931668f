"""Core graph functionality."""

from .exceptions import GraphOperationError, InvalidIndexError, ValidationError
from .graph import BaseGraph, Digraph, NodeArena, Ungraph
from .models import Node
from .traversal import (
    BFSIterator,
    DFSIterator,
    GraphIterator,
    bfs_forest,
    bfs_tree,
    dfs_forest,
    dfs_tree,
    spanning_forest,
    spanning_tree,
    traverse,
)
from .tree import Forest, Tree, TreeNode, forest_size
from .types import GraphProtocol, NodeIndex

__all__ = [
    "BaseGraph",
    "BFSIterator",
    "DFSIterator",
    "Digraph",
    "Forest",
    "GraphIterator",
    "GraphOperationError",
    "GraphProtocol",
    "InvalidIndexError",
    "Node",
    "NodeArena",
    "NodeIndex",
    "Tree",
    "TreeNode",
    "Ungraph",
    "ValidationError",
    "bfs_forest",
    "bfs_tree",
    "dfs_forest",
    "dfs_tree",
    "forest_size",
    "spanning_forest",
    "spanning_tree",
    "traverse",
]
