"""Node model for index-addressed graphs."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .types import NodeIndex

T = TypeVar("T")


@dataclass
class Node(Generic[T]):
    """
    A node payload together with its index.

    Nodes are owned by the node arena of exactly one graph and never refer
    to other nodes directly; adjacency is kept as sets of indices.

    Attributes:
        data (T): The payload stored in the node
        index (NodeIndex): Stable index assigned when the node was added
    """

    data: T
    index: NodeIndex
