"""Index-addressed graph implementations."""

from .base import BaseGraph, NodeArena
from .digraph import Digraph
from .ungraph import Ungraph

__all__ = ["BaseGraph", "Digraph", "NodeArena", "Ungraph"]
