"""Shared test fixtures."""

import pytest

from ixgraph.core.graph import Digraph, Ungraph


@pytest.fixture
def abc_ungraph() -> Ungraph:
    """
    Fixture providing the undirected graph:
    b -- a -- c
    """
    graph = Ungraph()
    a = graph.add_node("a")
    b = graph.add_node("b")
    c = graph.add_node("c")
    graph.add_edge(a, b)
    graph.add_edge(a, c)
    return graph


@pytest.fixture
def six_node_ungraph() -> Ungraph:
    """
    Fixture providing the undirected graph:
    a -- b -- c
    |  \\     |
    d -- e ---+
     \\   |
       f -+
    """
    graph = Ungraph()
    a, b, c, d, e, f = (graph.add_node(name) for name in "abcdef")
    for i, j in [(a, b), (a, d), (a, e), (b, c), (c, e), (d, e), (d, f), (e, f)]:
        graph.add_edge(i, j)
    return graph


@pytest.fixture
def five_node_digraph() -> Digraph:
    """
    Fixture providing the directed graph:
    d -> a -> b
    |  ^  \\
    v /    v
    e      c
    """
    graph = Digraph()
    a, b, c, d, e = (graph.add_node(name) for name in "abcde")
    for i, j in [(a, b), (a, c), (d, a), (e, a), (d, e)]:
        graph.add_edge(i, j)
    return graph
