"""Tests for the command line interface."""

import json
import runpy
import sys

import pytest

from ixgraph.cli import build_graph, main, parse_json_input
from ixgraph.core.exceptions import InvalidIndexError, ValidationError
from ixgraph.core.graph import Digraph, Ungraph

DIRECTED = {
    "directed": True,
    "nodes": ["a", "b", "c", "d", "e"],
    "edges": [[0, 1], [0, 2], [3, 0], [4, 0], [3, 4]],
}

UNDIRECTED = {"nodes": ["a", "b", "c"], "edges": [[0, 1], [0, 2]]}


@pytest.fixture
def graph_file(tmp_path):
    """Fixture writing the directed example graph to a file."""
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(DIRECTED))
    return path


def test_parse_json_string():
    """Test parsing inline JSON."""
    assert parse_json_input('{"nodes": []}') == {"nodes": []}


def test_parse_json_file(graph_file):
    """Test parsing JSON from an @file reference."""
    assert parse_json_input(f"@{graph_file}") == DIRECTED


def test_parse_json_errors(tmp_path):
    """Test invalid JSON and missing files."""
    with pytest.raises(ValueError, match="Invalid JSON input"):
        parse_json_input("{nodes")
    with pytest.raises(ValueError, match="File not found"):
        parse_json_input(f"@{tmp_path / 'missing.json'}")


def test_build_graph():
    """Test building both graph kinds."""
    digraph = build_graph(DIRECTED)
    assert isinstance(digraph, Digraph)
    assert digraph.num_edges() == 5

    ungraph = build_graph(UNDIRECTED)
    assert isinstance(ungraph, Ungraph)
    assert ungraph.degree(0) == 2


@pytest.mark.parametrize(
    "data",
    [
        {"edges": []},
        {"nodes": "abc"},
        {"nodes": ["a"], "edges": [[0]]},
        {"nodes": ["a"], "edges": [[0, -1]]},
        {"nodes": ["a"], "weights": [1]},
    ],
)
def test_build_graph_rejects_invalid_description(data):
    """Test schema validation of graph descriptions."""
    with pytest.raises(ValidationError):
        build_graph(data)


def test_build_graph_rejects_unknown_node():
    """Test edges referring to nodes that are not listed."""
    with pytest.raises(InvalidIndexError):
        build_graph({"nodes": ["a"], "edges": [[0, 3]]})


def test_show(graph_file, capsys):
    """Test the show command."""
    assert main(["show", f"@{graph_file}"]) == 0
    out = capsys.readouterr().out
    assert "- 0: a" in out
    assert "- d -> e" in out


def test_traverse_tree(capsys):
    """Test printing a single traversal tree."""
    assert main(["traverse", json.dumps(UNDIRECTED), "--start", "0"]) == 0
    assert capsys.readouterr().out.splitlines() == ["a [0]", "  b [1]", "  c [2]"]


def test_traverse_forest(graph_file, capsys):
    """Test printing a forest covering the whole graph."""
    assert main(["traverse", f"@{graph_file}", "--all", "--strategy", "dfs"]) == 0
    out = capsys.readouterr().out
    assert "Tree 2:" in out
    assert "2 trees, 5 nodes" in out


def test_transpose(graph_file, capsys):
    """Test the transpose command."""
    assert main(["transpose", f"@{graph_file}"]) == 0
    out = capsys.readouterr().out
    for edge in ("b -> a", "c -> a", "a -> d", "a -> e", "e -> d"):
        assert f"- {edge}" in out


def test_transpose_requires_directed_graph(capsys):
    """Test that transposing an undirected graph is reported as an error."""
    assert main(["transpose", json.dumps(UNDIRECTED)]) == 1
    assert "requires a directed graph" in capsys.readouterr().out


def test_subgraph(graph_file, capsys):
    """Test the subgraph command."""
    assert main(["subgraph", f"@{graph_file}", "--nodes", "0", "1", "2", "4"]) == 0
    out = capsys.readouterr().out
    assert "- 3: e" in out
    assert "- e -> a" in out
    assert " d" not in out


def test_invalid_start_reported(graph_file, capsys):
    """Test that invalid indices produce an error exit code."""
    assert main(["traverse", f"@{graph_file}", "--start", "9"]) == 1
    assert "Invalid node index: 9" in capsys.readouterr().out


def test_no_command(capsys):
    """Test that running without a command prints help."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_traverse_deep_path_indentation(capsys):
    """Test that a path graph prints one indentation level per hop."""
    path = {"directed": True, "nodes": list("abcd"), "edges": [[0, 1], [1, 2], [2, 3]]}
    assert main(["traverse", json.dumps(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["a [0]", "  b [1]", "    c [2]", "      d [3]"]


def test_run_as_module(monkeypatch, capsys):
    """Test running the package with python -m."""
    monkeypatch.setattr(sys, "argv", ["ixgraph", "show", json.dumps(UNDIRECTED)])
    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("ixgraph", run_name="__main__")
    assert exc_info.value.code == 0
    assert "- a -- b" in capsys.readouterr().out
