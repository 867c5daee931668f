"""Command Line Interface for inspecting small graphs.

This module builds an undirected or directed graph from a JSON description and
prints it, its traversal trees, its transpose or one of its induced subgraphs.

The JSON description has the form::

    {"directed": true, "nodes": ["a", "b", "c"], "edges": [[0, 1], [0, 2]]}

Node ``k`` of the list receives index ``k``. JSON input can be provided either
as a direct string or as a file path prefixed with '@'.

Example Usage:
    python -m ixgraph show @graph.json
    python -m ixgraph traverse @graph.json --strategy dfs --start 0
    python -m ixgraph traverse @graph.json --all
    python -m ixgraph transpose '{"directed": true, "nodes": ["a", "b"], "edges": [[0, 1]]}'
    python -m ixgraph subgraph @graph.json --nodes 0 2 3
"""

import argparse
import json
import logging
import os
from typing import Any, Dict, List, Optional, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .core.exceptions import GraphOperationError, ValidationError
from .core.graph import BaseGraph, Digraph, Ungraph
from .core.traversal import STRATEGIES, spanning_forest, spanning_tree
from .core.tree import Forest, Tree, forest_size

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "directed": {"type": "boolean"},
        "nodes": {"type": "array"},
        "edges": {
            "type": "array",
            "items": {
                "type": "array",
                "items": {"type": "integer", "minimum": 0},
                "minItems": 2,
                "maxItems": 2,
            },
        },
    },
    "required": ["nodes"],
    "additionalProperties": False,
}


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.
                       Relative paths are resolved against the current directory.

    Returns:
        Any: Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        with open(file_path, "r") as f:
            json_str = f.read()

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def build_graph(data: Any) -> Union[Ungraph, Digraph]:
    """Build a graph from a parsed JSON description.

    Args:
        data: Parsed graph description.

    Returns:
        The populated Ungraph or Digraph.

    Raises:
        ValidationError: If the description does not match GRAPH_SCHEMA.
        InvalidIndexError: If an edge refers to a node that is not listed.
    """
    try:
        json_validate(instance=data, schema=GRAPH_SCHEMA)
    except JsonSchemaError as e:
        raise ValidationError(e.message)

    graph: Union[Ungraph, Digraph] = Digraph() if data.get("directed", False) else Ungraph()
    for payload in data["nodes"]:
        graph.add_node(payload)
    for i, j in data.get("edges", []):
        graph.add_edge(i, j)

    logger.info(
        f"Built {type(graph).__name__} with {graph.num_nodes()} nodes "
        f"and {graph.num_edges()} edges"
    )
    return graph


def format_graph(graph: BaseGraph) -> str:
    """Render nodes and edges of a graph, one per line."""
    arrow = "->" if isinstance(graph, Digraph) else "--"
    lines = ["Nodes:"]
    lines.extend(f"- {node.index}: {node.data}" for node in graph.nodes())
    lines.append("Edges:")
    lines.extend(
        f"- {graph.get_data(i)} {arrow} {graph.get_data(j)}" for i, j in graph.edges()
    )
    return "\n".join(lines)


def format_tree(tree: Tree, graph: BaseGraph) -> str:
    """Render a traversal tree as an indented outline of node payloads."""
    if tree.root is None:
        return "(empty tree)"

    lines: List[str] = []
    stack = [(tree.root, 0)]
    while stack:
        index, depth = stack.pop()
        lines.append(f"{'  ' * depth}{graph.get_data(index)} [{index}]")
        stack.extend((child, depth + 1) for child in reversed(tree.children(index)))
    return "\n".join(lines)


def format_forest(forest: Forest, graph: BaseGraph) -> str:
    """Render every tree of a forest."""
    parts = [
        f"Tree {number}:\n{format_tree(tree, graph)}"
        for number, tree in enumerate(forest, start=1)
    ]
    parts.append(f"{len(forest)} trees, {forest_size(forest)} nodes")
    return "\n".join(parts)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(description="Graph inspection CLI")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    show = subparsers.add_parser("show", help="Print the nodes and edges of a graph")
    show.add_argument("graph", help="JSON string or @filename describing the graph")

    trav = subparsers.add_parser("traverse", help="Print traversal trees of a graph")
    trav.add_argument("graph", help="JSON string or @filename describing the graph")
    trav.add_argument("--strategy", choices=sorted(STRATEGIES), default="bfs")
    start = trav.add_mutually_exclusive_group()
    start.add_argument("--start", type=int, default=0, help="Index of the start node")
    start.add_argument("--all", action="store_true", help="Cover the whole graph with a forest")

    transpose = subparsers.add_parser("transpose", help="Print the transpose of a directed graph")
    transpose.add_argument("graph", help="JSON string or @filename describing the graph")

    subgraph = subparsers.add_parser("subgraph", help="Print an induced subgraph")
    subgraph.add_argument("graph", help="JSON string or @filename describing the graph")
    subgraph.add_argument("--nodes", type=int, nargs="+", required=True)

    return parser


def run(args: argparse.Namespace) -> None:
    """Execute a parsed command, printing its result."""
    graph = build_graph(parse_json_input(args.graph))

    if args.command == "show":
        print(format_graph(graph))

    elif args.command == "traverse":
        if args.all:
            print(format_forest(spanning_forest(graph, args.strategy), graph))
        else:
            print(format_tree(spanning_tree(graph, args.start, args.strategy), graph))

    elif args.command == "transpose":
        if not isinstance(graph, Digraph):
            raise ValueError("transpose requires a directed graph")
        print(format_graph(graph.transpose()))

    elif args.command == "subgraph":
        print(format_graph(graph.induced_subgraph(args.nodes)))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Args:
        argv: Command-line arguments, defaulting to sys.argv[1:].

    Returns:
        int: Process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    if not args.command:
        parser.print_help()
        return 1

    try:
        run(args)
    except (GraphOperationError, ValidationError, ValueError) as e:
        logger.debug(f"Command {args.command} failed", exc_info=True)
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
