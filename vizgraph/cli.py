"""Command-line interface for vizgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Hashable, List, Optional

from vizgraph.algorithms.bfs import find_path_in_graph, path_nodes
from vizgraph.config import GENERATOR_CONFIG
from vizgraph.generators import make_random_graph
from vizgraph.graph import UndirectedAdjacency, build_graph_from_edges
from vizgraph.logging import configure_verbosity, get_logger
from vizgraph.types import UnknownNodeError

logger = get_logger(__name__)


def _load_edges(path: Path) -> List[Any]:
    """Read the edge list from a JSON graph file.

    Accepts ``{"links": [...]}``, ``{"edges": [...]}`` or a bare list.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in ("links", "edges"):
            if isinstance(data.get(key), list):
                return data[key]
    raise ValueError(f"{path} has no 'links' or 'edges' list")


def _resolve_node(arg: str, graph: UndirectedAdjacency) -> Hashable:
    """Map a command-line node argument onto a graph node identifier.

    The raw string is tried first, then its JSON reading, so ``"3"`` resolves
    to ``3`` and ``"1.5"`` to ``1.5`` when the string form is not a node.
    """
    if arg in graph:
        return arg
    try:
        parsed = json.loads(arg)
    except ValueError:
        return arg
    if isinstance(parsed, bool):
        return arg
    try:
        return parsed if parsed in graph else arg
    except TypeError:
        # Unhashable JSON (lists, objects) can never be a node id
        return arg


def _generate(
    min_nodes: int,
    max_nodes: int,
    max_links: int,
    seed: Optional[int],
    output: Optional[Path],
) -> None:
    try:
        nodes, links = make_random_graph(min_nodes, max_nodes, max_links, seed=seed)
    except ValueError as exc:
        logger.error("Invalid generator arguments: %s", exc)
        sys.exit(1)

    payload = json.dumps(
        {
            "nodes": [n.to_dict() for n in nodes],
            "links": [link.to_dict() for link in links],
        },
        indent=2,
    )
    if output is None:
        print(payload)
    else:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(payload + "\n", encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write %s: %s", output, exc)
            sys.exit(1)
        logger.info(
            "Wrote %d nodes and %d links to %s", len(nodes), len(links), output
        )


def _find_path(graph_path: Path, source: str, target: str) -> None:
    try:
        edges = _load_edges(graph_path)
    except FileNotFoundError:
        logger.error("Graph file not found: %s", graph_path)
        sys.exit(1)
    except ValueError as exc:
        logger.error("Failed to read graph %s: %s", graph_path, exc)
        sys.exit(1)

    try:
        graph = build_graph_from_edges(edges)
    except TypeError as exc:
        logger.error("Malformed edge in %s: %s", graph_path, exc)
        sys.exit(1)

    src = _resolve_node(source, graph)
    dst = _resolve_node(target, graph)
    try:
        path = find_path_in_graph(graph, src, dst)
    except UnknownNodeError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    result: Dict[str, Any] = {
        "source": src,
        "target": dst,
        "length": None if path is None else len(path),
        "path": None if path is None else [hop.to_dict() for hop in path],
    }
    if path is None:
        logger.info("No path between %r and %r", src, dst)
    else:
        logger.info("Path: %s", " -> ".join(str(n) for n in path_nodes(path)))
    print(json.dumps(result, indent=2))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``vizgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="vizgraph",
        description="Generate random demo graphs and find shortest paths.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{generate,path}",
        help="Available commands",
    )

    gen_parser = subparsers.add_parser("generate", help="Generate a random graph")
    gen_parser.add_argument(
        "--min-nodes", type=int, default=GENERATOR_CONFIG.min_nodes
    )
    gen_parser.add_argument(
        "--max-nodes", type=int, default=GENERATOR_CONFIG.max_nodes
    )
    gen_parser.add_argument(
        "--max-links",
        type=int,
        default=GENERATOR_CONFIG.max_links,
        help="Upper bound on links emitted per node",
    )
    gen_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible output"
    )
    gen_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write JSON to this file instead of stdout",
    )

    path_parser = subparsers.add_parser(
        "path", help="Find a shortest path in a JSON graph"
    )
    path_parser.add_argument("graph", type=Path, help="Path to graph JSON")
    path_parser.add_argument("source", help="Source node id")
    path_parser.add_argument("target", help="Target node id")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    level = configure_verbosity(verbose=args.verbose, quiet=args.quiet)
    logger.debug("Log level set to %s", logging.getLevelName(level))

    if args.command == "generate":
        _generate(
            min_nodes=args.min_nodes,
            max_nodes=args.max_nodes,
            max_links=args.max_links,
            seed=args.seed,
            output=args.output,
        )
    elif args.command == "path":
        _find_path(args.graph, args.source, args.target)


if __name__ == "__main__":
    main()
