"""vizgraph: small graph utilities backing graph visualizations.

Primary API:
    find_path() - Shortest path (by hop count) over an undirected edge list
    make_random_graph() - Reproducible random nodes and links for demos
    Node, Link, PathEdge - Records produced and consumed by the above

Example:
    from vizgraph import find_path

    edges = [{"source": "A", "target": "B"}, {"source": "B", "target": "C"}]
    path = find_path("A", "C", edges)
    # [PathEdge(source='A', target='B'), PathEdge(source='B', target='C')]
"""

from __future__ import annotations

from vizgraph import cli, logging
from vizgraph._version import __version__
from vizgraph.algorithms.bfs import find_path, find_path_in_graph, path_nodes
from vizgraph.generators import (
    make_random_graph,
    make_random_links,
    make_random_nodes,
    new_link,
    new_node,
)
from vizgraph.graph import UndirectedAdjacency, build_graph_from_edges
from vizgraph.seed_manager import SeedManager
from vizgraph.types import Link, Node, PathEdge, UnknownNodeError

__all__ = [
    # Version
    "__version__",
    # Path search
    "find_path",
    "find_path_in_graph",
    "path_nodes",
    "build_graph_from_edges",
    "UndirectedAdjacency",
    # Types
    "Node",
    "Link",
    "PathEdge",
    "UnknownNodeError",
    # Generators
    "make_random_graph",
    "make_random_nodes",
    "make_random_links",
    "new_node",
    "new_link",
    "SeedManager",
    # Utilities
    "cli",
    "logging",
]
