"""Unweighted shortest path search over an undirected edge list."""

from __future__ import annotations

from collections import deque
from typing import Any, Dict, Iterable, List, Optional

from vizgraph.graph import UndirectedAdjacency, build_graph_from_edges
from vizgraph.logging import get_logger
from vizgraph.types import NodeID, PathEdge, UnknownNodeError

logger = get_logger(__name__)


def _build_path(target: NodeID, pred: Dict[NodeID, NodeID]) -> List[PathEdge]:
    """Walk the predecessor map back from ``target`` and return hops in order."""
    path: List[PathEdge] = []
    node = target
    while node in pred:
        prev = pred[node]
        path.append(PathEdge(prev, node))
        node = prev
    path.reverse()
    return path


def find_path(
    source: NodeID, target: NodeID, edges: Iterable[Any]
) -> Optional[List[PathEdge]]:
    """
    Find one shortest path (by hop count) between two nodes.

    The graph is built fresh from ``edges`` and treated as undirected. When
    several shortest paths exist, which one is returned depends on edge order
    and set iteration order and must not be relied upon.

    Args:
        source: Node to start from.
        target: Node to reach.
        edges: Edge records with ``source``/``target`` endpoints. Not modified.

    Returns:
        List of PathEdge hops from ``source`` to ``target`` (empty when they
        are the same node), or None if ``target`` is unreachable.

    Raises:
        UnknownNodeError: If ``source`` or ``target`` is not an endpoint of
            any edge.
    """
    return find_path_in_graph(build_graph_from_edges(edges), source, target)


def find_path_in_graph(
    graph: UndirectedAdjacency, source: NodeID, target: NodeID
) -> Optional[List[PathEdge]]:
    """Run ``find_path`` against an already built adjacency.

    Raises:
        UnknownNodeError: If ``source`` or ``target`` is not in ``graph``.
    """
    if source not in graph:
        raise UnknownNodeError(source, "source")
    if target not in graph:
        raise UnknownNodeError(target, "target")

    queue = deque([source])
    queued = {source}
    visited = set()
    pred: Dict[NodeID, NodeID] = {}

    while queue:
        current = queue.popleft()
        if current == target:
            path = _build_path(current, pred)
            logger.debug(
                "Path %r -> %r found: %d hops (%d nodes, %d edges, %d visited)",
                source,
                target,
                len(path),
                len(graph),
                graph.edge_count,
                len(visited),
            )
            return path

        for neighbor in graph.neighbors(current):
            if neighbor in visited or neighbor in queued:
                continue
            pred[neighbor] = current
            queued.add(neighbor)
            queue.append(neighbor)

        visited.add(current)

    logger.debug(
        "No path %r -> %r (%d nodes, %d edges)",
        source,
        target,
        len(graph),
        graph.edge_count,
    )
    return None


def path_nodes(path: List[PathEdge]) -> List[NodeID]:
    """Return the node sequence visited by ``path``.

    An empty path yields an empty list since it carries no node.
    """
    if not path:
        return []
    return [path[0].source] + [hop.target for hop in path]
