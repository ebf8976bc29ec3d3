"""Transient undirected adjacency built from an edge list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Set

from vizgraph.types import NodeID, edge_endpoints


@dataclass(frozen=True)
class Adjacency:
    """Neighbor sets of a single node.

    Every edge is recorded in both directions, so ``incoming`` and
    ``outgoing`` always hold the same neighbors.
    """

    incoming: FrozenSet[NodeID] = frozenset()
    outgoing: FrozenSet[NodeID] = frozenset()


class UndirectedAdjacency:
    """Read-only view over ``{node: Adjacency}``.

    Nodes iterate in the order they were first seen in the edge list.

    Attributes:
        edge_count: Number of edge records consumed, duplicates included.
    """

    def __init__(self, adjacency: Dict[NodeID, Adjacency], edge_count: int) -> None:
        self._adj = adjacency
        self.edge_count = edge_count

    def __contains__(self, node: NodeID) -> bool:
        return node in self._adj

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __getitem__(self, node: NodeID) -> Adjacency:
        return self._adj[node]

    def neighbors(self, node: NodeID) -> FrozenSet[NodeID]:
        """Return the neighbor set of ``node``.

        Raises:
            KeyError: If ``node`` is not in the graph.
        """
        return self._adj[node].outgoing


def _connect(
    succ: Dict[NodeID, Set[NodeID]],
    pred: Dict[NodeID, Set[NodeID]],
    src: NodeID,
    dst: NodeID,
) -> None:
    succ[src].add(dst)
    pred[dst].add(src)


def build_graph_from_edges(edges: Iterable[Any]) -> UndirectedAdjacency:
    """Build an undirected adjacency structure in a single pass.

    Each endpoint is registered on first sight; each edge is recorded in both
    directions. Self-loops make a node its own neighbor. Neighbor sets are
    frozen once all edges are consumed.

    Args:
        edges: Edge records accepted by ``edge_endpoints``.

    Returns:
        UndirectedAdjacency owned by the caller.
    """
    succ: Dict[NodeID, Set[NodeID]] = {}
    pred: Dict[NodeID, Set[NodeID]] = {}
    count = 0
    for edge in edges:
        src, dst = edge_endpoints(edge)
        for node in (src, dst):
            if node not in succ:
                succ[node] = set()
                pred[node] = set()
        _connect(succ, pred, src, dst)
        _connect(succ, pred, dst, src)
        count += 1

    adj = {
        node: Adjacency(incoming=frozenset(pred[node]), outgoing=frozenset(out))
        for node, out in succ.items()
    }
    return UndirectedAdjacency(adj, count)
