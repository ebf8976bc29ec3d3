"""Core data types for graphs handed to and returned from vizgraph.

Node identifiers are any hashable values. Edges are unordered
``(source, target)`` pairs and may arrive as mappings, as objects exposing
``source``/``target`` attributes, or as plain 2-tuples.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Dict, Hashable, Tuple

NodeID = Hashable


@dataclass(frozen=True)
class PathEdge:
    """One hop of a path, oriented in traversal order.

    Attributes:
        source: Node the hop leaves from.
        target: Node the hop arrives at.
    """

    source: NodeID
    target: NodeID

    def to_dict(self) -> Dict[str, Any]:
        return {"source": self.source, "target": self.target}


@dataclass(frozen=True)
class Node:
    """Generated graph node.

    Attributes:
        id: Node index within the generated set.
        name: Short random label.
    """

    id: int
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Link:
    """Generated graph link between two node ids.

    Attributes:
        id: Sequential link id, starting at 1.
        source: Id of the node the link was generated for.
        target: Id of a randomly chosen node.
    """

    id: int
    source: int
    target: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class UnknownNodeError(KeyError):
    """Raised when a queried node is not an endpoint of any edge.

    Attributes:
        node: The node that was looked up.
        role: Either ``"source"`` or ``"target"``.
    """

    def __init__(self, node: NodeID, role: str) -> None:
        super().__init__(node)
        self.node = node
        self.role = role

    def __str__(self) -> str:
        return f"Unknown {self.role}: {self.node!r}"


def edge_endpoints(edge: Any) -> Tuple[NodeID, NodeID]:
    """Return the ``(source, target)`` pair of an edge record.

    Extra fields on the record are ignored.

    Raises:
        TypeError: If the record has no recognizable endpoints.
    """
    if isinstance(edge, Mapping):
        try:
            return edge["source"], edge["target"]
        except KeyError as exc:
            raise TypeError(f"Edge mapping is missing {exc}: {edge!r}") from exc
    if hasattr(edge, "source") and hasattr(edge, "target"):
        return edge.source, edge.target
    if isinstance(edge, (tuple, list)) and len(edge) == 2:
        return edge[0], edge[1]
    raise TypeError(f"Unsupported edge record: {edge!r}")
