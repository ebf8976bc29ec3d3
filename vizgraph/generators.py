"""Random node and link sets for demo and test graphs.

All generators draw from an explicit ``random.Random`` instance. When none is
given a fresh unseeded instance is used; the global ``random`` state is never
touched.
"""

from __future__ import annotations

import random
import string
from typing import List, Optional, Sequence, Tuple

from vizgraph.config import GENERATOR_CONFIG
from vizgraph.logging import get_logger
from vizgraph.seed_manager import SeedManager
from vizgraph.types import Link, Node

logger = get_logger(__name__)

_BASE36 = string.digits + string.ascii_lowercase


def _rng_or_default(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def new_node_name(
    rng: Optional[random.Random] = None, length: Optional[int] = None
) -> str:
    """Return a short random base-36 label."""
    rng = _rng_or_default(rng)
    if length is None:
        length = GENERATOR_CONFIG.name_length
    return "".join(rng.choices(_BASE36, k=length))


def new_node(node_id: int, rng: Optional[random.Random] = None) -> Node:
    return Node(id=node_id, name=new_node_name(rng))


def make_random_nodes(
    min_nodes: int, max_nodes: int, rng: Optional[random.Random] = None
) -> List[Node]:
    """Generate between ``min_nodes`` and ``max_nodes`` nodes (inclusive).

    Nodes are numbered ``0..count-1`` so their ids double as list indices.

    Raises:
        ValueError: If ``min_nodes`` is negative or exceeds ``max_nodes``.
    """
    if min_nodes < 0:
        raise ValueError(f"min_nodes must be non-negative, got {min_nodes}")
    if max_nodes < min_nodes:
        raise ValueError(
            f"max_nodes ({max_nodes}) must be >= min_nodes ({min_nodes})"
        )

    rng = _rng_or_default(rng)
    count = rng.randint(min_nodes, max_nodes)
    return [new_node(index, rng) for index in range(count)]


def new_link(link_id: int, source: int, target: int) -> Link:
    return Link(id=link_id, source=source, target=target)


def make_random_links(
    nodes: Sequence[Node], max_links: int, rng: Optional[random.Random] = None
) -> List[Link]:
    """Generate random links fanning out of every node.

    Each node emits between 1 and ``max_links`` links to uniformly chosen
    node indices; self-links and duplicates may occur. Link ids are
    sequential across the whole result, starting at 1.

    Raises:
        ValueError: If ``max_links`` is less than 1.
    """
    if max_links < 1:
        raise ValueError(f"max_links must be >= 1, got {max_links}")

    rng = _rng_or_default(rng)
    links: List[Link] = []
    link_id = 0
    for node in nodes:
        fan_out = rng.randrange(max_links) + 1
        for _ in range(fan_out):
            link_id += 1
            target = rng.randrange(len(nodes))
            links.append(new_link(link_id, node.id, target))
    return links


def make_random_graph(
    min_nodes: Optional[int] = None,
    max_nodes: Optional[int] = None,
    max_links: Optional[int] = None,
    seed: Optional[int] = None,
) -> Tuple[List[Node], List[Link]]:
    """Generate a random ``(nodes, links)`` pair.

    Node and link draws use separate streams derived from ``seed``, so the
    same seed always yields the same graph. Unset bounds fall back to
    ``GENERATOR_CONFIG``.
    """
    cfg = GENERATOR_CONFIG
    min_nodes = cfg.min_nodes if min_nodes is None else min_nodes
    max_nodes = cfg.max_nodes if max_nodes is None else max_nodes
    max_links = cfg.max_links if max_links is None else max_links

    seeds = SeedManager(seed)
    nodes = make_random_nodes(
        min_nodes, max_nodes, rng=seeds.create_random_state("nodes")
    )
    links = make_random_links(
        nodes, max_links, rng=seeds.create_random_state("links")
    )
    logger.debug(
        "Generated %d nodes and %d links (seed=%s)", len(nodes), len(links), seed
    )
    return nodes, links
