import random

import pytest

from vizgraph.config import GENERATOR_CONFIG
from vizgraph.generators import (
    make_random_graph,
    make_random_links,
    make_random_nodes,
    new_link,
    new_node,
    new_node_name,
)
from vizgraph.types import Link, Node


def test_new_node_name_charset_and_length():
    name = new_node_name(random.Random(1))
    assert len(name) == GENERATOR_CONFIG.name_length
    assert all(c.isdigit() or ("a" <= c <= "z") for c in name)

    assert len(new_node_name(random.Random(1), length=3)) == 3


def test_new_node_and_link():
    node = new_node(3, random.Random(0))
    assert node.id == 3
    assert node.name
    assert new_link(1, 0, 2) == Link(id=1, source=0, target=2)


def test_make_random_nodes_bounds():
    rng = random.Random(5)
    for _ in range(50):
        nodes = make_random_nodes(2, 6, rng=rng)
        assert 2 <= len(nodes) <= 6
        assert [n.id for n in nodes] == list(range(len(nodes)))


def test_make_random_nodes_fixed_count():
    assert len(make_random_nodes(4, 4, rng=random.Random(0))) == 4
    assert make_random_nodes(0, 0) == []


@pytest.mark.parametrize("min_nodes, max_nodes", [(-1, 3), (5, 2)])
def test_make_random_nodes_invalid(min_nodes, max_nodes):
    with pytest.raises(ValueError):
        make_random_nodes(min_nodes, max_nodes)


def test_make_random_links_structure():
    nodes = [Node(id=i, name=str(i)) for i in range(8)]
    links = make_random_links(nodes, 3, rng=random.Random(11))

    assert [link.id for link in links] == list(range(1, len(links) + 1))
    for node in nodes:
        fan_out = sum(1 for link in links if link.source == node.id)
        assert 1 <= fan_out <= 3
    assert all(0 <= link.target < len(nodes) for link in links)


def test_make_random_links_single_link_per_node():
    nodes = [Node(id=i, name=str(i)) for i in range(5)]
    links = make_random_links(nodes, 1, rng=random.Random(0))
    assert [link.source for link in links] == [0, 1, 2, 3, 4]


def test_make_random_links_empty_nodes():
    assert make_random_links([], 3) == []


def test_make_random_links_invalid():
    with pytest.raises(ValueError):
        make_random_links([Node(id=0, name="a")], 0)


def test_make_random_graph_reproducible():
    assert make_random_graph(3, 10, 3, seed=42) == make_random_graph(
        3, 10, 3, seed=42
    )


def test_make_random_graph_seed_changes_output():
    graphs = {repr(make_random_graph(3, 30, 4, seed=s)) for s in range(5)}
    assert len(graphs) > 1


def test_make_random_graph_defaults():
    nodes, links = make_random_graph(seed=1)
    assert GENERATOR_CONFIG.min_nodes <= len(nodes) <= GENERATOR_CONFIG.max_nodes
    assert len(links) >= len(nodes)


def test_generators_leave_global_random_untouched():
    random.seed(123)
    expected = random.random()

    random.seed(123)
    make_random_graph(5, 10, 3, seed=9)
    make_random_nodes(1, 3)
    assert random.random() == expected
