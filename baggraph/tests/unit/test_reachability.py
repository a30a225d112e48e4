"""
tests/unit/test_reachability.py
──────────────────────────────────────────────────────────────────────────────
Unit tests for reachable_count() / reachable_nodes() in both directions.
"""
from __future__ import annotations

import pytest

from baggraph.domain.models import Direction
from baggraph.services.graph import BagGraph, build_graph
from baggraph.services.reachability import reachable_count, reachable_nodes


def _colors(graph, nodes):
    return {graph.color_of(n) for n in nodes}


class TestForward:
    def test_example_shiny_gold(self, example_graph):
        start = example_graph.require("shiny gold")
        assert reachable_count(example_graph, start, direction=Direction.FORWARD) == 4

    def test_example_forward_colors(self, example_graph):
        start = example_graph.require("shiny gold")
        nodes = reachable_nodes(example_graph, start, direction=Direction.FORWARD)
        assert _colors(example_graph, nodes) == {
            "dark olive", "vibrant plum", "faded blue", "dotted black",
        }

    def test_shared_descendant_counted_once(self, example_graph):
        start = example_graph.require("light red")
        nodes = reachable_nodes(example_graph, start, direction=Direction.FORWARD)
        assert len(nodes) == len(set(nodes))
        assert len(nodes) == 7

    def test_chain(self, chain_graph):
        start = chain_graph.require("shiny gold")
        assert reachable_count(chain_graph, start, direction=Direction.FORWARD) == 6

    def test_terminal_bag_reaches_nothing(self, example_graph):
        start = example_graph.require("faded blue")
        assert reachable_count(example_graph, start, direction=Direction.FORWARD) == 0

    def test_bfs_order_is_level_by_level(self, chain_graph):
        start = chain_graph.require("shiny gold")
        nodes = reachable_nodes(chain_graph, start, direction=Direction.FORWARD)
        assert [chain_graph.color_of(n) for n in nodes] == [
            "dark red", "dark orange", "dark yellow", "dark green", "dark blue", "dark violet",
        ]


class TestReverse:
    def test_example_bags_that_can_hold_shiny_gold(self, example_graph):
        start = example_graph.require("shiny gold")
        nodes = reachable_nodes(example_graph, start, direction=Direction.REVERSE)
        assert _colors(example_graph, nodes) == {
            "bright white", "muted yellow", "dark orange", "light red",
        }

    def test_outermost_bag_has_no_containers(self, chain_graph):
        start = chain_graph.require("shiny gold")
        assert reachable_count(chain_graph, start, direction=Direction.REVERSE) == 0

    def test_directions_differ_on_asymmetric_graph(self, chain_graph):
        start = chain_graph.require("dark yellow")
        assert reachable_count(chain_graph, start, direction=Direction.FORWARD) == 3
        assert reachable_count(chain_graph, start, direction=Direction.REVERSE) == 3
        start = chain_graph.require("dark green")
        assert reachable_count(chain_graph, start, direction=Direction.FORWARD) == 2
        assert reachable_count(chain_graph, start, direction=Direction.REVERSE) == 4


class TestContract:
    def test_direction_is_required(self, example_graph):
        with pytest.raises(TypeError):
            reachable_count(example_graph, 0)  # type: ignore[call-arg]

    def test_start_excluded_even_on_cycle(self, cyclic_rules):
        graph = build_graph(cyclic_rules)
        start = graph.require("pale red")
        assert reachable_count(graph, start, direction=Direction.FORWARD) == 2

    def test_does_not_mutate_graph(self, example_graph):
        before = list(example_graph.edges())
        reachable_count(example_graph, example_graph.require("light red"), direction=Direction.FORWARD)
        assert list(example_graph.edges()) == before

    def test_single_node_graph(self):
        g = BagGraph()
        node = g.add_bag("faded blue")
        assert reachable_count(g, node, direction=Direction.REVERSE) == 0
