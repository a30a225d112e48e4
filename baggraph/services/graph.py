"""
services/graph.py
──────────────────────────────────────────────────────────────────────────────
Graph Registry / Builder.

BagGraph owns the colour → node-identity mapping and the weighted edge set.
Nodes are plain integers indexing a flat colour table; adjacency is kept in
both directions so reachability can walk either way without rebuilding.

Lifecycle:
  1. register / add_bag / add_containment while ingesting rules
  2. freeze()  — from here on the graph is read-only
  3. hand it to the analyzers

build_graph() runs the whole lifecycle from raw text.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from baggraph.domain.exceptions import GraphFrozenError, UnknownColorError
from baggraph.domain.models import ContainmentRule, Direction, GraphSummary
from baggraph.services.parser import parse_rules

logger = logging.getLogger(__name__)


class BagGraph:
    """Directed, weighted containment graph.  Edges point container → contained."""

    def __init__(self) -> None:
        self._colors: List[str] = []
        self._index: Dict[str, int] = {}
        self._out_edges: List[Dict[int, int]] = []
        self._in_edges: List[Dict[int, int]] = []
        self._frozen = False

    # ── Registration ───────────────────────────────────────────────────────

    def register(self, color: str) -> int:
        """Return the node for ``color``, creating it on first sight."""
        existing = self._index.get(color)
        if existing is not None:
            return existing
        self._check_mutable()
        node = len(self._colors)
        self._colors.append(color)
        self._index[color] = node
        self._out_edges.append({})
        self._in_edges.append({})
        return node

    def add_bag(self, color: str) -> int:
        """Ensure ``color`` exists as a node (the "contains nothing" case)."""
        return self.register(color)

    def add_containment(self, container: str, quantity: int, contained: str) -> None:
        """Record that one ``container`` bag holds ``quantity`` ``contained`` bags.

        Re-adding an existing (container, contained) pair overwrites its
        weight; parallel edges are never created.
        """
        self._check_mutable()
        src = self.register(container)
        dst = self.register(contained)
        previous = self._out_edges[src].get(dst)
        if previous is not None and previous != quantity:
            logger.debug(
                "Overwriting edge %s -> %s: %d -> %d",
                container, contained, previous, quantity,
            )
        self._out_edges[src][dst] = quantity
        self._in_edges[dst][src] = quantity

    def add_rule(self, rule: ContainmentRule) -> None:
        """Ingest one parsed rule."""
        if rule.is_terminal:
            self.add_bag(rule.container)
            return
        for clause in rule.contents:
            self.add_containment(rule.container, clause.quantity, clause.color)

    def freeze(self) -> None:
        """End ingestion.  Any later mutation raises GraphFrozenError."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── Lookup ─────────────────────────────────────────────────────────────

    def lookup(self, color: str) -> Optional[int]:
        return self._index.get(color)

    def require(self, color: str) -> int:
        """Like lookup(), but an unknown colour is an error."""
        node = self._index.get(color)
        if node is None:
            raise UnknownColorError(color)
        return node

    def color_of(self, node: int) -> str:
        return self._colors[node]

    # ── Adjacency ──────────────────────────────────────────────────────────

    def neighbors(self, node: int, direction: Direction = Direction.FORWARD) -> Dict[int, int]:
        """Adjacent nodes and edge weights in the given direction.

        FORWARD yields the bags directly inside ``node``; REVERSE yields the
        bags that directly contain it.
        """
        if direction == Direction.REVERSE:
            return self._in_edges[node]
        return self._out_edges[node]

    def edges(self) -> Iterator[Tuple[int, int, int]]:
        """All (container, contained, weight) triples."""
        for src, targets in enumerate(self._out_edges):
            for dst, weight in targets.items():
                yield src, dst, weight

    @property
    def node_count(self) -> int:
        return len(self._colors)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._out_edges)

    def summary(self) -> GraphSummary:
        return GraphSummary(
            node_count=self.node_count,
            edge_count=self.edge_count,
            terminal_count=sum(1 for targets in self._out_edges if not targets),
        )

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, color: object) -> bool:
        return color in self._index

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Graph is frozen; no mutation after ingestion")


def build_graph(text: str) -> BagGraph:
    """Parse ``text`` and return a frozen BagGraph.

    Every line is parsed before the first node is created, so a malformed
    line leaves no partial graph behind.

    Raises:
        RuleParseError: If any line is malformed.
    """
    rules = parse_rules(text)
    graph = BagGraph()
    for rule in rules:
        graph.add_rule(rule)
    graph.freeze()
    logger.info(
        "Graph built | nodes=%d edges=%d", graph.node_count, graph.edge_count
    )
    return graph
