"""
services/aggregator.py
──────────────────────────────────────────────────────────────────────────────
Weighted Aggregator: total number of bags nested inside one start bag.

Recurrence over outgoing edges (v → wᵢ, weightᵢ):

  count(v) = Σᵢ  weightᵢ * (1 + count(wᵢ))        count(leaf) = 0

Evaluated bottom-up over a post-order of the sub-graph below the start node,
so every node's count is final before any container reads it and a bag shared
by several containers is computed once.

The post-order walk uses an explicit stack (no recursion limit on deep
chains) and keeps the current path, which is how a containment cycle is
detected: reaching a node that is still on the path.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Tuple

from baggraph.domain.exceptions import CycleError
from baggraph.domain.models import Direction
from baggraph.services.graph import BagGraph

logger = logging.getLogger(__name__)


def post_order(graph: BagGraph, start: int) -> List[int]:
    """Nodes reachable from ``start`` (inclusive) following outgoing edges,
    each listed after all of its descendants.

    Raises:
        CycleError: If a node is reached while it is still on the current path.
    """
    order: List[int] = []
    finished: set[int] = set()
    on_path = {start}
    stack: List[Tuple[int, Iterator[int]]] = [
        (start, iter(graph.neighbors(start, Direction.FORWARD)))
    ]

    while stack:
        node, children = stack[-1]
        for child in children:
            if child in finished:
                continue
            if child in on_path:
                raise CycleError(graph.color_of(child))
            on_path.add(child)
            stack.append((child, iter(graph.neighbors(child, Direction.FORWARD))))
            break
        else:
            # All children done: node is final.
            stack.pop()
            on_path.discard(node)
            finished.add(node)
            order.append(node)

    return order


def aggregate_count(graph: BagGraph, start: int) -> int:
    """Total bags (with multiplicity) inside one ``start`` bag, excluding itself.

    Raises:
        CycleError: If a cycle is reachable from ``start``.
    """
    counts: Dict[int, int] = {}
    for node in post_order(graph, start):
        counts[node] = sum(
            weight * (1 + counts[child])
            for child, weight in graph.neighbors(node, Direction.FORWARD).items()
        )
    logger.debug(
        "aggregate_count | start=%s nodes=%d count=%d",
        graph.color_of(start),
        len(counts),
        counts[start],
    )
    return counts[start]
