"""
services/reachability.py
──────────────────────────────────────────────────────────────────────────────
Reachability Analyzer: breadth-first traversal from a start node.

The direction is always the caller's decision:
  Direction.FORWARD  — bags transitively inside the start bag
  Direction.REVERSE  — bag colours that can eventually contain the start bag

On symmetric inputs both give the same number, so ``direction`` is a
required keyword argument with no default.
"""
from __future__ import annotations

import logging
from collections import deque

from baggraph.domain.models import Direction
from baggraph.services.graph import BagGraph

logger = logging.getLogger(__name__)


def reachable_nodes(graph: BagGraph, start: int, *, direction: Direction) -> list[int]:
    """Nodes reachable from ``start`` in BFS order, excluding ``start``."""
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbor in graph.neighbors(node, direction):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            order.append(neighbor)
            queue.append(neighbor)
    return order


def reachable_count(graph: BagGraph, start: int, *, direction: Direction) -> int:
    """Number of distinct nodes reachable from ``start``, excluding it."""
    count = len(reachable_nodes(graph, start, direction=direction))
    logger.debug(
        "reachable_count | start=%s direction=%s count=%d",
        graph.color_of(start),
        direction.value,
        count,
    )
    return count
