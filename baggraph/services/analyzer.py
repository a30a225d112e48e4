"""
services/analyzer.py
──────────────────────────────────────────────────────────────────────────────
Analysis orchestrator: rule source → frozen graph → analyzers → response.

This is the primary entry point for all interfaces.  It knows nothing about
where the rules come from beyond the RuleSourcePort it is given.

AnalysisKind.REACHABLE:
  Breadth-first count of distinct colours reachable from the start colour in
  the request's direction.

AnalysisKind.AGGREGATE:
  Weighted post-order sum of every bag nested inside one start bag.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from baggraph.config.settings import Settings
from baggraph.domain.models import (
    AnalysisKind,
    AnalysisRequest,
    AnalysisResponse,
    GraphSummary,
)
from baggraph.ports.rule_source_port import RuleSourcePort
from baggraph.services.aggregator import aggregate_count
from baggraph.services.graph import BagGraph, build_graph
from baggraph.services.reachability import reachable_count, reachable_nodes

logger = logging.getLogger(__name__)


class BagAnalyzer:
    """Builds the containment graph once and answers analysis requests.

    Inject via services/container.py — do not instantiate directly in
    application code.

    Args:
        source:   Any object satisfying RuleSourcePort.
        settings: Shared application settings.
    """

    def __init__(self, source: RuleSourcePort, settings: Settings) -> None:
        self._source = source
        self._settings = settings
        self._graph: BagGraph | None = None

    # ── Public API ─────────────────────────────────────────────────────────

    @property
    def graph(self) -> BagGraph:
        """The frozen graph, read and built on first access.

        Raises:
            RuleSourceError: If the rules cannot be read.
            RuleParseError:  If any rule is malformed.
        """
        if self._graph is None:
            logger.info("Loading rules from %s", self._source.description)
            self._graph = build_graph(self._source.read_text())
        return self._graph

    def summary(self) -> GraphSummary:
        return self.graph.summary()

    def default_request(self, kind: AnalysisKind) -> AnalysisRequest:
        """A request for ``kind`` using the configured colour and direction."""
        return AnalysisRequest(
            start_color=self._settings.start_color,
            kind=kind,
            direction=self._settings.direction,
        )

    def analyze(self, request: AnalysisRequest) -> AnalysisResponse:
        """Run one analysis against the graph.

        Args:
            request: Validated AnalysisRequest.

        Returns:
            AnalysisResponse carrying the scalar result and graph metadata.

        Raises:
            UnknownColorError: If the start colour never appears in the rules.
            CycleError:        If an aggregate walk meets a containment cycle.
        """
        logger.info(
            "analyze | start=%r kind=%s direction=%s",
            request.start_color,
            request.kind.value,
            request.direction.value,
        )
        graph = self.graph
        start = graph.require(request.start_color)

        if request.kind == AnalysisKind.REACHABLE:
            result = reachable_count(graph, start, direction=request.direction)
            direction = request.direction
        else:
            result = aggregate_count(graph, start)
            direction = None

        logger.info("Analysis complete | kind=%s result=%d", request.kind.value, result)
        return AnalysisResponse(
            start_color=request.start_color,
            kind=request.kind,
            direction=direction,
            result=result,
            node_count=graph.node_count,
            edge_count=graph.edge_count,
            source=self._source.description,
            generated_at=datetime.now(tz=timezone.utc),
        )

    def reachable_colors(self, request: AnalysisRequest) -> list[str]:
        """Colours reachable from the request's start colour, in BFS order."""
        graph = self.graph
        start = graph.require(request.start_color)
        return [
            graph.color_of(node)
            for node in reachable_nodes(graph, start, direction=request.direction)
        ]
