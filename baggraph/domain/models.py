"""
domain/models.py
──────────────────────────────────────────────────────────────────────────────
Pure domain objects — Pydantic models with no imports from adapters or ports.

  • the parser produces ContainmentRule objects
  • the analysis service consumes AnalysisRequest and returns AnalysisResponse
  • the CLI serialises AnalysisResponse to text or JSON

Graph nodes themselves are plain integers (see services/graph.py); they never
cross this layer.
"""
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ── Enums ──────────────────────────────────────────────────────────────────────

class Direction(str, Enum):
    """Which edge orientation a reachability traversal follows."""
    FORWARD = "forward"   # container → contained: bags inside the start bag
    REVERSE = "reverse"   # contained → container: bags that can hold the start bag


class AnalysisKind(str, Enum):
    """Which question to ask of the graph."""
    REACHABLE = "reachable"   # distinct colours reachable from the start
    AGGREGATE = "aggregate"   # total nested bags inside one start bag


# ── Parser output ──────────────────────────────────────────────────────────────

class ContentClause(BaseModel):
    """One "<N> <adjective> <color> bag(s)" clause of a rule."""

    quantity: int = Field(..., ge=0)
    color:    str = Field(..., min_length=1)


class ContainmentRule(BaseModel):
    """A parsed rule line: a container colour and what one such bag holds."""

    container: str = Field(..., min_length=1)
    contents:  list[ContentClause] = Field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        """True for "contain no other bags"."""
        return not self.contents


# ── Service input ──────────────────────────────────────────────────────────────

class AnalysisRequest(BaseModel):
    """Validated input to BagAnalyzer.analyze()."""

    start_color: str = Field(..., min_length=1, max_length=200,
                             description="Colour the analysis starts from, e.g. 'shiny gold'")
    kind: AnalysisKind = Field(AnalysisKind.AGGREGATE,
                               description="REACHABLE = distinct reachable colours; "
                                           "AGGREGATE = total nested bag count")
    direction: Direction = Field(Direction.REVERSE,
                                 description="Traversal direction for REACHABLE")

    @field_validator("start_color", mode="before")
    @classmethod
    def normalise_color(cls, v):
        # Rule colours are single-space joined tokens.
        if isinstance(v, str):
            return " ".join(v.split())
        return v


# ── Service output ─────────────────────────────────────────────────────────────

class GraphSummary(BaseModel):
    """Size of a built graph."""

    node_count:     int
    edge_count:     int
    terminal_count: int


class AnalysisResponse(BaseModel):
    """Complete response from BagAnalyzer.analyze()."""

    start_color:  str
    kind:         AnalysisKind
    direction:    Optional[Direction] = None   # only set for REACHABLE
    result:       int = Field(..., ge=0)
    node_count:   int = 0
    edge_count:   int = 0
    source:       str = ""
    generated_at: datetime = Field(
                      default_factory=lambda: datetime.now(timezone.utc)
                  )

    def to_dict(self) -> dict:
        """Serialise to a plain JSON-safe dict."""
        return self.model_dump(mode="json")
