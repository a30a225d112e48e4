"""
domain/exceptions.py
──────────────────────────────────────────────────────────────────────────────
Custom exception hierarchy.

All exceptions are rooted at BagGraphError so callers can catch broadly
(except BagGraphError) or narrowly (except RuleParseError).

Every one of these is fatal to the current run: ingestion is all-or-nothing
and an analysis cannot proceed without a valid start node.
"""
from __future__ import annotations


class BagGraphError(Exception):
    """Base exception for all application errors."""


class ConfigurationError(BagGraphError):
    """Raised when a configuration value is missing or invalid."""


class RuleSourceError(BagGraphError):
    """Raised when the raw rule text cannot be read."""


class RuleParseError(BagGraphError):
    """Raised when a containment rule line is malformed.

    Attributes:
        line:        The offending line (stripped).
        line_number: 1-based line number within the input, if known.
    """

    def __init__(self, message: str, line: str = "", line_number: int | None = None) -> None:
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        if line:
            message = f"{message} ({line!r})"
        super().__init__(message)


class UnknownColorError(BagGraphError):
    """Raised when a colour was never registered in the graph."""

    def __init__(self, color: str) -> None:
        self.color = color
        super().__init__(f"Unknown bag color: {color!r}")


class GraphFrozenError(BagGraphError):
    """Raised when the graph is mutated after ingestion has finished."""


class CycleError(BagGraphError):
    """Raised when an aggregate walk finds a bag that contains itself."""

    def __init__(self, color: str) -> None:
        self.color = color
        super().__init__(f"Containment cycle detected at bag color: {color!r}")
