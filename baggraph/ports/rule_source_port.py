"""
ports/rule_source_port.py
──────────────────────────────────────────────────────────────────────────────
Abstract interface for wherever the raw containment rules come from.

Current implementations: FileRuleSource (text file on disk) and
TextRuleSource (an in-memory string, used by tests and embedding callers).
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RuleSourcePort(Protocol):
    """Contract for a provider of newline-separated rule text."""

    @property
    def description(self) -> str:
        """Human-readable origin of the rules (file path, label…)."""
        ...

    def read_text(self) -> str:
        """Return the complete rule text.

        Returns:
            The raw input, one rule per line.

        Raises:
            RuleSourceError: If the text cannot be obtained.
        """
        ...
