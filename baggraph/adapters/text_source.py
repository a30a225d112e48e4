"""
adapters/text_source.py
──────────────────────────────────────────────────────────────────────────────
RuleSourcePort implementation over an in-memory string.
"""
from __future__ import annotations


class TextRuleSource:
    """Serves a fixed block of rule text."""

    def __init__(self, text: str, description: str = "<text>") -> None:
        self._text = text
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    def read_text(self) -> str:
        return self._text
