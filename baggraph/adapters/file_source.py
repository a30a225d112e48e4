"""
adapters/file_source.py
──────────────────────────────────────────────────────────────────────────────
RuleSourcePort implementation that reads a UTF-8 text file.
"""
from __future__ import annotations

import logging
from pathlib import Path

from baggraph.domain.exceptions import RuleSourceError

logger = logging.getLogger(__name__)


class FileRuleSource:
    """Reads rules from a file on disk.

    Args:
        path: Location of the rules file.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def description(self) -> str:
        return str(self._path)

    def read_text(self) -> str:
        if not self._path.is_file():
            raise RuleSourceError(f"Rules file not found: {self._path}")
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise RuleSourceError(f"Could not read rules file {self._path}: {exc}") from exc
        logger.debug("Read %d characters from %s", len(text), self._path)
        return text
