"""
services/container.py
──────────────────────────────────────────────────────────────────────────────
Dependency Injection container.

THIS IS THE ONLY FILE THAT NAMES CONCRETE ADAPTER CLASSES.

By default the rules are read from BAG_RULES_PATH (see config/settings.py);
build_analyzer() accepts an explicit path or an already constructed source
for callers that want something else.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from baggraph.adapters.file_source import FileRuleSource
from baggraph.adapters.text_source import TextRuleSource
from baggraph.config.settings import Settings, get_settings
from baggraph.ports.rule_source_port import RuleSourcePort
from baggraph.services.analyzer import BagAnalyzer

logger = logging.getLogger(__name__)


def build_analyzer(
    rules_path: Path | str | None = None,
    settings: Settings | None = None,
    source: RuleSourcePort | None = None,
) -> BagAnalyzer:
    """Wire a BagAnalyzer.

    Args:
        rules_path: Rules file; defaults to ``settings.rules_path``.
        settings:   Defaults to the shared get_settings() instance.
        source:     Pre-built rule source; takes precedence over rules_path.
    """
    settings = settings or get_settings()
    if source is None:
        source = FileRuleSource(rules_path or settings.rules_path)
    logger.info("Building BagAnalyzer | source=%s", source.description)
    return BagAnalyzer(source=source, settings=settings)


def analyzer_from_text(text: str, settings: Settings | None = None) -> BagAnalyzer:
    """Wire a BagAnalyzer over an in-memory block of rules."""
    return build_analyzer(settings=settings, source=TextRuleSource(text))


@lru_cache(maxsize=1)
def get_analyzer() -> BagAnalyzer:
    """Return the process-wide BagAnalyzer for the configured rules file.

    The ``@lru_cache`` ensures the graph is built only once per process
    lifetime.
    """
    return build_analyzer()
