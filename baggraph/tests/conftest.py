"""
tests/conftest.py
──────────────────────────────────────────────────────────────────────────────
Shared pytest fixtures and canned rule sets.

No test touches the real BAG_RULES_PATH: file-based tests write their own
rules under tmp_path, everything else goes through TextRuleSource.

Fixture hierarchy:
  settings        → Settings with test defaults
  example_rules   → the nine-rule example (two paths into "shiny gold")
  chain_rules     → seven bags, each holding 2 of the next
  example_graph   → frozen BagGraph built from example_rules
  chain_graph     → frozen BagGraph built from chain_rules
  analyzer        → BagAnalyzer over example_rules
  rules_file      → example_rules written to a temp file
"""
from __future__ import annotations

import pytest

from baggraph.adapters.text_source import TextRuleSource
from baggraph.config.settings import Settings
from baggraph.services.analyzer import BagAnalyzer
from baggraph.services.graph import build_graph


EXAMPLE_RULES = """\
light red bags contain 1 bright white bag, 2 muted yellow bags.
dark orange bags contain 3 bright white bags, 4 muted yellow bags.
bright white bags contain 1 shiny gold bag.
muted yellow bags contain 2 shiny gold bags, 9 faded blue bags.
shiny gold bags contain 1 dark olive bag, 2 vibrant plum bags.
dark olive bags contain 3 faded blue bags, 4 dotted black bags.
vibrant plum bags contain 5 faded blue bags, 6 dotted black bags.
faded blue bags contain no other bags.
dotted black bags contain no other bags.
"""

CHAIN_RULES = """\
shiny gold bags contain 2 dark red bags.
dark red bags contain 2 dark orange bags.
dark orange bags contain 2 dark yellow bags.
dark yellow bags contain 2 dark green bags.
dark green bags contain 2 dark blue bags.
dark blue bags contain 2 dark violet bags.
dark violet bags contain no other bags.
"""

CYCLIC_RULES = """\
pale red bags contain 1 pale blue bag.
pale blue bags contain 2 pale green bags.
pale green bags contain 1 pale red bag.
"""


# ── Settings fixture ───────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def settings(tmp_path_factory) -> Settings:
    """Return a Settings instance with sane test defaults."""
    return Settings(
        rules_path=tmp_path_factory.mktemp("rules") / "missing.txt",
        start_color="shiny gold",
        reach_direction="reverse",
    )


# ── Rule sets ──────────────────────────────────────────────────────────────

@pytest.fixture
def example_rules() -> str:
    return EXAMPLE_RULES


@pytest.fixture
def chain_rules() -> str:
    return CHAIN_RULES


@pytest.fixture
def cyclic_rules() -> str:
    return CYCLIC_RULES


# ── Built graphs ───────────────────────────────────────────────────────────

@pytest.fixture
def example_graph():
    return build_graph(EXAMPLE_RULES)


@pytest.fixture
def chain_graph():
    return build_graph(CHAIN_RULES)


@pytest.fixture
def analyzer(settings):
    return BagAnalyzer(source=TextRuleSource(EXAMPLE_RULES, "example"), settings=settings)


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / "rules.txt"
    path.write_text(EXAMPLE_RULES, encoding="utf-8")
    return path
