"""
services/parser.py
──────────────────────────────────────────────────────────────────────────────
Rule Parser: turns free-text containment rules into ContainmentRule objects.

Grammar (one rule per line):
  <adj> <color> bags contain <clauses>.
  <clauses> := "no other bags" | <N> <adj> <color> bag[s] {", " ...}

A colour is the first two whitespace tokens of the subject (or of a clause,
after its count); trailing "bag"/"bags"/"." are discarded.

Both functions are pure — no I/O, no graph access — so they are tested
directly with plain strings.
"""
from __future__ import annotations

import logging

from baggraph.domain.exceptions import RuleParseError
from baggraph.domain.models import ContainmentRule, ContentClause

logger = logging.getLogger(__name__)

CONTAIN_MARKER = "contain "
TERMINAL_PHRASE = "no other bags"


def parse_rule(line: str, line_number: int | None = None) -> ContainmentRule:
    """Parse a single rule line.

    Args:
        line:        One input line, e.g.
                     "light red bags contain 1 bright white bag, 2 muted yellow bags."
        line_number: 1-based position in the input, used in error messages.

    Returns:
        ContainmentRule; ``contents`` is empty for a terminal bag.

    Raises:
        RuleParseError: If the "contain " marker is missing, a quantity is not
            a number, or a colour has fewer than two tokens.
    """
    stripped = line.strip()
    subject, marker, clauses = stripped.partition(CONTAIN_MARKER)
    if not marker:
        raise RuleParseError(
            f"missing {CONTAIN_MARKER.strip()!r} marker", stripped, line_number
        )

    container = _color(subject.split(), stripped, line_number)

    clauses = clauses.strip().rstrip(".").strip()
    if clauses == TERMINAL_PHRASE:
        return ContainmentRule(container=container)

    contents: list[ContentClause] = []
    for clause in clauses.split(","):
        tokens = clause.split()
        if not tokens:
            raise RuleParseError("empty content clause", stripped, line_number)
        count = tokens[0]
        if not (count.isascii() and count.isdigit()):
            raise RuleParseError(f"quantity {count!r} is not a number", stripped, line_number)
        contents.append(
            ContentClause(
                quantity=int(count),
                color=_color(tokens[1:], stripped, line_number),
            )
        )
    return ContainmentRule(container=container, contents=contents)


def parse_rules(text: str) -> list[ContainmentRule]:
    """Parse every non-blank line of ``text``.

    All-or-nothing: the first malformed line raises and nothing is returned.

    Raises:
        RuleParseError: On the first malformed line.
    """
    rules: list[ContainmentRule] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        rule = parse_rule(line, line_number)
        logger.debug(
            "line %d | %s -> %s",
            line_number,
            rule.container,
            ", ".join(f"{c.quantity} {c.color}" for c in rule.contents) or "nothing",
        )
        rules.append(rule)
    logger.info("Parsed %d containment rules", len(rules))
    return rules


def _color(tokens: list[str], line: str, line_number: int | None) -> str:
    """Join the first two tokens into a colour name."""
    if len(tokens) < 2:
        raise RuleParseError(
            f"expected '<adjective> <color>', got {' '.join(tokens)!r}", line, line_number
        )
    return " ".join(tokens[:2])
