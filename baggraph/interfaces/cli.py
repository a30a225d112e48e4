"""
interfaces/cli.py
──────────────────────────────────────────────────────────────────────────────
Command-line interface for the bag containment graph.

Usage:
  # Both analyses for the configured colour (BAG_START_COLOR, default "shiny gold")
  python -m baggraph.interfaces.cli --file input.txt

  # How many colours can eventually hold a shiny gold bag
  python -m baggraph.interfaces.cli -f input.txt --analysis reachable --direction reverse

  # How many bags one dark orange bag holds, as JSON
  python -m baggraph.interfaces.cli -f input.txt -c "dark orange" -a aggregate --json

  # Via installed entry-point (pyproject.toml [project.scripts])
  bag-graph --file input.txt

Exit codes:
  0 — success
  1 — fatal error (unreadable input, malformed rule, unknown colour…)
  2 — argument error
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from baggraph.domain.exceptions import BagGraphError
from baggraph.domain.models import AnalysisKind, AnalysisRequest, Direction
from baggraph.services.analyzer import BagAnalyzer
from baggraph.services.container import build_analyzer, get_analyzer

logger = logging.getLogger(__name__)

_ALL = "all"


# ── Argument parser ────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bag-graph",
        description="Analyse luggage containment rules.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--file", "-f",
        metavar="FILE",
        type=Path,
        help="Rules file, one rule per line. (default: BAG_RULES_PATH)",
    )
    p.add_argument(
        "--color", "-c",
        metavar="COLOR",
        help="Start colour, e.g. 'shiny gold'. (default: BAG_START_COLOR)",
    )
    p.add_argument(
        "--analysis", "-a",
        choices=[k.value for k in AnalysisKind] + [_ALL],
        default=_ALL,
        help="Which analysis to run. (default: all)",
    )
    p.add_argument(
        "--direction", "-d",
        choices=[d.value for d in Direction],
        help="Reachability direction. (default: BAG_REACH_DIRECTION)",
    )
    p.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON.",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging and list reachable colours.",
    )
    return p


# ── Formatting helpers ─────────────────────────────────────────────────────

def _print_results_text(responses, details=None) -> None:
    details = details or {}
    for i, r in enumerate(responses):
        label = r.kind.value
        if r.direction is not None:
            label = f"{label} ({r.direction.value})"
        print(f"{r.start_color}  {label}: {r.result}")
        if i in details:
            print(f"    {', '.join(details[i]) or '(none)'}")


def _print_results_json(responses) -> None:
    payload = [r.to_dict() for r in responses]
    print(json.dumps(payload, indent=2, ensure_ascii=False))


# ── Main logic ─────────────────────────────────────────────────────────────

def _requests(args: argparse.Namespace, analyzer: BagAnalyzer) -> list[AnalysisRequest]:
    kinds = list(AnalysisKind) if args.analysis == _ALL else [AnalysisKind(args.analysis)]
    requests = []
    for kind in kinds:
        request = analyzer.default_request(kind)
        overrides = {}
        if args.color is not None:
            overrides["start_color"] = args.color
        if args.direction is not None:
            overrides["direction"] = Direction(args.direction)
        if overrides:
            request = AnalysisRequest(**{**request.model_dump(), **overrides})
        requests.append(request)
    return requests


def run(args: argparse.Namespace) -> int:
    """Execute the requested analyses.

    Returns:
        Exit code (0 = success, 1 = error, 2 = bad argument).
    """
    analyzer = build_analyzer(rules_path=args.file) if args.file else get_analyzer()
    try:
        requests = _requests(args, analyzer)
    except ValidationError as exc:
        print(f"ERROR: invalid arguments: {exc}", file=sys.stderr)
        return 2
    except BagGraphError as exc:
        logger.exception("Invalid configuration")
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    try:
        responses = [analyzer.analyze(request) for request in requests]
    except BagGraphError as exc:
        logger.exception("Analysis failed")
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.json_output:
        _print_results_json(responses)
        return 0

    details = {}
    if args.verbose:
        # Reachable colours, keyed by position in responses.
        details = {
            i: analyzer.reachable_colors(request)
            for i, request in enumerate(requests)
            if request.kind == AnalysisKind.REACHABLE
        }
    _print_results_text(responses, details)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point for the bag-graph console script."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    sys.exit(run(args))


if __name__ == "__main__":
    main()
