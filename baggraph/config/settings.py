"""
config/settings.py
──────────────────────────────────────────────────────────────────────────────
Single source of truth for all tuneable parameters.

All values can be overridden via environment variables or a .env file placed
at the project root.  The frozen dataclass ensures settings are never mutated
at runtime.

  BAG_RULES_PATH       → rules file read by default
  BAG_START_COLOR      → colour every analysis starts from by default
  BAG_REACH_DIRECTION  → "reverse" (which bags can hold the start colour)
                         or "forward" (which bags sit inside it)
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from baggraph.domain.exceptions import ConfigurationError
from baggraph.domain.models import Direction

# Load .env from project root (two levels up from this file)
load_dotenv(Path(__file__).parent.parent.parent / ".env")


def _env(key: str, default: str) -> str:
    return os.getenv(key, default)


def _env_path(key: str, default: Path) -> Path:
    return Path(os.getenv(key, str(default)))


@dataclass(frozen=True)
class Settings:
    """Immutable application settings loaded from environment variables."""

    # ── Input ──────────────────────────────────────────────────────────────
    rules_path: Path = field(
        default_factory=lambda: _env_path(
            "BAG_RULES_PATH",
            Path(__file__).parent.parent.parent / "input.txt",
        )
    )

    # ── Analysis defaults ──────────────────────────────────────────────────
    start_color: str = field(
        default_factory=lambda: _env("BAG_START_COLOR", "shiny gold")
    )
    reach_direction: str = field(
        default_factory=lambda: _env("BAG_REACH_DIRECTION", Direction.REVERSE.value)
    )

    @property
    def direction(self) -> Direction:
        """The configured reachability direction as an enum."""
        try:
            return Direction(self.reach_direction.lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown BAG_REACH_DIRECTION '{self.reach_direction}'. "
                "Valid values: 'forward', 'reverse'."
            ) from None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Returns a cached singleton Settings instance.

    Use this everywhere instead of instantiating Settings() directly —
    it guarantees a single object is shared across the entire process.
    """
    return Settings()
