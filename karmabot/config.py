"""
karmabot.config — YAML Configuration Loader
============================================

Reads ``config.yaml`` for soft settings (bot identity, leaderboard sizes,
API port).  Secrets (``DISCORD_TOKEN``, ``DATABASE_URL``) stay in ``.env``.

Usage::

    from karmabot.config import load_config

    cfg = load_config()          # reads ./config.yaml by default
    print(cfg.bot_name)          # "karmabot"
    print(cfg.default_rank_size) # 5
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from karmabot.engine.ranking import Granularity


# ---------------------------------------------------------------------------
# Typed settings object
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class KarmabotConfig:
    """Immutable configuration loaded from ``config.yaml``."""

    # Identity
    bot_name: str    # Used in help text and as the actor for self-karma penalties
    bot_prefix: str

    # HTTP API (python -m karmabot.api)
    api_port: int
    api_host: str = "127.0.0.1"

    # Leaderboards
    default_rank_size: int = 5
    max_rank_size: int = 25

    # Odds that a self-targeting attempt earns a 1-point award or penalty
    self_karma_chance: float = 0.15

    # Time-series defaults (API)
    series_max_buckets: int = 12
    series_granularity: Granularity = Granularity.WEEK


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def load_config(path: str | Path = "config.yaml") -> KarmabotConfig:
    """Read *path* and return a :class:`KarmabotConfig` instance.

    Parameters
    ----------
    path:
        Filesystem path to the YAML configuration file.
        Defaults to ``config.yaml`` in the current working directory.

    Raises
    ------
    FileNotFoundError
        If the YAML file doesn't exist.
    KeyError
        If a required key is missing from the YAML file.
    ValueError
        If ``series_granularity`` is not one of day, week or month.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path.resolve()}\n"
            "Hint: copy config.yaml.example → config.yaml and edit it."
        )

    with open(config_path, encoding="utf-8") as fh:
        raw: dict = yaml.safe_load(fh) or {}

    return KarmabotConfig(
        bot_name=raw["bot_name"],
        bot_prefix=raw["bot_prefix"],
        api_port=int(raw["api_port"]),
        api_host=str(raw.get("api_host", "127.0.0.1")),
        default_rank_size=int(raw.get("default_rank_size", 5)),
        max_rank_size=int(raw.get("max_rank_size", 25)),
        self_karma_chance=float(raw.get("self_karma_chance", 0.15)),
        series_max_buckets=int(raw.get("series_max_buckets", 12)),
        series_granularity=Granularity(raw.get("series_granularity", "week")),
    )
