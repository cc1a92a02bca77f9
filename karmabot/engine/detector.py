"""
karmabot.engine.detector — Karma Expression Detector
=====================================================

Pure function over message text.  No Discord I/O, no DB I/O.

A message is split into candidate tokens (mentions, bare words, quoted
phrases, each optionally followed by ``+``/``-`` characters).  Each token is
offered to an ordered list of matchers; the first token any matcher accepts
becomes the :class:`KarmaIntent`.

Examples::

    detect_karma_intent("Omg Ken++ and burgers++", "U1")   # target "Ken", +1
    detect_karma_intent('"chocolate cake"---', "U1")       # target "chocolate cake", -2
    detect_karma_intent("<@U1> ++", "U1")                  # self-targeting
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from karmabot.constants import BUZZKILL_RUN_LENGTH, MAX_KARMA_AMOUNT, MIN_KARMA_AMOUNT

__all__ = ["KarmaIntent", "detect_karma_intent", "is_addressed_to_bot"]

# Mentions (with trailing whitespace), bare words, or quoted phrases,
# each optionally followed by a run of +'s then -'s.
_TOKEN_RE = re.compile(r'(?:<@!?[A-Za-z0-9_]+>\s*|[^\s"]+|"(?:\\"|[^"])+")(?:\+*-*)')

# Each matcher yields (raw target, operator run).  Runs are 2+ identical chars.
_MENTION_RE = re.compile(r"(<@!?[A-Za-z0-9_]+>\s*)(\+{2,}|-{2,})")
_WORD_RE = re.compile(r'([^\s"+-]+(?:[+-][^\s"+-]+)*)(\+{2,}|-{2,})')
_QUOTED_RE = re.compile(r'"([^"]+)"(\+{2,}|-{2,})')

# Legacy nickname mentions (<@!id>) name the same user as <@id>.
_NICKNAME_MENTION_RE = re.compile(r"^<@!(?=[A-Za-z0-9_]+>$)")


# ---------------------------------------------------------------------------
# KarmaIntent — detector output
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class KarmaIntent:
    """A karma change requested by a message."""

    target: str
    amount: int
    is_buzzkill: bool
    is_targeting_self: bool


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------
Matcher = Callable[[str], tuple[str, str] | None]


def _regex_matcher(pattern: re.Pattern[str]) -> Matcher:
    def match(token: str) -> tuple[str, str] | None:
        found = pattern.search(token)
        if found is None:
            return None
        return found.group(1), found.group(2)

    return match


# Precedence: mentions, then bare words, then quoted phrases.
MATCHERS: tuple[Matcher, ...] = (
    _regex_matcher(_MENTION_RE),
    _regex_matcher(_WORD_RE),
    _regex_matcher(_QUOTED_RE),
)


def _match_token(token: str) -> tuple[str, str] | None:
    for matcher in MATCHERS:
        result = matcher(token)
        if result is not None:
            return result
    return None


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def detect_karma_intent(text: str, asking_user_id: str | None = None) -> KarmaIntent | None:
    """Return the first karma expression in *text*, or ``None``.

    ``amount`` is ``run_length - 1`` (negated for ``-`` runs) clamped to
    [-4, 4].  ``is_buzzkill`` is set when the run is longer than five
    characters.  ``is_targeting_self`` compares the target against the
    asking user's ``<@id>`` mention; ``<@!id>`` targets are reported as ``<@id>``.
    """
    for token_match in _TOKEN_RE.finditer(text or ""):
        result = _match_token(token_match.group(0))
        if result is None:
            continue

        raw_target, ops = result
        target = _NICKNAME_MENTION_RE.sub("<@", raw_target.strip())

        amount = len(ops) - 1
        if ops[0] == "-":
            amount = -amount

        return KarmaIntent(
            target=target,
            amount=_clamp(amount, MIN_KARMA_AMOUNT, MAX_KARMA_AMOUNT),
            is_buzzkill=len(ops) > BUZZKILL_RUN_LENGTH,
            is_targeting_self=(
                asking_user_id is not None and target == f"<@{asking_user_id}>"
            ),
        )

    return None


def is_addressed_to_bot(text: str, bot_id: str | int) -> bool:
    """True if *text* starts with the bot's ``<@id>`` or ``<@!id>`` mention."""
    return (text or "").startswith((f"<@{bot_id}>", f"<@!{bot_id}>"))
