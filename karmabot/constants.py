"""
karmabot.constants — Shared Constants
======================================

Single source of truth for karma amount bounds and presentation constants.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Karma amounts
# ---------------------------------------------------------------------------
MAX_KARMA_AMOUNT = 4
MIN_KARMA_AMOUNT = -MAX_KARMA_AMOUNT

# Operator runs longer than this trigger Buzzkill Mode.
BUZZKILL_RUN_LENGTH = 5

# Longest target name the ledger stores (karma_transactions.karma_target).
MAX_TARGET_LENGTH = 255

# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------
RANK_BADGES: list[str] = ["\U0001f947", "\U0001f948", "\U0001f949"]  # 🥇🥈🥉

EMBED_COLOR_TOP = 0x2ECC71
EMBED_COLOR_BOTTOM = 0xE74C3C


def points(value: int) -> str:
    """``point`` for exactly one, ``points`` otherwise."""
    return "point" if value == 1 else "points"
