"""
karmabot.services.embeds — Discord embed builders
==================================================

All embed construction lives here so the cog only supplies data.
"""

from __future__ import annotations

import discord

from karmabot.constants import EMBED_COLOR_BOTTOM, EMBED_COLOR_TOP, RANK_BADGES
from karmabot.engine.ranking import KarmaTarget, RankType
from karmabot.services.messages import EMPTY_RANKING_MESSAGE, ranking_message


def build_ranking_embed(
    direction: RankType,
    size: int,
    targets: list[KarmaTarget],
) -> discord.Embed:
    """Build a leaderboard embed; the description holds one line per target."""
    if direction == RankType.TOP:
        title = f"{RANK_BADGES[0]} Top {size}"
        color = discord.Color(EMBED_COLOR_TOP)
    else:
        title = f"\U0001f4c9 Bottom {size}"
        color = discord.Color(EMBED_COLOR_BOTTOM)

    return discord.Embed(
        title=title,
        description=ranking_message(targets) if targets else EMPTY_RANKING_MESSAGE,
        color=color,
    )
