"""
karmabot.bot.cogs.karma — Karma Dispatcher
===========================================

Listens for on_message events and routes them:

1. on_message fires → gate checks (bot author, DM, empty text)
2. Message starts with the bot's mention → parse and answer the command
3. Otherwise detect a karma expression; none means no reply
4. Apply the change through the ledger (on a worker thread via run_db)
   and post the composed reply
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from karmabot.constants import MAX_TARGET_LENGTH
from karmabot.database.engine import run_db
from karmabot.engine.commands import BotCommand, BotCommandType, parse_bot_command
from karmabot.engine.detector import KarmaIntent, detect_karma_intent, is_addressed_to_bot
from karmabot.engine.ranking import RankType
from karmabot.services.embeds import build_ranking_embed
from karmabot.services.messages import (
    TARGET_TOO_LONG_MESSAGE,
    UNKNOWN_COMMAND_MESSAGE,
    help_message,
    karma_change_message,
    self_targeting_message,
)
from karmabot.services.ranking_service import rank_targets

if TYPE_CHECKING:
    from karmabot.bot.core import KarmaBot

logger = logging.getLogger(__name__)

_RANK_DIRECTIONS: dict[BotCommandType, RankType] = {
    BotCommandType.TOP: RankType.TOP,
    BotCommandType.TOP_N: RankType.TOP,
    BotCommandType.BOTTOM: RankType.BOTTOM,
    BotCommandType.BOTTOM_N: RankType.BOTTOM,
}


class Karma(commands.Cog, name="Karma"):
    """Awards karma for ``thing++`` / ``thing--`` and answers leaderboard commands."""

    def __init__(self, bot: KarmaBot, rand: Callable[[], float] = random.random) -> None:
        self.bot = bot
        self._rand = rand

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        try:
            await self._handle_message(message)
        except Exception:
            logger.exception(
                "Error processing message %s from user %s",
                message.id,
                message.author.id,
            )

    async def _handle_message(self, message: discord.Message) -> bool:
        """Inner message handler.  Returns True if the bot replied."""

        # Gate 1: Ignore bots (including ourselves)
        if message.author.bot:
            logger.debug("Ignoring bot message from %s", message.author.name)
            return False

        # Gate 2: Ignore DMs
        if message.guild is None:
            logger.debug("Ignoring DM from %s", message.author.name)
            return False

        text = message.content
        if not text:
            return False

        bot_user = self.bot.user
        if bot_user is not None and is_addressed_to_bot(text, bot_user.id):
            command = parse_bot_command(text)
            logger.info("Command from %s: %s", message.author.name, command.type)
            await self.handle_bot_command(command, message.channel)
            return True

        intent = detect_karma_intent(text, str(message.author.id))
        if intent is None:
            return False

        if len(intent.target) > MAX_TARGET_LENGTH:
            logger.info(
                "Rejected %d-char karma target from %s",
                len(intent.target),
                message.author.name,
            )
            await message.channel.send(TARGET_TOO_LONG_MESSAGE)
            return True

        if intent.is_targeting_self:
            reply = await self._apply_self_targeting(intent)
        else:
            total = await run_db(
                self.bot.ledger.modify_karma,
                intent.target,
                intent.amount,
                str(message.author.id),
            )
            logger.info(
                "Karma: %s %+d by %s → %d%s",
                intent.target,
                intent.amount,
                message.author.name,
                total,
                " (buzzkill)" if intent.is_buzzkill else "",
            )
            reply = karma_change_message(
                intent.is_buzzkill, intent.amount, total, intent.target
            )

        await message.channel.send(reply)
        return True

    async def _apply_self_targeting(self, intent: KarmaIntent) -> str:
        result = self_targeting_message(
            intent.amount,
            intent.target,
            rand=self._rand,
            chance=self.bot.cfg.self_karma_chance,
        )
        if result.karma_change:
            await run_db(
                self.bot.ledger.append,
                intent.target,
                result.karma_change,
                self.bot.cfg.bot_name,
            )
            logger.info(
                "Self-karma: %s %+d by %s",
                intent.target,
                result.karma_change,
                self.bot.cfg.bot_name,
            )
        return result.message

    async def handle_bot_command(
        self, command: BotCommand, channel: discord.abc.Messageable
    ) -> None:
        """Answer a parsed bot command in *channel*."""
        direction = _RANK_DIRECTIONS.get(command.type)
        if direction is not None:
            size = command.payload or self.bot.cfg.default_rank_size
            size = min(size, self.bot.cfg.max_rank_size)
            targets = await run_db(rank_targets, self.bot.ledger, size, direction)
            await channel.send(embed=build_ranking_embed(direction, size, targets))
        elif command.type == BotCommandType.HELP:
            await channel.send(help_message(self.bot.cfg.bot_name))
        else:
            await channel.send(UNKNOWN_COMMAND_MESSAGE)


async def setup(bot: KarmaBot) -> None:
    await bot.add_cog(Karma(bot))
