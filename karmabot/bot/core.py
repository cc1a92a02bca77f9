"""
karmabot.bot.core — Bot Instance & Cog Loader
==============================================

Defines :class:`KarmaBot`, a ``commands.Bot`` subclass that:

1. Stores the shared config (``bot.cfg``), DB engine (``bot.engine``) and
   ledger handle (``bot.ledger``) so every Cog can reach them.
2. Loads every Cog listed in :data:`EXTENSIONS` on startup.
"""

from __future__ import annotations

import logging

import discord
from discord.ext import commands
from sqlalchemy import Engine

from karmabot.config import KarmabotConfig
from karmabot.services.ledger import KarmaLedger

logger = logging.getLogger(__name__)

# Cog modules to load on startup.
EXTENSIONS: list[str] = [
    "karmabot.bot.cogs.karma",
]


class KarmaBot(commands.Bot):
    """Custom Bot subclass that carries project-wide state.

    Parameters
    ----------
    cfg:
        The parsed :class:`KarmabotConfig` from ``config.yaml``.
    engine:
        A SQLAlchemy :class:`Engine` connected to PostgreSQL.
    ledger:
        The karma ledger bound to *engine*.  Built from *engine* if omitted.
    """

    def __init__(
        self,
        cfg: KarmabotConfig,
        engine: Engine,
        ledger: KarmaLedger | None = None,
    ) -> None:
        # MESSAGE_CONTENT is privileged and must be enabled in the
        # Developer Portal; karma expressions live in message text.
        intents = discord.Intents.default()
        intents.message_content = True
        intents.presences = False

        super().__init__(
            command_prefix=cfg.bot_prefix,
            intents=intents,
            description=f"{cfg.bot_name} — keeps score of things",
        )

        self.cfg = cfg
        self.engine = engine
        self.ledger = ledger or KarmaLedger(engine)

    # -----------------------------------------------------------------------
    # Lifecycle hooks
    # -----------------------------------------------------------------------
    async def setup_hook(self) -> None:
        """Load all Cog extensions before connecting.

        A broken extension is logged and skipped rather than stopping the bot.
        """
        for ext in EXTENSIONS:
            try:
                await self.load_extension(ext)
                logger.info("Loaded extension: %s", ext)
            except Exception as exc:
                logger.error("Failed to load extension %s: %s", ext, exc)

    async def on_ready(self) -> None:
        assert self.user is not None  # guaranteed after on_ready
        logger.info("Logged in as %s (ID: %s)", self.user.name, self.user.id)
        logger.info("Watching %d guild(s) for karma", len(self.guilds))

    async def close(self) -> None:
        logger.info("Bot shutting down…")
        await super().close()
        self.engine.dispose()
