"""
karmabot.bot.__main__ — Entry point for ``python -m karmabot.bot``
==================================================================

Wiring:
1. Load .env (secrets).
2. Load config.yaml (soft settings).
3. Create the SQLAlchemy engine and ensure tables exist.
4. Build the ledger handle.
5. Create the KarmaBot and hand it config + engine + ledger.
6. Start the bot (blocking — runs the asyncio event loop).

Run with::

    python -m karmabot.bot
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv
from sqlalchemy.exc import SQLAlchemyError

from karmabot.bot.core import KarmaBot
from karmabot.config import load_config
from karmabot.database.engine import create_db_engine, init_db
from karmabot.services.ledger import KarmaLedger

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("karmabot")


def main() -> None:
    """Bootstrap and run the Karmabot."""

    # 1. Environment variables (secrets).
    load_dotenv()

    token = os.getenv("DISCORD_TOKEN")
    if not token or token == "your-discord-bot-token-here":
        logger.critical(
            "DISCORD_TOKEN is not set.  "
            "Copy .env.example → .env and paste your bot token."
        )
        sys.exit(1)

    # 2. Soft configuration.
    cfg = load_config()
    logger.info("Config loaded — Bot: %s", cfg.bot_name)

    # 3. Database.  Failing to reach the ledger at startup is fatal.
    try:
        engine = create_db_engine()
        init_db(engine)
    except (RuntimeError, SQLAlchemyError) as exc:
        logger.critical("Could not start bot: database unavailable (%s)", exc)
        sys.exit(1)

    # 4. Ledger.
    ledger = KarmaLedger(engine)

    # 5. Bot.
    bot = KarmaBot(cfg=cfg, engine=engine, ledger=ledger)

    # 6. Run (blocks until Ctrl+C or SIGTERM).
    logger.info("Starting Karmabot…")
    try:
        bot.run(token, log_handler=None)
    except KeyboardInterrupt:
        logger.info("Shutting down gracefully…")


if __name__ == "__main__":
    main()
