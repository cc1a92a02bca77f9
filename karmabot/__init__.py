"""
Karmabot — Conversational Karma for Discord
============================================
Lets members award or deduct karma to anything by typing ``Ken++`` or
``"chocolate cake"--`` in ordinary conversation, and ask the bot for
leaderboards with ``@karmabot top 5``.

Package layout::

    karmabot/
    ├── config.py          # YAML → typed Python config
    ├── constants.py       # Amount bounds, rank badges
    ├── database/
    │   ├── engine.py      # SQLAlchemy engine + async helper
    │   ├── functions.py   # period_start SQL expression
    │   └── models.py      # karma_transactions ledger table
    ├── engine/
    │   ├── detector.py    # Karma expression detector
    │   ├── commands.py    # Bot command parser
    │   └── ranking.py     # Pure ranking + cumulative bucket fold
    ├── services/
    │   ├── ledger.py          # Append-only ledger store handle
    │   ├── ranking_service.py # Ranking bound to the ledger
    │   ├── messages.py        # User-facing message composer
    │   └── embeds.py          # Discord embed builders
    ├── bot/
    │   ├── __main__.py    # Bot entry point
    │   ├── core.py        # Bot subclass, cog loader
    │   └── cogs/
    │       └── karma.py   # on_message dispatcher
    └── api/
        ├── __main__.py    # uvicorn entry point
        ├── main.py        # FastAPI app (health + karma read endpoints)
        ├── deps.py        # Engine / ledger dependencies
        └── routes/
            └── karma.py   # Leaderboard + time-series endpoints
"""

__version__ = "0.1.0"
