"""
karmabot.api.deps — FastAPI dependency injection
=================================================
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy import Engine

from karmabot.config import KarmabotConfig, load_config
from karmabot.database.engine import create_db_engine
from karmabot.services.ledger import KarmaLedger


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return create_db_engine()


@lru_cache(maxsize=1)
def get_config() -> KarmabotConfig:
    return load_config()


def get_ledger(engine: Annotated[Engine, Depends(get_engine)]) -> KarmaLedger:
    return KarmaLedger(engine)
