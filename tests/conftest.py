"""
tests/conftest.py — Shared Test Fixtures
=========================================
"""

from __future__ import annotations

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.pool import StaticPool

from karmabot.config import KarmabotConfig
from karmabot.database.functions import period_start
from karmabot.database.models import Base
from karmabot.engine.ranking import Granularity
from karmabot.services.ledger import KarmaLedger

# SQLite date() modifiers equivalent to date_trunc for each granularity.
_SQLITE_PERIOD_MODIFIERS = {
    Granularity.DAY: "",
    Granularity.WEEK: ", 'weekday 0', '-6 days'",
    Granularity.MONTH: ", 'start of month'",
}


@compiles(period_start, "sqlite")
def _compile_period_start_sqlite(element, compiler, **kw):
    return "date(%s%s)" % (
        compiler.process(element.clauses, **kw),
        _SQLITE_PERIOD_MODIFIERS[element.granularity],
    )


@pytest.fixture
def db_engine() -> Engine:
    """Create an in-memory SQLite engine with the ledger table.

    Uses StaticPool so worker threads started by ``run_db`` share the same
    in-memory database.
    """
    engine = create_engine(
        "sqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def ledger(db_engine: Engine) -> KarmaLedger:
    return KarmaLedger(db_engine)


@pytest.fixture
def cfg() -> KarmabotConfig:
    return KarmabotConfig(bot_name="mockbot", bot_prefix="!", api_port=8000)
