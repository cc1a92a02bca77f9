"""
karmabot.services.ledger — Append-only Karma Ledger
====================================================

:class:`KarmaLedger` is the explicit store handle for ``karma_transactions``.
One instance is built at process start and handed to the bot, the ranking
service and the API.

Every read is a single query, so a ranking and the totals it shows come
from one snapshot.  Database errors propagate to the caller unmodified.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import func, select

from karmabot.database.engine import get_session
from karmabot.database.functions import period_start
from karmabot.database.models import KarmaTransaction
from karmabot.engine.ranking import Granularity, KarmaTarget, truncate_to_period

if TYPE_CHECKING:
    from sqlalchemy import Engine

logger = logging.getLogger(__name__)


class KarmaLedger:
    """Reads aggregates from and appends entries to the karma ledger."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def sum_by_target(self, name: str) -> int:
        """Total karma for *name*; 0 when it has no entries."""
        with get_session(self.engine) as session:
            total = session.scalar(
                select(func.coalesce(func.sum(KarmaTransaction.delta), 0))
                .where(KarmaTransaction.karma_target == name)
            )
        return int(total or 0)

    def get_target(self, name: str) -> KarmaTarget:
        return KarmaTarget(name, self.sum_by_target(name))

    def sum_grouped_by_target(self) -> list[tuple[str, int]]:
        """``(name, total)`` for every target with at least one entry."""
        with get_session(self.engine) as session:
            rows = session.execute(
                select(
                    KarmaTransaction.karma_target,
                    func.sum(KarmaTransaction.delta).label("total"),
                ).group_by(KarmaTransaction.karma_target)
            ).all()
        return [(row.karma_target, int(row.total)) for row in rows]

    def sum_grouped_by_target_and_period(
        self, granularity: Granularity
    ) -> list[tuple[str, date, int]]:
        """``(name, period_start, total)`` for every target and active period.

        Periods are UTC calendar days, Monday-based weeks or months, and
        the grouping happens in the database.
        """
        with get_session(self.engine) as session:
            rows = session.execute(
                select(
                    KarmaTransaction.karma_target,
                    period_start(granularity, KarmaTransaction.karma_date).label("period"),
                    func.sum(KarmaTransaction.delta).label("total"),
                ).group_by(KarmaTransaction.karma_target, "period")
            ).all()

        # Drivers may hand back a datetime at midnight instead of a date.
        return [
            (row.karma_target, truncate_to_period(row.period, granularity), int(row.total))
            for row in rows
        ]

    # -------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------
    def append(
        self,
        name: str,
        delta: int,
        actor: str,
        timestamp: datetime | None = None,
    ) -> None:
        """Insert one ledger entry.  *timestamp* defaults to now (UTC)."""
        with get_session(self.engine) as session:
            session.add(
                KarmaTransaction(
                    karma_target=name,
                    delta=delta,
                    actor=actor,
                    karma_date=timestamp or datetime.now(UTC),
                )
            )
        logger.debug("Ledger append: %s %+d by %s", name, delta, actor)

    def modify_karma(self, name: str, delta: int, actor: str) -> int:
        """Append *delta* for *name* and return the target's new total.

        The total is read after the insert, so concurrent appends from other
        actors may already be included.
        """
        self.append(name, delta, actor)
        return self.sum_by_target(name)
