"""
karmabot.services.ranking_service — Rankings over the Live Ledger
==================================================================

Binds the pure pipeline in :mod:`karmabot.engine.ranking` to a
:class:`KarmaLedger` snapshot.  Callable from the bot (via ``run_db``) and
from the API.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from karmabot.engine.ranking import (
    Bucket,
    Granularity,
    KarmaTarget,
    RankType,
    build_ranked_buckets,
    rank_totals,
)

if TYPE_CHECKING:
    from karmabot.services.ledger import KarmaLedger

logger = logging.getLogger(__name__)


def rank_targets(
    ledger: KarmaLedger, n: int, direction: RankType = RankType.TOP
) -> list[KarmaTarget]:
    """Top or bottom *n* targets by total karma."""
    targets = rank_totals(ledger.sum_grouped_by_target(), n, direction)
    logger.debug("Ranked %d targets (%s %d)", len(targets), direction, n)
    return targets


def ranked_time_series(
    ledger: KarmaLedger,
    n: int,
    max_buckets: int,
    direction: RankType = RankType.TOP,
    granularity: Granularity = Granularity.WEEK,
    now: datetime | None = None,
) -> list[Bucket]:
    """Cumulative per-period totals for the top or bottom *n* targets."""
    rows = ledger.sum_grouped_by_target_and_period(granularity)
    return build_ranked_buckets(rows, n, max_buckets, direction, granularity, now)
