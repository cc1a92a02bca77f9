"""
karmabot.api.routes.karma — Read-only karma endpoints
======================================================

Leaderboards and the cumulative time series used for charts.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from karmabot.api.deps import get_config, get_ledger
from karmabot.config import KarmabotConfig
from karmabot.engine.ranking import Granularity, RankType
from karmabot.services.ledger import KarmaLedger
from karmabot.services.ranking_service import rank_targets, ranked_time_series

router = APIRouter(prefix="/karma", tags=["karma"])


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------
class TargetOut(BaseModel):
    name: str
    total: int


class RankedTargetOut(TargetOut):
    rank: int


class LeaderboardOut(BaseModel):
    direction: RankType
    targets: list[RankedTargetOut]


class BucketOut(BaseModel):
    label: str
    start: date
    values: dict[str, int]


class TimeSeriesOut(BaseModel):
    direction: RankType
    granularity: Granularity
    buckets: list[BucketOut]


# ---------------------------------------------------------------------------
# GET /karma/targets/{name}
# ---------------------------------------------------------------------------
@router.get("/targets/{name}", response_model=TargetOut)
def get_target(name: str, ledger: Annotated[KarmaLedger, Depends(get_ledger)]):
    """Current total for one target (0 if it has never received karma)."""
    target = ledger.get_target(name)
    return TargetOut(name=target.name, total=target.total)


# ---------------------------------------------------------------------------
# GET /karma/leaderboard/{direction}
# ---------------------------------------------------------------------------
@router.get("/leaderboard/{direction}", response_model=LeaderboardOut)
def get_leaderboard(
    direction: RankType,
    ledger: Annotated[KarmaLedger, Depends(get_ledger)],
    n: int = Query(5, ge=1, le=100),
):
    targets = rank_targets(ledger, n, direction)
    return LeaderboardOut(
        direction=direction,
        targets=[
            RankedTargetOut(rank=i + 1, name=t.name, total=t.total)
            for i, t in enumerate(targets)
        ],
    )


# ---------------------------------------------------------------------------
# GET /karma/timeseries
# ---------------------------------------------------------------------------
@router.get("/timeseries", response_model=TimeSeriesOut)
def get_timeseries(
    ledger: Annotated[KarmaLedger, Depends(get_ledger)],
    cfg: Annotated[KarmabotConfig, Depends(get_config)],
    n: int = Query(5, ge=1, le=25),
    buckets: int | None = Query(None, ge=1, le=366),
    direction: RankType = RankType.TOP,
    granularity: Granularity | None = None,
):
    """Cumulative per-period totals for the top/bottom *n* targets.

    ``buckets`` and ``granularity`` default to the ``series_*`` config values.
    """
    granularity = granularity or cfg.series_granularity
    series = ranked_time_series(
        ledger,
        n,
        buckets or cfg.series_max_buckets,
        direction,
        granularity,
    )
    return TimeSeriesOut(
        direction=direction,
        granularity=granularity,
        buckets=[
            BucketOut(label=b.label, start=b.start, values=b.values) for b in series
        ],
    )
