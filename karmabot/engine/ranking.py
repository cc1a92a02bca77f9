"""
karmabot.engine.ranking — Ranking & Cumulative Bucket Pipeline
===============================================================

Pure transforms over ledger aggregates.  No Discord I/O, no DB I/O.

Two modes:

* **Flat ranking** — ``(name, total)`` rows → top/bottom ``n`` targets.
* **Cumulative time series** — ``(name, period_start, total)`` rows →
  a gap-filled, contiguous run of periods where each ranked target's value
  is its running total up to and including that period.

The series is computed in a single forward fold over a generated sequence
of period keys::

    periods:  2026-01-05  2026-01-12  2026-01-19  2026-01-26
    deltas:   Ken +3      (none)      Ken -1      Ken +2
    values:   Ken 3       Ken 3       Ken 2       Ken 4
"""

from __future__ import annotations

import enum
from collections import defaultdict
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta

__all__ = [
    "Bucket",
    "Granularity",
    "KarmaTarget",
    "RankType",
    "advance_period",
    "build_ranked_buckets",
    "iter_periods",
    "period_label",
    "rank_totals",
    "truncate_to_period",
]


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------
class RankType(enum.StrEnum):
    """Leaderboard direction."""
    TOP = "top"
    BOTTOM = "bottom"


class Granularity(enum.StrEnum):
    """Calendar period used to bucket ledger entries."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True, slots=True)
class KarmaTarget:
    """A target and its total karma, recomputed on every read."""

    name: str
    total: int


@dataclass(slots=True)
class Bucket:
    """One period of a cumulative series."""

    label: str
    start: date
    values: dict[str, int] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Calendar helpers
# ---------------------------------------------------------------------------
def truncate_to_period(moment: datetime | date, granularity: Granularity) -> date:
    """Return the first day of the period containing *moment*.

    Aware datetimes are converted to UTC first; naive ones are taken as UTC.
    Weeks start on Monday.
    """
    if isinstance(moment, datetime):
        if moment.tzinfo is not None:
            moment = moment.astimezone(UTC)
        day = moment.date()
    else:
        day = moment

    if granularity == Granularity.DAY:
        return day
    if granularity == Granularity.WEEK:
        return day - timedelta(days=day.weekday())
    return day.replace(day=1)


def advance_period(start: date, granularity: Granularity) -> date:
    """Return the start of the period following the one starting at *start*."""
    if granularity == Granularity.DAY:
        return start + timedelta(days=1)
    if granularity == Granularity.WEEK:
        return start + timedelta(weeks=1)
    if start.month == 12:
        return date(start.year + 1, 1, 1)
    return date(start.year, start.month + 1, 1)


def iter_periods(first: date, last: date, granularity: Granularity) -> Iterator[date]:
    """Yield every period start from *first* through *last* inclusive."""
    cursor = first
    while cursor <= last:
        yield cursor
        cursor = advance_period(cursor, granularity)


def period_label(start: date, granularity: Granularity) -> str:
    """``2026-01`` for months, ISO dates for days and weeks."""
    if granularity == Granularity.MONTH:
        return start.strftime("%Y-%m")
    return start.isoformat()


# ---------------------------------------------------------------------------
# Flat ranking
# ---------------------------------------------------------------------------
def rank_totals(
    rows: Iterable[tuple[str, int]],
    n: int,
    direction: RankType = RankType.TOP,
) -> list[KarmaTarget]:
    """Order ``(name, total)`` rows and keep the first *n*.

    TOP sorts by total descending, BOTTOM ascending.  Ties are broken by
    target name so results are deterministic.
    """
    if n <= 0:
        return []
    sign = -1 if direction == RankType.TOP else 1
    ordered = sorted(rows, key=lambda row: (sign * row[1], row[0]))
    return [KarmaTarget(name, int(total)) for name, total in ordered[:n]]


# ---------------------------------------------------------------------------
# Cumulative time series
# ---------------------------------------------------------------------------
def build_ranked_buckets(
    rows: Iterable[tuple[str, date, int]],
    n: int,
    max_buckets: int,
    direction: RankType,
    granularity: Granularity,
    now: datetime | None = None,
) -> list[Bucket]:
    """Fold per-(target, period) sums into a cumulative, gap-filled series.

    Parameters
    ----------
    rows:
        ``(name, period_start, total)`` tuples, one per target and period
        with activity.  Period starts must already be truncated to
        *granularity*.
    n:
        Number of targets to chart, chosen by their overall totals.
    max_buckets:
        Only the most recent *max_buckets* periods are returned.
    now:
        End of the timeline.  Defaults to the current UTC time.
    """
    deltas: dict[tuple[date, str], int] = defaultdict(int)
    overall: dict[str, int] = defaultdict(int)
    for name, start, total in rows:
        deltas[(start, name)] += total
        overall[name] += total

    if not overall or max_buckets <= 0:
        return []

    ranked = [t.name for t in rank_totals(overall.items(), n, direction)]

    observed = {start for start, _ in deltas}
    first = min(observed)
    last = max(
        truncate_to_period(now or datetime.now(UTC), granularity),
        max(observed),
    )

    running = dict.fromkeys(ranked, 0)
    buckets: list[Bucket] = []
    for start in iter_periods(first, last, granularity):
        for name in ranked:
            running[name] += deltas.get((start, name), 0)
        buckets.append(Bucket(period_label(start, granularity), start, dict(running)))

    return buckets[-max_buckets:]
