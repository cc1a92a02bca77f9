"""
karmabot.database.functions — SQL Expressions for Ledger Aggregates
====================================================================

``period_start`` buckets a timestamp column into UTC calendar periods so
per-period sums can be grouped in the database::

    select(KarmaTransaction.karma_target,
           period_start(Granularity.WEEK, KarmaTransaction.karma_date).label("period"),
           func.sum(KarmaTransaction.delta))
    .group_by(KarmaTransaction.karma_target, "period")

The default compilation targets PostgreSQL (``date_trunc``).  Other dialects
register their own rendering with ``@compiles(period_start, "<dialect>")``.
"""

from __future__ import annotations

from sqlalchemy import Date
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement

from karmabot.engine.ranking import Granularity


class period_start(FunctionElement):
    """First day of the UTC day/week/month containing a timestamp column.

    Weeks start on Monday, matching ``date_trunc('week', ...)``.
    """

    type = Date()
    name = "period_start"
    # Granularity is rendered inline, not as a bound parameter.
    inherit_cache = False

    def __init__(self, granularity: Granularity | str, moment) -> None:
        self.granularity = Granularity(granularity)
        super().__init__(moment)


@compiles(period_start)
def _compile_date_trunc(element, compiler, **kw):
    return "CAST(date_trunc('%s', %s AT TIME ZONE 'UTC') AS DATE)" % (
        element.granularity.value,
        compiler.process(element.clauses, **kw),
    )
