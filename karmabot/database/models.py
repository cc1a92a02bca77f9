"""
karmabot.database.models — SQLAlchemy 2.0 Data Models
======================================================

Tables:
- karma_transactions — Append-only karma ledger (one row per point delta)

Totals, rankings and time series are never stored; they are recomputed from
this table on every read.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from karmabot.constants import MAX_TARGET_LENGTH


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------
class Base(DeclarativeBase):
    """Shared base for all Karmabot ORM models."""


# ---------------------------------------------------------------------------
# KarmaTransaction — append-only ledger
# ---------------------------------------------------------------------------
class KarmaTransaction(Base):
    """A single karma delta awarded to a target by an actor.

    Rows are inserted exactly once and never updated or deleted.
    """
    __tablename__ = "karma_transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    karma_target: Mapped[str] = mapped_column(String(MAX_TARGET_LENGTH), nullable=False)
    delta: Mapped[int] = mapped_column(Integer, nullable=False)
    actor: Mapped[str] = mapped_column(String(100), nullable=False)
    karma_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        Index("ix_karma_transactions_target", "karma_target"),
        Index("ix_karma_transactions_date", "karma_date"),
    )

    def __repr__(self) -> str:
        return (
            f"<KarmaTransaction id={self.id} target={self.karma_target!r} "
            f"delta={self.delta:+d} actor={self.actor!r}>"
        )
