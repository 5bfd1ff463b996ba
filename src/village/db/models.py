"""SQLAlchemy ORM models for all persistent tables.

Tables are independent: categories shared between budgets and finance
transactions are plain text, with no foreign keys.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from village.db.base import Base
from village.db.types import DecimalText


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


# ---------------------------------------------------------------------------
# Residents
# ---------------------------------------------------------------------------


class ResidentRow(Base):
    __tablename__ = "residents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text)
    address: Mapped[str] = mapped_column(Text)
    job: Mapped[str] = mapped_column(Text)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)


# ---------------------------------------------------------------------------
# Finance
# ---------------------------------------------------------------------------


class FinanceTransactionRow(Base):
    __tablename__ = "village_finance"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(String(16))
    description: Mapped[str] = mapped_column(Text)
    amount: Mapped[Decimal] = mapped_column(DecimalText(15))
    category: Mapped[str] = mapped_column(Text)
    date: Mapped[dt.date] = mapped_column(Date)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("ix_village_finance_type", "type"),
    )


class BudgetRow(Base):
    __tablename__ = "village_budget"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category: Mapped[str] = mapped_column(Text)
    allocated_amount: Mapped[Decimal] = mapped_column(DecimalText(15))
    used_amount: Mapped[Decimal] = mapped_column(DecimalText(15), default=Decimal("0"))
    year: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("ix_village_budget_year", "year"),
    )


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class EventRow(Base):
    __tablename__ = "village_events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str] = mapped_column(Text)
    event_date: Mapped[dt.date] = mapped_column(Date)
    organizer: Mapped[str] = mapped_column(Text)
    participant_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    budget: Mapped[Decimal | None] = mapped_column(DecimalText(15), nullable=True)
    status: Mapped[str] = mapped_column(String(16), default="planned")
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("ix_village_events_status", "status"),
    )


# ---------------------------------------------------------------------------
# Assets
# ---------------------------------------------------------------------------


class AssetRow(Base):
    __tablename__ = "village_assets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(Text)
    value: Mapped[Decimal] = mapped_column(DecimalText(15))
    condition: Mapped[str] = mapped_column(String(16))
    location: Mapped[str] = mapped_column(Text)
    purchase_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("ix_village_assets_category", "category"),
    )


# ---------------------------------------------------------------------------
# Public services
# ---------------------------------------------------------------------------


class PublicServiceRow(Base):
    __tablename__ = "public_services"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text)
    description: Mapped[str] = mapped_column(Text)
    requirements: Mapped[str | None] = mapped_column(Text, nullable=True)
    process_time: Mapped[str | None] = mapped_column(Text, nullable=True)
    cost: Mapped[Decimal | None] = mapped_column(DecimalText(10), nullable=True)
    contact_person: Mapped[str | None] = mapped_column(Text, nullable=True)
    office_hours: Mapped[str | None] = mapped_column(Text, nullable=True)
    # 1 = active, 0 = inactive
    is_active: Mapped[int] = mapped_column(Integer, default=1)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
