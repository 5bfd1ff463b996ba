"""Record models for residents, finance, budgets, events, assets and services.

Each entity has three shapes:

* ``<Entity>Create``: validated input for a new record.
* ``<Entity>Update``: sparse change set; every field optional. Which fields
  the caller actually sent is tracked by pydantic (``model_fields_set``), so
  an explicit ``null`` is distinguishable from an absent field.
* ``<Entity>``: the stored record, including id and timestamps.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
)
from pydantic.alias_generators import to_camel

from village.core.numeric import Money
from village.core.types import AssetCondition, EventStatus, FinanceType


def _ensure_utc(value: dt.datetime) -> dt.datetime:
    # SQLite hands timestamps back without tzinfo; they were written as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


UTCDatetime = Annotated[dt.datetime, AfterValidator(_ensure_utc)]

ActiveFlag = Annotated[
    bool,
    PlainSerializer(int, return_type=int, when_used="json"),
]
"""Boolean that travels as 0/1 in JSON, matching the storage column."""

RequiredText = Annotated[str, Field(min_length=1)]

PositiveMoney = Annotated[Money, Field(gt=0, max_digits=15, decimal_places=2)]
NonNegativeMoney = Annotated[Money, Field(ge=0, max_digits=15, decimal_places=2)]
ServiceCost = Annotated[Money, Field(ge=0, max_digits=10, decimal_places=2)]


class RecordModel(BaseModel):
    """Base for stored records read from ORM rows."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: UTCDatetime


class TrackedRecordModel(RecordModel):
    """Stored record that also tracks its last modification."""

    updated_at: UTCDatetime


# ---------------------------------------------------------------------------
# Residents
# ---------------------------------------------------------------------------


class ResidentCreate(BaseModel):
    name: RequiredText
    address: RequiredText
    job: RequiredText


class ResidentUpdate(BaseModel):
    name: RequiredText | None = None
    address: RequiredText | None = None
    job: RequiredText | None = None


class Resident(TrackedRecordModel):
    """A registered village resident."""

    name: str
    address: str
    job: str


# ---------------------------------------------------------------------------
# Finance transactions
# ---------------------------------------------------------------------------


class FinanceTransactionCreate(BaseModel):
    type: FinanceType
    description: RequiredText
    amount: PositiveMoney
    category: RequiredText
    date: dt.date


class FinanceTransactionUpdate(BaseModel):
    type: FinanceType | None = None
    description: RequiredText | None = None
    amount: PositiveMoney | None = None
    category: RequiredText | None = None
    date: dt.date | None = None


class FinanceTransaction(RecordModel):
    """Income or expense entry in the village ledger.

    Ledger entries are never re-stamped, so there is no ``updated_at``.
    """

    type: FinanceType
    description: str
    amount: Money
    category: str
    date: dt.date


class FinanceSummary(BaseModel):
    """Ledger totals computed from the current transaction rows."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_income: Money = Decimal("0")
    total_expense: Money = Decimal("0")
    balance: Money = Decimal("0")


# ---------------------------------------------------------------------------
# Budgets
# ---------------------------------------------------------------------------


class BudgetCreate(BaseModel):
    category: RequiredText
    allocated_amount: PositiveMoney
    year: int = Field(ge=2000)


class BudgetUpdate(BaseModel):
    category: RequiredText | None = None
    allocated_amount: PositiveMoney | None = None
    used_amount: NonNegativeMoney | None = None
    year: int | None = Field(default=None, ge=2000)


class Budget(TrackedRecordModel):
    """Yearly allocation for a spending category.

    ``used_amount`` starts at zero and only changes through explicit updates;
    it is not derived from finance transactions.
    """

    category: str
    allocated_amount: Money
    used_amount: Money
    year: int


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class EventCreate(BaseModel):
    name: RequiredText
    description: str | None = None
    location: RequiredText
    event_date: dt.date
    organizer: RequiredText
    participant_count: int | None = Field(default=None, ge=0)
    budget: PositiveMoney | None = None
    status: EventStatus = EventStatus.PLANNED


class EventUpdate(BaseModel):
    name: RequiredText | None = None
    description: str | None = None
    location: RequiredText | None = None
    event_date: dt.date | None = None
    organizer: RequiredText | None = None
    participant_count: int | None = Field(default=None, ge=0)
    budget: PositiveMoney | None = None
    status: EventStatus | None = None


class Event(TrackedRecordModel):
    """A village event or activity."""

    name: str
    description: str | None
    location: str
    event_date: dt.date
    organizer: str
    participant_count: int | None
    budget: Money | None
    status: EventStatus


# ---------------------------------------------------------------------------
# Assets
# ---------------------------------------------------------------------------


class AssetCreate(BaseModel):
    name: RequiredText
    description: str | None = None
    category: RequiredText
    value: PositiveMoney
    condition: AssetCondition
    location: RequiredText
    purchase_date: dt.date | None = None


class AssetUpdate(BaseModel):
    name: RequiredText | None = None
    description: str | None = None
    category: RequiredText | None = None
    value: PositiveMoney | None = None
    condition: AssetCondition | None = None
    location: RequiredText | None = None
    purchase_date: dt.date | None = None


class Asset(TrackedRecordModel):
    """Village-owned property."""

    name: str
    description: str | None
    category: str
    value: Money
    condition: AssetCondition
    location: str
    purchase_date: dt.date | None


class AssetSummary(BaseModel):
    """Asset totals computed from the current asset rows."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_value: Money = Decimal("0")
    total_count: int = 0
    by_condition: dict[AssetCondition, int] = Field(
        default_factory=lambda: {condition: 0 for condition in AssetCondition}
    )


# ---------------------------------------------------------------------------
# Public services
# ---------------------------------------------------------------------------


class PublicServiceCreate(BaseModel):
    name: RequiredText
    description: RequiredText
    requirements: str | None = None
    process_time: str | None = None
    cost: ServiceCost | None = None
    contact_person: str | None = None
    office_hours: str | None = None
    is_active: bool = True


class PublicServiceUpdate(BaseModel):
    name: RequiredText | None = None
    description: RequiredText | None = None
    requirements: str | None = None
    process_time: str | None = None
    cost: ServiceCost | None = None
    contact_person: str | None = None
    office_hours: str | None = None
    is_active: bool | None = None


class PublicService(TrackedRecordModel):
    """Administrative service offered at the village office."""

    name: str
    description: str
    requirements: str | None
    process_time: str | None
    cost: Money | None
    contact_person: str | None
    office_hours: str | None
    is_active: ActiveFlag
