"""Entity descriptors: the per-entity facts the generic record store needs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from village.db.base import Base
from village.db.models import (
    AssetRow,
    BudgetRow,
    EventRow,
    FinanceTransactionRow,
    PublicServiceRow,
    ResidentRow,
)
from village.records.models import (
    Asset,
    Budget,
    Event,
    FinanceTransaction,
    PublicService,
    RecordModel,
    Resident,
)

RecordT = TypeVar("RecordT", bound=RecordModel)


@dataclass(frozen=True)
class EntityDescriptor(Generic[RecordT]):
    """Describes one entity table and how its values are stored.

    Attributes:
        name: Human-readable entity name used in errors and logs.
        row: ORM row class.
        record: Pydantic record model built from rows.
        fields: Writable fields (everything but id and timestamps).
        monetary: Fields stored as fixed-point decimal text.
        nullable: Fields that accept an explicit ``None``.
        flags: Boolean fields stored as 0/1 integers.
        tracks_updated_at: Whether the row carries ``updated_at``.
    """

    name: str
    row: type[Base]
    record: type[RecordT]
    fields: tuple[str, ...]
    monetary: frozenset[str] = field(default_factory=frozenset)
    nullable: frozenset[str] = field(default_factory=frozenset)
    flags: frozenset[str] = field(default_factory=frozenset)
    tracks_updated_at: bool = True


RESIDENTS = EntityDescriptor(
    name="Resident",
    row=ResidentRow,
    record=Resident,
    fields=("name", "address", "job"),
)

FINANCE = EntityDescriptor(
    name="Village finance",
    row=FinanceTransactionRow,
    record=FinanceTransaction,
    fields=("type", "description", "amount", "category", "date"),
    monetary=frozenset({"amount"}),
    tracks_updated_at=False,
)

BUDGETS = EntityDescriptor(
    name="Village budget",
    row=BudgetRow,
    record=Budget,
    fields=("category", "allocated_amount", "used_amount", "year"),
    monetary=frozenset({"allocated_amount", "used_amount"}),
)

EVENTS = EntityDescriptor(
    name="Village event",
    row=EventRow,
    record=Event,
    fields=(
        "name",
        "description",
        "location",
        "event_date",
        "organizer",
        "participant_count",
        "budget",
        "status",
    ),
    monetary=frozenset({"budget"}),
    nullable=frozenset({"description", "participant_count", "budget"}),
)

ASSETS = EntityDescriptor(
    name="Village asset",
    row=AssetRow,
    record=Asset,
    fields=(
        "name",
        "description",
        "category",
        "value",
        "condition",
        "location",
        "purchase_date",
    ),
    monetary=frozenset({"value"}),
    nullable=frozenset({"description", "purchase_date"}),
)

PUBLIC_SERVICES = EntityDescriptor(
    name="Public service",
    row=PublicServiceRow,
    record=PublicService,
    fields=(
        "name",
        "description",
        "requirements",
        "process_time",
        "cost",
        "contact_person",
        "office_hours",
        "is_active",
    ),
    monetary=frozenset({"cost"}),
    nullable=frozenset(
        {"requirements", "process_time", "cost", "contact_person", "office_hours"}
    ),
    flags=frozenset({"is_active"}),
)

ALL_ENTITIES: tuple[EntityDescriptor, ...] = (
    RESIDENTS,
    FINANCE,
    BUDGETS,
    EVENTS,
    ASSETS,
    PUBLIC_SERVICES,
)
