"""Core type definitions shared across all village modules."""

from __future__ import annotations

from enum import StrEnum


class FinanceType(StrEnum):
    """Direction of a finance transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class EventStatus(StrEnum):
    """Event status. Any status may move to any other."""

    PLANNED = "planned"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class AssetCondition(StrEnum):
    """Physical condition of a village asset."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


UPCOMING_STATUSES: frozenset[EventStatus] = frozenset(
    {EventStatus.PLANNED, EventStatus.ONGOING}
)


class RecordNotFoundError(KeyError):
    """Raised when a mutation targets a record id that does not exist."""

    def __init__(self, entity: str, record_id: int) -> None:
        super().__init__(f"{entity} with id {record_id} not found")
        self.entity = entity
        self.record_id = record_id

    def __str__(self) -> str:
        return self.args[0]
