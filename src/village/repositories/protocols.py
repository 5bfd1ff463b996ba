"""Protocol definitions for the record repository interfaces.

The HTTP layer depends on these protocols rather than on the SQLAlchemy
classes, so alternative stores only need the same async methods.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

from village.records.models import (
    Asset,
    AssetSummary,
    Budget,
    Event,
    FinanceSummary,
    FinanceTransaction,
    PublicService,
)

RecordT = TypeVar("RecordT", covariant=True)


@runtime_checkable
class RecordRepository(Protocol[RecordT]):
    """Protocol shared by every entity store."""

    async def create(self, data: BaseModel | Mapping[str, Any]) -> RecordT: ...

    async def list_all(self) -> list[RecordT]: ...

    async def get(self, record_id: int) -> RecordT | None: ...

    async def update(
        self, record_id: int, changes: BaseModel | Mapping[str, Any]
    ) -> RecordT: ...

    async def delete(self, record_id: int) -> bool: ...


@runtime_checkable
class FinanceRepository(RecordRepository[FinanceTransaction], Protocol):
    """Ledger store with its summary view."""

    async def summary(self) -> FinanceSummary: ...


@runtime_checkable
class BudgetRepository(RecordRepository[Budget], Protocol):
    """Budget store with the year filter."""

    async def by_year(self, year: int) -> list[Budget]: ...


@runtime_checkable
class EventRepository(RecordRepository[Event], Protocol):
    """Event store with the upcoming filter."""

    async def upcoming(self) -> list[Event]: ...


@runtime_checkable
class AssetRepository(RecordRepository[Asset], Protocol):
    """Asset store with the category filter and summary view."""

    async def by_category(self, category: str) -> list[Asset]: ...

    async def summary(self) -> AssetSummary: ...


@runtime_checkable
class PublicServiceRepository(RecordRepository[PublicService], Protocol):
    """Public service store with activity helpers."""

    async def list_active(self) -> list[PublicService]: ...

    async def toggle_active(self, record_id: int) -> PublicService: ...
