"""Village budget repository."""

from __future__ import annotations

from village.db.engine import DatabaseManager
from village.records.descriptors import BUDGETS
from village.records.models import Budget
from village.repositories.postgres.records import PostgresRecordRepository


class PostgresBudgetRepository(PostgresRecordRepository[Budget]):
    """Postgres-backed budget allocations."""

    def __init__(self, db: DatabaseManager) -> None:
        super().__init__(db, BUDGETS)

    async def by_year(self, year: int) -> list[Budget]:
        """Budgets whose year equals *year*."""
        return await self.list_where(year=year)
