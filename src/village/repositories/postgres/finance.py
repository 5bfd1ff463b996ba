"""Village finance repository and ledger summary."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import func, select

from village.core import numeric
from village.core.types import FinanceType
from village.db.engine import DatabaseManager
from village.db.models import FinanceTransactionRow
from village.db.types import minor_units
from village.records.descriptors import FINANCE
from village.records.models import FinanceSummary, FinanceTransaction
from village.repositories.postgres.records import PostgresRecordRepository


class PostgresFinanceRepository(PostgresRecordRepository[FinanceTransaction]):
    """Postgres-backed income and expense ledger."""

    def __init__(self, db: DatabaseManager) -> None:
        super().__init__(db, FINANCE)

    async def delete(self, record_id: int) -> bool:
        """Delete a ledger entry.

        Always reports success, whether or not the id existed. Existing
        clients treat the finance delete as fire-and-forget.
        """
        await super().delete(record_id)
        return True

    async def summary(self) -> FinanceSummary:
        """Total income, total expense and balance over all ledger rows."""
        row = FinanceTransactionRow
        stmt = select(row.type, func.sum(minor_units(row.amount))).group_by(row.type)

        totals: dict[str, Decimal] = {}
        async with self._db.session() as db:
            result = await db.execute(stmt)
            for tx_type, total in result.all():
                totals[tx_type] = numeric.from_minor_units(total)

        income = totals.get(FinanceType.INCOME.value) or Decimal("0")
        expense = totals.get(FinanceType.EXPENSE.value) or Decimal("0")
        return FinanceSummary(
            total_income=income,
            total_expense=expense,
            balance=income - expense,
        )
