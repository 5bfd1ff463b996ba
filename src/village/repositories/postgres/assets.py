"""Village asset repository and asset summary."""

from __future__ import annotations

from sqlalchemy import func, select

from village.core import numeric
from village.core.types import AssetCondition
from village.db.engine import DatabaseManager
from village.db.models import AssetRow
from village.db.types import minor_units
from village.records.descriptors import ASSETS
from village.records.models import Asset, AssetSummary
from village.repositories.postgres.records import PostgresRecordRepository


class PostgresAssetRepository(PostgresRecordRepository[Asset]):
    """Postgres-backed asset inventory."""

    def __init__(self, db: DatabaseManager) -> None:
        super().__init__(db, ASSETS)

    async def by_category(self, category: str) -> list[Asset]:
        """Assets whose category matches exactly (case-sensitive)."""
        return await self.list_where(category=category)

    async def summary(self) -> AssetSummary:
        """Total value, count, and count per condition over all assets.

        Every condition appears in ``by_condition``, with 0 when unused.
        """
        totals_stmt = select(
            func.count(AssetRow.id),
            func.sum(minor_units(AssetRow.value)),
        )
        condition_stmt = select(AssetRow.condition, func.count(AssetRow.id)).group_by(
            AssetRow.condition
        )

        by_condition = {condition: 0 for condition in AssetCondition}
        async with self._db.session() as db:
            total_count, value_cents = (await db.execute(totals_stmt)).one()
            for condition, count in (await db.execute(condition_stmt)).all():
                by_condition[AssetCondition(condition)] = count

        return AssetSummary(
            total_value=numeric.from_minor_units(value_cents),
            total_count=total_count,
            by_condition=by_condition,
        )
