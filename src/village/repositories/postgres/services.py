"""Public service repository."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import update

from village.core.types import RecordNotFoundError
from village.db.engine import DatabaseManager
from village.db.models import PublicServiceRow
from village.records.descriptors import PUBLIC_SERVICES
from village.records.models import PublicService
from village.repositories.postgres.records import PostgresRecordRepository

logger = logging.getLogger(__name__)


class PostgresPublicServiceRepository(PostgresRecordRepository[PublicService]):
    """Postgres-backed catalogue of public services."""

    def __init__(self, db: DatabaseManager) -> None:
        super().__init__(db, PUBLIC_SERVICES)

    async def list_active(self) -> list[PublicService]:
        return await self.list_where(is_active=1)

    async def toggle_active(self, record_id: int) -> PublicService:
        """Flip ``is_active`` between 1 and 0 and return the updated service.

        The flip is a single conditional UPDATE, so concurrent toggles on
        the same row cannot lose each other's write.

        Raises:
            RecordNotFoundError: If no service has *record_id*.
        """
        stmt = (
            update(PublicServiceRow)
            .where(PublicServiceRow.id == record_id)
            .values(
                is_active=1 - PublicServiceRow.is_active,
                updated_at=datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session=False)
        )
        async with self._db.session() as db:
            result = await db.execute(stmt)
            await db.commit()
            if result.rowcount == 0:
                raise RecordNotFoundError(self._entity.name, record_id)
            row = await db.get(PublicServiceRow, record_id)
            record = self._to_record(row)
        logger.info(
            "Public service %s is now %s",
            record_id,
            "active" if record.is_active else "inactive",
        )
        return record
