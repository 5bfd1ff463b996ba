"""Village event repository."""

from __future__ import annotations

from sqlalchemy import select

from village.core.types import UPCOMING_STATUSES
from village.db.engine import DatabaseManager
from village.db.models import EventRow
from village.records.descriptors import EVENTS
from village.records.models import Event
from village.repositories.postgres.records import PostgresRecordRepository


class PostgresEventRepository(PostgresRecordRepository[Event]):
    """Postgres-backed event calendar."""

    def __init__(self, db: DatabaseManager) -> None:
        super().__init__(db, EVENTS)

    async def upcoming(self) -> list[Event]:
        """Events that are planned or ongoing.

        Status alone decides; a planned event dated in the past is still
        upcoming.
        """
        stmt = select(EventRow).where(
            EventRow.status.in_(sorted(status.value for status in UPCOMING_STATUSES))
        )
        return await self._fetch(stmt)
