"""Generic SQLAlchemy record repository.

One implementation serves every entity; the differences between entities
live in their :class:`~village.records.descriptors.EntityDescriptor`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Generic

from pydantic import BaseModel
from sqlalchemy import Select, delete, select

from village.core.types import RecordNotFoundError
from village.db.engine import DatabaseManager
from village.records.descriptors import EntityDescriptor, RecordT
from village.records.merge import apply_changes, column_values, input_values

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PostgresRecordRepository(Generic[RecordT]):
    """Create, read, update and delete rows of one entity table."""

    def __init__(self, db: DatabaseManager, entity: EntityDescriptor[RecordT]) -> None:
        self._db = db
        self._entity = entity

    @property
    def entity(self) -> EntityDescriptor[RecordT]:
        return self._entity

    async def create(self, data: BaseModel | Mapping[str, Any]) -> RecordT:
        """Insert a new row and return it as stored.

        The id and timestamps are assigned here; *data* is expected to be
        validated already.
        """
        values = column_values(self._entity, input_values(data))
        now = _utcnow()
        values["created_at"] = now
        if self._entity.tracks_updated_at:
            values["updated_at"] = now

        row = self._entity.row(**values)
        async with self._db.session() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
            record = self._to_record(row)
        logger.info("Created %s %s", self._entity.name, record.id)
        return record

    async def list_all(self) -> list[RecordT]:
        """Return every row in insertion order."""
        return await self._fetch(select(self._entity.row))

    async def get(self, record_id: int) -> RecordT | None:
        async with self._db.session() as db:
            row = await db.get(self._entity.row, record_id)
            if row is None:
                return None
            return self._to_record(row)

    async def update(
        self, record_id: int, changes: BaseModel | Mapping[str, Any]
    ) -> RecordT:
        """Apply a partial update and return the merged record.

        Raises:
            RecordNotFoundError: If no row has *record_id*.
        """
        async with self._db.session() as db:
            row = await db.get(self._entity.row, record_id)
            if row is None:
                raise RecordNotFoundError(self._entity.name, record_id)
            written = apply_changes(self._entity, row, changes, now=_utcnow())
            await db.commit()
            await db.refresh(row)
            record = self._to_record(row)
        logger.info(
            "Updated %s %s (%s)",
            self._entity.name,
            record_id,
            ", ".join(sorted(written)) or "timestamp only",
        )
        return record

    async def delete(self, record_id: int) -> bool:
        """Hard-delete a row. Returns whether a row was removed."""
        row_cls = self._entity.row
        async with self._db.session() as db:
            result = await db.execute(delete(row_cls).where(row_cls.id == record_id))
            await db.commit()
        removed = result.rowcount > 0
        if removed:
            logger.info("Deleted %s %s", self._entity.name, record_id)
        return removed

    async def list_where(self, **criteria: Any) -> list[RecordT]:
        """Return rows whose columns equal the given values, in insertion order."""
        row_cls = self._entity.row
        stmt = select(row_cls).where(
            *(getattr(row_cls, name) == value for name, value in criteria.items())
        )
        return await self._fetch(stmt)

    async def _fetch(self, stmt: Select) -> list[RecordT]:
        async with self._db.session() as db:
            result = await db.execute(stmt.order_by(self._entity.row.id))
            return [self._to_record(r) for r in result.scalars().all()]

    def _to_record(self, row: Any) -> RecordT:
        return self._entity.record.model_validate(row)
