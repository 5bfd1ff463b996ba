"""Resident repository."""

from __future__ import annotations

from village.db.engine import DatabaseManager
from village.records.descriptors import RESIDENTS
from village.records.models import Resident
from village.repositories.postgres.records import PostgresRecordRepository


class PostgresResidentRepository(PostgresRecordRepository[Resident]):
    """Postgres-backed resident registry."""

    def __init__(self, db: DatabaseManager) -> None:
        super().__init__(db, RESIDENTS)
