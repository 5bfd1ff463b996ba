"""SQLAlchemy-backed record repositories."""

from __future__ import annotations

from village.repositories.postgres.assets import PostgresAssetRepository
from village.repositories.postgres.budgets import PostgresBudgetRepository
from village.repositories.postgres.events import PostgresEventRepository
from village.repositories.postgres.finance import PostgresFinanceRepository
from village.repositories.postgres.records import PostgresRecordRepository
from village.repositories.postgres.residents import PostgresResidentRepository
from village.repositories.postgres.services import PostgresPublicServiceRepository

__all__ = [
    "PostgresAssetRepository",
    "PostgresBudgetRepository",
    "PostgresEventRepository",
    "PostgresFinanceRepository",
    "PostgresPublicServiceRepository",
    "PostgresRecordRepository",
    "PostgresResidentRepository",
]
