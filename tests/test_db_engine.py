"""Tests for DatabaseManager and the ORM tables with SQLite async."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import select, text
from sqlalchemy.exc import StatementError

from village.core.config import DatabaseConfig
from village.db.base import Base
from village.db.engine import DatabaseManager
from village.db.models import FinanceTransactionRow, ResidentRow


async def test_engine_creation(db):
    """DatabaseManager should create an engine."""
    assert db.engine is not None


async def test_all_tables_registered(db):
    assert set(Base.metadata.tables) == {
        "residents",
        "village_finance",
        "village_budget",
        "village_events",
        "village_assets",
        "public_services",
    }


async def test_create_all_is_idempotent(db):
    await db.create_all()
    async with db.session() as session:
        session.add(ResidentRow(name="Siti", address="RT 02", job="Pedagang"))
        await session.commit()
    await db.create_all()
    async with db.session() as session:
        result = await session.execute(select(ResidentRow))
        assert len(result.scalars().all()) == 1


async def test_money_stored_as_fixed_point_text(db):
    """Amounts are written as two-decimal text and read back as Decimal."""
    async with db.session() as session:
        row = FinanceTransactionRow(
            type="income",
            description="Dana desa",
            amount=Decimal("150000.5"),
            category="Transfer",
            date=date(2024, 1, 15),
        )
        session.add(row)
        await session.commit()

    async with db.session() as session:
        raw = (await session.execute(text("SELECT amount FROM village_finance"))).scalar_one()
        assert raw == "150000.50"
        found = (await session.execute(select(FinanceTransactionRow))).scalar_one()
        assert found.amount == Decimal("150000.50")


async def test_money_over_precision_rejected(db):
    async with db.session() as session:
        session.add(
            FinanceTransactionRow(
                type="income",
                description="Terlalu besar",
                amount=Decimal("12345678901234.56"),
                category="Lainnya",
                date=date(2024, 1, 1),
            )
        )
        with pytest.raises(StatementError):
            await session.commit()


async def test_close():
    """DatabaseManager.close() should dispose the engine without error."""
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    await manager.close()


async def test_from_config():
    config = DatabaseConfig(database_url="sqlite+aiosqlite:///:memory:", echo=True)
    manager = DatabaseManager.from_config(config)
    assert manager.engine.echo is True
    await manager.create_all()
    async with manager.session() as session:
        assert (await session.execute(text("SELECT 1"))).scalar_one() == 1
    await manager.close()
