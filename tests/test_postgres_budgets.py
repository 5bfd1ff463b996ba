"""Tests for PostgresBudgetRepository."""

from __future__ import annotations

from decimal import Decimal

import pytest

from village.records.models import BudgetCreate, BudgetUpdate
from village.repositories.postgres.budgets import PostgresBudgetRepository


@pytest.fixture
def repo(db):
    return PostgresBudgetRepository(db)


async def test_create_starts_with_zero_used(repo):
    budget = await repo.create(
        BudgetCreate(category="Infrastruktur", allocated_amount=50000000, year=2024)
    )
    assert budget.allocated_amount == Decimal("50000000")
    assert budget.used_amount == Decimal("0")
    assert budget.year == 2024


async def test_update_used_amount_only(repo):
    budget = await repo.create(
        BudgetCreate(category="Infrastruktur", allocated_amount=50000000, year=2024)
    )

    updated = await repo.update(budget.id, BudgetUpdate(used_amount=20000000))

    assert updated.used_amount == Decimal("20000000")
    assert updated.allocated_amount == Decimal("50000000")
    assert updated.category == "Infrastruktur"
    assert updated.year == 2024


async def test_by_year(repo):
    await repo.create(BudgetCreate(category="Pendidikan", allocated_amount=1000, year=2023))
    await repo.create(BudgetCreate(category="Kesehatan", allocated_amount=2000, year=2024))
    await repo.create(BudgetCreate(category="Jalan", allocated_amount=3000, year=2024))

    budgets = await repo.by_year(2024)

    assert [b.category for b in budgets] == ["Kesehatan", "Jalan"]
    assert await repo.by_year(2030) == []


async def test_by_year_sees_updated_year(repo):
    budget = await repo.create(
        BudgetCreate(category="Pendidikan", allocated_amount=1000, year=2023)
    )
    await repo.update(budget.id, BudgetUpdate(year=2025))
    assert await repo.by_year(2023) == []
    assert [b.id for b in await repo.by_year(2025)] == [budget.id]
