"""Tests for PostgresPublicServiceRepository."""

from __future__ import annotations

import asyncio
from decimal import Decimal

import pytest

from village.core.types import RecordNotFoundError
from village.records.models import PublicServiceCreate, PublicServiceUpdate
from village.repositories.postgres.services import PostgresPublicServiceRepository


@pytest.fixture
def repo(db):
    return PostgresPublicServiceRepository(db)


def _service(name: str = "Surat Keterangan Domisili", **kwargs) -> PublicServiceCreate:
    return PublicServiceCreate(name=name, description="Layanan administrasi", **kwargs)


async def test_create_defaults_to_active(repo):
    service = await repo.create(_service())
    assert service.is_active is True
    assert service.cost is None
    assert service.model_dump(mode="json")["is_active"] == 1


async def test_create_inactive_with_cost(repo):
    service = await repo.create(_service(cost=Decimal("15000"), is_active=False))
    assert service.is_active is False
    assert service.cost == Decimal("15000.00")


async def test_toggle_flips_and_restores(repo):
    service = await repo.create(_service(office_hours="08:00-15:00"))
    await asyncio.sleep(0.01)

    off = await repo.toggle_active(service.id)
    assert off.is_active is False
    assert off.updated_at > service.updated_at

    on = await repo.toggle_active(service.id)
    assert on.is_active is True
    assert on.model_dump(exclude={"updated_at"}) == service.model_dump(
        exclude={"updated_at"}
    )


async def test_toggle_missing_raises(repo):
    with pytest.raises(RecordNotFoundError):
        await repo.toggle_active(404)
    assert await repo.list_all() == []


async def test_list_active(repo):
    first = await repo.create(_service("KTP"))
    await repo.create(_service("KK", is_active=False))
    third = await repo.create(_service("Akta"))

    assert [s.id for s in await repo.list_active()] == [first.id, third.id]

    await repo.toggle_active(first.id)
    assert [s.id for s in await repo.list_active()] == [third.id]


async def test_update_is_active_flag(repo):
    service = await repo.create(_service())
    updated = await repo.update(service.id, PublicServiceUpdate(is_active=False))
    assert updated.is_active is False
    assert await repo.list_active() == []
