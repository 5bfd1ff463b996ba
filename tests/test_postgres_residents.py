"""Tests for the generic record store, exercised through residents."""

from __future__ import annotations

import asyncio

import pytest

from village.core.types import RecordNotFoundError
from village.records.models import Resident, ResidentCreate, ResidentUpdate
from village.repositories.postgres.residents import PostgresResidentRepository

from tests.conftest import assert_recent


@pytest.fixture
def repo(db):
    return PostgresResidentRepository(db)


async def test_create_assigns_id_and_timestamps(repo):
    record = await repo.create(ResidentCreate(name="Budi", address="RT 01/RW 02", job="Petani"))
    assert isinstance(record, Resident)
    assert record.id > 0
    assert record.name == "Budi"
    assert_recent(record.created_at)
    assert record.updated_at == record.created_at


async def test_create_accepts_mapping(repo):
    record = await repo.create({"name": "Ani", "address": "RT 03", "job": "Guru"})
    assert record.job == "Guru"


async def test_ids_are_unique(repo):
    first = await repo.create(ResidentCreate(name="A", address="X", job="Y"))
    second = await repo.create(ResidentCreate(name="B", address="X", job="Y"))
    assert first.id != second.id


async def test_get(repo):
    created = await repo.create(ResidentCreate(name="Budi", address="RT 01", job="Petani"))
    found = await repo.get(created.id)
    assert found == created


async def test_get_missing_returns_none(repo):
    assert await repo.get(999) is None


async def test_list_all_in_insertion_order(repo):
    for name in ("Citra", "Adi", "Bayu"):
        await repo.create(ResidentCreate(name=name, address="RT 01", job="Nelayan"))
    assert [r.name for r in await repo.list_all()] == ["Citra", "Adi", "Bayu"]


async def test_list_all_empty(repo):
    assert await repo.list_all() == []


async def test_partial_update_keeps_other_fields(repo):
    created = await repo.create(ResidentCreate(name="Budi", address="RT 01", job="Petani"))
    await asyncio.sleep(0.01)

    updated = await repo.update(created.id, ResidentUpdate(job="Pedagang"))

    assert updated.job == "Pedagang"
    assert updated.name == "Budi"
    assert updated.address == "RT 01"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at
    assert await repo.get(created.id) == updated


async def test_empty_update_only_touches_timestamp(repo):
    created = await repo.create(ResidentCreate(name="Budi", address="RT 01", job="Petani"))
    await asyncio.sleep(0.01)
    updated = await repo.update(created.id, ResidentUpdate())
    assert updated.model_dump(exclude={"updated_at"}) == created.model_dump(
        exclude={"updated_at"}
    )
    assert updated.updated_at > created.updated_at


async def test_update_missing_raises(repo):
    with pytest.raises(RecordNotFoundError) as exc_info:
        await repo.update(42, ResidentUpdate(name="Nobody"))
    assert str(exc_info.value) == "Resident with id 42 not found"
    assert await repo.list_all() == []


async def test_update_null_required_field_rejected(repo):
    created = await repo.create(ResidentCreate(name="Budi", address="RT 01", job="Petani"))
    with pytest.raises(ValueError):
        await repo.update(created.id, ResidentUpdate.model_validate({"name": None}))
    assert (await repo.get(created.id)).name == "Budi"


async def test_delete(repo):
    created = await repo.create(ResidentCreate(name="Budi", address="RT 01", job="Petani"))
    assert await repo.delete(created.id) is True
    assert await repo.get(created.id) is None


async def test_delete_missing_returns_false(repo):
    created = await repo.create(ResidentCreate(name="Budi", address="RT 01", job="Petani"))
    assert await repo.delete(created.id) is True
    assert await repo.delete(created.id) is False


async def test_ids_not_reused_after_delete(repo):
    first = await repo.create(ResidentCreate(name="A", address="X", job="Y"))
    second = await repo.create(ResidentCreate(name="B", address="X", job="Y"))
    await repo.delete(first.id)
    third = await repo.create(ResidentCreate(name="C", address="X", job="Y"))
    assert third.id > second.id
