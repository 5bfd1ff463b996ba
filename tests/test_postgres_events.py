"""Tests for PostgresEventRepository."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from village.core.types import EventStatus
from village.records.models import EventCreate, EventUpdate
from village.repositories.postgres.events import PostgresEventRepository


@pytest.fixture
def repo(db):
    return PostgresEventRepository(db)


def _event(name: str, status: str = "planned", event_date: date = date(2024, 8, 17)) -> EventCreate:
    return EventCreate(
        name=name,
        location="Lapangan desa",
        event_date=event_date,
        organizer="Panitia",
        status=status,
    )


async def test_create_defaults(repo):
    event = await repo.create(_event("Lomba 17 Agustus"))
    assert event.status == EventStatus.PLANNED
    assert event.description is None
    assert event.participant_count is None
    assert event.budget is None


async def test_upcoming_filters_by_status(repo):
    await repo.create(_event("Rapat", "planned"))
    await repo.create(_event("Posyandu", "ongoing"))
    await repo.create(_event("Panen raya", "completed"))
    await repo.create(_event("Pentas seni", "cancelled"))

    upcoming = await repo.upcoming()

    assert [e.name for e in upcoming] == ["Rapat", "Posyandu"]


async def test_upcoming_ignores_date(repo):
    await repo.create(_event("Lama", "planned", date(1999, 1, 1)))
    assert [e.name for e in await repo.upcoming()] == ["Lama"]


async def test_completing_removes_from_upcoming(repo):
    event = await repo.create(_event("Rapat"))
    await repo.update(event.id, EventUpdate(status="completed"))
    assert await repo.upcoming() == []


async def test_explicit_null_clears_optional_fields(repo):
    event = await repo.create(
        EventCreate(
            name="Festival",
            description="Festival budaya",
            location="Balai desa",
            event_date=date(2024, 9, 1),
            organizer="Karang Taruna",
            participant_count=120,
            budget=Decimal("2500000"),
        )
    )

    updated = await repo.update(
        event.id, EventUpdate.model_validate({"budget": None, "participant_count": None})
    )

    assert updated.budget is None
    assert updated.participant_count is None
    assert updated.description == "Festival budaya"
