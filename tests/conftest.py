"""Shared test fixtures and helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from village.db.engine import DatabaseManager

IN_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db():
    """A DatabaseManager over a fresh in-memory SQLite database."""
    manager = DatabaseManager(IN_MEMORY_URL)
    await manager.create_all()
    yield manager
    await manager.close()


def assert_recent(moment: datetime, tolerance: timedelta = timedelta(seconds=10)) -> None:
    """Assert *moment* is timezone-aware and within *tolerance* of now."""
    assert moment.tzinfo is not None
    assert abs(datetime.now(timezone.utc) - moment) < tolerance
