"""Database layer for village records (SQLAlchemy 2.0 async)."""

from __future__ import annotations

from village.db.base import Base
from village.db.engine import DatabaseManager

__all__ = ["Base", "DatabaseManager"]
