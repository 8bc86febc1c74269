"""Database layer for eventacl: SQLAlchemy 2.0 async."""

from __future__ import annotations

from eventacl.db.base import Base
from eventacl.db.engine import DatabaseManager

__all__ = ["Base", "DatabaseManager"]
