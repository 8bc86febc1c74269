"""SQL configuration repository."""

from __future__ import annotations

from sqlalchemy import delete, select

from eventacl.db.engine import DatabaseManager
from eventacl.db.models import ACLConfigRow


class PostgresConfigRepository:
    """Postgres-backed ``config_key -> config_value`` table."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def get(self, key: str) -> str | None:
        async with self._db.session() as db:
            row = await db.get(ACLConfigRow, key)
            return row.config_value if row is not None else None

    async def set(self, key: str, value: str) -> None:
        async with self._db.transaction() as db:
            existing = await db.get(ACLConfigRow, key)
            if existing:
                existing.config_value = value
            else:
                db.add(ACLConfigRow(config_key=key, config_value=value))

    async def delete(self, key: str) -> None:
        async with self._db.transaction() as db:
            await db.execute(delete(ACLConfigRow).where(ACLConfigRow.config_key == key))

    async def list_all(self) -> dict[str, str]:
        async with self._db.session() as db:
            result = await db.execute(select(ACLConfigRow))
            return {r.config_key: r.config_value for r in result.scalars().all()}
