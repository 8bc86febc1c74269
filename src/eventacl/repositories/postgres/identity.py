"""SQL identity mapping repository."""

from __future__ import annotations

from eventacl.db.engine import DatabaseManager
from eventacl.db.models import UserPartyLinkRow


class PostgresIdentityRepository:
    """Maps host user ids to party ids through ``user_party_links``."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def party_for_user(self, user_id: str) -> int | None:
        if not user_id:
            return None
        async with self._db.session() as db:
            row = await db.get(UserPartyLinkRow, user_id)
            return row.party_id if row is not None else None

    async def link(self, user_id: str, party_id: int) -> None:
        async with self._db.transaction() as db:
            existing = await db.get(UserPartyLinkRow, user_id)
            if existing:
                existing.party_id = party_id
            else:
                db.add(UserPartyLinkRow(user_id=user_id, party_id=party_id))
