"""SQL resource link repository."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select

from eventacl.db.engine import DatabaseManager
from eventacl.db.models import ParticipantPaymentRow, ParticipantRow


class PostgresResourceLinkRepository:
    """Batched foreign-key lookups: one query per hop, never one per id."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def events_for_participants(self, participant_ids: Iterable[int]) -> dict[int, int]:
        ids = set(participant_ids)
        if not ids:
            return {}
        async with self._db.session() as db:
            result = await db.execute(
                select(ParticipantRow.id, ParticipantRow.event_id).where(
                    ParticipantRow.id.in_(ids)
                )
            )
            return {pid: eid for pid, eid in result.all()}

    async def participants_for_contributions(
        self, contribution_ids: Iterable[int]
    ) -> dict[int, int]:
        ids = set(contribution_ids)
        if not ids:
            return {}
        async with self._db.session() as db:
            result = await db.execute(
                select(
                    ParticipantPaymentRow.contribution_id,
                    ParticipantPaymentRow.participant_id,
                )
                .where(ParticipantPaymentRow.contribution_id.in_(ids))
                .order_by(ParticipantPaymentRow.id)
            )
            links: dict[int, int] = {}
            for contribution_id, participant_id in result.all():
                links.setdefault(contribution_id, participant_id)
            return links
