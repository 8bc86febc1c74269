"""SQL relationship repository."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from sqlalchemy import and_, or_, select, union

from eventacl.db.engine import DatabaseManager
from eventacl.db.models import RelationshipRow


def _valid_at(day: date):
    return and_(
        RelationshipRow.is_active.is_(True),
        or_(RelationshipRow.start_date.is_(None), RelationshipRow.start_date <= day),
        or_(RelationshipRow.end_date.is_(None), RelationshipRow.end_date >= day),
    )


class PostgresRelationshipRepository:
    """SQL-backed relationship edges.

    Edges are stored once. A neighbour query is one UNION of the A→B and
    B→A directions, each filtered on its own permission flag.
    """

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def permitted_neighbors(self, party_ids: Iterable[int], as_of: date) -> set[int]:
        ids = set(party_ids)
        if not ids:
            return set()
        valid = _valid_at(as_of)
        a_to_b = select(RelationshipRow.party_b_id.label("party_id")).where(
            RelationshipRow.party_a_id.in_(ids),
            RelationshipRow.permission_a_b.is_(True),
            valid,
        )
        b_to_a = select(RelationshipRow.party_a_id.label("party_id")).where(
            RelationshipRow.party_b_id.in_(ids),
            RelationshipRow.permission_b_a.is_(True),
            valid,
        )
        async with self._db.session() as db:
            result = await db.execute(union(a_to_b, b_to_a))
            return {row[0] for row in result.all()}
