"""Shared test fixtures and helpers."""

from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy import Column, Integer, MetaData, Table

from eventacl.db.base import Base
from eventacl.db.engine import DatabaseManager
from eventacl.db.models import AttributeFieldRow, AttributeGroupRow, RelationshipRow
from eventacl.graph.models import RelationshipEdge

# Import models to populate metadata
import eventacl.db.models  # noqa: F401

TODAY = date(2026, 10, 19)

OWNER_GROUP = "Event owner"
OWNER_TABLE = "attribute_values_event_owner"
OWNER_COLUMN = "owner_party_id"


def edge(party_a: int, party_b: int, a_b: bool = False, b_a: bool = False, **kwargs) -> RelationshipEdge:
    """Shorthand for a relationship edge with the given permission flags."""
    return RelationshipEdge(
        party_a=party_a,
        party_b=party_b,
        permission_a_b=a_b,
        permission_b_a=b_a,
        **kwargs,
    )


@pytest.fixture
async def db():
    """DatabaseManager over an in-memory SQLite database with all tables."""
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.close()


async def add_edges(db: DatabaseManager, *edges: RelationshipEdge) -> None:
    async with db.session() as session:
        for e in edges:
            session.add(RelationshipRow(
                party_a_id=e.party_a,
                party_b_id=e.party_b,
                permission_a_b=e.permission_a_b,
                permission_b_a=e.permission_b_a,
                is_active=e.is_active,
                start_date=e.start_date,
                end_date=e.end_date,
            ))
        await session.commit()


async def create_owner_attribute(
    db: DatabaseManager,
    title: str = OWNER_GROUP,
    table_name: str = OWNER_TABLE,
    column_name: str = OWNER_COLUMN,
) -> int:
    """Register an attribute group/field and create its value table.

    Returns the field id.
    """
    metadata = MetaData()
    Table(
        table_name,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("entity_id", Integer, nullable=False, unique=True),
        Column(column_name, Integer, nullable=True),
    )
    async with db.engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    async with db.session() as session:
        group = AttributeGroupRow(title=title, table_name=table_name)
        session.add(group)
        await session.flush()
        field = AttributeFieldRow(group_id=group.id, label=title, column_name=column_name)
        session.add(field)
        await session.commit()
        return field.id
