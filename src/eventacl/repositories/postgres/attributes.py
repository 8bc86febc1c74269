"""SQL generic attribute repository."""

from __future__ import annotations

from sqlalchemy import column, insert, select, table, update

from eventacl.attributes.models import AttributeDescriptor, AttributeKey
from eventacl.core.errors import ConfigurationMissing
from eventacl.db.engine import DatabaseManager
from eventacl.db.models import AttributeFieldRow, AttributeGroupRow


class PostgresAttributeRepository:
    """SQL accessor for one generic attribute.

    Value tables are created by the host, so they are addressed through
    lightweight ``table()``/``column()`` constructs built from the resolved
    descriptor instead of ORM models. Use ``bind()`` to construct.
    """

    def __init__(self, db: DatabaseManager, descriptor: AttributeDescriptor) -> None:
        self._db = db
        self._descriptor = descriptor
        self._value = column(descriptor.column_name)
        self._entity_id = column("entity_id")
        self._table = table(descriptor.table_name, self._entity_id, self._value)

    @classmethod
    async def bind(cls, db: DatabaseManager, key: AttributeKey) -> PostgresAttributeRepository:
        """Resolve ``key`` against the attribute catalog.

        A string key matches the attribute group title and takes the
        group's field; an integer key matches the field id.
        """
        async with db.session() as session:
            if isinstance(key, int):
                stmt = (
                    select(AttributeFieldRow, AttributeGroupRow)
                    .join(AttributeGroupRow, AttributeGroupRow.id == AttributeFieldRow.group_id)
                    .where(AttributeFieldRow.id == key)
                )
            else:
                stmt = (
                    select(AttributeFieldRow, AttributeGroupRow)
                    .join(AttributeGroupRow, AttributeGroupRow.id == AttributeFieldRow.group_id)
                    .where(AttributeGroupRow.title == key)
                    .order_by(AttributeFieldRow.id)
                    .limit(1)
                )
            found = (await session.execute(stmt)).first()

        if found is None:
            raise ConfigurationMissing(f"No attribute exists for {key!r}")
        field, group = found
        return cls(
            db,
            AttributeDescriptor(
                field_id=field.id,
                group_id=group.id,
                group_title=group.title,
                table_name=group.table_name,
                column_name=field.column_name,
            ),
        )

    @property
    def descriptor(self) -> AttributeDescriptor:
        return self._descriptor

    async def get(self, entity_id: int) -> int | None:
        if not entity_id or entity_id <= 0:
            return None
        async with self._db.session() as db:
            result = await db.execute(
                select(self._value).where(self._entity_id == entity_id)
            )
            value = result.scalar_one_or_none()
        return int(value) if value is not None else None

    async def get_all(self) -> dict[int, int]:
        async with self._db.session() as db:
            result = await db.execute(select(self._entity_id, self._value))
            return {
                int(entity_id): int(value)
                for entity_id, value in result.all()
                if value is not None
            }

    async def upsert(self, entity_id: int, value: int) -> None:
        """Insert or update the value. Zero means "no value" and is never stored."""
        if not value:
            return
        entity_id, value = int(entity_id), int(value)
        async with self._db.transaction() as db:
            existing = await db.execute(
                select(self._entity_id).where(self._entity_id == entity_id)
            )
            if existing.first() is not None:
                await db.execute(
                    update(self._table)
                    .where(self._entity_id == entity_id)
                    .values({self._descriptor.column_name: value})
                )
            else:
                await db.execute(
                    insert(self._table).values(
                        {"entity_id": entity_id, self._descriptor.column_name: value}
                    )
                )
