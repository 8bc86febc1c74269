"""In-memory attribute catalog and accessor."""

from __future__ import annotations

from eventacl.attributes.models import AttributeDescriptor, AttributeKey
from eventacl.core.errors import ConfigurationMissing


class AttributeCatalog:
    """In-memory stand-in for the host's attribute group/field tables.

    Holds the descriptors and, per (table, column) pair, the
    ``entity_id -> value`` rows.
    """

    def __init__(self) -> None:
        self._descriptors: dict[int, AttributeDescriptor] = {}
        self._tables: dict[tuple[str, str], dict[int, int]] = {}

    def register(self, descriptor: AttributeDescriptor) -> None:
        self._descriptors[descriptor.field_id] = descriptor
        self._tables.setdefault(_location(descriptor), {})

    def lookup(self, key: AttributeKey) -> AttributeDescriptor | None:
        if isinstance(key, int):
            return self._descriptors.get(key)
        matches = [d for d in self._descriptors.values() if d.group_title == key]
        return min(matches, key=lambda d: d.field_id, default=None)

    def values(self, descriptor: AttributeDescriptor) -> dict[int, int]:
        return self._tables.setdefault(_location(descriptor), {})


class AttributeStore:
    """Reads and writes one attribute's values.

    The descriptor is resolved once, at construction; an unknown key
    raises ``ConfigurationMissing``.
    """

    def __init__(self, catalog: AttributeCatalog, key: AttributeKey) -> None:
        descriptor = catalog.lookup(key)
        if descriptor is None:
            raise ConfigurationMissing(f"No attribute exists for {key!r}")
        self._descriptor = descriptor
        self._rows = catalog.values(descriptor)

    @property
    def descriptor(self) -> AttributeDescriptor:
        return self._descriptor

    def get(self, entity_id: int) -> int | None:
        if not entity_id or entity_id <= 0:
            return None
        return self._rows.get(entity_id)

    def get_all(self) -> dict[int, int]:
        return dict(self._rows)

    def upsert(self, entity_id: int, value: int) -> None:
        """Insert or update the value. Zero means "no value" and is never stored."""
        if not value:
            return
        self._rows[int(entity_id)] = int(value)


def _location(descriptor: AttributeDescriptor) -> tuple[str, str]:
    return descriptor.table_name, descriptor.column_name
