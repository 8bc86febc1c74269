"""Protocol definitions for all repository interfaces.

Each protocol mirrors the public methods of the corresponding in-memory
store class, so both sync (in-memory) and async (SQL) implementations
satisfy the same interface. Callers go through ``resolve()``.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Protocol, runtime_checkable

from eventacl.attributes.models import AttributeDescriptor


@runtime_checkable
class RelationshipRepository(Protocol):
    """Protocol for the relationship edge source."""

    def permitted_neighbors(self, party_ids: Iterable[int], as_of: date) -> set[int]: ...


@runtime_checkable
class AttributeRepository(Protocol):
    """Protocol for a generic attribute accessor bound to one attribute."""

    @property
    def descriptor(self) -> AttributeDescriptor: ...

    def get(self, entity_id: int) -> int | None: ...

    def get_all(self) -> dict[int, int]: ...

    def upsert(self, entity_id: int, value: int) -> None: ...


@runtime_checkable
class ResourceLinkRepository(Protocol):
    """Protocol for foreign-key lookups between owned resources."""

    def events_for_participants(self, participant_ids: Iterable[int]) -> dict[int, int]: ...

    def participants_for_contributions(
        self, contribution_ids: Iterable[int]
    ) -> dict[int, int]: ...


@runtime_checkable
class ConfigRepository(Protocol):
    """Protocol for the key/value configuration table."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def list_all(self) -> dict[str, str]: ...


@runtime_checkable
class IdentityRepository(Protocol):
    """Protocol for host user id to party id mapping."""

    def party_for_user(self, user_id: str) -> int | None: ...
