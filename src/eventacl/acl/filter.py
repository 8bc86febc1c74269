"""Ownership filtering of resource collections."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TypeVar

from eventacl.acl.chains import OwnerChainResolver
from eventacl.acl.context import RequestContext
from eventacl.core.errors import AccessDenied
from eventacl.core.types import ResourceKind
from eventacl.graph.resolver import RelationshipGraphResolver
from eventacl.repositories.protocols import AttributeRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


def filter_by_ownership(
    rows: Mapping[int, T],
    owners: Mapping[int, int],
    allowed: set[int] | frozenset[int],
) -> dict[int, T]:
    """Keep rows whose owner is allowed. Rows without an owner are always kept."""
    return {
        rid: row
        for rid, row in rows.items()
        if rid not in owners or owners[rid] in allowed
    }


class OwnershipFilter:
    """Filters resources by the caller's permission closure.

    Filtering never raises for disallowed rows, it drops them. Only the
    single-resource ``require_allowed`` raises ``AccessDenied``.
    """

    def __init__(
        self,
        resolver: RelationshipGraphResolver,
        chains: OwnerChainResolver,
    ) -> None:
        self._resolver = resolver
        self._chains = chains

    async def filter(
        self,
        rows: Mapping[int, T],
        kind: ResourceKind,
        owner_attribute: AttributeRepository,
        context: RequestContext,
    ) -> dict[int, T]:
        if not rows:
            return {}
        owners = await self._chains.owners_for(kind, rows.keys(), owner_attribute)
        if not owners:
            return dict(rows)

        allowed = await context.allowed_parties(self._resolver)
        kept = filter_by_ownership(rows, owners, allowed)
        logger.debug(
            "Party %s: kept %d of %d %s rows",
            context.party_id, len(kept), len(rows), kind,
        )
        return kept

    async def is_allowed(
        self,
        resource_id: int,
        kind: ResourceKind,
        owner_attribute: AttributeRepository,
        context: RequestContext,
    ) -> bool:
        kept = await self.filter({resource_id: None}, kind, owner_attribute, context)
        return bool(kept)

    async def require_allowed(
        self,
        resource_id: int,
        kind: ResourceKind,
        owner_attribute: AttributeRepository,
        context: RequestContext,
    ) -> None:
        if not await self.is_allowed(resource_id, kind, owner_attribute, context):
            logger.info("Party %s denied %s %s", context.party_id, kind, resource_id)
            raise AccessDenied(kind, resource_id)
