"""Relationship ACL service.

Entry point for the host: turns a host user id into a ``RequestContext``,
finds the configured owner attribute and applies the ownership filter or
gate chosen by the ``RequestKind``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import date
from typing import TypeVar

from eventacl.acl.chains import OwnerChainResolver
from eventacl.acl.context import RequestContext
from eventacl.acl.filter import OwnershipFilter
from eventacl.attributes.models import AttributeKey, parse_attribute_key
from eventacl.core.config import ACLConfig
from eventacl.core.errors import AccessDenied, ConfigurationMissing
from eventacl.core.types import AccessMode, RequestKind
from eventacl.graph.resolver import RelationshipGraphResolver
from eventacl.repositories import MaybeAwaitable, resolve
from eventacl.repositories.protocols import (
    AttributeRepository,
    ConfigRepository,
    IdentityRepository,
    RelationshipRepository,
    ResourceLinkRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

AttributeFactory = Callable[[AttributeKey], MaybeAwaitable[AttributeRepository]]


class EventACLService:
    """Applies relationship-based edit rights to events, participants and contributions."""

    def __init__(
        self,
        relationships: RelationshipRepository,
        links: ResourceLinkRepository,
        config_store: ConfigRepository,
        identity: IdentityRepository,
        attribute_factory: AttributeFactory,
        acl_config: ACLConfig | None = None,
    ) -> None:
        self._config_store = config_store
        self._identity = identity
        self._attribute_factory = attribute_factory
        self._acl = acl_config or ACLConfig()
        self.resolver = RelationshipGraphResolver(relationships)
        self.ownership = OwnershipFilter(self.resolver, OwnerChainResolver(links))

    async def context_for_user(
        self, user_id: str | None, as_of: date | None = None
    ) -> RequestContext:
        party_id = await resolve(self._identity.party_for_user(user_id)) if user_id else None
        if party_id is None:
            logger.info("No party linked to host user %r", user_id)
        return RequestContext(party_id, as_of=as_of, include_self=self._acl.include_self)

    async def owner_attribute(self, context: RequestContext) -> AttributeRepository:
        """Bind the configured owner attribute, once per request."""
        if context.owner_attribute is None:
            key = self._acl.owner_config_key
            raw = await resolve(self._config_store.get(key))
            if not raw:
                logger.error("Owner attribute config %r is not set", key)
                raise ConfigurationMissing(f"Config key {key!r} is not set")
            try:
                context.owner_attribute = await resolve(
                    self._attribute_factory(parse_attribute_key(raw))
                )
            except ConfigurationMissing:
                logger.error("Owner attribute %r from config %r does not resolve", raw, key)
                raise
        return context.owner_attribute

    async def allowed_parties(self, context: RequestContext) -> frozenset[int]:
        return await context.allowed_parties(self.resolver)

    async def filter_rows(
        self,
        request_kind: RequestKind,
        rows: Mapping[int, T],
        context: RequestContext,
    ) -> dict[int, T]:
        if request_kind.mode != AccessMode.FILTER:
            raise ValueError(f"{request_kind} gates a single record, it does not filter")
        owner_attribute = await self.owner_attribute(context)
        return await self.ownership.filter(
            rows, request_kind.resource_kind, owner_attribute, context
        )

    async def is_allowed(
        self,
        request_kind: RequestKind,
        resource_id: int,
        context: RequestContext,
    ) -> bool:
        if request_kind.mode != AccessMode.GATE:
            raise ValueError(f"{request_kind} filters a collection, it does not gate")
        owner_attribute = await self.owner_attribute(context)
        return await self.ownership.is_allowed(
            resource_id, request_kind.resource_kind, owner_attribute, context
        )

    async def require_allowed(
        self,
        request_kind: RequestKind,
        resource_id: int,
        context: RequestContext,
    ) -> None:
        if request_kind.mode != AccessMode.GATE:
            raise ValueError(f"{request_kind} filters a collection, it does not gate")
        owner_attribute = await self.owner_attribute(context)
        await self.ownership.require_allowed(
            resource_id, request_kind.resource_kind, owner_attribute, context
        )

    async def assign_event_owner(
        self, event_id: int, owner_party_id: int, context: RequestContext
    ) -> None:
        """Record the owner of an event.

        The caller may only hand an event it may edit to a party in its
        closure. The caller itself qualifies only with ``include_self``.
        """
        await self.require_allowed(RequestKind.EVENT_EDIT, event_id, context)
        allowed = await self.allowed_parties(context)
        if owner_party_id not in allowed:
            logger.info(
                "Party %s may not assign event %s to party %s",
                context.party_id, event_id, owner_party_id,
            )
            raise AccessDenied(RequestKind.EVENT_EDIT.resource_kind, event_id)
        owner_attribute = await self.owner_attribute(context)
        await resolve(owner_attribute.upsert(event_id, owner_party_id))
        logger.info("Event %s owner set to party %s", event_id, owner_party_id)
