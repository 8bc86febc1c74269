"""Owner resolution for resources that reference their event indirectly."""

from __future__ import annotations

from collections.abc import Iterable

from eventacl.core.types import ResourceKind
from eventacl.repositories import resolve
from eventacl.repositories.protocols import AttributeRepository, ResourceLinkRepository


class OwnerChainResolver:
    """Maps a batch of resource ids to owner party ids.

    Events carry the owner attribute themselves. Participants reach it
    through their event, contributions through participant payment →
    participant → event. Every hop is one batched lookup. Ids whose chain
    breaks anywhere are left out, which the filter treats as unowned.
    """

    def __init__(self, links: ResourceLinkRepository) -> None:
        self._links = links

    async def events_for(self, kind: ResourceKind, ids: Iterable[int]) -> dict[int, int]:
        ids = {int(i) for i in ids}
        if kind == ResourceKind.EVENT:
            return {i: i for i in ids}
        if kind == ResourceKind.PARTICIPANT:
            return await resolve(self._links.events_for_participants(ids))
        if kind == ResourceKind.CONTRIBUTION:
            participants = await resolve(self._links.participants_for_contributions(ids))
            events = await resolve(
                self._links.events_for_participants(set(participants.values()))
            )
            return {
                cid: events[pid] for cid, pid in participants.items() if pid in events
            }
        raise ValueError(f"Unsupported resource kind: {kind!r}")

    async def owners_for(
        self,
        kind: ResourceKind,
        ids: Iterable[int],
        owner_attribute: AttributeRepository,
    ) -> dict[int, int]:
        event_of = await self.events_for(kind, ids)
        if not event_of:
            return {}
        owners = await resolve(owner_attribute.get_all())
        return {
            rid: owners[eid] for rid, eid in event_of.items() if eid in owners
        }
