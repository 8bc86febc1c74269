"""Per-request ACL state."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from eventacl.graph.resolver import RelationshipGraphResolver


class RequestContext:
    """State for one host request, created by the caller and then discarded.

    Holds the caller's party id and one ``as_of`` date, and memoizes the
    closure and the bound owner attribute so that several checks within
    the same request resolve the graph only once. Never share an instance
    between requests or users.
    """

    def __init__(
        self,
        party_id: int | None,
        as_of: date | None = None,
        include_self: bool = False,
    ) -> None:
        self.party_id = party_id
        self.as_of = as_of or date.today()
        self.include_self = include_self
        self._closure: frozenset[int] | None = None
        self.owner_attribute: Any = None

    async def allowed_parties(self, resolver: RelationshipGraphResolver) -> frozenset[int]:
        if self._closure is None:
            closure = await resolver.resolve(self.party_id, self.as_of)
            if self.include_self and self.party_id:
                closure.add(self.party_id)
            self._closure = frozenset(closure)
        return self._closure

    @property
    def resolved(self) -> bool:
        return self._closure is not None
