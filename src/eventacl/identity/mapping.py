"""In-memory host user to party mapping."""

from __future__ import annotations


class IdentityMap:
    """Maps host user ids to party ids."""

    def __init__(self, links: dict[str, int] | None = None) -> None:
        self._links: dict[str, int] = dict(links or {})

    def link(self, user_id: str, party_id: int) -> None:
        self._links[user_id] = party_id

    def party_for_user(self, user_id: str) -> int | None:
        if not user_id:
            return None
        return self._links.get(user_id)
