"""In-memory foreign-key links between owned resources."""

from __future__ import annotations

from collections.abc import Iterable


class ResourceLinkStore:
    """Participant → event and contribution → participant links."""

    def __init__(self) -> None:
        self._participant_events: dict[int, int] = {}
        self._contribution_participants: dict[int, int] = {}

    def add_participant(self, participant_id: int, event_id: int) -> None:
        self._participant_events[participant_id] = event_id

    def add_participant_payment(self, contribution_id: int, participant_id: int) -> None:
        self._contribution_participants.setdefault(contribution_id, participant_id)

    def events_for_participants(self, participant_ids: Iterable[int]) -> dict[int, int]:
        return {
            pid: self._participant_events[pid]
            for pid in set(participant_ids)
            if pid in self._participant_events
        }

    def participants_for_contributions(
        self, contribution_ids: Iterable[int]
    ) -> dict[int, int]:
        return {
            cid: self._contribution_participants[cid]
            for cid in set(contribution_ids)
            if cid in self._contribution_participants
        }
