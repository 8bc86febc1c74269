"""In-memory adjacency-list relationship store."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from eventacl.graph.models import RelationshipEdge


class RelationshipStore:
    """In-memory relationship graph.

    Each edge is indexed under both parties so a neighbour lookup can walk
    it in either direction; the permission flag checked depends on which
    end the walk starts from.
    """

    def __init__(self, edges: Iterable[RelationshipEdge] = ()) -> None:
        self._adjacency: dict[int, list[RelationshipEdge]] = {}
        for edge in edges:
            self.add_edge(edge)

    def add_edge(self, edge: RelationshipEdge) -> None:
        self._adjacency.setdefault(edge.party_a, []).append(edge)
        if edge.party_b != edge.party_a:
            self._adjacency.setdefault(edge.party_b, []).append(edge)

    def permitted_neighbors(self, party_ids: Iterable[int], as_of: date) -> set[int]:
        """Return parties any of ``party_ids`` may edit through one valid edge."""
        found: set[int] = set()
        for party_id in set(party_ids):
            for edge in self._adjacency.get(party_id, []):
                if not edge.is_valid_at(as_of):
                    continue
                if edge.party_a == party_id and edge.permission_a_b:
                    found.add(edge.party_b)
                if edge.party_b == party_id and edge.permission_b_a:
                    found.add(edge.party_a)
        return found
