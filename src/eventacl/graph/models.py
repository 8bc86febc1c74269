"""Relationship graph data models."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class RelationshipEdge(BaseModel):
    """A link between two parties with directional edit grants.

    ``permission_a_b`` lets party A edit party B, ``permission_b_a`` the
    reverse. Edges are owned by the host CRM and never written here.
    """

    party_a: int
    party_b: int
    permission_a_b: bool = False
    permission_b_a: bool = False
    is_active: bool = True
    start_date: date | None = None
    end_date: date | None = None

    def is_valid_at(self, day: date) -> bool:
        if not self.is_active:
            return False
        if self.start_date is not None and self.start_date > day:
            return False
        if self.end_date is not None and self.end_date < day:
            return False
        return True
