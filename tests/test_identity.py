"""Tests for host user to party mapping."""

from __future__ import annotations

from eventacl.identity.mapping import IdentityMap
from eventacl.repositories.postgres.identity import PostgresIdentityRepository


class TestIdentityMap:
    def test_link_and_lookup(self):
        identity = IdentityMap({"alice": 6})
        identity.link("bob", 2)
        assert identity.party_for_user("alice") == 6
        assert identity.party_for_user("bob") == 2

    def test_unknown_and_empty_users(self):
        identity = IdentityMap()
        assert identity.party_for_user("nobody") is None
        assert identity.party_for_user("") is None


async def test_postgres_identity(db):
    repo = PostgresIdentityRepository(db)
    await repo.link("alice", 6)
    await repo.link("alice", 7)
    assert await repo.party_for_user("alice") == 7
    assert await repo.party_for_user("bob") is None
    assert await repo.party_for_user("") is None
