"""Tests for relationship edges and the in-memory relationship store."""

from __future__ import annotations

from datetime import timedelta

import pytest

from eventacl.graph.store import RelationshipStore
from tests.conftest import TODAY, edge


class TestRelationshipEdge:
    def test_open_ended_active_edge_is_valid(self):
        assert edge(1, 2, a_b=True).is_valid_at(TODAY)

    def test_inactive_edge_is_never_valid(self):
        assert not edge(1, 2, a_b=True, is_active=False).is_valid_at(TODAY)

    def test_window_bounds_are_inclusive(self):
        e = edge(1, 2, a_b=True, start_date=TODAY, end_date=TODAY)
        assert e.is_valid_at(TODAY)
        assert not e.is_valid_at(TODAY - timedelta(days=1))
        assert not e.is_valid_at(TODAY + timedelta(days=1))

    def test_future_start_is_not_valid_yet(self):
        e = edge(1, 2, a_b=True, start_date=TODAY + timedelta(days=3))
        assert not e.is_valid_at(TODAY)


@pytest.fixture
def store():
    return RelationshipStore()


class TestRelationshipStore:
    def test_a_to_b_uses_permission_a_b(self, store):
        store.add_edge(edge(1, 2, a_b=True))
        assert store.permitted_neighbors({1}, TODAY) == {2}
        # No B→A grant, so 2 cannot reach 1
        assert store.permitted_neighbors({2}, TODAY) == set()

    def test_b_to_a_uses_permission_b_a(self, store):
        store.add_edge(edge(1, 2, b_a=True))
        assert store.permitted_neighbors({2}, TODAY) == {1}
        assert store.permitted_neighbors({1}, TODAY) == set()

    def test_invalid_edges_are_skipped(self, store):
        store.add_edge(edge(1, 2, a_b=True, end_date=TODAY - timedelta(days=1)))
        store.add_edge(edge(1, 3, a_b=True, is_active=False))
        store.add_edge(edge(1, 4, a_b=True))
        assert store.permitted_neighbors({1}, TODAY) == {4}

    def test_neighbors_of_several_parties(self, store):
        store.add_edge(edge(1, 2, a_b=True))
        store.add_edge(edge(3, 4, a_b=True))
        assert store.permitted_neighbors({1, 3}, TODAY) == {2, 4}

    def test_duplicate_edges_collapse(self, store):
        store.add_edge(edge(1, 2, a_b=True))
        store.add_edge(edge(1, 2, a_b=True))
        assert store.permitted_neighbors({1}, TODAY) == {2}

    def test_self_loop_indexed_once(self, store):
        store.add_edge(edge(1, 1, a_b=True))
        store.add_edge(edge(1, 2, b_a=True))
        assert store.permitted_neighbors({1}, TODAY) == {1}
