"""Tests for EventACLService over in-memory stores."""

from __future__ import annotations

import pytest

from eventacl.acl.links import ResourceLinkStore
from eventacl.acl.service import EventACLService
from eventacl.admin.store import ConfigStore
from eventacl.attributes.models import AttributeDescriptor
from eventacl.attributes.store import AttributeCatalog, AttributeStore
from eventacl.core.config import ACLConfig
from eventacl.core.errors import AccessDenied, ConfigurationMissing
from eventacl.core.types import RequestKind
from eventacl.graph.store import RelationshipStore
from eventacl.identity.mapping import IdentityMap
from tests.conftest import TODAY, edge

ALICE, OFFICE, BRANCH, OTHER = 6, 1, 2, 5


class CountingStore(RelationshipStore):
    def __init__(self, edges=()):
        super().__init__(edges)
        self.queries = 0

    def permitted_neighbors(self, party_ids, as_of):
        self.queries += 1
        return super().permitted_neighbors(party_ids, as_of)


@pytest.fixture
def catalog():
    catalog = AttributeCatalog()
    catalog.register(AttributeDescriptor(
        field_id=1,
        group_id=1,
        group_title="Event owner",
        table_name="attribute_values_event_owner",
        column_name="owner_party_id",
    ))
    rows = catalog.values(catalog.lookup(1))
    rows.update({10: BRANCH, 11: OTHER, 12: ALICE})
    return catalog


@pytest.fixture
def relationships():
    return CountingStore([edge(ALICE, OFFICE, a_b=True), edge(BRANCH, OFFICE, b_a=True)])


@pytest.fixture
def config():
    return ConfigStore({"event_owner_attribute": "Event owner"})


def _service(relationships, catalog, config, acl_config=None):
    links = ResourceLinkStore()
    links.add_participant(100, 10)
    links.add_participant(101, 11)
    links.add_participant_payment(500, 101)
    return EventACLService(
        relationships=relationships,
        links=links,
        config_store=config,
        identity=IdentityMap({"alice": ALICE}),
        attribute_factory=lambda key: AttributeStore(catalog, key),
        acl_config=acl_config,
    )


@pytest.fixture
def service(relationships, catalog, config):
    return _service(relationships, catalog, config)


async def _alice(service):
    return await service.context_for_user("alice", as_of=TODAY)


class TestContext:
    async def test_context_for_known_user(self, service):
        ctx = await _alice(service)
        assert ctx.party_id == ALICE
        assert ctx.as_of == TODAY

    async def test_context_for_unknown_user(self, service):
        ctx = await service.context_for_user("mallory")
        assert ctx.party_id is None
        assert await service.allowed_parties(ctx) == frozenset()

    async def test_context_without_user(self, service):
        assert (await service.context_for_user(None)).party_id is None

    async def test_closure_memoized_within_request(self, service, relationships):
        ctx = await _alice(service)
        await service.filter_rows(RequestKind.MANAGE_EVENTS, {10: {}}, ctx)
        queries = relationships.queries
        await service.filter_rows(RequestKind.EVENT_DASHBOARD, {11: {}}, ctx)
        await service.is_allowed(RequestKind.EVENT_EDIT, 10, ctx)
        assert relationships.queries == queries

    async def test_new_request_resolves_again(self, service, relationships):
        await service.allowed_parties(await _alice(service))
        queries = relationships.queries
        await service.allowed_parties(await _alice(service))
        assert relationships.queries == queries * 2


class TestFiltering:
    async def test_manage_events(self, service):
        ctx = await _alice(service)
        rows = {10: {"title": "Branch"}, 11: {"title": "Other"}, 12: {"title": "Own"}, 42: {}}
        kept = await service.filter_rows(RequestKind.MANAGE_EVENTS, rows, ctx)
        # Own event 12 is hidden: the seed is not part of its own closure
        assert list(kept) == [10, 42]

    async def test_include_self_adds_caller(self, relationships, catalog, config):
        service = _service(relationships, catalog, config, ACLConfig(include_self=True))
        ctx = await _alice(service)
        kept = await service.filter_rows(RequestKind.MANAGE_EVENTS, {10: {}, 12: {}}, ctx)
        assert list(kept) == [10, 12]

    async def test_participant_search(self, service):
        ctx = await _alice(service)
        kept = await service.filter_rows(RequestKind.PARTICIPANT_SEARCH, {100: {}, 101: {}}, ctx)
        assert list(kept) == [100]

    async def test_contribution_search(self, service):
        ctx = await _alice(service)
        kept = await service.filter_rows(RequestKind.CONTRIBUTION_SEARCH, {500: {}, 501: {}}, ctx)
        assert list(kept) == [501]

    async def test_gate_kind_cannot_filter(self, service):
        with pytest.raises(ValueError):
            await service.filter_rows(RequestKind.EVENT_EDIT, {10: {}}, await _alice(service))


class TestGating:
    async def test_event_edit_allowed(self, service):
        ctx = await _alice(service)
        assert await service.is_allowed(RequestKind.EVENT_EDIT, 10, ctx)
        await service.require_allowed(RequestKind.EVENT_EDIT, 10, ctx)

    async def test_event_edit_denied(self, service):
        with pytest.raises(AccessDenied):
            await service.require_allowed(RequestKind.EVENT_EDIT, 11, await _alice(service))

    async def test_participant_edit_denied(self, service):
        with pytest.raises(AccessDenied):
            await service.require_allowed(
                RequestKind.PARTICIPANT_EDIT, 101, await _alice(service)
            )

    async def test_filter_kind_cannot_gate(self, service):
        with pytest.raises(ValueError):
            await service.require_allowed(RequestKind.MANAGE_EVENTS, 10, await _alice(service))


class TestConfiguration:
    async def test_missing_config_key_is_fatal(self, relationships, catalog):
        service = _service(relationships, catalog, ConfigStore())
        with pytest.raises(ConfigurationMissing):
            await service.filter_rows(RequestKind.MANAGE_EVENTS, {10: {}}, await _alice(service))

    async def test_unresolvable_attribute_is_fatal(self, relationships, catalog):
        config = ConfigStore({"event_owner_attribute": "Deleted group"})
        service = _service(relationships, catalog, config)
        with pytest.raises(ConfigurationMissing):
            await service.filter_rows(RequestKind.MANAGE_EVENTS, {10: {}}, await _alice(service))

    async def test_numeric_config_value_is_field_id(self, relationships, catalog):
        service = _service(relationships, catalog, ConfigStore({"event_owner_attribute": "1"}))
        ctx = await _alice(service)
        attribute = await service.owner_attribute(ctx)
        assert attribute.descriptor.field_id == 1

    async def test_custom_config_key(self, relationships, catalog):
        config = ConfigStore({"owner": "Event owner"})
        service = _service(relationships, catalog, config, ACLConfig(owner_config_key="owner"))
        kept = await service.filter_rows(
            RequestKind.MANAGE_EVENTS, {10: {}, 11: {}}, await _alice(service)
        )
        assert list(kept) == [10]


class TestOwnerAssignment:
    async def test_assign_to_editable_party(self, service, catalog):
        ctx = await _alice(service)
        await service.assign_event_owner(42, BRANCH, ctx)
        assert AttributeStore(catalog, 1).get(42) == BRANCH

    async def test_assign_to_self_denied_without_self_inclusion(self, service, catalog):
        with pytest.raises(AccessDenied):
            await service.assign_event_owner(42, ALICE, await _alice(service))
        assert AttributeStore(catalog, 1).get(42) is None
        # Event 42 stays unowned and therefore editable
        assert await service.is_allowed(RequestKind.EVENT_EDIT, 42, await _alice(service))

    async def test_assign_to_self_keeps_edit_rights(self, relationships, catalog, config):
        service = _service(relationships, catalog, config, ACLConfig(include_self=True))
        await service.assign_event_owner(42, ALICE, await _alice(service))
        assert AttributeStore(catalog, 1).get(42) == ALICE
        await service.require_allowed(RequestKind.EVENT_EDIT, 42, await _alice(service))

    async def test_assigned_event_stays_editable(self, service):
        await service.assign_event_owner(42, BRANCH, await _alice(service))
        ctx = await _alice(service)
        await service.require_allowed(RequestKind.EVENT_EDIT, 42, ctx)
        kept = await service.filter_rows(RequestKind.MANAGE_EVENTS, {42: {}}, ctx)
        assert list(kept) == [42]

    async def test_assign_to_foreign_party_denied(self, service, catalog):
        with pytest.raises(AccessDenied):
            await service.assign_event_owner(42, OTHER, await _alice(service))
        assert AttributeStore(catalog, 1).get(42) is None

    async def test_reassign_foreign_event_denied(self, service):
        with pytest.raises(AccessDenied):
            await service.assign_event_owner(11, BRANCH, await _alice(service))
