"""YAML fixtures for the in-memory stores.

Used when no database is configured: development servers and API tests
run against a small graph loaded from ``config/acl_fixtures.yml``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from eventacl.acl.links import ResourceLinkStore
from eventacl.admin.store import ConfigStore
from eventacl.attributes.models import AttributeDescriptor
from eventacl.attributes.store import AttributeCatalog
from eventacl.graph.models import RelationshipEdge
from eventacl.graph.store import RelationshipStore
from eventacl.identity.mapping import IdentityMap

_DEFAULT_FIXTURES_PATH = Path(__file__).resolve().parents[2] / "config" / "acl_fixtures.yml"


class InMemoryStores:
    """The full set of in-memory stores the ACL service needs."""

    def __init__(self) -> None:
        self.relationships = RelationshipStore()
        self.catalog = AttributeCatalog()
        self.links = ResourceLinkStore()
        self.config = ConfigStore()
        self.identity = IdentityMap()


def load_fixtures(path: str | Path | None = None) -> InMemoryStores:
    """Build in-memory stores from a fixtures file. A missing file gives empty stores."""
    stores = InMemoryStores()
    path = Path(path) if path else _DEFAULT_FIXTURES_PATH
    if not path.exists():
        return stores
    with open(path) as fh:
        data: dict[str, Any] = yaml.safe_load(fh) or {}

    for user in data.get("users", []):
        stores.identity.link(str(user["user_id"]), int(user["party_id"]))

    for edge in data.get("relationships", []):
        stores.relationships.add_edge(RelationshipEdge(**edge))

    for attribute in data.get("attributes", []):
        values = attribute.pop("values", {}) or {}
        descriptor = AttributeDescriptor(**attribute)
        stores.catalog.register(descriptor)
        rows = stores.catalog.values(descriptor)
        for entity_id, value in values.items():
            if value:
                rows[int(entity_id)] = int(value)

    for participant in data.get("participants", []):
        stores.links.add_participant(int(participant["id"]), int(participant["event_id"]))

    for payment in data.get("participant_payments", []):
        stores.links.add_participant_payment(
            int(payment["contribution_id"]), int(payment["participant_id"])
        )

    for key, value in (data.get("config") or {}).items():
        stores.config.set(str(key), str(value))

    return stores
