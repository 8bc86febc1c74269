"""Exceptions raised by the ACL core."""

from __future__ import annotations

from eventacl.core.types import ResourceKind


class ACLError(Exception):
    """Base class for ACL errors."""


class ConfigurationMissing(ACLError):
    """A required config key or attribute mapping does not exist.

    Fatal for the request: without the owner attribute no ownership
    decision can be made.
    """


class AccessDenied(ACLError):
    """The caller's closure does not contain the resource owner."""

    def __init__(self, resource_kind: ResourceKind, resource_id: int) -> None:
        self.resource_kind = resource_kind
        self.resource_id = resource_id
        super().__init__(
            f"You do not have permission to access this {resource_kind} ({resource_id})"
        )
