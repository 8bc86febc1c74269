"""Core type definitions shared across eventacl modules."""

from __future__ import annotations

from enum import StrEnum


class ResourceKind(StrEnum):
    """Kinds of owned resources the ACL can filter."""

    EVENT = "event"
    PARTICIPANT = "participant"
    CONTRIBUTION = "contribution"


class AccessMode(StrEnum):
    """Whether a request filters a collection or gates a single record."""

    FILTER = "filter"
    GATE = "gate"


class RequestKind(StrEnum):
    """Host request kinds the ACL is applied to.

    The host passes one of these instead of its own page or form class,
    which decides the resource kind and access mode.
    """

    MANAGE_EVENTS = "manage_events"
    EVENT_DASHBOARD = "event_dashboard"
    EVENT_REPORT = "event_report"
    EVENT_EDIT = "event_edit"
    CONTACT_EVENTS_TAB = "contact_events_tab"
    PARTICIPANT_SEARCH = "participant_search"
    PARTICIPANT_EDIT = "participant_edit"
    CONTRIBUTION_SEARCH = "contribution_search"
    CONTRIBUTION_DASHBOARD = "contribution_dashboard"
    CONTACT_CONTRIBUTIONS_TAB = "contact_contributions_tab"
    CONTRIBUTION_REPORT = "contribution_report"
    CONTRIBUTION_EDIT = "contribution_edit"

    @property
    def resource_kind(self) -> ResourceKind:
        return _REQUEST_RESOURCES[self][0]

    @property
    def mode(self) -> AccessMode:
        return _REQUEST_RESOURCES[self][1]


_REQUEST_RESOURCES: dict[RequestKind, tuple[ResourceKind, AccessMode]] = {
    RequestKind.MANAGE_EVENTS: (ResourceKind.EVENT, AccessMode.FILTER),
    RequestKind.EVENT_DASHBOARD: (ResourceKind.EVENT, AccessMode.FILTER),
    RequestKind.EVENT_REPORT: (ResourceKind.EVENT, AccessMode.FILTER),
    RequestKind.EVENT_EDIT: (ResourceKind.EVENT, AccessMode.GATE),
    RequestKind.CONTACT_EVENTS_TAB: (ResourceKind.PARTICIPANT, AccessMode.FILTER),
    RequestKind.PARTICIPANT_SEARCH: (ResourceKind.PARTICIPANT, AccessMode.FILTER),
    RequestKind.PARTICIPANT_EDIT: (ResourceKind.PARTICIPANT, AccessMode.GATE),
    RequestKind.CONTRIBUTION_SEARCH: (ResourceKind.CONTRIBUTION, AccessMode.FILTER),
    RequestKind.CONTRIBUTION_DASHBOARD: (ResourceKind.CONTRIBUTION, AccessMode.FILTER),
    RequestKind.CONTACT_CONTRIBUTIONS_TAB: (ResourceKind.CONTRIBUTION, AccessMode.FILTER),
    RequestKind.CONTRIBUTION_REPORT: (ResourceKind.CONTRIBUTION, AccessMode.FILTER),
    RequestKind.CONTRIBUTION_EDIT: (ResourceKind.CONTRIBUTION, AccessMode.GATE),
}
