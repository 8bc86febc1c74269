"""Relationship-based access control over owned resources."""

from eventacl.acl.context import RequestContext
from eventacl.acl.filter import OwnershipFilter, filter_by_ownership
from eventacl.acl.service import EventACLService

__all__ = ["EventACLService", "OwnershipFilter", "RequestContext", "filter_by_ownership"]
