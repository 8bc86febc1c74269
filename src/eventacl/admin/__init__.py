"""Extension configuration storage and its administrative operations."""

from eventacl.admin.service import AdminConfigService
from eventacl.admin.store import ConfigStore

__all__ = ["AdminConfigService", "ConfigStore"]
