"""Administrative operations over the configuration table.

Each operation is idempotent and returns ``"ok"`` on success; any other
return value is a human-readable error message for the admin screen.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from eventacl.repositories import resolve
from eventacl.repositories.protocols import ConfigRepository

logger = logging.getLogger(__name__)

OK = "ok"
_MAX_LENGTH = 255


class AdminConfigService:
    """Read-all, upsert-one and delete-one over a config repository."""

    def __init__(self, store: ConfigRepository) -> None:
        self._store = store

    async def get_all_rows(self) -> dict[str, str]:
        return await resolve(self._store.list_all())

    async def save_row(self, row: Mapping[str, Any]) -> str:
        """Create the row, or update it when the key already exists."""
        key = str(row.get("config_key") or "").strip()
        value = row.get("config_value")
        if not key:
            return "config_key is required"
        if value is None or str(value).strip() == "":
            return "config_value is required"
        value = str(value).strip()
        if len(key) > _MAX_LENGTH or len(value) > _MAX_LENGTH:
            return f"config_key and config_value must be at most {_MAX_LENGTH} characters"

        await resolve(self._store.set(key, value))
        logger.info("Saved config row %s=%s", key, value)
        return OK

    async def delete_row(self, row: Mapping[str, Any]) -> str:
        key = str(row.get("config_key") or "").strip()
        if not key:
            return "config_key is required"
        await resolve(self._store.delete(key))
        logger.info("Deleted config row %s", key)
        return OK
