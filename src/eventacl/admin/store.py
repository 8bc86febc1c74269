"""In-memory configuration store."""

from __future__ import annotations


class ConfigStore:
    """In-memory ``config_key -> config_value`` table."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def list_all(self) -> dict[str, str]:
        return dict(self._values)
