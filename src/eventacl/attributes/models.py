"""Attribute data models."""

from __future__ import annotations

from pydantic import BaseModel


class AttributeDescriptor(BaseModel):
    """Physical location of one generic attribute."""

    field_id: int
    group_id: int
    group_title: str
    table_name: str
    column_name: str


AttributeKey = str | int
"""Group title (``str``) or field id (``int``) identifying an attribute."""


def parse_attribute_key(raw: str) -> AttributeKey:
    """Config values are strings; all-digit values address a field id."""
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    return raw
