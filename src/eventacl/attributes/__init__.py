"""Generic per-entity attribute storage.

An attribute is addressed by its group title or field id and resolves to
a physical ``(table_name, column_name)`` pair holding one integer value
per entity.
"""

from eventacl.attributes.models import AttributeDescriptor
from eventacl.attributes.store import AttributeCatalog, AttributeStore

__all__ = ["AttributeCatalog", "AttributeDescriptor", "AttributeStore"]
