"""Entity identifiers and their string serialization.

This package provides the serialization grammar (split/join of
``repository:prefix:id`` strings), the closed set of id variants and the
read-compatibility codec for the legacy structured id form.
"""

from .legacy import migrate_legacy_id, unserialize_entity_id
from .models import (
    ENTITY_ID_TYPES,
    EntityId,
    EntityIdType,
    Int32EntityId,
    ItemId,
    NumericPropertyId,
    entity_type_of,
    parse_entity_id,
)
from .serialization import join_serialization, normalize_serialization, split_serialization

__all__ = [
    "ENTITY_ID_TYPES",
    "EntityId",
    "EntityIdType",
    "Int32EntityId",
    "ItemId",
    "NumericPropertyId",
    "entity_type_of",
    "join_serialization",
    "migrate_legacy_id",
    "normalize_serialization",
    "parse_entity_id",
    "split_serialization",
    "unserialize_entity_id",
]
