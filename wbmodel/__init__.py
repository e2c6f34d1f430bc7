"""
Wikibase-style identifier and terminology data model.

This package defines:

- Entity identifiers (ItemId, NumericPropertyId) with their
  ``repository:prefix:id`` serialization grammar and validation
- The Fingerprint of an entity: labels, descriptions and aliases per language
- Error types for malformed, out-of-range and missing values

It has no knowledge of storage, networking or rendering; the integrating
application supplies all I/O.
"""

from wbmodel.entity_id import (
    ENTITY_ID_TYPES,
    EntityId,
    EntityIdType,
    ItemId,
    NumericPropertyId,
    join_serialization,
    parse_entity_id,
    split_serialization,
    unserialize_entity_id,
)
from wbmodel.errors import (
    DataModelError,
    InvalidArgumentError,
    InvalidFormatError,
    NotFoundError,
    OutOfRangeError,
)
from wbmodel.term import AliasGroup, AliasGroupList, Fingerprint, Term, TermList

__all__ = [
    "AliasGroup",
    "AliasGroupList",
    "DataModelError",
    "ENTITY_ID_TYPES",
    "EntityId",
    "EntityIdType",
    "Fingerprint",
    "InvalidArgumentError",
    "InvalidFormatError",
    "ItemId",
    "NotFoundError",
    "NumericPropertyId",
    "OutOfRangeError",
    "Term",
    "TermList",
    "join_serialization",
    "parse_entity_id",
    "split_serialization",
    "unserialize_entity_id",
]

__version__ = "0.1.0"
