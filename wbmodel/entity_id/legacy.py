"""Read compatibility for the legacy structured id serialization.

Ids used to be persisted as a JSON pair of the entity type and the local id,
``["item", "Q123"]``. Current data stores the plain serialization, ``Q123``.
This module turns either shape into an id object; nothing here is used by the
primary construction path, so it can be removed once no old data remains.

Accepting the legacy shape can be switched off with
``accept_legacy_serialization = false`` in wbmodel.toml.
"""

import json
from typing import Any, Optional, Sequence

from wbmodel.config import load_config
from wbmodel.entity_id.models import ENTITY_ID_TYPES, Int32EntityId, parse_entity_id
from wbmodel.errors import InvalidFormatError
from wbmodel.logging import setup_logging

logger = setup_logging(__name__)


def is_legacy_pair(value: Any) -> bool:
    """Return True if ``value`` has the shape of a legacy [type, id] pair."""
    return isinstance(value, (list, tuple)) and len(value) == 2 and all(isinstance(v, str) for v in value)


def migrate_legacy_id(pair: Sequence[str], id_class: Optional[type[Int32EntityId]] = None) -> Int32EntityId:
    """Build the id described by a legacy ``[entity_type, local_id]`` pair.

    Args:
        pair: The decoded legacy pair, e.g. ``["item", "Q123"]``.
        id_class: Expected id class; its entity type must match the pair's.

    Returns:
        The same id as constructing the variant directly from ``local_id``.

    Raises:
        InvalidFormatError: If the pair is malformed, names an unknown entity
            type or one that differs from ``id_class``.
    """
    if not is_legacy_pair(pair):
        raise InvalidFormatError(f"Legacy id must be a [entity_type, id] pair, got {pair!r}")
    entity_type, local_id = pair
    if entity_type not in ENTITY_ID_TYPES:
        raise InvalidFormatError(f"Unknown entity type {entity_type!r} in legacy id {pair!r}")
    legacy_class = ENTITY_ID_TYPES[entity_type]
    if id_class is not None and legacy_class is not id_class:
        raise InvalidFormatError(f"Legacy id {pair!r} is not a {id_class.__name__}")
    entity_id = legacy_class(local_id)
    logger.debug(
        {
            "message": "Migrated legacy entity id",
            "legacy": list(pair),
            "serialization": entity_id.serialization,
        }
    )
    return entity_id


def unserialize_entity_id(payload: str, id_class: Optional[type[Int32EntityId]] = None) -> Int32EntityId:
    """Turn a stored id payload back into an id object.

    Args:
        payload: Either a plain serialization (``"Q123"``) or the JSON text of
            a legacy pair (``'["item","Q123"]'``).
        id_class: Expected id class. When omitted, the variant is chosen from
            the legacy entity type or from the serialization's type letter.

    Raises:
        InvalidFormatError: If the payload is malformed, or is a legacy pair
            while legacy payloads are disabled in the config.
    """
    if not isinstance(payload, str):
        raise InvalidFormatError(f"Serialized entity id must be a string, got {type(payload).__name__}")

    decoded = _decode_json(payload)
    if isinstance(decoded, list):
        if not load_config().accept_legacy_serialization:
            raise InvalidFormatError(f"Legacy entity id serialization {payload!r} is not accepted")
        return migrate_legacy_id(decoded, id_class)

    if id_class is not None:
        return id_class(payload)
    return parse_entity_id(payload)


def _decode_json(payload: str) -> Any:
    """Decode ``payload`` as JSON, or return None if it is not JSON."""
    try:
        return json.loads(payload)
    except json.JSONDecodeError:
        return None
