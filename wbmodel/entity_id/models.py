"""Entity identifiers: the base grammar and the concrete id variants.

- **EntityId**: Abstract base holding a canonical serialization such as
  ``"Q42"``, ``"foo:Q42"`` or ``"foo:bar:P7"`` and deriving its repository
  name, local part and id part from it.
- **ItemId** / **NumericPropertyId**: The concrete variants. Each validates
  its id part against a ``<letter><digits>`` pattern (letter case-insensitive
  on input, uppercase once stored) and bounds the number to a positive
  32-bit integer.

The set of variants is closed: ``ENTITY_ID_TYPES`` lists every one of them,
``parse_entity_id()`` picks the right one from a raw string and
``EntityIdType`` is the matching pydantic discriminated union for use as a
field type.

Ids are frozen pydantic models. They compare equal only to an id of the same
variant with the same serialization, never to a plain string, and they dump
to their serialization string::

    >>> ItemId("foo:q42").model_dump()
    'foo:Q42'
"""

import re
from abc import ABC, abstractmethod
from typing import Annotated, Any, ClassVar, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, model_serializer, model_validator

from wbmodel.entity_id.serialization import (
    SEPARATOR,
    join_serialization,
    normalize_serialization,
    split_serialization,
)
from wbmodel.errors import InvalidArgumentError, InvalidFormatError, OutOfRangeError


class EntityId(ABC, BaseModel):
    """Abstract base class for entity identifiers.

    Only the canonical serialization is stored; every other part is derived
    from it on access so the two can never diverge.

    Subclasses must implement:
        - `get_entity_type()`: Return the entity type token (e.g. "item").

    and may override `normalize()` to add validation of the id part.
    """

    model_config = ConfigDict(frozen=True)

    serialization: str = Field(description="Canonical serialization, e.g. 'Q42' or 'foo:bar:P7'.")

    def __init__(self, serialization: str) -> None:
        super().__init__(serialization=type(self).normalize(serialization))

    @model_validator(mode="before")
    @classmethod
    def _normalize_input(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"serialization": cls.normalize(data)}
        if isinstance(data, dict) and "serialization" in data:
            return {**data, "serialization": cls.normalize(data["serialization"])}
        return data

    @model_serializer
    def _dump_serialization(self) -> str:
        return self.serialization

    @classmethod
    def normalize(cls, serialization: Any) -> str:
        """Validate a raw serialization and return its canonical form."""
        return normalize_serialization(serialization)

    @abstractmethod
    def get_entity_type(self) -> str:
        """Return the entity type token, e.g. 'item' or 'property'."""

    @property
    def repository_name(self) -> str:
        """Name of the foreign repository, or '' for local ids."""
        return split_serialization(self.serialization)[0]

    @property
    def inner_prefix(self) -> str:
        return split_serialization(self.serialization)[1]

    @property
    def id_part(self) -> str:
        return split_serialization(self.serialization)[2]

    @property
    def local_part(self) -> str:
        """The serialization without the repository name, e.g. 'bar:Q42' for 'foo:bar:Q42'."""
        repository_name = self.repository_name
        if not repository_name:
            return self.serialization
        return self.serialization[len(repository_name) + len(SEPARATOR):]

    def is_foreign(self) -> bool:
        return self.repository_name != ""

    def __str__(self) -> str:
        return self.serialization


class Int32EntityId(EntityId):
    """Base for ids whose id part is a type letter followed by a positive int32.

    Subclasses set TYPE_LETTER and PATTERN.
    """

    MAX: ClassVar[int] = 2147483647
    TYPE_LETTER: ClassVar[str]
    PATTERN: ClassVar[re.Pattern[str]]

    @classmethod
    def normalize(cls, serialization: Any) -> str:
        repository_name, inner_prefix, id_part = split_serialization(serialization)
        cls._assert_valid_id_part(id_part)
        return join_serialization((repository_name, inner_prefix, id_part.upper()))

    @classmethod
    def _assert_valid_id_part(cls, id_part: str) -> None:
        if not cls.PATTERN.match(id_part):
            raise InvalidFormatError(f"Id part {id_part!r} must match {cls.PATTERN.pattern}")
        # The pattern forbids leading zeros, so this is a plain integer compare.
        if int(id_part[1:]) > cls.MAX:
            raise OutOfRangeError(f"Id part {id_part!r} can not exceed {cls.MAX}")

    @property
    def numeric_id(self) -> int:
        """The number after the type letter, guaranteed to be in [1, MAX]."""
        return int(self.id_part[1:])

    @classmethod
    def new_from_number(cls, numeric_id: Any) -> "Int32EntityId":
        """Construct an id from the numeric part of its serialization.

        Prefer the full serialization wherever one is available.

        Raises:
            InvalidArgumentError: If ``numeric_id`` is not numeric.
        """
        return cls(cls.TYPE_LETTER + _numeric_token(numeric_id))

    @classmethod
    def new_from_repository_and_number(cls, repository_name: str, numeric_id: Any) -> "Int32EntityId":
        """Construct an id of a (possibly foreign) repository from its number."""
        token = _numeric_token(numeric_id)
        return cls(join_serialization((repository_name, "", cls.TYPE_LETTER + token)))


_NUMERIC_STRING_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\Z", re.ASCII)


def _numeric_token(numeric_id: Any) -> str:
    """Render an int, integral float or numeric string as an id number token."""
    if isinstance(numeric_id, bool):
        raise InvalidArgumentError(f"numeric_id must be numeric, got {numeric_id!r}")
    if isinstance(numeric_id, int):
        return str(numeric_id)
    if isinstance(numeric_id, float) and numeric_id.is_integer():
        return str(int(numeric_id))
    if isinstance(numeric_id, str):
        # Surrounding whitespace is tolerated and dropped.
        token = numeric_id.strip()
        if not _NUMERIC_STRING_PATTERN.match(token):
            raise InvalidArgumentError(f"numeric_id must be numeric, got {numeric_id!r}")
        return token
    raise InvalidArgumentError(f"numeric_id must be numeric, got {numeric_id!r}")


class ItemId(Int32EntityId):
    """Identifier of an item, e.g. ``Q42``."""

    TYPE_LETTER: ClassVar[str] = "Q"
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^Q[1-9][0-9]{0,9}\Z", re.IGNORECASE)

    def get_entity_type(self) -> str:
        return "item"


class NumericPropertyId(Int32EntityId):
    """Identifier of a property, e.g. ``P31``."""

    TYPE_LETTER: ClassVar[str] = "P"
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^P[1-9][0-9]{0,9}\Z", re.IGNORECASE)

    def get_entity_type(self) -> str:
        return "property"


ENTITY_ID_TYPES: dict[str, type[Int32EntityId]] = {
    "item": ItemId,
    "property": NumericPropertyId,
}

_ENTITY_TYPES_BY_LETTER = {id_class.TYPE_LETTER: entity_type for entity_type, id_class in ENTITY_ID_TYPES.items()}


def entity_type_of(serialization: Any) -> Optional[str]:
    """Return the entity type a serialization belongs to, or None if unknown."""
    try:
        id_part = split_serialization(serialization)[2]
    except InvalidFormatError:
        return None
    return _ENTITY_TYPES_BY_LETTER.get(id_part[:1].upper())


def parse_entity_id(serialization: Any) -> Int32EntityId:
    """Construct the id variant matching the type letter of ``serialization``.

    Raises:
        InvalidFormatError: If the serialization is malformed or its type
            letter belongs to no known variant.
        OutOfRangeError: If the numeric part is too large.
    """
    split_serialization(serialization)
    entity_type = entity_type_of(serialization)
    if entity_type is None:
        raise InvalidFormatError(f"No entity id type matches {serialization!r}")
    return ENTITY_ID_TYPES[entity_type](serialization)


def _entity_type_tag(value: Any) -> Optional[str]:
    if isinstance(value, EntityId):
        return value.get_entity_type()
    if isinstance(value, dict):
        value = value.get("serialization")
    return entity_type_of(value)


EntityIdType = Annotated[
    Union[
        Annotated[ItemId, Tag("item")],
        Annotated[NumericPropertyId, Tag("property")],
    ],
    Discriminator(_entity_type_tag),
]
"""Any entity id, as a pydantic field type: ``subject: EntityIdType``."""
