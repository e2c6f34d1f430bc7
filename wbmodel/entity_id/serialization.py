"""Splitting and joining of qualified entity id serializations.

A serialization has up to three parts separated by colons::

    [repository ':'] [prefix-chain ':'] id-part

For example ``"foo:bar:baz:Q42"`` splits into the repository name ``"foo"``,
the inner prefix chain ``"bar:baz"`` and the id part ``"Q42"``. A single
leading colon (``":Q42"``) is shorthand for "no repository" and is dropped.
Segments may not be empty and may not contain whitespace.
"""

import re
from typing import Any, Sequence

from wbmodel.errors import InvalidFormatError

SEPARATOR = ":"

SERIALIZATION_PATTERN = re.compile(r"^:?(?:[^:\s]+:)*[^:\s]+\Z")

_SEGMENT_PATTERN = re.compile(r"^[^:\s]+\Z")

_PREFIX_CHAIN_PATTERN = re.compile(r"^[^:\s]+(?::[^:\s]+)*\Z")

SerializationParts = tuple[str, str, str]


def assert_valid_serialization(serialization: Any) -> None:
    """Raise InvalidFormatError unless ``serialization`` follows the grammar."""
    if not isinstance(serialization, str):
        raise InvalidFormatError(f"Entity id serialization must be a string, got {type(serialization).__name__}")
    if serialization == "":
        raise InvalidFormatError("Entity id serialization must not be empty")
    if not SERIALIZATION_PATTERN.match(serialization):
        raise InvalidFormatError(f"Entity id serialization {serialization!r} must match {SERIALIZATION_PATTERN.pattern}")


def split_serialization(serialization: Any) -> SerializationParts:
    """Split a serialization into (repository name, inner prefix, id part).

    Args:
        serialization: A raw id string such as ``"Q42"`` or ``"foo:bar:Q42"``.

    Returns:
        A three-tuple; the repository name and inner prefix are ``""`` when
        absent.

    Raises:
        InvalidFormatError: If the serialization is not a string, is empty,
            has empty or whitespace-containing segments.
    """
    assert_valid_serialization(serialization)

    segments = serialization.split(SEPARATOR)
    if segments[0] == "":
        segments = segments[1:]

    id_part = segments.pop()
    repository_name = segments.pop(0) if segments else ""
    return repository_name, SEPARATOR.join(segments), id_part


def join_serialization(parts: Sequence[str]) -> str:
    """Join (repository name, inner prefix, id part) back into a serialization.

    Empty leading parts are skipped, so this is the exact inverse of
    split_serialization() for every valid serialization without a leading
    colon.

    Raises:
        InvalidFormatError: If ``parts`` is not three strings, the id part
            is empty, or a part could not be split back out unchanged (it
            holds whitespace, or a colon outside the inner prefix chain).
    """
    if not isinstance(parts, (list, tuple)) or len(parts) != 3 or not all(isinstance(part, str) for part in parts):
        raise InvalidFormatError(f"Serialization parts must be three strings, got {parts!r}")
    if parts[2] == "":
        raise InvalidFormatError("The id part of a serialization must not be empty")
    repository_name, inner_prefix, id_part = parts
    for part in (repository_name, id_part):
        if part and not _SEGMENT_PATTERN.match(part):
            raise InvalidFormatError(f"Serialization part {part!r} must match {_SEGMENT_PATTERN.pattern}")
    if inner_prefix and not _PREFIX_CHAIN_PATTERN.match(inner_prefix):
        raise InvalidFormatError(f"Inner prefix {inner_prefix!r} must match {_PREFIX_CHAIN_PATTERN.pattern}")
    return SEPARATOR.join(part for part in parts if part != "")


def normalize_serialization(serialization: str) -> str:
    """Validate a serialization and drop its optional leading colon."""
    return join_serialization(split_serialization(serialization))
