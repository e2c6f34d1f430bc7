"""Exceptions raised by the identifier and terminology model.

All errors share the `DataModelError` root so callers can catch everything
this package raises with one clause, while still being usable as the
builtin exception each one specializes:

- **InvalidFormatError**: a serialization does not follow the identifier
  grammar or the variant's id pattern.
- **OutOfRangeError**: a numeric identifier exceeds the variant's bound.
- **InvalidArgumentError**: a value of the wrong kind was supplied (e.g. a
  non-numeric value where a number is required).
- **NotFoundError**: a per-language lookup targets an absent language.
"""


class DataModelError(Exception):
    """Base class for all errors raised by wbmodel."""


class InvalidFormatError(DataModelError, ValueError):
    """Raised when a serialization fails the identifier grammar."""


class OutOfRangeError(DataModelError, ValueError):
    """Raised when a numeric identifier exceeds its allowed range."""


class InvalidArgumentError(DataModelError, ValueError):
    """Raised when an argument has the wrong kind of value."""


class NotFoundError(DataModelError, LookupError):
    """Raised when a lookup targets a language that is not present."""
