"""Per-language term values: Term and AliasGroup.

Both are frozen (immutable) Pydantic models compared by value. They are the
entries of TermList and AliasGroupList respectively.
"""

from pydantic import BaseModel, Field, field_validator


class Term(BaseModel, frozen=True):
    """A single label or description text in one language.

    Example:
        ```python
        Term(language="en", text="Douglas Adams")
        ```
    """

    language: str = Field(min_length=1, description="Language code, e.g. 'en' or 'de-ch'.")
    text: str = Field(description="The label or description text.")


class AliasGroup(BaseModel, frozen=True):
    """The alternative names of an entity in one language.

    Aliases are stripped of surrounding whitespace; empty aliases and
    repeated aliases are dropped, keeping the first occurrence. Order is
    otherwise preserved and is part of equality.
    """

    language: str = Field(min_length=1, description="Language code, e.g. 'en'.")
    aliases: tuple[str, ...] = Field(default=(), description="Ordered alternative names.")

    @field_validator("aliases")
    @classmethod
    def _clean_aliases(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        stripped = (alias.strip() for alias in value)
        return tuple(dict.fromkeys(alias for alias in stripped if alias))

    def is_empty(self) -> bool:
        return not self.aliases
