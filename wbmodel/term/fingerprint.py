"""The Fingerprint: labels, descriptions and aliases of an entity.

A Fingerprint owns exactly one TermList of labels, one TermList of
descriptions and one AliasGroupList of aliases, and is edited in place
through its per-language accessors.

Lookups and removals are asymmetric: ``get_*`` raises
NotFoundError for an absent language, while ``remove_*`` of an absent
language does nothing. Use ``has_*`` to check before a lookup.

Fingerprints are mutable and assume a single writer. Copy one with
``fingerprint.model_copy(deep=True)`` (or ``copy.deepcopy``); a shallow copy
shares its collections with the original.
"""

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from wbmodel.term.lists import AliasGroupList, TermList
from wbmodel.term.models import AliasGroup, Term


class Fingerprint(BaseModel):
    """The per-language terms describing an entity.

    Example:
        ```python
        fingerprint = Fingerprint.empty()
        fingerprint.set_label("en", "Douglas Adams")
        fingerprint.set_alias_group("en", ["DNA"])
        fingerprint.get_label("en")  # Term(language="en", text="Douglas Adams")
        ```
    """

    model_config = ConfigDict(validate_assignment=True)

    labels: TermList = Field(default_factory=lambda: TermList([]), description="Label per language.")
    descriptions: TermList = Field(default_factory=lambda: TermList([]), description="Description per language.")
    alias_groups: AliasGroupList = Field(
        default_factory=lambda: AliasGroupList([]),
        description="Aliases per language.",
    )

    @classmethod
    def empty(cls) -> "Fingerprint":
        """Return a Fingerprint with no labels, descriptions or aliases."""
        return cls(labels=TermList([]), descriptions=TermList([]), alias_groups=AliasGroupList([]))

    # --- labels ---

    def get_labels(self) -> TermList:
        return self.labels

    def set_labels(self, labels: TermList) -> None:
        """Replace all labels at once."""
        self.labels = labels

    def get_label(self, language: str) -> Term:
        """Return the label in ``language``; raises NotFoundError if absent."""
        return self.labels.get_by_language(language)

    def set_label(self, language: str, text: str) -> None:
        self.labels.set_text_for_language(language, text)

    def remove_label(self, language: str) -> None:
        self.labels.remove_by_language(language)

    def has_label(self, language: str) -> bool:
        return self.labels.has_term_for_language(language)

    # --- descriptions ---

    def get_descriptions(self) -> TermList:
        return self.descriptions

    def set_descriptions(self, descriptions: TermList) -> None:
        """Replace all descriptions at once."""
        self.descriptions = descriptions

    def get_description(self, language: str) -> Term:
        """Return the description in ``language``; raises NotFoundError if absent."""
        return self.descriptions.get_by_language(language)

    def set_description(self, language: str, text: str) -> None:
        self.descriptions.set_text_for_language(language, text)

    def remove_description(self, language: str) -> None:
        self.descriptions.remove_by_language(language)

    def has_description(self, language: str) -> bool:
        return self.descriptions.has_term_for_language(language)

    # --- aliases ---

    def get_alias_groups(self) -> AliasGroupList:
        return self.alias_groups

    def set_alias_groups(self, alias_groups: AliasGroupList) -> None:
        """Replace all alias groups at once."""
        self.alias_groups = alias_groups

    def get_alias_group(self, language: str) -> AliasGroup:
        """Return the alias group in ``language``; raises NotFoundError if absent."""
        return self.alias_groups.get_by_language(language)

    def set_alias_group(self, language: str, aliases: Iterable[str]) -> None:
        """Replace the aliases in ``language``; an empty list removes them."""
        self.alias_groups.set_aliases_for_language(language, aliases)

    def remove_alias_group(self, language: str) -> None:
        self.alias_groups.remove_by_language(language)

    def has_alias_group(self, language: str) -> bool:
        return self.alias_groups.has_group_for_language(language)

    def is_empty(self) -> bool:
        return self.labels.is_empty() and self.descriptions.is_empty() and self.alias_groups.is_empty()
