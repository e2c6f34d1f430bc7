"""Language-indexed collections of terms and alias groups.

- **TermList**: at most one Term per language (labels, descriptions).
- **AliasGroupList**: at most one AliasGroup per language.

Both are mutable Pydantic root models over a ``dict`` keyed by language, so
equality ignores insertion order and they serialize to the familiar
``{"en": {"language": "en", ...}}`` shape. They can be built from a sequence
of entries (a later entry for the same language replaces an earlier one) or
from such a mapping.
"""

from typing import Any, ClassVar, Iterable, Iterator

from pydantic import Field, RootModel, model_validator

from wbmodel.errors import InvalidArgumentError, NotFoundError
from wbmodel.term.models import AliasGroup, Term


def _index_by_language(entries: Any) -> Any:
    """Turn a sequence of entries into a mapping keyed by their language."""
    if not isinstance(entries, (list, tuple)):
        return entries
    indexed: dict[str, Any] = {}
    for entry in entries:
        language = entry.get("language") if isinstance(entry, dict) else getattr(entry, "language", None)
        if not isinstance(language, str):
            raise ValueError(f"Entry {entry!r} has no language")
        indexed[language] = entry
    return indexed


def _assert_keys_match_languages(entries: dict[str, Any]) -> None:
    for language, entry in entries.items():
        if entry.language != language:
            raise ValueError(f"Entry for language {entry.language!r} is stored under key {language!r}")


class _LanguageIndexed:
    """Behaviour shared by the language-keyed root models.

    Subclasses are RootModels whose ``root`` is a dict of entries keyed by
    language; iteration yields the entries.
    """

    ENTRY_KIND = "entry"

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(list(self.root.values()))  # type: ignore[attr-defined]

    def __len__(self) -> int:
        return len(self.root)  # type: ignore[attr-defined]

    def languages(self) -> list[str]:
        return list(self.root)  # type: ignore[attr-defined]

    def get_by_language(self, language: str) -> Any:
        """Return the entry for ``language``.

        Raises:
            NotFoundError: If there is no entry for that language.
        """
        try:
            return self.root[language]  # type: ignore[attr-defined]
        except KeyError:
            raise NotFoundError(f"No {self.ENTRY_KIND} for language {language!r}") from None

    def remove_by_language(self, language: str) -> None:
        """Remove the entry for ``language``; does nothing if there is none."""
        self.root.pop(language, None)  # type: ignore[attr-defined]

    def is_empty(self) -> bool:
        return not self.root  # type: ignore[attr-defined]

    def clear(self) -> None:
        self.root.clear()  # type: ignore[attr-defined]


class TermList(_LanguageIndexed, RootModel[dict[str, Term]]):
    """An unordered collection of Terms with at most one Term per language.

    Example:
        ```python
        labels = TermList([Term(language="en", text="foo")])
        labels.set_text_for_language("de", "bar")
        labels.to_text_dict()  # {"en": "foo", "de": "bar"}
        ```
    """

    ENTRY_KIND: ClassVar[str] = "term"

    root: dict[str, Term] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _accept_sequence(cls, data: Any) -> Any:
        return _index_by_language(data)

    @model_validator(mode="after")
    def _keys_match_languages(self) -> "TermList":
        _assert_keys_match_languages(self.root)
        return self

    def has_term_for_language(self, language: str) -> bool:
        return isinstance(language, str) and language in self.root

    def has_term(self, term: Term) -> bool:
        """Return True if exactly this term (language and text) is present."""
        return self.root.get(term.language) == term

    def set_term(self, term: Term) -> None:
        """Add ``term``, replacing any Term with the same language."""
        if not isinstance(term, Term):
            raise InvalidArgumentError(f"TermList only holds Term instances, got {type(term).__name__}")
        self.root[term.language] = term

    def set_text_for_language(self, language: str, text: str) -> None:
        self.set_term(Term(language=language, text=text))

    def get_with_languages(self, languages: Iterable[str]) -> "TermList":
        """Return a new TermList with only the Terms in ``languages``."""
        wanted = set(languages)
        return TermList([term for term in self.root.values() if term.language in wanted])

    def to_text_dict(self) -> dict[str, str]:
        return {language: term.text for language, term in self.root.items()}


class AliasGroupList(_LanguageIndexed, RootModel[dict[str, AliasGroup]]):
    """An unordered collection of AliasGroups with at most one group per language.

    Empty groups are never stored: setting an empty group for a language
    removes that language.
    """

    ENTRY_KIND: ClassVar[str] = "alias group"

    root: dict[str, AliasGroup] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _accept_sequence(cls, data: Any) -> Any:
        return _index_by_language(data)

    @model_validator(mode="after")
    def _drop_empty_groups(self) -> "AliasGroupList":
        _assert_keys_match_languages(self.root)
        for language in [language for language, group in self.root.items() if group.is_empty()]:
            del self.root[language]
        return self

    def has_group_for_language(self, language: str) -> bool:
        return isinstance(language, str) and language in self.root

    def set_group(self, group: AliasGroup) -> None:
        """Add ``group``, replacing any group with the same language.

        An empty group removes the language instead.
        """
        if not isinstance(group, AliasGroup):
            raise InvalidArgumentError(f"AliasGroupList only holds AliasGroup instances, got {type(group).__name__}")
        if group.is_empty():
            self.remove_by_language(group.language)
        else:
            self.root[group.language] = group

    def set_aliases_for_language(self, language: str, aliases: Iterable[str]) -> None:
        if isinstance(aliases, str):
            raise InvalidArgumentError(f"aliases must be a sequence of strings, got the string {aliases!r}")
        self.set_group(AliasGroup(language=language, aliases=tuple(aliases)))

    def get_with_languages(self, languages: Iterable[str]) -> "AliasGroupList":
        """Return a new AliasGroupList with only the groups in ``languages``."""
        wanted = set(languages)
        return AliasGroupList([group for group in self.root.values() if group.language in wanted])

    def to_text_dict(self) -> dict[str, list[str]]:
        return {language: list(group.aliases) for language, group in self.root.items()}
