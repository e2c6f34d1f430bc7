"""Tests for Term, AliasGroup and their language-keyed lists.

This module verifies:
- Term and AliasGroup value semantics, validation and immutability
- Alias cleanup (trimming, dropping empties and duplicates)
- TermList / AliasGroupList construction from sequences and mappings
- One entry per language, order-insensitive equality
- Lookup (raising NotFoundError), upsert and non-failing removal
- Filtering by language and conversion to plain text dicts
"""

import copy

import pytest
from pydantic import ValidationError

from wbmodel.errors import InvalidArgumentError, NotFoundError
from wbmodel.term import AliasGroup, AliasGroupList, Term, TermList


class TestTerm:
    """Tests for the Term value object."""

    def test_equal_by_value(self) -> None:
        assert Term(language="en", text="foo") == Term(language="en", text="foo")
        assert Term(language="en", text="foo") != Term(language="de", text="foo")
        assert Term(language="en", text="foo") != Term(language="en", text="bar")

    def test_immutable(self) -> None:
        term = Term(language="en", text="foo")
        with pytest.raises(ValidationError):
            term.text = "bar"  # type: ignore[misc]

    @pytest.mark.parametrize("language,text", [("", "foo"), (42, "foo"), ("en", None), ("en", 42)])
    def test_invalid_values(self, language, text) -> None:
        with pytest.raises(ValidationError):
            Term(language=language, text=text)


class TestAliasGroup:
    """Tests for the AliasGroup value object."""

    def test_aliases_are_cleaned(self) -> None:
        group = AliasGroup(language="en", aliases=[" foo ", "", "bar", "foo", "  "])
        assert group.aliases == ("foo", "bar")

    def test_order_matters_for_equality(self) -> None:
        assert AliasGroup(language="en", aliases=["a", "b"]) == AliasGroup(language="en", aliases=("a", "b"))
        assert AliasGroup(language="en", aliases=["a", "b"]) != AliasGroup(language="en", aliases=["b", "a"])

    def test_is_empty(self) -> None:
        assert AliasGroup(language="en").is_empty()
        assert AliasGroup(language="en", aliases=[" "]).is_empty()
        assert not AliasGroup(language="en", aliases=["foo"]).is_empty()

    @pytest.mark.parametrize("aliases", ["foo", [1, 2], None])
    def test_invalid_aliases(self, aliases) -> None:
        with pytest.raises(ValidationError):
            AliasGroup(language="en", aliases=aliases)


class TestTermList:
    """Tests for TermList."""

    def test_construct_from_sequence(self) -> None:
        terms = TermList([Term(language="en", text="foo"), Term(language="de", text="bar")])
        assert len(terms) == 2
        assert terms.get_by_language("de") == Term(language="de", text="bar")
        assert list(terms) == [Term(language="en", text="foo"), Term(language="de", text="bar")]

    def test_construct_from_mapping(self) -> None:
        terms = TermList.model_validate({"en": {"language": "en", "text": "foo"}})
        assert terms == TermList([Term(language="en", text="foo")])

    def test_mapping_key_must_match_language(self) -> None:
        with pytest.raises(ValidationError, match="stored under key"):
            TermList.model_validate({"en": {"language": "de", "text": "foo"}})

    def test_later_entry_for_language_wins(self) -> None:
        terms = TermList([Term(language="en", text="foo"), Term(language="en", text="bar")])
        assert len(terms) == 1
        assert terms.get_by_language("en").text == "bar"

    def test_rejects_entries_without_language(self) -> None:
        with pytest.raises(ValidationError):
            TermList(["foo"])

    def test_equality_ignores_order(self) -> None:
        en, de = Term(language="en", text="foo"), Term(language="de", text="bar")
        assert TermList([en, de]) == TermList([de, en])
        assert TermList([en]) != TermList([en, de])
        assert TermList([]) != AliasGroupList([])
        assert TermList([en]) != [en]

    def test_get_missing_language_raises(self) -> None:
        with pytest.raises(NotFoundError, match="'nl'"):
            TermList([]).get_by_language("nl")

    def test_not_found_is_a_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            TermList([]).get_by_language("nl")

    def test_set_and_remove(self) -> None:
        terms = TermList([])
        terms.set_text_for_language("en", "foo")
        terms.set_term(Term(language="en", text="bar"))
        assert terms.to_text_dict() == {"en": "bar"}
        assert terms.has_term_for_language("en")

        terms.remove_by_language("en")
        terms.remove_by_language("en")
        assert terms.is_empty()
        assert not terms.has_term_for_language("en")

    @pytest.mark.parametrize("language", [["en"], {"en": 1}, None, 42])
    def test_has_term_for_language_never_raises(self, language) -> None:
        terms = TermList([Term(language="en", text="foo")])
        assert terms.has_term_for_language(language) is False

    def test_set_term_rejects_other_types(self) -> None:
        with pytest.raises(InvalidArgumentError):
            TermList([]).set_term(AliasGroup(language="en", aliases=["foo"]))  # type: ignore[arg-type]

    def test_has_term(self) -> None:
        terms = TermList([Term(language="en", text="foo")])
        assert terms.has_term(Term(language="en", text="foo"))
        assert not terms.has_term(Term(language="en", text="bar"))
        assert not terms.has_term(Term(language="de", text="foo"))

    def test_get_with_languages(self) -> None:
        terms = TermList([Term(language=lang, text=lang.upper()) for lang in ("en", "de", "nl")])
        filtered = terms.get_with_languages(["en", "nl", "fr"])
        assert filtered == TermList([Term(language="en", text="EN"), Term(language="nl", text="NL")])
        assert len(terms) == 3

    def test_clear_and_languages(self) -> None:
        terms = TermList([Term(language="en", text="foo"), Term(language="de", text="bar")])
        assert terms.languages() == ["en", "de"]
        terms.clear()
        assert terms.is_empty()

    def test_deep_copy_is_independent(self) -> None:
        terms = TermList([Term(language="en", text="foo")])
        copied = copy.deepcopy(terms)
        copied.set_text_for_language("de", "bar")
        assert copied != terms
        assert len(terms) == 1

    def test_json_round_trip(self) -> None:
        terms = TermList([Term(language="en", text="foo"), Term(language="de", text="bar")])
        assert terms.model_dump() == {
            "en": {"language": "en", "text": "foo"},
            "de": {"language": "de", "text": "bar"},
        }
        assert TermList.model_validate_json(terms.model_dump_json()) == terms


class TestAliasGroupList:
    """Tests for AliasGroupList."""

    def test_construct_and_get(self) -> None:
        groups = AliasGroupList([AliasGroup(language="en", aliases=["foo", "bar"])])
        assert groups.get_by_language("en").aliases == ("foo", "bar")
        assert groups.has_group_for_language("en")
        assert not groups.has_group_for_language("de")

    def test_empty_groups_are_dropped(self) -> None:
        groups = AliasGroupList([AliasGroup(language="en", aliases=[]), AliasGroup(language="de", aliases=["x"])])
        assert groups.languages() == ["de"]

    def test_setting_empty_group_removes_language(self) -> None:
        groups = AliasGroupList([AliasGroup(language="en", aliases=["foo"])])
        groups.set_aliases_for_language("en", [])
        assert groups.is_empty()

    def test_set_replaces_whole_group(self) -> None:
        groups = AliasGroupList([AliasGroup(language="en", aliases=["foo", "bar"])])
        groups.set_aliases_for_language("en", ["baz"])
        assert groups.to_text_dict() == {"en": ["baz"]}

    def test_set_aliases_rejects_plain_string(self) -> None:
        with pytest.raises(InvalidArgumentError):
            AliasGroupList([]).set_aliases_for_language("en", "foo")

    @pytest.mark.parametrize("language", [["en"], {"en": 1}, None])
    def test_has_group_for_language_never_raises(self, language) -> None:
        groups = AliasGroupList([AliasGroup(language="en", aliases=["foo"])])
        assert groups.has_group_for_language(language) is False

    def test_set_group_rejects_other_types(self) -> None:
        with pytest.raises(InvalidArgumentError):
            AliasGroupList([]).set_group(Term(language="en", text="foo"))  # type: ignore[arg-type]

    def test_get_missing_language_raises(self) -> None:
        with pytest.raises(NotFoundError, match="alias group"):
            AliasGroupList([]).get_by_language("en")

    def test_remove_missing_language_is_a_no_op(self) -> None:
        groups = AliasGroupList([AliasGroup(language="en", aliases=["foo"])])
        groups.remove_by_language("de")
        assert len(groups) == 1

    def test_get_with_languages(self) -> None:
        groups = AliasGroupList([AliasGroup(language=lang, aliases=[lang]) for lang in ("en", "de")])
        assert groups.get_with_languages(["de"]) == AliasGroupList([AliasGroup(language="de", aliases=["de"])])

    def test_json_round_trip(self) -> None:
        groups = AliasGroupList([AliasGroup(language="en", aliases=["foo", "bar"])])
        assert groups.model_dump() == {"en": {"language": "en", "aliases": ("foo", "bar")}}
        assert AliasGroupList.model_validate_json(groups.model_dump_json()) == groups
