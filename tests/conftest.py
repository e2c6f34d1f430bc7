"""Shared fixtures for the wbmodel test suite.

This module provides:
- A populated Fingerprint with English and German labels, descriptions and
  aliases, rebuilt for every test so mutations never leak between tests
- Factory helpers for building Fingerprints from plain text dicts
- A config fixture that isolates tests from any wbmodel.toml on the machine
"""

from typing import Optional

import pytest

from wbmodel.config import CONFIG_ENV_VAR, load_config
from wbmodel.term import AliasGroup, AliasGroupList, Fingerprint, Term, TermList


def make_fingerprint(
    labels: Optional[dict[str, str]] = None,
    descriptions: Optional[dict[str, str]] = None,
    aliases: Optional[dict[str, list[str]]] = None,
) -> Fingerprint:
    """Build a Fingerprint from ``{language: text}`` style dicts.

    Args:
        labels: Label text per language.
        descriptions: Description text per language.
        aliases: Alias list per language.

    Returns:
        A Fingerprint built from independently constructed collections.
    """
    return Fingerprint(
        labels=TermList([Term(language=lang, text=text) for lang, text in (labels or {}).items()]),
        descriptions=TermList([Term(language=lang, text=text) for lang, text in (descriptions or {}).items()]),
        alias_groups=AliasGroupList(
            [AliasGroup(language=lang, aliases=tuple(group)) for lang, group in (aliases or {}).items()]
        ),
    )


@pytest.fixture
def fingerprint() -> Fingerprint:
    """Provide a Fingerprint with 'en' and 'de' entries in every collection."""
    return make_fingerprint(
        labels={"en": "enlabel", "de": "delabel"},
        descriptions={"en": "endescription", "de": "dedescription"},
        aliases={"en": ["enalias"], "de": ["dealias"]},
    )


@pytest.fixture
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Run a test with no config env var, cwd in a temp dir and a fresh config cache.

    Yields the temp directory so tests can write a wbmodel.toml into it.
    """
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    load_config.cache_clear()
    yield tmp_path
    load_config.cache_clear()
