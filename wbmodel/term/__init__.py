"""Multilingual terms: Term, AliasGroup, their language-keyed lists and the Fingerprint."""

from .fingerprint import Fingerprint
from .lists import AliasGroupList, TermList
from .models import AliasGroup, Term

__all__ = [
    "AliasGroup",
    "AliasGroupList",
    "Fingerprint",
    "Term",
    "TermList",
]
