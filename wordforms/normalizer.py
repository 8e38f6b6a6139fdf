"""Helpers to normalize words before lookup."""

from __future__ import annotations

import re

_WORD_RE = re.compile(r"^[A-Za-z0-9]+$")


def normalize_word(word: str) -> str:
    """Return a standardized representation of ``word`` for matching."""

    if not isinstance(word, str):
        return ""

    return word.lower().strip()


def is_valid_word(word: object) -> bool:
    """Return ``True`` for non-empty ASCII alphanumeric tokens."""

    return isinstance(word, str) and bool(_WORD_RE.match(word))


def match_case(source: str, result: str) -> str:
    """Apply the capitalisation style of ``source`` to ``result``."""

    if not source or source.islower():
        return result
    if source.isupper() and len(source) > 1:
        return result.upper()
    if source[0].isupper():
        return result[:1].upper() + result[1:]
    return result
