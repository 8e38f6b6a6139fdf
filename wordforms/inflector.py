"""Rule-based English singular/plural conversion.

:class:`Inflector` decides whether a word is singular or plural and converts
between the two forms. It never raises for string input: a word no rule
understands comes back unchanged, so the search pipeline keeps working for
foreign words, identifiers and typos.
"""

from __future__ import annotations

import logging
import re
from typing import FrozenSet, List, Mapping, Optional, Pattern, Sequence, Tuple

from . import rules
from .models import InflectionRule
from .normalizer import match_case

logger = logging.getLogger(__name__)

_VOWEL_RE = re.compile(r"[aeiou]")

_CompiledRule = Tuple[Pattern[str], InflectionRule]


def _compile(table: Sequence[InflectionRule]) -> List[_CompiledRule]:
    return [(re.compile(r"(?:%s)$" % rule.pattern), rule) for rule in table]


class Inflector:
    """Converts English nouns between singular and plural.

    The rule tables default to :mod:`wordforms.rules`; tests and callers may
    pass their own. The instance is read-only after construction and can be
    shared between threads.
    """

    def __init__(
        self,
        plural_rules: Optional[Sequence[InflectionRule]] = None,
        singular_rules: Optional[Sequence[InflectionRule]] = None,
        irregulars: Optional[Mapping[str, str]] = None,
        invariant: Optional[FrozenSet[str]] = None,
        closed_class: Optional[FrozenSet[str]] = None,
        vowelless: Optional[FrozenSet[str]] = None,
    ) -> None:
        self._plural_rules = _compile(
            rules.PLURAL_RULES if plural_rules is None else plural_rules
        )
        self._singular_rules = _compile(
            rules.SINGULAR_RULES if singular_rules is None else singular_rules
        )
        irregular_map = rules.IRREGULARS if irregulars is None else irregulars
        self._plural_of = dict(irregular_map)
        self._singular_of = {p: s for s, p in irregular_map.items()}
        self._invariant = rules.INVARIANT_NOUNS if invariant is None else invariant
        self._closed_class = (
            rules.CLOSED_CLASS_WORDS if closed_class is None else closed_class
        )
        self._vowelless = rules.VOWELLESS_WORDS if vowelless is None else vowelless

    # ------------------------------------------------------------------
    # classification
    # ------------------------------------------------------------------

    def _inflectable(self, word: str) -> bool:
        if word in self._closed_class:
            return False
        if _VOWEL_RE.search(word):
            return True
        return word in self._vowelless or word[:-1] in self._vowelless

    def _match(
        self, table: List[_CompiledRule], word: str
    ) -> Optional[InflectionRule]:
        for pattern, rule in table:
            if word in rule.exceptions:
                continue
            if pattern.search(word):
                return rule
        return None

    def is_plural(self, word: str) -> bool:
        """Return ``True`` if ``word`` is judged a plural form."""

        w = word.lower()
        if not w:
            return False
        if w in self._invariant or w in self._singular_of:
            return True
        if w in self._plural_of or not self._inflectable(w):
            return False
        rule = self._match(self._singular_rules, w)
        return rule is not None and not rule.is_identity

    def is_singular(self, word: str) -> bool:
        """Return ``True`` if ``word`` is judged a singular/base form.

        Invariant nouns such as ``sheep`` are both singular and plural.
        """

        w = word.lower()
        if not w:
            return False
        if w in self._invariant or w in self._plural_of:
            return True
        if w in self._singular_of:
            return False
        return not self.is_plural(w)

    # ------------------------------------------------------------------
    # conversion
    # ------------------------------------------------------------------

    def get_plural(self, word: str) -> str:
        """Return the plural of ``word`` or ``word`` itself if none applies."""

        w = word.lower()
        if not w or self.is_plural(w):
            return word
        irregular = self._plural_of.get(w)
        if irregular is not None:
            return match_case(word, irregular)
        if not self._inflectable(w):
            return word
        rule = self._match(self._plural_rules, w)
        if rule is None or rule.is_identity:
            return word
        stem = w[: len(w) - len(rule.singular)]
        logger.debug("pluralize %s via -%s rule", w, rule.singular or "0")
        return match_case(word, stem + rule.plural)

    def get_singular(self, word: str) -> str:
        """Return the singular of ``word`` or ``word`` itself if none applies."""

        w = word.lower()
        if not w or not self.is_plural(w):
            return word
        if w in self._invariant:
            return word
        irregular = self._singular_of.get(w)
        if irregular is not None:
            return match_case(word, irregular)
        rule = self._match(self._singular_rules, w)
        if rule is None or rule.is_identity:
            return word
        stem = w[: len(w) - len(rule.plural)]
        logger.debug("singularize %s via -%s rule", w, rule.plural)
        return match_case(word, stem + rule.singular)
