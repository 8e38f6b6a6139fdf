"""Dictionary-backed lemma lookup."""

from __future__ import annotations

import logging
from typing import List

from .inflector import Inflector
from .models import Lexicon

logger = logging.getLogger(__name__)


class Lemmatizer:
    """Maps surface words to lemmas and lemmas back to their surface forms.

    Lookups are exact and case-sensitive; callers pass normalized words
    (see :func:`wordforms.normalizer.normalize_word`). Unknown words fall
    back to the inflector's singular form, so ``dogs`` resolves to ``dog``
    even when the lexicon has never heard of dogs.
    """

    def __init__(self, lexicon: Lexicon, inflector: Inflector) -> None:
        self.lexicon = lexicon
        self.inflector = inflector

    def is_known(self, word: str) -> bool:
        return word in self.lexicon.index

    def get_lemma(self, word: str) -> str:
        """Return the lemma of ``word``; the word itself when nothing reduces it."""

        lemma = self.lexicon.index.get(word)
        if lemma is not None:
            return lemma

        singular = self.inflector.get_singular(word)
        if singular != word:
            lemma = self.lexicon.index.get(singular)
            if lemma is not None:
                return lemma
        return singular

    def get_words_from_lemma(self, lemma: str) -> List[str]:
        """Return the surface forms registered under ``lemma``."""

        entry = self.lexicon.entries.get(lemma)
        if entry is None:
            return []
        return [form for form in entry.forms if self.lexicon.index.get(form) == lemma]

    def get_words(self, word: str, inclusive: bool = False) -> List[str]:
        """Return all known words sharing the lemma of ``word``.

        ``word`` itself is left out unless ``inclusive`` is set, in which case
        it is always part of the result.
        """

        lemma = self.get_lemma(word)
        entry = self.lexicon.entries.get(lemma)

        words: List[str] = []
        # Without a lexicon entry the lemma is inferred from the inflector.
        if entry is None or entry.surface:
            words.append(lemma)
        for form in self.get_words_from_lemma(lemma):
            if form not in words:
                words.append(form)

        if inclusive:
            if word not in words:
                words.append(word)
        else:
            words = [w for w in words if w != word]
        logger.debug("words for %s (lemma %s): %s", word, lemma, words)
        return words
