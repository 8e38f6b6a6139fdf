"""Wortalternativen für die Sucherweiterung.

Das Modul setzt Inflector und Lemmatizer zu einer geordneten, duplikatfreien
Liste verwandter Wortformen zusammen. Die Suchschicht ruft
:meth:`AlternatesExpander.expand_alternates` pro Suchbegriff auf und erweitert
damit exakte Treffer um Plural-, Singular- und Lemmaformen.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from .inflector import Inflector
from .lemmatizer import Lemmatizer

logger = logging.getLogger(__name__)


def _append_unique(target: List[str], value: str) -> None:
    if value and value not in target:
        target.append(value)


class AlternatesExpander:
    """Erzeugt alternative Wortformen für einen einzelnen Suchbegriff."""

    def __init__(self, inflector: Inflector, lemmatizer: Lemmatizer) -> None:
        self.inflector = inflector
        self.lemmatizer = lemmatizer

    def expand_alternates(self, word: str) -> List[str]:
        """Gibt Lemma, bekannte Formen sowie Plural und Singular von ``word`` zurück.

        ``word`` selbst erscheint nur, wenn es als Plural- oder Singularform
        berechnet wurde. Die Reihenfolge folgt der ersten Fundstelle.
        """

        inflector = self.inflector
        lemma = self.lemmatizer.get_lemma(word)

        alternates: List[str] = []
        if lemma != word:
            alternates.append(lemma)
        for form in self.lemmatizer.get_words_from_lemma(lemma):
            _append_unique(alternates, form)

        # Ist das Wort bereits das Lemma, werden beide Formen direkt davon
        # abgeleitet; sonst kommt der Singular aus dem Plural des Lemmas.
        if word == lemma:
            plural = word if inflector.is_plural(word) else inflector.get_plural(word)
            singular = inflector.get_singular(word) if plural == word else word
        else:
            plural = inflector.get_plural(lemma)
            singular = inflector.get_singular(plural)

        # Ohne Numerusunterschied (sheep, xyzzy) ist nichts Neues zu ergänzen:
        # beide Formen sind dann das Wort selbst oder das bereits gesetzte Lemma.
        if plural != singular:
            _append_unique(alternates, plural)
            _append_unique(alternates, singular)

        logger.debug("Alternativen für %s: %s", word, alternates)
        return alternates

    def expand_terms(self, words: Iterable[str]) -> Dict[str, List[str]]:
        """Erweitert jeden Begriff aus ``words`` einzeln."""

        expanded: Dict[str, List[str]] = {}
        for word in words:
            if word in expanded:
                continue
            expanded[word] = self.expand_alternates(word)
        return expanded
