"""Service object wiring inflector, lexicon and expander for a host pipeline.

The host search layer builds one :class:`WordformsService` at startup with
:func:`build_service` and registers :meth:`WordformsService.alternates_for`
as its query-expansion callback. All collaborators are passed in explicitly;
the service holds no module-level state and is read-only afterwards.
"""

from __future__ import annotations

import logging
from typing import Callable, List, MutableSequence, Optional

from . import storage
from .config import WordformsSettings
from .expander import AlternatesExpander
from .inflector import Inflector
from .lemmatizer import Lemmatizer
from .normalizer import is_valid_word, normalize_word

logger = logging.getLogger(__name__)

AlternatesHook = Callable[[str], List[str]]


class WordformsService:
    def __init__(
        self,
        inflector: Inflector,
        lemmatizer: Lemmatizer,
        settings: Optional[WordformsSettings] = None,
    ) -> None:
        self.inflector = inflector
        self.lemmatizer = lemmatizer
        self.settings = settings or WordformsSettings()
        self.expander = AlternatesExpander(inflector, lemmatizer)

    @property
    def enabled(self) -> bool:
        """``True`` when expansion is switched on for an English locale."""
        return self.settings.enabled and self.settings.is_english

    def alternates_for(self, word: object) -> List[str]:
        """Return the alternates of ``word`` for query broadening.

        Disabled expansion, a non-English locale and words that are empty or
        not alphanumeric all yield an empty list.
        """

        if not self.enabled:
            return []
        if not is_valid_word(word):
            logger.debug("Ungültiger Suchbegriff ignoriert: %r", word)
            return []

        alternates = self.expander.expand_alternates(normalize_word(str(word)))
        limit = self.settings.max_alternates
        if limit > 0:
            alternates = alternates[:limit]
        return alternates

    def as_hook(self) -> AlternatesHook:
        return self.alternates_for

    def register(self, registry: MutableSequence[AlternatesHook]) -> AlternatesHook:
        """Append the alternates hook to ``registry`` and return it."""
        hook = self.as_hook()
        registry.append(hook)
        return hook


def build_service(settings: Optional[WordformsSettings] = None) -> WordformsService:
    """Construct inflector, lexicon and lemmatizer once from ``settings``."""

    settings = settings or WordformsSettings()
    inflector = Inflector()

    if settings.lexicon is not None:
        lexicon = storage.load_lexicon(settings.lexicon)
    else:
        lexicon = storage.load_default_lexicon()
    if settings.extra_lexicons:
        lexicon = storage.merge_lexicons(
            lexicon, *(storage.load_lexicon(p) for p in settings.extra_lexicons)
        )

    logger.info(
        "Wortformen-Dienst bereit: %d Lemmata, %d Wortformen, aktiv=%s",
        len(lexicon.entries),
        len(lexicon.index),
        settings.enabled and settings.is_english,
    )
    return WordformsService(inflector, Lemmatizer(lexicon, inflector), settings)
