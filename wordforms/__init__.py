"""English word forms: inflection, lemmas and search alternates."""

# Package exports should be side-effect free.

from . import (
    models,
    rules,
    normalizer,
    inflector,
    storage,
    lemmatizer,
    expander,
    config,
    service,
)
from .expander import AlternatesExpander
from .inflector import Inflector
from .lemmatizer import Lemmatizer
from .service import WordformsService, build_service

__all__ = [
    "models",
    "rules",
    "normalizer",
    "inflector",
    "storage",
    "lemmatizer",
    "expander",
    "config",
    "service",
    "AlternatesExpander",
    "Inflector",
    "Lemmatizer",
    "WordformsService",
    "build_service",
]
