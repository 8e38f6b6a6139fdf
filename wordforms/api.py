"""Flask-Blueprint mit Wortformen-Endpunkten.

Die Endpunkte dienen als schlanker Vertragstest für den Wortformen-Dienst:
Die Suchschicht bindet denselben :class:`WordformsService` ein, der hier
übergeben wird, und kann so Erweiterungen im Browser oder per ``curl`` prüfen.
"""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from .normalizer import is_valid_word, normalize_word
from .service import WordformsService


def create_blueprint(service: WordformsService) -> Blueprint:
    """Return a blueprint serving ``service`` under ``/api/wordforms``."""

    bp = Blueprint("wordforms", __name__, url_prefix="/api/wordforms")

    def _invalid(word: str) -> Any:
        return jsonify({"error": "invalid word", "word": word}), 400

    @bp.route("/", methods=["GET"])
    def root() -> Any:
        """Einfacher Bereitschaftsendpunkt."""
        return jsonify({"status": "ok", "enabled": service.enabled})

    @bp.route("/alternates/<word>", methods=["GET"])
    def alternates(word: str) -> Any:
        """Gibt die Alternativen für ``word`` zurück."""
        if not is_valid_word(word):
            return _invalid(word)
        return jsonify({"word": word, "alternates": service.alternates_for(word)})

    @bp.route("/lemma/<word>", methods=["GET"])
    def lemma(word: str) -> Any:
        """Gibt Lemma und verwandte Wortformen zurück."""
        if not is_valid_word(word):
            return _invalid(word)
        norm = normalize_word(word)
        lemmatizer = service.lemmatizer
        return jsonify(
            {
                "word": norm,
                "lemma": lemmatizer.get_lemma(norm),
                "words": lemmatizer.get_words(norm, inclusive=True),
            }
        )

    @bp.route("/inflect/<word>", methods=["GET"])
    def inflect(word: str) -> Any:
        """Gibt Plural, Singular und Klassifikation von ``word`` zurück."""
        if not is_valid_word(word):
            return _invalid(word)
        inflector = service.inflector
        norm = normalize_word(word)
        return jsonify(
            {
                "word": norm,
                "plural": inflector.get_plural(norm),
                "singular": inflector.get_singular(norm),
                "is_plural": inflector.is_plural(norm),
                "is_singular": inflector.is_singular(norm),
            }
        )

    @bp.route("/expand", methods=["POST"])
    def expand() -> Any:
        """Erweitert mehrere Begriffe (``{"terms": [...]}``) auf einmal."""
        data = request.get_json(silent=True) or {}
        terms = data.get("terms") if isinstance(data, dict) else None
        if not isinstance(terms, list):
            return jsonify({"error": "terms must be a list"}), 400
        result = {}
        for term in terms:
            if isinstance(term, str) and term not in result:
                result[term] = service.alternates_for(term)
        return jsonify({"alternates": result})

    return bp
