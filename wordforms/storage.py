"""Storage helpers for lemma lexicons.

A lexicon file is a JSON object keyed by lemma. Two entry shapes are
accepted::

    {"party": ["parties"],
     "happy": {"inflections": ["happier", "happiest"],
               "derived": ["happiness", "happily"]}}

Loading tolerates BOMs, UTF-16 and stray control characters, normalises
words to lower case and rebuilds the reverse index. A surface form claimed
by two lemmas keeps its first lemma; the later claim is dropped with a
warning so that every form resolves to exactly one lemma.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List

from .models import LemmaEntry, Lexicon
from .normalizer import normalize_word

logger = logging.getLogger(__name__)

DEFAULT_LEXICON_PATH = Path(__file__).resolve().parent / "data" / "lexicon.json"


def _dedupe_preserve_order(items: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    result: List[str] = []
    for item in items:
        if not item:
            continue
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def _clean_words(raw: object) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple)):
        return []
    return _dedupe_preserve_order(
        normalize_word(item) for item in raw if isinstance(item, str)
    )


def _read_json(p: Path) -> object:
    raw = p.read_bytes()

    def _decode() -> str:
        for enc in ("utf-8-sig", "utf-16"):
            try:
                return raw.decode(enc)
            except UnicodeDecodeError:
                continue
        return raw.decode("utf-8", errors="replace")

    text = _decode()
    if not text.strip():
        return None

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        cleaned = "".join(ch for ch in text if ch >= " " or ch in "\n\t\r")
        if not cleaned.strip():
            return None
        return json.loads(cleaned)


def _parse_entry(lemma: str, value: object) -> LemmaEntry:
    entry = LemmaEntry(lemma=lemma)
    if isinstance(value, dict):
        entry.inflections = _clean_words(
            value.get("inflections", value.get("forms"))
        )
        entry.derived = _clean_words(value.get("derived"))
        entry.surface = bool(value.get("surface", True))
    else:
        entry.inflections = _clean_words(value)

    entry.inflections = [w for w in entry.inflections if w != lemma]
    entry.derived = [
        w for w in entry.derived if w != lemma and w not in entry.inflections
    ]
    return entry


def load_lexicon(path: str | Path) -> Lexicon:
    """Return the lexicon stored at ``path`` or an empty one if not found."""
    p = Path(path)
    lexicon = Lexicon()
    if not p.exists():
        logger.warning("Lexikon %s nicht gefunden – nur Regeln aktiv", p)
        return lexicon

    data = _read_json(p)
    if data is None:
        return lexicon
    if not isinstance(data, dict):
        logger.error("Unerwartetes Lexikon-Format: %s", type(data).__name__)
        return lexicon

    for raw_lemma, value in data.items():
        lemma = normalize_word(str(raw_lemma))
        if not lemma:
            continue
        entry = _parse_entry(lemma, value)
        existing = lexicon.entries.get(lemma)
        if existing is not None:
            _extend_entry(existing, entry)
        else:
            lexicon.entries[lemma] = entry

    rebuild_index(lexicon)
    logger.debug("Lexikon %s geladen: %d Lemmata", p, len(lexicon.entries))
    return lexicon


def load_default_lexicon() -> Lexicon:
    """Return the lexicon bundled with the package."""
    return load_lexicon(DEFAULT_LEXICON_PATH)


def _extend_entry(target: LemmaEntry, extra: LemmaEntry) -> None:
    for form in extra.inflections:
        if form not in target.inflections:
            target.inflections.append(form)
    for form in extra.derived:
        if form not in target.derived and form not in target.inflections:
            target.derived.append(form)
    target.surface = target.surface or extra.surface


def merge_lexicons(base: Lexicon, *extra: Lexicon) -> Lexicon:
    """Return a new lexicon with the entries of ``extra`` layered onto ``base``."""
    merged = Lexicon()
    for lexicon in (base,) + extra:
        for lemma, entry in lexicon.entries.items():
            copy = LemmaEntry(
                lemma=entry.lemma,
                inflections=entry.inflections[:],
                derived=entry.derived[:],
                surface=entry.surface,
            )
            existing = merged.entries.get(lemma)
            if existing is not None:
                _extend_entry(existing, copy)
            else:
                merged.entries[lemma] = copy
    rebuild_index(merged)
    return merged


def save_lexicon(lexicon: Lexicon, path: str | Path) -> None:
    """Persist ``lexicon`` as JSON at ``path``."""
    p = Path(path)
    data: Dict[str, object] = {}
    for lemma, entry in lexicon.entries.items():
        if entry.derived or not entry.surface:
            obj: Dict[str, object] = {"inflections": entry.inflections[:]}
            if entry.derived:
                obj["derived"] = entry.derived[:]
            if not entry.surface:
                obj["surface"] = False
            data[lemma] = obj
        else:
            data[lemma] = entry.inflections[:]

    p.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def validate_lexicon(lexicon: Lexicon) -> None:
    """Raise ``ValueError`` if the lexicon contains malformed entries."""
    owners: Dict[str, str] = {
        lemma: lemma
        for lemma, entry in lexicon.entries.items()
        if entry.surface
    }
    for lemma, entry in lexicon.entries.items():
        if not isinstance(entry.lemma, str) or not entry.lemma:
            raise ValueError(f"Invalid lemma: {lemma!r}")
        if entry.lemma != lemma:
            raise ValueError(f"Entry key {lemma!r} does not match {entry.lemma!r}")
        if not isinstance(entry.inflections, list):
            raise ValueError(f"Invalid inflections for {lemma}")
        if not isinstance(entry.derived, list):
            raise ValueError(f"Invalid derived forms for {lemma}")
        for form in entry.inflections + entry.derived:
            if not isinstance(form, str) or not form:
                raise ValueError(f"Invalid form for {lemma}: {form!r}")
            if form != normalize_word(form):
                raise ValueError(f"Form not normalized for {lemma}: {form!r}")
            owner = owners.setdefault(form, lemma)
            if owner != lemma:
                raise ValueError(
                    f"Form {form!r} belongs to both {owner!r} and {lemma!r}"
                )


def rebuild_index(lexicon: Lexicon) -> None:
    """Rebuild the surface form to lemma index for ``lexicon``."""
    lexicon.index.clear()

    for lemma, entry in lexicon.entries.items():
        if entry.surface:
            _claim(lexicon.index, lemma, lemma)

    for lemma, entry in lexicon.entries.items():
        for form in entry.forms:
            _claim(lexicon.index, form, lemma)


def _claim(index: Dict[str, str], form: str, lemma: str) -> None:
    owner = index.setdefault(form, lemma)
    if owner != lemma:
        logger.warning(
            "Wortform %r bereits %r zugeordnet, %r ignoriert", form, owner, lemma
        )
