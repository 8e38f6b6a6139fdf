import json

from wordforms.inflector import Inflector
from wordforms.lemmatizer import Lemmatizer
from wordforms.storage import load_lexicon


def test_get_lemma_dictionary_hit(lemmatizer):
    assert lemmatizer.get_lemma("parties") == "party"
    assert lemmatizer.get_lemma("went") == "go"
    assert lemmatizer.get_lemma("children") == "child"
    assert lemmatizer.get_lemma("cat") == "cat"


def test_get_lemma_falls_back_to_singular(lemmatizer):
    assert not lemmatizer.is_known("dogmas")
    assert lemmatizer.get_lemma("dogmas") == "dogma"
    assert lemmatizer.get_lemma("apparatuses") == "apparatus"
    assert lemmatizer.get_lemma("geneses") == "genesis"


def test_get_lemma_unknown_word_unchanged(lemmatizer):
    assert lemmatizer.get_lemma("xyzzy") == "xyzzy"


def test_get_words_from_lemma(lemmatizer):
    assert lemmatizer.get_words_from_lemma("party") == ["parties"]
    assert lemmatizer.get_words_from_lemma("happy") == [
        "happier",
        "happiest",
        "happily",
        "happiness",
        "unhappy",
    ]
    assert lemmatizer.get_words_from_lemma("nosuchlemma") == []


def test_get_words_excludes_word_by_default(lemmatizer):
    assert lemmatizer.get_words("went") == ["go", "goes", "gone", "going"]
    assert "went" not in lemmatizer.get_words("went")


def test_get_words_inclusive(lemmatizer):
    assert lemmatizer.get_words("went", inclusive=True) == [
        "go",
        "goes",
        "went",
        "gone",
        "going",
    ]
    assert lemmatizer.get_words("xyzzy", inclusive=True) == ["xyzzy"]
    assert lemmatizer.get_words("xyzzy") == []


def test_lookups_are_case_sensitive(lemmatizer):
    assert lemmatizer.get_lemma("parties") == "party"
    assert not lemmatizer.is_known("Parties")


def test_non_surface_lemma(tmp_path):
    path = tmp_path / "lex.json"
    path.write_text(
        json.dumps({"datum": {"inflections": ["data"], "surface": False}}),
        encoding="utf-8",
    )
    lemmatizer = Lemmatizer(load_lexicon(path), Inflector())
    assert lemmatizer.get_lemma("data") == "datum"
    assert lemmatizer.get_words("data") == []
    assert lemmatizer.get_words("data", inclusive=True) == ["data"]
    assert not lemmatizer.is_known("datum")
