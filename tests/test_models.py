import pytest

from wordforms.models import InflectionRule, LemmaEntry, Lexicon


def test_entry_default_list_is_unique():
    e1 = LemmaEntry("foo")
    e2 = LemmaEntry("bar")
    e1.inflections.append("foos")
    assert e2.inflections == []


def test_entry_forms_inflections_then_derived():
    entry = LemmaEntry(
        "happy", ["happier", "happiest"], derived=["happiness", "happier"]
    )
    assert entry.forms == ["happier", "happiest", "happiness"]
    assert entry.surface is True


def test_lexicon_add_entry():
    lexicon = Lexicon()
    entry = LemmaEntry("cat", ["cats"])
    lexicon.entries[entry.lemma] = entry
    assert "cat" in lexicon.entries
    assert lexicon.index == {}


def test_rule_identity_and_frozen():
    rule = InflectionRule(r"ss", "ss", "ss")
    assert rule.is_identity
    assert not InflectionRule(r"s", "", "s").is_identity
    with pytest.raises(AttributeError):
        rule.plural = "sses"  # type: ignore[misc]
