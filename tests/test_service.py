import json

import pytest

from wordforms.config import WordformsSettings
from wordforms.service import build_service


@pytest.fixture(scope="module")
def service():
    return build_service(WordformsSettings())


def test_alternates_for(service):
    assert service.enabled
    assert service.alternates_for("parties") == ["party", "parties"]
    assert service.alternates_for("Parties") == ["party", "parties"]
    assert service.alternates_for("cat") == ["cats", "cat"]


def test_invalid_words_yield_nothing(service):
    assert service.alternates_for("") == []
    assert service.alternates_for("foo bar") == []
    assert service.alternates_for("foo-bar") == []
    assert service.alternates_for(123) == []


def test_disabled_or_foreign_locale():
    disabled = build_service(WordformsSettings(enabled=False))
    assert not disabled.enabled
    assert disabled.alternates_for("parties") == []

    german = build_service(WordformsSettings(locale="de_CH"))
    assert not german.enabled
    assert german.alternates_for("parties") == []


def test_max_alternates():
    service = build_service(WordformsSettings(max_alternates=1))
    assert service.alternates_for("parties") == ["party"]


def test_register_hook(service):
    registry = []
    hook = service.register(registry)
    assert registry == [hook]
    assert hook("cat") == ["cats", "cat"]


def test_custom_and_extra_lexicons(tmp_path):
    base = tmp_path / "base.json"
    base.write_text(json.dumps({"party": ["parties"]}), encoding="utf-8")
    extra = tmp_path / "extra.json"
    extra.write_text(json.dumps({"xyzzy": ["xyzzies"]}), encoding="utf-8")

    service = build_service(
        WordformsSettings(lexicon=base, extra_lexicons=[extra])
    )
    assert len(service.lemmatizer.lexicon.entries) == 2
    assert service.alternates_for("xyzzy") == ["xyzzies"]
    assert service.alternates_for("went") == ["wents", "went"]


def test_missing_lexicon_uses_rules_only(tmp_path):
    service = build_service(WordformsSettings(lexicon=tmp_path / "none.json"))
    assert service.lemmatizer.lexicon.entries == {}
    assert service.alternates_for("parties") == ["party", "parties"]
