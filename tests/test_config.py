import logging

from wordforms import config
from wordforms.config import WordformsSettings


def _write_config(tmp_path, body: str):
    path = tmp_path / "config.ini"
    path.write_text(body, encoding="utf-8")
    return path


def test_defaults_without_section(tmp_path):
    path = _write_config(tmp_path, "[other]\nkey = value\n")
    settings = config.load_settings(path)
    assert settings == WordformsSettings()


def test_load_settings(tmp_path):
    path = _write_config(
        tmp_path,
        "[wordforms]\n"
        "enabled = false\n"
        "locale = en-GB\n"
        "lexicon = lex/base.json\n"
        "extra_lexicons = custom.json, /abs/more.json\n"
        "max_alternates = 5\n",
    )
    settings = config.load_settings(path)
    assert settings.enabled is False
    assert settings.locale == "en-GB"
    assert settings.is_english
    assert settings.lexicon == tmp_path / "lex" / "base.json"
    assert settings.extra_lexicons[0] == tmp_path / "custom.json"
    assert str(settings.extra_lexicons[1]).endswith("more.json")
    assert settings.max_alternates == 5


def test_runtime_config_overrides_base(tmp_path):
    path = _write_config(tmp_path, "[wordforms]\nenabled = true\n")
    config.update_runtime_section("wordforms", {"enabled": "false"}, path)

    assert (tmp_path / "config.runtime.ini").exists()
    assert config.load_base_config(path).getboolean("wordforms", "enabled") is True
    assert config.load_settings(path).enabled is False


def test_invalid_values_fall_back(tmp_path, caplog):
    path = _write_config(
        tmp_path, "[wordforms]\nenabled = maybe\nmax_alternates = lots\n"
    )
    with caplog.at_level(logging.WARNING):
        settings = config.load_settings(path)
    assert settings.enabled is True
    assert settings.max_alternates == 0
    assert "maybe" in caplog.text


def test_locale_language():
    assert WordformsSettings(locale="en_US").is_english
    assert WordformsSettings(locale="EN").is_english
    assert not WordformsSettings(locale="de_CH").is_english
    assert WordformsSettings(locale="fr-CA").language == "fr"


def test_env_var_overrides_config_path(tmp_path, monkeypatch):
    path = _write_config(tmp_path, "[wordforms]\nlocale = de_CH\n")
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(path))
    assert config.config_main_path() == path
    assert config.load_settings().locale == "de_CH"
