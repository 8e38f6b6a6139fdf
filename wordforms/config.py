"""Konfiguration der Wortformen-Erweiterung.

Die statische Grundkonfiguration liegt in ``config.ini`` im Projektverzeichnis,
Laufzeitwerte (z. B. das per CLI umgeschaltete Aktiv-Flag) in
``config.runtime.ini`` daneben. ``WORDFORMS_CONFIG`` (auch aus einer ``.env``)
ersetzt den Pfad der Grundkonfiguration.
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

SECTION = "wordforms"
CONFIG_ENV_VAR = "WORDFORMS_CONFIG"
CONFIG_MAIN_PATH = Path(__file__).resolve().parents[1] / "config.ini"


@dataclass
class WordformsSettings:
    """Settings controlling the alternates hook.

    Attributes:
        enabled: Global switch for the expansion.
        locale: Locale of the search index; only English locales expand.
        lexicon: Path of the lemma lexicon; ``None`` selects the bundled one.
        extra_lexicons: Custom lexicons layered on top of ``lexicon``.
        max_alternates: Upper bound for returned alternates, ``0`` = unlimited.
    """

    enabled: bool = True
    locale: str = "en_US"
    lexicon: Optional[Path] = None
    extra_lexicons: List[Path] = field(default_factory=list)
    max_alternates: int = 0

    @property
    def language(self) -> str:
        return self.locale.replace("-", "_").split("_", 1)[0].lower()

    @property
    def is_english(self) -> bool:
        return self.language == "en"


def config_main_path() -> Path:
    """Gibt den Pfad der Grundkonfiguration zurück (Umgebungsvariable zuerst)."""
    load_dotenv()
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_MAIN_PATH


def config_runtime_path(main_path: Optional[Path] = None) -> Path:
    main = main_path or config_main_path()
    return main.with_name(main.stem + ".runtime" + main.suffix)


def load_base_config(path: Optional[Path] = None) -> configparser.ConfigParser:
    """Lädt ausschließlich die statische Grundkonfiguration."""
    cfg = configparser.ConfigParser()
    cfg.read(path or config_main_path(), encoding="utf-8-sig")
    return cfg


def load_runtime_config(path: Optional[Path] = None) -> configparser.ConfigParser:
    """Lädt nur die dynamische Laufzeitkonfiguration."""
    cfg = configparser.ConfigParser()
    runtime = config_runtime_path(path)
    if runtime.exists():
        cfg.read(runtime, encoding="utf-8-sig")
    return cfg


def load_merged_config(path: Optional[Path] = None) -> configparser.ConfigParser:
    """Kombiniert statische und dynamische Konfiguration."""
    base = load_base_config(path)
    runtime = load_runtime_config(path)
    for section in runtime.sections():
        if not base.has_section(section):
            base.add_section(section)
        for key, value in runtime.items(section):
            base.set(section, key, value)
    return base


def save_runtime_config(
    cfg: configparser.ConfigParser, path: Optional[Path] = None
) -> None:
    """Persistiert die Laufzeitdaten in ``config.runtime.ini``."""
    runtime = config_runtime_path(path)
    runtime.parent.mkdir(parents=True, exist_ok=True)
    with runtime.open("w", encoding="utf-8") as fh:
        cfg.write(fh)


def update_runtime_section(
    section: str, updates: Dict[str, str], path: Optional[Path] = None
) -> None:
    """Aktualisiert gezielt ein Konfigurations-Teilsegment."""
    cfg = load_runtime_config(path)
    if not cfg.has_section(section):
        cfg.add_section(section)
    for key, value in updates.items():
        cfg.set(section, key, value)
    save_runtime_config(cfg, path)


def _resolve(raw: str, base_dir: Path) -> Path:
    p = Path(raw).expanduser()
    return p if p.is_absolute() else base_dir / p


def settings_from_config(
    cfg: configparser.ConfigParser, base_dir: Optional[Path] = None
) -> WordformsSettings:
    """Build :class:`WordformsSettings` from the ``[wordforms]`` section."""
    settings = WordformsSettings()
    if not cfg.has_section(SECTION):
        return settings

    base_dir = base_dir or CONFIG_MAIN_PATH.parent
    section = cfg[SECTION]
    try:
        settings.enabled = section.getboolean("enabled", fallback=True)
    except ValueError:
        logger.warning(
            "Ungültiger Wert für enabled: %r – Erweiterung bleibt aktiv",
            section.get("enabled"),
        )
    settings.locale = section.get("locale", fallback=settings.locale).strip() or "en_US"

    lexicon = section.get("lexicon", fallback="").strip()
    if lexicon:
        settings.lexicon = _resolve(lexicon, base_dir)
    extra = section.get("extra_lexicons", fallback="")
    settings.extra_lexicons = [
        _resolve(part.strip(), base_dir) for part in extra.split(",") if part.strip()
    ]

    try:
        settings.max_alternates = max(0, section.getint("max_alternates", fallback=0))
    except ValueError:
        logger.warning(
            "Ungültiger Wert für max_alternates: %r", section.get("max_alternates")
        )
    return settings


def load_settings(path: Optional[Path] = None) -> WordformsSettings:
    """Liest Grund- und Laufzeitkonfiguration und liefert die Einstellungen."""
    main = path or config_main_path()
    return settings_from_config(load_merged_config(main), base_dir=main.parent)
