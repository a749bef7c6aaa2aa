"""Тесты вспомогательных функций модуля main."""

from __future__ import annotations

import json
from pathlib import Path

from langswitch.i18n.catalog import CatalogState, TranslationCatalog
from langswitch.i18n.locales import LocaleId
from langswitch.i18n.store import LocaleStore
from langswitch.main import build_store, initialize_settings, initialize_workdir


def test_initialize_workdir_creates_structure(tmp_path: Path) -> None:
    base_dir = tmp_path / ".langswitch"
    assert initialize_workdir(base_dir)
    assert (base_dir / "logs").is_dir()


def test_initialize_workdir_reports_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    assert initialize_workdir(blocker / "nested") is False


def test_initialize_settings_writes_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    settings = initialize_settings(config_path)
    assert config_path.exists()
    assert settings.get_value("app", "language") == "en"


def test_build_store_uses_configured_language(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"app": {"language": "es"}}), encoding="utf-8")
    store = build_store(initialize_settings(config_path))
    assert store.current is LocaleId.ES


def test_store_changes_are_not_persisted(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    settings = initialize_settings(config_path)
    store = build_store(settings)

    store.set_locale(LocaleId.ES)

    assert settings.get_value("app", "language") == "en"
    assert json.loads(config_path.read_text(encoding="utf-8"))["app"]["language"] == "en"


def test_preload_locales_loads_every_locale() -> None:
    store = LocaleStore()
    catalog = TranslationCatalog()
    catalog.preload(store.supported_locales)
    for locale in store.supported_locales:
        assert catalog.state(locale) is CatalogState.LOADED
