"""Точка входа в приложение Language Switcher."""

from __future__ import annotations

import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from langswitch import __version__
from langswitch.i18n.catalog import TranslationCatalog
from langswitch.i18n.locales import LocaleId
from langswitch.i18n.store import LocaleStore
from langswitch.settings.exceptions import SettingsError
from langswitch.settings.registry import SettingsRegistry
from langswitch.utils.logger import configure_from_settings, configure_logging
from langswitch.utils.paths import CONFIG_DIR

LOGGER = logging.getLogger(__name__)


def initialize_workdir(base_dir: Path) -> bool:
    """Создаёт рабочую структуру (~/.langswitch и logs)."""

    try:
        base_dir.mkdir(parents=True, exist_ok=True)
        (base_dir / "logs").mkdir(exist_ok=True)
        return True
    except OSError as exc:
        LOGGER.error("Не удалось инициализировать рабочую директорию: %s", exc)
        return False


def initialize_settings(config_path: Path) -> SettingsRegistry:
    """Создаёт реестр настроек и загружает config.json."""

    registry = SettingsRegistry(config_path=config_path)
    registry.load_from_disk()
    return registry


def build_store(settings: SettingsRegistry) -> LocaleStore:
    """Создаёт хранилище локали со стартовым языком из настроек."""

    initial = LocaleId.parse(settings.get_value("app", "language"))
    return LocaleStore(initial) if initial is not None else LocaleStore()


def main() -> int:
    """Основная точка входа: готовит окружение и запускает приложение."""

    base_dir = CONFIG_DIR
    if not initialize_workdir(base_dir):
        return 1
    configure_logging(base_dir / "logs")

    try:
        settings = initialize_settings(base_dir / "config.json")
    except SettingsError:
        return 1
    configure_from_settings(base_dir / "logs", settings)

    store = build_store(settings)
    LOGGER.info("Запуск Language Switcher версии %s (locale=%s)", __version__, store.current)
    from langswitch.app import create_application

    with ThreadPoolExecutor(max_workers=len(LocaleId), thread_name_prefix="i18n") as executor:
        catalog = TranslationCatalog(executor=executor)
        app = create_application(store=store, catalog=catalog, settings=settings)
        return app.run()


if __name__ == "__main__":
    sys.exit(main())
