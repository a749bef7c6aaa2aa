"""Высокоуровневые утилиты для создания и запуска GUI приложения."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from PySide6 import QtWidgets

from langswitch.i18n.catalog import TranslationCatalog
from langswitch.i18n.store import LocaleStore, LoggingLocaleObserver
from langswitch.settings.registry import SettingsRegistry
from langswitch.ui.main_window import create_main_window


class RunnableApp(Protocol):
    """Интерфейс приложения, которое можно запустить и получить код возврата."""

    def run(self) -> int:  # pragma: no cover - протокол
        """Запускает цикл приложения и возвращает код завершения."""


@dataclass
class GUIApp:
    """Реализация приложения PySide6; хранилище и каталог передаются в окно явно."""

    store: LocaleStore
    catalog: TranslationCatalog
    settings: SettingsRegistry

    def __post_init__(self) -> None:
        """Создаёт экземпляр QApplication и главное окно."""

        self._qt_app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
        if self.settings.get_value("app", "preload_locales"):
            self.catalog.preload(self.store.supported_locales)
        self.store.subscribe(LoggingLocaleObserver(self.store))
        self._window = create_main_window(
            store=self.store,
            catalog=self.catalog,
            settings=self.settings,
        )

    def run(self) -> int:
        """Запускает основной цикл приложения."""

        self._window.show()
        return self._qt_app.exec()


def create_application(
    store: LocaleStore,
    catalog: TranslationCatalog,
    settings: SettingsRegistry,
) -> RunnableApp:
    """Фабрика GUI приложения."""

    return GUIApp(store=store, catalog=catalog, settings=settings)
