"""Главное окно: приветствие и кнопки переключения языка."""

from __future__ import annotations

import logging
from typing import Dict

from PySide6 import QtCore, QtGui, QtWidgets

from langswitch.i18n.catalog import TranslationCatalog
from langswitch.i18n.exceptions import ResourceLoadError
from langswitch.i18n.locales import LocaleId
from langswitch.i18n.store import LocaleStore
from langswitch.settings.registry import SettingsRegistry


class LanguageSwitcherWindow(QtWidgets.QMainWindow):
    """Окно, перерисовывающее тексты при каждой смене локали в хранилище."""

    def __init__(
        self,
        *,
        store: LocaleStore,
        catalog: TranslationCatalog,
        settings: SettingsRegistry | None = None,
    ) -> None:
        super().__init__()
        self._logger = logging.getLogger(__name__)
        self._store = store
        self._catalog = catalog
        self._rendered_locale = store.current
        self._language_buttons: Dict[LocaleId, QtWidgets.QPushButton] = {}

        central = QtWidgets.QWidget(self)
        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(24, 16, 24, 16)

        self._title_label = QtWidgets.QLabel()
        title_font = self._title_label.font()
        title_font.setBold(True)
        title_font.setPointSize(title_font.pointSize() + 4)
        self._title_label.setFont(title_font)
        layout.addWidget(self._title_label)
        layout.addStretch()

        self._message_label = QtWidgets.QLabel()
        self._message_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self._message_label.setWordWrap(True)
        message_font = QtGui.QFont(self._message_label.font())
        message_font.setPointSize(20)
        self._message_label.setFont(message_font)
        layout.addWidget(self._message_label)
        layout.addSpacing(30)

        buttons = QtWidgets.QHBoxLayout()
        buttons.setSpacing(16)
        buttons.addStretch()
        for locale in store.supported_locales:
            # Подписи кнопок не переводятся: каждый язык назван на самом себе
            button = QtWidgets.QPushButton(locale.display_name)
            button.setCheckable(True)
            button.clicked.connect(
                lambda _checked=False, target=locale: self._store.set_locale(target)
            )
            buttons.addWidget(button)
            self._language_buttons[locale] = button
        buttons.addStretch()
        layout.addLayout(buttons)
        layout.addStretch()
        self.setCentralWidget(central)

        if settings is not None:
            self.resize(
                int(settings.get_value("app", "window_width")),
                int(settings.get_value("app", "window_height")),
            )

        self._subscription = store.subscribe(self._on_locale_changed)
        self.retranslate()

    def retranslate(self) -> None:
        """Перерисовывает все тексты окна для текущей локали."""

        current = self._store.current
        tr = self._catalog.translator(current)
        title = tr("title")
        self.setWindowTitle(title)
        self._title_label.setText(title)
        self._message_label.setText(tr("message"))
        for locale, button in self._language_buttons.items():
            button.setChecked(locale == current)
        self._rendered_locale = current

    def _on_locale_changed(self, locale: LocaleId) -> None:
        try:
            self._catalog.load(locale)
        except ResourceLoadError as exc:
            self._logger.warning("Switching to '%s' without translations: %s", locale.value, exc)
            previous = self._catalog.translator(self._rendered_locale)
            QtWidgets.QMessageBox.warning(
                self,
                previous("errors.load_title"),
                previous("errors.load_message"),
            )
        self.retranslate()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._subscription.cancel()
        super().closeEvent(event)


def create_main_window(
    *,
    store: LocaleStore,
    catalog: TranslationCatalog,
    settings: SettingsRegistry | None = None,
) -> LanguageSwitcherWindow:
    """Фабрика главного окна."""

    return LanguageSwitcherWindow(store=store, catalog=catalog, settings=settings)
