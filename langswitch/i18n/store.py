"""Наблюдаемое хранилище текущей локали."""

from __future__ import annotations

import logging
from typing import Callable, Tuple

from langswitch.i18n.locales import DEFAULT_LOCALE, LocaleId
from langswitch.i18n.observable import ChangeNotifier, Subscription

LocaleCallback = Callable[[LocaleId], None]


class LocaleStore:
    """Хранит активную локаль и уведомляет подписчиков о её смене.

    Экземпляр создаётся один раз в точке сборки приложения и передаётся
    компонентам явно. Неподдерживаемые значения в ``set_locale`` молча
    игнорируются: состояние не меняется, уведомлений нет.
    """

    def __init__(self, initial: LocaleId = DEFAULT_LOCALE) -> None:
        self._logger = logging.getLogger(__name__)
        self._notifier = ChangeNotifier()
        self._current = LocaleId.parse(initial) or DEFAULT_LOCALE

    @property
    def current(self) -> LocaleId:
        """Активная локаль."""

        return self._current

    @property
    def supported_locales(self) -> Tuple[LocaleId, ...]:
        return tuple(LocaleId)

    def set_locale(self, requested: object) -> None:
        """Меняет локаль и синхронно уведомляет подписчиков."""

        locale = LocaleId.parse(requested)
        if locale is None:
            self._logger.debug("Ignoring unsupported locale request: %r", requested)
            return
        if locale == self._current:
            return
        self._current = locale
        self._notifier.notify(locale)

    def subscribe(self, callback: LocaleCallback) -> Subscription:
        return self._notifier.subscribe(callback)

    def unsubscribe(self, callback: LocaleCallback) -> None:
        self._notifier.unsubscribe(callback)


class LoggingLocaleObserver:
    """Подписчик, который отправляет события смены локали в журнал."""

    def __init__(self, store: LocaleStore) -> None:
        self._logger = logging.getLogger(__name__)
        self._previous = store.current

    def __call__(self, locale: LocaleId) -> None:
        self._logger.info("Locale changed: %s -> %s", self._previous.value, locale.value)
        self._previous = locale
