"""Синхронный механизм публикации/подписки для уведомлений об изменениях."""

from __future__ import annotations

import logging
from typing import Any, Callable, List

Callback = Callable[..., None]


class Subscription:
    """Дескриптор подписки; вызов или cancel() отменяет её."""

    def __init__(self, notifier: "ChangeNotifier", callback: Callback) -> None:
        self._notifier = notifier
        self.callback = callback

    def cancel(self) -> None:
        """Отписывает callback; повторный вызов безопасен."""

        self._notifier.unsubscribe(self.callback)

    def __call__(self) -> None:
        self.cancel()


class ChangeNotifier:
    """Хранит подписчиков и вызывает их синхронно в порядке регистрации."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._callbacks: List[Callback] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def subscribe(self, callback: Callback) -> Subscription:
        if callback not in self._callbacks:
            self._callbacks.append(callback)
        return Subscription(self, callback)

    def unsubscribe(self, callback: Callback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def notify(self, *args: Any) -> None:
        """Вызывает всех подписчиков; ошибка одного не мешает остальным."""

        for callback in list(self._callbacks):
            try:
                callback(*args)
            except Exception as exc:
                self._logger.error("Subscriber %r failed: %s", callback, exc, exc_info=True)
