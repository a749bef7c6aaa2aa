"""Проверки наблюдаемого хранилища локали."""

from __future__ import annotations

from typing import List

import pytest

from langswitch.i18n.locales import LocaleId
from langswitch.i18n.store import LocaleStore, LoggingLocaleObserver


class RecordingSubscriber:
    """Запоминает полученные локали и значение current в момент уведомления."""

    def __init__(self, store: LocaleStore) -> None:
        self._store = store
        self.received: List[LocaleId] = []
        self.seen_current: List[LocaleId] = []

    def __call__(self, locale: LocaleId) -> None:
        self.received.append(locale)
        self.seen_current.append(self._store.current)


@pytest.fixture
def store() -> LocaleStore:
    return LocaleStore()


def test_default_locale(store: LocaleStore) -> None:
    assert store.current is LocaleId.EN


def test_initial_locale_can_be_given() -> None:
    assert LocaleStore(LocaleId.ES).current is LocaleId.ES


def test_supported_locales(store: LocaleStore) -> None:
    assert store.supported_locales == (LocaleId.EN, LocaleId.ES)


@pytest.mark.parametrize("locale", list(LocaleId))
def test_set_supported_locale(store: LocaleStore, locale: LocaleId) -> None:
    store.set_locale(locale)
    assert store.current is locale


def test_set_locale_accepts_code(store: LocaleStore) -> None:
    store.set_locale("es")
    assert store.current is LocaleId.ES


@pytest.mark.parametrize("requested", ["de", "fr", "", "ES", None, 7, object()])
def test_unsupported_locale_is_silent_noop(store: LocaleStore, requested: object) -> None:
    subscriber = RecordingSubscriber(store)
    store.subscribe(subscriber)

    store.set_locale(requested)

    assert store.current is LocaleId.EN
    assert subscriber.received == []


def test_unsupported_locale_logs_diagnostic(
    store: LocaleStore, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level("DEBUG", logger="langswitch.i18n.store")
    store.set_locale("de")
    assert "unsupported locale" in caplog.text


def test_same_locale_does_not_notify(store: LocaleStore) -> None:
    subscriber = RecordingSubscriber(store)
    store.subscribe(subscriber)

    store.set_locale(LocaleId.EN)
    store.set_locale("en")

    assert subscriber.received == []


def test_change_notifies_each_subscriber_once_with_new_value(store: LocaleStore) -> None:
    first = RecordingSubscriber(store)
    second = RecordingSubscriber(store)
    store.subscribe(first)
    store.subscribe(second)

    store.set_locale(LocaleId.ES)

    for subscriber in (first, second):
        assert subscriber.received == [LocaleId.ES]
        assert subscriber.seen_current == [LocaleId.ES]


def test_subscribers_called_in_registration_order(store: LocaleStore) -> None:
    order: List[str] = []
    store.subscribe(lambda locale: order.append("a"))
    store.subscribe(lambda locale: order.append("b"))
    store.subscribe(lambda locale: order.append("c"))

    store.set_locale(LocaleId.ES)

    assert order == ["a", "b", "c"]


def test_unsubscribe(store: LocaleStore) -> None:
    subscriber = RecordingSubscriber(store)
    subscription = store.subscribe(subscriber)
    subscription.cancel()
    store.set_locale(LocaleId.ES)

    other = RecordingSubscriber(store)
    store.subscribe(other)
    store.unsubscribe(other)
    store.set_locale(LocaleId.EN)

    assert subscriber.received == []
    assert other.received == []


def test_toggle_back_and_forth_notifies_every_change(store: LocaleStore) -> None:
    subscriber = RecordingSubscriber(store)
    store.subscribe(subscriber)

    store.set_locale(LocaleId.ES)
    store.set_locale(LocaleId.ES)
    store.set_locale(LocaleId.EN)

    assert subscriber.received == [LocaleId.ES, LocaleId.EN]


def test_logging_observer(store: LocaleStore, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("INFO")
    store.subscribe(LoggingLocaleObserver(store))

    store.set_locale(LocaleId.ES)

    assert any("Locale changed: en -> es" in record.message for record in caplog.records)
