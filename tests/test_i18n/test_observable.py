"""Проверки механизма подписки ChangeNotifier."""

from __future__ import annotations

from typing import List

import pytest

from langswitch.i18n.observable import ChangeNotifier


def test_notify_in_subscription_order() -> None:
    notifier = ChangeNotifier()
    calls: List[str] = []
    notifier.subscribe(lambda value: calls.append(f"first:{value}"))
    notifier.subscribe(lambda value: calls.append(f"second:{value}"))

    notifier.notify("x")

    assert calls == ["first:x", "second:x"]


def test_duplicate_subscription_is_ignored() -> None:
    notifier = ChangeNotifier()
    calls: List[int] = []

    def callback() -> None:
        calls.append(1)

    notifier.subscribe(callback)
    notifier.subscribe(callback)
    notifier.notify()

    assert calls == [1]
    assert notifier.subscriber_count == 1


def test_subscription_handle_cancels() -> None:
    notifier = ChangeNotifier()
    calls: List[int] = []
    subscription = notifier.subscribe(lambda: calls.append(1))
    assert notifier.subscriber_count == 1

    subscription.cancel()
    subscription()
    notifier.notify()

    assert calls == []
    assert notifier.subscriber_count == 0


def test_unsubscribe_unknown_callback_is_ignored() -> None:
    notifier = ChangeNotifier()
    notifier.unsubscribe(lambda: None)
    assert notifier.subscriber_count == 0


def test_failing_subscriber_does_not_block_others(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    notifier = ChangeNotifier()
    calls: List[str] = []

    def failing() -> None:
        calls.append("failing")
        raise RuntimeError("subscriber failed")

    notifier.subscribe(failing)
    notifier.subscribe(lambda: calls.append("ok"))
    notifier.notify()

    assert calls == ["failing", "ok"]
    assert "subscriber failed" in caplog.text


def test_unsubscribe_during_notify_keeps_current_round() -> None:
    notifier = ChangeNotifier()
    calls: List[str] = []

    def second() -> None:
        calls.append("second")

    def first() -> None:
        calls.append("first")
        notifier.unsubscribe(second)

    notifier.subscribe(first)
    notifier.subscribe(second)
    notifier.notify()
    notifier.notify()

    assert calls == ["first", "second", "first"]
