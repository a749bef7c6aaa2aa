"""Подсистема локализации: текущая локаль и каталоги переводов."""

from langswitch.i18n.catalog import CatalogState, TranslationCatalog
from langswitch.i18n.exceptions import ResourceLoadError
from langswitch.i18n.locales import DEFAULT_LOCALE, LocaleId
from langswitch.i18n.observable import ChangeNotifier, Subscription
from langswitch.i18n.store import LocaleStore, LoggingLocaleObserver

__all__ = [
    "CatalogState",
    "ChangeNotifier",
    "DEFAULT_LOCALE",
    "LocaleId",
    "LocaleStore",
    "LoggingLocaleObserver",
    "ResourceLoadError",
    "Subscription",
    "TranslationCatalog",
]
