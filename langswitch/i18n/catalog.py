"""Каталог переводов: ленивая загрузка JSON по локалям и поиск строк.

Каждая локаль читается с диска не более одного раза. Маркером загрузки служит
`concurrent.futures.Future`: все вызывающие, пришедшие во время чтения,
получают тот же объект и, как следствие, тот же словарь или ту же ошибку.
Неудачная загрузка окончательна до конца жизни каталога.
"""

from __future__ import annotations

import json
import logging
import threading
from concurrent.futures import Executor, Future
from enum import Enum
from functools import partial
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Mapping, Optional

from langswitch.i18n.exceptions import ResourceLoadError
from langswitch.i18n.locales import LocaleId

STRINGS_DIR = Path(__file__).parent / "strings"


class CatalogState(Enum):
    """Состояние записи каталога для одной локали."""

    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"


class TranslationCatalog:
    """Кэширует словари переводов и возвращает строки с откатом к ключу."""

    def __init__(
        self,
        strings_dir: Optional[Path] = None,
        *,
        executor: Optional[Executor] = None,
    ) -> None:
        self._logger = logging.getLogger(__name__)
        self._strings_dir = strings_dir or STRINGS_DIR
        self._executor = executor
        self._loads: Dict[LocaleId, "Future[Mapping[str, str]]"] = {}
        self._lock = threading.Lock()

    def resource_path(self, locale: LocaleId) -> Path:
        """Путь к JSON-файлу переводов локали."""

        return self._strings_dir / f"{self._require_locale(locale).value}.json"

    # --------------------------------------------------------------------- API
    def load_async(self, locale: LocaleId) -> "Future[Mapping[str, str]]":
        """Возвращает Future загрузки, запуская чтение только при первом вызове."""

        locale_id = self._require_locale(locale)
        with self._lock:
            future = self._loads.get(locale_id)
            if future is not None:
                return future
            future = Future()
            self._loads[locale_id] = future

        if self._executor is None:
            self._run_load(locale_id, future)
        else:
            self._executor.submit(self._run_load, locale_id, future)
        return future

    def preload(self, locales: Iterable[LocaleId]) -> None:
        """Запускает загрузку нескольких локалей, не дожидаясь результата."""

        for locale in locales:
            self.load_async(locale)

    def load(self, locale: LocaleId) -> Mapping[str, str]:
        """Блокирующая загрузка; при сбое поднимает ResourceLoadError."""

        future = self.load_async(locale)
        error = future.exception()
        if error is not None:
            # Один и тот же объект ошибки отдаётся всем вызывающим
            raise error.with_traceback(None)
        return future.result()

    def translate(self, locale: object, key: str) -> str:
        """Возвращает перевод ключа или сам ключ, если перевода нет."""

        locale_id = LocaleId.parse(locale)
        if locale_id is None:
            return key
        future = self.load_async(locale_id)
        if future.exception() is not None:
            return key
        return future.result().get(key) or key

    def translator(self, locale: LocaleId) -> Callable[[str], str]:
        """Функция поиска строк, привязанная к одной локали."""

        return partial(self.translate, self._require_locale(locale))

    def state(self, locale: LocaleId) -> CatalogState:
        future = self._loads.get(self._require_locale(locale))
        if future is None:
            return CatalogState.NOT_LOADED
        if not future.done():
            return CatalogState.LOADING
        if future.exception() is not None:
            return CatalogState.LOAD_FAILED
        return CatalogState.LOADED

    # ----------------------------------------------------------------- helpers
    def _run_load(self, locale: LocaleId, future: "Future[Mapping[str, str]]") -> None:
        try:
            entries = self._read_resource(locale)
        except ResourceLoadError as exc:
            future.set_exception(exc)
            return
        except Exception as exc:
            future.set_exception(
                ResourceLoadError(
                    locale.value,
                    self.resource_path(locale),
                    f"{type(exc).__name__}: {exc}",
                )
            )
            return
        self._logger.info("Loaded %d translations for '%s'", len(entries), locale.value)
        future.set_result(entries)

    def _read_resource(self, locale: LocaleId) -> Mapping[str, str]:
        path = self.resource_path(locale)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise ResourceLoadError(locale.value, path, "resource not found") from None
        except (OSError, ValueError) as exc:
            raise ResourceLoadError(locale.value, path, str(exc)) from exc

        if not isinstance(raw, dict):
            raise ResourceLoadError(
                locale.value, path, f"expected a JSON object, got {type(raw).__name__}"
            )
        entries: Dict[str, str] = {}
        for key, value in raw.items():
            if isinstance(value, str):
                entries[key] = value
            elif isinstance(value, bool):
                entries[key] = json.dumps(value)
            elif isinstance(value, (int, float)):
                entries[key] = str(value)
            else:
                raise ResourceLoadError(
                    locale.value,
                    path,
                    f"value for '{key}' must be a string, got {type(value).__name__}",
                )
        return MappingProxyType(entries)

    @staticmethod
    def _require_locale(locale: object) -> LocaleId:
        locale_id = LocaleId.parse(locale)
        if locale_id is None:
            raise ValueError(f"Unsupported locale: {locale!r}")
        return locale_id
