"""Исключения подсистемы локализации."""

from __future__ import annotations

from pathlib import Path

from langswitch.exceptions import LangSwitchError


class ResourceLoadError(LangSwitchError):
    """Файл переводов отсутствует или не является плоским словарём строк."""

    def __init__(self, locale: str, path: Path, reason: str) -> None:
        self.locale = locale
        self.path = path
        self.reason = reason
        super().__init__(
            f"Cannot load translations for '{locale}' from '{path}': {reason}",
            context={"locale": locale, "path": str(path), "reason": reason},
        )
