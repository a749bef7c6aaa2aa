"""Пользовательские исключения подсистемы настроек."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from langswitch.exceptions import LangSwitchError


class SettingsError(LangSwitchError):
    """Базовое исключение для любых ошибок настроек."""


class SettingsNotFoundError(SettingsError):
    """Возникает, когда нужный ключ/группа отсутствуют."""

    def __init__(self, group: str, key: Optional[str] = None) -> None:
        suffix = f".{key}" if key else ""
        super().__init__(
            f"Setting '{group}{suffix}' not found",
            context={"group": group, "key": key},
        )


class SettingsValidationError(SettingsError):
    """Сигнализирует о некорректных входных данных при валидации."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"Validation error for '{key}': {reason} (value={value!r})",
            context={"key": key, "value": value, "reason": reason},
        )


class SettingsIOError(SettingsError):
    """Поднимается при ошибках чтения/записи config.json."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            f"I/O error with settings file '{path}': {reason}",
            context={"path": str(path), "reason": reason},
        )
