"""Классы групп настроек с валидацией значений."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from langswitch.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from langswitch.settings.schemas import DEFAULT_CONFIG
from langswitch.settings.validators import (
    BoundedIntValidator,
    FlagValidator,
    LocaleValidator,
    LogLevelValidator,
    Validator,
)


class SettingsGroup(ABC):
    """Абстрактная база для конкретных групп настроек."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Задаёт значения по умолчанию для группы."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает валидаторы к ключам группы."""

    def keys(self) -> Tuple[str, ...]:
        """Возвращает доступные ключи группы."""

        return tuple(self._defaults.keys())

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values.get(key, default)

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        """Применяет соответствующий валидатор и возвращает результат."""

        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение, выбрасывая ошибку при невалидных данных."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
            )
        self._values[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def get_default(self, key: str) -> Any:
        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._defaults[key]

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Заполняет значениями из словаря (использует set для валидации)."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)


class AppSettings(SettingsGroup):
    """Группа базовых настроек приложения."""

    group_name = "app"

    def _initialize_defaults(self) -> None:
        self._defaults = dict(DEFAULT_CONFIG["app"])

    def _setup_validators(self) -> None:
        self._validators = {
            "language": LocaleValidator(),
            "window_width": BoundedIntValidator(320, 10000, unit="px"),
            "window_height": BoundedIntValidator(200, 10000, unit="px"),
            "preload_locales": FlagValidator(),
        }


class LoggingSettings(SettingsGroup):
    """Настройки логирования приложения."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = dict(DEFAULT_CONFIG["logging"])

    def _setup_validators(self) -> None:
        self._validators = {
            "enabled": FlagValidator(),
            "level": LogLevelValidator(),
            "max_file_size_mb": BoundedIntValidator(1, 1000, unit="MB"),
            "max_archived_files": BoundedIntValidator(1, 50),
        }
