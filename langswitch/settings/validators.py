"""Проверки значений config.json: локаль, размеры окна, параметры журнала."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Tuple

from langswitch.i18n.locales import LocaleId

ValidationResult = Tuple[bool, str]
OK: ValidationResult = (True, "")


class Validator(ABC):
    """Проверка одного значения настройки."""

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """Возвращает (True, "") при успехе либо (False, описание ошибки)."""


class FlagValidator(Validator):
    """Допускает только true/false; 0 и 1 из JSON не считаются флагом."""

    def validate(self, value: Any) -> ValidationResult:
        if isinstance(value, bool):
            return OK
        return False, f"Expected true or false, got {type(value).__name__}"


class BoundedIntValidator(Validator):
    """Целое число в закрытом диапазоне [minimum, maximum]."""

    def __init__(self, minimum: int, maximum: int, *, unit: str = "") -> None:
        self.minimum = minimum
        self.maximum = maximum
        self.unit = unit

    def validate(self, value: Any) -> ValidationResult:
        if isinstance(value, bool) or not isinstance(value, int):
            return False, f"Expected an integer, got {type(value).__name__}"
        if not self.minimum <= value <= self.maximum:
            suffix = f" {self.unit}" if self.unit else ""
            return False, f"{value}{suffix} is outside [{self.minimum}, {self.maximum}]{suffix}"
        return OK


class ChoiceValidator(Validator):
    """Строка из фиксированного набора, с учётом регистра."""

    label = "value"

    def __init__(self, choices: Iterable[str]) -> None:
        self.choices = tuple(choices)

    def validate(self, value: Any) -> ValidationResult:
        if isinstance(value, str) and value in self.choices:
            return OK
        expected = ", ".join(self.choices)
        return False, f"Unsupported {self.label} {value!r}, expected one of {expected}"


class LocaleValidator(ChoiceValidator):
    """Код стартовой локали из поддерживаемого набора."""

    label = "locale"

    def __init__(self) -> None:
        super().__init__(locale.value for locale in LocaleId)


class LogLevelValidator(ChoiceValidator):
    label = "log level"

    def __init__(self) -> None:
        super().__init__(("DEBUG", "INFO", "WARNING", "ERROR"))
