"""Перечень поддерживаемых локалей."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class LocaleId(str, Enum):
    """Идентификатор локали из закрытого набора."""

    EN = "en"
    ES = "es"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Название языка на нём самом (для кнопок переключения)."""

        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: object) -> Optional["LocaleId"]:
        """Возвращает член перечисления для LocaleId или кода, иначе None."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return None
        return None


_DISPLAY_NAMES: Dict[LocaleId, str] = {
    LocaleId.EN: "English",
    LocaleId.ES: "Español",
}

DEFAULT_LOCALE = LocaleId.EN
