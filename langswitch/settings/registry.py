"""Реестр настроек приложения, загружаемый из config.json."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict

from langswitch.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)
from langswitch.settings.groups import AppSettings, LoggingSettings, SettingsGroup
from langswitch.settings.schemas import DEFAULT_CONFIG
from langswitch.utils.paths import CONFIG_DIR


class SettingsRegistry:
    """Управляет группами настроек; создаётся в точке сборки приложения."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._logger = logging.getLogger(__name__)
        self._file_path = config_path or CONFIG_DIR / "config.json"
        self._settings: Dict[str, SettingsGroup] = {
            "app": AppSettings(),
            "logging": LoggingSettings(),
        }
        self._metadata: Dict[str, Any] = {}
        self._extract_metadata(DEFAULT_CONFIG)

    @property
    def config_path(self) -> Path:
        """Путь к текущему файлу конфигурации."""

        return self._file_path

    # --------------------------------------------------------------------- API
    def get_value(self, group: str, key: str, default: Any = None) -> Any:
        settings_group = self._settings.get(group)
        if not settings_group:
            if default is not None:
                return default
            raise SettingsNotFoundError(group, key)
        try:
            return settings_group.get(key)
        except SettingsNotFoundError:
            if default is not None:
                return default
            raise

    def set_value(self, group: str, key: str, value: Any) -> None:
        self._require_group(group).set(key, value)

    def get_group(self, group: str) -> SettingsGroup:
        return self._require_group(group)

    def save_to_disk(self, path: Path | None = None) -> None:
        target = path or self._file_path
        payload = dict(self._metadata)
        for name, group in self._settings.items():
            payload[name] = group.to_dict()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            raise SettingsIOError(target, str(exc)) from exc

    def load_from_disk(self, path: Path | None = None) -> None:
        target = path or self._file_path
        if not target.exists():
            self._logger.info("Config file %s not found, writing defaults.", target)
            self.save_to_disk(target)
            return
        try:
            content = json.loads(target.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsIOError(target, str(exc)) from exc
        if not isinstance(content, dict):
            raise SettingsIOError(target, "top-level value must be an object")

        merged = self._merge_with_defaults(content)
        self._extract_metadata(merged)
        for name, group in self._settings.items():
            group_data = merged.get(name, {})
            if isinstance(group_data, dict):
                group.from_dict(group_data)
        self.validate()

    def validate(self) -> bool:
        for name, group in self._settings.items():
            for key in group.keys():
                value = group.get(key)
                is_valid, error = group.validate(key, value)
                if not is_valid:
                    raise SettingsValidationError(
                        key=f"{name}.{key}",
                        value=value,
                        reason=error,
                    )
        return True

    def reset_to_defaults(self) -> None:
        for group in self._settings.values():
            group.reset_to_defaults()

    # ----------------------------------------------------------------- helpers
    def _require_group(self, group: str) -> SettingsGroup:
        try:
            return self._settings[group]
        except KeyError:
            raise SettingsNotFoundError(group, None) from None

    def _merge_with_defaults(self, incoming: Dict[str, Any]) -> Dict[str, Any]:
        base = copy.deepcopy(DEFAULT_CONFIG)
        for key, value in incoming.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                base[key].update(value)
            else:
                base[key] = value
        return base

    def _extract_metadata(self, data: Dict[str, Any]) -> None:
        self._metadata = {key: value for key, value in data.items() if key not in self._settings}
