"""Дефолтная схема config.json."""

from __future__ import annotations

from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "app": {
        "language": "en",
        "window_width": 480,
        "window_height": 240,
        "preload_locales": True,
    },
    "logging": {
        "enabled": True,
        "level": "INFO",
        "max_file_size_mb": 10,
        "max_archived_files": 5,
    },
}
