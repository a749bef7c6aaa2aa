"""Централизованное описание путей приложения."""

from __future__ import annotations

import os
from pathlib import Path

HOME_ENV_VAR = "LANGSWITCH_HOME"

# CONFIG_DIR — базовая директория, где сохраняются настройки и логи
CONFIG_DIR = Path(os.environ.get(HOME_ENV_VAR, Path.home())) / ".langswitch"
