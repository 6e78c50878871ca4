"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

from ..config import config as env_config
from ..core.config_model import AppConfig


def load_app_config() -> AppConfig:
    return AppConfig(
        debug=env_config.DEBUG,
        storage_root=env_config.STORAGE_ROOT,
        authority=env_config.AUTHORITY,
        prefs_file=env_config.PREFS_FILE,
    )
