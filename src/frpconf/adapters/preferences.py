"""JSON-file preference store (the app's ``data`` preferences)."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class PreferencesKey:
    ALLOW_CONFIG_READ = "allow_config_read"
    ALLOW_CONFIG_WRITE = "allow_config_write"


class JsonPreferences:
    """Boolean settings persisted in a single JSON object file.

    Reads go to disk every time. Writes replace the whole file atomically, so
    a concurrent reader sees either the old or the new contents.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict:
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Unreadable preferences file %s: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Preferences file %s is not a JSON object", self._path)
            return {}
        return data

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._load().get(key, default)
        if isinstance(value, bool):
            return value
        return default

    def put_bool(self, key: str, value: bool) -> None:
        data = self._load()
        data[key] = bool(value)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._path.parent, prefix=".prefs-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp, self._path)
        except BaseException:
            os.unlink(tmp)
            raise
