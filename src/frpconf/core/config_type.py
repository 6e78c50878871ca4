"""Config types exposed by the provider and the directory each one lives in.

The set is closed: every variant maps to exactly one directory under the
host's private storage root, named after the variant's token.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path


class ConfigType(Enum):
    """Configuration categories, in listing order."""

    FRPC = "frpc"  # Client configs
    FRPS = "frps"  # Server configs

    @property
    def type_name(self) -> str:
        return self.value

    def directory(self, root: Path) -> Path:
        """Directory holding this type's files. Never touches the filesystem."""
        return Path(root) / self.value


def parse_type(token: str | None) -> ConfigType | None:
    """Resolve a type token by exact, case-sensitive match."""
    if not token:
        return None
    for config_type in ConfigType:
        if config_type.value == token:
            return config_type
    return None


def directory_for(config_type: ConfigType, root: Path) -> Path:
    return config_type.directory(root)


def valid_name(name: str | None) -> bool:
    """A file name that stays inside its type's directory."""
    if not name or not name.strip():
        return False
    if name in (".", ".."):
        return False
    return "/" not in name and os.sep not in name and "\x00" not in name
