"""Listing of config entries as ephemeral rows.

Row ids only mean something within a single call. Callers must check the
read toggle before calling into this module.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import NamedTuple

from .config_type import ConfigType, parse_type, valid_name

COLUMNS = ("_id", "type", "name")


class VirtualRow(NamedTuple):
    id: int
    type: str
    name: str


def _entry_names(directory: Path) -> list[str]:
    try:
        return os.listdir(directory)
    except (FileNotFoundError, NotADirectoryError):
        return []


def list_all(root: Path) -> list[VirtualRow]:
    """Enumerate every entry of every type, ids counting up from 0 across types."""
    rows: list[VirtualRow] = []
    for config_type in ConfigType:
        for name in _entry_names(config_type.directory(root)):
            rows.append(VirtualRow(len(rows), config_type.type_name, name))
    return rows


def describe_one(root: Path, type_token: str | None, name: str | None) -> VirtualRow | None:
    """Existence probe for one entry. Missing entries are not an error."""
    if not type_token or not type_token.strip() or not valid_name(name):
        return None
    config_type = parse_type(type_token)
    if config_type is None:
        return None
    if not (config_type.directory(root) / name).exists():
        return None
    return VirtualRow(0, config_type.type_name, name)
