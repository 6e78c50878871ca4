"""Issue file handles for single config entries.

The returned file object belongs to the caller, who must close it. Nothing
here keeps a reference to it.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

from .config_type import parse_type, valid_name
from .errors import AccessDeniedError, ConfigFileNotFoundError
from .ports import PermissionGate
from .router import Route, RouteKind

logger = logging.getLogger(__name__)

# mode -> (os.open flags, fdopen mode)
_MODES: dict[str, tuple[int, str]] = {
    "r": (os.O_RDONLY, "rb"),
    "w": (os.O_WRONLY | os.O_CREAT | os.O_TRUNC, "wb"),
    "wt": (os.O_WRONLY | os.O_CREAT | os.O_TRUNC, "wb"),
    "wa": (os.O_WRONLY | os.O_CREAT | os.O_APPEND, "ab"),
    "rw": (os.O_RDWR | os.O_CREAT, "r+b"),
    "rwt": (os.O_RDWR | os.O_CREAT | os.O_TRUNC, "r+b"),
}


def is_write_mode(mode: str) -> bool:
    return "w" in mode or "a" in mode or "t" in mode


def open_config(route: Route, root: Path, gate: PermissionGate, mode: str) -> BinaryIO:
    """Open the entry addressed by ``route``.

    Args:
        route: Classified request URI.
        root: Private storage root holding the type directories.
        gate: Read/write toggles, checked before any filesystem access.
        mode: One of ``r``, ``w``, ``wt``, ``wa``, ``rw``, ``rwt``.

    Raises:
        ConfigFileNotFoundError: Route is not a single item, type or name is
            invalid, or a read-class open targets a missing file.
        AccessDeniedError: The toggle for the requested access is off.
        ValueError: Unknown mode string.
    """
    if route.kind is not RouteKind.SINGLE_ITEM:
        raise ConfigFileNotFoundError("Unsupported uri")

    config_type = parse_type(route.type_token)
    if config_type is None:
        raise ConfigFileNotFoundError(f"Invalid type: {route.type_token}")
    if not valid_name(route.name):
        raise ConfigFileNotFoundError("Invalid name")

    if mode not in _MODES:
        raise ValueError(f"Invalid mode: {mode}")
    flags, file_mode = _MODES[mode]

    write = is_write_mode(mode)
    if write and not gate.can_write():
        logger.debug("Write denied for %s/%s", config_type.type_name, route.name)
        raise AccessDeniedError("Config write not allowed")
    if not write and not gate.can_read():
        logger.debug("Read denied for %s/%s", config_type.type_name, route.name)
        raise AccessDeniedError("Config read not allowed")

    directory = config_type.directory(root)
    if write:
        directory.mkdir(parents=True, exist_ok=True)

    path = directory / route.name
    if not write and not path.is_file():
        raise ConfigFileNotFoundError("File not found")

    try:
        fd = os.open(path, flags, 0o600)
    except (FileNotFoundError, IsADirectoryError) as e:
        raise ConfigFileNotFoundError("File not found") from e
    return os.fdopen(fd, file_mode)
