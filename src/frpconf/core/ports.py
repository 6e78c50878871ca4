"""Core ports (interfaces) for frpconf.

The provider only depends on these protocols; the persisted settings live
behind adapters so tests can swap in plain fakes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PermissionGate(Protocol):
    """User-controlled toggles for external config access."""

    def can_read(self) -> bool:
        """Whether external callers may list and read configs."""

    def can_write(self) -> bool:
        """Whether external callers may create or modify configs."""


@runtime_checkable
class PreferenceStore(Protocol):
    """Persisted key-value store holding boolean settings."""

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Read a boolean; missing keys return ``default``."""

    def put_bool(self, key: str, value: bool) -> None:
        """Persist a boolean."""
