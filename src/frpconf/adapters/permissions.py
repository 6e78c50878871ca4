"""Permission gate adapter backed by the preference store."""

from __future__ import annotations

from ..core.ports import PreferenceStore
from .preferences import PreferencesKey


class PreferencesPermissionGate:
    """Reads both toggles fresh on every call; both default to off."""

    def __init__(self, store: PreferenceStore):
        self._store = store

    def can_read(self) -> bool:
        return self._store.get_bool(PreferencesKey.ALLOW_CONFIG_READ, False)

    def can_write(self) -> bool:
        return self._store.get_bool(PreferencesKey.ALLOW_CONFIG_WRITE, False)
