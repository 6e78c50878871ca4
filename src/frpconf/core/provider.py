"""Config provider: the query/open surface exposed to external callers.

Every request is routed first, then gated on the permission toggles, then
handed to the listing or handle code. Calls share no state beyond the
permission store and the filesystem, so one provider can serve many threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO
from urllib.parse import quote

from . import handles, listing
from .errors import AccessDeniedError, NotFoundError, OperationNotSupportedError
from .ports import PermissionGate
from .router import RouteKind, classify

if TYPE_CHECKING:
    from .config_model import AppConfig

logger = logging.getLogger(__name__)

TEXT_MIME_TYPE = "text/plain"


@dataclass
class QueryResult:
    """Rows returned by a query, in ``(_id, type, name)`` column order."""

    rows: list[listing.VirtualRow] = field(default_factory=list)
    columns: tuple[str, ...] = listing.COLUMNS

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)


class ConfigProvider:
    """Mediates external access to the tunnel client's config files."""

    def __init__(self, storage_root: Path, authority: str, permissions: PermissionGate):
        self._root = Path(storage_root)
        self._authority = authority
        self._permissions = permissions

    @classmethod
    def for_config(cls, app_config: AppConfig, permissions: PermissionGate | None = None):
        """Build a provider from the application config.

        Without an explicit gate, the toggles are read from the preferences
        file named in the config.
        """
        if permissions is None:
            from ..adapters.permissions import PreferencesPermissionGate
            from ..adapters.preferences import JsonPreferences

            permissions = PreferencesPermissionGate(JsonPreferences(app_config.prefs_file))
        return cls(app_config.storage_root, app_config.authority, permissions)

    @property
    def authority(self) -> str:
        return self._authority

    @property
    def storage_root(self) -> Path:
        return self._root

    @property
    def collection_mime_type(self) -> str:
        return f"vnd.cursor.dir/vnd.{self._authority}"

    def query(self, uri: str) -> QueryResult:
        """List every entry, or probe a single one.

        Raises:
            AccessDeniedError: Read toggle is off (checked before routing).
            NotFoundError: URI matches no route.
        """
        if not self._permissions.can_read():
            logger.debug("Query denied: %s", uri)
            raise AccessDeniedError("Config read not allowed")

        route = classify(uri, self._authority)
        if route.kind is RouteKind.LIST_ALL:
            return QueryResult(listing.list_all(self._root))
        if route.kind is RouteKind.SINGLE_ITEM:
            row = listing.describe_one(self._root, route.type_token, route.name)
            return QueryResult([row] if row is not None else [])
        raise NotFoundError(f"Unknown URI: {uri}")

    def get_type(self, uri: str) -> str | None:
        kind = classify(uri, self._authority).kind
        if kind is RouteKind.LIST_ALL:
            return self.collection_mime_type
        if kind is RouteKind.SINGLE_ITEM:
            return TEXT_MIME_TYPE
        return None

    def open_file(self, uri: str, mode: str = "r") -> BinaryIO:
        """Open one config entry; the caller owns and must close the result."""
        route = classify(uri, self._authority)
        return handles.open_config(route, self._root, self._permissions, mode)

    def insert(self, uri: str, values: dict | None = None):
        raise OperationNotSupportedError("Insert not supported")

    def update(self, uri: str, values: dict | None = None, selection: str | None = None) -> int:
        raise OperationNotSupportedError("Update not supported")

    def delete(self, uri: str, selection: str | None = None) -> int:
        raise OperationNotSupportedError("Delete not supported")

    def uri_for(self, config_type: str | None = None, name: str | None = None) -> str:
        """Build a provider URI; both parts or neither."""
        base = f"content://{self._authority}"
        if config_type is None and name is None:
            return base
        return f"{base}/{quote(config_type or '', safe='')}/{quote(name or '', safe='')}"
