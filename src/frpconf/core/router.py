"""URI routing for the config provider.

URIs look like ``scheme://authority[/type/name]``:

- no path segments      -> every config entry
- exactly two segments  -> one entry (type token, file name)
- anything else         -> unrecognized
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from urllib.parse import unquote, urlsplit


class RouteKind(Enum):
    LIST_ALL = auto()
    SINGLE_ITEM = auto()
    UNRECOGNIZED = auto()


@dataclass(frozen=True)
class Route:
    kind: RouteKind
    type_token: str | None = None
    name: str | None = None


UNRECOGNIZED = Route(RouteKind.UNRECOGNIZED)


def path_segments(path: str) -> list[str]:
    """Split a URI path into decoded, non-empty segments."""
    return [unquote(segment) for segment in path.split("/") if segment]


def classify(uri: str, authority: str) -> Route:
    parts = urlsplit(uri)
    if parts.netloc != authority:
        return UNRECOGNIZED

    segments = path_segments(parts.path)
    if not segments:
        return Route(RouteKind.LIST_ALL)
    if len(segments) == 2:
        return Route(RouteKind.SINGLE_ITEM, type_token=segments[0], name=segments[1])
    return UNRECOGNIZED
