"""Errors raised by the config provider.

Each error also derives from the closest builtin so callers that only know
about ``FileNotFoundError`` or ``PermissionError`` still catch them.
"""

from __future__ import annotations


class ProviderError(Exception):
    """Base class for config provider errors."""


class NotFoundError(ProviderError, LookupError):
    """The request URI does not match any provider route."""


class ConfigFileNotFoundError(ProviderError, FileNotFoundError):
    """open() target is missing or not addressable."""


class AccessDeniedError(ProviderError, PermissionError):
    """The read or write toggle is off."""


class OperationNotSupportedError(ProviderError):
    """insert/update/delete are never supported."""
