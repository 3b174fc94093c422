"""Errors that end a weather refresh.

Every error here is terminal for the current refresh: the screen shows its
message once and returns to idle. Nothing is retried.
"""

from typing import Optional


class NowcastError(Exception):
    """Base class for all refresh failures."""


class PermissionDenied(NowcastError):
    """Neither fine nor coarse location permission was granted."""


class LocationUnavailable(NowcastError):
    """The location provider returned no fix or failed."""


class LocationProviderError(NowcastError):
    """Raised by a location provider; the acquirer turns it into LocationUnavailable."""


class NetworkError(NowcastError):
    """Transport failure, timeout or non-2xx response from the weather API."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ParseError(NowcastError):
    """The weather API response did not match the expected shape."""
