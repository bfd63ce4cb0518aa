"""Errors raised by the amphibians API client.

Both kinds surface identically to the user (a generic failure screen); the
distinction is kept for logging.
"""

from __future__ import annotations


class AmphibianApiError(Exception):
    """Base class for any failure fetching the amphibian list."""


class NetworkError(AmphibianApiError):
    """The server could not be reached (no connectivity, timeout)."""


class ProtocolError(AmphibianApiError):
    """The server answered, but not with a 2xx list of well-formed records."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
