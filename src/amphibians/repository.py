"""
Amphibian repository.

The view model talks to an ``AmphibiansRepository`` rather than the API client
so tests can hand it a fake data source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from amphibians.datasources.amphibians import fetch_amphibians

if TYPE_CHECKING:
    import requests

    from amphibians.schemas import Amphibian


class AmphibiansRepository(Protocol):
    """Source of the amphibian list."""

    def get_amphibians(self) -> list[Amphibian]: ...


class NetworkAmphibiansRepository:
    """Repository backed by the remote ``amphibians`` endpoint."""

    def __init__(self, base_url: str | None = None, http: requests.Session | None = None) -> None:
        self.base_url = base_url
        self.http = http

    def get_amphibians(self) -> list[Amphibian]:
        """Fetch the list; API errors propagate unchanged."""
        return fetch_amphibians(self.base_url, http=self.http)
