"""Amphibians API constants.

The server exposes a single resource::

    GET <base-url>/amphibians  ->  [{"name", "type", "description", "imgSrc"}, ...]
"""

from __future__ import annotations

BASE_URL = "https://android-kotlin-fun-mars-server.appspot.com/"
AMPHIBIANS_PATH = "amphibians"


def amphibians_url(base_url: str | None = None) -> str:
    """Join ``base_url`` and the amphibians path, with or without a trailing slash."""
    base = base_url or BASE_URL
    return f"{base.rstrip('/')}/{AMPHIBIANS_PATH}"
