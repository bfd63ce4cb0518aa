"""Amphibians data source.

Public API:
  - client: BASE_URL, AMPHIBIANS_PATH, amphibians_url
  - listing: fetch_amphibians, parse_amphibians
"""

from amphibians.datasources.amphibians.client import (
    AMPHIBIANS_PATH,
    BASE_URL,
    amphibians_url,
)
from amphibians.datasources.amphibians.listing import fetch_amphibians, parse_amphibians

__all__ = [
    "AMPHIBIANS_PATH",
    "BASE_URL",
    "amphibians_url",
    "fetch_amphibians",
    "parse_amphibians",
]
