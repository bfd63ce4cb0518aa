"""Amphibians - browse amphibian records fetched from a remote JSON endpoint.

Architecture::

    datasources/   External API (amphibians endpoint on the Mars server)
    repository.py  Substitution point between the view model and the API client
    ui/            UI state (Loading/Success/Error), StateFlow, view model
    renderers/     Pure state → HTML (loading, error, list, card screens)
    server.py      Live app: renders the current state, accepts retry
    flows/         Prefect snapshot build (fetch once, write site/index.html)
    services/      Shared utilities (HTTP session with default timeout)

Data flow: datasources → repository → view model (state) → renderers → page
"""

__version__ = "0.1.0"

from amphibians.config import Settings
from amphibians.schemas import Amphibian

__all__ = ["Amphibian", "Settings", "__version__"]
