"""
View model for the amphibian screen.

Holds the current ``AmphibianUiState`` and runs fetches in the background.
Construction starts the first fetch; ``retry()`` starts another from any state.

Fetches are never cancelled: if two overlap, both run to completion and the
one that finishes last decides the visible state.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING

from amphibians.config import Settings, get_settings
from amphibians.errors import AmphibianApiError
from amphibians.repository import AmphibiansRepository, NetworkAmphibiansRepository
from amphibians.services.http import create_session
from amphibians.ui.observable import ReadOnlyStateFlow, StateFlow
from amphibians.ui.state import AmphibianUiState, Error, Loading, Success

if TYPE_CHECKING:
    from concurrent.futures import Executor
    from types import TracebackType

logger = logging.getLogger(__name__)

MAX_FETCH_WORKERS = 4


class AmphibianViewModel:
    """Fetch/retry state machine exposing ``ui_state`` as a read-only flow."""

    def __init__(
        self,
        repository: AmphibiansRepository,
        *,
        executor: Executor | None = None,
    ) -> None:
        self._repository = repository
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=MAX_FETCH_WORKERS, thread_name_prefix="amphibians-fetch"
        )
        self._ui_state: StateFlow[AmphibianUiState] = StateFlow(Loading())
        self.ui_state: ReadOnlyStateFlow[AmphibianUiState] = self._ui_state.as_read_only()
        self.initial_fetch = self.get_amphibians_list()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> AmphibianViewModel:
        """Wire a network repository from application settings."""
        settings = settings or get_settings()
        http = create_session(timeout=settings.http_timeout)
        return cls(NetworkAmphibiansRepository(settings.base_url, http=http))

    def get_amphibians_list(self) -> Future[AmphibianUiState]:
        """
        Start a background fetch and return without waiting.

        The returned future resolves to the state this fetch wrote, which is
        not necessarily the current state if another fetch finished later.
        """
        # Loading is visible as soon as the fetch is requested, even while the
        # job waits for a free worker.
        self._ui_state.value = Loading()
        return self._executor.submit(self._fetch)

    def retry(self) -> Future[AmphibianUiState]:
        """User-triggered refetch, from Success or Error."""
        logger.info("Retry requested (current state: %s)", type(self._ui_state.value).__name__)
        return self.get_amphibians_list()

    def _fetch(self) -> AmphibianUiState:
        state: AmphibianUiState
        try:
            amphibians = self._repository.get_amphibians()
        except AmphibianApiError as exc:
            logger.warning("Fetching amphibians failed: %s: %s", type(exc).__name__, exc)
            state = Error()
        except Exception:
            logger.exception("Unexpected error while fetching amphibians")
            state = Error()
        else:
            logger.debug("Fetched %d amphibians", len(amphibians))
            state = Success.of(amphibians)
        self._ui_state.value = state
        return state

    def close(self) -> None:
        """Shut down an owned executor, waiting for in-flight fetches."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> AmphibianViewModel:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
