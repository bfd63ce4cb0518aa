"""
Tests for the live app server.
"""

from __future__ import annotations

import http.server
import threading
from typing import TYPE_CHECKING
from unittest.mock import MagicMock, Mock, patch

import pytest
import requests
from fakes import FROG, FakeAmphibiansRepository, ImmediateExecutor

from amphibians.config import Settings
from amphibians.errors import NetworkError
from amphibians.renderers import strings
from amphibians.server import create_app_handler, serve
from amphibians.ui.viewmodel import AmphibianViewModel

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def repo() -> FakeAmphibiansRepository:
    return FakeAmphibiansRepository(NetworkError("offline"), [FROG])


@pytest.fixture
def base_url(repo: FakeAmphibiansRepository) -> Iterator[str]:
    """Run the app on an ephemeral port for the duration of a test."""
    vm = AmphibianViewModel(repo, executor=ImmediateExecutor())
    handler = create_app_handler(vm, Settings())
    server = http.server.ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


class TestAppHandler:
    """Request routing."""

    def test_index_renders_current_state(self, base_url: str) -> None:
        resp = requests.get(f"{base_url}/", timeout=5)
        assert resp.status_code == 200
        assert resp.headers["Content-Type"].startswith("text/html")
        assert strings.LOADING_FAILED in resp.text

    def test_post_retry_redirects_and_refetches(
        self, base_url: str, repo: FakeAmphibiansRepository
    ) -> None:
        resp = requests.post(f"{base_url}/retry", timeout=5, allow_redirects=False)
        assert resp.status_code == 303
        assert resp.headers["Location"] == "/"
        assert repo.calls == 2

        page = requests.get(f"{base_url}/", timeout=5)
        assert "Frog (Toad)" in page.text

    def test_post_retry_with_form_body(self, base_url: str) -> None:
        resp = requests.post(f"{base_url}/retry", data={"x": "1"}, timeout=5)
        assert resp.status_code == 200
        assert "Frog (Toad)" in resp.text

    def test_get_retry_not_allowed(self, base_url: str, repo: FakeAmphibiansRepository) -> None:
        resp = requests.get(f"{base_url}/retry", timeout=5, allow_redirects=False)
        assert resp.status_code == 405
        assert resp.headers["Allow"] == "POST"
        assert repo.calls == 1

    def test_unknown_path(self, base_url: str) -> None:
        assert requests.get(f"{base_url}/nope", timeout=5).status_code == 404
        assert requests.post(f"{base_url}/nope", timeout=5).status_code == 404


class TestServe:
    """serve() wiring."""

    def test_uses_port_and_stops_on_interrupt(self) -> None:
        vm = Mock()
        mock_server = MagicMock()
        mock_server.__enter__ = Mock(return_value=mock_server)
        mock_server.__exit__ = Mock(return_value=False)
        mock_server.serve_forever = Mock(side_effect=KeyboardInterrupt)

        with patch(
            "amphibians.server.http.server.ThreadingHTTPServer", return_value=mock_server
        ) as mock_ctor:
            serve(vm, Settings(), 9999)

        assert mock_ctor.call_args[0][0] == ("", 9999)
        mock_server.serve_forever.assert_called_once()
