"""
Live app server.

Renders the view model's current state on every request and turns the retry
control into ``view_model.retry()``::

    GET  /        page for the current state
    POST /retry   start a refetch, then 303 back to /
"""

from __future__ import annotations

import http.server
import logging
from http import HTTPStatus
from typing import TYPE_CHECKING

from amphibians.renderers.screens import RETRY_URL, build_page_html

if TYPE_CHECKING:
    from amphibians.config import Settings
    from amphibians.ui.viewmodel import AmphibianViewModel

logger = logging.getLogger(__name__)


def create_app_handler(
    view_model: AmphibianViewModel,
    settings: Settings,
) -> type[http.server.BaseHTTPRequestHandler]:
    """Build a request handler class bound to ``view_model``."""

    class AmphibianAppHandler(http.server.BaseHTTPRequestHandler):
        server_version = "amphibians"

        def do_GET(self) -> None:  # noqa: N802
            path = self.path.split("?", 1)[0]
            if path in ("/", "/index.html"):
                self._send_page()
            elif path == RETRY_URL:
                # State-changing; POST only.
                self.send_response(HTTPStatus.METHOD_NOT_ALLOWED)
                self.send_header("Allow", "POST")
                self.send_header("Content-Length", "0")
                self.end_headers()
            else:
                self.send_error(HTTPStatus.NOT_FOUND)

        def do_POST(self) -> None:  # noqa: N802
            path = self.path.split("?", 1)[0]
            if path == RETRY_URL:
                # Drain any form body so keep-alive connections stay in sync.
                length = int(self.headers.get("Content-Length") or 0)
                if length:
                    self.rfile.read(length)
                self._retry()
            else:
                self.send_error(HTTPStatus.NOT_FOUND)

        def _send_page(self) -> None:
            html = build_page_html(view_model.ui_state.value, title=settings.app_name)
            body = html.encode("utf-8")
            self.send_response(HTTPStatus.OK)
            self.send_header("Content-Type", "text/html; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.send_header("Cache-Control", "no-store")
            self.end_headers()
            self.wfile.write(body)

        def _retry(self) -> None:
            view_model.retry()
            self.send_response(HTTPStatus.SEE_OTHER)
            self.send_header("Location", "/")
            self.send_header("Content-Length", "0")
            self.end_headers()

        def log_message(self, format: str, *args: object) -> None:  # noqa: A002
            logger.info("%s - %s", self.address_string(), format % args)

    return AmphibianAppHandler


def serve(view_model: AmphibianViewModel, settings: Settings, port: int) -> None:
    """Serve the live app until interrupted."""
    handler = create_app_handler(view_model, settings)
    with http.server.ThreadingHTTPServer(("", port), handler) as server:
        print(f"Serving {settings.app_name} on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")
