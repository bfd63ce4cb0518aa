"""Logging setup shared by the CLI and the live server.

Usage::

    import logging
    logger = logging.getLogger(__name__)

``configure_logging`` is called once from the entry point; library modules only
ask for a named logger.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a stream handler on the root logger at ``level``."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        force=True,
    )
