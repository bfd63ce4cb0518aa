"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys

from amphibians import __version__
from amphibians.config import get_settings
from amphibians.flows.build import build_site
from amphibians.logging_config import configure_logging
from amphibians.server import serve
from amphibians.ui.viewmodel import AmphibianViewModel


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="amphibians",
        description="Browse amphibian records from the amphibians endpoint",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    refresh_parser = subparsers.add_parser("refresh", help="Fetch once and build site/index.html")
    refresh_parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Server root to fetch from (default: base_url from settings)",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the live app locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Base URL: {settings.base_url}")
    return 0


def cmd_refresh(args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: one fetch, then write the snapshot."""
    result = build_site(base_url=getattr(args, "base_url", None))
    if result.get("state") != "success":
        print("Error: could not load amphibians.", file=sys.stderr)
        return 1
    print("Done.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: run the live app."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port

    with AmphibianViewModel.from_settings(settings) as view_model:
        serve(view_model, settings, port)
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    settings = get_settings()
    debug = getattr(args, "debug", False) or settings.debug
    configure_logging("DEBUG" if debug else settings.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "refresh": cmd_refresh,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
