"""Amphibian list: one GET, decoded into ``Amphibian`` records."""

from __future__ import annotations

from typing import Any

import requests
from pydantic import TypeAdapter, ValidationError

from amphibians.datasources.amphibians.client import amphibians_url
from amphibians.errors import NetworkError, ProtocolError
from amphibians.schemas import Amphibian
from amphibians.services.http import session

_AMPHIBIAN_LIST = TypeAdapter(list[Amphibian])


def parse_amphibians(payload: Any) -> list[Amphibian]:
    """
    Validate a decoded JSON payload into a list of records.

    Unknown fields are ignored; a missing field on any element rejects the
    whole payload.

    Raises:
        ProtocolError: Payload is not a list of well-formed records.
    """
    if not isinstance(payload, list):
        msg = f"Expected a JSON array, got {type(payload).__name__}"
        raise ProtocolError(msg)
    try:
        return _AMPHIBIAN_LIST.validate_python(payload)
    except ValidationError as exc:
        msg = f"Malformed amphibian record: {exc.error_count()} validation error(s)"
        raise ProtocolError(msg) from exc


def fetch_amphibians(
    base_url: str | None = None,
    *,
    http: requests.Session | None = None,
) -> list[Amphibian]:
    """
    Fetch every amphibian from ``<base_url>/amphibians``.

    Args:
        base_url: Server root (defaults to the public Mars server).
        http: Session to use (defaults to the shared module session).

    Returns:
        Records in the order the server sent them.

    Raises:
        NetworkError: Connection failure, timeout, or any other transport error.
        ProtocolError: Non-2xx status, broken body or redirect loop, or
            undecodable payload.
    """
    url = amphibians_url(base_url)
    client = http or session
    try:
        resp = client.get(url)
        resp.raise_for_status()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        msg = f"GET {url} returned HTTP {status}"
        raise ProtocolError(msg, status_code=status) from exc
    except (
        requests.exceptions.ChunkedEncodingError,
        requests.exceptions.ContentDecodingError,
        requests.TooManyRedirects,
    ) as exc:
        msg = f"GET {url} returned a broken response: {exc}"
        raise ProtocolError(msg) from exc
    except requests.RequestException as exc:
        msg = f"GET {url} failed: {exc}"
        raise NetworkError(msg) from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        msg = f"GET {url} returned a body that is not JSON"
        raise ProtocolError(msg, status_code=resp.status_code) from exc

    return parse_amphibians(payload)
