"""Request construction for the Condenser API.

Every request targets ``config.server + endpoint`` and carries the same
header set::

    Accept: application/json
    Content-Type: application/json
    X-API-Key: <config.api_key>
    User-Agent: pare/<version> (python-httpx)
    Connection: close

The body is always JSON; requests without a meaningful body (``GET
/api/meta/<code>``) send an empty object.
"""

from __future__ import annotations

from typing import Optional

import httpx
from pydantic import BaseModel

from pare import __version__
from pare.exceptions import RequestBuildError
from pare.models import Config, to_wire_json

SHORTEN_ENDPOINT = "/api/shorten"
DELETE_ENDPOINT = "/api/delete"
META_ENDPOINT = "/api/meta/"  # + code

API_KEY_HEADER = "X-API-Key"
USER_AGENT = f"pare/{__version__} (python-httpx)"


def build_headers(config: Config) -> dict[str, str]:
    """Return the header set sent with every request."""
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
        API_KEY_HEADER: config.api_key,
        "User-Agent": USER_AGENT,
        # One request per process; do not keep the connection alive.
        "Connection": "close",
    }


def build_request(
    config: Config,
    method: str,
    endpoint: str,
    body: Optional[BaseModel] = None,
) -> httpx.Request:
    """Construct a fully-formed request for *endpoint* on the configured server.

    Args:
        config: Effective config supplying the server base URL and API key.
        method: HTTP method (``GET`` or ``POST``).
        endpoint: Path appended verbatim to ``config.server``.
        body: Request model serialized as JSON; ``None`` sends ``{}``.

    Returns:
        The unsent :class:`httpx.Request`.

    Raises:
        RequestBuildError: If ``config.server + endpoint`` is not an absolute
            ``http``/``https`` URL.
    """
    full_url = config.server + endpoint
    try:
        url = httpx.URL(full_url)
    except httpx.InvalidURL as exc:
        raise RequestBuildError(f"error constructing request for {full_url!r}: {exc}") from exc

    if url.scheme not in ("http", "https") or not url.host:
        raise RequestBuildError(
            f"error constructing request: {full_url!r} is not an absolute http(s) URL "
            "(set Server in ~/.pare.json or pass --server)"
        )

    return httpx.Request(
        method.upper(),
        url,
        headers=build_headers(config),
        content=to_wire_json(body).encode("utf-8"),
    )
