"""HTTP client module for pare.

Wraps :mod:`httpx` to perform the single request/response round trip of
each ``pare`` command.

Modules:
    :mod:`pare.client.request` -- endpoint constants and
        :func:`~pare.client.request.build_request`, which assembles the
        headers and JSON body.
    :mod:`pare.client.sync_client` -- :class:`CondenserClient`, a blocking
        client that returns the status code and, for HTTP 200 only, the
        parsed response model.

Example::

    from pare.client import CondenserClient
    from pare.models import ShortenRequest, ShortenResponse

    with CondenserClient(config, output) as client:
        result = client.post(SHORTEN_ENDPOINT, ShortenRequest(url=url), ShortenResponse)
"""

from pare.client.request import (
    DELETE_ENDPOINT,
    META_ENDPOINT,
    SHORTEN_ENDPOINT,
    build_request,
)
from pare.client.sync_client import ApiResult, CondenserClient

__all__ = [
    "ApiResult",
    "CondenserClient",
    "DELETE_ENDPOINT",
    "META_ENDPOINT",
    "SHORTEN_ENDPOINT",
    "build_request",
]
