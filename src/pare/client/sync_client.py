"""Blocking HTTP client for the Condenser API.

:class:`CondenserClient` performs exactly one round trip per call and
leaves status-code policy to the caller:

- **HTTP 200** -- the body is read and validated into the caller's
  response model; a body that does not fit is a
  :class:`~pare.exceptions.ResponseParseError`.
- **Any other status** -- the status code is returned and the body is
  neither read nor parsed. Each command decides what a 404 or 409 means.
- **Transport failures** -- connection refused, timeouts and malformed
  HTTP raise :class:`~pare.exceptions.ConnectionError_`. There is no retry.

With ``--debug`` the outgoing body, the request line and headers (API key
masked), the status, and the raw response body are traced to stderr.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from pare.client.request import API_KEY_HEADER, build_request
from pare.config import mask_secret
from pare.exceptions import ConnectionError_, ResponseParseError
from pare.models import Config
from pare.output import OutputManager

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class ApiResult(Generic[ModelT]):
    """Outcome of one round trip.

    ``data`` is populated only when ``status_code`` is 200.
    """

    status_code: int
    data: Optional[ModelT] = None

    @property
    def ok(self) -> bool:
        return self.status_code == 200


class CondenserClient:
    """Synchronous client for a Condenser server.

    Must be used as a context manager so that the underlying
    :class:`httpx.Client` is opened and closed.

    Args:
        config: Effective config (server base URL and API key).
        output: Output manager used for debug tracing.
        transport: Optional httpx transport, e.g. :class:`httpx.MockTransport`
            in tests. ``None`` uses the default network transport.

    Example::

        with CondenserClient(config, output) as client:
            result = client.get(META_ENDPOINT + "abc", MetaResponse)
    """

    def __init__(
        self,
        config: Config,
        output: OutputManager,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._output = output
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> CondenserClient:
        self._client = httpx.Client(transport=self._transport)
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def execute(
        self,
        method: str,
        endpoint: str,
        body: Optional[BaseModel],
        response_model: type[ModelT],
    ) -> ApiResult[ModelT]:
        """Send one request and return its status (and parsed body on 200).

        Args:
            method: HTTP method.
            endpoint: Path appended to the configured server URL.
            body: Request model serialized as JSON; ``None`` sends ``{}``.
            response_model: Model the 200 response body is validated into.

        Returns:
            An :class:`ApiResult`. ``data`` is ``None`` for non-200 statuses.

        Raises:
            RequestBuildError: If the request URL is malformed.
            ConnectionError_: On any transport-level failure.
            ResponseParseError: If a 200 body does not match *response_model*.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        request = build_request(self._config, method, endpoint, body)
        self._output.debug(f"txBody: {request.content.decode('utf-8')}")
        self._output.debug(f"req: {request.method} {request.url} headers={self._loggable_headers(request)}")

        try:
            response = self._client.send(request, stream=True)
        except httpx.RequestError as exc:
            raise ConnectionError_(
                f"error executing {request.method} {request.url} against condenser server: {exc}"
            ) from exc

        try:
            self._output.debug(f"status: {response.status_code}")
            if response.status_code != 200:
                return ApiResult(status_code=response.status_code)

            try:
                raw = response.read()
            except httpx.RequestError as exc:
                raise ConnectionError_(f"error reading response: {exc}") from exc
            self._output.debug(f"rxBody: {raw.decode('utf-8', errors='replace')}")

            try:
                data = response_model.model_validate_json(raw)
            except ValidationError as exc:
                raise ResponseParseError(f"error parsing response: {exc}") from exc
            return ApiResult(status_code=response.status_code, data=data)
        finally:
            response.close()

    def get(self, endpoint: str, response_model: type[ModelT]) -> ApiResult[ModelT]:
        """Send a GET request with an empty JSON object as its body."""
        return self.execute("GET", endpoint, None, response_model)

    def post(
        self,
        endpoint: str,
        body: BaseModel,
        response_model: type[ModelT],
    ) -> ApiResult[ModelT]:
        """Send a POST request with *body* serialized as JSON."""
        return self.execute("POST", endpoint, body, response_model)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _loggable_headers(request: httpx.Request) -> dict[str, str]:
        headers = dict(request.headers)
        for key in headers:
            if key.lower() == API_KEY_HEADER.lower():
                headers[key] = mask_secret(headers[key])
        return headers
