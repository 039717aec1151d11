"""``pare shorten`` -- create a short URL.

Sends ``POST /api/shorten`` with the URL and, when given, the requested
shortcode (``code``) and free-form user metadata (``meta``). Empty
``--code``/``--meta`` values are treated as unset and left out of the body.

Outcomes:

- 200 -- the short URL is printed to stdout, exit 0.
- 409 -- the requested code is taken; ``conflict`` is printed to stdout and
  the process exits with :data:`~pare.exit_codes.EXIT_CONFLICT`.
- anything else -- :class:`~pare.exceptions.UnexpectedStatusError`.
"""

from __future__ import annotations

import typer

from pare.client import SHORTEN_ENDPOINT, CondenserClient
from pare.context import get_state, validate_url
from pare.exceptions import UnexpectedStatusError
from pare.exit_codes import EXIT_CONFLICT, EXIT_SUCCESS
from pare.models import ShortenRequest, ShortenResponse
from pare.output import OutputManager


def run_shorten(client: CondenserClient, request: ShortenRequest, output: OutputManager) -> int:
    """Shorten ``request.url`` and return the exit code.

    Args:
        client: An opened client.
        request: The shorten request body.
        output: Destination for the short URL or the conflict outcome.

    Returns:
        :data:`~pare.exit_codes.EXIT_SUCCESS` or
        :data:`~pare.exit_codes.EXIT_CONFLICT`.

    Raises:
        UnexpectedStatusError: For any status other than 200 and 409.
    """
    result = client.post(SHORTEN_ENDPOINT, request, ShortenResponse)
    if result.status_code == 409:
        output.print_data("conflict")
        return EXIT_CONFLICT
    if not result.ok or result.data is None:
        raise UnexpectedStatusError(result.status_code, "shorten")

    output.print_data(result.data.short_url)
    return EXIT_SUCCESS


def shorten_command(
    ctx: typer.Context,
    url: str = typer.Argument(help="URL to shorten.", callback=validate_url),
    code: str = typer.Option(
        "", "--code", help="Code to shorten to (random if unspecified)."
    ),
    meta: str = typer.Option("", "--meta", help="User-defined metadata."),
) -> None:
    """Shorten a URL. Aliases: short. Default command.

    Example::

        pare shorten http://example.com
        pare --code docs --meta "team wiki" http://example.com/docs
    """
    state = get_state(ctx)
    state.output.debug(f"shorten: {url}")

    request = ShortenRequest(url=url, shortcode=code, meta=meta)
    with state.open_client() as client:
        exit_code = run_shorten(client, request, state.output)
    raise typer.Exit(code=exit_code)
