"""``pare meta`` -- show what a shortcode points to.

Sends ``GET /api/meta/<code>`` and prints the full URL, owner, creation time
and user-defined metadata, either human-readable::

    Code: ABC
    Full URL: http://example.com
    Owner: alice
    Created at: Tue Jan  2 15:04:05 UTC 2024
    User-defined metadata: team wiki

or, with ``--json``, as the indented response document. An unknown code
prints ``noexist`` and exits with :data:`~pare.exit_codes.EXIT_NO_EXIST`.
"""

from __future__ import annotations

from datetime import datetime

import typer

from pare.client import META_ENDPOINT, CondenserClient
from pare.context import get_state
from pare.exceptions import UnexpectedStatusError
from pare.exit_codes import EXIT_NO_EXIST, EXIT_SUCCESS
from pare.models import MetaResponse
from pare.output import OutputManager


def format_unix_date(value: datetime) -> str:
    """Format *value* like ``date(1)``: ``Mon Jan  2 15:04:05 MST 2006``.

    The day of month is space-padded to two characters. Zones without an
    alphabetic abbreviation are written as a numeric offset (``+0200``). The
    zone is omitted for naive datetimes.
    """
    parts = [value.strftime("%a %b"), f"{value.day:2d}", value.strftime("%H:%M:%S")]
    zone = value.strftime("%Z")
    if not zone.isalpha():
        zone = value.strftime("%z")
    if zone:
        parts.append(zone)
    parts.append(str(value.year))
    return " ".join(parts)


def format_meta(code: str, response: MetaResponse) -> list[str]:
    """Render *response* as the human-readable lines printed by ``pare meta``."""
    lines = [
        f"Code: {code.upper()}",
        f"Full URL: {response.full_url}",
        f"Owner: {response.meta.owner}",
        f"Created at: {format_unix_date(response.meta.time)}",
    ]
    if response.meta.user_meta:
        lines.append(f"User-defined metadata: {response.meta.user_meta}")
    return lines


def run_meta(
    client: CondenserClient,
    code: str,
    json_output: bool,
    output: OutputManager,
) -> int:
    """Fetch metadata for *code*, print it, and return the exit code.

    Raises:
        UnexpectedStatusError: For any status other than 200 and 404.
    """
    result = client.get(META_ENDPOINT + code, MetaResponse)
    if result.status_code == 404:
        output.print_data("noexist")
        return EXIT_NO_EXIST
    if not result.ok or result.data is None:
        raise UnexpectedStatusError(result.status_code, "meta")

    if json_output:
        output.print_json(result.data.model_dump_json(exclude_none=True))
    else:
        for line in format_meta(code, result.data):
            output.print_data(line)
    return EXIT_SUCCESS


def meta_command(
    ctx: typer.Context,
    code: str = typer.Argument(help="Code to fetch metadata for."),
    json_output: bool = typer.Option(
        False, "--json", help="Output JSON instead of human-readable."
    ),
) -> None:
    """Get metadata for a code.

    Example::

        pare meta abc
        pare meta --json abc | jq -r .full_url
    """
    state = get_state(ctx)
    state.output.debug(f"meta: {code}")

    with state.open_client() as client:
        exit_code = run_meta(client, code, json_output, state.output)
    raise typer.Exit(code=exit_code)
