"""``pare delete`` -- remove a shortcode.

Sends ``POST /api/delete`` with ``{"code": ...}`` and prints the server's
verdict as ``<code>/<status>`` (e.g. ``abc/deleted`` or ``abc/noexist``).
Deleting a code that does not exist succeeds unless ``--fail-no-exist`` is
given, in which case the exit code is
:data:`~pare.exit_codes.EXIT_NO_EXIST`.
"""

from __future__ import annotations

import typer

from pare.client import DELETE_ENDPOINT, CondenserClient
from pare.context import get_state
from pare.exceptions import UnexpectedStatusError
from pare.exit_codes import EXIT_NO_EXIST, EXIT_SUCCESS
from pare.models import DeleteRequest, DeleteResponse
from pare.output import OutputManager


def run_delete(
    client: CondenserClient,
    code: str,
    fail_no_exist: bool,
    output: OutputManager,
) -> int:
    """Delete *code* and return the exit code.

    Raises:
        UnexpectedStatusError: For any status other than 200.
    """
    result = client.post(DELETE_ENDPOINT, DeleteRequest(code=code), DeleteResponse)
    if not result.ok or result.data is None:
        raise UnexpectedStatusError(result.status_code, "delete")

    response = result.data
    output.print_data(f"{response.code}/{response.status}")
    if fail_no_exist and not response.existed:
        return EXIT_NO_EXIST
    return EXIT_SUCCESS


def delete_command(
    ctx: typer.Context,
    code: str = typer.Argument(help="Code to delete."),
    fail_no_exist: bool = typer.Option(
        False,
        "--fail-no-exist",
        help="Return non-zero exit if code didn't exist.",
    ),
) -> None:
    """Delete a shortcode. Aliases: del, rm.

    Example::

        pare rm abc
        pare delete --fail-no-exist abc || echo "abc was already gone"
    """
    state = get_state(ctx)
    state.output.debug(f"rm: {code}")

    with state.open_client() as client:
        exit_code = run_delete(client, code, fail_no_exist, state.output)
    raise typer.Exit(code=exit_code)
