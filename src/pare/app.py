"""Typer application and CLI entry point for pare.

This module wires together the top-level Typer application: the global
``--debug``, ``--server`` and ``--apikey`` flags, the ``shorten``,
``delete``, ``meta`` and ``config`` commands, command aliases, and the
default command (``pare <url>`` means ``pare shorten <url>``).

:class:`PareGroup` is the outermost dispatcher. Command handlers raise
:class:`~pare.exceptions.PareError` subclasses for fatal conditions; the
group prints the message to stderr and exits with the error's
``exit_code``. Expected negative outcomes (conflict, nonexistent code) are
returned by the handlers as exit codes and never reach it.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``.
"""

from __future__ import annotations

import signal
import sys
import traceback
from typing import Any, Optional

import click
import typer
from typer.core import TyperGroup

from pare import __version__
from pare.context import AppState, get_state, validate_server_url
from pare.exceptions import PareError
from pare.exit_codes import EXIT_INTERNAL_ERROR, EXIT_INTERRUPTED
from pare.output import OutputManager


class PareGroup(TyperGroup):
    """Root command group with aliases, a default command, and error mapping.

    * ``short`` resolves to ``shorten``; ``del`` and ``rm`` to ``delete``.
    * If the first remaining argument is not a command name it is handed,
      together with everything after it, to :attr:`default_command`.
    * :class:`~pare.exceptions.PareError` raised by a command is printed
      and turned into its exit code.
    """

    aliases: dict[str, str] = {"short": "shorten", "del": "delete", "rm": "delete"}
    default_command = "shorten"

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[Optional[str], Optional[click.Command], list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            args = [self.default_command, *args]
        _, cmd, rest = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, rest

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except PareError as exc:
            output = ctx.obj.output if isinstance(ctx.obj, AppState) else OutputManager()
            output.error(str(exc))
            raise typer.Exit(code=exc.exit_code) from exc


app = typer.Typer(
    name="pare",
    cls=PareGroup,
    help="Command-line interface to the Condenser URL shortening service.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
    # Options of the default command may precede the URL: pare --code x <url>
    context_settings={"ignore_unknown_options": True},
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"pare {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug output."),
    server: Optional[str] = typer.Option(
        None,
        "--server",
        callback=validate_server_url,
        help="Condenser server URL (overriding on-disk config).",
    ),
    apikey: Optional[str] = typer.Option(
        None, "--apikey", help="Condenser API key (overriding on-disk config)."
    ),
) -> None:
    """Root callback executed before every command.

    Builds the :class:`~pare.context.AppState` for this invocation from the
    global flags and stores it on the context. A state passed in by the
    caller (``obj=``) is reused so that tests can inject a transport.

    Args:
        ctx: Typer invocation context.
        version: If ``True``, print the version string and exit.
        debug: Trace config, request and response details to stderr.
        server: Server base URL override.
        apikey: API key override.
    """
    state = get_state(ctx)
    state.debug = debug
    state.server = server
    state.api_key = apikey
    state.output = OutputManager(debug=debug)


# ------------------------------------------------------------------ #
# Commands
# ------------------------------------------------------------------ #

from pare.commands.config import config_command  # noqa: E402
from pare.commands.delete import delete_command  # noqa: E402
from pare.commands.meta import meta_command  # noqa: E402
from pare.commands.shorten import shorten_command  # noqa: E402

app.command("shorten")(shorten_command)
app.command("delete")(delete_command)
app.command("meta")(meta_command)
app.command("config")(config_command)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``pare`` console script.

    Unexpected exceptions (anything that is not a
    :class:`~pare.exceptions.PareError` handled by :class:`PareGroup`)
    produce a one-line error, plus the traceback under ``--debug``, and
    exit with :data:`~pare.exit_codes.EXIT_INTERNAL_ERROR`.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:
        output = OutputManager(debug="--debug" in sys.argv)
        output.error(f"Unexpected error: {exc}")
        output.debug(traceback.format_exc())
        sys.exit(EXIT_INTERNAL_ERROR)
