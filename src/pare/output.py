"""Output with strict stdout/stderr discipline.

Follows `clig.dev <https://clig.dev/>`_ conventions:

* **stdout** -- primary data only (the short URL, ``code/status``, metadata,
  and the ``conflict``/``noexist`` outcomes). This is what shell scripts
  capture.
* **stderr** -- all diagnostics (errors and ``--debug`` trace lines).
  Never contaminates the data stream.
* **Colour control** -- respects ``NO_COLOR``, ``TERM=dumb``, and the
  ``no_color`` argument.

An :class:`OutputManager` is created once in the root callback of
:mod:`pare.app` and passed explicitly to the config resolver, the client,
and the command handlers.
"""

from __future__ import annotations

import json
import os
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape


class OutputManager:
    """Routes data to stdout and diagnostics to stderr.

    Args:
        debug: Emit ``[debug]`` trace lines on stderr.
        no_color: Disable colour and Rich styling on stderr.
    """

    def __init__(self, debug: bool = False, no_color: bool = False) -> None:
        self._debug = debug
        self._no_color = no_color or _should_disable_color()

        # Console for stderr (diagnostics)
        self._stderr = Console(
            file=sys.stderr,
            no_color=self._no_color,
            stderr=True,
            highlight=False,
            soft_wrap=True,
        )

    # ------------------------------------------------------------------ #
    # Data output (stdout)
    # ------------------------------------------------------------------ #

    def print_data(self, text: str) -> None:
        """Print a line of primary data to stdout.

        Args:
            text: The line to write; a newline is appended.
        """
        print(text, file=sys.stdout, flush=True)

    def print_json(self, data: Any) -> None:
        """Pretty-print *data* as two-space-indented JSON to stdout.

        Strings are assumed to already hold JSON text and are re-indented.
        """
        if isinstance(data, str):
            data = json.loads(data)
        self.print_data(json.dumps(data, indent=2, ensure_ascii=False, default=str))

    # ------------------------------------------------------------------ #
    # Diagnostics (stderr)
    # ------------------------------------------------------------------ #

    def error(self, message: str) -> None:
        """Print a bold-red error to stderr. Never suppressed."""
        if self._no_color:
            print(f"Error: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def debug(self, message: str) -> None:
        """Print a trace line to stderr. Only shown with ``--debug``.

        Args:
            message: The trace text (prefixed with ``[debug]`` on output).
        """
        if not self._debug:
            return
        if self._no_color:
            print(f"[debug] {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[dim]\\[debug] {escape(message)}[/dim]")


def _should_disable_color() -> bool:
    """Check if color should be disabled per clig.dev.

    Returns True when NO_COLOR env var is set (any value) or TERM=dumb.
    """
    if os.environ.get("NO_COLOR") is not None:
        return True
    if os.environ.get("TERM") == "dumb":
        return True
    return False
