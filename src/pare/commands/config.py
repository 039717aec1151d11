"""``pare config`` -- show the effective configuration.

Prints where the config file is expected, the server URL, and the API key
(masked) after ``--server``/``--apikey`` overrides are applied. Nothing is
written.
"""

from __future__ import annotations

import typer

from pare.config import config_path, mask_secret
from pare.context import get_state


def config_command(ctx: typer.Context) -> None:
    """Show the effective server and API key.

    Example::

        pare config
        pare --server https://s.example config
    """
    state = get_state(ctx)
    config = state.resolve_config()

    path = config_path()
    state.output.print_data(f"Config file: {path}{'' if path.exists() else ' (not found)'}")
    state.output.print_data(f"Server: {config.server or '(unset)'}")
    state.output.print_data(f"API key: {mask_secret(config.api_key)}")
