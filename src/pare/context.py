"""Per-invocation state carried on the Typer context.

The root callback in :mod:`pare.app` fills an :class:`AppState` from the
global flags and stores it as ``ctx.obj``; each command reads it back with
:func:`get_state`. Nothing here is process-global: a fresh state is built
for every invocation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import httpx
import typer

from pare.client import CondenserClient
from pare.config import resolve_config
from pare.models import Config
from pare.output import OutputManager


@dataclass
class AppState:
    """Global options plus the collaborators built from them.

    Attributes:
        debug: ``--debug`` was given.
        server: ``--server`` override, if any.
        api_key: ``--apikey`` override, if any.
        output: Output manager for this invocation.
        transport: httpx transport override. ``None`` means the network;
            tests pass an :class:`httpx.MockTransport` via
            ``CliRunner.invoke(..., obj=AppState(transport=...))``.
    """

    debug: bool = False
    server: Optional[str] = None
    api_key: Optional[str] = None
    output: OutputManager = field(default_factory=OutputManager)
    transport: Optional[httpx.BaseTransport] = None

    def resolve_config(self) -> Config:
        """Merge ``~/.pare.json`` with this invocation's overrides."""
        return resolve_config(self.server, self.api_key, output=self.output)

    def open_client(self) -> CondenserClient:
        """Return an unopened client for the effective config."""
        return CondenserClient(self.resolve_config(), self.output, transport=self.transport)


def get_state(ctx: typer.Context) -> AppState:
    """Return the :class:`AppState` stored on *ctx*, creating a default one if absent."""
    return ctx.ensure_object(AppState)


def _is_absolute(url: httpx.URL) -> bool:
    return bool(url.scheme) and bool(url.host)


def validate_url(value: str) -> str:
    """Typer callback: require an absolute URL (scheme and host)."""
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise typer.BadParameter(f"invalid URL {value!r}: {exc}") from exc
    if not _is_absolute(url):
        raise typer.BadParameter(f"{value!r} is not an absolute URL")
    return value


def validate_server_url(value: Optional[str]) -> Optional[str]:
    """Typer callback: require an absolute ``http``/``https`` URL when given."""
    if not value:
        return value
    validate_url(value)
    if httpx.URL(value).scheme not in ("http", "https"):
        raise typer.BadParameter(f"{value!r} must use http or https")
    return value
