"""Shared test fixtures for pare.

Provides an isolated home directory for config-file tests, a plain-text
output manager, helpers for building ``httpx.MockTransport`` servers, and a
Typer CLI runner. These fixtures are automatically discovered by pytest and
available to all test modules without explicit imports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from pare.models import Config
from pare.output import OutputManager


Handler = Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Force plain (uncoloured) diagnostics so assertions see raw text."""
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``Path.home()`` at an empty temporary directory.

    Returns:
        The fake home directory. ``~/.pare.json`` does not exist yet.
    """
    fake_home = tmp_path / "home"
    fake_home.mkdir()
    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: fake_home))
    return fake_home


@pytest.fixture
def write_config(home: Path) -> Callable[[Any], Path]:
    """Return a helper that writes ``~/.pare.json`` inside the fake home.

    Dicts and lists are serialized as JSON; strings are written verbatim so
    that malformed files can be produced.
    """

    def _write(data: Any) -> Path:
        path = home / ".pare.json"
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Output / config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def output() -> OutputManager:
    """A plain output manager with debug tracing disabled."""
    return OutputManager(no_color=True)


@pytest.fixture
def debug_output() -> OutputManager:
    """A plain output manager with debug tracing enabled."""
    return OutputManager(debug=True, no_color=True)


@pytest.fixture
def config() -> Config:
    """Effective config pointing at a fake server."""
    return Config(server="https://s.example", api_key="k1")


# ---------------------------------------------------------------------------
# Mock server helpers
# ---------------------------------------------------------------------------


class RecordingServer:
    """Mock Condenser server that records every request it receives.

    Replies with a fixed status and JSON body (or raw text) and exposes the
    captured requests for assertions.
    """

    def __init__(self, status_code: int = 200, json_body: Any = None, text: str | None = None):
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body)
        return httpx.Response(self.status_code)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def make_server() -> Callable[..., RecordingServer]:
    """Factory fixture returning :class:`RecordingServer` instances."""
    return RecordingServer


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
