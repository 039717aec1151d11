"""Config file loading and precedence resolution.

The effective :class:`~pare.models.Config` is built from three layers,
lowest to highest precedence:

1. Defaults -- empty server and API key.
2. The per-user config file ``<home>/.pare.json``::

       {"APIKey": "k1", "Server": "https://s.example"}

   A missing file is not an error. A file that exists but cannot be read
   or parsed is fatal (:class:`~pare.exceptions.ConfigError`).
3. The ``--server`` and ``--apikey`` CLI flags, each applied only when
   given a non-empty value.

The file is never written and the merged result is never persisted; it is
recomputed on every invocation.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from pare.exceptions import ConfigError
from pare.models import Config
from pare.output import OutputManager

CONFIG_FILENAME = ".pare.json"


def config_path() -> Path:
    """Return the path of the per-user config file.

    Raises:
        ConfigError: If the current user's home directory cannot be resolved.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ConfigError(f"unable to get current user HOME: {exc}") from exc
    return home / CONFIG_FILENAME


def load_config_file(
    path: Optional[Path] = None,
    output: Optional[OutputManager] = None,
) -> Config:
    """Load the on-disk config file.

    Args:
        path: File to read. Defaults to :func:`config_path`.
        output: Receives a debug trace when the file is absent.

    Returns:
        The parsed :class:`~pare.models.Config`, or a default (empty)
        instance if the file does not exist.

    Raises:
        ConfigError: If the file exists but cannot be read, is not valid UTF-8
            JSON, or does not describe a config object.
    """
    if path is None:
        path = config_path()
    if not path.exists():
        if output is not None:
            output.debug(f"{path} doesn't exist; ignoring.")
        return Config()
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigError(f"error opening {path}: {exc}") from exc
    try:
        return Config.model_validate(json.loads(raw.decode("utf-8")))
    except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(f"error parsing {path}: {exc}") from exc


def resolve_config(
    cli_server: Optional[str] = None,
    cli_api_key: Optional[str] = None,
    path: Optional[Path] = None,
    output: Optional[OutputManager] = None,
) -> Config:
    """Merge the config file with CLI overrides.

    Precedence (high to low):
        1. CLI flags (``cli_server``, ``cli_api_key``) when non-empty
        2. Config file (``~/.pare.json``)
        3. Defaults (empty strings)

    Returns:
        A new :class:`~pare.models.Config`; the loaded file contents are not
        mutated.
    """
    file_config = load_config_file(path, output)

    server = file_config.server
    api_key = file_config.api_key
    if cli_server:
        server = cli_server
    if cli_api_key:
        api_key = cli_api_key

    config = Config(server=server, api_key=api_key)
    if output is not None:
        output.debug(f"config: server={config.server!r} api_key={mask_secret(config.api_key)}")
    return config


def mask_secret(value: str) -> str:
    """Render a secret for diagnostics, keeping only its last four characters."""
    if not value:
        return "(unset)"
    if len(value) <= 4:
        return "****"
    return f"****{value[-4:]}"
