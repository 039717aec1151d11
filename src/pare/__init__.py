"""pare -- command-line client for the Condenser URL-shortening service.

``pare`` shortens URLs, deletes shortcodes, and fetches shortcode metadata
by talking JSON over HTTP to a Condenser server. The server URL and API key
come from ``~/.pare.json`` and may be overridden per invocation with the
``--server`` and ``--apikey`` flags.

Typical usage::

    pare http://example.com               # shorten (default command)
    pare shorten --code docs http://example.com/docs
    pare meta --json docs
    pare rm --fail-no-exist docs

Modules:
    app: Typer application, global flags, and the console-script entry point.
    models: Pydantic models for the config file and the wire protocol.
    config: Config file loading and CLI-override resolution.
    client: Request construction and the blocking HTTP client.
    commands: One handler per operation (shorten, delete, meta, config).
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric process exit codes.
    output: stdout/stderr discipline and debug tracing with Rich.
"""

__version__ = "0.3.0"
