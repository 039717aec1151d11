"""Exception hierarchy for pare.

All fatal errors inherit from :class:`PareError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`pare.exit_codes`.
:func:`pare.app.main` catches ``PareError``, prints the message to stderr,
and exits with that code.

Expected negative outcomes -- a 409 conflict on ``shorten`` or a
nonexistent shortcode on ``delete``/``meta`` -- are *not* exceptions: the
command handlers return a dedicated exit code for them instead.

Subclass hierarchy::

    PareError                  (exit 70)
    +-- ConfigError            (exit 3)
    |   +-- RequestBuildError  (exit 3)
    +-- ConnectionError_       (exit 4)
    +-- UnexpectedStatusError  (exit 5)
    +-- ResponseParseError     (exit 6)
"""

from __future__ import annotations

from pare.exit_codes import (
    EXIT_CONFIG_ERROR,
    EXIT_CONNECTION_ERROR,
    EXIT_INTERNAL_ERROR,
    EXIT_RESPONSE_ERROR,
    EXIT_UNEXPECTED_STATUS,
)


class PareError(Exception):
    """Base exception for all pare errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_INTERNAL_ERROR

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(PareError):
    """Raised when the config file is unreadable or invalid, or HOME cannot be resolved."""

    exit_code = EXIT_CONFIG_ERROR


class RequestBuildError(ConfigError):
    """Raised when a request cannot be constructed (e.g. malformed server URL)."""


class ConnectionError_(PareError):
    """Raised on transport-level failures (connection refused, timeout, malformed response).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR


class UnexpectedStatusError(PareError):
    """Raised when the server returns a status code the operation has no policy for.

    Args:
        status_code: The HTTP status code received.
        operation: Name of the operation that received it.
    """

    exit_code = EXIT_UNEXPECTED_STATUS

    def __init__(self, status_code: int, operation: str):
        super().__init__(f"unexpected response code from {operation}: {status_code}")
        self.status_code = status_code
        self.operation = operation


class ResponseParseError(PareError):
    """Raised when a 200 response body cannot be parsed into the expected model."""

    exit_code = EXIT_RESPONSE_ERROR
