"""Numeric process exit codes.

Each constant maps to one outcome of a ``pare`` invocation and, for the
fatal ones, to a :class:`~pare.exceptions.PareError` subclass. Shell
scripts can branch on the code without parsing stderr.

Example::

    $ pare meta nosuchcode
    noexist
    $ echo $?
    1   # EXIT_NO_EXIST -- the shortcode is not known to the server
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_NO_EXIST = 1
"""The shortcode does not exist (``meta``, or ``delete --fail-no-exist``)."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments (Click's usage-error code)."""

EXIT_CONFIG_ERROR = 3
"""The config file could not be read or parsed, or the server URL is malformed."""

EXIT_CONNECTION_ERROR = 4
"""A transport-level error occurred (connection refused, timeout, bad HTTP)."""

EXIT_UNEXPECTED_STATUS = 5
"""The server answered with a status code the operation does not handle."""

EXIT_RESPONSE_ERROR = 6
"""The server answered 200 but the body did not match the expected shape."""

EXIT_CONFLICT = 7
"""The requested shortcode is already taken (HTTP 409 on ``shorten``)."""

EXIT_INTERNAL_ERROR = 70
"""An unexpected internal error occurred."""

EXIT_INTERRUPTED = 130
"""The process was interrupted with Ctrl-C."""
