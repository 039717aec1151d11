"""Built-in commands for pare.

Each module exposes a Typer command function registered by
:mod:`pare.app` and, for the operations that talk to the server, a plain
``run_*`` handler that performs the round trip and returns the exit code:

- :mod:`~pare.commands.shorten` -- ``pare shorten`` (aliases ``short``, default).
- :mod:`~pare.commands.delete` -- ``pare delete`` (aliases ``del``, ``rm``).
- :mod:`~pare.commands.meta` -- ``pare meta``.
- :mod:`~pare.commands.config` -- ``pare config``, shows the effective config.
"""
