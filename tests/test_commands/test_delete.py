"""Tests for the delete handler."""

from __future__ import annotations

import pytest

from pare.client import CondenserClient
from pare.commands.delete import run_delete
from pare.exceptions import ResponseParseError, UnexpectedStatusError
from pare.exit_codes import EXIT_NO_EXIST, EXIT_SUCCESS


def _run(config, output, server, code: str = "abc", fail_no_exist: bool = False) -> int:
    with CondenserClient(config, output, transport=server.transport) as client:
        return run_delete(client, code, fail_no_exist, output)


class TestDelete:
    def test_sends_code(self, config, output, make_server) -> None:
        server = make_server(200, {"code": "abc", "status": "deleted"})

        _run(config, output, server, "abc")

        assert server.last.method == "POST"
        assert server.last.url.path == "/api/delete"
        assert server.last_json == {"code": "abc"}

    def test_prints_code_and_status(self, config, output, make_server, capsys) -> None:
        server = make_server(200, {"code": "abc", "status": "deleted"})

        assert _run(config, output, server) == EXIT_SUCCESS
        assert capsys.readouterr().out == "abc/deleted\n"

    @pytest.mark.parametrize(
        "status, fail_no_exist, expected",
        [
            ("noexist", False, EXIT_SUCCESS),
            ("noexist", True, EXIT_NO_EXIST),
            ("deleted", False, EXIT_SUCCESS),
            ("deleted", True, EXIT_SUCCESS),
        ],
    )
    def test_exit_code_policy(
        self, config, output, make_server, capsys, status, fail_no_exist, expected
    ) -> None:
        server = make_server(200, {"code": "abc", "status": status})

        assert _run(config, output, server, fail_no_exist=fail_no_exist) == expected
        assert capsys.readouterr().out == f"abc/{status}\n"

    def test_noexist_exit_code_is_one(self) -> None:
        assert EXIT_NO_EXIST == 1


class TestErrors:
    @pytest.mark.parametrize("status", [404, 409, 500])
    def test_non_200_is_fatal(self, config, output, make_server, capsys, status) -> None:
        server = make_server(status)

        with pytest.raises(UnexpectedStatusError) as exc_info:
            _run(config, output, server)

        assert exc_info.value.status_code == status
        assert exc_info.value.operation == "delete"
        assert capsys.readouterr().out == ""

    def test_bad_body_is_fatal(self, config, output, make_server) -> None:
        server = make_server(200, {"code": "abc"})

        with pytest.raises(ResponseParseError):
            _run(config, output, server)
