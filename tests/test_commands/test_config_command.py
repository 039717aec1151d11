"""Tests for ``pare config``."""

from __future__ import annotations

from pare.app import app


class TestConfigCommand:
    def test_shows_file_values(self, cli_runner, write_config, home) -> None:
        write_config({"APIKey": "k1-secret-abcd", "Server": "https://s.example"})

        result = cli_runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert f"Config file: {home / '.pare.json'}\n" in result.stdout
        assert "Server: https://s.example\n" in result.stdout
        assert "API key: ****abcd\n" in result.stdout
        assert "k1-secret" not in result.stdout

    def test_flags_override_file(self, cli_runner, write_config) -> None:
        write_config({"APIKey": "k1-secret-abcd", "Server": "https://s.example"})

        result = cli_runner.invoke(
            app, ["--server", "https://flag.example", "--apikey", "other-wxyz", "config"]
        )

        assert result.exit_code == 0
        assert "Server: https://flag.example\n" in result.stdout
        assert "API key: ****wxyz\n" in result.stdout

    def test_missing_file(self, cli_runner, home) -> None:
        result = cli_runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "(not found)" in result.stdout
        assert "Server: (unset)\n" in result.stdout
        assert "API key: (unset)\n" in result.stdout

    def test_invalid_file(self, cli_runner, write_config) -> None:
        write_config("{oops")

        result = cli_runner.invoke(app, ["config"])

        assert result.exit_code == 3
        assert "Error: error parsing" in result.output
