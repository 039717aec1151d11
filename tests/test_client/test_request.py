"""Tests for request construction."""

from __future__ import annotations

import json

import httpx
import pytest

from pare import __version__
from pare.client.request import (
    DELETE_ENDPOINT,
    META_ENDPOINT,
    SHORTEN_ENDPOINT,
    USER_AGENT,
    build_headers,
    build_request,
)
from pare.exceptions import ConfigError, RequestBuildError
from pare.models import Config, DeleteRequest, ShortenRequest


class TestEndpoints:
    def test_paths(self) -> None:
        assert SHORTEN_ENDPOINT == "/api/shorten"
        assert DELETE_ENDPOINT == "/api/delete"
        assert META_ENDPOINT == "/api/meta/"


class TestHeaders:
    def test_full_header_set(self, config: Config) -> None:
        headers = build_headers(config)
        assert headers == {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "X-API-Key": "k1",
            "User-Agent": USER_AGENT,
            "Connection": "close",
        }

    def test_user_agent_names_client(self) -> None:
        assert USER_AGENT.startswith(f"pare/{__version__}")

    def test_empty_api_key_still_sent(self) -> None:
        headers = build_headers(Config(server="https://s.example"))
        assert headers["X-API-Key"] == ""


class TestBuildRequest:
    def test_post_shorten(self, config: Config) -> None:
        request = build_request(
            config, "POST", SHORTEN_ENDPOINT, ShortenRequest(url="http://a.com")
        )
        assert request.method == "POST"
        assert str(request.url) == "https://s.example/api/shorten"
        assert request.content == b'{"url":"http://a.com"}'
        assert request.headers["x-api-key"] == "k1"
        assert request.headers["accept"] == "application/json"
        assert request.headers["content-type"] == "application/json"
        assert request.headers["connection"] == "close"
        assert request.headers["user-agent"] == USER_AGENT

    def test_get_sends_empty_object(self, config: Config) -> None:
        request = build_request(config, "GET", META_ENDPOINT + "abc")
        assert request.method == "GET"
        assert str(request.url) == "https://s.example/api/meta/abc"
        assert request.content == b"{}"

    def test_method_uppercased(self, config: Config) -> None:
        request = build_request(config, "post", DELETE_ENDPOINT, DeleteRequest(code="abc"))
        assert request.method == "POST"
        assert json.loads(request.content) == {"code": "abc"}

    def test_server_with_path_prefix(self) -> None:
        config = Config(server="https://s.example/condenser", api_key="k1")
        request = build_request(config, "POST", SHORTEN_ENDPOINT, ShortenRequest(url="http://a"))
        assert str(request.url) == "https://s.example/condenser/api/shorten"

    def test_plain_http_server(self) -> None:
        config = Config(server="http://localhost:8080", api_key="k1")
        request = build_request(config, "GET", META_ENDPOINT + "x")
        assert str(request.url) == "http://localhost:8080/api/meta/x"

    @pytest.mark.parametrize(
        "server",
        [
            "",
            "s.example",
            "ftp://s.example",
            "/just/a/path",
        ],
    )
    def test_malformed_server_rejected(self, server: str) -> None:
        with pytest.raises(RequestBuildError):
            build_request(Config(server=server, api_key="k1"), "GET", META_ENDPOINT + "x")

    def test_build_error_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            build_request(Config(), "POST", SHORTEN_ENDPOINT, ShortenRequest(url="http://a"))

    def test_request_is_sendable(self, config: Config) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            client.send(build_request(config, "GET", META_ENDPOINT + "abc"))
        assert seen[0].url.path == "/api/meta/abc"
