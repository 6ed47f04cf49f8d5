"""Tests for the transport configuration and error mapping."""

import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from resend_sdk import (
    Config,
    DecodeError,
    ErrorKind,
    InvalidArgumentError,
    InvalidPathError,
    RateLimitError,
    RemoteError,
    Resend,
    TransportError,
)
from resend_sdk.config import DEFAULT_USER_AGENT


class TestConfig:
    @pytest.fixture
    def config(self) -> Config:
        return Config("re_test_key", httpx.AsyncClient())

    def test_defaults(self, config: Config) -> None:
        assert str(config.base_url) == "https://api.resend.com"
        assert config.user_agent == DEFAULT_USER_AGENT
        assert DEFAULT_USER_AGENT.startswith("resend-sdk/")

    def test_build_sets_auth_and_user_agent(self, config: Config) -> None:
        request = config.build("GET", "/emails")

        assert request.method == "GET"
        assert str(request.url) == "https://api.resend.com/emails"
        assert request.headers["Authorization"] == "Bearer re_test_key"
        assert request.headers["User-Agent"] == DEFAULT_USER_AGENT

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESEND_BASE_URL", "http://localhost:8080")
        monkeypatch.setenv("RESEND_USER_AGENT", "my-app/1.0")

        config = Config("re_test_key", httpx.AsyncClient())
        request = config.build("POST", "/emails/batch")

        assert str(request.url) == "http://localhost:8080/emails/batch"
        assert request.headers["User-Agent"] == "my-app/1.0"

    @pytest.mark.parametrize("value", ["not a url", "ftp://files.example.com"])
    def test_invalid_base_url(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("RESEND_BASE_URL", value)

        with pytest.raises(InvalidArgumentError) as exc_info:
            Config("re_test_key", httpx.AsyncClient())

        assert exc_info.value.field == "RESEND_BASE_URL"

    def test_repr_redacts_api_key(self, config: Config) -> None:
        assert "re_test_key" not in repr(config)
        assert "re_*********" in repr(config)

    @pytest.mark.parametrize(
        "path",
        [
            "https://evil.example/steal",
            "//evil.example/steal",
            "http://api.resend.com/emails",
            "https://api.resend.com:8443/emails",
        ],
    )
    def test_foreign_origin_rejected(self, config: Config, path: str) -> None:
        with pytest.raises(InvalidPathError) as exc_info:
            config.build("GET", path)

        assert exc_info.value.path == path
        assert "re_test_key" not in str(exc_info.value)

    def test_same_origin_absolute_url_allowed(self, config: Config) -> None:
        request = config.build("GET", "https://api.resend.com/domains")

        assert str(request.url) == "https://api.resend.com/domains"

    def test_origin_follows_base_url_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESEND_BASE_URL", "http://localhost:8080")
        config = Config("re_test_key", httpx.AsyncClient())

        with pytest.raises(InvalidPathError):
            config.build("GET", "https://api.resend.com/emails")

        assert str(config.build("GET", "/emails").url).startswith("http://localhost:8080")


class TestResendClient:
    def test_api_key_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESEND_API_KEY", "re_from_env")

        resend = Resend()

        assert resend.config.api_key == "re_from_env"

    def test_explicit_api_key_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESEND_API_KEY", "re_from_env")

        resend = Resend("re_explicit")

        assert resend.config.api_key == "re_explicit"

    def test_missing_api_key(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            Resend()

        assert exc_info.value.field == "api_key"

    def test_repr_redacts_api_key(self) -> None:
        resend = Resend("re_secret_value")

        assert "re_secret_value" not in repr(resend)

    @pytest.mark.asyncio
    async def test_context_manager_closes_own_client(self) -> None:
        async with Resend("re_test_key") as resend:
            client = resend.config.client

        assert client.is_closed

    @pytest.mark.asyncio
    async def test_borrowed_client_stays_open(self) -> None:
        client = httpx.AsyncClient()

        async with Resend("re_test_key", client=client):
            pass

        assert not client.is_closed
        await client.aclose()


class TestSend:
    @pytest.fixture
    def config(self) -> Config:
        return Config("re_test_key", httpx.AsyncClient())

    @pytest.mark.asyncio
    async def test_success(self, config: Config, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(json={"id": "49a3999c-0ce1-4ea6-ab68-afcd6dc2e794"})

        response = await config.send(config.build("GET", "/emails/49a3999c"))

        assert Config.decode(response, "get email") == {
            "id": "49a3999c-0ce1-4ea6-ab68-afcd6dc2e794"
        }
        request = httpx_mock.get_request()
        assert request is not None
        assert request.headers["Authorization"] == "Bearer re_test_key"

    @pytest.mark.asyncio
    async def test_query_and_json_body(self, config: Config, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(json={})

        request = config.build("POST", "/things").query({"limit": "3"}).json({"a": 1})
        await config.send(request)

        sent = httpx_mock.get_request()
        assert sent is not None
        assert sent.url.params["limit"] == "3"
        assert json.loads(sent.content) == {"a": 1}

    @pytest.mark.asyncio
    async def test_rate_limited(self, config: Config, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            status_code=429,
            headers={
                "ratelimit-limit": "10",
                "ratelimit-remaining": "0",
                "ratelimit-reset": "5",
            },
            json={"statusCode": 429, "name": "rate_limit_exceeded", "message": "slow down"},
        )

        with pytest.raises(RateLimitError) as exc_info:
            await config.send(config.build("GET", "/api-keys"))

        assert exc_info.value.ratelimit_limit == 10
        assert exc_info.value.ratelimit_remaining == 0
        assert exc_info.value.ratelimit_reset == 5

    @pytest.mark.asyncio
    async def test_rate_limited_without_headers(
        self, config: Config, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(status_code=429, headers={"ratelimit-reset": "soon"})

        with pytest.raises(RateLimitError) as exc_info:
            await config.send(config.build("GET", "/api-keys"))

        assert exc_info.value.ratelimit_limit is None
        assert exc_info.value.ratelimit_reset is None

    @pytest.mark.asyncio
    async def test_remote_error(self, config: Config, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            status_code=422,
            json={
                "statusCode": 422,
                "name": "invalid_from_address",
                "message": "Invalid `from` field.",
            },
        )

        with pytest.raises(RemoteError) as exc_info:
            await config.send(config.build("POST", "/emails"))

        error = exc_info.value
        assert error.kind == ErrorKind.INVALID_FROM_ADDRESS
        assert error.http_status == 422
        assert error.message == "Invalid `from` field."
        assert error.is_bad_request()
        assert "re_test_key" not in str(error)

    @pytest.mark.asyncio
    async def test_unknown_error_name(self, config: Config, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            status_code=404,
            json={"statusCode": 404, "name": "brand_new_error", "message": "nope"},
        )

        with pytest.raises(RemoteError) as exc_info:
            await config.send(config.build("GET", "/emails/missing"))

        assert exc_info.value.kind == ErrorKind.UNRECOGNIZED
        assert exc_info.value.is_not_found()

    @pytest.mark.asyncio
    async def test_server_error_with_document(
        self, config: Config, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            status_code=500,
            json={
                "statusCode": 500,
                "name": "application_error",
                "message": "An unexpected error occurred.",
            },
        )

        with pytest.raises(RemoteError) as exc_info:
            await config.send(config.build("POST", "/emails"))

        assert exc_info.value.kind == ErrorKind.APPLICATION_ERROR
        assert exc_info.value.message == "An unexpected error occurred."
        assert exc_info.value.http_status == 500
        assert exc_info.value.is_server_error()

    @pytest.mark.asyncio
    async def test_server_error_without_document(
        self, config: Config, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(status_code=502, text="Bad Gateway")

        with pytest.raises(RemoteError) as exc_info:
            await config.send(config.build("GET", "/domains"))

        assert exc_info.value.kind == ErrorKind.INTERNAL_SERVER_ERROR
        assert exc_info.value.http_status == 502
        assert exc_info.value.is_server_error()

    @pytest.mark.asyncio
    async def test_html_client_error(self, config: Config, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            status_code=404,
            text="<html><body>Not Found</body></html>",
            headers={"content-type": "text/html; charset=utf-8"},
        )

        with pytest.raises(DecodeError):
            await config.send(config.build("GET", "/nowhere"))

    @pytest.mark.asyncio
    async def test_transport_error(self, config: Config, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_exception(httpx.ConnectError("connection refused"))

        with pytest.raises(TransportError) as exc_info:
            await config.send(config.build("GET", "/emails"))

        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_decode_invalid_json(self, config: Config, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(text="not json")

        response = await config.send(config.build("GET", "/emails"))

        with pytest.raises(DecodeError) as exc_info:
            Config.decode(response, "list emails")

        assert exc_info.value.context.startswith("list emails")
