"""Shared transport configuration for every Resend service."""

import logging
import os
from typing import Any, Optional

import httpx

from .errors import (
    DecodeError,
    ErrorKind,
    ErrorResponse,
    InvalidArgumentError,
    InvalidPathError,
    RateLimitError,
    RemoteError,
    TransportError,
)
from .version import __version__

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.resend.com"
DEFAULT_USER_AGENT = f"resend-sdk/{__version__}"

BASE_URL_ENV = "RESEND_BASE_URL"
USER_AGENT_ENV = "RESEND_USER_AGENT"

REDACTED_API_KEY = "re_*********"


class Request:
    """A request under construction, produced by :meth:`Config.build`."""

    def __init__(self, method: str, url: httpx.URL, headers: dict[str, str]) -> None:
        self.method = method
        self.url = url
        self.headers = headers
        self.params: dict[str, str] = {}
        self.body: Optional[Any] = None

    def header(self, name: str, value: str) -> "Request":
        self.headers[name] = value
        return self

    def query(self, params: dict[str, str]) -> "Request":
        self.params.update(params)
        return self

    def json(self, body: Any) -> "Request":
        self.body = body
        return self

    def __repr__(self) -> str:
        return f"Request({self.method} {self.url})"


def _parse_base_url(value: str) -> httpx.URL:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as err:
        raise InvalidArgumentError(BASE_URL_ENV, f"not a valid URL: {err}") from err
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidArgumentError(BASE_URL_ENV, f"not an absolute http(s) URL: {value!r}")
    return url


def _header_int(headers: httpx.Headers, name: str) -> Optional[int]:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


class Config:
    """
    Immutable transport configuration shared by all services.

    Holds the credential, user agent, base URL and HTTP client. Every
    request built here carries the bearer credential and the user agent.
    """

    def __init__(self, api_key: str, client: httpx.AsyncClient) -> None:
        """
        Initialize the configuration.

        Args:
            api_key: Resend API key used as the bearer credential
            client: HTTP client every request is dispatched on

        Raises:
            InvalidArgumentError: If ``RESEND_BASE_URL`` is set but is not a valid URL
        """
        self.api_key = api_key
        self.client = client
        self.base_url = _parse_base_url(os.environ.get(BASE_URL_ENV, DEFAULT_BASE_URL))
        self.user_agent = os.environ.get(USER_AGENT_ENV, DEFAULT_USER_AGENT)

    def __repr__(self) -> str:
        return (
            f"Config(api_key={REDACTED_API_KEY!r}, user_agent={self.user_agent!r}, "
            f"base_url={str(self.base_url)!r})"
        )

    def build(self, method: str, path: str) -> Request:
        """
        Construct an authenticated request for ``path`` relative to the base URL.

        Raises:
            InvalidPathError: If ``path`` cannot be joined onto the base URL or
                resolves to a different origin
        """
        try:
            url = self.base_url.join(path)
        except (httpx.InvalidURL, TypeError, ValueError) as err:
            raise InvalidPathError(path) from err
        if not url.is_absolute_url:
            raise InvalidPathError(path)
        # The credential is only ever sent to the configured origin.
        if (url.scheme, url.host, url.port) != (
            self.base_url.scheme,
            self.base_url.host,
            self.base_url.port,
        ):
            raise InvalidPathError(path)

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "User-Agent": self.user_agent,
        }
        return Request(method, url, headers)

    async def send(self, request: Request) -> httpx.Response:
        """
        Dispatch a request and map failure statuses onto the error taxonomy.

        Raises:
            TransportError: If the HTTP client fails (DNS, connect, TLS, I/O)
            RateLimitError: On HTTP 429
            RemoteError: On any other 4xx/5xx with an error document
            DecodeError: On a 4xx whose body is not an error document
        """
        http_request = self.client.build_request(
            request.method,
            request.url,
            params=request.params or None,
            headers=request.headers,
            json=request.body,
        )
        logger.debug("resend: %s %s", http_request.method, http_request.url)

        try:
            response = await self.client.send(http_request)
        except httpx.RequestError as err:
            raise TransportError(err) from err

        if response.status_code == 429:
            raise RateLimitError(
                ratelimit_limit=_header_int(response.headers, "ratelimit-limit"),
                ratelimit_remaining=_header_int(response.headers, "ratelimit-remaining"),
                ratelimit_reset=_header_int(response.headers, "ratelimit-reset"),
            )

        if response.status_code >= 400:
            logger.debug(
                "resend: %s %s failed with HTTP %d",
                http_request.method,
                http_request.url,
                response.status_code,
            )
            raise self._remote_error(response)

        return response

    @staticmethod
    def _remote_error(response: httpx.Response) -> Exception:
        error: Optional[ErrorResponse] = None
        if "html" not in response.headers.get("content-type", ""):
            try:
                body = response.json()
                if isinstance(body, dict) and "name" in body:
                    error = ErrorResponse.from_dict(body, response.status_code)
            except ValueError:
                error = None

        if error is not None:
            return RemoteError.from_response(error, response.status_code)
        if response.status_code >= 500:
            return RemoteError(
                kind=ErrorKind.INTERNAL_SERVER_ERROR,
                message=response.reason_phrase,
                http_status=response.status_code,
            )
        return DecodeError(
            f"HTTP {response.status_code} response is not an error document: "
            f"{response.text[:200]!r}"
        )

    @staticmethod
    def decode(response: httpx.Response, context: str) -> Any:
        """Parse a successful response body as JSON."""
        try:
            return response.json()
        except ValueError as err:
            raise DecodeError(f"{context}: {err}") from err
