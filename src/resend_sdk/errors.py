"""Error types for Resend SDK."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Error names documented at https://resend.com/docs/api-reference/errors."""

    UNRECOGNIZED = "unrecognized"
    INVALID_IDEMPOTENCY_KEY = "invalid_idempotency_key"
    VALIDATION_ERROR = "validation_error"
    MISSING_API_KEY = "missing_api_key"
    RESTRICTED_API_KEY = "restricted_api_key"
    INVALID_API_KEY = "invalid_api_key"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    INVALID_IDEMPOTENT_REQUEST = "invalid_idempotent_request"
    CONCURRENT_IDEMPOTENT_REQUESTS = "concurrent_idempotent_requests"
    INVALID_ATTACHMENT = "invalid_attachment"
    INVALID_FROM_ADDRESS = "invalid_from_address"
    INVALID_ACCESS = "invalid_access"
    INVALID_PARAMETER = "invalid_parameter"
    INVALID_REGION = "invalid_region"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    MONTHLY_QUOTA_EXCEEDED = "monthly_quota_exceeded"
    DAILY_QUOTA_EXCEEDED = "daily_quota_exceeded"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    SECURITY_ERROR = "security_error"
    APPLICATION_ERROR = "application_error"
    INTERNAL_SERVER_ERROR = "internal_server_error"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "ErrorKind":
        """Map the ``name`` field of an error document, falling back to UNRECOGNIZED."""
        try:
            return cls(name)
        except ValueError:
            return cls.UNRECOGNIZED


@dataclass
class ErrorResponse:
    """Error document returned in the body of a failed request."""

    status_code: int
    name: str
    message: str

    @classmethod
    def from_dict(cls, data: dict[str, Any], status_code: int) -> "ErrorResponse":
        """Create from API response dict."""
        return cls(
            status_code=data.get("statusCode", status_code),
            name=data["name"],
            message=data.get("message", ""),
        )

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.from_name(self.name)


class ResendError(Exception):
    """Base error class for Resend SDK."""

    pass


class TransportError(ResendError):
    """The HTTP client failed before a response was received."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"resend: http client error: {cause}")
        self.cause = cause


class RemoteError(ResendError):
    """Error returned by the Resend API."""

    def __init__(self, kind: ErrorKind, message: str, http_status: int) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.http_status = http_status

    def __str__(self) -> str:
        return f"resend: {self.message} (HTTP {self.http_status}, kind: {self.kind.value})"

    @classmethod
    def from_response(cls, error: ErrorResponse, http_status: int) -> "RemoteError":
        """Create from a decoded error document."""
        return cls(kind=error.kind, message=error.message, http_status=http_status)

    def is_unauthorized(self) -> bool:
        """Check if this is an authorization error."""
        return self.http_status == 401

    def is_forbidden(self) -> bool:
        return self.http_status == 403

    def is_not_found(self) -> bool:
        """Check if this is a not found error."""
        return self.http_status == 404

    def is_conflict(self) -> bool:
        """Check if this is a conflict error."""
        return self.http_status == 409

    def is_bad_request(self) -> bool:
        """Check if this is a bad request error."""
        return self.http_status in (400, 422)

    def is_server_error(self) -> bool:
        """Check if this is a server error."""
        return self.http_status >= 500


class RateLimitError(ResendError):
    """HTTP 429, with the rate-limit headers of the response."""

    def __init__(
        self,
        ratelimit_limit: Optional[int] = None,
        ratelimit_remaining: Optional[int] = None,
        ratelimit_reset: Optional[int] = None,
    ) -> None:
        super().__init__(
            f"resend: too many requests (limit={ratelimit_limit}, "
            f"remaining={ratelimit_remaining}, reset={ratelimit_reset}s)"
        )
        self.ratelimit_limit = ratelimit_limit
        self.ratelimit_remaining = ratelimit_remaining
        self.ratelimit_reset = ratelimit_reset


class DecodeError(ResendError):
    """A response body could not be decoded."""

    def __init__(self, context: str) -> None:
        super().__init__(f"resend: decode error: {context}")
        self.context = context


class ParseError(DecodeError):
    """An inbound event envelope could not be parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidPathError(ResendError):
    """The request path could not be joined onto the base URL."""

    def __init__(self, path: str) -> None:
        super().__init__(f"resend: invalid request path: {path!r}")
        self.path = path


class InvalidArgumentError(ResendError):
    """A request option is outside of its accepted range."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"resend: invalid argument `{field}`: {reason}")
        self.field = field
        self.reason = reason
