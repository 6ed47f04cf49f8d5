"""Helpers for adding idempotency keys to requests that support them.

    emails = with_idempotency_key(
        [
            CreateEmailOptions("Acme <onboarding@resend.dev>", ["foo@gmail.com"], "hello world"),
            CreateEmailOptions("Acme <onboarding@resend.dev>", ["bar@outlook.com"], "world hello"),
        ],
        "welcome-user/123456789",
    )
    await resend.batch.send(emails)
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from .config import Request

T = TypeVar("T")

IDEMPOTENCY_KEY_HEADER = "Idempotency-Key"


@dataclass
class Idempotent(Generic[T]):
    """Wraps request data ``T`` with an optional ``Idempotency-Key`` header value."""

    data: T
    idempotency_key: Optional[str] = None

    @classmethod
    def wrap(cls, value: Union["Idempotent[T]", T]) -> "Idempotent[T]":
        """Return ``value`` unchanged if already wrapped, otherwise wrap it without a key."""
        if isinstance(value, Idempotent):
            return value
        return cls(data=value)

    def apply(self, request: Request) -> Request:
        """Attach the key header to ``request``; the body is never touched."""
        if self.idempotency_key is not None:
            request.header(IDEMPOTENCY_KEY_HEADER, self.idempotency_key)
        return request


def with_idempotency_key(data: T, idempotency_key: str) -> Idempotent[T]:
    """Adds an ``Idempotency-Key`` header to the request sending ``data``."""
    return Idempotent(data=data, idempotency_key=idempotency_key)
