"""
Decoding of webhook event payloads.

    event = try_parse_event(request_body)
    if isinstance(event, EmailEvent) and event.type is EmailEventType.CLICKED:
        print(event.body.click.link)

Signatures are not checked here; verify the payload before parsing it.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from .errors import ParseError
from .types import Domain


class EmailEventType(str, Enum):
    SENT = "email.sent"
    DELIVERED = "email.delivered"
    DELIVERY_DELAYED = "email.delivery_delayed"
    COMPLAINED = "email.complained"
    BOUNCED = "email.bounced"
    OPENED = "email.opened"
    CLICKED = "email.clicked"


class ContactEventType(str, Enum):
    CREATED = "contact.created"
    UPDATED = "contact.updated"
    DELETED = "contact.deleted"


class DomainEventType(str, Enum):
    CREATED = "domain.created"
    UPDATED = "domain.updated"
    DELETED = "domain.deleted"


@dataclass
class Click:
    """A link click recorded on an ``email.clicked`` event."""

    ip_address: str
    link: str
    timestamp: str
    user_agent: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Click":
        return cls(
            ip_address=data["ipAddress"],
            link=data["link"],
            timestamp=data["timestamp"],
            user_agent=data["userAgent"],
        )


@dataclass
class EmailBody:
    created_at: str
    email_id: str
    from_: str
    to: list[str]
    subject: str
    click: Optional[Click] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmailBody":
        click = data.get("click")
        to = data["to"]
        if not isinstance(to, list) or not all(isinstance(address, str) for address in to):
            raise TypeError(f"`to` must be a list of strings, got {to!r}")
        return cls(
            created_at=data["created_at"],
            email_id=data["email_id"],
            from_=data["from"],
            to=list(to),
            subject=data["subject"],
            click=Click.from_dict(click) if click is not None else None,
        )


@dataclass
class ContactBody:
    id: str
    audience_id: str
    created_at: str
    updated_at: str
    email: str
    first_name: str
    last_name: str
    unsubscribed: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContactBody":
        return cls(
            id=data["id"],
            audience_id=data["audience_id"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
            email=data["email"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            unsubscribed=data["unsubscribed"],
        )


@dataclass
class EmailEvent:
    type: EmailEventType
    created_at: str
    body: EmailBody


@dataclass
class ContactEvent:
    type: ContactEventType
    created_at: str
    body: ContactBody


@dataclass
class DomainEvent:
    type: DomainEventType
    created_at: str
    body: Domain


Event = Union[EmailEvent, ContactEvent, DomainEvent]


def try_parse_event(data: Union[str, bytes]) -> Event:
    """
    Parse a webhook payload into a typed event.

    Args:
        data: Raw JSON payload, ``{"type": ..., "created_at": ..., "data": {...}}``

    Returns:
        An :class:`EmailEvent`, :class:`ContactEvent` or :class:`DomainEvent`

    Raises:
        ParseError: If the payload is not valid JSON or does not match any event
    """
    try:
        envelope = json.loads(data)
    except ValueError as err:
        raise ParseError(f"invalid JSON: {err}") from err
    if not isinstance(envelope, dict):
        raise ParseError(f"expected a JSON object, got {type(envelope).__name__}")

    event_type = envelope.get("type")
    if not isinstance(event_type, str):
        raise ParseError("missing event type")

    created_at = envelope.get("created_at")
    if not isinstance(created_at, str):
        raise ParseError(f"{event_type}: `created_at` must be a string, got {created_at!r}")
    body = envelope.get("data")
    if not isinstance(body, dict):
        raise ParseError(f"{event_type}: `data` must be an object, got {type(body).__name__}")

    try:
        if event_type.startswith("email."):
            return EmailEvent(EmailEventType(event_type), created_at, EmailBody.from_dict(body))
        if event_type.startswith("contact."):
            return ContactEvent(
                ContactEventType(event_type), created_at, ContactBody.from_dict(body)
            )
        if event_type.startswith("domain."):
            return DomainEvent(DomainEventType(event_type), created_at, Domain.from_dict(body))
    except KeyError as err:
        raise ParseError(f"{event_type}: missing field {err}") from err
    except (AttributeError, TypeError, ValueError) as err:
        raise ParseError(f"{event_type}: {err}") from err

    raise ParseError(f"unknown event type {event_type!r}")
