"""Type definitions for Resend SDK."""

import base64
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional, Union

from .errors import InvalidArgumentError
from .idempotent import Idempotent
from .list_opts import parse_nullable_vec

MAX_RECIPIENTS = 50
MAX_ATTACHMENTS_BYTES = 40 * 1024 * 1024
TAG_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,256}$")


# ==========================================
# Identifiers
# ==========================================


class EmailId(str):
    """Unique email identifier."""


class InboundEmailId(str):
    """Unique received email identifier."""


class InboundAttachmentId(str):
    """Unique received email attachment identifier."""


class DomainId(str):
    """Unique domain identifier."""


class AudienceId(str):
    """Unique audience identifier."""


class ContactId(str):
    """Unique contact identifier."""


class SegmentId(str):
    """Unique segment identifier."""


class BroadcastId(str):
    """Unique broadcast identifier."""


class TemplateId(str):
    """Unique template identifier."""


class TopicId(str):
    """Unique topic identifier."""


class WebhookId(str):
    """Unique webhook identifier."""


class ApiKeyId(str):
    """Unique API key identifier."""


# ==========================================
# Enums
# ==========================================


class BatchValidation(str, Enum):
    """How a batch request is validated."""

    # Reject the whole batch if any email is invalid.
    STRICT = "strict"
    # Send the valid emails and report the invalid ones.
    PERMISSIVE = "permissive"


class Region(str, Enum):
    """Region where emails will be sent from."""

    US_EAST_1 = "us-east-1"
    EU_WEST_1 = "eu-west-1"
    SA_EAST_1 = "sa-east-1"
    AP_NORTHEAST_1 = "ap-northeast-1"


class Permission(str, Enum):
    """Access level of an API key."""

    FULL_ACCESS = "full_access"
    SENDING_ACCESS = "sending_access"


class VariableType(str, Enum):
    """Type of a template variable."""

    STRING = "string"
    NUMBER = "number"


class TemplateStatus(str, Enum):
    """Publication state of a template."""

    DRAFT = "draft"
    PUBLISHED = "published"


class SubscriptionType(str, Enum):
    """Default subscription of contacts to a topic."""

    OPT_IN = "opt_in"
    OPT_OUT = "opt_out"


class TopicVisibility(str, Enum):
    """Whether a topic is shown on the unsubscribe page."""

    PUBLIC = "public"
    PRIVATE = "private"


class WebhookStatus(str, Enum):
    """Status of a webhook."""

    ENABLED = "enabled"
    DISABLED = "disabled"


def _enum_value(value: Union[str, Enum]) -> str:
    return value.value if isinstance(value, Enum) else value


# ==========================================
# Emails
# ==========================================


@dataclass
class Tag:
    """
    Custom data attached to an email.

    Names and values may only contain ASCII letters, numbers, underscores or
    dashes, and at most 256 characters.
    """

    name: str
    value: Optional[str] = None

    def with_value(self, value: str) -> "Tag":
        self.value = value
        return self

    def validate(self) -> None:
        if not TAG_PATTERN.match(self.name):
            raise InvalidArgumentError("tags.name", f"invalid tag name {self.name!r}")
        if self.value is not None and not TAG_PATTERN.match(self.value):
            raise InvalidArgumentError("tags.value", f"invalid tag value {self.value!r}")

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"name": self.name}
        if self.value is not None:
            body["value"] = self.value
        return body


class Attachment:
    """A file attached to an email, either inline content or a remote path."""

    def __init__(self, content: Optional[bytes] = None, path: Optional[str] = None) -> None:
        if (content is None) == (path is None):
            raise InvalidArgumentError("attachments", "exactly one of content or path is required")
        self.content = content
        self.path = path
        self.filename: Optional[str] = None
        self.content_type: Optional[str] = None
        self.content_id: Optional[str] = None

    @classmethod
    def from_content(cls, content: bytes) -> "Attachment":
        return cls(content=content)

    @classmethod
    def from_path(cls, path: str) -> "Attachment":
        """Attach a file hosted at ``path`` (a URL the API can fetch)."""
        return cls(path=path)

    def with_filename(self, filename: str) -> "Attachment":
        self.filename = filename
        return self

    def with_content_type(self, content_type: str) -> "Attachment":
        self.content_type = content_type
        return self

    def with_content_id(self, content_id: str) -> "Attachment":
        """Makes this an inline attachment, referenced as ``cid:<content_id>``."""
        self.content_id = content_id
        return self

    @property
    def is_inline(self) -> bool:
        return self.content_id is not None

    @property
    def size(self) -> int:
        return len(self.content) if self.content is not None else 0

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.content is not None:
            body["content"] = base64.b64encode(self.content).decode("ascii")
        else:
            body["path"] = self.path
        if self.filename is not None:
            body["filename"] = self.filename
        if self.content_type is not None:
            body["content_type"] = self.content_type
        if self.content_id is not None:
            body["content_id"] = self.content_id
        return body

    def __repr__(self) -> str:
        source = f"path={self.path!r}" if self.path is not None else f"content=<{self.size} bytes>"
        return f"Attachment({source}, filename={self.filename!r})"


@dataclass
class EmailTemplate:
    """A published template to render the email from."""

    id: str
    variables: Optional[dict[str, Any]] = None

    def with_variables(self, variables: dict[str, Any]) -> "EmailTemplate":
        self.variables = variables
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"id": self.id}
        if self.variables is not None:
            body["variables"] = self.variables
        return body


class CreateEmailOptions:
    """
    An email to send.

        CreateEmailOptions("Acme <onboarding@resend.dev>", ["delivered@resend.dev"], "Hello")
            .with_html("<strong>It works!</strong>")
            .with_tag(Tag("category", "welcome"))
    """

    def __init__(self, from_: str, to: Iterable[str], subject: str) -> None:
        """
        Args:
            from_: Sender address, optionally as ``"Your Name <sender@domain.com>"``
            to: Recipient addresses (at most 50)
            subject: Email subject
        """
        self.from_ = from_
        self.to = list(to)
        self.subject = subject
        self.html: Optional[str] = None
        self.text: Optional[str] = None
        self.bcc: Optional[list[str]] = None
        self.cc: Optional[list[str]] = None
        self.reply_to: Optional[list[str]] = None
        self.headers: Optional[dict[str, str]] = None
        self.attachments: Optional[list[Attachment]] = None
        self.tags: Optional[list[Tag]] = None
        self.scheduled_at: Optional[str] = None
        self.template: Optional[EmailTemplate] = None

    def with_html(self, html: str) -> "CreateEmailOptions":
        self.html = html
        return self

    def with_text(self, text: str) -> "CreateEmailOptions":
        self.text = text
        return self

    def with_bcc(self, address: str) -> "CreateEmailOptions":
        if self.bcc is None:
            self.bcc = []
        self.bcc.append(address)
        return self

    def with_cc(self, address: str) -> "CreateEmailOptions":
        if self.cc is None:
            self.cc = []
        self.cc.append(address)
        return self

    def with_reply_to(self, address: str) -> "CreateEmailOptions":
        if self.reply_to is None:
            self.reply_to = []
        self.reply_to.append(address)
        return self

    def with_reply_tos(self, addresses: Iterable[str]) -> "CreateEmailOptions":
        for address in addresses:
            self.with_reply_to(address)
        return self

    def with_header(self, name: str, value: str) -> "CreateEmailOptions":
        if self.headers is None:
            self.headers = {}
        self.headers[name] = value
        return self

    def with_attachment(self, attachment: Attachment) -> "CreateEmailOptions":
        if self.attachments is None:
            self.attachments = []
        self.attachments.append(attachment)
        return self

    def with_tag(self, tag: Tag) -> "CreateEmailOptions":
        if self.tags is None:
            self.tags = []
        self.tags.append(tag)
        return self

    def with_scheduled_at(self, scheduled_at: str) -> "CreateEmailOptions":
        """
        Schedule the email. Accepts natural language (``"in 1 min"``) or an
        ISO-8601 timestamp; the API validates it.
        """
        self.scheduled_at = scheduled_at
        return self

    def with_template(self, template: EmailTemplate) -> "CreateEmailOptions":
        self.template = template
        return self

    def with_idempotency_key(self, idempotency_key: str) -> Idempotent["CreateEmailOptions"]:
        return Idempotent(data=self, idempotency_key=idempotency_key)

    def validate(self) -> None:
        if not self.to:
            raise InvalidArgumentError("to", "at least one recipient is required")
        if len(self.to) > MAX_RECIPIENTS:
            raise InvalidArgumentError(
                "to", f"at most {MAX_RECIPIENTS} recipients, got {len(self.to)}"
            )
        if self.attachments:
            total = sum(attachment.size for attachment in self.attachments)
            if total > MAX_ATTACHMENTS_BYTES:
                raise InvalidArgumentError(
                    "attachments", f"total size {total} bytes exceeds 40 MB"
                )
        for tag in self.tags or ():
            tag.validate()

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"from": self.from_, "to": self.to, "subject": self.subject}
        if self.html is not None:
            body["html"] = self.html
        if self.text is not None:
            body["text"] = self.text
        if self.bcc is not None:
            body["bcc"] = self.bcc
        if self.cc is not None:
            body["cc"] = self.cc
        if self.reply_to is not None:
            body["reply_to"] = self.reply_to
        if self.headers is not None:
            body["headers"] = self.headers
        if self.attachments is not None:
            body["attachments"] = [a.to_dict() for a in self.attachments]
        if self.tags is not None:
            body["tags"] = [t.to_dict() for t in self.tags]
        if self.scheduled_at is not None:
            body["scheduled_at"] = self.scheduled_at
        if self.template is not None:
            body["template"] = self.template.to_dict()
        return body


@dataclass
class UpdateEmailOptions:
    """Reschedules a scheduled email."""

    scheduled_at: Optional[str] = None

    def with_scheduled_at(self, scheduled_at: str) -> "UpdateEmailOptions":
        self.scheduled_at = scheduled_at
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.scheduled_at is not None:
            body["scheduled_at"] = self.scheduled_at
        return body


@dataclass
class CreateEmailResponse:
    """The id of a sent email."""

    id: EmailId

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CreateEmailResponse":
        """Create from API response dict."""
        return cls(id=EmailId(data["id"]))


@dataclass
class UpdateEmailResponse:
    id: EmailId

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UpdateEmailResponse":
        return cls(id=EmailId(data["id"]))


@dataclass
class CancelScheduleResponse:
    id: EmailId

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CancelScheduleResponse":
        return cls(id=EmailId(data["id"]))


@dataclass
class Email:
    """A sent email."""

    id: EmailId
    from_: str
    to: list[str]
    subject: str
    created_at: str
    object: Optional[str] = None
    html: Optional[str] = None
    text: Optional[str] = None
    bcc: list[str] = field(default_factory=list)
    cc: list[str] = field(default_factory=list)
    reply_to: list[str] = field(default_factory=list)
    last_event: Optional[str] = None
    scheduled_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Email":
        """Create from API response dict."""
        return cls(
            id=EmailId(data["id"]),
            from_=data["from"],
            to=parse_nullable_vec(data.get("to")),
            subject=data["subject"],
            created_at=data["created_at"],
            object=data.get("object"),
            html=data.get("html"),
            text=data.get("text"),
            bcc=parse_nullable_vec(data.get("bcc")),
            cc=parse_nullable_vec(data.get("cc")),
            reply_to=parse_nullable_vec(data.get("reply_to")),
            last_event=data.get("last_event"),
            scheduled_at=data.get("scheduled_at"),
        )


@dataclass
class PermissiveBatchError:
    """An email of a permissive batch that failed validation."""

    index: int
    message: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PermissiveBatchError":
        return cls(index=data["index"], message=data["message"])


@dataclass
class SendEmailBatchResponse:
    """Ids of the sent emails and, in permissive mode, the rejected ones."""

    data: list[CreateEmailResponse]
    errors: list[PermissiveBatchError] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SendEmailBatchResponse":
        """Create from API response dict."""
        return cls(
            data=[CreateEmailResponse.from_dict(e) for e in parse_nullable_vec(data.get("data"))],
            errors=[
                PermissiveBatchError.from_dict(e) for e in parse_nullable_vec(data.get("errors"))
            ],
        )


# ==========================================
# Receiving
# ==========================================


@dataclass
class InboundAttachment:
    """An attachment of a received email."""

    id: InboundAttachmentId
    filename: str
    content_type: str
    content_disposition: Optional[str] = None
    content_id: Optional[str] = None
    size: Optional[int] = None
    download_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InboundAttachment":
        """Create from API response dict."""
        return cls(
            id=InboundAttachmentId(data["id"]),
            filename=data["filename"],
            content_type=data["content_type"],
            content_disposition=data.get("content_disposition"),
            content_id=data.get("content_id"),
            size=data.get("size"),
            download_url=data.get("download_url"),
        )


@dataclass
class InboundEmail:
    """A received email."""

    id: InboundEmailId
    from_: str
    to: list[str]
    subject: str
    created_at: str
    bcc: list[str] = field(default_factory=list)
    cc: list[str] = field(default_factory=list)
    reply_to: list[str] = field(default_factory=list)
    html: Optional[str] = None
    text: Optional[str] = None
    headers: dict[str, str] = field(default_factory=dict)
    attachments: list[InboundAttachment] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InboundEmail":
        """Create from API response dict."""
        return cls(
            id=InboundEmailId(data["id"]),
            from_=data["from"],
            to=parse_nullable_vec(data.get("to")),
            subject=data["subject"],
            created_at=data["created_at"],
            bcc=parse_nullable_vec(data.get("bcc")),
            cc=parse_nullable_vec(data.get("cc")),
            reply_to=parse_nullable_vec(data.get("reply_to")),
            html=data.get("html"),
            text=data.get("text"),
            headers=data.get("headers") or {},
            attachments=[
                InboundAttachment.from_dict(a) for a in parse_nullable_vec(data.get("attachments"))
            ],
        )


# ==========================================
# Domains
# ==========================================


@dataclass
class CreateDomainOptions:
    """A domain to register."""

    name: str
    region: Optional[Region] = None
    custom_return_path: Optional[str] = None

    def with_region(self, region: Region) -> "CreateDomainOptions":
        self.region = region
        return self

    def with_custom_return_path(self, custom_return_path: str) -> "CreateDomainOptions":
        self.custom_return_path = custom_return_path
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"name": self.name}
        if self.region is not None:
            body["region"] = self.region.value
        if self.custom_return_path is not None:
            body["custom_return_path"] = self.custom_return_path
        return body


@dataclass
class DomainRecord:
    """A DNS record the domain needs."""

    record: str
    name: str
    type: Optional[str] = None
    ttl: Optional[str] = None
    status: Optional[str] = None
    value: Optional[str] = None
    priority: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DomainRecord":
        """Create from API response dict."""
        return cls(
            record=data["record"],
            name=data["name"],
            type=data.get("type"),
            ttl=data.get("ttl"),
            status=data.get("status"),
            value=data.get("value"),
            priority=data.get("priority"),
        )


@dataclass
class Domain:
    """A sending domain."""

    id: DomainId
    name: str
    status: str
    created_at: str
    region: str
    records: list[DomainRecord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Domain":
        """Create from API response dict."""
        return cls(
            id=DomainId(data["id"]),
            name=data["name"],
            status=data["status"],
            created_at=data["created_at"],
            region=data["region"],
            records=[DomainRecord.from_dict(r) for r in parse_nullable_vec(data.get("records"))],
        )


@dataclass
class CreateDomainResponse:
    """A created domain with the DNS records to configure."""

    id: DomainId
    name: str
    created_at: str
    status: str
    region: str
    records: list[DomainRecord] = field(default_factory=list)
    dns_provider: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CreateDomainResponse":
        """Create from API response dict."""
        return cls(
            id=DomainId(data["id"]),
            name=data["name"],
            created_at=data["created_at"],
            status=data["status"],
            region=data["region"],
            records=[DomainRecord.from_dict(r) for r in parse_nullable_vec(data.get("records"))],
            dns_provider=data.get("dnsProvider"),
        )


@dataclass
class UpdateDomainOptions:
    """Tracking settings of a domain."""

    click_tracking: Optional[bool] = None
    open_tracking: Optional[bool] = None

    def with_click_tracking(self, enable: bool) -> "UpdateDomainOptions":
        self.click_tracking = enable
        return self

    def with_open_tracking(self, enable: bool) -> "UpdateDomainOptions":
        self.open_tracking = enable
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.click_tracking is not None:
            body["click_tracking"] = self.click_tracking
        if self.open_tracking is not None:
            body["open_tracking"] = self.open_tracking
        return body


# ==========================================
# Audiences, contacts and segments
# ==========================================


@dataclass
class CreateAudienceResponse:
    id: AudienceId
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CreateAudienceResponse":
        return cls(id=AudienceId(data["id"]), name=data["name"])


@dataclass
class Audience:
    """A list of contacts."""

    id: AudienceId
    name: str
    created_at: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Audience":
        """Create from API response dict."""
        return cls(id=AudienceId(data["id"]), name=data["name"], created_at=data["created_at"])


@dataclass
class CreateContactOptions:
    """A contact to add to an audience."""

    email: str
    audience_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    unsubscribed: Optional[bool] = None

    def with_first_name(self, first_name: str) -> "CreateContactOptions":
        self.first_name = first_name
        return self

    def with_last_name(self, last_name: str) -> "CreateContactOptions":
        self.last_name = last_name
        return self

    def with_unsubscribed(self, unsubscribed: bool) -> "CreateContactOptions":
        self.unsubscribed = unsubscribed
        return self

    def to_dict(self) -> dict[str, Any]:
        # audience_id is a path parameter
        body: dict[str, Any] = {"email": self.email}
        if self.first_name is not None:
            body["first_name"] = self.first_name
        if self.last_name is not None:
            body["last_name"] = self.last_name
        if self.unsubscribed is not None:
            body["unsubscribed"] = self.unsubscribed
        return body


@dataclass
class CreateContactResponse:
    id: ContactId

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CreateContactResponse":
        return cls(id=ContactId(data["id"]))


@dataclass
class Contact:
    """A contact of an audience."""

    id: ContactId
    email: str
    created_at: str
    unsubscribed: bool = False
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contact":
        """Create from API response dict."""
        return cls(
            id=ContactId(data["id"]),
            email=data["email"],
            created_at=data["created_at"],
            unsubscribed=data.get("unsubscribed", False),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
        )


@dataclass
class UpdateContactOptions:
    """Fields to change on a contact."""

    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    unsubscribed: Optional[bool] = None

    def with_email(self, email: str) -> "UpdateContactOptions":
        self.email = email
        return self

    def with_first_name(self, first_name: str) -> "UpdateContactOptions":
        self.first_name = first_name
        return self

    def with_last_name(self, last_name: str) -> "UpdateContactOptions":
        self.last_name = last_name
        return self

    def with_unsubscribed(self, unsubscribed: bool) -> "UpdateContactOptions":
        self.unsubscribed = unsubscribed
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.email is not None:
            body["email"] = self.email
        if self.first_name is not None:
            body["first_name"] = self.first_name
        if self.last_name is not None:
            body["last_name"] = self.last_name
        if self.unsubscribed is not None:
            body["unsubscribed"] = self.unsubscribed
        return body


@dataclass
class UpdateContactResponse:
    id: ContactId

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UpdateContactResponse":
        return cls(id=ContactId(data["id"]))


@dataclass
class CreateSegmentResponse:
    id: SegmentId
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CreateSegmentResponse":
        return cls(id=SegmentId(data["id"]), name=data["name"])


@dataclass
class Segment:
    """A segment of contacts."""

    id: SegmentId
    name: str
    created_at: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        """Create from API response dict."""
        return cls(id=SegmentId(data["id"]), name=data["name"], created_at=data["created_at"])


# ==========================================
# Broadcasts
# ==========================================


class CreateBroadcastOptions:
    """A broadcast to an audience."""

    def __init__(self, audience_id: str, from_: str, subject: str) -> None:
        self.audience_id = audience_id
        self.from_ = from_
        self.subject = subject
        self.reply_to: Optional[list[str]] = None
        self.html: Optional[str] = None
        self.text: Optional[str] = None
        self.name: Optional[str] = None

    def with_reply_to(self, address: str) -> "CreateBroadcastOptions":
        if self.reply_to is None:
            self.reply_to = []
        self.reply_to.append(address)
        return self

    def with_html(self, html: str) -> "CreateBroadcastOptions":
        self.html = html
        return self

    def with_text(self, text: str) -> "CreateBroadcastOptions":
        self.text = text
        return self

    def with_name(self, name: str) -> "CreateBroadcastOptions":
        self.name = name
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "audience_id": self.audience_id,
            "from": self.from_,
            "subject": self.subject,
        }
        if self.reply_to is not None:
            body["reply_to"] = self.reply_to
        if self.html is not None:
            body["html"] = self.html
        if self.text is not None:
            body["text"] = self.text
        if self.name is not None:
            body["name"] = self.name
        return body


class UpdateBroadcastOptions:
    """Fields to change on a draft broadcast."""

    def __init__(self) -> None:
        self.audience_id: Optional[str] = None
        self.from_: Optional[str] = None
        self.subject: Optional[str] = None
        self.reply_to: Optional[list[str]] = None
        self.html: Optional[str] = None
        self.text: Optional[str] = None
        self.name: Optional[str] = None

    def with_audience_id(self, audience_id: str) -> "UpdateBroadcastOptions":
        self.audience_id = audience_id
        return self

    def with_from(self, from_: str) -> "UpdateBroadcastOptions":
        self.from_ = from_
        return self

    def with_subject(self, subject: str) -> "UpdateBroadcastOptions":
        self.subject = subject
        return self

    def with_reply_to(self, address: str) -> "UpdateBroadcastOptions":
        if self.reply_to is None:
            self.reply_to = []
        self.reply_to.append(address)
        return self

    def with_html(self, html: str) -> "UpdateBroadcastOptions":
        self.html = html
        return self

    def with_text(self, text: str) -> "UpdateBroadcastOptions":
        self.text = text
        return self

    def with_name(self, name: str) -> "UpdateBroadcastOptions":
        self.name = name
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.audience_id is not None:
            body["audience_id"] = self.audience_id
        if self.from_ is not None:
            body["from"] = self.from_
        if self.subject is not None:
            body["subject"] = self.subject
        if self.reply_to is not None:
            body["reply_to"] = self.reply_to
        if self.html is not None:
            body["html"] = self.html
        if self.text is not None:
            body["text"] = self.text
        if self.name is not None:
            body["name"] = self.name
        return body


@dataclass
class SendBroadcastOptions:
    """Sends a broadcast now or at ``scheduled_at``."""

    broadcast_id: str
    scheduled_at: Optional[str] = None

    def with_scheduled_at(self, scheduled_at: str) -> "SendBroadcastOptions":
        self.scheduled_at = scheduled_at
        return self

    def to_dict(self) -> dict[str, Any]:
        # broadcast_id is a path parameter
        body: dict[str, Any] = {}
        if self.scheduled_at is not None:
            body["scheduled_at"] = self.scheduled_at
        return body


@dataclass
class BroadcastResponse:
    """Id returned by broadcast create, send and update."""

    id: BroadcastId

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BroadcastResponse":
        return cls(id=BroadcastId(data["id"]))


@dataclass
class Broadcast:
    """A broadcast."""

    id: BroadcastId
    name: Optional[str]
    audience_id: Optional[AudienceId]
    status: str
    created_at: str
    scheduled_at: Optional[str] = None
    sent_at: Optional[str] = None
    from_: Optional[str] = None
    subject: Optional[str] = None
    reply_to: list[str] = field(default_factory=list)
    preview_text: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Broadcast":
        """Create from API response dict."""
        audience_id = data.get("audience_id")
        return cls(
            id=BroadcastId(data["id"]),
            name=data.get("name"),
            audience_id=AudienceId(audience_id) if audience_id is not None else None,
            status=data["status"],
            created_at=data["created_at"],
            scheduled_at=data.get("scheduled_at"),
            sent_at=data.get("sent_at"),
            from_=data.get("from"),
            subject=data.get("subject"),
            reply_to=parse_nullable_vec(data.get("reply_to")),
            preview_text=data.get("preview_text"),
        )


# ==========================================
# Templates
# ==========================================


@dataclass
class Variable:
    """A template variable, optionally with a fallback value."""

    key: str
    type: VariableType
    fallback_value: Optional[Any] = None

    def with_fallback(self, fallback_value: Any) -> "Variable":
        self.fallback_value = fallback_value
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "type": self.type.value, "fallback_value": self.fallback_value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Variable":
        return cls(
            key=data["key"],
            type=VariableType(data["type"]),
            fallback_value=data.get("fallback_value"),
        )


class _TemplateOptions:
    def __init__(self, name: str, html: str) -> None:
        self.name = name
        self.html = html
        self.alias: Optional[str] = None
        self.from_: Optional[str] = None
        self.subject: Optional[str] = None
        self.reply_to: Optional[list[str]] = None
        self.text: Optional[str] = None
        self.variables: Optional[list[Variable]] = None

    def with_alias(self, alias: str):
        self.alias = alias
        return self

    def with_from(self, from_: str):
        self.from_ = from_
        return self

    def with_subject(self, subject: str):
        self.subject = subject
        return self

    def with_reply_to(self, address: str):
        if self.reply_to is None:
            self.reply_to = []
        self.reply_to.append(address)
        return self

    def with_text(self, text: str):
        self.text = text
        return self

    def with_variable(self, variable: Variable):
        if self.variables is None:
            self.variables = []
        self.variables.append(variable)
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"name": self.name, "html": self.html}
        if self.alias is not None:
            body["alias"] = self.alias
        if self.from_ is not None:
            body["from"] = self.from_
        if self.subject is not None:
            body["subject"] = self.subject
        if self.reply_to is not None:
            body["reply_to"] = self.reply_to
        if self.text is not None:
            body["text"] = self.text
        if self.variables is not None:
            body["variables"] = [v.to_dict() for v in self.variables]
        return body


class CreateTemplateOptions(_TemplateOptions):
    """A template to create; ``{{{NAME}}}`` placeholders refer to variables."""


class UpdateTemplateOptions(_TemplateOptions):
    """Replacement content for an existing template."""


@dataclass
class TemplateResponse:
    """Id returned by template create, update, publish and duplicate."""

    id: TemplateId

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TemplateResponse":
        return cls(id=TemplateId(data["id"]))


@dataclass
class Template:
    """An email template."""

    id: TemplateId
    name: str
    created_at: str
    updated_at: str
    status: TemplateStatus
    alias: Optional[str] = None
    published_at: Optional[str] = None
    from_: Optional[str] = None
    subject: Optional[str] = None
    reply_to: list[str] = field(default_factory=list)
    html: Optional[str] = None
    text: Optional[str] = None
    variables: list[Variable] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Template":
        """Create from API response dict."""
        return cls(
            id=TemplateId(data["id"]),
            name=data["name"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
            status=TemplateStatus(data["status"]),
            alias=data.get("alias"),
            published_at=data.get("published_at"),
            from_=data.get("from"),
            subject=data.get("subject"),
            reply_to=parse_nullable_vec(data.get("reply_to")),
            html=data.get("html"),
            text=data.get("text"),
            variables=[Variable.from_dict(v) for v in parse_nullable_vec(data.get("variables"))],
        )


@dataclass
class DeleteTemplateResponse:
    id: TemplateId
    deleted: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DeleteTemplateResponse":
        return cls(id=TemplateId(data["id"]), deleted=data["deleted"])


# ==========================================
# Topics
# ==========================================


@dataclass
class CreateTopicOptions:
    """A topic contacts can subscribe to."""

    name: str
    default_subscription: SubscriptionType
    description: Optional[str] = None
    visibility: Optional[TopicVisibility] = None

    def with_description(self, description: str) -> "CreateTopicOptions":
        self.description = description
        return self

    def with_visibility(self, visibility: TopicVisibility) -> "CreateTopicOptions":
        self.visibility = visibility
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "name": self.name,
            "default_subscription": self.default_subscription.value,
        }
        if self.description is not None:
            body["description"] = self.description
        if self.visibility is not None:
            body["visibility"] = self.visibility.value
        return body


@dataclass
class UpdateTopicOptions:
    name: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[TopicVisibility] = None

    def with_name(self, name: str) -> "UpdateTopicOptions":
        self.name = name
        return self

    def with_description(self, description: str) -> "UpdateTopicOptions":
        self.description = description
        return self

    def with_visibility(self, visibility: TopicVisibility) -> "UpdateTopicOptions":
        self.visibility = visibility
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.name is not None:
            body["name"] = self.name
        if self.description is not None:
            body["description"] = self.description
        if self.visibility is not None:
            body["visibility"] = self.visibility.value
        return body


@dataclass
class TopicResponse:
    """Id returned by topic create and update."""

    id: TopicId

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TopicResponse":
        return cls(id=TopicId(data["id"]))


@dataclass
class Topic:
    """A subscription topic."""

    id: TopicId
    name: str
    default_subscription: SubscriptionType
    visibility: TopicVisibility
    created_at: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Topic":
        """Create from API response dict."""
        return cls(
            id=TopicId(data["id"]),
            name=data["name"],
            default_subscription=SubscriptionType(data["default_subscription"]),
            visibility=TopicVisibility(data["visibility"]),
            created_at=data["created_at"],
            description=data.get("description"),
        )


@dataclass
class DeleteTopicResponse:
    id: TopicId
    deleted: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DeleteTopicResponse":
        return cls(id=TopicId(data["id"]), deleted=data["deleted"])


# ==========================================
# Webhooks
# ==========================================


class CreateWebhookOptions:
    """An endpoint to deliver events to."""

    def __init__(self, endpoint: str, events: Iterable[Union[str, Enum]]) -> None:
        """
        Args:
            endpoint: URL receiving the events
            events: Event types to subscribe to, e.g. ``EmailEventType.DELIVERED``
        """
        self.endpoint = endpoint
        self.events = [_enum_value(e) for e in events]

    def to_dict(self) -> dict[str, Any]:
        return {"endpoint": self.endpoint, "events": self.events}


class UpdateWebhookOptions:
    def __init__(self) -> None:
        self.endpoint: Optional[str] = None
        self.events: Optional[list[str]] = None
        self.status: Optional[WebhookStatus] = None

    def with_endpoint(self, endpoint: str) -> "UpdateWebhookOptions":
        self.endpoint = endpoint
        return self

    def with_events(self, events: Iterable[Union[str, Enum]]) -> "UpdateWebhookOptions":
        self.events = [_enum_value(e) for e in events]
        return self

    def with_status(self, status: WebhookStatus) -> "UpdateWebhookOptions":
        self.status = status
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.endpoint is not None:
            body["endpoint"] = self.endpoint
        if self.events is not None:
            body["events"] = self.events
        if self.status is not None:
            body["status"] = self.status.value
        return body


@dataclass
class CreateWebhookResponse:
    """A created webhook and the secret its payloads are signed with."""

    id: WebhookId
    signing_secret: str

    def __repr__(self) -> str:
        return f"CreateWebhookResponse(id={self.id!r}, signing_secret='whsec_*********')"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CreateWebhookResponse":
        return cls(id=WebhookId(data["id"]), signing_secret=data["signing_secret"])


@dataclass
class UpdateWebhookResponse:
    id: WebhookId

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UpdateWebhookResponse":
        return cls(id=WebhookId(data["id"]))


@dataclass
class Webhook:
    """A webhook endpoint."""

    id: WebhookId
    created_at: str
    status: str
    endpoint: str
    events: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Webhook":
        """Create from API response dict."""
        return cls(
            id=WebhookId(data["id"]),
            created_at=data["created_at"],
            status=data["status"],
            endpoint=data["endpoint"],
            events=parse_nullable_vec(data.get("events")),
        )


# ==========================================
# API keys
# ==========================================


@dataclass
class CreateApiKeyOptions:
    """
    An API key to create. Full access by default; a sending-access key can be
    restricted to a single domain.
    """

    name: str
    permission: Optional[Permission] = None
    domain_id: Optional[str] = None

    def with_full_access(self) -> "CreateApiKeyOptions":
        self.permission = Permission.FULL_ACCESS
        self.domain_id = None
        return self

    def with_sending_access(self, domain_id: Optional[str] = None) -> "CreateApiKeyOptions":
        self.permission = Permission.SENDING_ACCESS
        self.domain_id = domain_id
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"name": self.name}
        if self.permission is not None:
            body["permission"] = self.permission.value
        if self.domain_id is not None:
            body["domain_id"] = self.domain_id
        return body


@dataclass
class ApiKeyToken:
    """A created API key. The token is only ever returned once."""

    id: ApiKeyId
    token: str

    def __repr__(self) -> str:
        return f"ApiKeyToken(id={self.id!r}, token='re_*********')"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApiKeyToken":
        return cls(id=ApiKeyId(data["id"]), token=data["token"])


@dataclass
class ApiKey:
    """An API key, without its token."""

    id: ApiKeyId
    name: str
    created_at: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApiKey":
        """Create from API response dict."""
        return cls(id=ApiKeyId(data["id"]), name=data["name"], created_at=data["created_at"])
