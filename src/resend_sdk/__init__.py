"""Resend SDK - Python client for the Resend transactional email API."""

from .client import Resend
from .config import Config
from .errors import (
    DecodeError,
    ErrorKind,
    ErrorResponse,
    InvalidArgumentError,
    InvalidPathError,
    ParseError,
    RateLimitError,
    RemoteError,
    ResendError,
    TransportError,
)
from .events import (
    Click,
    ContactBody,
    ContactEvent,
    ContactEventType,
    DomainEvent,
    DomainEventType,
    EmailBody,
    EmailEvent,
    EmailEventType,
    Event,
    try_parse_event,
)
from .idempotent import Idempotent, with_idempotency_key
from .list_opts import ListAfter, ListBefore, ListOptions, ListResponse
from .retry import RetryOptions, send_with_retry, send_with_retry_opts
from .types import (
    ApiKey,
    ApiKeyToken,
    Attachment,
    Audience,
    BatchValidation,
    Broadcast,
    BroadcastResponse,
    CancelScheduleResponse,
    Contact,
    CreateApiKeyOptions,
    CreateAudienceResponse,
    CreateBroadcastOptions,
    CreateContactOptions,
    CreateContactResponse,
    CreateDomainOptions,
    CreateDomainResponse,
    CreateEmailOptions,
    CreateEmailResponse,
    CreateSegmentResponse,
    CreateTemplateOptions,
    CreateTopicOptions,
    CreateWebhookOptions,
    CreateWebhookResponse,
    DeleteTemplateResponse,
    DeleteTopicResponse,
    Domain,
    DomainRecord,
    Email,
    EmailTemplate,
    InboundAttachment,
    InboundEmail,
    Permission,
    PermissiveBatchError,
    Region,
    Segment,
    SendBroadcastOptions,
    SendEmailBatchResponse,
    SubscriptionType,
    Tag,
    Template,
    TemplateResponse,
    TemplateStatus,
    Topic,
    TopicResponse,
    TopicVisibility,
    UpdateBroadcastOptions,
    UpdateContactOptions,
    UpdateContactResponse,
    UpdateDomainOptions,
    UpdateEmailOptions,
    UpdateEmailResponse,
    UpdateTemplateOptions,
    UpdateTopicOptions,
    UpdateWebhookOptions,
    UpdateWebhookResponse,
    Variable,
    VariableType,
    Webhook,
    WebhookStatus,
)
from .version import __version__

__all__ = [
    # Client
    "Resend",
    "Config",
    # Emails
    "CreateEmailOptions",
    "CreateEmailResponse",
    "UpdateEmailOptions",
    "UpdateEmailResponse",
    "CancelScheduleResponse",
    "Email",
    "EmailTemplate",
    "Attachment",
    "Tag",
    "BatchValidation",
    "SendEmailBatchResponse",
    "PermissiveBatchError",
    "InboundEmail",
    "InboundAttachment",
    # Domains
    "CreateDomainOptions",
    "CreateDomainResponse",
    "UpdateDomainOptions",
    "Domain",
    "DomainRecord",
    "Region",
    # Audiences, contacts and segments
    "Audience",
    "CreateAudienceResponse",
    "Contact",
    "CreateContactOptions",
    "CreateContactResponse",
    "UpdateContactOptions",
    "UpdateContactResponse",
    "Segment",
    "CreateSegmentResponse",
    # Broadcasts
    "Broadcast",
    "BroadcastResponse",
    "CreateBroadcastOptions",
    "SendBroadcastOptions",
    "UpdateBroadcastOptions",
    # Templates
    "Template",
    "TemplateResponse",
    "TemplateStatus",
    "CreateTemplateOptions",
    "UpdateTemplateOptions",
    "DeleteTemplateResponse",
    "Variable",
    "VariableType",
    # Topics
    "Topic",
    "TopicResponse",
    "CreateTopicOptions",
    "UpdateTopicOptions",
    "DeleteTopicResponse",
    "SubscriptionType",
    "TopicVisibility",
    # Webhooks
    "Webhook",
    "WebhookStatus",
    "CreateWebhookOptions",
    "CreateWebhookResponse",
    "UpdateWebhookOptions",
    "UpdateWebhookResponse",
    # API keys
    "ApiKey",
    "ApiKeyToken",
    "CreateApiKeyOptions",
    "Permission",
    # Pagination
    "ListOptions",
    "ListBefore",
    "ListAfter",
    "ListResponse",
    # Idempotency and retries
    "Idempotent",
    "with_idempotency_key",
    "RetryOptions",
    "send_with_retry",
    "send_with_retry_opts",
    # Events
    "try_parse_event",
    "Event",
    "EmailEvent",
    "EmailEventType",
    "EmailBody",
    "Click",
    "ContactEvent",
    "ContactEventType",
    "ContactBody",
    "DomainEvent",
    "DomainEventType",
    # Errors
    "ResendError",
    "TransportError",
    "RemoteError",
    "RateLimitError",
    "DecodeError",
    "ParseError",
    "InvalidPathError",
    "InvalidArgumentError",
    "ErrorKind",
    "ErrorResponse",
    "__version__",
]
