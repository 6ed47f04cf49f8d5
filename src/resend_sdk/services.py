"""Resource services exposed on the :class:`~resend_sdk.Resend` client."""

from typing import Any, Callable, Iterable, Optional, TypeVar, Union
from urllib.parse import quote

from .config import Config, Request
from .errors import DecodeError
from .idempotent import Idempotent
from .list_opts import ListOptions, ListResponse
from .types import (
    ApiKey,
    ApiKeyToken,
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
    DomainId,
    Email,
    InboundAttachment,
    InboundEmail,
    Segment,
    SendBroadcastOptions,
    SendEmailBatchResponse,
    Template,
    TemplateResponse,
    Topic,
    TopicResponse,
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
    Webhook,
)

T = TypeVar("T")

BATCH_VALIDATION_HEADER = "x-batch-validation"


def _segment(value: str) -> str:
    """Percent-encode ``value`` as a single path segment."""
    return quote(str(value), safe="")


def _parse(data: Any, parse: Callable[[Any], T], context: str) -> T:
    try:
        return parse(data)
    except (AttributeError, KeyError, TypeError, ValueError) as err:
        raise DecodeError(f"{context}: unexpected response body ({err!r})") from err


def _list_params(list_opts: Optional[ListOptions]) -> dict[str, str]:
    return (list_opts or ListOptions()).to_params()


class _Service:
    def __init__(self, config: Config) -> None:
        self._config = config

    async def _request(
        self,
        request: Request,
        context: str,
        parse: Callable[[Any], T],
    ) -> T:
        """Send ``request`` and decode its JSON body with ``parse``."""
        response = await self._config.send(request)
        data = Config.decode(response, context)
        return _parse(data, parse, context)

    async def _list(
        self,
        path: str,
        list_opts: Optional[ListOptions],
        parse_item: Callable[[dict[str, Any]], T],
        context: str,
    ) -> ListResponse[T]:
        request = self._config.build("GET", path).query(_list_params(list_opts))
        return await self._request(
            request, context, lambda data: ListResponse.from_dict(data, parse_item)
        )

    async def _delete(self, path: str, context: str) -> bool:
        request = self._config.build("DELETE", path)
        return await self._request(request, context, lambda data: bool(data["deleted"]))


class EmailsService(_Service):
    """`Resend Emails API <https://resend.com/docs/api-reference/emails>`_."""

    async def send(
        self, email: Union[CreateEmailOptions, Idempotent[CreateEmailOptions]]
    ) -> CreateEmailResponse:
        """
        Send an email.

        Args:
            email: The email, optionally wrapped with an idempotency key

        Returns:
            The id of the sent email

        Raises:
            InvalidArgumentError: If the email has no or too many recipients,
                oversized attachments or invalid tags
        """
        wrapped = Idempotent.wrap(email)
        wrapped.data.validate()
        request = self._config.build("POST", "/emails").json(wrapped.data.to_dict())
        wrapped.apply(request)
        return await self._request(request, "send email", CreateEmailResponse.from_dict)

    async def get(self, email_id: str) -> Email:
        """Retrieve a single email."""
        request = self._config.build("GET", f"/emails/{_segment(email_id)}")
        return await self._request(request, "get email", Email.from_dict)

    async def update(self, email_id: str, update: UpdateEmailOptions) -> UpdateEmailResponse:
        """Reschedule an email that has not been sent yet."""
        request = self._config.build("PATCH", f"/emails/{_segment(email_id)}").json(
            update.to_dict()
        )
        return await self._request(request, "update email", UpdateEmailResponse.from_dict)

    async def cancel(self, email_id: str) -> CancelScheduleResponse:
        """Cancel a scheduled email."""
        request = self._config.build("POST", f"/emails/{_segment(email_id)}/cancel")
        return await self._request(request, "cancel email", CancelScheduleResponse.from_dict)

    async def list(self, list_opts: Optional[ListOptions] = None) -> ListResponse[Email]:
        return await self._list("/emails", list_opts, Email.from_dict, "list emails")


class BatchService(_Service):
    """`Resend Batch API <https://resend.com/docs/api-reference/emails/send-batch-emails>`_."""

    async def send(
        self,
        emails: Union[Iterable[CreateEmailOptions], Idempotent[Iterable[CreateEmailOptions]]],
    ) -> list[CreateEmailResponse]:
        """
        Send up to 100 emails at once, all or nothing.

        Returns:
            The ids of the sent emails, in request order
        """
        response = await self._send_batch(emails, None)
        return response.data

    async def send_with_batch_validation(
        self,
        emails: Union[Iterable[CreateEmailOptions], Idempotent[Iterable[CreateEmailOptions]]],
        batch_validation: BatchValidation,
    ) -> SendEmailBatchResponse:
        """
        Send a batch with an explicit validation mode.

        In :attr:`BatchValidation.PERMISSIVE` mode the valid emails are sent and
        the rejected ones are listed in ``errors``.
        """
        return await self._send_batch(emails, batch_validation)

    async def _send_batch(
        self,
        emails: Union[Iterable[CreateEmailOptions], Idempotent[Iterable[CreateEmailOptions]]],
        batch_validation: Optional[BatchValidation],
    ) -> SendEmailBatchResponse:
        wrapped = Idempotent.wrap(emails)
        items = list(wrapped.data)
        for email in items:
            email.validate()

        request = self._config.build("POST", "/emails/batch").json(
            [email.to_dict() for email in items]
        )
        if batch_validation is not None:
            request.header(BATCH_VALIDATION_HEADER, batch_validation.value)
        wrapped.apply(request)
        return await self._request(request, "send batch", SendEmailBatchResponse.from_dict)


class ReceivingService(_Service):
    """Received (inbound) emails and their attachments."""

    async def get(self, email_id: str) -> InboundEmail:
        request = self._config.build("GET", f"/emails/receiving/{_segment(email_id)}")
        return await self._request(request, "get received email", InboundEmail.from_dict)

    async def list(self, list_opts: Optional[ListOptions] = None) -> ListResponse[InboundEmail]:
        return await self._list(
            "/emails/receiving", list_opts, InboundEmail.from_dict, "list received emails"
        )

    async def get_attachment(self, attachment_id: str, email_id: str) -> InboundAttachment:
        path = f"/emails/receiving/{_segment(email_id)}/attachments/{_segment(attachment_id)}"
        request = self._config.build("GET", path)
        return await self._request(request, "get attachment", InboundAttachment.from_dict)

    async def list_attachments(
        self, email_id: str, list_opts: Optional[ListOptions] = None
    ) -> ListResponse[InboundAttachment]:
        return await self._list(
            f"/emails/receiving/{_segment(email_id)}/attachments",
            list_opts,
            InboundAttachment.from_dict,
            "list attachments",
        )


class DomainsService(_Service):
    """`Resend Domains API <https://resend.com/docs/api-reference/domains>`_."""

    async def add(self, domain: CreateDomainOptions) -> CreateDomainResponse:
        """Register a domain; the response lists the DNS records to configure."""
        request = self._config.build("POST", "/domains").json(domain.to_dict())
        return await self._request(request, "add domain", CreateDomainResponse.from_dict)

    async def get(self, domain_id: str) -> Domain:
        request = self._config.build("GET", f"/domains/{_segment(domain_id)}")
        return await self._request(request, "get domain", Domain.from_dict)

    async def verify(self, domain_id: str) -> DomainId:
        """Start verification of a domain's DNS records."""
        request = self._config.build("POST", f"/domains/{_segment(domain_id)}/verify")
        return await self._request(request, "verify domain", lambda data: DomainId(data["id"]))

    async def update(self, domain_id: str, update: UpdateDomainOptions) -> DomainId:
        request = self._config.build("PATCH", f"/domains/{_segment(domain_id)}").json(
            update.to_dict()
        )
        return await self._request(request, "update domain", lambda data: DomainId(data["id"]))

    async def list(self, list_opts: Optional[ListOptions] = None) -> ListResponse[Domain]:
        return await self._list("/domains", list_opts, Domain.from_dict, "list domains")

    async def delete(self, domain_id: str) -> bool:
        """Remove a domain. Returns whether it was deleted."""
        return await self._delete(f"/domains/{_segment(domain_id)}", "delete domain")


class AudiencesService(_Service):
    """`Resend Audiences API <https://resend.com/docs/api-reference/audiences>`_."""

    async def create(self, name: str) -> CreateAudienceResponse:
        request = self._config.build("POST", "/audiences").json({"name": name})
        return await self._request(request, "create audience", CreateAudienceResponse.from_dict)

    async def get(self, audience_id: str) -> Audience:
        request = self._config.build("GET", f"/audiences/{_segment(audience_id)}")
        return await self._request(request, "get audience", Audience.from_dict)

    async def list(self, list_opts: Optional[ListOptions] = None) -> ListResponse[Audience]:
        return await self._list("/audiences", list_opts, Audience.from_dict, "list audiences")

    async def delete(self, audience_id: str) -> bool:
        return await self._delete(f"/audiences/{_segment(audience_id)}", "delete audience")


class ContactsService(_Service):
    """
    `Resend Contacts API <https://resend.com/docs/api-reference/contacts>`_.

    Contacts live inside an audience and can be addressed by id or by email.
    """

    async def create(self, contact: CreateContactOptions) -> CreateContactResponse:
        path = f"/audiences/{_segment(contact.audience_id)}/contacts"
        request = self._config.build("POST", path).json(contact.to_dict())
        return await self._request(request, "create contact", CreateContactResponse.from_dict)

    async def get(self, contact: str, audience_id: str) -> Contact:
        """
        Retrieve a contact.

        Args:
            contact: Contact id or email address
            audience_id: Audience the contact belongs to
        """
        path = f"/audiences/{_segment(audience_id)}/contacts/{_segment(contact)}"
        request = self._config.build("GET", path)
        return await self._request(request, "get contact", Contact.from_dict)

    async def update(
        self, contact: str, audience_id: str, update: UpdateContactOptions
    ) -> UpdateContactResponse:
        path = f"/audiences/{_segment(audience_id)}/contacts/{_segment(contact)}"
        request = self._config.build("PATCH", path).json(update.to_dict())
        return await self._request(request, "update contact", UpdateContactResponse.from_dict)

    async def delete(self, contact: str, audience_id: str) -> bool:
        path = f"/audiences/{_segment(audience_id)}/contacts/{_segment(contact)}"
        return await self._delete(path, "delete contact")

    async def list(
        self, audience_id: str, list_opts: Optional[ListOptions] = None
    ) -> ListResponse[Contact]:
        return await self._list(
            f"/audiences/{_segment(audience_id)}/contacts",
            list_opts,
            Contact.from_dict,
            "list contacts",
        )


class SegmentsService(_Service):
    """`Resend Segments API <https://resend.com/docs/api-reference/segments>`_."""

    async def create(self, name: str) -> CreateSegmentResponse:
        request = self._config.build("POST", "/segments").json({"name": name})
        return await self._request(request, "create segment", CreateSegmentResponse.from_dict)

    async def get(self, segment_id: str) -> Segment:
        request = self._config.build("GET", f"/segments/{_segment(segment_id)}")
        return await self._request(request, "get segment", Segment.from_dict)

    async def list(self, list_opts: Optional[ListOptions] = None) -> ListResponse[Segment]:
        return await self._list("/segments", list_opts, Segment.from_dict, "list segments")

    async def delete(self, segment_id: str) -> bool:
        return await self._delete(f"/segments/{_segment(segment_id)}", "delete segment")


class BroadcastsService(_Service):
    """`Resend Broadcasts API <https://resend.com/docs/api-reference/broadcasts>`_."""

    async def create(self, broadcast: CreateBroadcastOptions) -> BroadcastResponse:
        """Create a draft broadcast for an audience."""
        request = self._config.build("POST", "/broadcasts").json(broadcast.to_dict())
        return await self._request(request, "create broadcast", BroadcastResponse.from_dict)

    async def send(self, broadcast: SendBroadcastOptions) -> BroadcastResponse:
        """Send a broadcast now, or at ``broadcast.scheduled_at``."""
        path = f"/broadcasts/{_segment(broadcast.broadcast_id)}/send"
        request = self._config.build("POST", path).json(broadcast.to_dict())
        return await self._request(request, "send broadcast", BroadcastResponse.from_dict)

    async def get(self, broadcast_id: str) -> Broadcast:
        request = self._config.build("GET", f"/broadcasts/{_segment(broadcast_id)}")
        return await self._request(request, "get broadcast", Broadcast.from_dict)

    async def update(
        self, broadcast_id: str, update: UpdateBroadcastOptions
    ) -> BroadcastResponse:
        request = self._config.build("PATCH", f"/broadcasts/{_segment(broadcast_id)}").json(
            update.to_dict()
        )
        return await self._request(request, "update broadcast", BroadcastResponse.from_dict)

    async def list(self, list_opts: Optional[ListOptions] = None) -> ListResponse[Broadcast]:
        return await self._list("/broadcasts", list_opts, Broadcast.from_dict, "list broadcasts")

    async def delete(self, broadcast_id: str) -> bool:
        """Remove a draft broadcast. Returns whether it was deleted."""
        return await self._delete(f"/broadcasts/{_segment(broadcast_id)}", "delete broadcast")


class TemplatesService(_Service):
    """
    `Resend Templates API <https://resend.com/docs/api-reference/templates>`_.

    Templates can be addressed by id or by alias.
    """

    async def create(self, template: CreateTemplateOptions) -> TemplateResponse:
        request = self._config.build("POST", "/templates").json(template.to_dict())
        return await self._request(request, "create template", TemplateResponse.from_dict)

    async def get(self, id_or_alias: str) -> Template:
        request = self._config.build("GET", f"/templates/{_segment(id_or_alias)}")
        return await self._request(request, "get template", Template.from_dict)

    async def update(self, id_or_alias: str, update: UpdateTemplateOptions) -> TemplateResponse:
        request = self._config.build("PATCH", f"/templates/{_segment(id_or_alias)}").json(
            update.to_dict()
        )
        return await self._request(request, "update template", TemplateResponse.from_dict)

    async def publish(self, id_or_alias: str) -> TemplateResponse:
        """Publish a draft template so emails can be sent with it."""
        request = self._config.build("POST", f"/templates/{_segment(id_or_alias)}/publish")
        return await self._request(request, "publish template", TemplateResponse.from_dict)

    async def duplicate(self, id_or_alias: str) -> TemplateResponse:
        """Copy a template; the response carries the id of the copy."""
        request = self._config.build("POST", f"/templates/{_segment(id_or_alias)}/duplicate")
        return await self._request(request, "duplicate template", TemplateResponse.from_dict)

    async def list(self, list_opts: Optional[ListOptions] = None) -> ListResponse[Template]:
        return await self._list("/templates", list_opts, Template.from_dict, "list templates")

    async def delete(self, id_or_alias: str) -> DeleteTemplateResponse:
        request = self._config.build("DELETE", f"/templates/{_segment(id_or_alias)}")
        return await self._request(request, "delete template", DeleteTemplateResponse.from_dict)


class TopicsService(_Service):
    """`Resend Topics API <https://resend.com/docs/api-reference/topics>`_."""

    async def create(self, topic: CreateTopicOptions) -> TopicResponse:
        request = self._config.build("POST", "/topics").json(topic.to_dict())
        return await self._request(request, "create topic", TopicResponse.from_dict)

    async def get(self, topic_id: str) -> Topic:
        request = self._config.build("GET", f"/topics/{_segment(topic_id)}")
        return await self._request(request, "get topic", Topic.from_dict)

    async def update(self, topic_id: str, update: UpdateTopicOptions) -> TopicResponse:
        request = self._config.build("PATCH", f"/topics/{_segment(topic_id)}").json(
            update.to_dict()
        )
        return await self._request(request, "update topic", TopicResponse.from_dict)

    async def list(self, list_opts: Optional[ListOptions] = None) -> ListResponse[Topic]:
        return await self._list("/topics", list_opts, Topic.from_dict, "list topics")

    async def delete(self, topic_id: str) -> DeleteTopicResponse:
        request = self._config.build("DELETE", f"/topics/{_segment(topic_id)}")
        return await self._request(request, "delete topic", DeleteTopicResponse.from_dict)


class WebhooksService(_Service):
    """`Resend Webhooks API <https://resend.com/docs/api-reference/webhooks>`_."""

    async def create(self, webhook: CreateWebhookOptions) -> CreateWebhookResponse:
        """Register an endpoint. The signing secret is only returned here."""
        request = self._config.build("POST", "/webhooks").json(webhook.to_dict())
        return await self._request(request, "create webhook", CreateWebhookResponse.from_dict)

    async def get(self, webhook_id: str) -> Webhook:
        request = self._config.build("GET", f"/webhooks/{_segment(webhook_id)}")
        return await self._request(request, "get webhook", Webhook.from_dict)

    async def update(
        self, webhook_id: str, update: UpdateWebhookOptions
    ) -> UpdateWebhookResponse:
        request = self._config.build("PATCH", f"/webhooks/{_segment(webhook_id)}").json(
            update.to_dict()
        )
        return await self._request(request, "update webhook", UpdateWebhookResponse.from_dict)

    async def list(self, list_opts: Optional[ListOptions] = None) -> ListResponse[Webhook]:
        return await self._list("/webhooks", list_opts, Webhook.from_dict, "list webhooks")

    async def delete(self, webhook_id: str) -> bool:
        return await self._delete(f"/webhooks/{_segment(webhook_id)}", "delete webhook")


class ApiKeysService(_Service):
    """`Resend API Keys API <https://resend.com/docs/api-reference/api-keys>`_."""

    async def create(self, api_key: CreateApiKeyOptions) -> ApiKeyToken:
        """Create an API key. The token is only returned once."""
        request = self._config.build("POST", "/api-keys").json(api_key.to_dict())
        return await self._request(request, "create api key", ApiKeyToken.from_dict)

    async def list(self, list_opts: Optional[ListOptions] = None) -> ListResponse[ApiKey]:
        return await self._list("/api-keys", list_opts, ApiKey.from_dict, "list api keys")

    async def delete(self, api_key_id: str) -> None:
        """Remove an API key. The response body is ignored."""
        request = self._config.build("DELETE", f"/api-keys/{_segment(api_key_id)}")
        await self._config.send(request)
