"""Resend API client."""

import logging
import os
from typing import Any, Optional

import httpx

from .config import REDACTED_API_KEY, Config
from .errors import InvalidArgumentError
from .services import (
    ApiKeysService,
    AudiencesService,
    BatchService,
    BroadcastsService,
    ContactsService,
    DomainsService,
    EmailsService,
    ReceivingService,
    SegmentsService,
    TemplatesService,
    TopicsService,
    WebhooksService,
)

logger = logging.getLogger(__name__)

API_KEY_ENV = "RESEND_API_KEY"


class Resend:
    """
    Client for the Resend transactional email API.

        async with Resend("re_123456789") as resend:
            email = CreateEmailOptions("Acme <onboarding@resend.dev>", ["delivered@resend.dev"], "Hi")
            await resend.emails.send(email.with_text("Hello!"))

    All services share a single immutable :class:`Config` and HTTP client, so
    one instance can be used from many concurrent tasks.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the Resend client.

        Args:
            api_key: Resend API key (default: the ``RESEND_API_KEY`` environment variable)
            client: HTTP client to send requests with; closed by :meth:`aclose`
                only when created here

        Raises:
            InvalidArgumentError: If no API key is given or set in the environment,
                or ``RESEND_BASE_URL`` is not a valid URL
        """
        if api_key is None:
            api_key = os.environ.get(API_KEY_ENV)
        if not api_key:
            raise InvalidArgumentError(
                "api_key", f"pass an API key or set the {API_KEY_ENV} environment variable"
            )

        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()
        self.config = Config(api_key, self._client)
        logger.debug("resend: client created for %s", self.config.base_url)

        self.emails = EmailsService(self.config)
        self.batch = BatchService(self.config)
        self.receiving = ReceivingService(self.config)
        self.domains = DomainsService(self.config)
        self.audiences = AudiencesService(self.config)
        self.contacts = ContactsService(self.config)
        self.segments = SegmentsService(self.config)
        self.broadcasts = BroadcastsService(self.config)
        self.templates = TemplatesService(self.config)
        self.topics = TopicsService(self.config)
        self.webhooks = WebhooksService(self.config)
        self.api_keys = ApiKeysService(self.config)

    @property
    def base_url(self) -> str:
        return str(self.config.base_url)

    @property
    def user_agent(self) -> str:
        return self.config.user_agent

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Resend":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"Resend(api_key={REDACTED_API_KEY!r}, base_url={self.base_url!r})"
