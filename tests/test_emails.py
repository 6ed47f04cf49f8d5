"""Tests for sending emails and batches."""

import base64
import json

import pytest
from pytest_httpx import HTTPXMock

from resend_sdk import (
    Attachment,
    BatchValidation,
    CreateEmailOptions,
    EmailTemplate,
    InvalidArgumentError,
    Resend,
    Tag,
    UpdateEmailOptions,
    with_idempotency_key,
)
from resend_sdk.types import MAX_ATTACHMENTS_BYTES

FROM = "Acme <onboarding@resend.dev>"


def make_email(*to: str) -> CreateEmailOptions:
    return CreateEmailOptions(FROM, list(to) or ["delivered@resend.dev"], "hello world")


class TestCreateEmailOptions:
    def test_required_fields_only(self) -> None:
        assert make_email().to_dict() == {
            "from": FROM,
            "to": ["delivered@resend.dev"],
            "subject": "hello world",
        }

    def test_optional_fields(self) -> None:
        email = (
            make_email()
            .with_html("<p>hi</p>")
            .with_text("hi")
            .with_cc("cc@example.com")
            .with_bcc("bcc@example.com")
            .with_reply_to("a@example.com")
            .with_reply_to("b@example.com")
            .with_header("X-Entity-Ref-ID", "123")
            .with_tag(Tag("category", "confirm_email"))
            .with_scheduled_at("in 1 min")
            .with_template(EmailTemplate("tmpl_1").with_variables({"NAME": "Ada"}))
        )

        body = email.to_dict()

        assert body["html"] == "<p>hi</p>"
        assert body["text"] == "hi"
        assert body["cc"] == ["cc@example.com"]
        assert body["bcc"] == ["bcc@example.com"]
        assert body["reply_to"] == ["a@example.com", "b@example.com"]
        assert body["headers"] == {"X-Entity-Ref-ID": "123"}
        assert body["tags"] == [{"name": "category", "value": "confirm_email"}]
        assert body["scheduled_at"] == "in 1 min"
        assert body["template"] == {"id": "tmpl_1", "variables": {"NAME": "Ada"}}

    def test_attachments(self) -> None:
        email = (
            make_email()
            .with_attachment(Attachment.from_content(b"hello").with_filename("hello.txt"))
            .with_attachment(
                Attachment.from_path("https://resend.com/static/logo.png")
                .with_content_id("logo")
                .with_content_type("image/png")
            )
        )

        attachments = email.to_dict()["attachments"]

        assert attachments[0] == {
            "content": base64.b64encode(b"hello").decode(),
            "filename": "hello.txt",
        }
        assert attachments[1] == {
            "path": "https://resend.com/static/logo.png",
            "content_type": "image/png",
            "content_id": "logo",
        }

    def test_attachment_needs_one_source(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Attachment()

    def test_no_recipients(self) -> None:
        email = CreateEmailOptions(FROM, [], "hello")

        with pytest.raises(InvalidArgumentError) as exc_info:
            email.validate()

        assert exc_info.value.field == "to"

    def test_too_many_recipients(self) -> None:
        email = make_email(*[f"user{i}@example.com" for i in range(51)])

        with pytest.raises(InvalidArgumentError):
            email.validate()

    def test_fifty_recipients_allowed(self) -> None:
        make_email(*[f"user{i}@example.com" for i in range(50)]).validate()

    def test_attachments_too_large(self) -> None:
        email = make_email().with_attachment(
            Attachment.from_content(b"\0" * (MAX_ATTACHMENTS_BYTES + 1))
        )

        with pytest.raises(InvalidArgumentError) as exc_info:
            email.validate()

        assert exc_info.value.field == "attachments"

    @pytest.mark.parametrize("tag", [Tag("has space"), Tag("ok", "bad!value"), Tag("x" * 257)])
    def test_invalid_tags(self, tag: Tag) -> None:
        with pytest.raises(InvalidArgumentError):
            make_email().with_tag(tag).validate()


class TestEmails:
    @pytest.fixture
    def client(self) -> Resend:
        return Resend("re_test_key")

    @pytest.mark.asyncio
    async def test_send(self, client: Resend, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(json={"id": "49a3999c-0ce1-4ea6-ab68-afcd6dc2e794"})

        response = await client.emails.send(make_email().with_text("Hello"))

        request = httpx_mock.get_request()
        assert request is not None
        assert request.method == "POST"
        assert str(request.url) == "https://api.resend.com/emails"
        assert request.headers["Authorization"] == "Bearer re_test_key"
        assert "Idempotency-Key" not in request.headers
        assert json.loads(request.content)["text"] == "Hello"
        assert response.id == "49a3999c-0ce1-4ea6-ab68-afcd6dc2e794"

    @pytest.mark.asyncio
    async def test_send_with_idempotency_key(
        self, client: Resend, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(json={"id": "49a3999c"})

        await client.emails.send(make_email().with_idempotency_key("welcome-user/123"))

        request = httpx_mock.get_request()
        assert request is not None
        assert request.headers["Idempotency-Key"] == "welcome-user/123"
        assert "idempotency_key" not in json.loads(request.content)

    @pytest.mark.asyncio
    async def test_send_invalid_email_sends_nothing(self, client: Resend) -> None:
        with pytest.raises(InvalidArgumentError):
            await client.emails.send(CreateEmailOptions(FROM, [], "hello"))

    @pytest.mark.asyncio
    async def test_get(self, client: Resend, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            json={
                "object": "email",
                "id": "4ef9a417-02e9-4d39-ad75-9611e0fcc33c",
                "to": ["delivered@resend.dev"],
                "from": FROM,
                "created_at": "2023-04-03T22:13:42.674981+00:00",
                "subject": "Hello World",
                "html": "Congrats on sending your <strong>first email</strong>!",
                "text": None,
                "bcc": None,
                "cc": None,
                "reply_to": None,
                "last_event": "delivered",
            }
        )

        email = await client.emails.get("4ef9a417-02e9-4d39-ad75-9611e0fcc33c")

        request = httpx_mock.get_request()
        assert request is not None
        assert request.method == "GET"
        assert request.url.path == "/emails/4ef9a417-02e9-4d39-ad75-9611e0fcc33c"
        assert email.from_ == FROM
        assert email.bcc == []
        assert email.cc == []
        assert email.last_event == "delivered"

    @pytest.mark.asyncio
    async def test_update_and_cancel(self, client: Resend, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(method="PATCH", json={"object": "email", "id": "em_1"})
        httpx_mock.add_response(method="POST", json={"object": "email", "id": "em_1"})

        updated = await client.emails.update(
            "em_1", UpdateEmailOptions().with_scheduled_at("2024-08-05T11:52:01.858Z")
        )
        cancelled = await client.emails.cancel("em_1")

        patch, post = httpx_mock.get_requests()
        assert patch.url.path == "/emails/em_1"
        assert json.loads(patch.content) == {"scheduled_at": "2024-08-05T11:52:01.858Z"}
        assert post.url.path == "/emails/em_1/cancel"
        assert updated.id == cancelled.id == "em_1"

    @pytest.mark.asyncio
    async def test_path_parameter_is_encoded(
        self, client: Resend, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(method="POST", json={"object": "email", "id": "a/b"})

        await client.emails.cancel("a/b")

        request = httpx_mock.get_request()
        assert request is not None
        assert request.url.raw_path == b"/emails/a%2Fb/cancel"


class TestBatch:
    @pytest.fixture
    def client(self) -> Resend:
        return Resend("re_test_key")

    @pytest.mark.asyncio
    async def test_send_with_idempotency_key(
        self, client: Resend, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(json={"data": [{"id": "ae2014de"}, {"id": "faccb7a5"}]})

        emails = with_idempotency_key(
            [make_email("foo@gmail.com"), make_email("bar@outlook.com")], "k-1"
        )
        sent = await client.batch.send(emails)

        request = httpx_mock.get_request()
        assert request is not None
        assert request.url.path == "/emails/batch"
        assert request.headers["Idempotency-Key"] == "k-1"
        assert "x-batch-validation" not in request.headers
        body = json.loads(request.content)
        assert isinstance(body, list)
        assert len(body) == 2
        assert all("idempotency_key" not in item for item in body)
        assert [r.id for r in sent] == ["ae2014de", "faccb7a5"]

    @pytest.mark.asyncio
    async def test_permissive_validation(self, client: Resend, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            json={
                "data": [{"id": "ae2014de"}],
                "errors": [{"index": 1, "message": "The `to` field is missing."}],
            }
        )

        response = await client.batch.send_with_batch_validation(
            [make_email(), make_email()], BatchValidation.PERMISSIVE
        )

        request = httpx_mock.get_request()
        assert request is not None
        assert request.headers["x-batch-validation"] == "permissive"
        assert "Idempotency-Key" not in request.headers
        assert len(response.data) == 1
        assert response.errors[0].index == 1

    @pytest.mark.asyncio
    async def test_strict_without_errors(self, client: Resend, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(json={"data": [{"id": "ae2014de"}]})

        response = await client.batch.send_with_batch_validation(
            [make_email()], BatchValidation.STRICT
        )

        request = httpx_mock.get_request()
        assert request is not None
        assert request.headers["x-batch-validation"] == "strict"
        assert response.errors == []
