"""Tests for contact form parsing and logging."""

import logging

import pytest
from fastapi import Request

from portfolio.exceptions import ContactFormException, ErrorCode
from portfolio.models import ContactSubmission
from portfolio.services.contact_service import read_contact_form, read_limited_body, record_submission

FORM = "application/x-www-form-urlencoded"
MAX_BYTES = 1024


def make_request(chunks: list[bytes], content_type: str = FORM, content_length: int | None = None) -> Request:
    """Build a POST request whose body arrives in the given chunks."""
    headers = [(b"content-type", content_type.encode("latin-1"))]
    if content_length is not None:
        headers.append((b"content-length", str(content_length).encode("ascii")))
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/contact",
        "query_string": b"",
        "headers": headers,
    }
    pending = list(chunks) or [b""]

    async def receive():
        chunk = pending.pop(0)
        return {"type": "http.request", "body": chunk, "more_body": bool(pending)}

    request = Request(scope, receive)
    request.state.pending = pending
    return request


async def parse(body: bytes, content_type: str = FORM, max_bytes: int = MAX_BYTES) -> ContactSubmission:
    return await read_contact_form(make_request([body], content_type), max_bytes)


def multipart_body(fields: list[tuple[str, str]], boundary: str = "formboundary") -> bytes:
    parts = [
        f'--{boundary}\r\nContent-Disposition: form-data; name="{name}"\r\n\r\n{value}\r\n'
        for name, value in fields
    ]
    return ("".join(parts) + f"--{boundary}--\r\n").encode("utf-8")


class TestReadContactForm:
    """Well-formed bodies."""

    @pytest.mark.asyncio
    async def test_all_fields(self):
        submission = await parse(b"name=Jane&email=jane@x.com&message=hi")

        assert submission == ContactSubmission(name="Jane", email="jane@x.com", message="hi")

    @pytest.mark.asyncio
    async def test_percent_and_plus_decoding(self):
        submission = await parse(b"name=Jane+Doe&email=jane%40x.com&message=caf%C3%A9+%26+cake")

        assert submission.name == "Jane Doe"
        assert submission.email == "jane@x.com"
        assert submission.message == "café & cake"

    @pytest.mark.asyncio
    async def test_missing_fields_are_empty(self):
        submission = await parse(b"name=Jane")

        assert submission.email == ""
        assert submission.message == ""

    @pytest.mark.asyncio
    async def test_empty_body(self):
        assert await parse(b"") == ContactSubmission()

    @pytest.mark.asyncio
    async def test_first_value_wins(self):
        assert (await parse(b"name=first&name=second")).name == "first"

    @pytest.mark.asyncio
    async def test_charset_parameter_is_ignored(self):
        submission = await parse(b"name=Jane", content_type="application/x-www-form-urlencoded; charset=UTF-8")

        assert submission.name == "Jane"

    @pytest.mark.asyncio
    async def test_multipart(self):
        body = multipart_body([("name", "Jane"), ("email", "jane@x.com"), ("message", "héllo")])

        submission = await parse(body, content_type="multipart/form-data; boundary=formboundary")

        assert submission == ContactSubmission(name="Jane", email="jane@x.com", message="héllo")

    @pytest.mark.asyncio
    async def test_body_split_across_chunks(self):
        request = make_request([b"name=Ja", b"ne&email=jane@x.com"])

        submission = await read_contact_form(request, MAX_BYTES)

        assert submission.name == "Jane"
        assert submission.email == "jane@x.com"


class TestReadContactFormRejects:
    """Bodies that are not form data or are too large."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content_type", ["application/json", "text/plain", ""])
    async def test_wrong_content_type(self, content_type):
        with pytest.raises(ContactFormException) as exc_info:
            await parse(b'{"name": "Jane"}', content_type=content_type)

        assert exc_info.value.status_code == 400
        assert exc_info.value.code == ErrorCode.CONTACT_FORM_INVALID

    @pytest.mark.asyncio
    async def test_multipart_without_boundary(self):
        with pytest.raises(ContactFormException):
            await parse(multipart_body([("name", "Jane")]), content_type="multipart/form-data")

    @pytest.mark.asyncio
    async def test_declared_length_too_large(self):
        request = make_request([b"message=hi"], content_length=10_000)

        with pytest.raises(ContactFormException) as exc_info:
            await read_contact_form(request, 32)

        assert exc_info.value.details == {"content_length": 10_000, "max_bytes": 32}
        # Rejected on the header alone, nothing was read
        assert request.state.pending == [b"message=hi"]

    @pytest.mark.asyncio
    async def test_streamed_body_too_large(self):
        chunks = [b"message="] + [b"a" * 16] * 100
        request = make_request(chunks)

        with pytest.raises(ContactFormException) as exc_info:
            await read_contact_form(request, 32)

        assert exc_info.value.details["max_bytes"] == 32
        # Reading stops at the chunk that crosses the limit
        assert len(request.state.pending) == 98


class TestReadLimitedBody:
    """Capped body reads."""

    @staticmethod
    async def stream(chunks):
        for chunk in chunks:
            yield chunk

    @pytest.mark.asyncio
    async def test_exactly_at_limit(self):
        assert await read_limited_body(self.stream([b"abcd", b"efgh"]), 8) == b"abcdefgh"

    @pytest.mark.asyncio
    async def test_over_limit(self):
        with pytest.raises(ContactFormException) as exc_info:
            await read_limited_body(self.stream([b"abcd", b"efghi"]), 8)

        assert exc_info.value.details == {"received": 9, "max_bytes": 8}


class TestRecordSubmission:
    """Submission log record."""

    def test_log_line(self, caplog):
        with caplog.at_level(logging.INFO, logger="portfolio.services.contact_service"):
            record_submission(ContactSubmission(name="Jane", email="jane@x.com", message="hi"))

        assert 'contact form submission: name="Jane" email="jane@x.com" message_len=2' in caplog.text

    def test_message_content_is_not_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="portfolio.services.contact_service"):
            record_submission(ContactSubmission(name="Jane", email="jane@x.com", message="private details"))

        assert "private details" not in caplog.text
        record = caplog.records[-1]
        assert record.message_len == len("private details")
        assert record.contact_name == "Jane"

    def test_quotes_are_escaped(self, caplog):
        with caplog.at_level(logging.INFO, logger="portfolio.services.contact_service"):
            record_submission(ContactSubmission(name='Jane "JD" Doe\nx', email="", message=""))

        assert r'name="Jane \"JD\" Doe\nx"' in caplog.text


def test_message_len_counts_utf8_bytes():
    assert ContactSubmission(message="é").message_len == 2
