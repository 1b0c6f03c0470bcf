"""Contact form handling.

Submissions are parsed and logged. Nothing is persisted or emailed.
"""

import json
from collections.abc import AsyncIterator

from fastapi import Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException
from starlette.types import Message

from portfolio.exceptions import ContactFormException
from portfolio.logging_config import get_logger, log_with_context
from portfolio.models import ContactSubmission

logger = get_logger(__name__)

FORM_MEDIA_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

SUCCESS_FRAGMENT = '<div class="contact-success"><p>Thanks for reaching out — I\'ll be in touch soon.</p></div>'


async def read_contact_form(request: Request, max_bytes: int) -> ContactSubmission:
    """Read and parse a contact form post.

    Both url-encoded and multipart bodies are accepted. Missing fields become
    empty strings, file parts are ignored and the first value of a repeated
    field wins. No validation of the values themselves is done.

    Args:
        request: Incoming request
        max_bytes: Largest accepted body

    Returns:
        The submitted name, email and message

    Raises:
        ContactFormException: If the body is too large or is not well-formed form data
    """
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type not in FORM_MEDIA_TYPES:
        raise ContactFormException(
            "Unsupported content type",
            details={"content_type": content_type or None},
        )

    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > max_bytes:
        raise ContactFormException(
            "Form body too large",
            details={"content_length": int(declared), "max_bytes": max_bytes},
        )

    body = await read_limited_body(request.stream(), max_bytes)
    buffered = Request(request.scope, _replay(body))

    try:
        async with buffered.form() as form:
            fields = {key: _first_text(form.getlist(key)) for key in ("name", "email", "message")}
    except (MultiPartException, StarletteHTTPException, ValueError) as e:
        raise ContactFormException(
            "Malformed form body",
            details={"error": getattr(e, "message", None) or getattr(e, "detail", None) or str(e)},
        ) from e

    return ContactSubmission(**fields)


async def read_limited_body(stream: AsyncIterator[bytes], max_bytes: int) -> bytes:
    """Collect a request body, giving up as soon as it exceeds max_bytes.

    Raises:
        ContactFormException: Once more than max_bytes have been received
    """
    body = bytearray()
    async for chunk in stream:
        body.extend(chunk)
        if len(body) > max_bytes:
            raise ContactFormException(
                "Form body too large",
                details={"received": len(body), "max_bytes": max_bytes},
            )
    return bytes(body)


def _replay(body: bytes):
    async def receive() -> Message:
        return {"type": "http.request", "body": body, "more_body": False}

    return receive


def _first_text(values: list) -> str:
    for value in values:
        if isinstance(value, str):
            return value
    return ""


def record_submission(submission: ContactSubmission) -> None:
    """Log a contact submission without its message content."""
    log_with_context(
        logger,
        "info",
        f"contact form submission: name={_quote(submission.name)} email={_quote(submission.email)} "
        f"message_len={submission.message_len}",
        contact_name=submission.name,
        contact_email=submission.email,
        message_len=submission.message_len,
        event_type="contact_submission",
    )


def _quote(value: str) -> str:
    """Double-quote a value with escapes so log lines stay on one line."""
    return json.dumps(value, ensure_ascii=False)
