"""Contact form endpoint."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from portfolio.config import Settings
from portfolio.dependencies import get_app_settings
from portfolio.services import contact_service

router = APIRouter()


@router.post("/contact", response_class=HTMLResponse)
async def contact(request: Request, settings: Settings = Depends(get_app_settings)):
    """Accept a contact form post and answer with a success fragment.

    The submission is only logged. A body that is not form data, or is
    larger than the configured limit, is answered with 400.
    """
    submission = await contact_service.read_contact_form(request, settings.contact_max_body_bytes)
    contact_service.record_submission(submission)
    return HTMLResponse(contact_service.SUCCESS_FRAGMENT)
