# =============================================================================
# app/routers/email.py - Early Access Signup Endpoint
# =============================================================================
# POST /api/send-email {"email": "..."} sends the welcome email via Resend.
# =============================================================================

import logging

from fastapi import APIRouter

from app.dependencies import EmailDep
from app.exceptions import MissingParameterError
from core.models.email import EmailSignupRequest, EmailSignupResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/send-email", response_model=EmailSignupResponse)
async def send_email(service: EmailDep, request: EmailSignupRequest | None = None):
    """
    Sign an address up for early access and send the welcome email.

    Returns 400 without an email, 500 when the provider rejects the send.
    """
    email = (request.email if request else None) or ""
    email = email.strip()
    if not email:
        raise MissingParameterError("email", "Email is required")

    data = await service.send_welcome_email(email)
    return EmailSignupResponse(message="Email sent successfully!", data=data)
