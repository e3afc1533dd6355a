# =============================================================================
# core/services/email_service.py - Early Access Email (Resend)
# =============================================================================
# Sends the early-access welcome email through the Resend REST API:
#   POST {RESEND_BASE_URL}/emails  (Bearer auth)
# =============================================================================

import logging
from typing import Any

import httpx

from app.exceptions import (
    ApiKeyNotConfiguredError,
    EmailDeliveryError,
    UpstreamServiceError,
)

logger = logging.getLogger(__name__)

WELCOME_HTML = """
<h1>Welcome!</h1>
<p>Thank you for signing up for early access to FinnaCalc Premium. We'll be in touch soon with more details.</p>
<p>Best,</p>
<p>The FinnaCalc Team</p>
"""


class EmailService:
    """
    Thin async wrapper around the Resend send-email endpoint.

    `transport` lets tests substitute an httpx.MockTransport.
    """

    def __init__(
        self,
        api_key: str | None,
        sender: str,
        subject: str,
        base_url: str = "https://api.resend.com",
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.sender = sender
        self.subject = subject
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def send_welcome_email(self, email: str) -> dict[str, Any]:
        """
        Send the early-access welcome email to one address.

        Args:
            email: Recipient address

        Returns:
            Resend's response body (contains the message id)

        Raises:
            ApiKeyNotConfiguredError: RESEND_API_KEY is not set
            EmailDeliveryError: Resend rejected the request (message passed through)
            UpstreamServiceError: Network failure or unreadable response
        """
        if not self.api_key:
            raise ApiKeyNotConfiguredError("RESEND_API_KEY")

        payload = {
            "from": self.sender,
            "to": [email],
            "subject": self.subject,
            "html": WELCOME_HTML,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    f"{self.base_url}/emails",
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Resend request failed: {e}")
            raise UpstreamServiceError("resend", "Something went wrong") from e

        if response.is_error:
            message = body.get("message") if isinstance(body, dict) else None
            logger.warning(f"Resend rejected welcome email ({response.status_code}): {message}")
            raise EmailDeliveryError(message or "Failed to send email")

        logger.info("Sent early-access welcome email")
        return body if isinstance(body, dict) else {}
