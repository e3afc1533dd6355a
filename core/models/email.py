# =============================================================================
# core/models/email.py - Email Signup Schemas
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field


class EmailSignupRequest(BaseModel):
    """Early-access signup. Blank or missing email is rejected with a 400."""
    email: str | None = Field(
        default=None,
        max_length=320,
        examples=["jane@example.com"],
    )


class EmailSignupResponse(BaseModel):
    message: str
    data: dict[str, Any] | None = None
