# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for the upstream provider services.
# These are injected into route handlers using Depends(); tests replace them
# through app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import settings
from core.services.chat_service import ChatService
from core.services.email_service import EmailService
from core.services.market_data_service import MarketDataService


def get_market_data_service() -> MarketDataService:
    """Alpha Vantage client configured from settings."""
    return MarketDataService(
        api_key=settings.ALPHA_VANTAGE_API_KEY,
        base_url=settings.ALPHA_VANTAGE_BASE_URL,
        timeout=settings.MARKET_DATA_TIMEOUT_SECONDS,
        top_movers_limit=settings.TOP_MOVERS_LIMIT,
    )


def get_email_service() -> EmailService:
    """Resend client configured from settings."""
    return EmailService(
        api_key=settings.RESEND_API_KEY,
        sender=settings.EMAIL_FROM,
        subject=settings.EMAIL_SUBJECT,
        base_url=settings.RESEND_BASE_URL,
    )


def get_chat_service() -> ChatService:
    """FinnaBot chat service; the OpenAI client is created on first use."""
    return ChatService()


# Type aliases for dependency injection
MarketDataDep = Annotated[MarketDataService, Depends(get_market_data_service)]
EmailDep = Annotated[EmailService, Depends(get_email_service)]
ChatDep = Annotated[ChatService, Depends(get_chat_service)]
