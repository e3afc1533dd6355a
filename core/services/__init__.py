# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .chat_service import ChatService
from .email_service import EmailService
from .market_data_service import MarketDataService

__all__ = [
    "ChatService",
    "EmailService",
    "MarketDataService",
]
