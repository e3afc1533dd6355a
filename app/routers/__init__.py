# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - calculators.py: Financial calculator endpoints
# - market.py: Stock quote, search and top movers proxy
# - email.py: Early access signup email
# - chat.py: FinnaBot chat widget
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import calculators
from . import market
from . import email
from . import chat

__all__ = [
    "health",
    "calculators",
    "market",
    "email",
    "chat",
]
