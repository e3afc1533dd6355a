# =============================================================================
# app/routers/market.py - Stock Data Proxy Endpoints
# =============================================================================
# Pass-through endpoints for the stock research pages:
# - GET /api/stock?symbol=...       quote + overview + daily history
# - GET /api/stock-search?keywords= symbol search
# - GET /api/top-movers             top gainers and losers
#
# Status codes: 400 missing input, 404 no data, 429 provider throttling,
# 500 missing API key or upstream failure.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Query

from app.dependencies import MarketDataDep
from app.exceptions import MissingParameterError
from core.models.market import StockData, TopMovers

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stock", response_model=StockData)
async def get_stock(
    service: MarketDataDep,
    symbol: Annotated[str | None, Query(description="Ticker symbol, e.g. AAPL")] = None,
):
    """
    Combined quote, company overview and daily time series for a symbol.

    Response envelope: {"quote": {...}, "overview": {...}, "timeSeries": {...}}
    """
    symbol = (symbol or "").strip()
    if not symbol:
        raise MissingParameterError("symbol", "Symbol is required")

    logger.info(f"Fetching stock data for {symbol}")
    return await service.get_stock(symbol)


@router.get("/stock-search", response_model=list[dict[str, Any]])
async def search_stocks(
    service: MarketDataDep,
    keywords: Annotated[str | None, Query(description="Company name or ticker fragment")] = None,
):
    """Symbol search. Returns the provider's list of best matches."""
    keywords = (keywords or "").strip()
    if not keywords:
        raise MissingParameterError("keywords", "Search keywords are required")

    return await service.search_symbols(keywords)


@router.get("/top-movers", response_model=TopMovers)
async def get_top_movers(service: MarketDataDep):
    """
    Today's top gainers and losers, five of each by default.

    Response envelope: {"topGainers": [...], "topLosers": [...]}
    """
    return await service.get_top_movers()
