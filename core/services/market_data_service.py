# =============================================================================
# core/services/market_data_service.py - Alpha Vantage Proxy
# =============================================================================
# Fetches market data from Alpha Vantage and reshapes it for the stock pages:
# - get_stock: quote + company overview + daily series, fetched concurrently
# - search_symbols: ticker search by keywords
# - get_top_movers: top gainers/losers, truncated
#
# Alpha Vantage answers HTTP 200 for almost everything; throttling shows up as
# a "Note" or "Information" key in the body and is mapped to a 429.
# =============================================================================

import asyncio
import logging
from typing import Any

import httpx

from app.exceptions import (
    ApiKeyNotConfiguredError,
    UpstreamDataNotFoundError,
    UpstreamRateLimitError,
    UpstreamServiceError,
)
from core.models.market import StockData, StockMover, TopMovers
from lib.utils import parse_number

logger = logging.getLogger(__name__)

# Request URLs carry the API key, so failures are logged by exception type only
PROVIDER = "alpha_vantage"
THROTTLE_KEYS = ("Note", "Information")


def _is_throttled(payload: dict[str, Any]) -> bool:
    return any(payload.get(key) for key in THROTTLE_KEYS)


def _to_mover(item: dict[str, Any], label: str) -> StockMover:
    """Reshape one Alpha Vantage top-movers row. The endpoint has no company names."""
    return StockMover(
        symbol=item.get("ticker", ""),
        name=label,
        change=parse_number(item.get("change_amount")),
        price=parse_number(item.get("price")),
        changes_percentage=parse_number(item.get("change_percentage")),
    )


class MarketDataService:
    """
    Async client for the Alpha Vantage query API.

    A fresh httpx.AsyncClient is opened per operation; `transport` lets tests
    substitute an httpx.MockTransport.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://www.alphavantage.co/query",
        timeout: float = 15.0,
        top_movers_limit: int = 5,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.top_movers_limit = top_movers_limit
        self._transport = transport

    # -------------------------------------------------------------------------
    # HTTP helpers
    # -------------------------------------------------------------------------

    def _require_api_key(self) -> str:
        if not self.api_key:
            raise ApiKeyNotConfiguredError("ALPHA_VANTAGE_API_KEY")
        return self.api_key

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def _query(self, client: httpx.AsyncClient, function: str, **params: str) -> dict[str, Any]:
        """
        Run one Alpha Vantage query and return the decoded JSON object.

        Raises:
            httpx.HTTPError: On network failure or a non-2xx status
            ValueError: If the body is not a JSON object
        """
        response = await client.get(
            self.base_url,
            params={"function": function, **params, "apikey": self.api_key},
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected {function} payload type: {type(payload).__name__}")
        return payload

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def get_stock(self, symbol: str) -> StockData:
        """
        Quote, company overview and daily time series for one symbol.

        The three requests run concurrently and are awaited together.

        Raises:
            ApiKeyNotConfiguredError: No API key (500)
            UpstreamRateLimitError: Any response reports throttling (429)
            UpstreamDataNotFoundError: Any of the three sections is missing (404)
            UpstreamServiceError: Network, status or JSON failure (500)
        """
        self._require_api_key()

        try:
            async with self._client() as client:
                quote_data, overview_data, series_data = await asyncio.gather(
                    self._query(client, "GLOBAL_QUOTE", symbol=symbol),
                    self._query(client, "OVERVIEW", symbol=symbol),
                    self._query(client, "TIME_SERIES_DAILY", symbol=symbol),
                )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Alpha Vantage stock fetch failed for {symbol}: {type(e).__name__}")
            raise UpstreamServiceError(
                PROVIDER,
                "An unexpected error occurred while fetching from Alpha Vantage.",
            ) from e

        if any(_is_throttled(payload) for payload in (quote_data, overview_data, series_data)):
            logger.warning(f"Alpha Vantage throttled stock request for {symbol}")
            raise UpstreamRateLimitError(
                PROVIDER,
                "API limit may have been reached, or the API key is invalid. Please try again later.",
            )

        quote = quote_data.get("Global Quote")
        if not quote:
            raise UpstreamDataNotFoundError(
                f"Could not find a valid stock quote for the symbol: {symbol}",
                details={"symbol": symbol},
            )

        if not overview_data.get("Symbol"):
            raise UpstreamDataNotFoundError(
                f"Could not find company overview data for the symbol: {symbol}",
                details={"symbol": symbol},
            )

        time_series = series_data.get("Time Series (Daily)")
        if not time_series:
            raise UpstreamDataNotFoundError(
                f"Could not find historical data for the symbol: {symbol}",
                details={"symbol": symbol},
            )

        return StockData(quote=quote, overview=overview_data, time_series=time_series)

    async def search_symbols(self, keywords: str) -> list[dict[str, Any]]:
        """
        Ticker search. Returns the provider's bestMatches list unchanged.

        Raises:
            ApiKeyNotConfiguredError, UpstreamRateLimitError,
            UpstreamDataNotFoundError (no matches), UpstreamServiceError
        """
        self._require_api_key()

        try:
            async with self._client() as client:
                data = await self._query(client, "SYMBOL_SEARCH", keywords=keywords)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Alpha Vantage search failed for {keywords!r}: {type(e).__name__}")
            raise UpstreamServiceError(
                PROVIDER,
                "Failed to fetch search results from Alpha Vantage.",
            ) from e

        if _is_throttled(data):
            raise UpstreamRateLimitError(PROVIDER)

        matches = data.get("bestMatches") or []
        if not matches:
            raise UpstreamDataNotFoundError(
                f'No matching symbols found for "{keywords}".',
                details={"keywords": keywords},
            )
        return matches

    async def get_top_movers(self) -> TopMovers:
        """
        Top gainers and losers of the day, at most `top_movers_limit` each.

        Every failure, including throttling, is reported as a 500.
        """
        self._require_api_key()

        try:
            async with self._client() as client:
                data = await self._query(client, "TOP_GAINERS_LOSERS")

            if _is_throttled(data) or data.get("Error Message"):
                raise ValueError(
                    data.get("Note") or data.get("Information") or data.get("Error Message")
                )

            gainers = [_to_mover(item, "Top Gainer") for item in data["top_gainers"][: self.top_movers_limit]]
            losers = [_to_mover(item, "Top Loser") for item in data["top_losers"][: self.top_movers_limit]]
        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"Alpha Vantage top movers fetch failed: {type(e).__name__}")
            raise UpstreamServiceError(
                PROVIDER,
                "Failed to fetch top movers data.",
            ) from e

        return TopMovers(top_gainers=gainers, top_losers=losers)
