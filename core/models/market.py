# =============================================================================
# core/models/market.py - Market Data Schemas
# =============================================================================
# Response envelopes for the stock proxy endpoints. Wire names stay camelCase
# (timeSeries, topGainers, changesPercentage) because the stock research
# pages read them directly; Python code uses the snake_case attributes.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StockData(BaseModel):
    """
    Combined quote, company overview and daily history for one symbol.

    The three sections are passed through from the provider unchanged.
    """
    model_config = ConfigDict(populate_by_name=True)

    quote: dict[str, Any]
    overview: dict[str, Any]
    time_series: dict[str, Any] = Field(..., alias="timeSeries")


class StockMover(BaseModel):
    """A single top gainer or loser."""
    model_config = ConfigDict(populate_by_name=True)

    symbol: str
    name: str
    change: float
    price: float
    changes_percentage: float = Field(..., alias="changesPercentage")


class TopMovers(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    top_gainers: list[StockMover] = Field(default_factory=list, alias="topGainers")
    top_losers: list[StockMover] = Field(default_factory=list, alias="topLosers")
