# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides common fixtures for testing
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ALPHA_VANTAGE_API_KEY", "test-alpha-vantage-key")
os.environ.setdefault("RESEND_API_KEY", "test-resend-key")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def global_quote_payload():
    """Alpha Vantage GLOBAL_QUOTE response."""
    return {
        "Global Quote": {
            "01. symbol": "AAPL",
            "05. price": "189.9800",
            "09. change": "1.2300",
            "10. change percent": "0.6516%",
        }
    }


@pytest.fixture
def overview_payload():
    """Alpha Vantage OVERVIEW response (trimmed)."""
    return {
        "Symbol": "AAPL",
        "Name": "Apple Inc",
        "Sector": "TECHNOLOGY",
        "MarketCapitalization": "2950000000000",
    }


@pytest.fixture
def daily_series_payload():
    """Alpha Vantage TIME_SERIES_DAILY response with two days."""
    return {
        "Meta Data": {"2. Symbol": "AAPL"},
        "Time Series (Daily)": {
            "2024-05-02": {"1. open": "172.51", "4. close": "173.03"},
            "2024-05-01": {"1. open": "169.58", "4. close": "169.30"},
        },
    }


@pytest.fixture
def top_movers_payload():
    """Alpha Vantage TOP_GAINERS_LOSERS response with more rows than the limit."""
    def row(ticker, price, change, pct):
        return {
            "ticker": ticker,
            "price": price,
            "change_amount": change,
            "change_percentage": pct,
            "volume": "1000",
        }

    return {
        "metadata": "Top gainers, losers, and most actively traded US tickers",
        "top_gainers": [row(f"G{i}", "10.5", "2.5", f"{30 + i}.5%") for i in range(7)],
        "top_losers": [row(f"L{i}", "3.2", "-1.1", f"-{20 + i}.25%") for i in range(7)],
        "most_actively_traded": [],
    }


@pytest.fixture
def sample_chat_history():
    """Client-held chat history in the widget's parts format."""
    return [
        {"role": "user", "parts": [{"text": "Hi"}]},
        {"role": "model", "parts": [{"text": "Hello! How can I help with your finances?"}]},
        {"role": "user", "parts": [{"text": "What is an emergency fund?"}]},
        {"role": "model", "parts": [{"text": "Savings set aside for unexpected expenses."}]},
    ]
