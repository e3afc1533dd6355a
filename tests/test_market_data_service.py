# =============================================================================
# tests/test_market_data_service.py - Alpha Vantage Proxy Tests
# =============================================================================
# The service talks to an httpx.MockTransport that answers by the
# "function" query parameter, so no network access is needed.
#
# Run with: pytest tests/test_market_data_service.py -v
# =============================================================================

import asyncio

import httpx
import pytest

from app.exceptions import (
    ApiKeyNotConfiguredError,
    UpstreamDataNotFoundError,
    UpstreamRateLimitError,
    UpstreamServiceError,
)
from core.services.market_data_service import MarketDataService

THROTTLE_NOTE = {
    "Note": "Thank you for using Alpha Vantage! Our standard API call frequency is 5 calls per minute."
}


def make_service(responses, api_key="test-key", calls=None, **kwargs):
    """
    Build a MarketDataService whose transport answers from `responses`.

    `responses` maps an Alpha Vantage function name to a JSON payload, an
    int status code or an exception to raise.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        function = request.url.params["function"]
        if calls is not None:
            calls.append(request)
        answer = responses[function]
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, int):
            return httpx.Response(answer, json={})
        return httpx.Response(200, json=answer)

    return MarketDataService(
        api_key=api_key,
        base_url="https://av.test/query",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


# =============================================================================
# get_stock
# =============================================================================

class TestGetStock:

    @pytest.fixture
    def responses(self, global_quote_payload, overview_payload, daily_series_payload):
        return {
            "GLOBAL_QUOTE": global_quote_payload,
            "OVERVIEW": overview_payload,
            "TIME_SERIES_DAILY": daily_series_payload,
        }

    def test_combines_three_sections(self, responses):
        calls = []
        service = make_service(responses, calls=calls)

        data = asyncio.run(service.get_stock("AAPL"))

        assert data.quote["05. price"] == "189.9800"
        assert data.overview["Name"] == "Apple Inc"
        assert list(data.time_series) == ["2024-05-02", "2024-05-01"]

        assert sorted(r.url.params["function"] for r in calls) == [
            "GLOBAL_QUOTE", "OVERVIEW", "TIME_SERIES_DAILY",
        ]
        assert all(r.url.params["symbol"] == "AAPL" for r in calls)
        assert all(r.url.params["apikey"] == "test-key" for r in calls)

    def test_serializes_camel_case_envelope(self, responses):
        data = asyncio.run(make_service(responses).get_stock("AAPL"))
        assert set(data.model_dump(by_alias=True)) == {"quote", "overview", "timeSeries"}

    def test_missing_quote_is_not_found(self, responses):
        responses["GLOBAL_QUOTE"] = {"Global Quote": {}}

        with pytest.raises(UpstreamDataNotFoundError) as exc_info:
            asyncio.run(make_service(responses).get_stock("ZZZZ"))

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Could not find a valid stock quote for the symbol: ZZZZ"

    def test_missing_overview_is_not_found(self, responses):
        responses["OVERVIEW"] = {}

        with pytest.raises(UpstreamDataNotFoundError) as exc_info:
            asyncio.run(make_service(responses).get_stock("AAPL"))
        assert "company overview" in exc_info.value.message

    def test_missing_history_is_not_found(self, responses):
        responses["TIME_SERIES_DAILY"] = {"Error Message": "Invalid API call."}

        with pytest.raises(UpstreamDataNotFoundError) as exc_info:
            asyncio.run(make_service(responses).get_stock("AAPL"))
        assert "historical data" in exc_info.value.message

    def test_throttling_is_rate_limited(self, responses):
        responses["OVERVIEW"] = THROTTLE_NOTE

        with pytest.raises(UpstreamRateLimitError) as exc_info:
            asyncio.run(make_service(responses).get_stock("AAPL"))
        assert exc_info.value.status_code == 429

    def test_http_error_is_upstream_error(self, responses):
        responses["TIME_SERIES_DAILY"] = 503

        with pytest.raises(UpstreamServiceError) as exc_info:
            asyncio.run(make_service(responses).get_stock("AAPL"))

        assert exc_info.value.status_code == 500
        assert "test-key" not in str(exc_info.value.to_dict())

    def test_network_error_is_upstream_error(self, responses):
        responses["GLOBAL_QUOTE"] = httpx.ConnectError("connection refused")

        with pytest.raises(UpstreamServiceError):
            asyncio.run(make_service(responses).get_stock("AAPL"))

    def test_missing_api_key(self, responses):
        with pytest.raises(ApiKeyNotConfiguredError) as exc_info:
            asyncio.run(make_service(responses, api_key=None).get_stock("AAPL"))

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "API key is not configured on the server."


# =============================================================================
# search_symbols
# =============================================================================

class TestSearchSymbols:

    def test_returns_best_matches(self):
        matches = [
            {"1. symbol": "TSLA", "2. name": "Tesla Inc"},
            {"1. symbol": "TSLA34.SAO", "2. name": "Tesla Inc"},
        ]
        calls = []
        service = make_service({"SYMBOL_SEARCH": {"bestMatches": matches}}, calls=calls)

        assert asyncio.run(service.search_symbols("tesla")) == matches
        assert calls[0].url.params["keywords"] == "tesla"

    def test_no_matches_is_not_found(self):
        service = make_service({"SYMBOL_SEARCH": {"bestMatches": []}})

        with pytest.raises(UpstreamDataNotFoundError) as exc_info:
            asyncio.run(service.search_symbols("qwertyuiop"))
        assert exc_info.value.message == 'No matching symbols found for "qwertyuiop".'

    def test_throttling(self):
        service = make_service({"SYMBOL_SEARCH": {"Information": "Daily limit reached"}})

        with pytest.raises(UpstreamRateLimitError):
            asyncio.run(service.search_symbols("apple"))

    def test_non_object_payload(self):
        service = make_service({"SYMBOL_SEARCH": ["unexpected"]})

        with pytest.raises(UpstreamServiceError):
            asyncio.run(service.search_symbols("apple"))


# =============================================================================
# get_top_movers
# =============================================================================

class TestTopMovers:

    def test_truncates_and_reshapes(self, top_movers_payload):
        service = make_service({"TOP_GAINERS_LOSERS": top_movers_payload})

        movers = asyncio.run(service.get_top_movers())

        assert len(movers.top_gainers) == 5
        assert len(movers.top_losers) == 5

        gainer = movers.top_gainers[0]
        assert gainer.symbol == "G0"
        assert gainer.name == "Top Gainer"
        assert gainer.price == 10.5
        assert gainer.change == 2.5
        assert gainer.changes_percentage == 30.5

        loser = movers.top_losers[1]
        assert loser.name == "Top Loser"
        assert loser.change == -1.1
        assert loser.changes_percentage == -21.25

    def test_configurable_limit(self, top_movers_payload):
        service = make_service({"TOP_GAINERS_LOSERS": top_movers_payload}, top_movers_limit=2)
        movers = asyncio.run(service.get_top_movers())
        assert [m.symbol for m in movers.top_gainers] == ["G0", "G1"]

    def test_wire_names(self, top_movers_payload):
        service = make_service({"TOP_GAINERS_LOSERS": top_movers_payload})
        payload = asyncio.run(service.get_top_movers()).model_dump(by_alias=True)

        assert set(payload) == {"topGainers", "topLosers"}
        assert "changesPercentage" in payload["topGainers"][0]

    @pytest.mark.parametrize(
        "answer",
        [
            THROTTLE_NOTE,
            {"Error Message": "Invalid API call"},
            {"metadata": "missing lists"},
            500,
        ],
    )
    def test_every_failure_is_a_server_error(self, answer):
        service = make_service({"TOP_GAINERS_LOSERS": answer})

        with pytest.raises(UpstreamServiceError) as exc_info:
            asyncio.run(service.get_top_movers())

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Failed to fetch top movers data."
