import httpx
import pytest
import respx

from src.infrastructure.market_data.finnhub_adapter import FinnhubMarketDataProvider

BASE_URL = "https://finnhub.test/api/v1"


@pytest.fixture
def provider():
    with httpx.Client() as http:
        yield FinnhubMarketDataProvider(token="secret", base_url=BASE_URL, client=http)


@respx.mock
def test_company_profile_maps_payload_and_sends_token(provider):
    route = respx.get(f"{BASE_URL}/stock/profile2").mock(
        return_value=httpx.Response(
            200,
            json={
                "ticker": "MSFT",
                "name": "Microsoft Corp",
                "exchange": "NASDAQ NMS - GLOBAL MARKET",
                "currency": "USD",
                "country": "US",
                "finnhubIndustry": "Technology",
                "weburl": "https://www.microsoft.com/",
            },
        )
    )

    profile = provider.get_company_profile("MSFT")

    assert route.called
    request = route.calls.last.request
    assert request.url.params["symbol"] == "MSFT"
    assert request.url.params["token"] == "secret"
    assert profile.ticker == "MSFT"
    assert profile.name == "Microsoft Corp"
    assert profile.industry == "Technology"
    assert profile.web_url == "https://www.microsoft.com/"


@respx.mock
def test_price_quote_maps_short_keys(provider):
    respx.get(f"{BASE_URL}/quote").mock(
        return_value=httpx.Response(
            200,
            json={"c": 412.5, "d": 2.5, "dp": 0.61, "h": 415, "l": 408.1, "o": 410, "pc": 410, "t": 1710500000},
        )
    )

    quote = provider.get_price_quote("MSFT")

    assert quote.current_price == 412.5
    assert quote.change == 2.5
    assert quote.high == 415.0
    assert quote.previous_close == 410.0


@respx.mock
def test_unknown_symbol_profile_is_none(provider):
    respx.get(f"{BASE_URL}/stock/profile2").mock(return_value=httpx.Response(200, json={}))
    assert provider.get_company_profile("ZZZZ") is None


@respx.mock
def test_unknown_symbol_quote_is_none(provider):
    respx.get(f"{BASE_URL}/quote").mock(
        return_value=httpx.Response(
            200, json={"c": 0, "d": None, "dp": None, "h": 0, "l": 0, "o": 0, "pc": 0, "t": 0}
        )
    )
    assert provider.get_price_quote("ZZZZ") is None


@pytest.mark.parametrize("status", [401, 429, 500])
def test_http_errors_return_none(provider, respx_mock, status):
    respx_mock.get(f"{BASE_URL}/quote").mock(
        return_value=httpx.Response(status, json={"error": "nope"})
    )
    assert provider.get_price_quote("MSFT") is None


@respx.mock
def test_network_failure_returns_none(provider):
    respx.get(f"{BASE_URL}/stock/profile2").mock(side_effect=httpx.ConnectError("down"))
    assert provider.get_company_profile("MSFT") is None


@respx.mock
def test_malformed_payloads_return_none(provider):
    respx.get(f"{BASE_URL}/stock/profile2").mock(
        return_value=httpx.Response(200, text="<html>maintenance</html>")
    )
    respx.get(f"{BASE_URL}/quote").mock(return_value=httpx.Response(200, json=[1, 2, 3]))

    assert provider.get_company_profile("MSFT") is None
    assert provider.get_price_quote("MSFT") is None


@respx.mock
def test_error_field_in_body_returns_none(provider):
    respx.get(f"{BASE_URL}/quote").mock(
        return_value=httpx.Response(200, json={"error": "Invalid API key."})
    )
    assert provider.get_price_quote("MSFT") is None


def test_base_url_trailing_slash_is_ignored():
    with respx.mock:
        route = respx.get(f"{BASE_URL}/quote").mock(
            return_value=httpx.Response(200, json={"c": 1.5})
        )
        provider = FinnhubMarketDataProvider(token="t", base_url=f"{BASE_URL}/")
        try:
            assert provider.get_price_quote("X").current_price == 1.5
        finally:
            provider.close()
        assert route.called
