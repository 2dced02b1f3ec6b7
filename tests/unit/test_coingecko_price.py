import httpx
import pytest

from wallet_tracker.providers.coingecko import CoingeckoProvider


@pytest.mark.asyncio
async def test_fetch_usd_price(fake_http):
    fake_http.outcomes.append((200, {"binancecoin": {"usd": 612.4}}))

    price = await CoingeckoProvider(api_key="").fetch_usd_price("binancecoin")

    assert price == 612.4
    request = fake_http.requests[0]
    assert request["url"] == "https://api.coingecko.com/api/v3/simple/price"
    assert request["params"] == {"ids": "binancecoin", "vs_currencies": "usd"}
    assert request["headers"] == {}


@pytest.mark.asyncio
async def test_demo_key_is_sent_as_header(fake_http):
    fake_http.outcomes.append((200, {"solana": {"usd": 150}}))

    price = await CoingeckoProvider(api_key="CG-demo").fetch_usd_price("solana")

    assert price == 150.0
    assert fake_http.requests[0]["headers"] == {"X-CG-Demo-API-Key": "CG-demo"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "outcome",
    [
        (200, {}),
        (200, {"ethereum": {}}),
        (200, {"ethereum": {"usd": "n/a"}}),
        (429, {"status": {"error_code": 429}}),
        httpx.ConnectError("dns failure"),
    ],
)
async def test_price_unavailable(fake_http, outcome):
    fake_http.outcomes.append(outcome)

    assert await CoingeckoProvider(api_key="").fetch_usd_price("ethereum") is None
    # One attempt only
    assert len(fake_http.requests) == 1
