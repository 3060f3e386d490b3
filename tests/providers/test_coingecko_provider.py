"""Tests for the Coingecko price provider."""

import httpx
import pytest

from relayfee.providers.coingecko import CoingeckoProvider


def make_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_get_quote_returns_value():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        seen["key"] = request.headers.get("X-CG-Demo-API-Key")
        return httpx.Response(200, json={"usd-coin": {"usd": 0.9998}})

    async with make_client(handler) as client:
        provider = CoingeckoProvider(
            api_key="demo-key",
            base_url="https://cg.test/api/v3/",
            vs_currency="usd",
            client=client,
        )
        quote = await provider.get_quote("usd-coin")

    assert quote["value"] == 0.9998
    assert quote["_source"]["name"] == "coingecko"
    assert seen["path"] == "/api/v3/simple/price"
    assert seen["params"] == {"ids": "usd-coin", "vs_currencies": "usd"}
    assert seen["key"] == "demo-key"


@pytest.mark.asyncio
async def test_get_quote_without_api_key_sends_no_header():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["has_key"] = "X-CG-Demo-API-Key" in request.headers
        return httpx.Response(200, json={"solana": {"usd": 150.0}})

    async with make_client(handler) as client:
        provider = CoingeckoProvider(api_key="", base_url="https://cg.test", client=client)
        await provider.get_quote("solana")

    assert seen["has_key"] is False


@pytest.mark.asyncio
async def test_get_quote_unknown_id_returns_empty():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    async with make_client(handler) as client:
        provider = CoingeckoProvider(base_url="https://cg.test", vs_currency="usd", client=client)
        assert await provider.get_quote("not-a-coin") == {}


@pytest.mark.asyncio
async def test_get_quote_http_error_propagates():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": "rate limited"})

    async with make_client(handler) as client:
        provider = CoingeckoProvider(base_url="https://cg.test", client=client)
        with pytest.raises(httpx.HTTPStatusError):
            await provider.get_quote("ethereum")


@pytest.mark.asyncio
async def test_health_check_reports_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    async with make_client(handler) as client:
        provider = CoingeckoProvider(base_url="https://cg.test", client=client)
        health = await provider.health_check()

    assert health["status"] == "error"
    assert "unreachable" in health["reason"]
