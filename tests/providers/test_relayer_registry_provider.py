"""Tests for the relayer registry provider and payload parsing."""

import httpx
import pytest

from relayfee.core.chain_types import CHAIN_ID_ETH, CHAIN_ID_SOLANA
from relayfee.providers.relayer_registry import (
    RegistryPayloadError,
    RelayerRegistryProvider,
    parse_registry,
)

REGISTRY_URL = "https://relayer.test/supportedTokens.json"

PAYLOAD = {
    "supportedTokens": [
        {
            "chainId": CHAIN_ID_ETH,
            "address": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
            "coingeckoId": "usd-coin",
        },
        {
            "chainId": CHAIN_ID_SOLANA,
            "address": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
            "coingeckoId": "usd-coin",
        },
        {"chainId": CHAIN_ID_ETH, "address": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"},
        "garbage",
    ]
}


def make_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


# =============================================================================
# parse_registry
# =============================================================================

def test_parse_registry_keeps_incomplete_records():
    snapshot = parse_registry(PAYLOAD)

    assert len(snapshot) == 3
    first, _, incomplete = snapshot.records
    assert first.chain_id == CHAIN_ID_ETH
    assert first.price_quote_id == "usd-coin"
    assert incomplete.price_quote_id is None


def test_parse_registry_missing_tokens_is_empty():
    assert len(parse_registry({})) == 0


@pytest.mark.parametrize("payload", [[], "tokens", {"supportedTokens": {"a": 1}}])
def test_parse_registry_rejects_bad_shapes(payload):
    with pytest.raises(RegistryPayloadError):
        parse_registry(payload)


# =============================================================================
# RelayerRegistryProvider
# =============================================================================

@pytest.mark.asyncio
async def test_fetch_registry_loaded():
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == REGISTRY_URL
        return httpx.Response(200, json=PAYLOAD)

    async with make_client(handler) as client:
        state = await RelayerRegistryProvider(url=REGISTRY_URL, client=client).fetch_registry()

    assert state.error == ""
    assert state.is_fetching is False
    assert len(state.data) == 3


@pytest.mark.asyncio
async def test_fetch_registry_http_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    async with make_client(handler) as client:
        state = await RelayerRegistryProvider(url=REGISTRY_URL, client=client).fetch_registry()

    assert state.data is None
    assert state.error.startswith("Failed to load relayer registry")


@pytest.mark.asyncio
async def test_fetch_registry_invalid_json():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>not json</html>")

    async with make_client(handler) as client:
        state = await RelayerRegistryProvider(url=REGISTRY_URL, client=client).fetch_registry()

    assert state.data is None
    assert state.error


@pytest.mark.asyncio
async def test_fetch_registry_unconfigured():
    provider = RelayerRegistryProvider(url="")

    assert await provider.ready() is False
    state = await provider.fetch_registry()
    assert state.error == "Relayer registry URL not configured"

    health = await provider.health_check()
    assert health["status"] == "disabled"


@pytest.mark.asyncio
async def test_health_check_counts_tokens():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=PAYLOAD)

    async with make_client(handler) as client:
        health = await RelayerRegistryProvider(url=REGISTRY_URL, client=client).health_check()

    assert health == {"status": "healthy", "tokens": 3}
