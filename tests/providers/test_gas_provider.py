"""Tests for the Ethereum gas price provider."""

import json

import httpx
import pytest

from relayfee.providers.gas import EthereumGasProvider

RPC_URL = "https://rpc.test"


def rpc_client(result=None, error=None, status=200) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        assert body["method"] in ("eth_gasPrice", "eth_chainId")
        payload = {"jsonrpc": "2.0", "id": body["id"]}
        if error is not None:
            payload["error"] = error
        else:
            payload["result"] = result
        return httpx.Response(status, json=payload)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_gas_price_converted_to_gwei():
    # 25.5 gwei
    async with rpc_client(result=hex(25_500_000_000)) as client:
        gas = await EthereumGasProvider(rpc_url=RPC_URL, client=client).get_gas_price()

    assert gas == 25.5


@pytest.mark.asyncio
async def test_rpc_error_returns_none():
    async with rpc_client(error={"code": -32000, "message": "boom"}) as client:
        gas = await EthereumGasProvider(rpc_url=RPC_URL, client=client).get_gas_price()

    assert gas is None


@pytest.mark.asyncio
async def test_http_error_returns_none():
    async with rpc_client(result="0x1", status=502) as client:
        gas = await EthereumGasProvider(rpc_url=RPC_URL, client=client).get_gas_price()

    assert gas is None


@pytest.mark.asyncio
@pytest.mark.parametrize("result", ["0x0", None, "not-hex"])
async def test_unusable_result_returns_none(result):
    async with rpc_client(result=result) as client:
        gas = await EthereumGasProvider(rpc_url=RPC_URL, client=client).get_gas_price()

    assert gas is None


@pytest.mark.asyncio
async def test_unconfigured_rpc_returns_none():
    provider = EthereumGasProvider(rpc_url="")

    assert await provider.ready() is False
    assert await provider.get_gas_price() is None


@pytest.mark.asyncio
async def test_health_check_reports_chain_id():
    async with rpc_client(result="0x1") as client:
        health = await EthereumGasProvider(rpc_url=RPC_URL, client=client).health_check()

    assert health == {"status": "healthy", "chainId": "0x1"}
