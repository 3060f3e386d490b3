"""Gas price reader for the gas-priced destination chain."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

import httpx

from ..config import settings
from .base import GasProvider

logger = logging.getLogger(__name__)


class GasPriceError(Exception):
    """JSON-RPC gas price error."""
    pass


class EthereumGasProvider(GasProvider):
    """Uses JSON-RPC eth_gasPrice to get the current Ethereum gas price."""

    name = "ethereum_gas"

    def __init__(
        self,
        *,
        rpc_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.rpc_url = rpc_url if rpc_url is not None else settings.ethereum_rpc_url
        self.timeout_s = settings.request_timeout_seconds
        self._client = client

    async def ready(self) -> bool:
        return bool(self.rpc_url)

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {"status": "disabled", "reason": "Ethereum RPC URL not configured"}

        try:
            result = await self._rpc_call("eth_chainId", [])
            return {"status": "healthy", "chainId": result}
        except Exception as exc:
            return {"status": "error", "reason": str(exc)}

    async def _rpc_call(self, method: str, params: List[Any]) -> Any:
        body = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        if self._client is not None:
            response = await self._client.post(self.rpc_url, json=body, timeout=self.timeout_s)
        else:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                response = await client.post(self.rpc_url, json=body)
        response.raise_for_status()
        payload = response.json()
        if "error" in payload:
            raise GasPriceError(payload["error"])
        return payload.get("result")

    async def get_gas_price(self) -> Optional[float]:
        """
        Get the current gas price in gwei.

        Returns None when no RPC is configured or the call fails; the
        estimator reports a missing gas price rather than a zero fee.
        """
        if not await self.ready():
            logger.warning("EthereumGasProvider: no RPC URL configured")
            return None

        try:
            hex_price = await self._rpc_call("eth_gasPrice", [])
            wei = int(hex_price, 16)
        except (httpx.HTTPError, GasPriceError, TypeError, ValueError) as e:
            logger.error(f"EthereumGasProvider.get_gas_price failed: {e}")
            return None

        if wei <= 0:
            return None
        return float(Decimal(wei) / Decimal("1000000000"))


__all__ = ["EthereumGasProvider", "GasPriceError"]
