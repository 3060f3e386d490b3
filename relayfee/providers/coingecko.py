from typing import Any, Dict, Optional

import httpx

from ..config import settings
from .base import PriceProvider


class CoingeckoProvider(PriceProvider):
    """Coingecko API provider for spot price quotes"""

    name = "coingecko"
    timeout_s = 15

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        vs_currency: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = settings.coingecko_api_key if api_key is None else api_key
        self.base_url = (base_url or settings.coingecko_base_url).rstrip("/")
        self.vs_currency = vs_currency or settings.price_vs_currency
        self.timeout_s = settings.request_timeout_seconds
        self._client = client

    def _build_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["X-CG-Demo-API-Key"] = self.api_key
        return headers

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        if self._client is not None:
            response = await self._client.get(
                f"{self.base_url}{path}",
                headers=self._build_headers(),
                params=params,
                timeout=self.timeout_s,
            )
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.base_url}{path}",
                    headers=self._build_headers(),
                    params=params,
                    timeout=self.timeout_s,
                )
        response.raise_for_status()
        return response

    async def ready(self) -> bool:
        return settings.enable_coingecko  # API key is optional for basic tier

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {
                "status": "unavailable",
                "reason": "Provider disabled"
            }

        try:
            response = await self._get("/ping")
            return {"status": "healthy", "latency_ms": int(response.elapsed.total_seconds() * 1000)}
        except Exception as e:
            return {"status": "error", "reason": str(e)}

    async def get_quote(self, price_quote_id: str) -> Dict[str, Any]:
        """Get the current price of a Coingecko coin id"""
        params = {
            "ids": price_quote_id,
            "vs_currencies": self.vs_currency,
        }
        response = await self._get("/simple/price", params)
        data = response.json()

        coin = data.get(price_quote_id) if isinstance(data, dict) else None
        if isinstance(coin, dict) and self.vs_currency in coin:
            return {
                "value": coin[self.vs_currency],
                "_source": {"name": "coingecko", "url": "https://coingecko.com"}
            }

        return {}
