import asyncio
from typing import Any, Dict, List

import pytest

from relayfee.providers.base import PriceProvider


class GatedPriceProvider(PriceProvider):
    """Price provider whose quotes resolve only when a test releases them."""

    name = "gated"

    def __init__(self) -> None:
        self.calls: List[str] = []
        self._pending: Dict[str, List[asyncio.Future]] = {}

    async def ready(self) -> bool:
        return True

    async def health_check(self) -> Dict[str, Any]:
        return {"status": "healthy"}

    async def get_quote(self, price_quote_id: str) -> Dict[str, Any]:
        self.calls.append(price_quote_id)
        future = asyncio.get_running_loop().create_future()
        self._pending.setdefault(price_quote_id, []).append(future)
        return await future

    def waiting(self, price_quote_id: str) -> int:
        return sum(1 for f in self._pending.get(price_quote_id, []) if not f.done())

    def _next(self, price_quote_id: str) -> asyncio.Future:
        for future in self._pending.get(price_quote_id, []):
            if not future.done():
                return future
        raise AssertionError(f"no pending quote for {price_quote_id}")

    def resolve(self, price_quote_id: str, value: Any) -> None:
        self._next(price_quote_id).set_result({"value": value})

    def respond(self, price_quote_id: str, payload: Dict[str, Any]) -> None:
        self._next(price_quote_id).set_result(payload)

    def fail(self, price_quote_id: str, exc: Exception) -> None:
        self._next(price_quote_id).set_exception(exc)


async def drain() -> None:
    """Let every ready callback and task step run."""
    for _ in range(10):
        await asyncio.sleep(0)


@pytest.fixture
def gated_provider() -> GatedPriceProvider:
    return GatedPriceProvider()


@pytest.fixture
def settle():
    return drain
