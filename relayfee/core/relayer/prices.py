"""
Price Fetch Coordinator

Fetches the origin asset and comparison asset prices concurrently for one
fetch context and records them in that context's price slots. Results that
arrive after their context was superseded are dropped without touching any
state.
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Any, Callable, Mapping, Optional, Set

import structlog

from ...providers.base import PriceProvider
from .constants import PRICE_FETCH_FAILED_MESSAGE
from .models import FetchContext, PriceSlots

_slog = structlog.stdlib.get_logger("relayer.prices")


class PriceQuoteError(Exception):
    """A quote could not be turned into a usable price."""
    pass


def extract_price(quote: Optional[Mapping[str, Any]]) -> float:
    """Pull a positive, finite price out of a provider quote."""
    value = quote.get("value") if quote else None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PriceQuoteError(f"quote has no numeric value: {quote!r}")
    price = float(value)
    if not math.isfinite(price) or price <= 0:
        raise PriceQuoteError(f"quote value is not a positive price: {value!r}")
    return price


class PriceFetchCoordinator:
    """Runs the two price lookups of a fetch context and joins them."""

    ORIGIN = "origin_price"
    COMPARISON = "comparison_price"

    def __init__(
        self,
        provider: PriceProvider,
        *,
        is_live: Callable[[FetchContext], bool],
        on_change: Callable[[], None],
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._provider = provider
        self._is_live = is_live
        self._on_change = on_change
        self.logger = logger or logging.getLogger(__name__)
        self.slots = PriceSlots()
        self._join: Optional[asyncio.Task] = None
        self._inflight: Set[asyncio.Task] = set()

    @property
    def pending(self) -> Optional[asyncio.Task]:
        """Join task of the current context, if it has one."""
        return self._join

    def reset(self) -> None:
        """Forget the current context's slots; in-flight lookups keep running."""
        self.slots = PriceSlots()
        self._join = None

    def start(
        self,
        context: FetchContext,
        origin_quote_id: str,
        comparison_quote_id: Optional[str],
    ) -> asyncio.Task:
        """Launch both lookups for ``context``. Must run inside an event loop."""
        slots = PriceSlots(context=context, loading=True)
        self.slots = slots

        origin = self._spawn(
            self._fetch_quote(context, slots, self.ORIGIN, origin_quote_id),
            name=f"relayer-price-origin-{context.generation}",
        )
        comparison = self._spawn(
            self._fetch_quote(context, slots, self.COMPARISON, comparison_quote_id),
            name=f"relayer-price-comparison-{context.generation}",
        )
        self._join = self._spawn(
            self._join_fetches(context, slots, origin, comparison),
            name=f"relayer-price-join-{context.generation}",
        )
        _slog.debug(
            "price_fetch_started",
            generation=context.generation,
            origin_quote_id=origin_quote_id,
            comparison_quote_id=comparison_quote_id,
        )
        return self._join

    async def aclose(self) -> None:
        """Cancel every lookup still running, live or superseded."""
        tasks = list(self._inflight)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._inflight.clear()
        self._join = None

    def _spawn(self, coro, *, name: str) -> asyncio.Task:
        task = asyncio.create_task(coro, name=name)
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        return task

    async def _fetch_quote(
        self,
        context: FetchContext,
        slots: PriceSlots,
        slot: str,
        quote_id: Optional[str],
    ) -> None:
        try:
            if not quote_id:
                raise PriceQuoteError(f"no price quote id for {slot}")
            quote = await self._provider.get_quote(quote_id)
            price = extract_price(quote)
        except Exception as exc:  # noqa: BLE001
            if not self._is_live(context):
                _slog.debug("price_result_discarded", generation=context.generation, slot=slot)
                return
            self.logger.warning(
                "Price lookup %s for %s failed: %s", slot, quote_id, exc
            )
            slots.error = PRICE_FETCH_FAILED_MESSAGE
            self._on_change()
            return

        if not self._is_live(context):
            _slog.debug("price_result_discarded", generation=context.generation, slot=slot)
            return
        setattr(slots, slot, price)
        self._on_change()

    async def _join_fetches(
        self,
        context: FetchContext,
        slots: PriceSlots,
        *lookups: asyncio.Task,
    ) -> None:
        await asyncio.gather(*lookups, return_exceptions=True)
        if not self._is_live(context):
            return
        slots.loading = False
        _slog.debug(
            "price_fetch_settled",
            generation=context.generation,
            failed=bool(slots.error),
        )
        self._on_change()


__all__ = ["PriceFetchCoordinator", "PriceQuoteError", "extract_price"]
