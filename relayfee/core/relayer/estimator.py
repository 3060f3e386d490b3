"""
Relayer Fee Estimator

Event-driven state machine that turns the transfer inputs, the relayer
registry and live prices into one fee estimate result.

Inputs are pushed through the ``set_*`` methods. A change to the transfer
(origin chain, origin asset, target chain) or to the registry snapshot opens
a new computation cycle with a fresh generation number; any price lookups
still running for an older generation are left to finish but their results
are discarded. Gas price and source decimals are side inputs that only
re-derive the result.

The result itself is a pure function of the committed inputs and the live
price slots, see ``_derive``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional, Tuple

import structlog

from ...providers.base import PriceProvider
from ...services.address import normalize_origin_address
from ...types.fees import FeeEstimate, FeeEstimateEnvelope
from ..chain_types import ChainId
from . import fees
from .constants import (
    COMPARISON_ASSETS,
    INVALID_ARGUMENTS_MESSAGE,
    MISSING_PRICE_DATA_MESSAGE,
)
from .lookup import is_eligible, is_relayable, lookup
from .models import (
    ComputationResult,
    EstimateError,
    EstimateLoading,
    EstimateReady,
    EstimateUnavailable,
    FetchContext,
    RegistrySnapshot,
    RegistryState,
)
from .prices import PriceFetchCoordinator

_slog = structlog.stdlib.get_logger("relayer.estimator")

AddressNormalizer = Callable[[str, ChainId], Optional[str]]
ResultListener = Callable[[ComputationResult], None]

# (normalized origin address, origin chain, target chain, registry snapshot)
_InputKey = Tuple[Optional[str], Optional[ChainId], Optional[ChainId], Optional[RegistrySnapshot]]


class RelayerFeeEstimator:
    """
    Estimates the relayer fee for a cross-chain transfer.

    All methods run on the event loop thread; ``set_transfer`` and
    ``set_registry`` may start price lookups and therefore need a running
    loop.
    """

    def __init__(
        self,
        price_provider: PriceProvider,
        *,
        address_normalizer: AddressNormalizer = normalize_origin_address,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._normalize = address_normalizer
        self._prices = PriceFetchCoordinator(
            price_provider,
            is_live=self._is_live,
            on_change=self._publish,
            logger=self.logger,
        )

        self._origin_chain: Optional[ChainId] = None
        self._origin_asset: Optional[str] = None
        self._target_chain: Optional[ChainId] = None
        self._registry = RegistryState()
        self._gas_price: Optional[float] = None
        self._source_decimals: Optional[int] = None

        self._generation = 0
        self._key: Optional[_InputKey] = None
        self._listeners: List[ResultListener] = []
        self._last: Optional[ComputationResult] = None

    # ---------------------------
    # Inputs
    # ---------------------------
    def set_transfer(
        self,
        origin_chain: Optional[ChainId],
        origin_asset: Optional[str],
        target_chain: Optional[ChainId],
    ) -> ComputationResult:
        self._origin_chain = origin_chain
        self._origin_asset = origin_asset
        self._target_chain = target_chain
        return self._reconcile()

    def set_registry(self, registry: RegistryState) -> ComputationResult:
        self._registry = registry
        return self._reconcile()

    def set_gas_price(self, gas_price: Optional[float]) -> ComputationResult:
        self._gas_price = gas_price
        return self._publish()

    def set_source_decimals(self, decimals: Optional[int]) -> ComputationResult:
        self._source_decimals = decimals
        return self._publish()

    # ---------------------------
    # Outputs
    # ---------------------------
    @property
    def result(self) -> ComputationResult:
        return self._derive()

    @property
    def generation(self) -> int:
        return self._generation

    def envelope(self) -> FeeEstimateEnvelope:
        return self._derive().to_envelope()

    def subscribe(self, listener: ResultListener) -> Callable[[], None]:
        """Call ``listener`` with every new result; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def wait_settled(self) -> ComputationResult:
        """Wait for the live price lookups, if any, and return the result."""
        while True:
            pending = self._prices.pending
            if pending is None or pending.done():
                return self._derive()
            await asyncio.shield(pending)

    async def aclose(self) -> None:
        await self._prices.aclose()

    # ---------------------------
    # Cycle management
    # ---------------------------
    def _origin_address(self) -> Optional[str]:
        if not self._origin_asset or not self._origin_chain:
            return None
        return self._normalize(self._origin_asset, self._origin_chain)

    def _is_live(self, context: FetchContext) -> bool:
        return context.generation == self._generation

    def _reconcile(self) -> ComputationResult:
        origin_address = self._origin_address()
        key: _InputKey = (origin_address, self._origin_chain, self._target_chain, self._registry.data)
        if key == self._key:
            return self._publish()

        self._key = key
        self._generation += 1
        self._prices.reset()
        self._start_cycle(origin_address)
        return self._publish()

    def _start_cycle(self, origin_address: Optional[str]) -> None:
        snapshot = self._registry.data
        if not (origin_address and self._origin_chain and self._target_chain and snapshot is not None):
            return

        record = lookup(self._origin_chain, origin_address, snapshot)
        if not is_eligible(record):
            _slog.info(
                "asset_not_relayable",
                generation=self._generation,
                origin_chain=self._origin_chain,
                origin_asset=origin_address,
            )
            return

        context = FetchContext(
            generation=self._generation,
            origin_chain=self._origin_chain,
            origin_asset=origin_address,
            target_chain=self._target_chain,
        )
        self._prices.start(
            context,
            record.price_quote_id,
            COMPARISON_ASSETS.get(self._target_chain),
        )

    def _publish(self) -> ComputationResult:
        result = self._derive()
        if result == self._last:
            return result
        self._last = result
        for listener in list(self._listeners):
            try:
                listener(result)
            except Exception as exc:  # noqa: BLE001
                self.logger.warning("Fee estimate listener failed: %s", exc, exc_info=True)
        return result

    # ---------------------------
    # Result derivation
    # ---------------------------
    def _derive(self) -> ComputationResult:
        slots = self._prices.slots
        registry = self._registry

        if slots.error:
            return EstimateError(MISSING_PRICE_DATA_MESSAGE, detail=slots.error)
        if slots.loading or registry.is_fetching:
            return EstimateLoading()
        if registry.error or registry.data is None:
            return EstimateUnavailable.build(is_relaying_available=False)

        origin_address = self._origin_address()
        if not (
            self._origin_chain
            and origin_address
            and self._target_chain
            and self._source_decimals is not None
            and self._source_decimals >= 0
        ):
            return EstimateError(INVALID_ARGUMENTS_MESSAGE)

        if not is_relayable(self._origin_chain, origin_address, registry.data):
            return EstimateUnavailable.build(is_relaying_available=True)

        target_chain = self._target_chain
        comparison_price = slots.comparison_price
        origin_price = slots.origin_price
        gas_missing = fees.requires_gas_price(target_chain) and not fees.has_gas_price(self._gas_price)
        if not comparison_price or not origin_price or gas_missing:
            return EstimateError(MISSING_PRICE_DATA_MESSAGE)

        fee = fees.fee_fiat(target_chain, comparison_price, self._gas_price)
        return EstimateReady(
            estimate=FeeEstimate(
                is_relayable=True,
                is_relaying_available=True,
                fee_fiat=fees.format_fiat(fee),
                fee_in_source_units=fees.fee_in_source_units(fee, origin_price, self._source_decimals),
                comparison_price_quote=comparison_price,
            )
        )


__all__ = ["AddressNormalizer", "RelayerFeeEstimator", "ResultListener"]
