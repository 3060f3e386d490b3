"""Relayer fee model."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from ..chain_types import ChainId
from .constants import (
    AVERAGE_REDEEM_GAS_UNITS,
    FIAT_DECIMALS,
    FIXED_FEES_USD,
    GAS_PRICED_CHAIN,
    GWEI_PER_NATIVE_UNIT,
    SAFETY_MULTIPLIER,
)


def requires_gas_price(destination: ChainId) -> bool:
    return destination == GAS_PRICED_CHAIN


def has_gas_price(gas_price: Optional[float]) -> bool:
    """True for a finite, positive gas price."""
    return gas_price is not None and math.isfinite(gas_price) and gas_price > 0


def fee_fiat(
    destination: ChainId,
    comparison_price: float,
    gas_price: Optional[float] = None,
) -> float:
    """
    Relayer fee in USD for delivering to ``destination``.

    ``gas_price`` is in gwei and only consulted for the gas-priced chain.
    Returns 0 when that chain has no usable gas price, and for chains
    without a fee model; callers must not present either case as a free relay.
    """
    if requires_gas_price(destination):
        if not has_gas_price(gas_price):
            return 0.0
        return (
            AVERAGE_REDEEM_GAS_UNITS * gas_price / GWEI_PER_NATIVE_UNIT
            * comparison_price
            * SAFETY_MULTIPLIER
        )
    return FIXED_FEES_USD.get(destination, 0.0)


def _to_fixed(value: float, places: int) -> str:
    # Half-up on the exact binary value of the float, not its repr
    with localcontext() as ctx:
        exact = Decimal(value)
        ctx.prec = max(28, exact.adjusted() + places + 2)
        quantum = Decimal(1).scaleb(-places)
        return format(exact.quantize(quantum, rounding=ROUND_HALF_UP), "f")


def format_fiat(fee: float) -> str:
    return _to_fixed(fee, FIAT_DECIMALS)


def fee_in_source_units(fee: float, origin_price: float, source_decimals: int) -> str:
    """Convert a USD fee into source asset units with ``source_decimals`` fractional digits."""
    if source_decimals < 0:
        raise ValueError(f"source_decimals must be non-negative, got {source_decimals}")
    return _to_fixed(fee / origin_price, source_decimals)


__all__ = [
    "fee_fiat",
    "fee_in_source_units",
    "format_fiat",
    "has_gas_price",
    "requires_gas_price",
]
