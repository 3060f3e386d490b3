from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FeeEstimate(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_relayable: bool = Field(alias="isRelayable", description="Registry lists the asset as relayable")
    is_relaying_available: bool = Field(
        alias="isRelayingAvailable",
        description="Relayer registry could be loaded",
    )
    fee_fiat: Optional[str] = Field(
        default=None,
        alias="feeUsd",
        description="Relayer fee in USD, two decimals",
    )
    fee_in_source_units: Optional[str] = Field(
        default=None,
        alias="feeFormatted",
        description="Relayer fee in source asset units, source decimals",
    )
    comparison_price_quote: Optional[float] = Field(
        default=None,
        alias="targetNativeAssetPriceQuote",
        description="USD price of the destination chain's comparison asset",
    )


class FeeEstimateEnvelope(BaseModel):
    """Output contract: exactly one of ``error``, ``is_fetching`` or ``data`` is set."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    error: str = Field(default="", description="User-facing error message")
    is_fetching: bool = Field(default=False, alias="isFetching", description="Computation in flight")
    received_at: Optional[datetime] = Field(
        default=None,
        alias="receivedAt",
        description="Reserved for callers; always empty here",
    )
    data: Optional[FeeEstimate] = Field(default=None, description="Estimate payload")

    @model_validator(mode="after")
    def _check_exclusive(self) -> "FeeEstimateEnvelope":
        active = sum((bool(self.error), self.is_fetching, self.data is not None))
        if active != 1:
            raise ValueError("exactly one of error, is_fetching or data must be set")
        return self
