"""
Relayer Fee Module

Estimates what a relayer charges to deliver a cross-chain transfer, in USD
and in units of the transferred asset.
"""

from .estimator import RelayerFeeEstimator
from .fees import fee_fiat, fee_in_source_units, format_fiat, requires_gas_price
from .lookup import is_eligible, is_relayable, lookup
from .models import (
    AssetRef,
    ComputationResult,
    EstimateError,
    EstimateLoading,
    EstimateReady,
    EstimateUnavailable,
    FetchContext,
    PriceSlots,
    RegistryRecord,
    RegistrySnapshot,
    RegistryState,
    ResultStatus,
)
from .prices import PriceFetchCoordinator, PriceQuoteError

__all__ = [
    # Estimator
    "RelayerFeeEstimator",
    "PriceFetchCoordinator",
    # Fee model
    "fee_fiat",
    "fee_in_source_units",
    "format_fiat",
    "requires_gas_price",
    # Lookup
    "is_eligible",
    "is_relayable",
    "lookup",
    # Models
    "AssetRef",
    "ComputationResult",
    "EstimateError",
    "EstimateLoading",
    "EstimateReady",
    "EstimateUnavailable",
    "FetchContext",
    "PriceSlots",
    "RegistryRecord",
    "RegistrySnapshot",
    "RegistryState",
    "ResultStatus",
    # Errors
    "PriceQuoteError",
]
