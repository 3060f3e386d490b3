"""Constants for relayer fee estimation."""

from typing import Dict

from ..chain_types import (
    CHAIN_ID_AVAX,
    CHAIN_ID_BSC,
    CHAIN_ID_ETH,
    CHAIN_ID_OASIS,
    CHAIN_ID_POLYGON,
    CHAIN_ID_SOLANA,
    CHAIN_ID_TERRA,
    ChainId,
)

# Flat USD fee charged for relaying to each destination chain
FIXED_FEES_USD: Dict[ChainId, float] = {
    CHAIN_ID_SOLANA: 1.0,
    CHAIN_ID_TERRA: 5.0,
    CHAIN_ID_BSC: 5.0,
    CHAIN_ID_POLYGON: 0.5,
    CHAIN_ID_AVAX: 1.0,
    CHAIN_ID_OASIS: 1.0,
}

# Destination whose fee tracks its live gas price instead of a flat fee
GAS_PRICED_CHAIN: ChainId = CHAIN_ID_ETH

# Rough gas used by a redeem on Ethereum; revisit alongside transaction fee estimates
AVERAGE_REDEEM_GAS_UNITS = 100000
GWEI_PER_NATIVE_UNIT = 1000000000
SAFETY_MULTIPLIER = 1.1

FIAT_DECIMALS = 2

# Coingecko id of the native asset the relayer is paid out in on each destination
COMPARISON_ASSETS: Dict[ChainId, str] = {
    CHAIN_ID_SOLANA: "solana",
    CHAIN_ID_ETH: "ethereum",
    CHAIN_ID_TERRA: "terra-luna",
    CHAIN_ID_BSC: "binancecoin",
    CHAIN_ID_POLYGON: "matic-network",
    CHAIN_ID_AVAX: "avalanche-2",
    CHAIN_ID_OASIS: "oasis-network",
}

INVALID_ARGUMENTS_MESSAGE = "Invalid arguments supplied."
MISSING_PRICE_DATA_MESSAGE = "Failed to fetch necessary price data."
PRICE_FETCH_FAILED_MESSAGE = "Unable to fetch required asset price."
