"""
Chain identification types and utilities.

Networks are identified by their Wormhole chain ID, which is what both the
relayer token list and encoded token addresses use. This is distinct from
the EVM ``chainId`` of the underlying network.
"""

from __future__ import annotations

from typing import Dict

ChainId = int

CHAIN_ID_SOLANA: ChainId = 1
CHAIN_ID_ETH: ChainId = 2
CHAIN_ID_TERRA: ChainId = 3
CHAIN_ID_BSC: ChainId = 4
CHAIN_ID_POLYGON: ChainId = 5
CHAIN_ID_AVAX: ChainId = 6
CHAIN_ID_OASIS: ChainId = 7

CHAIN_NAMES: Dict[ChainId, str] = {
    CHAIN_ID_SOLANA: "Solana",
    CHAIN_ID_ETH: "Ethereum",
    CHAIN_ID_TERRA: "Terra",
    CHAIN_ID_BSC: "Binance Smart Chain",
    CHAIN_ID_POLYGON: "Polygon",
    CHAIN_ID_AVAX: "Avalanche",
    CHAIN_ID_OASIS: "Oasis",
}

# Chains whose native addresses are 20-byte hex
EVM_CHAIN_IDS = frozenset(
    {
        CHAIN_ID_ETH,
        CHAIN_ID_BSC,
        CHAIN_ID_POLYGON,
        CHAIN_ID_AVAX,
        CHAIN_ID_OASIS,
    }
)

_CHAIN_ALIASES: Dict[str, ChainId] = {
    "solana": CHAIN_ID_SOLANA,
    "sol": CHAIN_ID_SOLANA,
    "ethereum": CHAIN_ID_ETH,
    "eth": CHAIN_ID_ETH,
    "terra": CHAIN_ID_TERRA,
    "bsc": CHAIN_ID_BSC,
    "binance": CHAIN_ID_BSC,
    "polygon": CHAIN_ID_POLYGON,
    "matic": CHAIN_ID_POLYGON,
    "avalanche": CHAIN_ID_AVAX,
    "avax": CHAIN_ID_AVAX,
    "oasis": CHAIN_ID_OASIS,
}


def is_evm_chain_id(chain_id: ChainId) -> bool:
    """Check if the chain ID represents an EVM-compatible chain."""
    return chain_id in EVM_CHAIN_IDS


def normalize_to_chain_id(chain: str | int) -> ChainId:
    """
    Convert user input to a Wormhole chain ID.

    Args:
        chain: Chain name or alias (e.g. "ethereum", "sol") or a chain ID,
               either as an int or a numeric string.

    Raises:
        ValueError: If the chain identifier is not recognized.

    Examples:
        >>> normalize_to_chain_id("eth")
        2
        >>> normalize_to_chain_id("5")
        5
    """
    if isinstance(chain, int):
        return chain

    chain_lower = chain.lower().strip()
    if chain_lower in _CHAIN_ALIASES:
        return _CHAIN_ALIASES[chain_lower]

    try:
        return int(chain_lower)
    except ValueError:
        pass

    raise ValueError(f"Unknown chain identifier: {chain!r}")


def chain_id_to_name(chain_id: ChainId) -> str:
    return CHAIN_NAMES.get(chain_id, f"Chain {chain_id}")


__all__ = [
    "ChainId",
    "CHAIN_ID_SOLANA",
    "CHAIN_ID_ETH",
    "CHAIN_ID_TERRA",
    "CHAIN_ID_BSC",
    "CHAIN_ID_POLYGON",
    "CHAIN_ID_AVAX",
    "CHAIN_ID_OASIS",
    "CHAIN_NAMES",
    "EVM_CHAIN_IDS",
    "is_evm_chain_id",
    "normalize_to_chain_id",
    "chain_id_to_name",
]
