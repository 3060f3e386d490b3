"""Helpers for turning Wormhole-encoded token addresses into chain-native form."""

from __future__ import annotations

import re
from typing import Optional

from eth_utils import to_checksum_address

from ..core.chain_types import ChainId, is_evm_chain_id

_EVM_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")
_WORMHOLE_HEX_RE = re.compile(r"^(0x)?[a-fA-F0-9]{64}$")


def is_wormhole_hex(address: str) -> bool:
    """True for a 32-byte, optionally 0x-prefixed, hex string."""
    return bool(_WORMHOLE_HEX_RE.fullmatch(address))


def normalize_origin_address(address: str, chain_id: ChainId) -> Optional[str]:
    """
    Map an origin token address onto the string the relayer registry uses.

    EVM addresses are accepted either as 20-byte hex or as the 32-byte
    left-padded Wormhole encoding and come back EIP-55 checksummed. Addresses
    on other chains must already be in native form (base58 on Solana, bech32
    on Terra) and pass through unchanged; their Wormhole encoding is not
    decoded here and gives None. Callers holding encoded non-EVM addresses
    inject their own normalizer into the estimator. Returns None when the
    address cannot be used.
    """
    if not address:
        return None
    address = address.strip()
    if not address:
        return None

    if not is_evm_chain_id(chain_id):
        return None if is_wormhole_hex(address) else address

    if is_wormhole_hex(address):
        hex_part = address[2:] if address.startswith("0x") else address
        if int(hex_part[:24], 16) != 0:
            return None
        address = "0x" + hex_part[24:]

    if not _EVM_ADDRESS_RE.fullmatch(address):
        return None
    return to_checksum_address(address)


__all__ = ["is_wormhole_hex", "normalize_origin_address"]
