"""Relayability lookup against the relayer token list."""

from __future__ import annotations

from typing import Optional

from ..chain_types import ChainId
from .models import RegistryRecord, RegistrySnapshot


def lookup(
    origin_chain: Optional[ChainId],
    origin_address: Optional[str],
    registry: Optional[RegistrySnapshot],
) -> Optional[RegistryRecord]:
    """Return the first record for ``origin_address`` on ``origin_chain``, if any."""
    if not origin_chain or not origin_address or registry is None:
        return None
    target = origin_address.lower()
    for record in registry.records:
        if record.address and record.address.lower() == target and record.chain_id == origin_chain:
            return record
    return None


def is_eligible(record: Optional[RegistryRecord]) -> bool:
    """A record can be priced only when address, chain and quote id are all known."""
    return bool(record and record.address and record.chain_id and record.price_quote_id)


def is_relayable(
    origin_chain: Optional[ChainId],
    origin_address: Optional[str],
    registry: Optional[RegistrySnapshot],
) -> bool:
    return is_eligible(lookup(origin_chain, origin_address, registry))


__all__ = ["is_eligible", "is_relayable", "lookup"]
