"""Service layer helpers"""

from .address import is_wormhole_hex, normalize_origin_address

__all__ = ["is_wormhole_hex", "normalize_origin_address"]
