from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class Provider(ABC):
    """Base provider interface"""

    name: str
    timeout_s: int = 10

    @abstractmethod
    async def ready(self) -> bool:
        """Check if provider is ready to serve requests"""
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """Return provider health status"""
        pass


class PriceProvider(Provider):
    """Provider for spot price quotes"""

    @abstractmethod
    async def get_quote(self, price_quote_id: str) -> Dict[str, Any]:
        """Get the spot price for a quote id as ``{"value": price}``.

        Returns an empty mapping when the service answers without a price;
        transport and HTTP errors propagate.
        """
        pass


class GasProvider(Provider):
    """Provider for the destination chain's current gas price"""

    @abstractmethod
    async def get_gas_price(self) -> Optional[float]:
        """Current gas price in gwei, or None when unknown"""
        pass
