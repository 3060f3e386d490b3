from .base import GasProvider, PriceProvider, Provider
from .coingecko import CoingeckoProvider
from .gas import EthereumGasProvider, GasPriceError
from .relayer_registry import RegistryPayloadError, RelayerRegistryProvider, parse_registry

__all__ = [
    "CoingeckoProvider",
    "EthereumGasProvider",
    "GasPriceError",
    "GasProvider",
    "PriceProvider",
    "Provider",
    "RegistryPayloadError",
    "RelayerRegistryProvider",
    "parse_registry",
]
