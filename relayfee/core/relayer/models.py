"""
Relayer Fee Models

Registry records, fetch bookkeeping and the result variants produced by the
fee estimator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from ...types.fees import FeeEstimate, FeeEstimateEnvelope
from ..chain_types import ChainId


@dataclass(frozen=True)
class AssetRef:
    """An asset on a specific chain."""

    chain_id: ChainId
    address: str

    def matches(self, chain_id: Optional[ChainId], address: Optional[str]) -> bool:
        if chain_id is None or not address:
            return False
        return self.chain_id == chain_id and self.address.lower() == address.lower()


@dataclass(frozen=True)
class RegistryRecord:
    """One entry of the relayer supported-token list."""

    chain_id: Optional[ChainId] = None
    address: Optional[str] = None
    price_quote_id: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "RegistryRecord":
        chain_id = data.get("chainId")
        address = data.get("address")
        quote_id = data.get("coingeckoId")
        return cls(
            chain_id=chain_id if isinstance(chain_id, int) and not isinstance(chain_id, bool) else None,
            address=address if isinstance(address, str) else None,
            price_quote_id=quote_id if isinstance(quote_id, str) else None,
        )

    @property
    def asset(self) -> Optional[AssetRef]:
        if self.chain_id is None or not self.address:
            return None
        return AssetRef(chain_id=self.chain_id, address=self.address)


@dataclass(frozen=True, eq=False)
class RegistrySnapshot:
    """
    Immutable, ordered view of the relayer token list.

    Compared by identity: every load of the registry is a distinct input and
    restarts the estimate, even when its contents did not change.
    """

    records: Tuple[RegistryRecord, ...] = ()

    @classmethod
    def of(cls, records: Iterable[RegistryRecord]) -> "RegistrySnapshot":
        return cls(records=tuple(records))

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class RegistryState:
    """What the registry provider exposes to the estimator."""

    data: Optional[RegistrySnapshot] = None
    is_fetching: bool = False
    error: str = ""

    @classmethod
    def loading(cls) -> "RegistryState":
        return cls(is_fetching=True)

    @classmethod
    def loaded(cls, snapshot: RegistrySnapshot) -> "RegistryState":
        return cls(data=snapshot)

    @classmethod
    def failed(cls, error: str) -> "RegistryState":
        return cls(error=error)


@dataclass(frozen=True)
class FetchContext:
    """Scopes one round of price fetches to the inputs that started it."""

    generation: int
    origin_chain: ChainId
    origin_asset: str
    target_chain: ChainId


@dataclass
class PriceSlots:
    """Price data gathered for a single fetch context."""

    context: Optional[FetchContext] = None
    origin_price: Optional[float] = None
    comparison_price: Optional[float] = None
    loading: bool = False
    error: str = ""


class ResultStatus(str, Enum):
    ERROR = "error"
    LOADING = "loading"
    UNAVAILABLE = "unavailable"
    READY = "ready"


@dataclass(frozen=True)
class EstimateError:
    message: str
    detail: Optional[str] = None
    status: ResultStatus = field(default=ResultStatus.ERROR, init=False)

    def to_envelope(self) -> FeeEstimateEnvelope:
        return FeeEstimateEnvelope(error=self.message)


@dataclass(frozen=True)
class EstimateLoading:
    status: ResultStatus = field(default=ResultStatus.LOADING, init=False)

    def to_envelope(self) -> FeeEstimateEnvelope:
        return FeeEstimateEnvelope(is_fetching=True)


@dataclass(frozen=True)
class EstimateUnavailable:
    """Relaying cannot be offered; ``estimate`` carries no fee fields."""

    estimate: FeeEstimate
    status: ResultStatus = field(default=ResultStatus.UNAVAILABLE, init=False)

    @classmethod
    def build(cls, *, is_relaying_available: bool) -> "EstimateUnavailable":
        return cls(
            estimate=FeeEstimate(
                is_relayable=False,
                is_relaying_available=is_relaying_available,
            )
        )

    def to_envelope(self) -> FeeEstimateEnvelope:
        return FeeEstimateEnvelope(data=self.estimate)


@dataclass(frozen=True)
class EstimateReady:
    estimate: FeeEstimate
    status: ResultStatus = field(default=ResultStatus.READY, init=False)

    def to_envelope(self) -> FeeEstimateEnvelope:
        return FeeEstimateEnvelope(data=self.estimate)


ComputationResult = Union[EstimateError, EstimateLoading, EstimateUnavailable, EstimateReady]


__all__ = [
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
]
