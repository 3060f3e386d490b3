from .fees import FeeEstimate, FeeEstimateEnvelope

__all__ = [
    "FeeEstimate",
    "FeeEstimateEnvelope",
]
