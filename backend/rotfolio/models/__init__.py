# Data Models

from .coin import (
    TokenRecord,
    MarketSample,
    PriceChangeWindows,
    VolumeWindows,
    RankedEntry,
)

__all__ = [
    "TokenRecord",
    "MarketSample",
    "PriceChangeWindows",
    "VolumeWindows",
    "RankedEntry",
]
