"""Coin and market data schemas.

Raw pump.fun and DexScreener payloads are narrowed into these models by
``rotfolio.services.validation``. Numbers must arrive as real JSON numbers and
strings as real strings; nothing is coerced.
"""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictBool, StrictStr, field_validator

# Strict floats still accept JSON integers but reject bools, numeric strings
# and the non-standard NaN/Infinity literals json.loads lets through.
Number = Annotated[float, Strict(), Field(allow_inf_nan=False)]
NonNegativeNumber = Annotated[float, Strict(), Field(ge=0, allow_inf_nan=False)]


class TokenRecord(BaseModel):
    """A pump.fun coin as returned by ``GET /coins/{mint}``."""
    model_config = ConfigDict(frozen=True)

    mint: StrictStr
    name: StrictStr
    symbol: StrictStr
    description: StrictStr
    image_uri: StrictStr
    metadata_uri: StrictStr
    twitter: Optional[StrictStr]
    telegram: Optional[StrictStr]
    bonding_curve: StrictStr
    associated_bonding_curve: StrictStr
    creator: StrictStr
    created_timestamp: Number
    raydium_pool: Optional[StrictStr]
    complete: StrictBool
    virtual_sol_reserves: Number
    virtual_token_reserves: Number
    total_supply: Number
    website: Optional[StrictStr]
    show_name: StrictBool
    king_of_the_hill_timestamp: Optional[Number]
    market_cap: Number
    reply_count: Number
    last_reply: Optional[Number]
    nsfw: StrictBool
    market_id: Optional[StrictStr]
    usd_market_cap: NonNegativeNumber


class PriceChangeWindows(BaseModel):
    """Percentage price change per window; each window may be missing."""
    model_config = ConfigDict(frozen=True)

    m5: Optional[Number] = None
    h1: Optional[Number] = None
    h6: Optional[Number] = None
    h24: Optional[Number] = None


class VolumeWindows(BaseModel):
    """USD traded volume per window; each window may be missing."""
    model_config = ConfigDict(frozen=True)

    m5: Optional[NonNegativeNumber] = None
    h1: Optional[NonNegativeNumber] = None
    h6: Optional[NonNegativeNumber] = None
    h24: Optional[NonNegativeNumber] = None


class MarketSample(BaseModel):
    """One DexScreener trading pair for a token.

    Only the fields the leaderboard uses are modelled; the rest of the pair
    payload (dexId, liquidity, txns, ...) is ignored.
    """
    model_config = ConfigDict(frozen=True)

    pair_address: StrictStr = Field(alias="pairAddress")
    price_usd: StrictStr = Field(alias="priceUsd")
    price_change: Optional[PriceChangeWindows] = Field(default=None, alias="priceChange")
    volume: Optional[VolumeWindows] = None

    @field_validator("price_usd")
    @classmethod
    def _price_is_decimal(cls, value: str) -> str:
        try:
            parsed = Decimal(value)
        except InvalidOperation:
            raise ValueError(f"'{value}' is not a decimal number")
        if not parsed.is_finite():
            raise ValueError(f"'{value}' is not a finite decimal number")
        return value

    @property
    def volume_24h(self) -> float:
        """24h volume used for pair selection; missing volume counts as zero."""
        if self.volume is None or self.volume.h24 is None:
            return 0.0
        return self.volume.h24


class RankedEntry(TokenRecord):
    """A coin merged with its best market pair, ready for ranking.

    ``price_change`` and ``volume`` only hold the windows the pair reported.
    """

    unique_id: StrictStr
    color: StrictStr
    best_pair_address: Optional[StrictStr] = None
    price_change: Optional[Dict[str, float]] = None
    volume: Optional[Dict[str, float]] = None
