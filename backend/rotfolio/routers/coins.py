"""Coin rankings router.

The front end re-queries these endpoints on a fixed interval; every request
runs a fresh poll cycle against pump.fun and DexScreener.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from ..models.coin import RankedEntry
from ..services.config import config_service
from ..services.formatting import (
    format_market_cap,
    format_price_change,
    format_volume,
    market_cap_progress,
    screener_url,
    twitter_url,
    window_value,
)
from ..services.rankings import PipelineFailed, RankingService, partition_podium

logger = logging.getLogger(__name__)

router = APIRouter()


class RankedCoinResponse(BaseModel):
    """A ranked coin with its display strings."""
    rank: int
    coin: RankedEntry
    market_cap_display: str
    price_change_24h_display: str
    price_change_1h_display: str
    volume_24h_display: str
    progress_percent: float
    screener_url: Optional[str]
    twitter_url: Optional[str]


class PodiumResponse(BaseModel):
    """Top coins on the podium, the rest as a list."""
    podium: List[RankedCoinResponse]
    list: List[RankedCoinResponse]
    refresh_interval_seconds: int


def get_ranking_service() -> RankingService:
    """Ranking service pointed at the configured sources."""
    return RankingService.from_config(config_service)


def get_coin_addresses() -> List[str]:
    """Configured mint addresses, in display order."""
    return config_service.coin_addresses


def get_refresh_interval() -> int:
    return config_service.refresh_interval_seconds


async def _rank(service: RankingService, addresses: List[str]) -> List[RankedEntry]:
    try:
        return await service.get_ranked_coins(addresses)
    except PipelineFailed as e:
        logger.error(f"Error fetching coins: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to fetch coins"
        )


def _to_response(entry: RankedEntry, rank: int, highest_market_cap: float) -> RankedCoinResponse:
    return RankedCoinResponse(
        rank=rank,
        coin=entry,
        market_cap_display=f"${format_market_cap(entry.usd_market_cap)}",
        price_change_24h_display=format_price_change(window_value(entry.price_change, "h24")),
        price_change_1h_display=format_price_change(window_value(entry.price_change, "h1")),
        volume_24h_display=format_volume(window_value(entry.volume, "h24")),
        progress_percent=market_cap_progress(entry, highest_market_cap),
        screener_url=screener_url(entry),
        twitter_url=twitter_url(entry),
    )


@router.get("", response_model=List[RankedEntry])
async def get_all_coins(
    service: RankingService = Depends(get_ranking_service),
    addresses: List[str] = Depends(get_coin_addresses),
):
    """Get all configured coins ranked by USD market cap."""
    return await _rank(service, addresses)


@router.get("/podium", response_model=PodiumResponse)
async def get_podium(
    service: RankingService = Depends(get_ranking_service),
    addresses: List[str] = Depends(get_coin_addresses),
    refresh_interval_seconds: int = Depends(get_refresh_interval),
):
    """Get the ranked coins split into the podium and the remaining list."""
    ranked = await _rank(service, addresses)
    highest_market_cap = ranked[0].usd_market_cap if ranked else 0.0
    podium, rest = partition_podium(ranked)

    return PodiumResponse(
        podium=[
            _to_response(entry, rank, highest_market_cap)
            for rank, entry in enumerate(podium, start=1)
        ],
        list=[
            _to_response(entry, rank, highest_market_cap)
            for rank, entry in enumerate(rest, start=len(podium) + 1)
        ],
        refresh_interval_seconds=refresh_interval_seconds,
    )
