"""Configuration router for the tracked coin list."""

from typing import List
from fastapi import APIRouter
from pydantic import BaseModel

from ..services.config import config_service

router = APIRouter()


class CoinListConfig(BaseModel):
    """Schema for the configured coin list."""
    addresses: List[str]
    refresh_interval_seconds: int


@router.get("/coins", response_model=CoinListConfig)
async def get_coin_list():
    """Get the tracked mint addresses and how often clients should refresh."""
    return CoinListConfig(
        addresses=config_service.coin_addresses,
        refresh_interval_seconds=config_service.refresh_interval_seconds,
    )
