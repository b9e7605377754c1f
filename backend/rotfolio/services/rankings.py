"""Ranking pipeline: fetch, merge and order the configured coins.

Every configured mint runs its own fetch-merge chain:

    pump.fun coin -> DexScreener pairs (best effort) -> merge

All chains are launched together and joined once. Primary (pump.fun) data is
all-or-nothing for the cycle; market data only enriches an entry and its
failure never drops the coin.
"""

import asyncio
import logging
from typing import List, Optional, Sequence, Tuple

import aiohttp

from ..models.coin import MarketSample, RankedEntry
from .config import ConfigService
from .dexscreener import DEFAULT_DEXSCREENER_URL, DexScreenerClient, MarketFetchFailed
from .merge import COLOR_PALETTE, merge_entry
from .pump_fun import DEFAULT_PUMP_FUN_URL, FetchFailed, PumpFunClient

logger = logging.getLogger(__name__)

PODIUM_SIZE = 3


class PipelineFailed(Exception):
    """Raised when one or more coins could not be fetched from pump.fun."""

    def __init__(self, failures: List[FetchFailed]):
        self.failures = failures
        identifiers = ", ".join(f.identifier for f in failures)
        super().__init__(f"Failed to fetch {len(failures)} coin(s): {identifiers}")

    @property
    def failed_identifiers(self) -> List[str]:
        return [f.identifier for f in self.failures]


def sort_by_market_cap(entries: Sequence[RankedEntry]) -> List[RankedEntry]:
    """Order entries by USD market cap, highest first.

    The sort is stable, so equal market caps keep their configuration order.
    """
    return sorted(entries, key=lambda entry: entry.usd_market_cap, reverse=True)


def partition_podium(
    entries: Sequence[RankedEntry],
    size: int = PODIUM_SIZE,
) -> Tuple[List[RankedEntry], List[RankedEntry]]:
    """Split ranked entries into the podium and the remaining list."""
    return list(entries[:size]), list(entries[size:])


class RankingService:
    """Builds the ranked coin list for one poll cycle."""

    def __init__(
        self,
        pump_fun: Optional[PumpFunClient] = None,
        dexscreener: Optional[DexScreenerClient] = None,
        palette: Sequence[str] = COLOR_PALETTE,
        request_timeout_seconds: Optional[float] = None,
    ):
        self.pump_fun = pump_fun or PumpFunClient()
        self.dexscreener = dexscreener or DexScreenerClient()
        self.palette = tuple(palette)
        self.request_timeout_seconds = request_timeout_seconds

    @classmethod
    def from_config(cls, config: ConfigService) -> "RankingService":
        """Build a service pointed at the configured source hosts."""
        return cls(
            pump_fun=PumpFunClient(config.get("sources.pump_fun.base_url", DEFAULT_PUMP_FUN_URL)),
            dexscreener=DexScreenerClient(config.get("sources.dexscreener.base_url", DEFAULT_DEXSCREENER_URL)),
            request_timeout_seconds=config.get("sources.request_timeout_seconds"),
        )

    def _create_session(self) -> aiohttp.ClientSession:
        if self.request_timeout_seconds is None:
            return aiohttp.ClientSession()
        return aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.request_timeout_seconds)
        )

    async def _fetch_best_pair(
        self,
        session: aiohttp.ClientSession,
        identifier: str,
    ) -> Optional[MarketSample]:
        try:
            return await self.dexscreener.fetch_best_pair(session, identifier)
        except MarketFetchFailed as e:
            logger.warning(f"No market data for {identifier}: {e.cause}")
            return None

    async def _build_entry(
        self,
        session: aiohttp.ClientSession,
        address: str,
        index: int,
    ) -> RankedEntry:
        record = await self.pump_fun.fetch_coin(session, address)
        # Pairs are looked up by the mint pump.fun resolved, not the raw config entry
        sample = await self._fetch_best_pair(session, record.mint)
        return merge_entry(record, sample, index, self.palette)

    async def get_ranked_coins(self, addresses: Sequence[str]) -> List[RankedEntry]:
        """Fetch, merge and rank every configured coin.

        Args:
            addresses: Ordered mint addresses; duplicates are allowed and
                produce separate entries.

        Returns:
            Entries sorted by USD market cap, highest first.

        Raises:
            PipelineFailed: If any pump.fun fetch failed. No partial result is
                returned.
        """
        async with self._create_session() as session:
            results = await asyncio.gather(
                *(
                    self._build_entry(session, address, index)
                    for index, address in enumerate(addresses)
                ),
                return_exceptions=True,
            )

        entries: List[RankedEntry] = []
        failures: List[FetchFailed] = []
        for result in results:
            if isinstance(result, FetchFailed):
                logger.error(f"Error fetching coin: {result}")
                failures.append(result)
            elif isinstance(result, BaseException):
                raise result
            else:
                entries.append(result)

        if failures:
            raise PipelineFailed(failures) from failures[0]

        ranked = sort_by_market_cap(entries)
        with_market = sum(1 for entry in ranked if entry.best_pair_address is not None)
        logger.info(f"Ranked {len(ranked)} coins ({with_market} with market data)")
        return ranked
