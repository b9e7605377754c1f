"""Display formatting for leaderboard entries."""

from typing import Optional

from ..models.coin import RankedEntry

DEXSCREENER_WEB_URL = "https://dexscreener.com/solana"
TWITTER_URL = "https://twitter.com"


def _scaled(value: float) -> str:
    if value >= 1_000_000:
        return f"{value / 1_000_000:.2f}M"
    if value >= 1_000:
        return f"{value / 1_000:.2f}K"
    return f"{value:.2f}"


def format_market_cap(market_cap: float) -> str:
    """Format a market cap, e.g. 1_500_000 -> "1.50M"."""
    return _scaled(market_cap)


def format_price_change(change: Optional[float]) -> str:
    """Format a percentage change with its sign; missing data is "N/A"."""
    if change is None:
        return "N/A"
    if change == 0:
        change = 0.0  # drop the sign of -0.0
    sign = "+" if change >= 0 else ""
    return f"{sign}{change:.2f}%"


def format_volume(volume: Optional[float]) -> str:
    """Format a USD volume; missing volume shows as zero."""
    return f"${_scaled(volume or 0.0)}"


def market_cap_progress(entry: RankedEntry, highest_market_cap: float) -> float:
    """Market cap as a percentage of the leader's."""
    if highest_market_cap <= 0:
        return 0.0
    return entry.usd_market_cap / highest_market_cap * 100


def screener_url(entry: RankedEntry) -> Optional[str]:
    """DexScreener page for the best pair, falling back to the coin's own pool."""
    address = entry.best_pair_address or entry.raydium_pool
    if not address:
        return None
    return f"{DEXSCREENER_WEB_URL}/{address}"


def twitter_url(entry: RankedEntry) -> Optional[str]:
    if not entry.twitter:
        return None
    return f"{TWITTER_URL}/{entry.twitter}"


def window_value(windows: Optional[dict], window: str) -> Optional[float]:
    if not windows:
        return None
    return windows.get(window)
