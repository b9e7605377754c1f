"""Merging of coin records with their selected market pair."""

from typing import Optional, Sequence

from ..models.coin import MarketSample, RankedEntry, TokenRecord

# Cycled by configuration position, not by rank
COLOR_PALETTE = ("bg-blue-400", "bg-blue-500", "bg-blue-600")


def make_unique_id(identifier: str, index: int) -> str:
    """Key an entry by mint and configuration position."""
    return f"{identifier}-{index}"


def pick_color(index: int, palette: Sequence[str] = COLOR_PALETTE) -> str:
    return palette[index % len(palette)]


def merge_entry(
    record: TokenRecord,
    sample: Optional[MarketSample],
    index: int,
    palette: Sequence[str] = COLOR_PALETTE,
) -> RankedEntry:
    """Combine a coin with its best pair (or none) into a RankedEntry.

    Args:
        record: Validated pump.fun coin
        sample: Selected DexScreener pair, None when there is no market data
        index: Position of the coin in the configured list
        palette: Colors cycled by position

    Returns:
        The merged entry. Windows missing from the pair stay missing; nothing
        is zero-filled here.
    """
    fields = record.model_dump()
    fields["unique_id"] = make_unique_id(record.mint, index)
    fields["color"] = pick_color(index, palette)

    if sample is not None:
        fields["best_pair_address"] = sample.pair_address
        if sample.price_change is not None:
            fields["price_change"] = sample.price_change.model_dump(exclude_none=True)
        if sample.volume is not None:
            fields["volume"] = sample.volume.model_dump(exclude_none=True)

    return RankedEntry(**fields)
