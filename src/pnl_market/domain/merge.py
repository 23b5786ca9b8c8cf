"""Token-info merge policy.

When several sources (pairs, batches, providers) report the same asset:
  - the first non-zero price wins; a zero never overwrites a non-zero
  - symbol / name / image are taken from the first source that has them

Maps are folded in the order given, so callers pass them in a fixed
(source, batch) order rather than completion order.
"""

from collections.abc import Iterable

from src.pnl_market.domain.models import HoldingSnapshot, TokenInfo


def merge_token_info(existing: TokenInfo, incoming: TokenInfo) -> TokenInfo:
    return TokenInfo(
        symbol=existing.symbol or incoming.symbol,
        name=existing.name or incoming.name,
        price=existing.price if existing.price > 0 else incoming.price,
        image=existing.image or incoming.image,
    )


def merge_into(target: dict[str, TokenInfo], asset_id: str, info: TokenInfo) -> None:
    current = target.get(asset_id)
    target[asset_id] = info if current is None else merge_token_info(current, info)


def merge_token_maps(maps: Iterable[dict[str, TokenInfo]]) -> dict[str, TokenInfo]:
    merged: dict[str, TokenInfo] = {}
    for m in maps:
        for asset_id, info in m.items():
            merge_into(merged, asset_id, info)
    return merged


def snapshot_for(
    asset_id: str,
    token_info: dict[str, TokenInfo],
    holdings: dict[str, float],
) -> HoldingSnapshot:
    """Join price and holding; absence of either is zero."""
    info = token_info.get(asset_id)
    return HoldingSnapshot(
        current_holding=holdings.get(asset_id, 0.0),
        current_price=info.price if info is not None else 0.0,
    )
