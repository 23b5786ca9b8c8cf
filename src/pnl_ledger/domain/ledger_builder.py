"""Cost-basis ledger builder: SwapEvents → {asset_id: AssetLedger}.

Pure and order-independent. Running sums use math.fsum (correctly rounded),
so permuting the input never changes a total, not even in the last bit.
The returned dict is keyed in first-seen order.
"""

import math
from collections.abc import Iterable

from src.pnl_ingest.domain.models import SwapEvent
from src.pnl_ledger.domain.models import AssetLedger


def _newest_first(events: Iterable[SwapEvent]) -> tuple[SwapEvent, ...]:
    return tuple(sorted(events, key=lambda e: (-e.timestamp, e.signature)))


def _ledger_for(asset_id: str, events: list[SwapEvent]) -> AssetLedger:
    buys = [e for e in events if e.is_buy]
    sells = [e for e in events if not e.is_buy]
    ordered = _newest_first(events)
    symbol = next((e.symbol for e in ordered if e.symbol), None)
    return AssetLedger(
        asset_id=asset_id,
        total_bought=math.fsum(e.asset_amount for e in buys),
        total_sold=math.fsum(e.asset_amount for e in sells),
        total_buy_cost=math.fsum(e.reference_amount for e in buys),
        total_sell_revenue=math.fsum(e.reference_amount for e in sells),
        events=ordered,
        symbol=symbol,
    )


def build_ledgers(events: Iterable[SwapEvent]) -> dict[str, AssetLedger]:
    grouped: dict[str, list[SwapEvent]] = {}
    for event in events:
        if event.asset_amount <= 0 or event.reference_amount <= 0:
            continue
        grouped.setdefault(event.asset_id, []).append(event)
    return {asset_id: _ledger_for(asset_id, evs) for asset_id, evs in grouped.items()}
