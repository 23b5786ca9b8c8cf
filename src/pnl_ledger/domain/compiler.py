"""PnL compiler: AssetLedger + HoldingSnapshot → AssetPnL → PortfolioSummary.

Per asset:
  current_value  = current_holding * current_price
  cost_basis     = avg_buy_price * current_holding
  unrealized_pnl = current_value - cost_basis
  total_pnl      = realized_pnl + unrealized_pnl
  pnl_percent    = total_pnl / total_buy_cost * 100   (0 when nothing was bought)

An asset with no price data keeps its row: current_value is 0 and the
whole cost basis of the held quantity shows as unrealized loss.
"""

import math
from collections.abc import Sequence

from src.pnl_ledger.domain.models import AssetLedger, AssetPnL, PortfolioSummary
from src.pnl_market.domain.merge import snapshot_for
from src.pnl_market.domain.models import HoldingSnapshot, TokenInfo

UNKNOWN_SYMBOL = "???"


def compile_asset_pnl(
    ledger: AssetLedger,
    snapshot: HoldingSnapshot,
    info: TokenInfo | None = None,
) -> AssetPnL:
    avg_buy_price = ledger.avg_buy_price
    realized_pnl = ledger.realized_pnl
    current_value = snapshot.current_holding * snapshot.current_price
    cost_basis = avg_buy_price * snapshot.current_holding
    unrealized_pnl = current_value - cost_basis
    total_pnl = realized_pnl + unrealized_pnl
    pnl_percent = (
        total_pnl / ledger.total_buy_cost * 100 if ledger.total_buy_cost > 0 else 0.0
    )

    fallback_symbol = ledger.symbol or UNKNOWN_SYMBOL
    symbol = (info.symbol if info else None) or fallback_symbol
    name = (info.name if info else None) or fallback_symbol

    return AssetPnL(
        mint=ledger.asset_id,
        symbol=symbol,
        name=name,
        image=info.image if info else None,
        total_bought=ledger.total_bought,
        total_sold=ledger.total_sold,
        total_buy_cost=ledger.total_buy_cost,
        total_sell_revenue=ledger.total_sell_revenue,
        avg_buy_price=avg_buy_price,
        avg_sell_price=ledger.avg_sell_price,
        realized_pnl=realized_pnl,
        current_holding=snapshot.current_holding,
        current_price=snapshot.current_price,
        current_value=current_value,
        cost_basis=cost_basis,
        unrealized_pnl=unrealized_pnl,
        total_pnl=total_pnl,
        pnl_percent=pnl_percent,
        trades=ledger.events,
    )


def compile_assets(
    ledgers: dict[str, AssetLedger],
    token_info: dict[str, TokenInfo],
    holdings: dict[str, float],
) -> list[AssetPnL]:
    """One AssetPnL per ledger, in ledger (first-seen) order."""
    return [
        compile_asset_pnl(
            ledger,
            snapshot_for(asset_id, token_info, holdings),
            token_info.get(asset_id),
        )
        for asset_id, ledger in ledgers.items()
    ]


def rank_by_abs_pnl(assets: Sequence[AssetPnL]) -> list[AssetPnL]:
    """Largest absolute swing first. sorted() is stable, ties keep input order."""
    return sorted(assets, key=lambda a: abs(a.total_pnl), reverse=True)


def summarize(assets: Sequence[AssetPnL]) -> PortfolioSummary:
    if not assets:
        return PortfolioSummary()
    winning = sum(1 for a in assets if a.total_pnl > 0)
    losing = sum(1 for a in assets if a.total_pnl < 0)
    return PortfolioSummary(
        total_pnl=math.fsum(a.total_pnl for a in assets),
        total_realized=math.fsum(a.realized_pnl for a in assets),
        total_unrealized=math.fsum(a.unrealized_pnl for a in assets),
        total_invested=math.fsum(a.invested for a in assets),
        win_rate=winning / len(assets) * 100,
        total_trades=len(assets),
        winning_trades=winning,
        losing_trades=losing,
    )
