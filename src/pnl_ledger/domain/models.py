"""Domain models for pnl_ledger: frozen dataclasses, rebuilt per request.

Accounting method: weighted-average cost basis. Acquisition order is
ignored (no FIFO/LIFO lots):

  avg_buy_price = total_buy_cost / total_bought
  realized_pnl  = total_sell_revenue - avg_buy_price * total_sold

A sell-only asset (airdrop, transfer-in) has avg_buy_price 0, so its whole
sell revenue counts as realized profit.
"""

from dataclasses import dataclass

from src.pnl_ingest.domain.models import SwapEvent


@dataclass(frozen=True)
class AssetLedger:
    asset_id: str
    total_bought: float
    total_sold: float
    total_buy_cost: float        # reference currency
    total_sell_revenue: float    # reference currency
    events: tuple[SwapEvent, ...] = ()   # newest first
    symbol: str | None = None            # from the transfer legs, if any

    @property
    def avg_buy_price(self) -> float:
        if self.total_bought == 0:
            return 0.0
        return self.total_buy_cost / self.total_bought

    @property
    def avg_sell_price(self) -> float:
        if self.total_sold == 0:
            return 0.0
        return self.total_sell_revenue / self.total_sold

    @property
    def realized_pnl(self) -> float:
        return self.total_sell_revenue - self.avg_buy_price * self.total_sold


@dataclass(frozen=True)
class AssetPnL:
    mint: str
    symbol: str
    name: str
    image: str | None
    total_bought: float
    total_sold: float
    total_buy_cost: float
    total_sell_revenue: float
    avg_buy_price: float
    avg_sell_price: float
    realized_pnl: float
    current_holding: float
    current_price: float
    current_value: float
    cost_basis: float
    unrealized_pnl: float
    total_pnl: float
    pnl_percent: float
    trades: tuple[SwapEvent, ...] = ()

    @property
    def invested(self) -> float:
        return self.avg_buy_price * self.total_bought


@dataclass(frozen=True)
class PortfolioSummary:
    total_pnl: float = 0.0
    total_realized: float = 0.0
    total_unrealized: float = 0.0
    total_invested: float = 0.0
    win_rate: float = 0.0
    total_trades: int = 0        # number of assets
    winning_trades: int = 0
    losing_trades: int = 0
