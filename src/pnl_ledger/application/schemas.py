"""Pydantic schemas for the /pnl API.

Portfolio payloads use camelCase keys (`totalPnl`, `avgBuyPrice`, ...);
the filtered trade history keeps its snake_case display shape.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.pnl_common.datetime_utils import epoch_ms_to_iso
from src.pnl_common.enums import TradeSide
from src.pnl_ingest.domain.models import SwapEvent
from src.pnl_ledger.domain.models import AssetPnL, PortfolioSummary


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Portfolio response: {"tokens": [...], "summary": {...}}
# ---------------------------------------------------------------------------


class SwapEventItem(_CamelModel):
    signature: str
    timestamp: int
    type: TradeSide
    token_mint: str
    token_symbol: str
    token_amount: float
    sol_amount: float
    price_per_token: float

    @classmethod
    def from_domain(cls, event: SwapEvent, symbol: str) -> "SwapEventItem":
        return cls(
            signature=event.signature,
            timestamp=event.timestamp,
            type=event.side,
            token_mint=event.asset_id,
            token_symbol=event.symbol or symbol,
            token_amount=event.asset_amount,
            sol_amount=event.reference_amount,
            price_per_token=event.unit_price,
        )


class AssetPnlItem(_CamelModel):
    mint: str
    symbol: str
    name: str
    image: str | None = None
    total_bought: float
    total_sold: float
    total_buy_cost: float
    total_sell_revenue: float
    avg_buy_price: float
    avg_sell_price: float
    realized_pnl: float
    unrealized_pnl: float
    current_holding: float
    current_price: float
    current_value: float
    cost_basis: float
    total_pnl: float
    pnl_percent: float
    trades: list[SwapEventItem]

    @classmethod
    def from_domain(cls, asset: AssetPnL) -> "AssetPnlItem":
        return cls(
            mint=asset.mint,
            symbol=asset.symbol,
            name=asset.name,
            image=asset.image,
            total_bought=asset.total_bought,
            total_sold=asset.total_sold,
            total_buy_cost=asset.total_buy_cost,
            total_sell_revenue=asset.total_sell_revenue,
            avg_buy_price=asset.avg_buy_price,
            avg_sell_price=asset.avg_sell_price,
            realized_pnl=asset.realized_pnl,
            unrealized_pnl=asset.unrealized_pnl,
            current_holding=asset.current_holding,
            current_price=asset.current_price,
            current_value=asset.current_value,
            cost_basis=asset.cost_basis,
            total_pnl=asset.total_pnl,
            pnl_percent=asset.pnl_percent,
            trades=[SwapEventItem.from_domain(e, asset.symbol) for e in asset.trades],
        )


class PortfolioSummaryItem(_CamelModel):
    total_pnl: float
    total_realized: float
    total_unrealized: float
    total_invested: float
    win_rate: float
    total_trades: int
    winning_trades: int
    losing_trades: int

    @classmethod
    def from_domain(cls, summary: PortfolioSummary) -> "PortfolioSummaryItem":
        return cls(
            total_pnl=summary.total_pnl,
            total_realized=summary.total_realized,
            total_unrealized=summary.total_unrealized,
            total_invested=summary.total_invested,
            win_rate=summary.win_rate,
            total_trades=summary.total_trades,
            winning_trades=summary.winning_trades,
            losing_trades=summary.losing_trades,
        )


class PortfolioPnlResponse(BaseModel):
    tokens: list[AssetPnlItem]
    summary: PortfolioSummaryItem


# ---------------------------------------------------------------------------
# Filtered trade history: {"trades": [...]}
# ---------------------------------------------------------------------------


class TradeHistoryItem(BaseModel):
    tx_hash: str
    side: TradeSide
    amount: float     # reference amount on buys, asset amount on sells
    price: float
    created_at: str

    @classmethod
    def from_domain(cls, event: SwapEvent) -> "TradeHistoryItem":
        return cls(
            tx_hash=event.signature,
            side=event.side,
            amount=event.reference_amount if event.is_buy else event.asset_amount,
            price=event.unit_price,
            created_at=epoch_ms_to_iso(event.timestamp),
        )


class TradeHistoryResponse(BaseModel):
    trades: list[TradeHistoryItem]
