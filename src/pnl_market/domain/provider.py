"""Market-data and holdings provider Protocols."""

from typing import Protocol

from src.pnl_market.domain.models import TokenInfo


class MarketDataProvider(Protocol):
    name: str

    async def batch_price(self, asset_ids: list[str]) -> dict[str, TokenInfo]: ...


class HoldingsProvider(Protocol):
    name: str

    async def balances(self, wallet: str) -> dict[str, float]: ...
