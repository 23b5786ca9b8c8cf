"""Domain models for pnl_ingest: pure dataclasses, no provider payload shapes."""

from dataclasses import dataclass

from src.pnl_common.enums import TradeSide


@dataclass(frozen=True)
class TokenTransfer:
    """One asset leg of a ledger transaction."""

    mint: str
    amount: float                 # as reported by the provider, may be signed
    from_account: str | None = None
    to_account: str | None = None
    symbol: str | None = None


@dataclass(frozen=True)
class RawSwapRecord:
    """A provider transaction already validated against the fixed schema."""

    signature: str
    timestamp: int                # epoch seconds
    transfers: tuple[TokenTransfer, ...]
    type: str | None = "SWAP"


@dataclass(frozen=True)
class SwapEvent:
    signature: str
    timestamp: int                # epoch milliseconds
    side: TradeSide
    asset_id: str
    asset_amount: float           # > 0
    reference_amount: float       # > 0, native currency
    symbol: str | None = None     # symbol carried on the transfer leg, if any

    @property
    def unit_price(self) -> float:
        return self.reference_amount / self.asset_amount

    @property
    def is_buy(self) -> bool:
        return self.side is TradeSide.BUY
