"""Domain models for pnl_market: pure dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenInfo:
    """Market data for one asset. `price` is in reference-currency terms."""

    symbol: str | None = None
    name: str | None = None
    price: float = 0.0
    image: str | None = None


@dataclass(frozen=True)
class HoldingSnapshot:
    current_holding: float = 0.0
    current_price: float = 0.0
