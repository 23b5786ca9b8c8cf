"""Pydantic schemas for the Helius enhanced-transactions payload.

Only the fields the classifier needs are declared; everything else is
ignored. A record that fails validation is skipped by the caller.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.pnl_ingest.domain.models import RawSwapRecord, TokenTransfer


class HeliusTokenTransfer(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    mint: str
    token_amount: float = Field(0.0, alias="tokenAmount")
    from_user_account: str | None = Field(None, alias="fromUserAccount")
    to_user_account: str | None = Field(None, alias="toUserAccount")
    symbol: str | None = None

    @field_validator("token_amount", mode="before")
    @classmethod
    def _none_amount_is_zero(cls, v: Any) -> Any:
        return 0.0 if v is None else v

    def to_domain(self) -> TokenTransfer:
        return TokenTransfer(
            mint=self.mint,
            amount=self.token_amount,
            from_account=self.from_user_account,
            to_account=self.to_user_account,
            symbol=self.symbol,
        )


class HeliusTransaction(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    signature: str
    timestamp: int
    type: str | None = None
    token_transfers: list[HeliusTokenTransfer] = Field(
        default_factory=list, alias="tokenTransfers"
    )

    @field_validator("token_transfers", mode="before")
    @classmethod
    def _none_transfers_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    def to_domain(self) -> RawSwapRecord:
        return RawSwapRecord(
            signature=self.signature,
            timestamp=self.timestamp,
            transfers=tuple(t.to_domain() for t in self.token_transfers),
            type=self.type,
        )
