"""Transaction-history provider Protocol: dependency inversion for testability.

Implementations validate the upstream payload shape once and hand back
RawSwapRecord values; callers never see provider JSON.
"""

from typing import Protocol

from src.pnl_ingest.domain.models import RawSwapRecord


class TransactionHistoryProvider(Protocol):
    async def list_swaps(self, wallet: str, limit: int) -> list[RawSwapRecord]: ...
