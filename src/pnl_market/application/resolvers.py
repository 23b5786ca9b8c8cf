"""Price & metadata resolver and holdings resolver.

Both are the latency-dominant stage of a /pnl request. Every upstream call
runs under its own timeout and degrades to "no data" on failure, so a slow
or broken provider costs precision, never the whole response.

Fan-out:
  price    one task per (source, batch of <= PRICE_BATCH_SIZE ids)
  holdings one task per wallet
Each task returns its own map; maps are merged single-threaded afterward.
"""

import asyncio
import logging
from collections.abc import Sequence

from config.settings import settings
from src.pnl_common.resolution import Result, Unresolved, coalesce, resolve_within
from src.pnl_market.domain.merge import merge_token_maps
from src.pnl_market.domain.models import TokenInfo
from src.pnl_market.domain.provider import HoldingsProvider, MarketDataProvider

logger = logging.getLogger(__name__)


def chunk(ids: Sequence[str], size: int) -> list[list[str]]:
    if size <= 0:
        raise ValueError(f"batch size must be positive, got {size}")
    return [list(ids[i:i + size]) for i in range(0, len(ids), size)]


class PriceResolver:
    def __init__(
        self,
        sources: Sequence[MarketDataProvider],
        batch_size: int | None = None,
        timeout: float | None = None,
    ) -> None:
        self._sources = list(sources)
        self._batch_size = batch_size or settings.PRICE_BATCH_SIZE
        self._timeout = timeout or settings.UPSTREAM_TIMEOUT_SECONDS

    async def _fetch_batch(
        self, source: MarketDataProvider, batch: list[str]
    ) -> Result[dict[str, TokenInfo]]:
        return await resolve_within(
            source.batch_price(batch),
            default={},
            timeout=self._timeout,
            label=f"{source.name} price batch (size={len(batch)})",
        )

    async def resolve(self, asset_ids: Sequence[str]) -> dict[str, TokenInfo]:
        ids = list(dict.fromkeys(asset_ids))
        if not ids or not self._sources:
            return {}
        batches = chunk(ids, self._batch_size)
        results = await asyncio.gather(
            *(self._fetch_batch(src, b) for src in self._sources for b in batches)
        )
        degraded = sum(1 for r in results if isinstance(r, Unresolved))
        if degraded:
            logger.info("price resolution degraded: %d/%d batches", degraded, len(results))
        # gather preserves submission order: (source, batch)
        return merge_token_maps(coalesce(r) for r in results)


class HoldingsResolver:
    def __init__(self, provider: HoldingsProvider, timeout: float | None = None) -> None:
        self._provider = provider
        self._timeout = timeout or settings.UPSTREAM_TIMEOUT_SECONDS

    async def resolve(self, wallet: str, asset_ids: Sequence[str]) -> dict[str, float]:
        if not asset_ids:
            return {}
        result = await resolve_within(
            self._provider.balances(wallet),
            default={},
            timeout=self._timeout,
            label=f"{self._provider.name} balances wallet={wallet}",
        )
        balances = coalesce(result)
        wanted = set(asset_ids)
        return {mint: qty for mint, qty in balances.items() if mint in wanted}
