"""FastAPI dependency wiring for the PnL service.

The default service talks to Helius (history + balances) and DexScreener
(prices). Tests replace `get_pnl_service` through app.dependency_overrides.
"""

from config.settings import settings
from src.pnl_common.cache import InMemoryPnlCache, NullPnlCache, PnlCache, RedisPnlCache
from src.pnl_common.enums import CacheBackend
from src.pnl_common.redis_client import get_redis
from src.pnl_ingest.application.ingestor import SwapIngestor
from src.pnl_ingest.infrastructure.helius_transactions import HeliusTransactionProvider
from src.pnl_ledger.application.service import PnlApplicationService
from src.pnl_market.application.resolvers import HoldingsResolver, PriceResolver
from src.pnl_market.infrastructure.dexscreener import DexScreenerProvider
from src.pnl_market.infrastructure.helius_balances import HeliusBalancesProvider

_service: PnlApplicationService | None = None


async def build_pnl_cache(backend: CacheBackend) -> PnlCache:
    if backend is CacheBackend.REDIS:
        return RedisPnlCache(await get_redis())
    if backend is CacheBackend.MEMORY:
        return InMemoryPnlCache()
    return NullPnlCache()


async def build_default_service() -> PnlApplicationService:
    return PnlApplicationService(
        ingestor=SwapIngestor(HeliusTransactionProvider()),
        price_resolver=PriceResolver([DexScreenerProvider()]),
        holdings_resolver=HoldingsResolver(HeliusBalancesProvider()),
        cache=await build_pnl_cache(CacheBackend(settings.PNL_CACHE_BACKEND)),
    )


async def get_pnl_service() -> PnlApplicationService:
    """Get or create the process-wide PnL service."""
    global _service  # noqa: PLW0603
    if _service is None:
        _service = await build_default_service()
    return _service
