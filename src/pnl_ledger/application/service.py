"""PnlApplicationService: coordinates one /pnl request.

  ingest ──► build ledgers ──┐
         ├─► resolve prices ─┼─► compile ──► rank + summarize
         └─► resolve holdings┘

Only ingestion can fail the request. Price and holdings lookups degrade to
zeros inside their resolvers; the ledger and compile steps are CPU-only and
never suspend.
"""

import asyncio
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from config.settings import settings
from src.pnl_common.cache import NullPnlCache, PnlCache, pnl_cache_key
from src.pnl_common.errors import AppError, InternalError
from src.pnl_ingest.application.ingestor import SwapIngestor
from src.pnl_ingest.domain.models import SwapEvent
from src.pnl_ingest.domain.wallet import validate_wallet_address
from src.pnl_ledger.application.schemas import (
    AssetPnlItem,
    PortfolioPnlResponse,
    PortfolioSummaryItem,
    TradeHistoryItem,
    TradeHistoryResponse,
)
from src.pnl_ledger.domain.compiler import compile_assets, rank_by_abs_pnl, summarize
from src.pnl_ledger.domain.ledger_builder import build_ledgers
from src.pnl_market.application.resolvers import HoldingsResolver, PriceResolver

logger = logging.getLogger(__name__)


@contextmanager
def pipeline_stage(wallet: str, stage: str) -> Iterator[None]:
    """Turn unexpected failures into a generic 500, logged with wallet + stage."""
    try:
        yield
    except AppError:
        raise
    except Exception as exc:
        logger.exception("PnL pipeline failed wallet=%s stage=%s", wallet, stage)
        raise InternalError("Failed to calculate PnL") from exc


class PnlApplicationService:
    def __init__(
        self,
        ingestor: SwapIngestor,
        price_resolver: PriceResolver,
        holdings_resolver: HoldingsResolver,
        cache: PnlCache | None = None,
        cache_ttl_seconds: int | None = None,
    ) -> None:
        self._ingestor = ingestor
        self._prices = price_resolver
        self._holdings = holdings_resolver
        self._cache: PnlCache = cache or NullPnlCache()
        self._cache_ttl = (
            cache_ttl_seconds
            if cache_ttl_seconds is not None
            else settings.PNL_CACHE_TTL_SECONDS
        )

    async def _ingest(self, wallet: str, token: str | None) -> list[SwapEvent]:
        with pipeline_stage(wallet, "ingest"):
            return await self._ingestor.fetch_events(wallet, token)

    async def trade_history(self, wallet: str, token: str) -> TradeHistoryResponse:
        events = await self._ingest(wallet, token)
        with pipeline_stage(wallet, "trades"):
            return TradeHistoryResponse(
                trades=[TradeHistoryItem.from_domain(e) for e in events]
            )

    async def portfolio(self, wallet: str) -> PortfolioPnlResponse:
        events = await self._ingest(wallet, None)

        with pipeline_stage(wallet, "ledger"):
            ledgers = build_ledgers(events)
        asset_ids = list(ledgers)

        with pipeline_stage(wallet, "resolve"):
            token_info, holdings = await asyncio.gather(
                self._prices.resolve(asset_ids),
                self._holdings.resolve(wallet, asset_ids),
            )

        with pipeline_stage(wallet, "compile"):
            assets = compile_assets(ledgers, token_info, holdings)
            summary = summarize(assets)
            return PortfolioPnlResponse(
                tokens=[AssetPnlItem.from_domain(a) for a in rank_by_abs_pnl(assets)],
                summary=PortfolioSummaryItem.from_domain(summary),
            )

    async def get_pnl(self, wallet: str | None, token: str | None = None) -> dict[str, Any]:
        """Entry point for GET /pnl. Returns the JSON document to send."""
        wallet = validate_wallet_address(wallet)
        token = token.strip() if token else None
        key = pnl_cache_key(wallet, token)

        cached = await self._cache.get(key)
        if cached is not None:
            return cached

        if token:
            data = (await self.trade_history(wallet, token)).model_dump(mode="json")
        else:
            data = (await self.portfolio(wallet)).model_dump(mode="json", by_alias=True)

        await self._cache.set(key, data, self._cache_ttl)
        return data
