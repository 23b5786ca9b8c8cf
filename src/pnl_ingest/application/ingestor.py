"""SwapIngestor: fetch a bounded history window and classify it into SwapEvents."""

import logging

from config.settings import settings
from src.pnl_ingest.domain.classifier import classify_swap, is_two_sided_swap
from src.pnl_ingest.domain.models import SwapEvent
from src.pnl_ingest.domain.provider import TransactionHistoryProvider
from src.pnl_ingest.domain.wallet import validate_wallet_address

logger = logging.getLogger(__name__)


class SwapIngestor:
    def __init__(
        self,
        provider: TransactionHistoryProvider,
        limit: int | None = None,
    ) -> None:
        self._provider = provider
        self._limit = limit or settings.SWAP_HISTORY_LIMIT

    async def fetch_events(
        self, wallet: str | None, token_filter: str | None = None
    ) -> list[SwapEvent]:
        wallet = validate_wallet_address(wallet)
        records = await self._provider.list_swaps(wallet, self._limit)

        events: list[SwapEvent] = []
        for record in records:
            if not is_two_sided_swap(record):
                continue
            event = classify_swap(record, wallet)
            if event is None:
                continue
            if token_filter and event.asset_id != token_filter:
                continue
            events.append(event)

        logger.debug(
            "ingested wallet=%s records=%d events=%d", wallet, len(records), len(events)
        )
        return events
