"""Helius transaction-history provider.

GET {base}/v0/addresses/{wallet}/transactions?type=SWAP&limit=N

Failure policy:
  - transport error / timeout          → UpstreamUnavailableError (HTTP 500)
  - non-list or undecodable payload    → [] (a wallet with no trades is valid)
  - individual record fails the schema → that record is skipped
"""

import logging

import httpx
from pydantic import ValidationError

from config.settings import settings
from src.pnl_common.errors import UpstreamUnavailableError
from src.pnl_common.http_client import get_http_client
from src.pnl_ingest.domain.models import RawSwapRecord
from src.pnl_ingest.infrastructure.helius_schemas import HeliusTransaction

logger = logging.getLogger(__name__)


class HeliusTransactionProvider:
    name = "helius"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key if api_key is not None else settings.HELIUS_API_KEY
        self._base_url = (base_url or settings.HELIUS_BASE_URL).rstrip("/")
        self._client = client

    def _http(self) -> httpx.AsyncClient:
        return self._client or get_http_client()

    async def list_swaps(self, wallet: str, limit: int) -> list[RawSwapRecord]:
        url = f"{self._base_url}/v0/addresses/{wallet}/transactions"
        params = {"api-key": self._api_key, "type": "SWAP", "limit": limit}
        try:
            response = await self._http().get(url, params=params)
        except httpx.TransportError as exc:
            logger.error("Helius transactions unreachable wallet=%s: %r", wallet, exc)
            raise UpstreamUnavailableError(self.name) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None
        if not isinstance(payload, list):
            logger.warning(
                "Helius transactions malformed payload wallet=%s status=%d",
                wallet,
                response.status_code,
            )
            return []

        records: list[RawSwapRecord] = []
        for item in payload[:limit]:
            try:
                records.append(HeliusTransaction.model_validate(item).to_domain())
            except ValidationError:
                continue
        return records
