"""DexScreener market-data provider.

GET {base}/tokens/v1/{chain}/{id1,id2,...}  →  list of trading pairs

Each pair carries a baseToken (address/symbol/name), a priceNative string
(price in the chain's native currency) and optional info.imageUrl. An asset
usually appears in several pairs; they are merged with the token-info policy.
"""

import logging
import math
from typing import Any

import httpx

from config.settings import settings
from src.pnl_common.http_client import get_http_client
from src.pnl_market.domain.merge import merge_into
from src.pnl_market.domain.models import TokenInfo

logger = logging.getLogger(__name__)


def _parse_price(raw: Any) -> float:
    try:
        price = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return price if math.isfinite(price) and price > 0 else 0.0


def pair_to_token_info(pair: dict[str, Any]) -> tuple[str, TokenInfo] | None:
    base = pair.get("baseToken")
    if not isinstance(base, dict) or not base.get("address"):
        return None
    info = pair.get("info") if isinstance(pair.get("info"), dict) else {}
    return base["address"], TokenInfo(
        symbol=base.get("symbol") or None,
        name=base.get("name") or None,
        price=_parse_price(pair.get("priceNative")),
        image=info.get("imageUrl") or None,
    )


class DexScreenerProvider:
    name = "dexscreener"

    def __init__(
        self,
        base_url: str | None = None,
        chain: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.DEXSCREENER_BASE_URL).rstrip("/")
        self._chain = chain or settings.DEXSCREENER_CHAIN
        self._client = client

    def _http(self) -> httpx.AsyncClient:
        return self._client or get_http_client()

    async def batch_price(self, asset_ids: list[str]) -> dict[str, TokenInfo]:
        if not asset_ids:
            return {}
        url = f"{self._base_url}/tokens/v1/{self._chain}/{','.join(asset_ids)}"
        response = await self._http().get(url)
        response.raise_for_status()
        pairs = response.json()
        if not isinstance(pairs, list):
            logger.warning("DexScreener malformed payload for %d ids", len(asset_ids))
            return {}

        requested = set(asset_ids)
        result: dict[str, TokenInfo] = {}
        for pair in pairs:
            if not isinstance(pair, dict):
                continue
            parsed = pair_to_token_info(pair)
            if parsed is None or parsed[0] not in requested:
                continue
            merge_into(result, *parsed)
        return result
