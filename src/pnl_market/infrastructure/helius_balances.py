"""Helius balances provider.

GET {base}/v0/addresses/{wallet}/balances  →  {"tokens": [{mint, amount, decimals}], ...}

`amount` is the raw integer balance; quantity = amount / 10**decimals.
"""

import logging
from typing import Any

import httpx

from config.settings import settings
from src.pnl_common.http_client import get_http_client

logger = logging.getLogger(__name__)


def token_quantity(token: dict[str, Any]) -> float | None:
    try:
        amount = float(token["amount"])
        decimals = int(token.get("decimals") or 0)
    except (KeyError, TypeError, ValueError):
        return None
    return amount / (10 ** decimals)


class HeliusBalancesProvider:
    name = "helius-balances"

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

    async def balances(self, wallet: str) -> dict[str, float]:
        url = f"{self._base_url}/v0/addresses/{wallet}/balances"
        response = await self._http().get(url, params={"api-key": self._api_key})
        response.raise_for_status()
        payload = response.json()
        tokens = payload.get("tokens") if isinstance(payload, dict) else None
        if not isinstance(tokens, list):
            logger.warning("Helius balances malformed payload wallet=%s", wallet)
            return {}

        holdings: dict[str, float] = {}
        for token in tokens:
            if not isinstance(token, dict) or not token.get("mint"):
                continue
            quantity = token_quantity(token)
            if quantity is not None:
                holdings[token["mint"]] = quantity
        return holdings
