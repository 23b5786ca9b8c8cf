"""Shared httpx.AsyncClient factory for upstream providers.

One connection pool per process; providers may also be handed their own
client (tests inject one backed by httpx.MockTransport).
"""

import httpx

from config.settings import settings

_http_client: httpx.AsyncClient | None = None


def get_http_client() -> httpx.AsyncClient:
    """Get or create the shared upstream HTTP client."""
    global _http_client  # noqa: PLW0603
    if _http_client is None:
        _http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.UPSTREAM_TIMEOUT_SECONDS),
            headers={"Accept": "application/json"},
        )
    return _http_client


async def close_http_client() -> None:
    """Close the shared upstream HTTP client."""
    global _http_client  # noqa: PLW0603
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None
