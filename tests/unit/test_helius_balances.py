"""Unit tests for the Helius balances provider (httpx.MockTransport)."""

import httpx
import pytest

from src.pnl_market.infrastructure.helius_balances import HeliusBalancesProvider, token_quantity
from tests.fakes import WALLET

MINT_A = "MintA111111111111111111111111111111111111"
MINT_B = "MintB111111111111111111111111111111111111"


def _provider(handler) -> HeliusBalancesProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HeliusBalancesProvider(api_key="k", base_url="https://helius.test", client=client)


async def test_scales_raw_amount_by_decimals() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == f"/v0/addresses/{WALLET}/balances"
        return httpx.Response(200, json={
            "nativeBalance": 1_000_000_000,
            "tokens": [
                {"mint": MINT_A, "amount": 150_000_000, "decimals": 6},
                {"mint": MINT_B, "amount": 42, "decimals": 0},
            ],
        })

    balances = await _provider(handler).balances(WALLET)
    assert balances == {MINT_A: pytest.approx(150.0), MINT_B: 42.0}


async def test_malformed_tokens_skipped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"tokens": [
            {"mint": MINT_A},
            {"amount": 5, "decimals": 0},
            "junk",
            {"mint": MINT_B, "amount": 5, "decimals": 1},
        ]})

    assert await _provider(handler).balances(WALLET) == {MINT_B: 0.5}


async def test_missing_tokens_key_is_empty() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"error": "unknown"})

    assert await _provider(handler).balances(WALLET) == {}


async def test_http_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="oops")

    with pytest.raises(httpx.HTTPStatusError):
        await _provider(handler).balances(WALLET)


def test_token_quantity_null_decimals_treated_as_zero() -> None:
    assert token_quantity({"mint": "m", "amount": 3, "decimals": None}) == 3.0
