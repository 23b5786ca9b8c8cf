"""Unit tests for the trade classifier."""

import pytest

from src.pnl_common.enums import TradeSide
from src.pnl_ingest.domain.classifier import (
    NATIVE_MINT,
    SOL_MINT,
    USDC_MINT,
    classify_swap,
    is_two_sided_swap,
)
from src.pnl_ingest.domain.models import RawSwapRecord, TokenTransfer
from tests.fakes import POOL, WALLET, make_record

MINT = "BonkMint1111111111111111111111111111111111"


class TestDirection:
    def test_asset_into_wallet_is_buy(self) -> None:
        event = classify_swap(make_record("sig", TradeSide.BUY, MINT, 1000, 0.5), WALLET)
        assert event is not None
        assert event.side is TradeSide.BUY
        assert event.asset_id == MINT
        assert event.asset_amount == 1000
        assert event.reference_amount == 0.5
        assert event.unit_price == pytest.approx(0.0005)

    def test_asset_out_of_wallet_is_sell(self) -> None:
        event = classify_swap(make_record("sig", TradeSide.SELL, MINT, 1000, 0.5), WALLET)
        assert event is not None
        assert event.side is TradeSide.SELL

    def test_direction_ignores_reference_leg_destination(self) -> None:
        # SOL also lands in the wallet, but the asset leg goes to the pool.
        record = RawSwapRecord(
            signature="sig",
            timestamp=1,
            transfers=(
                TokenTransfer(SOL_MINT, 1.0, POOL, WALLET),
                TokenTransfer(MINT, 10.0, POOL, POOL),
            ),
        )
        event = classify_swap(record, WALLET)
        assert event is not None
        assert event.side is TradeSide.SELL


class TestNormalization:
    def test_timestamp_converted_to_ms(self) -> None:
        event = classify_swap(
            make_record("sig", TradeSide.BUY, MINT, 1, 1, timestamp=1_700_000_000), WALLET
        )
        assert event is not None
        assert event.timestamp == 1_700_000_000_000

    def test_signed_amounts_are_made_positive(self) -> None:
        record = RawSwapRecord(
            signature="sig",
            timestamp=1,
            transfers=(
                TokenTransfer(SOL_MINT, -2.0, WALLET, POOL),
                TokenTransfer(MINT, -40.0, POOL, WALLET),
            ),
        )
        event = classify_swap(record, WALLET)
        assert event is not None
        assert event.asset_amount == 40.0
        assert event.reference_amount == 2.0

    def test_native_leg_counts_as_reference(self) -> None:
        record = RawSwapRecord(
            signature="sig",
            timestamp=1,
            transfers=(
                TokenTransfer(NATIVE_MINT, 1.0, WALLET, POOL),
                TokenTransfer(MINT, 10.0, POOL, WALLET),
            ),
        )
        assert classify_swap(record, WALLET) is not None

    def test_usdc_is_never_the_traded_asset(self) -> None:
        record = RawSwapRecord(
            signature="sig",
            timestamp=1,
            transfers=(
                TokenTransfer(USDC_MINT, 5.0, WALLET, POOL),
                TokenTransfer(SOL_MINT, 1.0, POOL, WALLET),
                TokenTransfer(MINT, 10.0, POOL, WALLET),
            ),
        )
        event = classify_swap(record, WALLET)
        assert event is not None
        assert event.asset_id == MINT

    def test_symbol_carried_from_asset_leg(self) -> None:
        event = classify_swap(
            make_record("sig", TradeSide.BUY, MINT, 1, 1, symbol="BONK"), WALLET
        )
        assert event is not None
        assert event.symbol == "BONK"


class TestDiscards:
    def test_missing_reference_leg_discarded(self) -> None:
        record = RawSwapRecord(
            signature="sig",
            timestamp=1,
            transfers=(
                TokenTransfer(USDC_MINT, 5.0, WALLET, POOL),
                TokenTransfer(MINT, 10.0, POOL, WALLET),
            ),
        )
        assert classify_swap(record, WALLET) is None

    def test_only_reference_legs_discarded(self) -> None:
        record = RawSwapRecord(
            signature="sig",
            timestamp=1,
            transfers=(
                TokenTransfer(SOL_MINT, 1.0, WALLET, POOL),
                TokenTransfer(NATIVE_MINT, 1.0, POOL, WALLET),
            ),
        )
        assert classify_swap(record, WALLET) is None

    def test_zero_asset_amount_discarded(self) -> None:
        assert classify_swap(make_record("sig", TradeSide.BUY, MINT, 0, 1.0), WALLET) is None

    def test_zero_reference_amount_discarded(self) -> None:
        assert classify_swap(make_record("sig", TradeSide.BUY, MINT, 10, 0), WALLET) is None


class TestTwoSidedGate:
    def test_single_leg_rejected(self) -> None:
        record = RawSwapRecord("sig", 1, (TokenTransfer(MINT, 1.0, POOL, WALLET),))
        assert is_two_sided_swap(record) is False

    def test_non_swap_type_rejected(self) -> None:
        record = make_record("sig", TradeSide.BUY, MINT, 1, 1)
        record = RawSwapRecord(record.signature, record.timestamp, record.transfers, "TRANSFER")
        assert is_two_sided_swap(record) is False

    def test_untyped_record_rejected(self) -> None:
        record = make_record("sig", TradeSide.BUY, MINT, 1, 1)
        record = RawSwapRecord(record.signature, record.timestamp, record.transfers, None)
        assert is_two_sided_swap(record) is False

    def test_two_legged_swap_accepted(self) -> None:
        assert is_two_sided_swap(make_record("sig", TradeSide.BUY, MINT, 1, 1)) is True
