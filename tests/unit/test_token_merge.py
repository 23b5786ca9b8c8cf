"""Unit tests for the token-info merge policy and holding snapshots."""

from src.pnl_market.domain.merge import (
    merge_into,
    merge_token_info,
    merge_token_maps,
    snapshot_for,
)
from src.pnl_market.domain.models import HoldingSnapshot, TokenInfo


class TestMergeTokenInfo:
    def test_first_non_zero_price_wins(self) -> None:
        merged = merge_token_info(TokenInfo(price=0.5), TokenInfo(price=0.9))
        assert merged.price == 0.5

    def test_zero_never_overwrites_non_zero(self) -> None:
        merged = merge_token_info(TokenInfo(price=0.5), TokenInfo(price=0.0))
        assert merged.price == 0.5

    def test_non_zero_replaces_zero(self) -> None:
        merged = merge_token_info(TokenInfo(symbol="A", price=0.0), TokenInfo(price=0.3))
        assert merged.price == 0.3
        assert merged.symbol == "A"

    def test_missing_metadata_filled(self) -> None:
        merged = merge_token_info(
            TokenInfo(symbol="A", price=1.0),
            TokenInfo(symbol="B", name="Alpha", image="https://img/a.png"),
        )
        assert merged.symbol == "A"
        assert merged.name == "Alpha"
        assert merged.image == "https://img/a.png"


class TestMergeMaps:
    def test_disjoint_batches_union(self) -> None:
        merged = merge_token_maps([
            {"a": TokenInfo(price=1.0)},
            {"b": TokenInfo(price=2.0)},
        ])
        assert set(merged) == {"a", "b"}

    def test_batch_completion_order_irrelevant_for_disjoint_ids(self) -> None:
        b1 = {"a": TokenInfo(price=1.0)}
        b2 = {"b": TokenInfo(price=2.0)}
        assert merge_token_maps([b1, b2]) == merge_token_maps([b2, b1])

    def test_zero_then_non_zero_across_sources(self) -> None:
        merged = merge_token_maps([
            {"a": TokenInfo(symbol="A", price=0.0)},
            {"a": TokenInfo(symbol="A2", price=0.4)},
        ])
        assert merged["a"] == TokenInfo(symbol="A", price=0.4)

    def test_merge_into_inserts_new_key(self) -> None:
        target: dict[str, TokenInfo] = {}
        merge_into(target, "a", TokenInfo(price=1.0))
        assert target == {"a": TokenInfo(price=1.0)}


class TestSnapshotFor:
    def test_joins_price_and_holding(self) -> None:
        snap = snapshot_for("a", {"a": TokenInfo(price=0.02)}, {"a": 100.0})
        assert snap == HoldingSnapshot(current_holding=100.0, current_price=0.02)

    def test_absent_everywhere_is_zero(self) -> None:
        assert snapshot_for("a", {}, {}) == HoldingSnapshot(0.0, 0.0)

    def test_holding_without_price(self) -> None:
        snap = snapshot_for("a", {}, {"a": 5.0})
        assert snap.current_holding == 5.0
        assert snap.current_price == 0.0
