"""Trade classifier: RawSwapRecord → SwapEvent, or discard.

Pure and local: a record that cannot be classified is dropped (None),
never raised.

Direction rule:
  buy  iff the traded asset leg's destination account is the queried wallet
  sell otherwise
"""

from src.pnl_common.enums import TradeSide
from src.pnl_ingest.domain.models import RawSwapRecord, SwapEvent, TokenTransfer

SOL_MINT = "So11111111111111111111111111111111111111112"
NATIVE_MINT = "native"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"

REFERENCE_MINTS = frozenset({SOL_MINT, NATIVE_MINT})
NON_ASSET_MINTS = REFERENCE_MINTS | {USDC_MINT}


def is_two_sided_swap(record: RawSwapRecord) -> bool:
    """Normalization gate: a swap-tagged record with at least two legs."""
    if record.type != "SWAP":
        return False
    return len(record.transfers) >= 2


def find_reference_leg(record: RawSwapRecord) -> TokenTransfer | None:
    return next((t for t in record.transfers if t.mint in REFERENCE_MINTS), None)


def find_asset_leg(record: RawSwapRecord) -> TokenTransfer | None:
    return next((t for t in record.transfers if t.mint not in NON_ASSET_MINTS), None)


def classify_swap(record: RawSwapRecord, wallet: str) -> SwapEvent | None:
    asset_leg = find_asset_leg(record)
    if asset_leg is None:
        return None
    reference_leg = find_reference_leg(record)
    if reference_leg is None:
        return None

    asset_amount = abs(asset_leg.amount)
    reference_amount = abs(reference_leg.amount)
    if asset_amount == 0 or reference_amount == 0:
        return None

    side = TradeSide.BUY if asset_leg.to_account == wallet else TradeSide.SELL
    return SwapEvent(
        signature=record.signature,
        timestamp=record.timestamp * 1000,
        side=side,
        asset_id=asset_leg.mint,
        asset_amount=asset_amount,
        reference_amount=reference_amount,
        symbol=asset_leg.symbol,
    )
