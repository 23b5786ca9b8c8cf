"""Wallet address validation."""

import re

from src.pnl_common.errors import InvalidWalletError, MissingWalletError

# Base58 alphabet (no 0, O, I, l); ed25519 public keys encode to 32-44 chars.
_WALLET_RE = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")


def validate_wallet_address(wallet: str | None) -> str:
    """Return the stripped address or raise a 400-class AppError."""
    if wallet is None or not wallet.strip():
        raise MissingWalletError()
    wallet = wallet.strip()
    if not _WALLET_RE.match(wallet):
        raise InvalidWalletError(wallet)
    return wallet
