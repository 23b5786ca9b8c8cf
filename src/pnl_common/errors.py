"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Client input (wallet / query params)
  9xxx: System / upstream
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Client input ---

class MissingWalletError(AppError):
    def __init__(self) -> None:
        super().__init__(1001, "Wallet address required", 400)


class InvalidWalletError(AppError):
    def __init__(self, wallet: str) -> None:
        super().__init__(1002, f"Invalid wallet address: {wallet}", 400)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


class UpstreamUnavailableError(AppError):
    def __init__(self, provider: str) -> None:
        super().__init__(9003, f"Upstream provider unavailable: {provider}", 500)
