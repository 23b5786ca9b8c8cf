from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Helius (transaction history + balances)
    HELIUS_API_KEY: str = ""
    HELIUS_BASE_URL: str = "https://api.helius.xyz"

    # DexScreener (price + token metadata)
    DEXSCREENER_BASE_URL: str = "https://api.dexscreener.com"
    DEXSCREENER_CHAIN: str = "solana"

    # Pipeline bounds
    SWAP_HISTORY_LIMIT: int = 100
    PRICE_BATCH_SIZE: int = 30
    UPSTREAM_TIMEOUT_SECONDS: float = 5.0

    # Response cache (latency only)
    PNL_CACHE_BACKEND: Literal["none", "memory", "redis"] = "none"
    PNL_CACHE_TTL_SECONDS: int = 15
    REDIS_URL: str = "redis://localhost:6379/0"

    # App
    APP_NAME: str = "Wallet PnL"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev
    LOG_LEVEL: str = "INFO"


settings = Settings()
