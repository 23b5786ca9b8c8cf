"""Global enums: values are part of the public JSON contract."""

from enum import Enum


class TradeSide(str, Enum):
    """Direction of a swap relative to the queried wallet."""
    BUY = "buy"
    SELL = "sell"


class CacheBackend(str, Enum):
    NONE = "none"
    MEMORY = "memory"
    REDIS = "redis"
