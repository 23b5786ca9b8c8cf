"""UTC datetime utilities."""

from datetime import datetime, timezone


def epoch_ms_to_iso(epoch_ms: int) -> str:
    """Convert epoch milliseconds to an ISO-8601 UTC string with 'Z' suffix.

    1700000000000 -> '2023-11-14T22:13:20.000Z'
    """
    seconds, millis = divmod(epoch_ms, 1000)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return f"{dt:%Y-%m-%dT%H:%M:%S}.{millis:03d}Z"
