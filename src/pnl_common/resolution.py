"""Resolved / Unresolved results for degradable upstream lookups.

A leaf lookup never raises into the coordinator. It returns either
Resolved(value) or Unresolved(default, reason), and the join point calls
`coalesce` to get a usable value either way.
"""

import asyncio
import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Resolved(Generic[T]):
    value: T


@dataclass(frozen=True)
class Unresolved(Generic[T]):
    default: T
    reason: str


Result = Resolved[T] | Unresolved[T]


def coalesce(result: Result[T]) -> T:
    if isinstance(result, Resolved):
        return result.value
    return result.default


async def resolve_within(
    awaitable: Awaitable[T],
    default: T,
    timeout: float,
    label: str,
) -> Result[T]:
    """Await `awaitable` with a timeout; any failure becomes Unresolved(default)."""
    try:
        value = await asyncio.wait_for(awaitable, timeout)
    except asyncio.TimeoutError:
        logger.warning("%s timed out after %.1fs", label, timeout)
        return Unresolved(default, "timeout")
    except Exception as exc:
        logger.warning("%s failed: %r", label, exc)
        return Unresolved(default, repr(exc))
    return Resolved(value)
