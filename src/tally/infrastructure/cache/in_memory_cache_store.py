"""Process-local report cache stores."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

logger = logging.getLogger(__name__)


class InMemoryCacheStore:
    """Dict-backed cache with an optional time-to-live.

    Entries older than ``ttl_seconds`` count as absent and are dropped the
    next time they are looked up. A TTL of 0 keeps entries until ``clear``.
    """

    def __init__(
        self,
        ttl_seconds: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds < 0:
            msg = "ttl_seconds cannot be negative"
            raise ValueError(msg)
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[float | None, Any]] = {}

    def has(self, key: str) -> bool:
        entry = self._entries.get(key)
        if entry is None:
            return False
        expires_at, _ = entry
        if expires_at is not None and self._clock() >= expires_at:
            logger.debug("Report cache entry expired: %s", key)
            del self._entries[key]
            return False
        return True

    def get(self, key: str) -> Any:
        if not self.has(key):
            raise KeyError(key)
        return self._entries[key][1]

    def store(self, key: str, value: Any) -> None:
        expires_at = self._clock() + self._ttl if self._ttl else None
        self._entries[key] = (expires_at, value)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class NullCacheStore:
    """Cache store that never holds anything (caching disabled)."""

    def has(self, key: str) -> bool:
        return False

    def get(self, key: str) -> Any:
        raise KeyError(key)

    def store(self, key: str, value: Any) -> None:
        return None
