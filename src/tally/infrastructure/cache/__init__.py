"""Report cache store implementations."""

from tally.infrastructure.cache.in_memory_cache_store import (
    InMemoryCacheStore,
    NullCacheStore,
)

__all__ = ["InMemoryCacheStore", "NullCacheStore"]
