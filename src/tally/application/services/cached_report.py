"""Read-through caching for assembled reports."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, TypeVar

from tally.application.ports.reporting import CacheStorePort
from tally.application.services.cache_properties import CacheProperties

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def cached_report(
    cache: CacheStorePort,
    properties: CacheProperties,
    compute: Callable[[], Awaitable[T]],
) -> T:
    """Return the cached result for ``properties`` or compute and store it.

    Two concurrent misses on the same key both compute; the result is the same
    either way.
    """
    key = properties.key
    if cache.has(key):
        logger.debug("Report cache hit: %s (%s)", properties.operation, key)
        return cache.get(key)

    logger.debug("Report cache miss: %s (%s)", properties.operation, key)
    result = await compute()
    cache.store(key, result)
    return result
