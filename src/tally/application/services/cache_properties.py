"""Deterministic cache keys for report results.

A key is derived from the report operation plus every parameter that can
change the result. Parameters are registered by name and sorted before
hashing, so the order in which a caller adds them never changes the key.
"""

from __future__ import annotations

import hashlib
import json
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from tally.domain.reporting.value_objects import AccountSet, DateRange

KEY_PREFIX = "chart-report-"

# Bump when the shape of cached results changes
CACHE_SCHEMA_VERSION = 1


def _canonical(value: Any) -> Any:  # NOQA: PLR0911
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, AccountSet):
        return value.to_list()
    if isinstance(value, DateRange):
        return [value.start.isoformat(), value.end.isoformat()]
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [_canonical(v) for v in value]
        if isinstance(value, (set, frozenset)):
            return sorted(items, key=repr)
        return items
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    msg = f"Cannot derive a cache key from {type(value).__name__}"
    raise TypeError(msg)


class CacheProperties:
    """Collects the parameters of one report call and derives its cache key."""

    def __init__(self, operation: str):
        if not operation:
            msg = "Cache properties need an operation name"
            raise ValueError(msg)
        self._operation = operation
        self._properties: dict[str, Any] = {}

    @property
    def operation(self) -> str:
        return self._operation

    def add_property(self, name: str, value: Any) -> CacheProperties:
        self._properties[name] = _canonical(value)
        return self

    @property
    def key(self) -> str:
        payload = {
            "version": CACHE_SCHEMA_VERSION,
            "operation": self._operation,
            "properties": sorted(self._properties.items()),
        }
        data = json.dumps(payload, sort_keys=True, separators=(",", ":"))
        return KEY_PREFIX + hashlib.sha256(data.encode("utf-8")).hexdigest()

    def __repr__(self) -> str:
        return f"CacheProperties(operation={self._operation!r}, key={self.key!r})"
