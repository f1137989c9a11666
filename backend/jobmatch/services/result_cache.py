"""
Result Cache — process-scoped key → value memoization for expensive model calls.

One instance is built by the dependency layer and injected into the services
that need it. Entries live for the process lifetime unless a TTL is set.
Writes are atomic per key; concurrent misses on the same key may both compute.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Awaitable, Callable, Iterable

logger = logging.getLogger(__name__)

KEY_DELIMITER = "|"

_MISSING = object()


def make_cache_key(*parts: str | int | Iterable[str]) -> str:
    """Join key parts with the stable delimiter; iterables are comma-joined in given order."""
    rendered: list[str] = []
    for part in parts:
        if isinstance(part, (str, int)):
            rendered.append(str(part))
        else:
            rendered.append(",".join(part))
    return KEY_DELIMITER.join(rendered)


class ResultCache:
    """Internally synchronized mapping with an optional TTL hook."""

    def __init__(self, ttl_seconds: float | None = None):
        self._ttl = ttl_seconds
        self._entries: dict[str, tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str, default: Any = None) -> Any:
        value = self._lookup(key)
        return default if value is _MISSING else value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = (time.monotonic(), value)

    async def get_or_compute(self, key: str, compute_fn: Callable[[], Awaitable[Any]]) -> Any:
        """Return the cached value for `key`, or await `compute_fn()` and store its result."""
        value = self._lookup(key)
        if value is not _MISSING:
            logger.info(f"Cache hit: {key}")
            return value

        value = await compute_fn()
        self.set(key, value)
        return value

    def clear(self) -> int:
        """Drop every entry. Returns count cleared."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        return count

    def __contains__(self, key: str) -> bool:
        return self._lookup(key) is not _MISSING

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _lookup(self, key: str) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return _MISSING
            stored_at, value = entry
            if self._ttl is not None and time.monotonic() - stored_at > self._ttl:
                del self._entries[key]
                return _MISSING
            return value
