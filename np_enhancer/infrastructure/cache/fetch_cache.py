"""Content-addressed response cache.

Entries are keyed by request identity: the literal outbound URL for metadata
lookups, or a synthetic URL embedding a content hash for reconciliation
results. Entries never expire.

The cache is shared ambient state without mutual exclusion. Two concurrent
misses on one key may both fetch and both write; the last write wins. Both
writes derive from equivalent queries, and the cache is only an
optimization, so the race is benign.
"""

import json
from typing import Any, Protocol, runtime_checkable

from attrs import define, field

from np_enhancer.config import get_logger

logger = get_logger(__name__).bind(service="cache")


@define(frozen=True, slots=True)
class CachedResponse:
    """Snapshot of a successful response body."""

    status: int
    body: str
    headers: dict[str, str] = field(factory=dict, eq=False)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        return json.loads(self.body)


@runtime_checkable
class FetchCache(Protocol):
    """Key/value store for response snapshots with no expiry API."""

    async def get(self, key: str) -> CachedResponse | None:
        """Return the cached response for ``key`` or None on a miss."""
        ...

    async def put(self, key: str, response: CachedResponse) -> None:
        """Store ``response`` under ``key``, replacing any previous entry."""
        ...


@define(slots=True)
class InMemoryFetchCache:
    """Process-local FetchCache backed by a dict."""

    _entries: dict[str, CachedResponse] = field(factory=dict)

    async def get(self, key: str) -> CachedResponse | None:
        hit = self._entries.get(key)
        logger.debug("Cache lookup", key=key, hit=hit is not None)
        return hit

    async def put(self, key: str, response: CachedResponse) -> None:
        if not response.ok:
            raise ValueError(f"Refusing to cache non-ok response ({response.status})")
        self._entries[key] = response
        logger.debug("Cache store", key=key, size=len(self._entries))

    @property
    def size(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def clear(self) -> None:
        self._entries.clear()
