"""Response cache and cache-key hashing."""

from .fetch_cache import CachedResponse, FetchCache, InMemoryFetchCache
from .hashing import hash_record, reconciliation_cache_key

__all__ = [
    "CachedResponse",
    "FetchCache",
    "InMemoryFetchCache",
    "hash_record",
    "reconciliation_cache_key",
]
