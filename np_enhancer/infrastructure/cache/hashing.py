"""Deterministic fingerprints used as reconciliation cache keys.

The digest is taken over the record's compact JSON serialization in the
record's own key order. Two records that differ only in key order hash
differently; that costs one redundant lookup and nothing else.
"""

import hashlib
import json
from typing import Any


def hash_record(record: dict[str, Any]) -> str:
    """Return the SHA-256 hex digest of ``record`` serialized as compact JSON."""
    serialized = json.dumps(record, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()


def reconciliation_cache_key(record: dict[str, Any], base_url: str) -> str:
    """Synthetic request URL under which a reconciliation result is cached."""
    return f"{base_url.rstrip('/')}/{hash_record(record)}"
