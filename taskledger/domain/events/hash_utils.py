"""Hash utilities for the ledger's event chain.

Every appended audit record is hash-chained with SHA-256 so that any
rewrite of history is detectable by ``verify_chain``.

Chain rules:
- content_hash = SHA-256 of canonical JSON of {event_type, payload}
- prev_hash of sequence 1 is GENESIS_HASH
- prev_hash of sequence n is the content_hash of sequence n - 1
"""

from __future__ import annotations

import hashlib
import json
import math
import unicodedata
from typing import Any

# 64 zeros: "no previous entry"
GENESIS_HASH: str = "0" * 64


def _sanitize_for_json(data: Any) -> Any:
    """Recursively normalize data for deterministic serialization.

    Strings are NFKC-normalized; NaN and Infinity are rejected.

    Raises:
        ValueError: If data contains a non-finite float.
    """
    if isinstance(data, str):
        return unicodedata.normalize("NFKC", data)
    elif isinstance(data, float):
        if math.isnan(data) or math.isinf(data):
            raise ValueError(
                f"Cannot serialize non-finite float value: {data!r}. "
                "NaN and Infinity are not valid JSON."
            )
        return data
    elif isinstance(data, dict):
        return {_sanitize_for_json(k): _sanitize_for_json(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_sanitize_for_json(item) for item in data]
    else:
        return data


def canonical_json(data: Any) -> str:
    """Produce deterministic JSON (sorted keys, compact, unescaped Unicode).

    Example:
        >>> canonical_json({"b": 1, "a": 2})
        '{"a":2,"b":1}'
    """
    return json.dumps(
        _sanitize_for_json(data),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def compute_content_hash(event_type: str, payload: dict[str, Any]) -> str:
    """Compute the SHA-256 content hash of one audit record.

    Sequence, timestamps and prev_hash are excluded: the hash covers what
    happened, not when or where it was stored.

    Args:
        event_type: Stable event type identifier.
        payload: Serialized event payload.

    Returns:
        Lowercase hexadecimal digest (64 characters).
    """
    canonical = canonical_json({"event_type": event_type, "payload": payload})
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
