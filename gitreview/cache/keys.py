"""Cache key derivation for gitreview.

Contains:
- CACHE_VERSION: Format version, bump it when the prompt or entry format changes
- canonical_json: Stable JSON serialization used for hashing and comparison
- derive_cache_key: SHA256 key for a diff and its review options
"""

import hashlib
import json
from typing import Any

from gitreview.options import ReviewOptions

CACHE_VERSION = "1"


def canonical_json(value: Any) -> str:
    """Serialize a value to JSON with sorted keys.

    Args:
        value: Any JSON-serializable value.

    Returns:
        The canonical JSON string.
    """
    return json.dumps(value, sort_keys=True)


def derive_cache_key(
    diff: str,
    options: ReviewOptions,
    model_id: str,
    version: str = CACHE_VERSION,
) -> str:
    """Compute the cache key for a review request.

    The key covers the full diff, the template, focus and ignore options,
    the model id and the cache format version. List options are hashed in
    the order given, so ["a", "b"] and ["b", "a"] produce different keys.

    Args:
        diff: The diff text to review.
        options: Review options (only template, focus, ignore are used).
        model_id: The model the review is requested from.
        version: Cache format version.

    Returns:
        SHA256 hex digest of the canonical request.
    """
    payload = canonical_json(
        {
            "diff": diff,
            "template": options.template,
            "focus": options.focus,
            "ignore": options.ignore,
            "modelId": model_id,
            "version": version,
        }
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
