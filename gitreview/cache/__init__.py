"""Cache module for gitreview.

This package caches AI reviews on disk to prevent redundant LLM API calls:
- models: CacheEntry data model
- keys: CACHE_VERSION and cache key derivation
- paths: Functions for getting cache file paths
- store: ReviewStore interface with file and in-memory backends
- review: ReviewCache with validated get/put
"""

from pathlib import Path
from typing import Optional

# Models
from gitreview.cache.models import CacheEntry

# Key derivation
from gitreview.cache.keys import (
    CACHE_VERSION,
    canonical_json,
    derive_cache_key,
)

# Path utilities
from gitreview.cache.paths import (
    get_cache_dir,
    get_entry_file,
)

# Storage backends
from gitreview.cache.store import (
    FileReviewStore,
    MemoryReviewStore,
    ReviewStore,
)

# Cache operations
from gitreview.cache.review import (
    DEFAULT_TEMPLATE_NAME,
    ReviewCache,
)


def open_review_cache(model_id: str, root: Optional[Path] = None) -> ReviewCache:
    """Open the file-backed review cache for a directory.

    Args:
        model_id: The model id reviews are generated with.
        root: Directory holding .gitreview-cache. Defaults to the current
            working directory.

    Returns:
        A ReviewCache backed by FileReviewStore.
    """
    store = FileReviewStore(get_cache_dir(root or Path.cwd()))
    return ReviewCache(store, model_id=model_id)


__all__ = [
    # Models
    "CacheEntry",
    # Keys
    "CACHE_VERSION",
    "canonical_json",
    "derive_cache_key",
    # Paths
    "get_cache_dir",
    "get_entry_file",
    # Stores
    "FileReviewStore",
    "MemoryReviewStore",
    "ReviewStore",
    # Cache
    "DEFAULT_TEMPLATE_NAME",
    "ReviewCache",
    "open_review_cache",
]
