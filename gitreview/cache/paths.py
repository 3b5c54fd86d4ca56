"""Cache file path utilities for gitreview.

Contains:
- get_cache_dir: Get the path of the .gitreview-cache directory
- get_entry_file: Get the path of the file holding one cache entry
"""

from pathlib import Path

from gitreview.config import CACHE_DIR_NAME


def get_cache_dir(root: Path) -> Path:
    """Return the .gitreview-cache directory path.

    The directory itself is created by FileReviewStore.

    Args:
        root: Directory gitreview is run from.

    Returns:
        Path to the cache directory.
    """
    return root / CACHE_DIR_NAME


def get_entry_file(cache_dir: Path, key: str) -> Path:
    """Return path to the JSON file for a cache key.

    Args:
        cache_dir: The cache directory.
        key: The cache key (hex digest).

    Returns:
        Path to <key>.json inside the cache directory.
    """
    return cache_dir / f"{key}.json"
