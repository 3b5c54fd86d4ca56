"""Storage backends for the review cache.

Contains:
- ReviewStore: Abstract key-value store for cache records
- FileReviewStore: One JSON file per key in a local directory
- MemoryReviewStore: Dict-backed store, used in tests
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from gitreview.cache.paths import get_entry_file

logger = logging.getLogger(__name__)


class ReviewStore(ABC):
    """Abstract base class for cache storage."""

    @abstractmethod
    def read(self, key: str) -> Optional[dict]:
        """Read the record stored under a key.

        Args:
            key: The cache key.

        Returns:
            The stored record, or None if nothing is stored under the key.

        Raises:
            OSError: If the record exists but cannot be read.
            ValueError: If the record exists but cannot be parsed.
        """
        pass

    @abstractmethod
    def write(self, key: str, record: dict) -> None:
        """Store a record under a key, replacing any existing record.

        Args:
            key: The cache key.
            record: JSON-serializable record.

        Raises:
            OSError: If the record cannot be written.
        """
        pass


class FileReviewStore(ReviewStore):
    """Store each record as <key>.json inside a directory."""

    def __init__(self, cache_dir: Path):
        """Initialize the store, creating the directory if it doesn't exist.

        A directory that cannot be created is logged and left alone; later
        writes will fail and be handled by the cache.

        Args:
            cache_dir: Directory holding the cache files.
        """
        self.cache_dir = cache_dir
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Could not create cache directory %s: %s", cache_dir, e)

    def path_for(self, key: str) -> Path:
        """Return the file path used for a key."""
        return get_entry_file(self.cache_dir, key)

    def read(self, key: str) -> Optional[dict]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def write(self, key: str, record: dict) -> None:
        self.path_for(key).write_text(json.dumps(record, indent=2), encoding="utf-8")


class MemoryReviewStore(ReviewStore):
    """Keep records in a dict. Records are copied in and out."""

    def __init__(self):
        self.records: dict[str, str] = {}

    def read(self, key: str) -> Optional[dict]:
        raw = self.records.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def write(self, key: str, record: dict) -> None:
        self.records[key] = json.dumps(record)
