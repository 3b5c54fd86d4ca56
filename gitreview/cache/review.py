"""Review cache operations for gitreview.

Contains the ReviewCache class:
- derive_key: Compute the cache key for a diff and options
- get: Load a cached review if it is still valid for the options
- put: Save a review to the cache
- is_entry_valid: Check a cache entry against the current configuration

Caching is best-effort: read and write failures are logged as warnings
and never raised. The worst case is a review being generated again.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from gitreview.cache.keys import CACHE_VERSION, canonical_json, derive_cache_key
from gitreview.cache.models import CacheEntry
from gitreview.cache.store import ReviewStore
from gitreview.options import ReviewOptions

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_NAME = "default"


class ReviewCache:
    """Validated get/put of AI reviews on top of a ReviewStore."""

    def __init__(self, store: ReviewStore, model_id: str, version: str = CACHE_VERSION):
        """Initialize the cache.

        Args:
            store: Storage backend.
            model_id: The model id reviews are generated with.
            version: Cache format version entries must match.
        """
        self.store = store
        self.model_id = model_id
        self.version = version

    def derive_key(self, diff: str, options: ReviewOptions) -> str:
        """Compute the cache key for a diff under this cache's model and version.

        Args:
            diff: The diff text.
            options: The review options.

        Returns:
            SHA256 hex digest.
        """
        return derive_cache_key(diff, options, self.model_id, self.version)

    def is_entry_valid(self, entry: CacheEntry, options: ReviewOptions) -> bool:
        """Check whether a stored entry still applies to a request.

        Args:
            entry: The stored cache entry.
            options: The requesting review options.

        Returns:
            True if version, model, template, focus and ignore all match.
        """
        return (
            entry.version == self.version
            and entry.model_id == self.model_id
            and entry.template == (options.template or DEFAULT_TEMPLATE_NAME)
            and canonical_json(entry.focus) == canonical_json(options.focus)
            and canonical_json(entry.ignore) == canonical_json(options.ignore)
        )

    def get(self, key: str, options: ReviewOptions) -> Optional[str]:
        """Load a cached review.

        Args:
            key: The cache key.
            options: The requesting review options.

        Returns:
            The cached review text, or None on a miss. Missing, unreadable,
            malformed and outdated entries are all misses.
        """
        try:
            record = self.store.read(key)
            if record is None:
                return None
            entry = CacheEntry.model_validate(record)
        except (OSError, ValueError, RecursionError, ValidationError) as e:
            logger.warning("Cache read error: %s", e)
            return None

        if not self.is_entry_valid(entry, options):
            logger.debug("Cache entry %s is outdated for the current options", key)
            return None

        return entry.review

    def put(self, key: str, review: str, options: ReviewOptions) -> None:
        """Save a review to the cache.

        Write errors are logged and swallowed.

        Args:
            key: The cache key.
            review: The review text.
            options: The review options the text was generated for.
        """
        entry = CacheEntry(
            version=self.version,
            model_id=self.model_id,
            template=options.template or DEFAULT_TEMPLATE_NAME,
            focus=options.focus,
            ignore=options.ignore,
            review=review,
        )
        try:
            self.store.write(key, entry.to_record())
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Cache write error: %s", e)
