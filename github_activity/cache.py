"""
Time-boxed on-disk cache of user activity snapshots.

The cache itself is a plain mapping passed in and out of the store, so the
store only owns the file location and the freshness window.
"""

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger
from pydantic import ValidationError

from github_activity.models import Cache, CacheEntry, Event, cache_adapter

DEFAULT_CACHE_FILE = "github_activity_cache.json"
DEFAULT_CACHE_TTL_SEC = 3600


class CacheStore:
    def __init__(self, path: str | Path | None = None, ttl: timedelta | None = None):
        self.path = Path(path or os.getenv("GITHUB_ACTIVITY_CACHE_FILE", DEFAULT_CACHE_FILE))
        if ttl is None:
            ttl = timedelta(seconds=int(os.getenv("GITHUB_ACTIVITY_CACHE_TTL_SEC", str(DEFAULT_CACHE_TTL_SEC))))
        self.ttl = ttl

        logger.debug(f"Initialized cache store with file: {self.path}, ttl: {self.ttl}")

    def load(self) -> Cache:
        """Load the cache from disk, falling back to an empty one"""
        if not self.path.exists():
            logger.debug(f"No cache file at {self.path}, starting with empty cache")
            return {}

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            logger.warning(f"Error reading cache file {self.path}: {e}")
            return {}

        try:
            cache = cache_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Error parsing cache file {self.path}, ignoring it: {e}")
            return {}

        logger.debug(f"Loaded {len(cache)} cache entries from {self.path}")
        return cache

    def save(self, cache: Cache) -> None:
        """Overwrite the cache file with the given cache; failures are only logged"""
        try:
            self.path.write_bytes(cache_adapter.dump_json(cache, indent=1))
        except OSError as e:
            logger.error(f"Error writing cache file {self.path}: {e}")
            return
        logger.debug(f"Cache saved to {self.path}")

    def get(self, cache: Cache, username: str, now: datetime | None = None) -> Tuple[Optional[CacheEntry], bool]:
        """
        Look up a fresh entry for username.

        Expired entries are reported as missing but are left in the mapping;
        the next successful fetch replaces them.
        """
        entry = cache.get(username)
        if entry is None:
            return None, False

        now = now or datetime.now(timezone.utc)
        if now - entry.timestamp > self.ttl:
            logger.debug(f"Cache entry for '{username}' expired ({entry.age_seconds(now):.0f}s old)")
            return None, False

        return entry, True

    def put(self, cache: Cache, username: str, events: List[Event], now: datetime | None = None) -> Cache:
        """Return a copy of cache with a new entry for username"""
        entry = CacheEntry(timestamp=now or datetime.now(timezone.utc), events=events)
        return {**cache, username: entry}
