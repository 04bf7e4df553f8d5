"""Process-lifetime memoization of media lookups.

Entries never expire: the species vocabulary of one logbook is small and
stable. Only successful lookups are stored, and failures are not remembered,
so a later request for a name that failed goes back to the network.
"""

import logging

from birdlog.lookup.models import MediaInfo

logger = logging.getLogger(__name__)


def cache_key(name: str) -> str:
    """Normalize a lookup name to its cache key."""
    return name.strip().lower()


class MediaCache:
    """In-memory map from lower-cased lookup name to MediaInfo."""

    def __init__(self) -> None:
        self._entries: dict[str, MediaInfo] = {}
        self._stats = {"hits": 0, "misses": 0, "sets": 0}

    def get(self, name: str) -> MediaInfo | None:
        """Return the cached media for ``name``, counting the hit or miss."""
        info = self._entries.get(cache_key(name))
        if info is None:
            self._stats["misses"] += 1
        else:
            self._stats["hits"] += 1
            logger.debug("Media cache hit for '%s'", name)
        return info

    def set(self, name: str, info: MediaInfo) -> None:
        """Store a successful lookup. Unsuccessful results are ignored."""
        if not info.found:
            return
        self._entries[cache_key(name)] = info
        self._stats["sets"] += 1

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    def get_stats(self) -> dict[str, int]:
        """Return hit/miss/set counters and the current size."""
        return {**self._stats, "size": len(self._entries)}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and cache_key(name) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
