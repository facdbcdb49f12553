from __future__ import annotations

import logging
import typing as tp
from copy import deepcopy

from .._models import CacheEntry
from .._synchronization import AsyncKeyedLock, AsyncLock

logger = logging.getLogger("etagcache.store")

__all__ = ("AsyncCacheStore",)


class AsyncCacheStore:
    """
    An in-memory mapping from cache keys to cache entries.

    Every operation runs under one lock, and entries are copied on the way in and out,
    so callers never hold a reference into the store. Entries live until they are
    removed explicitly.
    """

    def __init__(self) -> None:
        self._entries: tp.Dict[str, CacheEntry] = {}
        self._lock = AsyncLock()
        self._key_locks = AsyncKeyedLock()

    async def insert(self, key: str, entry: CacheEntry) -> None:
        """
        Stores the entry, replacing any entry already stored under the key.

        :param key: The cache key, usually the request url
        :type key: str
        :param entry: The entry to store
        :type entry: CacheEntry
        """

        stored = deepcopy(entry)
        async with self._lock:
            self._entries[key] = stored
        logger.debug(f"Stored entry for {key} with etag {entry.etag!r}")

    async def remove(self, key: str) -> None:
        """
        Removes the entry stored under the key. Does nothing if there is none.

        :param key: The cache key
        :type key: str
        """

        async with self._lock:
            removed = self._entries.pop(key, None)
        if removed is not None:
            logger.debug(f"Removed entry for {key}")

    async def lookup(self, key: str) -> tp.Optional[CacheEntry]:
        """
        Retrieves a copy of the entry stored under the key.

        :param key: The cache key
        :type key: str
        :return: The entry, or None if nothing is stored under the key
        :rtype: tp.Optional[CacheEntry]
        """

        async with self._lock:
            entry = self._entries.get(key)
        # Stored entries are replaced, never mutated, so copying outside the lock is safe.
        return deepcopy(entry) if entry is not None else None

    async def dump(self) -> tp.Dict[str, CacheEntry]:
        """
        Takes a point-in-time snapshot of every entry.

        :return: Copies of all entries keyed by cache key
        :rtype: tp.Dict[str, CacheEntry]
        """

        async with self._lock:
            snapshot = dict(self._entries)
        return {key: deepcopy(entry) for key, entry in snapshot.items()}

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()
        logger.debug("Cleared all entries")

    def key_lock(self, key: str) -> tp.AsyncContextManager[None]:
        """
        Serializes everyone working on the same key, leaving other keys free.
        """

        return self._key_locks.hold(key)
