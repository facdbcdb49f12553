from __future__ import annotations

import logging
import typing as tp
from copy import deepcopy

from .._models import CacheEntry
from .._synchronization import KeyedLock, Lock

logger = logging.getLogger("etagcache.store")

__all__ = ("CacheStore",)


class CacheStore:
    """
    An in-memory mapping from cache keys to cache entries.

    Every operation runs under one lock, and entries are copied on the way in and out,
    so callers never hold a reference into the store. Entries live until they are
    removed explicitly.
    """

    def __init__(self) -> None:
        self._entries: tp.Dict[str, CacheEntry] = {}
        self._lock = Lock()
        self._key_locks = KeyedLock()

    def insert(self, key: str, entry: CacheEntry) -> None:
        """
        Stores the entry, replacing any entry already stored under the key.

        :param key: The cache key, usually the request url
        :type key: str
        :param entry: The entry to store
        :type entry: CacheEntry
        """

        stored = deepcopy(entry)
        with self._lock:
            self._entries[key] = stored
        logger.debug(f"Stored entry for {key} with etag {entry.etag!r}")

    def remove(self, key: str) -> None:
        """
        Removes the entry stored under the key. Does nothing if there is none.

        :param key: The cache key
        :type key: str
        """

        with self._lock:
            removed = self._entries.pop(key, None)
        if removed is not None:
            logger.debug(f"Removed entry for {key}")

    def lookup(self, key: str) -> tp.Optional[CacheEntry]:
        """
        Retrieves a copy of the entry stored under the key.

        :param key: The cache key
        :type key: str
        :return: The entry, or None if nothing is stored under the key
        :rtype: tp.Optional[CacheEntry]
        """

        with self._lock:
            entry = self._entries.get(key)
        # Stored entries are replaced, never mutated, so copying outside the lock is safe.
        return deepcopy(entry) if entry is not None else None

    def dump(self) -> tp.Dict[str, CacheEntry]:
        """
        Takes a point-in-time snapshot of every entry.

        :return: Copies of all entries keyed by cache key
        :rtype: tp.Dict[str, CacheEntry]
        """

        with self._lock:
            snapshot = dict(self._entries)
        return {key: deepcopy(entry) for key, entry in snapshot.items()}

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.debug("Cleared all entries")

    def key_lock(self, key: str) -> tp.ContextManager[None]:
        """
        Serializes everyone working on the same key, leaving other keys free.
        """

        return self._key_locks.hold(key)
