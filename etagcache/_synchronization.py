from __future__ import annotations

import types
import typing as tp
from contextlib import asynccontextmanager, contextmanager
from dataclasses import dataclass
from threading import Lock as T_LOCK

import anyio

__all__ = ("AsyncLock", "Lock", "AsyncKeyedLock", "KeyedLock")


class AsyncLock:
    def __init__(self) -> None:
        self._lock = anyio.Lock()

    async def __aenter__(self) -> None:
        await self._lock.acquire()

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None = None,
        exc_value: BaseException | None = None,
        traceback: types.TracebackType | None = None,
    ) -> None:
        self._lock.release()


class Lock:
    def __init__(self) -> None:
        self._lock = T_LOCK()

    def __enter__(self) -> None:
        self._lock.acquire()

    def __exit__(
        self,
        exc_type: type[BaseException] | None = None,
        exc_value: BaseException | None = None,
        traceback: types.TracebackType | None = None,
    ) -> None:
        self._lock.release()


@dataclass
class _Slot:
    lock: tp.Any
    holders: int = 0


class AsyncKeyedLock:
    """
    A table of locks, one per key.

    Slots are created on first use and dropped once nobody holds or waits on them,
    so the table only grows with the number of keys in flight.
    """

    def __init__(self) -> None:
        self._slots: tp.Dict[str, _Slot] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> tp.AsyncIterator[None]:
        # No await between lookup and registration, so the event loop can't interleave here.
        slot = self._slots.get(key)
        if slot is None:
            slot = self._slots[key] = _Slot(lock=anyio.Lock())
        slot.holders += 1
        try:
            async with slot.lock:
                yield
        finally:
            slot.holders -= 1
            if slot.holders == 0:
                del self._slots[key]

    def __len__(self) -> int:
        return len(self._slots)


class KeyedLock:
    """
    Thread-safe counterpart of `AsyncKeyedLock`.
    """

    def __init__(self) -> None:
        self._slots: tp.Dict[str, _Slot] = {}
        self._guard = T_LOCK()

    @contextmanager
    def hold(self, key: str) -> tp.Iterator[None]:
        with self._guard:
            slot = self._slots.get(key)
            if slot is None:
                slot = self._slots[key] = _Slot(lock=T_LOCK())
            slot.holders += 1
        try:
            with slot.lock:
                yield
        finally:
            with self._guard:
                slot.holders -= 1
                if slot.holders == 0:
                    del self._slots[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._slots)
