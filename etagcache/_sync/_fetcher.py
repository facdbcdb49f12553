from __future__ import annotations

import logging
import time
import types
import typing as tp

import httpx

from .._decoders import BaseDecoder, PydanticDecoder
from .._exceptions import CacheConsistencyError, TransportError
from .._models import CacheEntry, CachedValue
from .._shapes import ShapeInfo, detect_shape
from ._store import CacheStore
from ._transports import BaseTransport

if tp.TYPE_CHECKING:  # pragma: no cover
    from typing_extensions import Self

logger = logging.getLogger("etagcache.fetcher")

__all__ = ("ValidatingFetcher",)

T = tp.TypeVar("T")


class ValidatingFetcher:
    """
    Serves decoded resources, revalidating every cached value with the server first.

    Each `get` sends a GET request carrying the cached ETag in `If-None-Match`.
    A 200 response is decoded and replaces the cached entry, a 304 response is
    answered from the cache, and any other status is an error.

    :param transport: Transport that talks to the server
    :type transport: BaseTransport
    :param store: Where decoded values are kept, defaults to a new empty store
    :type store: tp.Optional[CacheStore], optional
    :param decoder: Turns response bodies into objects, defaults to PydanticDecoder
    :type decoder: tp.Optional[BaseDecoder], optional
    """

    def __init__(
        self,
        transport: BaseTransport,
        store: tp.Optional[CacheStore] = None,
        decoder: tp.Optional[BaseDecoder] = None,
    ) -> None:
        self._transport = transport
        self._store = store if store is not None else CacheStore()
        self._decoder = decoder if decoder is not None else PydanticDecoder()

    @property
    def store(self) -> CacheStore:
        return self._store

    @property
    def transport(self) -> BaseTransport:
        return self._transport

    @tp.overload
    def get(self, key: str, target: tp.Type[T]) -> T: ...
    @tp.overload
    def get(self, key: str, target: tp.Any) -> tp.Any: ...
    def get(self, key: str, target: tp.Any) -> tp.Any:
        """
        Fetches the resource stored under `key`, in the shape `target` asks for.

        :param key: The resource url, also used as the cache key
        :type key: str
        :param target: The requested type, e.g. `Person` or `list[Person]`, or a `ShapeInfo`
        :type target: tp.Any
        :raises TransportError: If the request failed or returned a status other than 200 or 304
        :raises CacheConsistencyError: If the server answered 304 but the cache can't serve the value
        :raises DecodeError: If the response body doesn't fit the requested type
        :return: A fresh or a revalidated value
        :rtype: tp.Any
        """

        shape_info = detect_shape(target)

        with self._store.key_lock(key):
            entry = self._store.lookup(key)
            etag = entry.etag if entry is not None else ""

            response = self._transport.get(key, etag)
            logger.debug(f"Handling response with status {response.status_code}")

            if response.status_code == 200:
                return self._store_fresh(key, response, shape_info)
            if response.status_code == 304:
                return self._use_cached(key, shape_info)

            raise TransportError(
                f"Server returned an unexpected status code of {response.status_code} for {key}",
                status_code=response.status_code,
            )

    def dump(self) -> tp.Dict[str, CacheEntry]:
        return self._store.dump()

    def _store_fresh(self, key: str, response: httpx.Response, shape_info: ShapeInfo) -> tp.Any:
        value = CachedValue.wrap(self._decoder.decode(response.content, shape_info), shape_info)
        etag = response.headers.get("ETag", "")
        if not etag:
            logger.debug("Response has no ETag, storing it without a validator")

        # Etag and value come from the same response and are replaced together.
        self._store.insert(key, CacheEntry(etag=etag, value=value, last_requested=time.time()))
        return value.unwrap(shape_info)

    def _use_cached(self, key: str, shape_info: ShapeInfo) -> tp.Any:
        entry = self._store.lookup(key)
        if entry is None:
            raise CacheConsistencyError(f"Server answered 304 Not Modified for {key}, but nothing is cached", key=key)
        if not entry.value.matches(shape_info):
            raise CacheConsistencyError(
                f"Cached value for {key} is a {entry.value.shape.value} of {entry.value.model!r}, "
                f"but a {shape_info.shape.value} of {shape_info.item_type!r} was requested",
                key=key,
            )

        logger.debug(f"Using cached value for {key}")
        return entry.value.unwrap(shape_info)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "Self":
        return self

    def __exit__(
        self,
        exc_type: tp.Optional[tp.Type[BaseException]] = None,
        exc_value: tp.Optional[BaseException] = None,
        traceback: tp.Optional[types.TracebackType] = None,
    ) -> None:
        self.close()
