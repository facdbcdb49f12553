from __future__ import annotations

import typing as tp

__all__ = ("EtagCacheError", "TransportError", "CacheConsistencyError", "DecodeError")


class EtagCacheError(Exception): ...


class TransportError(EtagCacheError):
    """
    The request failed, or the server answered with a status other than 200 or 304.

    :param status_code: The unexpected HTTP status, or None when no response was received
    :type status_code: tp.Optional[int]
    """

    def __init__(self, message: str, status_code: tp.Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CacheConsistencyError(EtagCacheError):
    """
    The server confirmed a cached representation that the store cannot provide.
    """

    def __init__(self, message: str, key: str) -> None:
        super().__init__(message)
        self.key = key


class DecodeError(EtagCacheError):
    def __init__(self, message: str, target: tp.Any) -> None:
        super().__init__(message)
        self.target = target
