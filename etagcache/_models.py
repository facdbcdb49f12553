from __future__ import annotations

import time
import typing as tp
from dataclasses import dataclass, field

from etagcache._shapes import Shape, ShapeInfo

__all__ = ("CachedValue", "CacheEntry")


@dataclass(frozen=True)
class CachedValue:
    shape: Shape
    model: tp.Any
    value: tp.Any
    """A single decoded object, or a tuple of them for `Shape.SEQUENCE`."""

    @classmethod
    def wrap(cls, decoded: tp.Any, shape_info: ShapeInfo) -> "CachedValue":
        value = tuple(decoded) if shape_info.is_sequence else decoded
        return cls(shape=shape_info.shape, model=shape_info.item_type, value=value)

    def matches(self, shape_info: ShapeInfo) -> bool:
        return self.shape is shape_info.shape and self.model == shape_info.item_type

    def unwrap(self, shape_info: ShapeInfo) -> tp.Any:
        if self.shape is Shape.SEQUENCE:
            container = shape_info.container or list
            return container(self.value)
        return self.value


@dataclass(frozen=True)
class CacheEntry:
    etag: str
    """The validator the server returned with `value`. Empty when the server sent none."""

    value: CachedValue
    last_requested: float = field(default_factory=time.time)
