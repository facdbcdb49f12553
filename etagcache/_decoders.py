from __future__ import annotations

import functools
import typing as tp

from pydantic import TypeAdapter, ValidationError

from etagcache._exceptions import DecodeError
from etagcache._shapes import ShapeInfo

__all__ = ("BaseDecoder", "PydanticDecoder")

T = tp.TypeVar("T")


@functools.lru_cache(maxsize=None)
def _adapter_for(target: tp.Any) -> TypeAdapter[tp.Any]:
    return TypeAdapter(target)


class BaseDecoder:
    def decode_single(self, body: bytes, model: tp.Type[T]) -> T:
        raise NotImplementedError()

    def decode_sequence(self, body: bytes, model: tp.Type[T]) -> tp.List[T]:
        raise NotImplementedError()

    def decode(self, body: bytes, shape_info: ShapeInfo) -> tp.Any:
        if shape_info.is_sequence:
            return self.decode_sequence(body, shape_info.item_type)
        return self.decode_single(body, shape_info.item_type)


class PydanticDecoder(BaseDecoder):
    """
    Decodes JSON bodies with pydantic.

    Works for anything pydantic can validate: `BaseModel` subclasses, dataclasses,
    `TypedDict`s and plain builtins.
    """

    def decode_single(self, body: bytes, model: tp.Type[T]) -> T:
        """
        Decodes a body holding one JSON object.

        :param body: Raw response body
        :type body: bytes
        :param model: The type to validate the object against
        :type model: tp.Type[T]
        :raises DecodeError: If the body is not valid JSON or doesn't fit `model`
        :return: The decoded object
        :rtype: T
        """

        return tp.cast(T, self._validate(body, model))

    def decode_sequence(self, body: bytes, model: tp.Type[T]) -> tp.List[T]:
        """
        Decodes a body holding a JSON array.

        :param body: Raw response body
        :type body: bytes
        :param model: The type to validate every element against
        :type model: tp.Type[T]
        :raises DecodeError: If the body is not a valid JSON array of `model`
        :return: The decoded objects, in payload order
        :rtype: tp.List[T]
        """

        return tp.cast(tp.List[T], self._validate(body, tp.List[model]))  # type: ignore[valid-type]

    def _validate(self, body: bytes, target: tp.Any) -> tp.Any:
        try:
            return _adapter_for(target).validate_json(body)
        except ValidationError as exc:
            raise DecodeError(f"Could not decode the response body as {target!r}: {exc}", target=target) from exc
