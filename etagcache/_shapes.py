from __future__ import annotations

import collections.abc
import enum
import typing as tp
from dataclasses import dataclass

__all__ = ("Shape", "ShapeInfo", "detect_shape")

# Generic origins that mean "an ordered sequence of T" when requested.
SEQUENCE_ORIGINS: tp.Tuple[tp.Any, ...] = (
    list,
    tuple,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Collection,
    collections.abc.Iterable,
)


class Shape(enum.Enum):
    SINGLE = "single"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class ShapeInfo:
    """
    What the caller asked for: one `item_type` or an ordered sequence of them.

    `container` is the concrete type sequences are handed back in.
    """

    shape: Shape
    item_type: tp.Any
    container: tp.Optional[type] = None

    @classmethod
    def single(cls, item_type: tp.Any) -> "ShapeInfo":
        return cls(shape=Shape.SINGLE, item_type=item_type)

    @classmethod
    def sequence(cls, item_type: tp.Any, container: type = list) -> "ShapeInfo":
        return cls(shape=Shape.SEQUENCE, item_type=item_type, container=container)

    @property
    def is_sequence(self) -> bool:
        return self.shape is Shape.SEQUENCE


def detect_shape(target: tp.Any) -> ShapeInfo:
    """
    Decide whether `target` asks for a single object or for a sequence of objects.

    Args:
        target: A type such as `Person` or `list[Person]`, or an existing `ShapeInfo`.

    Returns:
        The detected shape, with the element type extracted for sequences.

    Raises:
        TypeError: If a sequence is requested without a single element type.

    Example:
        ```
        detect_shape(list[Person])   # ShapeInfo(SEQUENCE, Person, list)
        detect_shape(Person)         # ShapeInfo(SINGLE, Person, None)
        ```
    """
    if isinstance(target, ShapeInfo):
        return target

    if target in (list, tuple, tp.List, tp.Tuple):
        raise TypeError(f"Can't detect the element type of an unparameterized {target!r}")

    origin = tp.get_origin(target)
    if origin not in SEQUENCE_ORIGINS:
        return ShapeInfo.single(target)

    args = tp.get_args(target)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return ShapeInfo.sequence(args[0], container=tuple)
        raise TypeError(f"Only homogeneous tuples like tuple[T, ...] can be requested, got {target!r}")

    if len(args) != 1:
        raise TypeError(f"Can't detect the element type of {target!r}")
    return ShapeInfo.sequence(args[0], container=list)
