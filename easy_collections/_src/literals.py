from collections.abc import Hashable
from typing import Tuple, TypeVar

from .easy_map import MISSING, EasyMap
from .easy_set import EasySet

__all__ = ["easy_map", "easy_set"]

KT = TypeVar("KT", bound=Hashable)
T = TypeVar("T", bound=Hashable)
VT = TypeVar("VT")


def easy_map(*pairs: Tuple[KT, VT], default: VT = MISSING) -> EasyMap[KT, VT]:
    """
    Builds an `EasyMap` from its `(key, value)` arguments, with later
    pairs overwriting earlier ones.

        >>> m = easy_map(("foo", 1), ("bar", 10), ("baz", 100), default=42)
        >>> m["foo"], m["bar"], m["baz"], m["nope"]
        (1, 10, 100, 42)
    """
    return EasyMap(pairs, default=default)


def easy_set(*elements: T) -> EasySet[T]:
    """
    Builds an `EasySet` from its arguments.

        >>> easy_set(1, 2, 3) & easy_set(2, 3, 4)
        EasySet({2, 3})
    """
    return EasySet(elements)
