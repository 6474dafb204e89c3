import copy
from collections.abc import Hashable, Iterable, Iterator, MutableSet, Set as AbstractSet
from typing import Any, Generic, Optional, Type, TypeVar, Union

__all__ = ["EasySet"]

S = TypeVar("S", bound=Hashable)
T = TypeVar("T", bound=Hashable)

Self = TypeVar("Self", bound="EasySet")


def _unwrap(iterable: Iterable[S], /) -> Iterable[S]:
    if isinstance(iterable, EasySet):
        return iterable._set
    elif isinstance(iterable, Iterable):
        return iterable
    else:
        raise TypeError(f"expected iterables, got {iterable!r}")


class EasySet(MutableSet[T], Generic[T]):
    """
    A wrapper around the builtin set with the set algebra available
    through operators for any iterable, not just other sets.

        >>> a = EasySet([1, 2, 3])
        >>> b = EasySet([2, 3, 4])
        >>> a & b, a | b, a ^ b, a - b
        (EasySet({2, 3}), EasySet({1, 2, 3, 4}), EasySet({1, 4}), EasySet({1}))
        >>> a & [3, 4, 5]
        EasySet({3})

    Everything else is forwarded to the underlying set, which is also
    available as `EasySet.inner`.
    """
    _set: set[T]

    __slots__ = {
        "_set":
            "The underlying set containing every element.",
    }

    def __init__(self: Self, iterable: Optional[Iterable[T]] = None, /) -> None:
        if iterable is None:
            self._set = set()
        elif isinstance(iterable, EasySet):
            self._set = set(iterable._set)
        elif isinstance(iterable, Iterable):
            self._set = set(iterable)
        else:
            raise TypeError(f"expected an iterable or None, got {iterable!r}")

    def __and__(self: Self, other: Iterable[Any], /) -> "EasySet[T]":
        if isinstance(other, Iterable):
            return self.intersection(other)
        else:
            return NotImplemented

    def __rand__(self: Self, other: Iterable[Any], /) -> "EasySet[T]":
        return type(self).__and__(self, other)

    def __contains__(self: Self, element: Any, /) -> bool:
        return element in self._set

    def __copy__(self: Self, /) -> Self:
        return self.copy()

    def __deepcopy__(self: Self, memo: Optional[dict[int, Any]] = None, /) -> Self:
        return type(self)._from_set(copy.deepcopy(self._set, memo))

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, EasySet):
            return self._set == other._set
        elif isinstance(other, AbstractSet):
            return len(self._set) == len(other) and self._set.issubset(other)
        else:
            return NotImplemented

    def __ge__(self: Self, other: Any, /) -> bool:
        if isinstance(other, AbstractSet):
            return self.issuperset(other)
        else:
            return NotImplemented

    def __gt__(self: Self, other: Any, /) -> bool:
        if isinstance(other, AbstractSet):
            return len(self._set) > len(other) and self.issuperset(other)
        else:
            return NotImplemented

    def __iand__(self: Self, other: Iterable[Any], /) -> Self:
        if isinstance(other, Iterable):
            self.intersection_update(other)
            return self
        else:
            return NotImplemented

    def __ior__(self: Self, other: Iterable[T], /) -> Self:
        if isinstance(other, Iterable):
            self.update(other)
            return self
        else:
            return NotImplemented

    def __isub__(self: Self, other: Iterable[Any], /) -> Self:
        if isinstance(other, Iterable):
            self.difference_update(other)
            return self
        else:
            return NotImplemented

    def __iter__(self: Self, /) -> Iterator[T]:
        return iter(self._set)

    def __ixor__(self: Self, other: Iterable[T], /) -> Self:
        if isinstance(other, Iterable):
            self.symmetric_difference_update(other)
            return self
        else:
            return NotImplemented

    def __le__(self: Self, other: Any, /) -> bool:
        if isinstance(other, AbstractSet):
            return self.issubset(other)
        else:
            return NotImplemented

    def __len__(self: Self, /) -> int:
        return len(self._set)

    def __lt__(self: Self, other: Any, /) -> bool:
        if isinstance(other, AbstractSet):
            return len(self._set) < len(other) and self.issubset(other)
        else:
            return NotImplemented

    def __or__(self: Self, other: Iterable[S], /) -> "EasySet[Union[S, T]]":
        if isinstance(other, Iterable):
            return self.union(other)
        else:
            return NotImplemented

    def __ror__(self: Self, other: Iterable[S], /) -> "EasySet[Union[S, T]]":
        return type(self).__or__(self, other)

    def __repr__(self: Self, /) -> str:
        if len(self._set) == 0:
            return f"{type(self).__name__}()"
        else:
            return f"{type(self).__name__}({self._set!r})"

    def __sub__(self: Self, other: Iterable[Any], /) -> "EasySet[T]":
        if isinstance(other, Iterable):
            return self.difference(other)
        else:
            return NotImplemented

    def __rsub__(self: Self, other: Iterable[S], /) -> "EasySet[S]":
        if isinstance(other, Iterable):
            return type(self)._from_set(set(other).difference(self._set))
        else:
            return NotImplemented

    def __xor__(self: Self, other: Iterable[S], /) -> "EasySet[Union[S, T]]":
        if isinstance(other, Iterable):
            return self.symmetric_difference(other)
        else:
            return NotImplemented

    def __rxor__(self: Self, other: Iterable[S], /) -> "EasySet[Union[S, T]]":
        return type(self).__xor__(self, other)

    @classmethod
    def _from_iterable(cls: Type[Self], iterable: Iterable[T], /) -> Self:
        return cls(iterable)

    @classmethod
    def _from_set(cls: Type[Self], set_: set[T], /) -> Self:
        self = cls.__new__(cls)
        self._set = set_
        return self

    def add(self: Self, element: T, /) -> None:
        self._set.add(element)

    def clear(self: Self, /) -> None:
        self._set.clear()

    def copy(self: Self, /) -> Self:
        return type(self)._from_set(self._set.copy())

    def difference(self: Self, /, *iterables: Iterable[Any]) -> "EasySet[T]":
        return type(self)._from_set(self._set.difference(*map(_unwrap, iterables)))

    def difference_update(self: Self, /, *iterables: Iterable[Any]) -> None:
        self._set.difference_update(*map(_unwrap, iterables))

    def discard(self: Self, element: T, /) -> None:
        self._set.discard(element)

    @property
    def inner(self: Self, /) -> set[T]:
        """The underlying set, shared rather than copied."""
        return self._set

    def intersection(self: Self, /, *iterables: Iterable[Any]) -> "EasySet[T]":
        return type(self)._from_set(self._set.intersection(*map(_unwrap, iterables)))

    def intersection_update(self: Self, /, *iterables: Iterable[Any]) -> None:
        self._set.intersection_update(*map(_unwrap, iterables))

    def isdisjoint(self: Self, iterable: Iterable[Any], /) -> bool:
        return self._set.isdisjoint(_unwrap(iterable))

    def issubset(self: Self, iterable: Iterable[Any], /) -> bool:
        return self._set.issubset(_unwrap(iterable))

    def issuperset(self: Self, iterable: Iterable[Any], /) -> bool:
        return self._set.issuperset(_unwrap(iterable))

    def pop(self: Self, /) -> T:
        return self._set.pop()

    def remove(self: Self, element: T, /) -> None:
        self._set.remove(element)

    def symmetric_difference(self: Self, iterable: Iterable[S], /) -> "EasySet[Union[S, T]]":
        return type(self)._from_set(self._set.symmetric_difference(_unwrap(iterable)))

    def symmetric_difference_update(self: Self, iterable: Iterable[T], /) -> None:
        self._set.symmetric_difference_update(_unwrap(iterable))

    def toggle(self: Self, element: T, /) -> bool:
        """
        Removes the element if it is in the set, otherwise adds it.
        Returns whether the element was in the set beforehand.

            >>> s = EasySet()
            >>> s.toggle(1986)
            False
            >>> 1986 in s
            True
            >>> s.toggle(1986)
            True
            >>> 1986 in s
            False
        """
        if element in self._set:
            self._set.remove(element)
            return True
        else:
            self._set.add(element)
            return False

    def union(self: Self, /, *iterables: Iterable[S]) -> "EasySet[Union[S, T]]":
        return type(self)._from_set(self._set.union(*map(_unwrap, iterables)))

    def update(self: Self, /, *iterables: Iterable[T]) -> None:
        self._set.update(*map(_unwrap, iterables))
