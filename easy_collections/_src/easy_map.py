import copy
from collections.abc import Hashable, ItemsView, Iterable, Iterator, KeysView, Mapping, MutableMapping, ValuesView
from typing import Any, Generic, Optional, Tuple, TypeVar, Union

__all__ = ["EasyMap", "MISSING"]

KT = TypeVar("KT", bound=Hashable)
VT = TypeVar("VT")
T = TypeVar("T")

Self = TypeVar("Self", bound="EasyMap")


class _MissingType:

    __slots__ = ()

    def __reduce__(self, /) -> str:
        return "MISSING"

    def __repr__(self, /) -> str:
        return "MISSING"


# Marks an `EasyMap` without a default value.
MISSING: Any = _MissingType()


class EasyMap(MutableMapping[KT, VT], Generic[KT, VT]):
    """
    A wrapper around the builtin dict which returns a default value
    for missing keys instead of raising a `KeyError`.

        >>> m = EasyMap({"foo": 1, "bar": 10}, default=42)
        >>> m["foo"], m["bar"], m["nope"]
        (1, 10, 42)
        >>> "nope" in m
        False

    The default is only produced for reads, missing keys are never
    inserted. Without a default, missing keys raise a `KeyError` just
    like a dict:

        >>> m = EasyMap({"foo": "bar"})
        >>> m["nope"]
        Traceback (most recent call last):
            ...
        KeyError: 'nope'

    Everything else is forwarded to the underlying dict, which is also
    available as `EasyMap.inner`.
    """
    _default: VT
    _dict: dict[KT, VT]

    __slots__ = {
        "_default":
            "The value returned for missing keys, or MISSING if there is none.",
        "_dict":
            "The underlying dict containing every item.",
    }

    def __init__(
        self: Self,
        iterable: Union[Mapping[KT, VT], Iterable[Tuple[KT, VT]], None] = None,
        /,
        *,
        default: VT = MISSING,
    ) -> None:
        if iterable is None:
            self._dict = {}
        elif isinstance(iterable, EasyMap):
            self._dict = dict(iterable._dict)
            if default is MISSING:
                default = iterable._default
        elif isinstance(iterable, Iterable):
            self._dict = dict(iterable)
        else:
            raise TypeError(f"expected a mapping, an iterable of pairs, or None, got {iterable!r}")
        self._default = default

    def __contains__(self: Self, key: Any, /) -> bool:
        return key in self._dict

    def __copy__(self: Self, /) -> Self:
        return self.copy()

    def __deepcopy__(self: Self, memo: Optional[dict[int, Any]] = None, /) -> Self:
        return type(self)(
            copy.deepcopy(self._dict, memo),
            default=copy.deepcopy(self._default, memo),
        )

    def __delitem__(self: Self, key: KT, /) -> None:
        del self._dict[key]

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, EasyMap):
            if self._dict != other._dict:
                return False
            elif self._default is MISSING or other._default is MISSING:
                return self._default is other._default
            else:
                return self._default == other._default
        elif isinstance(other, Mapping):
            return self._dict == dict(other.items())
        else:
            return NotImplemented

    def __getitem__(self: Self, key: KT, /) -> VT:
        try:
            return self._dict[key]
        except KeyError:
            if self._default is MISSING:
                raise
        return copy.copy(self._default)

    def __ior__(self: Self, other: Union[Mapping[KT, VT], Iterable[Tuple[KT, VT]]], /) -> Self:
        if isinstance(other, Iterable):
            self.update(other)
            return self
        else:
            return NotImplemented

    def __iter__(self: Self, /) -> Iterator[KT]:
        return iter(self._dict)

    def __len__(self: Self, /) -> int:
        return len(self._dict)

    def __or__(self: Self, other: Mapping[KT, VT], /) -> Self:
        if isinstance(other, Mapping):
            result = self.copy()
            result.update(other)
            return result
        else:
            return NotImplemented

    def __ror__(self: Self, other: Mapping[KT, VT], /) -> Self:
        if isinstance(other, Mapping):
            result = type(self)(other, default=self._default)
            result.update(self._dict)
            return result
        else:
            return NotImplemented

    def __repr__(self: Self, /) -> str:
        args = []
        if len(self._dict) != 0:
            args.append(repr(self._dict))
        if self._default is not MISSING:
            args.append(f"default={self._default!r}")
        return f"{type(self).__name__}({', '.join(args)})"

    def __reversed__(self: Self, /) -> Iterator[KT]:
        return reversed(self._dict)

    def __setitem__(self: Self, key: KT, value: VT, /) -> None:
        self._dict[key] = value

    def clear(self: Self, /) -> None:
        self._dict.clear()

    def copy(self: Self, /) -> Self:
        return type(self)(self._dict, default=self._default)

    @property
    def default(self: Self, /) -> VT:
        """The value returned for missing keys."""
        if self._default is MISSING:
            raise AttributeError(f"{type(self).__name__} has no default value")
        return self._default

    def get(self: Self, key: KT, fallback: Optional[T] = None, /) -> Union[VT, T, None]:
        return self._dict.get(key, fallback)

    @property
    def has_default(self: Self, /) -> bool:
        return self._default is not MISSING

    @property
    def inner(self: Self, /) -> dict[KT, VT]:
        """The underlying dict, shared rather than copied."""
        return self._dict

    def items(self: Self, /) -> ItemsView[KT, VT]:
        return self._dict.items()

    def keys(self: Self, /) -> KeysView[KT]:
        return self._dict.keys()

    def pop(self: Self, key: KT, /, *args: Any) -> VT:
        return self._dict.pop(key, *args)

    def popitem(self: Self, /) -> Tuple[KT, VT]:
        return self._dict.popitem()

    def setdefault(self: Self, key: KT, value: VT = None, /) -> VT:
        return self._dict.setdefault(key, value)

    def update(self: Self, other: Any = (), /, **kwargs: VT) -> None:
        if isinstance(other, EasyMap):
            other = other._dict
        self._dict.update(other, **kwargs)

    def values(self: Self, /) -> ValuesView[VT]:
        return self._dict.values()
