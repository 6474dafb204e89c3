"""
Wrappers around the builtin set and dict which make them a little more
convenient for prototyping and short scripts. `EasySet` accepts any
iterable in its set operators, and `EasyMap` returns a default value
for missing keys. Both forward everything else to the builtin
container they wrap.

    >>> from easy_collections import easy_map, easy_set
    >>> a = easy_set(1, 2, 3)
    >>> b = easy_set(2, 3, 4)
    >>> a & b, a | b, a ^ b, a - b
    (EasySet({2, 3}), EasySet({1, 2, 3, 4}), EasySet({1, 4}), EasySet({1}))
    >>> m = easy_map(("foo", 1), ("bar", 10), default=42)
    >>> m["foo"], m["nope"]
    (1, 42)
"""
from ._src.easy_map import MISSING, EasyMap
from ._src.easy_set import EasySet
from ._src.literals import easy_map, easy_set

__all__ = ["EasyMap", "EasySet", "MISSING", "easy_map", "easy_set"]

__version__ = "0.3.0"
