"""
container literals. lists, sets, dicts and bags come back as thin subclasses
of the builtin containers with an and_() method for extending them inline:

    list_with(1, 2).and_(3, 4)          -> [1, 2, 3, 4]
    dict_with('a', 1).and_('b', 2)      -> {'a': 1, 'b': 2}
"""
from __future__ import annotations
import typing
from collections import Counter
from .types import *
from .iterators import ListCursor

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable


class LiteralList(list, Generic[T]):
    def and_(self, *items: T) -> 'LiteralList[T]':
        return LiteralList([*self, *items])


class LiteralSet(set, Generic[T]):
    def and_(self, *items: T) -> 'LiteralSet[T]':
        return LiteralSet(self.union(items))


class LiteralDict(dict, Generic[K, V]):
    def and_(self, key: K, value: V) -> 'LiteralDict[K, V]':
        extended = LiteralDict(self)
        extended[key] = value
        return extended


class LiteralBag(Counter):
    """a multiset: element -> number of occurrences"""

    def and_(self, *items: Any) -> 'LiteralBag':
        extended = LiteralBag(self)
        extended.update(items)
        return extended


def list_with(*items: T) -> LiteralList[T]:
    return LiteralList(items)


def list_from(source: Iterable[T]) -> LiteralList[T]:
    return LiteralList(source)


def set_with(*items: T) -> LiteralSet[T]:
    return LiteralSet(items)


def set_from(source: Iterable[T]) -> LiteralSet[T]:
    return LiteralSet(source)


def dict_with(key: K, value: V) -> LiteralDict[K, V]:
    return LiteralDict({key: value})


def dict_from(pairs: Iterable[Tuple[K, V]]) -> LiteralDict[K, V]:
    return LiteralDict(pairs)


def bag_with(*items: Any) -> LiteralBag:
    return LiteralBag(items)


def bag_from(source: Iterable[Any]) -> LiteralBag:
    return LiteralBag(source)


def iterable_with(*items: T) -> 'Enumerable[T]':
    """a re-iterable enumerable over the given items"""
    from .factories import from_iterable
    return from_iterable(list(items))


def iterator_with(*items: T) -> ListCursor[T]:
    """a single-pass cursor over the given items; supports remove()"""
    return ListCursor(list(items))
