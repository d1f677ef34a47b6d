from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from ..types import *

logger = logging.getLogger(__name__)


# --- abstract base class ---

class Cursor(ABC, Generic[T]):
    """
    a single-pass sequence polled with has_next() / next() / remove().
    every cursor is also a python iterator, so it can be fed to for-loops,
    list() and itertools directly.
    """

    @abstractmethod
    def has_next(self) -> bool:
        """whether a further element is obtainable"""
        pass

    @abstractmethod
    def next(self) -> T:
        """consume and return the next element, raising SequenceExhausted at the end"""
        pass

    def remove(self) -> None:
        """remove the most recently returned element from the underlying collection"""
        raise UnsupportedOperationError(f"{type(self).__name__} does not support remove()")

    def __iter__(self) -> 'Cursor[T]':
        return self

    def __next__(self) -> T:
        return self.next()


# --- raw sources ---

class ListCursor(Cursor[T]):
    """positional cursor over a mutable list, supporting removal of the last returned element"""

    def __init__(self, items: List[T]):
        if items is None:
            raise TypeError("items must be a list, got NoneType")
        self._items = items
        self._index = 0
        self._last = -1

    def has_next(self) -> bool:
        return self._index < len(self._items)

    def next(self) -> T:
        if not self.has_next():
            raise SequenceExhausted()
        value = self._items[self._index]
        self._last = self._index
        self._index += 1
        return value

    def remove(self) -> None:
        if self._last < 0:
            logger.debug("remove() on %s without a preceding next()", type(self).__name__)
            raise IllegalStateError("remove() must directly follow a call to next()")
        del self._items[self._last]
        # the following element shifted into the removed slot
        self._index = self._last
        self._last = -1


class LookaheadCursor(Cursor[T]):
    """
    caches one computed-ahead element so that has_next() can answer without
    consuming anything the caller has not yet seen.

    the lookahead is produced by a find_next strategy: a zero-argument callable
    returning the next qualifying element or raising SequenceExhausted. an
    optional remove_last callable removes the element most recently produced
    by the strategy from the underlying collection.
    """

    def __init__(self, find_next: Callable[[], T],
                 remove_last: Optional[Callable[[], None]] = None):
        self._find_next = require_callable(find_next, "find_next")
        self._remove_last = remove_last
        self._cached: Optional[T] = None
        self._has_cached = False
        self._can_remove = False
        self._exhausted = False

    def _advance(self) -> bool:
        """run the strategy once and cache the result, returning False when exhausted"""
        if self._exhausted:
            return False
        try:
            self._cached = self._find_next()
        except SequenceExhausted:
            self._exhausted = True
            return False
        self._has_cached = True
        return True

    def has_next(self) -> bool:
        if self._has_cached:
            return True
        if self._exhausted:
            return False
        # polling moves the upstream past the element a remove() would target
        self._can_remove = False
        return self._advance()

    def next(self) -> T:
        self._can_remove = False
        if not self._has_cached and not self._advance():
            raise SequenceExhausted()
        value = self._cached
        self._cached = None
        self._has_cached = False
        self._can_remove = True
        return value

    def remove(self) -> None:
        if not self._can_remove:
            logger.debug("remove() on %s while not permitted", type(self).__name__)
            raise IllegalStateError("remove() must directly follow a call to next()")
        if self._remove_last is None:
            raise UnsupportedOperationError(f"{type(self).__name__} does not support remove()")
        self._remove_last()
        self._can_remove = False


class IteratorCursor(LookaheadCursor[T]):
    """adapts any python iterable, including generators and infinite iterators"""

    def __init__(self, source: Iterable[T]):
        if source is None:
            raise TypeError("source must be iterable, got NoneType")
        self._iterator = iter(source)
        super().__init__(self._pull)

    def _pull(self) -> T:
        try:
            return next(self._iterator)
        except StopIteration:
            raise SequenceExhausted() from None


def cursor_of(source: Iterable[T]) -> Cursor[T]:
    """
    borrow a cursor over source. cursors are returned as-is, lists get a
    removable ListCursor, and anything else iterable is adapted lazily.
    """
    if isinstance(source, Cursor):
        return source
    if isinstance(source, list):
        return ListCursor(source)
    if source is None:
        raise TypeError("source must be iterable, got NoneType")
    iterator = iter(source)
    # enumerables hand out their own cursors, keep their remove() reachable
    if isinstance(iterator, Cursor):
        return iterator
    return IteratorCursor(iterator)
