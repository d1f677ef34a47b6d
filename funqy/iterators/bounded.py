from __future__ import annotations
from .cursor import Cursor, LookaheadCursor, cursor_of
from ..types import *


def _borrow(upstream: Iterable[T]) -> Cursor[T]:
    if upstream is None:
        raise TypeError("upstream must be iterable, got NoneType")
    return cursor_of(upstream)


class TakeCursor(LookaheadCursor[T]):
    """yields at most count upstream elements"""

    def __init__(self, upstream: Iterable[T], count: int):
        self._remaining = require_count(count, "count")
        self._upstream = _borrow(upstream)
        super().__init__(self._take_one)

    def _take_one(self) -> T:
        if self._remaining == 0 or not self._upstream.has_next():
            raise SequenceExhausted()
        self._remaining -= 1
        return self._upstream.next()


class DropCursor(LookaheadCursor[T]):
    """skips the first count upstream elements on first use"""

    def __init__(self, upstream: Iterable[T], count: int):
        self._to_skip = require_count(count, "count")
        self._upstream = _borrow(upstream)
        super().__init__(self._after_skip)

    def _after_skip(self) -> T:
        while self._to_skip > 0 and self._upstream.has_next():
            self._upstream.next()
            self._to_skip -= 1
        if not self._upstream.has_next():
            raise SequenceExhausted()
        return self._upstream.next()


class TakeWhileCursor(LookaheadCursor[T]):
    """yields upstream elements up to, not including, the first failing predicate"""

    def __init__(self, upstream: Iterable[T], predicate: Predicate[T]):
        self._predicate = require_callable(predicate, "predicate")
        self._upstream = _borrow(upstream)
        self._done = False
        super().__init__(self._while_matching)

    def _while_matching(self) -> T:
        if self._done or not self._upstream.has_next():
            raise SequenceExhausted()
        candidate = self._upstream.next()
        if not self._predicate(candidate):
            self._done = True
            raise SequenceExhausted()
        return candidate


class DropWhileCursor(LookaheadCursor[T]):
    """skips upstream elements while predicate holds, then yields the rest"""

    def __init__(self, upstream: Iterable[T], predicate: Predicate[T]):
        self._predicate = require_callable(predicate, "predicate")
        self._upstream = _borrow(upstream)
        self._dropping = True
        super().__init__(self._after_prefix)

    def _after_prefix(self) -> T:
        while self._upstream.has_next():
            candidate = self._upstream.next()
            if self._dropping and self._predicate(candidate):
                continue
            self._dropping = False
            return candidate
        raise SequenceExhausted()
