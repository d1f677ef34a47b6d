"""
eager operations. these walk the whole source (or as much of it as the answer
needs) immediately and return plain python values.
"""
from __future__ import annotations
import builtins
import functools
from collections import deque
from .types import *
from .iterators import (
    cursor_of, FilteredCursor, RejectedCursor, MappedCursor, BatchedCursor,
    TakeCursor, DropCursor
)

_MISSING = object()


def _source(source: Iterable[T]):
    if source is None:
        raise TypeError("source must be iterable, got NoneType")
    return cursor_of(source)


def _matching(source: Iterable[T], predicate: Optional[Predicate[T]]):
    if predicate is None:
        return _source(source)
    return FilteredCursor(_source(source), predicate)


# --- transformations ---

def map(source: Iterable[T], transform: Selector[T, U]) -> List[U]:
    return builtins.list(MappedCursor(_source(source), transform))


def filter(source: Iterable[T], predicate: Predicate[T]) -> List[T]:
    return builtins.list(FilteredCursor(_source(source), predicate))


def reject(source: Iterable[T], predicate: Predicate[T]) -> List[T]:
    return builtins.list(RejectedCursor(_source(source), predicate))


def batch(source: Iterable[T], batch_size: int) -> List[List[T]]:
    """split into consecutive lists of at most batch_size elements"""
    return [builtins.list(b) for b in BatchedCursor(_source(source), batch_size)]


def reduce(source: Iterable[T], reducer: Reducer[U, T], initial: Any = _MISSING) -> U:
    """
    fold the sequence with reducer(accumulator, element). without an initial
    value the first element seeds the fold, and an empty source is an error.
    """
    require_callable(reducer, "reducer")
    cursor = _source(source)
    if initial is _MISSING:
        if not cursor.has_next():
            raise ValueError("cannot reduce empty sequence without initial value")
        return functools.reduce(reducer, cursor)
    return functools.reduce(reducer, cursor, initial)


def each(source: Iterable[T], action: Action[T]) -> None:
    """run action for every element, for its side-effects"""
    require_callable(action, "action")
    for item in _source(source):
        action(item)


# --- predicates ---

def any(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """true if at least one element satisfies predicate. false for empty sequences."""
    return _matching(source, require_callable(predicate, "predicate")).has_next()


def all(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """true if every element satisfies predicate. true for empty sequences."""
    require_callable(predicate, "predicate")
    return not RejectedCursor(_source(source), predicate).has_next()


def none(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """true if no element satisfies predicate. true for empty sequences."""
    return not any(source, predicate)


# --- positional access ---

def _absent(predicate, default):
    if default is not _MISSING:
        return default
    if predicate is None:
        raise ValueError("sequence contains no elements")
    raise ValueError("no element satisfies the condition")


def first(source: Iterable[T], predicate: Optional[Predicate[T]] = None, default: Any = _MISSING) -> T:
    """first (matching) element. raises ValueError when there is none, unless a default is given"""
    cursor = _matching(source, predicate)
    return cursor.next() if cursor.has_next() else _absent(predicate, default)


def second(source: Iterable[T], predicate: Optional[Predicate[T]] = None, default: Any = _MISSING) -> T:
    """second (matching) element. raises ValueError when there is none, unless a default is given"""
    cursor = DropCursor(_matching(source, predicate), 1)
    return cursor.next() if cursor.has_next() else _absent(predicate, default)


def last(source: Iterable[T], predicate: Optional[Predicate[T]] = None, default: Any = _MISSING) -> T:
    """last (matching) element. raises ValueError when there is none, unless a default is given"""
    tail = deque(_matching(source, predicate), maxlen=1)
    return tail[0] if tail else _absent(predicate, default)


def first_n(source: Iterable[T], count: int, predicate: Optional[Predicate[T]] = None) -> List[T]:
    """up to count leading (matching) elements"""
    require_count(count, "count")
    return builtins.list(TakeCursor(_matching(source, predicate), count))


def last_n(source: Iterable[T], count: int, predicate: Optional[Predicate[T]] = None) -> List[T]:
    """up to count trailing (matching) elements"""
    require_count(count, "count")
    return builtins.list(deque(_matching(source, predicate), maxlen=count))


def rest(source: Iterable[T]) -> List[T]:
    """everything but the first element"""
    return builtins.list(DropCursor(_source(source), 1))
