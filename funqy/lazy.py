"""
lazy operations. each one checks its arguments immediately but touches the
source only when the returned enumerable is iterated, and then only as far as
the caller pulls.
"""
from __future__ import annotations
import typing
from .types import *
from .iterators import (
    cursor_of, FilteredCursor, RejectedCursor, MappedCursor, BatchedCursor,
    BatchCursor, TakeCursor, DropCursor, TakeWhileCursor, DropWhileCursor
)

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable


def _require_source(source: Any) -> None:
    if source is None:
        raise TypeError("source must be iterable, got NoneType")


def map(source: Iterable[T], transform: Selector[T, U]) -> 'Enumerable[U]':
    """apply transform to every element"""
    from .enumerable import Enumerable
    _require_source(source)
    require_callable(transform, "transform")
    return Enumerable(lambda: MappedCursor(cursor_of(source), transform))


def filter(source: Iterable[T], predicate: Predicate[T]) -> 'Enumerable[T]':
    """keep the elements satisfying predicate"""
    from .enumerable import Enumerable
    _require_source(source)
    require_callable(predicate, "predicate")
    return Enumerable(lambda: FilteredCursor(cursor_of(source), predicate))


def reject(source: Iterable[T], predicate: Predicate[T]) -> 'Enumerable[T]':
    """drop the elements satisfying predicate"""
    from .enumerable import Enumerable
    _require_source(source)
    require_callable(predicate, "predicate")
    return Enumerable(lambda: RejectedCursor(cursor_of(source), predicate))


def batch(source: Iterable[T], batch_size: int) -> 'Enumerable[BatchCursor[T]]':
    """
    split into consecutive batches of at most batch_size elements. the
    batches themselves are lazy cursors sharing one pass over the source.
    """
    from .enumerable import Enumerable
    _require_source(source)
    require_count(batch_size, "batch_size", minimum=1)
    return Enumerable(lambda: BatchedCursor(cursor_of(source), batch_size))


def take(source: Iterable[T], count: int) -> 'Enumerable[T]':
    from .enumerable import Enumerable
    _require_source(source)
    require_count(count, "count")
    return Enumerable(lambda: TakeCursor(cursor_of(source), count))


def drop(source: Iterable[T], count: int) -> 'Enumerable[T]':
    from .enumerable import Enumerable
    _require_source(source)
    require_count(count, "count")
    return Enumerable(lambda: DropCursor(cursor_of(source), count))


def take_while(source: Iterable[T], predicate: Predicate[T]) -> 'Enumerable[T]':
    from .enumerable import Enumerable
    _require_source(source)
    require_callable(predicate, "predicate")
    return Enumerable(lambda: TakeWhileCursor(cursor_of(source), predicate))


def drop_while(source: Iterable[T], predicate: Predicate[T]) -> 'Enumerable[T]':
    from .enumerable import Enumerable
    _require_source(source)
    require_callable(predicate, "predicate")
    return Enumerable(lambda: DropWhileCursor(cursor_of(source), predicate))
