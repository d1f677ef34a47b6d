import typing
from itertools import count as _count, repeat as _repeat
from .types import *
from .iterators import cursor_of, IteratorCursor

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable"""
    from .enumerable import Enumerable
    if data is None:
        raise TypeError("data must be iterable, got NoneType")
    return Enumerable(lambda: cursor_of(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    require_count(count, "count")
    return Enumerable(lambda: IteratorCursor(range(start, start + count)))

def repeat(item: T, count: Optional[int] = None) -> 'Enumerable[T]':
    """create enumerable with repeated item, endlessly when count is None"""
    from .enumerable import Enumerable
    if count is None:
        return Enumerable(lambda: IteratorCursor(_repeat(item)))
    require_count(count, "count")
    return Enumerable(lambda: IteratorCursor(_repeat(item, count)))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: IteratorCursor(()))

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Enumerable[T]':
    """generate a sequence by calling a function, endlessly when count is None"""
    from .enumerable import Enumerable
    require_callable(generator_func, "generator_func")
    if count is None:
        return Enumerable(lambda: IteratorCursor(generator_func() for _ in _count()))
    require_count(count, "count")
    return Enumerable(lambda: IteratorCursor(generator_func() for _ in range(count)))

# --- aliases ---
funqy = from_iterable
F = from_iterable
f = from_iterable
