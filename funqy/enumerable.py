from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .iterators import Cursor

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_cursor(self) -> Cursor[T]:
        """get a fresh cursor over the underlying sequence"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, cursor_func: Callable[[], Cursor[T]]):
        """init with a function that returns a new cursor each time it is called"""
        self._cursor_func = cursor_func

    def _get_cursor(self) -> Cursor[T]:
        return self._cursor_func()

    def __iter__(self) -> Cursor[T]:
        return self._get_cursor()

    # no __len__: list() would ask for a length hint and walk the source twice

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """
    a lazy, re-iterable view over a sequence. every iteration builds a new
    cursor chain, so single-pass sources (generators, iterators) can only be
    walked once while lists can be walked any number of times.
    """
    def __init__(self, cursor_func: Callable[[], Cursor[T]]):
        super().__init__(cursor_func)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"Enumerable({self._cursor_func!r})"
