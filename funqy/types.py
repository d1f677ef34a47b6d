from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Reducer = Callable[[U, T], U]
Action = Callable[[T], Any]


# --- protocol violations ---

class SequenceExhausted(StopIteration):
    """raised by next() when no further element is obtainable"""

    def __init__(self, message: str = "sequence has no more elements"):
        super().__init__(message)


class IllegalStateError(RuntimeError):
    """raised by remove() when removal is not currently permitted"""
    pass


class UnsupportedOperationError(NotImplementedError):
    """raised by operations a cursor structurally cannot support"""
    pass


# --- argument checks ---

def require_callable(func: Any, name: str) -> Callable:
    """reject missing or non-callable functions at construction time"""
    if func is None or not callable(func):
        raise TypeError(f"{name} must be callable, got {type(func).__name__}")
    return func


def require_count(count: Any, name: str, minimum: int = 0) -> int:
    """reject non-integer counts and counts below the minimum"""
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"{name} must be an int, got {type(count).__name__}")
    if count < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {count}")
    return count
