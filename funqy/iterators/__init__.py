from .cursor import Cursor, ListCursor, LookaheadCursor, IteratorCursor, cursor_of
from .filtered import FilteredCursor, RejectedCursor
from .mapped import MappedCursor
from .batched import BatchedCursor, BatchCursor
from .bounded import TakeCursor, DropCursor, TakeWhileCursor, DropWhileCursor

__all__ = [
    "Cursor",
    "ListCursor",
    "LookaheadCursor",
    "IteratorCursor",
    "cursor_of",
    "FilteredCursor",
    "RejectedCursor",
    "MappedCursor",
    "BatchedCursor",
    "BatchCursor",
    "TakeCursor",
    "DropCursor",
    "TakeWhileCursor",
    "DropWhileCursor",
]
