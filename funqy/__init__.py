"""
funqy: functional collections for python.

lazy cursors (filter, map, batch, take, drop) that never pull more from their
source than a query needs, eager whole-sequence operations, container literals
and fixed-arity tuples.
"""
import logging

# expose the main classes
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    funqy,
    F
)

# expose the cursor family
from .iterators import (
    Cursor,
    ListCursor,
    LookaheadCursor,
    IteratorCursor,
    cursor_of,
    FilteredCursor,
    RejectedCursor,
    MappedCursor,
    BatchedCursor,
    BatchCursor
)

# expose the protocol errors
from .types import (
    SequenceExhausted,
    IllegalStateError,
    UnsupportedOperationError
)

# operation namespaces: funqy.lazy.map(...), funqy.eager.any(...)
from . import lazy, eager, literals, tuples

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "funqy",
    "F",
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
    "SequenceExhausted",
    "IllegalStateError",
    "UnsupportedOperationError",
    "lazy",
    "eager",
    "literals",
    "tuples"
]
