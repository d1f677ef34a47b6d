from __future__ import annotations
import logging
from .cursor import Cursor, LookaheadCursor, cursor_of
from ..types import *

logger = logging.getLogger(__name__)


class FilteredCursor(LookaheadCursor[T]):
    """yields only the upstream elements satisfying predicate, in order"""

    def __init__(self, upstream: Iterable[T], predicate: Predicate[T]):
        if upstream is None:
            raise TypeError("upstream must be iterable, got NoneType")
        self._predicate = require_callable(predicate, "predicate")
        self._upstream: Cursor[T] = cursor_of(upstream)
        super().__init__(self._find_match, self._upstream.remove)
        logger.debug("filtering %s", type(self._upstream).__name__)

    def _find_match(self) -> T:
        while self._upstream.has_next():
            candidate = self._upstream.next()
            if self._predicate(candidate):
                return candidate
        raise SequenceExhausted()


class RejectedCursor(FilteredCursor[T]):
    """yields only the upstream elements failing predicate, in order"""

    def __init__(self, upstream: Iterable[T], predicate: Predicate[T]):
        require_callable(predicate, "predicate")
        super().__init__(upstream, lambda item: not predicate(item))
