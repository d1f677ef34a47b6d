from __future__ import annotations
import logging
from .cursor import Cursor, cursor_of
from ..types import *

logger = logging.getLogger(__name__)


class MappedCursor(Cursor[U]):
    """
    applies transform to each upstream element, one for one. nothing is
    buffered: has_next() and remove() go straight to the upstream, so removal
    permission is whatever the upstream says it is.
    """

    def __init__(self, upstream: Iterable[T], transform: Selector[T, U]):
        if upstream is None:
            raise TypeError("upstream must be iterable, got NoneType")
        self._transform = require_callable(transform, "transform")
        self._upstream: Cursor[T] = cursor_of(upstream)
        logger.debug("mapping %s", type(self._upstream).__name__)

    def has_next(self) -> bool:
        return self._upstream.has_next()

    def next(self) -> U:
        # the upstream has already advanced if transform raises
        return self._transform(self._upstream.next())

    def remove(self) -> None:
        self._upstream.remove()
