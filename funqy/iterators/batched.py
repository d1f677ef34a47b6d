from __future__ import annotations
import logging
from collections import deque
from .cursor import Cursor, cursor_of
from ..types import *

logger = logging.getLogger(__name__)


class _BatchState(Generic[T]):
    """
    the one upstream cursor shared by an outer batched cursor and every batch
    it hands out, plus the batches still entitled to claim upstream elements.
    """

    def __init__(self, upstream: Cursor[T], size: int):
        self.upstream = upstream
        self.size = size
        self.open: deque = deque()

    def settle(self, upto: Optional['BatchCursor[T]'] = None) -> None:
        """
        let every open batch created before upto claim the rest of its share,
        so the next upstream element belongs to upto (or to a new batch when
        upto is None). claimed elements wait in the owning batch's buffer.
        """
        while self.open and self.open[0] is not upto:
            head = self.open.popleft()
            head._open = False
            while head._claimed < self.size and self.upstream.has_next():
                head._buffer.append(self.upstream.next())
                head._claimed += 1


class BatchCursor(Cursor[T]):
    """one batch: a bounded view over the shared upstream position"""

    def __init__(self, state: _BatchState[T]):
        self._state = state
        self._buffer: deque = deque()
        self._claimed = 0
        self._open = True

    def _claimable(self) -> bool:
        """whether this batch may still pull its next element from upstream"""
        if not self._open:
            return False
        self._state.settle(upto=self)
        if self._claimed < self._state.size and self._state.upstream.has_next():
            return True
        self._close()
        return False

    def _close(self) -> None:
        self._open = False
        if self._state.open and self._state.open[0] is self:
            self._state.open.popleft()

    def has_next(self) -> bool:
        return bool(self._buffer) or self._claimable()

    def next(self) -> T:
        if self._buffer:
            return self._buffer.popleft()
        if not self._claimable():
            raise SequenceExhausted("batch has no more elements")
        value = self._state.upstream.next()
        self._claimed += 1
        if self._claimed == self._state.size:
            self._close()
        return value

    def remove(self) -> None:
        raise UnsupportedOperationError("batches are positional and do not support remove()")


class BatchedCursor(Cursor[BatchCursor[T]]):
    """
    splits the upstream into consecutive batches of at most batch_size
    elements. batches are lazy and may be drained in any order or interleaved;
    each still yields exactly its own positional slice of the upstream.
    """

    def __init__(self, upstream: Iterable[T], batch_size: int):
        require_count(batch_size, "batch_size", minimum=1)
        if upstream is None:
            raise TypeError("upstream must be iterable, got NoneType")
        self._state = _BatchState(cursor_of(upstream), batch_size)
        logger.debug("batching %s in batches of %d", type(self._state.upstream).__name__, batch_size)

    def has_next(self) -> bool:
        self._state.settle()
        return self._state.upstream.has_next()

    def next(self) -> BatchCursor[T]:
        if not self.has_next():
            raise SequenceExhausted("no more batches")
        batch = BatchCursor(self._state)
        self._state.open.append(batch)
        return batch

    def remove(self) -> None:
        raise UnsupportedOperationError("batched cursors do not support remove()")
