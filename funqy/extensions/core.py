from __future__ import annotations
import typing
from .. import lazy
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable
    from ..iterators import BatchCursor

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        return lazy.filter(self, predicate)

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        return lazy.map(self, selector)

    def reject(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """drop elements matching a predicate"""
        return lazy.reject(self, predicate)

    def batch(self: 'Enumerable[T]', size: int) -> 'Enumerable[BatchCursor[T]]':
        """split into lazy batches of at most 'size' elements"""
        return lazy.batch(self, size)

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        return lazy.take(self, count)

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        return lazy.drop(self, count)

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        return lazy.take_while(self, predicate)

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        return lazy.drop_while(self, predicate)

    def of_type(self: 'Enumerable[T]', type_filter: Type[U]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        # syntactic sugar over where()
        return self.where(lambda item: isinstance(item, type_filter))
