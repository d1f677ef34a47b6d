from __future__ import annotations
import typing
from collections import Counter
import numpy as np
import pandas as pd
from .. import eager
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(iter(self._enumerable))

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(iter(self._enumerable))

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(iter(self._enumerable)))

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def bag(self) -> typing.Counter[T]:
        """convert to a multiset of element counts"""
        return Counter(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(iter(self._enumerable)))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(list(iter(self._enumerable)))

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        source = self._enumerable if predicate is None else self._enumerable.where(predicate)
        return sum(1 for _ in source)

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition, or if there are any elements at all"""
        if predicate is None: return iter(self._enumerable).has_next()
        return eager.any(self._enumerable, predicate)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return eager.all(self._enumerable, predicate)

    def none(self, predicate: Predicate[T]) -> bool:
        """check that no element satisfies condition"""
        return eager.none(self._enumerable, predicate)

    def first(self, predicate: Optional[Predicate[T]] = None, default: Any = eager._MISSING) -> T:
        """get first element; raises ValueError when empty unless a default is given"""
        return eager.first(self._enumerable, predicate, default)

    def second(self, predicate: Optional[Predicate[T]] = None, default: Any = eager._MISSING) -> T:
        """get second element; raises ValueError when missing unless a default is given"""
        return eager.second(self._enumerable, predicate, default)

    def last(self, predicate: Optional[Predicate[T]] = None, default: Any = eager._MISSING) -> T:
        """get last element; raises ValueError when empty unless a default is given"""
        return eager.last(self._enumerable, predicate, default)

    def rest(self) -> List[T]:
        """everything after the first element"""
        return eager.rest(self._enumerable)

    def reduce(self, reducer: Reducer[U, T], *initial: U) -> U:
        """applies reducer over sequence, optionally seeded"""
        return eager.reduce(self._enumerable, reducer, *initial)
