"""
fixed-arity heterogeneous records, one through nine fields. they are named
tuples: immutable, compared and hashed field by field, and only equal to
records of the same type. a Pair is never equal to a plain tuple.
"""
from typing import NamedTuple, Any, Tuple


class Single(NamedTuple):
    first: Any


class Pair(NamedTuple):
    first: Any
    second: Any


class Triple(NamedTuple):
    first: Any
    second: Any
    third: Any


class Quadruple(NamedTuple):
    first: Any
    second: Any
    third: Any
    fourth: Any


class Quintuple(NamedTuple):
    first: Any
    second: Any
    third: Any
    fourth: Any
    fifth: Any


class Sextuple(NamedTuple):
    first: Any
    second: Any
    third: Any
    fourth: Any
    fifth: Any
    sixth: Any


class Septuple(NamedTuple):
    first: Any
    second: Any
    third: Any
    fourth: Any
    fifth: Any
    sixth: Any
    seventh: Any


class Octuple(NamedTuple):
    first: Any
    second: Any
    third: Any
    fourth: Any
    fifth: Any
    sixth: Any
    seventh: Any
    eighth: Any


class Nonuple(NamedTuple):
    first: Any
    second: Any
    third: Any
    fourth: Any
    fifth: Any
    sixth: Any
    seventh: Any
    eighth: Any
    ninth: Any


_BY_ARITY = (Single, Pair, Triple, Quadruple, Quintuple, Sextuple, Septuple, Octuple, Nonuple)


def _eq(self, other: Any) -> bool:
    return type(self) is type(other) and tuple.__eq__(self, other)


def _ne(self, other: Any) -> bool:
    return not _eq(self, other)


def _hash(self) -> int:
    return hash((type(self), tuple.__hash__(self)))


# equality is type-strict: Pair(1, 2) != (1, 2)
for _record in _BY_ARITY:
    _record.__eq__ = _eq
    _record.__ne__ = _ne
    _record.__hash__ = _hash


def tuple_of(*values: Any) -> Tuple[Any, ...]:
    """build the record type matching the number of values"""
    if not 1 <= len(values) <= len(_BY_ARITY):
        raise ValueError(f"tuples hold 1 to {len(_BY_ARITY)} values, got {len(values)}")
    return _BY_ARITY[len(values) - 1](*values)


# --- literal factories ---
single = Single
pair = Pair
triple = Triple
quadruple = Quadruple
quintuple = Quintuple
sextuple = Sextuple
septuple = Septuple
octuple = Octuple
nonuple = Nonuple
