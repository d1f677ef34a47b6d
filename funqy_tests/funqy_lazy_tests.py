import itertools
import numpy as np
import pandas as pd
from faker import Faker
from funqy import (
    lazy, F, from_iterable, from_range, repeat, empty, generate, Enumerable,
    IllegalStateError
)
from suite import test, assert_that, assert_raises, run

Faker.seed(42)
fake = Faker()
people = [{'name': fake.first_name(), 'age': fake.random_int(min=18, max=65)} for _ in range(25)]

numbers = F(list(range(1, 11)))  # 1 through 10


def recording(values, produced):
    for value in values:
        produced.append(value)
        yield value


# lazy module tests

@test("lazy operations check their arguments immediately")
def test_lazy_eager_validation():
    assert_raises(TypeError, lambda: lazy.filter([1], None), "None predicate")
    assert_raises(TypeError, lambda: lazy.map([1], None), "None transform")
    assert_raises(ValueError, lambda: lazy.batch([1], 0), "zero batch size")
    assert_raises(ValueError, lambda: lazy.take([1], -2), "negative take")
    assert_raises(TypeError, lambda: lazy.filter(None, bool), "None source")


@test("lazy operations leave the source alone until iterated")
def test_lazy_deferred():
    produced = []
    evens = lazy.filter(recording(range(1, 50), produced), lambda n: n % 2 == 0)
    labels = lazy.map(evens, lambda n: f"#{n}")
    assert_that(produced == [], "building the pipeline should not pull")
    first_two = lazy.take(labels, 2).to.list()
    assert_that(first_two == ["#2", "#4"], f"got {first_two}")
    assert_that(produced == [1, 2, 3, 4], f"got {produced}")


@test("lazy filter and map cover the scenario inputs")
def test_lazy_scenarios():
    assert_that(lazy.filter([9, 8, 7, 6, 5, 4, 3, 2, 1], lambda n: n % 2 == 0).to.list() == [8, 6, 4, 2],
                "filter evens")
    assert_that(lazy.map([1, 2, 3], str).to.list() == ["1", "2", "3"], "map stringify")
    batches = [list(b) for b in lazy.batch([1, 2, 3, 4], 2)]
    assert_that(batches == [[1, 2], [3, 4]], f"got {batches}")


@test("lazy reject, drop, take_while and drop_while")
def test_lazy_misc():
    assert_that(lazy.reject([1, 2, 3, 4], lambda n: n % 2 == 0).to.list() == [1, 3], "reject evens")
    assert_that(lazy.drop([1, 2, 3, 4], 3).to.list() == [4], "drop three")
    assert_that(lazy.take_while([1, 2, 5, 1], lambda n: n < 3).to.list() == [1, 2], "take while small")
    assert_that(lazy.drop_while([1, 2, 5, 1], lambda n: n < 3).to.list() == [5, 1], "drop while small")


# Enumerable tests

@test("enumerables over lists can be iterated repeatedly")
def test_enumerable_reiterable():
    evens = numbers.where(lambda n: n % 2 == 0)
    assert_that(evens.to.list() == [2, 4, 6, 8, 10], "first pass")
    assert_that(evens.to.list() == [2, 4, 6, 8, 10], "second pass")
    assert_that(evens.to.count() == 5, "count walks once more")


@test("conversions walk a single-pass source exactly once")
def test_single_pass_conversions():
    doubled = F(n for n in [1, 2, 3]).select(lambda n: n * 2).to.list()
    assert_that(doubled == [2, 4, 6], f"list from a generator, got {doubled}")
    as_tuple = F(iter(["a", "b"])).select(str.upper).to.tuple()
    assert_that(as_tuple == ("A", "B"), f"tuple from an iterator, got {as_tuple}")
    arr = F(n for n in [4, 5]).to.array()
    assert_that(np.array_equal(arr, np.array([4, 5])), f"array from a generator, got {arr}")

    produced = []
    evens = lazy.take(lazy.filter(recording(itertools.count(1), produced), lambda n: n % 2 == 0), 3).to.list()
    assert_that(evens == [2, 4, 6], f"got {evens}")
    assert_that(produced == [1, 2, 3, 4, 5, 6], f"source pulled once per element, got {produced}")


@test("predicates and transforms run once per element")
def test_callbacks_run_once():
    tested, mapped = [], []

    def is_even(n):
        tested.append(n)
        return n % 2 == 0

    def square(n):
        mapped.append(n)
        return n * n

    result = F([1, 2, 3, 4]).where(is_even).select(square).to.list()
    assert_that(result == [4, 16], f"got {result}")
    assert_that(tested == [1, 2, 3, 4], f"predicate calls, got {tested}")
    assert_that(mapped == [2, 4], f"transform calls, got {mapped}")

    tested.clear()
    assert_that(F([1, 2, 3]).where(is_even).to.tuple() == (2,), "tuple")
    assert_that(tested == [1, 2, 3], f"predicate calls for tuple, got {tested}")


@test("fluent chains compose lazily")
def test_enumerable_chain():
    result = numbers.where(lambda n: n % 2 == 0).select(lambda n: n * n).skip(1).take(3).to.list()
    assert_that(result == [16, 36, 64], f"got {result}")
    ages = from_iterable(people).where(lambda p: p['age'] > 40).select(lambda p: p['name']).to.list()
    assert_that(ages == [p['name'] for p in people if p['age'] > 40], "names of people over 40")


@test("enumerable batch, skip_while, take_while, reject and of_type")
def test_enumerable_operations():
    batches = [list(b) for b in numbers.batch(4)]
    assert_that(batches == [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10]], f"got {batches}")
    assert_that(numbers.skip_while(lambda n: n < 8).to.list() == [8, 9, 10], "skip while")
    assert_that(numbers.take_while(lambda n: n < 3).to.list() == [1, 2], "take while")
    assert_that(numbers.reject(lambda n: n > 2).to.list() == [1, 2], "reject")
    mixed = F([1, 'a', 2.5, 'b', None])
    assert_that(mixed.of_type(str).to.list() == ['a', 'b'], "strings only")


@test("removal reaches the source list through an enumerable chain")
def test_enumerable_remove():
    items = [1, 2, 3, 4]
    cursor = iter(F(items).where(lambda n: n % 2 == 0))
    cursor.next()
    cursor.remove()
    assert_that(items == [1, 3, 4], f"got {items}")
    assert_raises(IllegalStateError, cursor.remove, "remove() twice")


@test("factories build the expected sequences")
def test_factories():
    assert_that(from_range(3, 4).to.list() == [3, 4, 5, 6], "range")
    assert_that(repeat('x', 3).to.list() == ['x', 'x', 'x'], "bounded repeat")
    assert_that(repeat('y').take(2).to.list() == ['y', 'y'], "endless repeat")
    assert_that(empty().to.list() == [], "empty")
    counter = itertools.count()
    assert_that(generate(lambda: next(counter), 3).to.list() == [0, 1, 2], "bounded generate")
    assert_that(generate(lambda: 7).take(2).to.list() == [7, 7], "endless generate")
    assert_that(isinstance(from_iterable([]), Enumerable), "from_iterable builds an enumerable")
    assert_raises(TypeError, lambda: from_iterable(None), "None data")


# terminal accessor tests

@test("terminal conversions materialize the sequence")
def test_terminal_conversions():
    small = F([3, 1, 3, 2])
    assert_that(small.to.tuple() == (3, 1, 3, 2), "tuple")
    assert_that(small.to.set() == {1, 2, 3}, "set")
    assert_that(small.to.bag()[3] == 2, "bag counts duplicates")
    assert_that(small.to.dict(lambda n: n, lambda n: n * 10) == {3: 30, 1: 10, 2: 20}, "dict")


@test("terminal numpy and pandas conversions")
def test_terminal_numpy_pandas():
    arr = numbers.where(lambda n: n > 7).to.array()
    assert_that(isinstance(arr, np.ndarray), "should be an ndarray")
    assert_that(np.array_equal(arr, np.array([8, 9, 10])), f"got {arr}")

    series = numbers.select(lambda n: n * 2).to.pandas()
    assert_that(isinstance(series, pd.Series), "should be a series")
    assert_that(series.tolist() == [2, 4, 6, 8, 10, 12, 14, 16, 18, 20], "series values")

    frame = from_iterable(people).take(5).to.df()
    assert_that(list(frame.columns) == ['name', 'age'], f"got {list(frame.columns)}")
    assert_that(len(frame) == 5, "five rows")


@test("terminal queries")
def test_terminal_queries():
    assert_that(numbers.to.count() == 10, "count")
    assert_that(numbers.to.count(lambda n: n > 7) == 3, "predicated count")
    assert_that(numbers.to.any() and not empty().to.any(), "any without predicate")
    assert_that(numbers.to.any(lambda n: n > 9), "any")
    assert_that(numbers.to.all(lambda n: n > 0), "all")
    assert_that(numbers.to.none(lambda n: n > 10), "none")
    assert_that(numbers.to.first() == 1 and numbers.to.second() == 2, "first and second")
    assert_that(numbers.to.last() == 10 and numbers.to.last(lambda n: n < 4) == 3, "last")
    assert_that(F([None]).to.first() is None and empty().to.first(default=0) == 0, "None element and default")
    assert_raises(ValueError, lambda: empty().to.last(), "last of nothing")
    assert_that(numbers.to.rest() == list(range(2, 11)), "rest")
    assert_that(numbers.to.reduce(lambda acc, n: acc + n) == 55, "reduce")
    assert_that(empty().to.reduce(lambda acc, n: acc + n, 0) == 0, "seeded reduce of nothing")


if __name__ == "__main__":
    run(title="funqy lazy and enumerable test suite")
