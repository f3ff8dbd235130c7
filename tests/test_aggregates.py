"""Tests for the aggregate operations."""

import operator

import pytest

import lazychain as lc


def test_materialize() -> None:
    """`materialize` drains an iterable into a list."""
    assert lc.materialize([3, 1, 2]) == [3, 1, 2]
    assert lc.materialize(lc.empty()) == []
    it = lc.count().take(3)
    assert it.collect() == [0, 1, 2]
    assert it.collect() == []


def test_advance() -> None:
    """`advance` discards up to `n` elements."""
    it = lc.iter_from([1, 2, 3])
    lc.advance(it, 2)
    assert it.collect() == [3]
    it = lc.iter_from([1])
    lc.advance(it, 5)
    assert not it.valid
    assert lc.iter_from("abc").advance(1).collect() == ["b", "c"]


def test_exhaust_runs_side_effects() -> None:
    """`exhaust` pulls everything and keeps nothing."""
    seen: list[int] = []
    assert lc.exhaust(lc.imap(range(5), seen.append)) is None
    assert seen == [0, 1, 2, 3, 4]


def test_exhaust_large_sequence() -> None:
    """Exhausting a long stream does not accumulate anything."""
    it = lc.count().take(200_000)
    lc.exhaust(it)
    assert not it.valid


def test_reduce() -> None:
    """`reduce` left-folds, with or without an initial value."""
    assert lc.reduce(operator.sub, [10, 1, 2]) == 7  # noqa: PLR2004
    assert lc.reduce(operator.sub, [1, 2], 10) == 7  # noqa: PLR2004
    assert lc.reduce(operator.add, [], 0) == 0
    assert lc.reduce(operator.add, [5]) == 5  # noqa: PLR2004
    assert lc.iter_from("abc").reduce(operator.add) == "abc"
    assert lc.iter_from("bc").reduce(operator.add, "a") == "abc"
    assert lc.empty().reduce(operator.add, 0) == 0


def test_reduce_empty_without_initial() -> None:
    """Reducing nothing without an initial value is an error."""
    with pytest.raises(lc.EmptySequenceError):
        lc.reduce(operator.add, [])


def test_sum() -> None:
    """`sum` adds from `start`."""
    assert lc.sum([]) == 0
    assert lc.sum(range(101)) == 5050  # noqa: PLR2004
    assert lc.sum([1.5, 2.5], 1) == 5.0  # noqa: PLR2004
    assert lc.sum(["a", "b"], "") == "ab"


def test_min_max() -> None:
    """`min` and `max` find the extremes."""
    assert lc.min([3, 1, 2]) == 1
    assert lc.max([3, 1, 2]) == 3  # noqa: PLR2004
    assert lc.count().take(10).max() == 9  # noqa: PLR2004
    assert lc.min("hello") == "e"


def test_min_max_empty() -> None:
    """Both raise `EmptySequenceError` on empty input."""
    with pytest.raises(lc.EmptySequenceError):
        lc.min([])
    with pytest.raises(lc.EmptySequenceError):
        lc.max(lc.empty())


def test_min_max_keep_first_of_equals() -> None:
    """Ties keep the earliest element."""
    data = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]
    assert lc.min(data, key=operator.itemgetter(0)) == (0, "b")
    assert lc.max(data, key=operator.itemgetter(0)) == (1, "a")


def test_min_incomparable_propagates() -> None:
    """Comparison errors are not caught."""
    with pytest.raises(TypeError):
        lc.min([1, "a"])


def test_for_each() -> None:
    """`for_each` calls `func` on every element, in order."""
    seen: list[str] = []
    lc.for_each("abc", seen.append)
    assert seen == ["a", "b", "c"]


def test_for_each_partial_effects_on_error() -> None:
    """Side effects before a failure stay applied."""
    seen: list[int] = []

    def _record(x: int) -> None:
        if x == 2:  # noqa: PLR2004
            raise RuntimeError
        seen.append(x)

    with pytest.raises(RuntimeError):
        lc.for_each([1, 2, 3], _record)
    assert seen == [1]


def test_every_and_some_short_circuit() -> None:
    """`every` stops at the first failure and `some` at the first success."""
    assert lc.every([2, 4], lambda x: x % 2 == 0)
    assert lc.every([], lambda _: False)
    assert not lc.every(lc.count(), lambda x: x < 10)  # noqa: PLR2004
    assert lc.some(lc.count(), lambda x: x > 10)  # noqa: PLR2004
    assert not lc.some([], lambda _: True)
    it = lc.iter_from([1, 2, 3])
    assert it.some(lambda x: x == 1)
    assert it.collect() == [2, 3]


def test_sorted() -> None:
    """`sorted` materializes and sorts, stably."""
    assert lc.sorted([3, 1, 2]) == [1, 2, 3]
    assert lc.sorted([3, 1, 2], reverse=True) == [3, 2, 1]
    pairs = [(1, "b"), (0, "a"), (1, "a"), (0, "b")]
    assert lc.sorted(pairs, key=operator.itemgetter(0)) == [
        (0, "a"),
        (0, "b"),
        (1, "b"),
        (1, "a"),
    ]
    by_len_desc = lc.sorted(["a", "ccc", "bb", "dd"], lambda a, b: len(b) - len(a))
    assert by_len_desc == ["ccc", "bb", "dd", "a"]


def test_sorted_rejects_cmp_and_key() -> None:
    """`cmp` and `key` are mutually exclusive."""
    with pytest.raises(TypeError):
        lc.sorted([1], lc.cmp, key=abs)


def test_reversed() -> None:
    """`reversed` materializes and reverses."""
    assert lc.reversed(lc.count().take(3)) == [2, 1, 0]
    assert lc.reversed([]) == []


def test_cmp() -> None:
    """Three-way comparison."""
    assert lc.cmp(1, 2) == -1
    assert lc.cmp(2, 2) == 0
    assert lc.cmp(3, 2) == 1
    assert lc.cmp({"a": 1}, {"a": 1}) == 0
    with pytest.raises(TypeError):
        lc.cmp(1, "a")
