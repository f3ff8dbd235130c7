"""Tests for the sequence, mapping and Python-iterable adapters."""

from collections import deque

import pytest

import lazychain as lc


def test_sequence_iterator_positions() -> None:
    """Elements come out by position, `valid` turns false after the last one."""
    it = lc.SequenceIterator(("a", "b"))
    assert it.valid
    assert it.next() == "a"
    assert it.valid
    assert it.next() == "b"
    assert not it.valid


def test_sequence_iterator_sees_appends_while_valid() -> None:
    """The backing list is read by reference."""
    data = [1]
    it = lc.SequenceIterator(data)
    data.append(2)
    assert it.collect() == [1, 2]


def test_mapping_iterator_order_is_stable() -> None:
    """Keys are captured once; values are read when pulled."""
    data = {"x": 1, "y": 2}
    it = lc.MappingIterator(data)
    data["x"] = 10
    assert it.collect() == [lc.Item("x", 10), lc.Item("y", 2)]


def test_mapping_iterator_empty() -> None:
    """An empty mapping gives an exhausted iterator."""
    assert not lc.iter_from({}).valid


def test_py_iterator_look_ahead() -> None:
    """Generators are pulled one element ahead to answer `valid`."""
    pulled: list[int] = []

    def gen():  # noqa: ANN202
        for x in (1, 2):
            pulled.append(x)
            yield x

    it = lc.PyIterator(gen())
    assert pulled == [1]
    assert it.next() == 1
    assert pulled == [1, 2]
    assert it.next() == 2  # noqa: PLR2004
    assert not it.valid


def test_py_iterator_with_none_values() -> None:
    """`None` elements are not mistaken for exhaustion."""
    assert lc.iter_from(iter([None, None])).collect() == [None, None]


def test_py_iterator_error_propagates() -> None:
    """Errors raised by the wrapped iterator are not swallowed."""

    def gen():  # noqa: ANN202
        yield 1
        raise ValueError("broken source")

    with pytest.raises(ValueError, match="broken source"):
        lc.iter_from(gen()).collect()


def test_py_iterator_error_keeps_pulled_element() -> None:
    """An element pulled before the source fails is still delivered."""

    def gen():  # noqa: ANN202
        yield 1
        yield 2
        raise ValueError("broken source")

    seen: list[int] = []
    it = lc.iter_from(gen())
    with pytest.raises(ValueError, match="broken source"):
        lc.for_each(it, seen.append)
    assert seen == [1, 2]
    assert not it.valid


def test_huge_range() -> None:
    """Ranges longer than `len()` supports are still iterated lazily."""
    assert lc.islice(range(10**20), 2, 5).collect() == [2, 3, 4]
    assert lc.iter_from(range(10**20)).next() == 0


def test_deque_uses_python_iteration() -> None:
    """Deques are walked with their own iterator, not by index."""
    data = deque([1, 2, 3])
    it = lc.iter_from(data)
    assert isinstance(it, lc.PyIterator)
    assert it.collect() == [1, 2, 3]



def test_string_yields_characters() -> None:
    """Strings are sequences of characters."""
    assert lc.iter_from("hé").collect() == ["h", "é"]
