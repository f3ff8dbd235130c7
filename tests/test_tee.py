"""Tests for the fork combinator."""

import random

import pytest

import lazychain as lc


def test_tee_forks_yield_same_sequence() -> None:
    """Each fork, drained on its own, yields the whole source."""
    data = list(range(20))
    forks = lc.tee(data, 3)
    assert len(forks) == 3  # noqa: PLR2004
    for fork in reversed(forks):
        assert fork.collect() == data


def test_tee_default_is_two_forks() -> None:
    """`n` defaults to 2."""
    a, b = lc.tee("ab")
    assert a.collect() == b.collect() == ["a", "b"]


def test_tee_pulls_each_element_once() -> None:
    """The shared source is pulled at most once per element."""
    pulled: list[int] = []
    a, b = lc.tee(lc.imap([1, 2, 3], lambda x: pulled.append(x) or x))
    assert a.collect() == [1, 2, 3]
    assert b.collect() == [1, 2, 3]
    assert pulled == [1, 2, 3]


def test_tee_lock_step_keeps_buffer_small() -> None:
    """Forks read in lock step never hold more than one element."""
    a, b = lc.tee(lc.count())
    for expected in range(1000):
        assert a.next() == expected
        assert a.buffered == 1
        assert b.next() == expected
        assert b.buffered == 0


def test_tee_buffer_tracks_spread() -> None:
    """The buffer size is the distance between the fastest and slowest fork."""
    forks = lc.tee(range(200), 4)
    rng = random.Random(1234)
    read = [0] * 4
    while any(fork.valid for fork in forks):
        i = rng.choice([i for i, fork in enumerate(forks) if fork.valid])
        assert forks[i].next() == read[i]
        read[i] += 1
        assert forks[i].buffered == max(read) - min(read)
    assert read == [200] * 4
    assert forks[0].buffered == 0


def test_tee_infinite_source() -> None:
    """Forks over an infinite source stay lazy."""
    a, b = lc.tee(lc.count(), 2)
    assert a.take(5).collect() == [0, 1, 2, 3, 4]
    assert b.buffered == 5  # noqa: PLR2004
    assert b.take(3).collect() == [0, 1, 2]
    assert b.buffered == 2  # noqa: PLR2004


def test_tee_validity() -> None:
    """A fork stays valid while it has unread buffered elements."""
    a, b = lc.tee([1])
    assert a.valid and b.valid
    assert a.next() == 1
    assert not a.valid
    assert b.valid
    assert b.next() == 1
    assert not b.valid


def test_tee_empty_source() -> None:
    """Forks of an empty source are invalid from the start."""
    assert not any(fork.valid for fork in lc.tee([], 3))


def test_tee_fork_count_edge_cases() -> None:
    """Zero forks is allowed; negative is not."""
    assert lc.tee([1, 2], 0) == ()
    with pytest.raises(ValueError, match="non-negative"):
        lc.tee([1], -1)


def test_tee_zip_of_forks() -> None:
    """Forks can be combined with each other."""
    a, b = lc.tee([1, 2, 3, 4])
    b.next()
    assert lc.izip(a, b).collect() == [(1, 2), (2, 3), (3, 4)]


def test_tee_repr_shows_buffer() -> None:
    """The fork repr exposes its position and the shared buffer."""
    a, _b = lc.tee([7, 8])
    a.next()
    assert repr(a) == "<valid TeeIterator fork=0 position=1 buffered=[7]>"


def test_tee_source_error_propagates() -> None:
    """Errors from the source reach whichever fork triggers the pull."""

    def _fail(x: int) -> int:
        if x == 1:
            raise ZeroDivisionError
        return x

    a, b = lc.tee(lc.imap([0, 1], _fail))
    assert a.next() == 0
    assert b.next() == 0
    with pytest.raises(ZeroDivisionError):
        b.next()
