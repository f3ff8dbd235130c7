"""Tests for group_by."""

import pytest

import lazychain as lc


def test_group_by_identity_keeps_runs_apart() -> None:
    """Non-adjacent runs of the same key produce separate groups."""
    groups = lc.group_by([1, 1, 2, 2, 1]).collect()
    assert groups == [(1, [1, 1]), (2, [2, 2]), (1, [1])]
    assert [list(g) for g in groups] == [[1, [1, 1]], [2, [2, 2]], [1, [1]]]


def test_group_by_key_func() -> None:
    """Keys come from `key_func`, values are the original elements."""
    words = ["apple", "avocado", "banana", "blueberry", "cherry"]
    groups = lc.group_by(words, lambda w: w[0]).collect()
    assert [g.key for g in groups] == ["a", "b", "c"]
    assert groups[1].values == ["banana", "blueberry"]


def test_group_by_is_exhaustive_and_order_preserving() -> None:
    """Concatenating the groups reproduces the input."""
    data = [3, 3, 1, 4, 4, 4, 1, 5, 9, 9, 2, 6]
    groups = lc.group_by(data, lambda x: x % 2)
    assert lc.sum(lc.imap(groups, lambda g: g.values), []) == data


def test_group_by_empty_and_single() -> None:
    """Edge cases: no elements, one element."""
    assert lc.group_by([]).collect() == []
    assert not lc.group_by([]).valid
    assert lc.group_by("a").collect() == [("a", ["a"])]


def test_group_by_holds_one_element_ahead() -> None:
    """Pulling a group reads exactly one element of the next group."""
    pulled: list[int] = []
    source = lc.imap([1, 1, 2, 2, 3], lambda x: pulled.append(x) or x)
    it = lc.group_by(source)
    assert pulled == []
    assert it.next() == (1, [1, 1])
    assert pulled == [1, 1, 2]


def test_group_by_infinite_source() -> None:
    """Groups are produced lazily from an infinite source."""
    it = lc.group_by(lc.count(), lambda x: x // 3)
    assert it.take(2).collect() == [(0, [0, 1, 2]), (1, [3, 4, 5])]


def test_group_by_uses_equality_not_identity() -> None:
    """Equal but distinct keys belong to the same group."""
    groups = lc.group_by([[1], [1], [2]]).collect()
    assert len(groups) == 2  # noqa: PLR2004


def test_group_by_incomparable_keys_propagate() -> None:
    """Comparison errors from keys are not caught."""
    it = lc.group_by([1, "a"])
    with pytest.raises(TypeError):
        it.next()
