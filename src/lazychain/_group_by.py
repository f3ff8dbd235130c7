from __future__ import annotations

from collections.abc import Callable
from typing import Any

import cytoolz as cz

from ._adapters import iter_from
from ._compare import cmp
from ._option import NONE, Option, Some
from ._protocol import IntoIter, Iterator
from ._types import Group


class GroupByIterator[K, V](Iterator[Group[K, V]]):
    """Yield `Group(key, values)` for each maximal run of adjacent elements sharing a key.

    Between pulls, only the first element of the next run is held, together with its key.
    """

    __slots__ = ("_key_func", "_pending", "_source")

    def __init__(
        self, iterable: IntoIter[V], key_func: Callable[[V], K] | None = None
    ) -> None:
        self._source = iter_from(iterable)
        self._key_func: Callable[[V], K] = (
            cz.functoolz.identity if key_func is None else key_func
        )
        self._pending: Option[tuple[K, V]] = NONE
        self.valid = self._source.valid

    def _next(self) -> Group[K, V]:
        if self._pending.is_some():
            key, first = self._pending.unwrap()
        else:
            first = self._source.next()
            key = self._key_func(first)
        self._pending = NONE
        values = [first]
        while self._source.valid:
            value = self._source.next()
            value_key = self._key_func(value)
            if cmp(value_key, key) != 0:
                self._pending = Some((value_key, value))
                break
            values.append(value)
        self.valid = self._pending.is_some()
        return Group(key, values)


def group_by(
    iterable: IntoIter[Any], key_func: Callable[[Any], Any] | None = None
) -> GroupByIterator[Any, Any]:
    """Group adjacent elements of `iterable` that share the same key.

    Elements are not sorted first: a key appearing in two separate runs produces two groups.
    Sort the input beforehand to get one group per key.

    Args:
        iterable (IntoIter[Any]): The source.
        key_func (Callable[[Any], Any] | None): Computes the key of each element. Defaults to the element itself.

    Returns:
        GroupByIterator[Any, Any]: An iterator of `Group(key, values)` named tuples.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.group_by([1, 1, 2, 2, 1]).collect()
    [(1, [1, 1]), (2, [2, 2]), (1, [1])]
    >>> for key, words in lc.group_by(["apple", "avocado", "banana"], lambda w: w[0]):
    ...     print(key, words)
    a ['apple', 'avocado']
    b ['banana']

    ```
    """
    return GroupByIterator(iterable, key_func)
