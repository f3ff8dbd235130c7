from __future__ import annotations

import math
from collections import deque
from collections.abc import Callable
from typing import Any

from ._adapters import iter_from
from ._aggregates import advance
from ._option import NONE, Option, Some
from ._protocol import IntoIter, Iterator


class SliceIterator[T](Iterator[T]):
    __slots__ = ("_remaining", "_source")

    def __init__(
        self, iterable: IntoIter[T], start: int = 0, stop: int | None = None
    ) -> None:
        if start < 0 or (stop is not None and stop < 0):
            msg = f"islice() bounds must be None or non-negative, got {start=}, {stop=}"
            raise ValueError(msg)
        self._source = iter_from(iterable)
        advance(self._source, start)
        self._remaining = (math.inf if stop is None else stop) - start
        self.valid = self._source.valid and self._remaining > 0

    def _next(self) -> T:
        self._remaining -= 1
        value = self._source.next()
        self.valid = self._source.valid and self._remaining > 0
        return value


def islice[T](
    iterable: IntoIter[T], start: int = 0, stop: int | None = None
) -> SliceIterator[T]:
    """Skip the first `start` elements right away, then yield the elements up to index `stop` (exclusive).

    Args:
        iterable (IntoIter[T]): The source.
        start (int): Number of elements to skip. They are consumed when the slice is created.
        stop (int | None): Index at which to stop. `None` means no limit.

    Returns:
        SliceIterator[T]: At most `stop - start` elements of the source.

    Raises:
        ValueError: If `start` or `stop` is negative.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.islice(lc.count(0), 2, 5).collect()
    [2, 3, 4]
    >>> lc.islice("abcdef", 4).collect()
    ['e', 'f']

    ```
    """
    return SliceIterator(iterable, start, stop)


class MapIterator[T, R](Iterator[R]):
    __slots__ = ("_func", "_source")

    def __init__(self, iterable: IntoIter[T], func: Callable[[T], R]) -> None:
        self._source = iter_from(iterable)
        self._func = func
        self.valid = self._source.valid

    def _next(self) -> R:
        value = self._source.next()
        self.valid = self._source.valid
        return self._func(value)


def imap[T, R](iterable: IntoIter[T], func: Callable[[T], R]) -> MapIterator[T, R]:
    """Lazily yield `func(element)` for every element of `iterable`.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.imap([1, 2, 3], str).collect()
    ['1', '2', '3']

    ```
    """
    return MapIterator(iterable, func)


class FilterIterator[T](Iterator[T]):
    """Look ahead to the next element satisfying the predicate.

    The look-ahead happens at construction and after every pull, so `valid` is known without pulling.
    """

    __slots__ = ("_pending", "_pred", "_source")

    def __init__(
        self, iterable: IntoIter[T], pred: Callable[[T], object] | None = None
    ) -> None:
        self._source = iter_from(iterable)
        self._pred = bool if pred is None else pred
        self._find_next()

    def _find_next(self) -> None:
        self._pending: Option[T] = NONE
        while self._source.valid:
            value = self._source.next()
            if self._pred(value):
                self._pending = Some(value)
                break
        self.valid = self._pending.is_some()

    def _next(self) -> T:
        value = self._pending.unwrap()
        self._find_next()
        return value


def ifilter[T](
    iterable: IntoIter[T], pred: Callable[[T], object] | None = None
) -> FilterIterator[T]:
    """Yield the elements of `iterable` for which `pred` is truthy.

    Args:
        iterable (IntoIter[T]): The source.
        pred (Callable[[T], object] | None): The predicate. Defaults to the truthiness of the element itself.

    Returns:
        FilterIterator[T]: The matching elements.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.ifilter([0, 1, "", "a", None]).collect()
    [1, 'a']
    >>> lc.ifilter(range(10), lambda x: x % 3 == 0).collect()
    [0, 3, 6, 9]

    ```
    """
    return FilterIterator(iterable, pred)


class ChainIterator[T](Iterator[T]):
    __slots__ = ("_sources",)

    def __init__(self, *iterables: IntoIter[T]) -> None:
        self._sources = deque(iter_from(it) for it in iterables)
        self._drop_exhausted()

    def _drop_exhausted(self) -> None:
        while self._sources and not self._sources[0].valid:
            self._sources.popleft()
        self.valid = bool(self._sources)

    def _next(self) -> T:
        value = self._sources[0].next()
        self._drop_exhausted()
        return value


def chain[T](*iterables: IntoIter[T]) -> ChainIterator[T]:
    """Yield every element of the first iterable, then of the second, and so on.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.chain([1, 2], [], (3,), "ab").collect()
    [1, 2, 3, 'a', 'b']

    ```
    """
    return ChainIterator(*iterables)


class ZipIterator(Iterator[tuple[Any, ...]]):
    __slots__ = ("_sources",)

    def __init__(self, *iterables: IntoIter[Any]) -> None:
        self._sources = tuple(iter_from(it) for it in iterables)
        self._update_valid()

    def _update_valid(self) -> None:
        self.valid = bool(self._sources) and all(it.valid for it in self._sources)

    def _next(self) -> tuple[Any, ...]:
        values = tuple(it.next() for it in self._sources)
        self._update_valid()
        return values


def izip(*iterables: IntoIter[Any]) -> ZipIterator:
    """Yield tuples holding one element from each iterable, stopping at the shortest.

    Sources are pulled in argument order. Calling it without arguments gives an exhausted iterator.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.izip("abc", lc.count()).collect()
    [('a', 0), ('b', 1), ('c', 2)]
    >>> lc.izip().valid
    False

    ```
    """
    return ZipIterator(*iterables)


class TakeWhileIterator[T](Iterator[T]):
    __slots__ = ("_pending", "_pred", "_source")

    def __init__(self, iterable: IntoIter[T], pred: Callable[[T], object]) -> None:
        self._source = iter_from(iterable)
        self._pred = pred
        self._look_ahead()

    def _look_ahead(self) -> None:
        self._pending: Option[T] = NONE
        if self._source.valid:
            value = self._source.next()
            if self._pred(value):
                self._pending = Some(value)
        self.valid = self._pending.is_some()

    def _next(self) -> T:
        value = self._pending.unwrap()
        self._look_ahead()
        return value


def take_while[T](
    iterable: IntoIter[T], pred: Callable[[T], object]
) -> TakeWhileIterator[T]:
    """Yield elements as long as `pred` holds, then stop for good.

    The first element failing `pred` is consumed from the source and discarded.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.take_while([1, 2, 3, 1], lambda x: x < 3).collect()
    [1, 2]

    ```
    """
    return TakeWhileIterator(iterable, pred)


class DropWhileIterator[T](Iterator[T]):
    __slots__ = ("_first", "_source")

    def __init__(self, iterable: IntoIter[T], pred: Callable[[T], object]) -> None:
        self._source = iter_from(iterable)
        self._first: Option[T] = NONE
        while self._source.valid:
            value = self._source.next()
            if not pred(value):
                self._first = Some(value)
                break
        self.valid = self._first.is_some() or self._source.valid

    def _next(self) -> T:
        if self._first.is_some():
            value = self._first.unwrap()
            self._first = NONE
        else:
            value = self._source.next()
        self.valid = self._source.valid
        return value


def drop_while[T](
    iterable: IntoIter[T], pred: Callable[[T], object]
) -> DropWhileIterator[T]:
    """Discard elements while `pred` holds, then yield everything else.

    The discarding happens when the iterator is created.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.drop_while([1, 2, 3, 1], lambda x: x < 3).collect()
    [3, 1]

    ```
    """
    return DropWhileIterator(iterable, pred)
