from __future__ import annotations

import math

from ._adapters import iter_from
from ._option import NONE, Option, Some
from ._protocol import IntoIter, Iterator


class CountIterator(Iterator[int]):
    __slots__ = ("_n", "_step")

    def __init__(self, start: int = 0, step: int = 1) -> None:
        self._n = start
        self._step = step
        self.valid = True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._n})"

    def _next(self) -> int:
        n = self._n
        self._n += self._step
        return n


def count(start: int = 0, step: int = 1) -> CountIterator:
    """Create an infinite `Iterator` of evenly spaced values, starting at `start`.

    **Warning** ⚠️
        This creates an infinite iterator.
        Be sure to use `take()` or `islice()` to limit the number of items taken.

    Args:
        start (int): Starting value of the sequence. Defaults to 0.
        step (int): Difference between consecutive values. Defaults to 1.

    Returns:
        CountIterator: An iterator generating the sequence.

    Example:
    ```python
    >>> import lazychain as lc
    >>> it = lc.count(5)
    >>> it.next(), it.next()
    (5, 6)
    >>> it
    CountIterator(7)

    ```
    """
    return CountIterator(start, step)


class RepeatIterator[T](Iterator[T]):
    __slots__ = ("_remaining", "_value")

    def __init__(self, value: T, n: float | None = None) -> None:
        self._value = value
        self._remaining = math.inf if n is None else n
        self.valid = self._remaining > 0

    def _next(self) -> T:
        self._remaining -= 1
        self.valid = self._remaining > 0
        return self._value


def repeat[T](value: T, n: float | None = None) -> RepeatIterator[T]:
    """Yield `value` exactly `n` times, or forever if `n` is `None`.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.repeat("x", 3).collect()
    ['x', 'x', 'x']
    >>> lc.repeat("x", 0).valid
    False

    ```
    """
    return RepeatIterator(value, n)


class CycleIterator[T](Iterator[T]):
    """Yield the elements of a source, then repeat them forever.

    The source is pulled once and every element is saved. Once the source is exhausted the saved elements are replayed.
    An empty source gives an iterator that is invalid from the start.
    """

    __slots__ = ("_replay", "_saved", "_source")

    def __init__(self, iterable: IntoIter[T]) -> None:
        self._source = iter_from(iterable)
        self._saved: list[T] = []
        self._replay: Option[int] = NONE
        self.valid = self._source.valid

    def _next(self) -> T:
        if self._replay.is_none() and self._source.valid:
            value = self._source.next()
            self._saved.append(value)
            return value
        i = self._replay.unwrap_or(0)
        self._replay = Some((i + 1) % len(self._saved))
        return self._saved[i]


def cycle[T](iterable: IntoIter[T]) -> CycleIterator[T]:
    """Repeat the elements of `iterable` indefinitely.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.cycle([1, 2, 3]).take(7).collect()
    [1, 2, 3, 1, 2, 3, 1]
    >>> lc.cycle([]).valid
    False

    ```
    """
    return CycleIterator(iterable)
