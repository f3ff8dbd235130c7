from __future__ import annotations

import math
import operator
from collections.abc import Callable
from functools import cmp_to_key
from typing import Any, Literal, overload

import cytoolz as cz

from ._adapters import iter_from
from ._compare import cmp as default_cmp
from ._errors import EmptySequenceError
from ._protocol import MISSING, IntoIter

def materialize[T](iterable: IntoIter[T]) -> list[T]:
    """Drain `iterable` into a `list`, preserving order.

    Only terminates for finite iterables.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.materialize(lc.count(3).take(2))
    [3, 4]

    ```
    """
    it = iter_from(iterable)
    result: list[T] = []
    while it.valid:
        result.append(it.next())
    return result


def advance(iterable: IntoIter[Any], n: float) -> None:
    """Discard up to `n` elements, fewer if the iterator is exhausted first."""
    it = iter_from(iterable)
    i = 0
    while i < n and it.valid:
        it.next()
        i += 1


def exhaust(iterable: IntoIter[Any]) -> None:
    """Pull every element of `iterable` for its side effects, keeping none of them."""
    advance(iterable, math.inf)


@overload
def reduce[T](func: Callable[[T, T], T], iterable: IntoIter[T]) -> T: ...
@overload
def reduce[T, U](func: Callable[[U, T], U], iterable: IntoIter[T], initial: U) -> U: ...
def reduce(
    func: Callable[[Any, Any], Any],
    iterable: IntoIter[Any],
    initial: Any = MISSING,  # noqa: ANN401
) -> Any:  # noqa: ANN401
    """Left-fold `iterable` with `func`.

    Args:
        func (Callable): Two-argument function, called with the accumulated value and the next element.
        iterable (IntoIter): The source.
        initial (Any): Starting value. If omitted, the first element is used.

    Returns:
        Any: The accumulated value.

    Raises:
        EmptySequenceError: If `iterable` is empty and no `initial` value is given.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.reduce(lambda acc, x: acc * x, [1, 2, 3, 4])
    24
    >>> lc.reduce(lambda acc, x: acc * x, [], 0)
    0

    ```
    """
    it = iter_from(iterable)
    if initial is MISSING:
        if not it.valid:
            raise EmptySequenceError("reduce() of empty sequence with no initial value")
        result = it.next()
    else:
        result = initial
    while it.valid:
        result = func(result, it.next())
    return result


def sum[T](iterable: IntoIter[T], start: T | Literal[0] = 0) -> T | Literal[0]:
    """Add up the elements of `iterable`, starting from `start`.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.sum(range(5))
    10
    >>> lc.sum([[1], [2]], [])
    [1, 2]

    ```
    """
    return reduce(operator.add, iterable, start)


def _find_extreme[T](
    name: str,
    improves: Literal[-1, 1],
    iterable: IntoIter[T],
    key: Callable[[T], Any] | None,
) -> T:
    it = iter_from(iterable)
    if not it.valid:
        msg = f"{name}() argument is empty"
        raise EmptySequenceError(msg)
    get_key = cz.functoolz.identity if key is None else key
    result = it.next()
    result_key = get_key(result)
    while it.valid:
        value = it.next()
        value_key = get_key(value)
        if default_cmp(result_key, value_key) == improves:
            result, result_key = value, value_key
    return result


def min[T](iterable: IntoIter[T], key: Callable[[T], Any] | None = None) -> T:
    """Return the smallest element. Among equal elements, the first one wins.

    Raises:
        EmptySequenceError: If `iterable` is empty.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.min([3, 1, 2])
    1
    >>> lc.min(["bb", "a", "c"], key=len)
    'a'

    ```
    """
    return _find_extreme("min", 1, iterable, key)


def max[T](iterable: IntoIter[T], key: Callable[[T], Any] | None = None) -> T:
    """Return the largest element. Among equal elements, the first one wins.

    Raises:
        EmptySequenceError: If `iterable` is empty.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.max(["a", "bb", "cc"], key=len)
    'bb'

    ```
    """
    return _find_extreme("max", -1, iterable, key)


def for_each[T](iterable: IntoIter[T], func: Callable[[T], object]) -> None:
    """Call `func` on every element of `iterable`."""
    it = iter_from(iterable)
    while it.valid:
        func(it.next())


def every[T](iterable: IntoIter[T], pred: Callable[[T], object]) -> bool:
    """Return `True` if `pred` holds for every element. Stops at the first failure.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.every(lc.count(), lambda x: x < 3)
    False

    ```
    """
    it = iter_from(iterable)
    while it.valid:
        if not pred(it.next()):
            return False
    return True


def some[T](iterable: IntoIter[T], pred: Callable[[T], object]) -> bool:
    """Return `True` if `pred` holds for at least one element. Stops at the first success."""
    it = iter_from(iterable)
    while it.valid:
        if pred(it.next()):
            return True
    return False


def sorted[T](
    iterable: IntoIter[T],
    cmp: Callable[[T, T], int] | None = None,
    *,
    key: Callable[[T], Any] | None = None,
    reverse: bool = False,
) -> list[T]:
    """Materialize `iterable` and sort it. The sort is stable.

    Args:
        iterable (IntoIter[T]): The source. Must be finite.
        cmp (Callable[[T, T], int] | None): Three-way comparison function. Defaults to `cmp()`.
        key (Callable[[T], Any] | None): Key function applied before comparing. Cannot be combined with `cmp`.
        reverse (bool): Sort in descending order.

    Returns:
        list[T]: The sorted elements.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.sorted([3, 1, 2])
    [1, 2, 3]
    >>> lc.sorted(["bb", "a", "ccc"], lambda a, b: len(b) - len(a))
    ['ccc', 'bb', 'a']

    ```
    """
    if cmp is not None and key is not None:
        raise TypeError("sorted() accepts either `cmp` or `key`, not both")
    result = materialize(iterable)
    if key is None:
        key = cmp_to_key(default_cmp if cmp is None else cmp)
    result.sort(key=key, reverse=reverse)
    return result


def reversed[T](iterable: IntoIter[T]) -> list[T]:
    """Materialize `iterable` and reverse it."""
    result = materialize(iterable)
    result.reverse()
    return result
