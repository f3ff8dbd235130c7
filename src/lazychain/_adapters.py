from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Mapping, Sequence
from functools import singledispatch
from typing import Any

import cytoolz as cz
import more_itertools as mit

from ._option import NONE, Option, Some
from ._protocol import IntoIter, Iterator
from ._types import Item


class SequenceIterator[T](Iterator[T]):
    """Iterate over an indexable sequence by position.

    The length is read again after every pull, so appending to the sequence while iterating extends the iteration
    until the iterator becomes invalid for the first time.
    """

    __slots__ = ("_i", "_seq")

    def __init__(self, seq: Sequence[T]) -> None:
        self._seq = seq
        self._i = 0
        self.valid = len(seq) > 0

    def _next(self) -> T:
        value = self._seq[self._i]
        self._i += 1
        self.valid = self._i < len(self._seq)
        return value


class MappingIterator[K, V](Iterator[Item[K, V]]):
    """Iterate over the `(key, value)` items of a mapping.

    The key order is captured when the iterator is built; values are looked up when pulled.
    """

    __slots__ = ("_keys", "_mapping")

    def __init__(self, mapping: Mapping[K, V]) -> None:
        self._mapping = mapping
        self._keys = SequenceIterator(list(mapping))
        self.valid = self._keys.valid

    def _next(self) -> Item[K, V]:
        key = self._keys.next()
        self.valid = self._keys.valid
        return Item(key, self._mapping[key])


class PyIterator[T](Iterator[T]):
    """Adapt any Python iterable to the `valid`/`next()` protocol.

    Python iterators cannot tell whether another element exists without pulling it,
    so one element is always held in look-ahead. An error raised while looking ahead is kept
    and raised by the next pull, after the element already pulled has been returned.
    """

    __slots__ = ("_error", "_it")

    def __init__(self, iterable: Iterable[T]) -> None:
        self._it = mit.peekable(iterable)
        self._error: Option[Exception] = NONE
        self.valid = bool(self._it)

    def _next(self) -> T:
        if self._error.is_some():
            error = self._error.unwrap()
            self._error = NONE
            self.valid = False
            raise error
        value = next(self._it)
        try:
            self.valid = bool(self._it)
        except Exception as e:  # noqa: BLE001
            # raised again by the following pull, once `value` has been delivered
            self._error = Some(e)
            self.valid = True
        return value


@singledispatch
def _adapt(value: object) -> Iterator[Any]:
    if cz.itertoolz.isiterable(value):
        return PyIterator(value)  # type: ignore[arg-type]
    msg = f"{value.__class__.__name__!r} object cannot be iterated"
    raise TypeError(msg)


_adapt.register(Sequence, SequenceIterator)
_adapt.register(Mapping, MappingIterator)
# ranges may be longer than `len()` can report; deque indexing is linear away from the ends
_adapt.register(range, PyIterator)
_adapt.register(deque, PyIterator)


def register_adapter[H](cls: type[H], factory: Callable[[H], Iterator[Any]]) -> None:
    """Register `factory` as the way to iterate over instances of `cls`.

    Example:
    ```python
    >>> import lazychain as lc
    >>> class Pair:
    ...     def __init__(self, a, b):
    ...         self.a, self.b = a, b
    >>> lc.register_adapter(Pair, lambda p: lc.iter_from((p.a, p.b)))
    >>> lc.iter_from(Pair(1, 2)).collect()
    [1, 2]

    ```
    """
    _adapt.register(cls, factory)


def iter_from[T](value: IntoIter[T]) -> Iterator[T]:
    """Get a lazychain `Iterator` over `value`.

    - An `Iterator` is returned unchanged.
    - An object with a `__lazy_iter__()` method is asked for its iterator.
    - Registered types use their adapter: sequences yield their elements, mappings yield `Item(key, value)` pairs.
    - Any other Python iterable is wrapped with a one-element look-ahead.

    Args:
        value (IntoIter[T]): The value to iterate over.

    Returns:
        Iterator[T]: An iterator over `value`.

    Raises:
        TypeError: If `value` cannot be iterated.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.iter_from("abc").collect()
    ['a', 'b', 'c']
    >>> lc.iter_from({"a": 1}).collect()
    [('a', 1)]
    >>> lc.iter_from(x * 2 for x in range(3)).collect()
    [0, 2, 4]

    ```
    """
    if isinstance(value, Iterator):
        return value
    lazy_iter = getattr(value, "__lazy_iter__", None)
    if lazy_iter is not None:
        return iter_from(lazy_iter())
    return _adapt(value)
