from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Literal, Never, overload

from ._core import Pipeable, get_config
from ._errors import InvalidStateError, UnimplementedError

if TYPE_CHECKING:
    from ._group_by import GroupByIterator
    from ._tee import TeeIterator
    from ._types import SupportsLazyIter, SupportsRichComparison

MISSING: Any = object()
"""Sentinel for omitted optional arguments."""

type IntoIter[T] = Iterator[T] | Iterable[T] | SupportsLazyIter[T]
"""Anything `iter_from()` accepts."""


class Iterator[T](Pipeable):
    """Base of every lazychain iterator: a validity flag and a pull operation.

    - `valid` is a plain attribute. Concrete iterators assign it in their constructor and at the end of every `_next()`.
      Reading it never has side effects, and once it is `False` it stays `False`.
    - `next()` pulls exactly one element. Calling it while `valid` is `False` raises `InvalidStateError`,
      or returns `None` when the `strict` configuration flag is off.

    Subclasses must define `_next()`, which is only ever called while `valid` is `True`.

    Iterators also follow the Python iterator protocol, so they can be used in `for` loops and passed to builtins.

    Example:
    ```python
    >>> import lazychain as lc
    >>> it = lc.iter_from([1, 2])
    >>> it.valid, it.next(), it.next(), it.valid
    (True, 1, 2, False)
    >>> it
    <invalid SequenceIterator>

    ```
    """

    __slots__ = ("valid",)

    valid: bool

    def __init_subclass__(cls, **kwargs: Any) -> None:  # noqa: ANN401
        super().__init_subclass__(**kwargs)
        if cls._next is Iterator._next:
            msg = f"{cls.__name__} must define _next()"
            raise UnimplementedError(msg)

    def __init__(self) -> None:
        msg = f"{self.__class__.__name__} must be instantiated via a subclass"
        raise UnimplementedError(msg)

    def _next(self) -> T:
        raise UnimplementedError("_next() must be defined by Iterator subclass")

    def next(self) -> T:
        """Pull the next element.

        Returns:
            T: The next element.

        Raises:
            InvalidStateError: If the iterator is exhausted and the `strict` configuration flag is on.
        """
        if self.valid:
            return self._next()
        if get_config().strict:
            msg = f"next() called on an exhausted {self.__class__.__name__}"
            raise InvalidStateError(msg)
        return None  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.valid:
            raise StopIteration
        return self._next()

    def __repr__(self) -> str:
        return f"<{'valid' if self.valid else 'invalid'} {self.__class__.__name__}>"

    # Transforms
    # ------------------------------------------------------------

    def map[R](self, func: Callable[[T], R]) -> Iterator[R]:
        """Lazily apply `func` to every element. See `imap()`."""
        from ._transforms import imap

        return imap(self, func)

    def filter(self, pred: Callable[[T], object] | None = None) -> Iterator[T]:
        """Keep the elements for which `pred` is truthy. See `ifilter()`."""
        from ._transforms import ifilter

        return ifilter(self, pred)

    def slice(self, start: int = 0, stop: int | None = None) -> Iterator[T]:
        """See `islice()`."""
        from ._transforms import islice

        return islice(self, start, stop)

    def take(self, n: int) -> Iterator[T]:
        """Yield at most the first `n` elements.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.count(10).take(3).collect()
        [10, 11, 12]

        ```
        """
        from ._transforms import islice

        return islice(self, 0, n)

    def chain(self, *others: IntoIter[T]) -> Iterator[T]:
        """Yield all of `self`, then all of each of `others`. See `chain()`."""
        from ._transforms import chain

        return chain(self, *others)

    def zip(self, *others: IntoIter[Any]) -> Iterator[tuple[Any, ...]]:
        """See `izip()`."""
        from ._transforms import izip

        return izip(self, *others)

    def take_while(self, pred: Callable[[T], object]) -> Iterator[T]:
        from ._transforms import take_while

        return take_while(self, pred)

    def drop_while(self, pred: Callable[[T], object]) -> Iterator[T]:
        from ._transforms import drop_while

        return drop_while(self, pred)

    def cycle(self) -> Iterator[T]:
        from ._generators import cycle

        return cycle(self)

    def tee(self, n: int = 2) -> tuple[TeeIterator[T], ...]:
        """Split `self` into `n` independent iterators. See `tee()`.

        `self` must not be used afterwards.
        """
        from ._tee import tee

        return tee(self, n)

    @overload
    def group_by(self, key_func: None = None) -> GroupByIterator[T, T]: ...
    @overload
    def group_by[K](self, key_func: Callable[[T], K]) -> GroupByIterator[K, T]: ...
    def group_by(
        self, key_func: Callable[[T], Any] | None = None
    ) -> GroupByIterator[Any, T]:
        """See `group_by()`."""
        from ._group_by import group_by

        return group_by(self, key_func)

    # Aggregations
    # ------------------------------------------------------------

    def collect(self) -> list[T]:
        """Drain the iterator into a `list`. See `materialize()`."""
        from ._aggregates import materialize

        return materialize(self)

    def advance(self, n: float) -> Iterator[T]:
        """Discard up to `n` elements and return `self`."""
        from ._aggregates import advance

        advance(self, n)
        return self

    def exhaust(self) -> None:
        from ._aggregates import exhaust

        exhaust(self)

    @overload
    def reduce(self, func: Callable[[T, T], T]) -> T: ...
    @overload
    def reduce[U](self, func: Callable[[U, T], U], initial: U) -> U: ...
    def reduce(self, func: Callable[[Any, T], Any], initial: Any = MISSING) -> Any:  # noqa: ANN401
        """Left-fold the elements with `func`, starting from `initial` if given. See `reduce()`."""
        from ._aggregates import reduce

        return reduce(func, self, initial)

    def sum[U](self: Iterator[U], start: U | Literal[0] = 0) -> U | Literal[0]:
        from ._aggregates import sum as _sum

        return _sum(self, start)

    def min[U: SupportsRichComparison[Any]](
        self: Iterator[U], key: Callable[[U], Any] | None = None
    ) -> U:
        from ._aggregates import min as _min

        return _min(self, key=key)

    def max[U: SupportsRichComparison[Any]](
        self: Iterator[U], key: Callable[[U], Any] | None = None
    ) -> U:
        from ._aggregates import max as _max

        return _max(self, key=key)

    def for_each(self, func: Callable[[T], object]) -> None:
        from ._aggregates import for_each

        for_each(self, func)

    def every(self, pred: Callable[[T], object]) -> bool:
        from ._aggregates import every

        return every(self, pred)

    def some(self, pred: Callable[[T], object]) -> bool:
        from ._aggregates import some

        return some(self, pred)

    def sorted(
        self,
        cmp: Callable[[T, T], int] | None = None,
        *,
        key: Callable[[T], Any] | None = None,
        reverse: bool = False,
    ) -> list[T]:
        from ._aggregates import sorted as _sorted

        return _sorted(self, cmp, key=key, reverse=reverse)

    def reversed(self) -> list[T]:
        from ._aggregates import reversed as _reversed

        return _reversed(self)


class EmptyIterator(Iterator[Any]):
    """An iterator that is exhausted from the start."""

    __slots__ = ()

    def __init__(self) -> None:
        self.valid = False

    def _next(self) -> Never:
        raise InvalidStateError("EmptyIterator has no elements")


def empty() -> Iterator[Any]:
    """Return an iterator with no elements.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.empty()
    <invalid EmptyIterator>
    >>> lc.empty().collect()
    []

    ```
    """
    return EmptyIterator()
