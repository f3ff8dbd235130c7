from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    """Mixin letting an iterator be handed to plain functions without leaving a method chain."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Return `func(self, *args, **kwargs)`.

        Useful to finish a chain with any function taking an iterable, such as an aggregate.
        Whether elements get pulled is up to `func`.

        Args:
            func (Callable[Concatenate[Self, P], R]): Receives the iterator first.
            *args (P.args): Extra positional arguments for `func`.
            **kwargs (P.kwargs): Extra keyword arguments for `func`.

        Returns:
            R: Whatever `func` returns.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.count(1).take_while(lambda x: x < 5).into(lc.sum)
        10

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Call `func(self, *args, **kwargs)` for its side effects and keep chaining on `self`.

        The return value of `func` is ignored. The iterator only advances if `func` pulls from it.

        Args:
            func (Callable[Concatenate[Self, P], object]): Receives the iterator first.
            *args (P.args): Extra positional arguments for `func`.
            **kwargs (P.kwargs): Extra keyword arguments for `func`.

        Returns:
            Self: This iterator.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.iter_from([1, 2, 3]).inspect(print).collect()
        <valid SequenceIterator>
        [1, 2, 3]

        ```
        """
        func(self, *args, **kwargs)
        return self
