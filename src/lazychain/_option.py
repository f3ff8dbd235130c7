from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """A slot that either holds a value (`Some`) or nothing (`NONE`).

    Look-ahead combinators store their pending element in an `Option`, so that `None` remains a legitimate element.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> from lazychain._option import Some, NONE
            >>> Some(None).is_some()
            True
            >>> NONE.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is the `NONE` value."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> from lazychain._option import Some
            >>> Some("car").unwrap()
            'car'

            ```
        """
        ...

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Example:
            ```python
            >>> from lazychain._option import Some, NONE
            >>> Some("car").unwrap_or("bike")
            'car'
            >>> NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value.

        Example:
            ```python
            >>> from lazychain._option import Some, NONE
            >>> Some("Hello, World!").map(len)
            Some(value=13)
            >>> NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
