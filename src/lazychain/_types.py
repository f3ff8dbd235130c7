from __future__ import annotations

from typing import Any, NamedTuple, Protocol


class Item[K, V](NamedTuple):
    """A key-value pair yielded when iterating over a `Mapping`."""

    key: K
    """The key of the item."""
    value: V
    """The value associated with the key."""

    def __repr__(self) -> str:
        return f"({self.key!r}, {self.value!r})"


class Group[K, V](NamedTuple):
    """A run of adjacent values sharing a common key.

    See `group_by()` for details.
    """

    key: K
    """The common key for the group."""
    values: list[V]
    """The values of the run, in source order."""

    def __repr__(self) -> str:
        return f"({self.key!r}, {self.values!r})"


# typeshed protocols


class SupportsDunderLT[T](Protocol):
    def __lt__(self, other: T, /) -> bool: ...


class SupportsDunderGT[T](Protocol):
    def __gt__(self, other: T, /) -> bool: ...


class SupportsLazyIter[T](Protocol):
    def __lazy_iter__(self) -> Any: ...  # noqa: ANN401


type SupportsRichComparison[T] = SupportsDunderLT[T] | SupportsDunderGT[T]
