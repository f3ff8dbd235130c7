from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from ._adapters import iter_from
from ._core import get_config
from ._protocol import IntoIter, Iterator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _TeeState[T]:
    """State shared by the forks of a single `tee()` call.

    Logical indices count the elements pulled from `source`, starting at 0.

    - `positions[f]` is the index of the next element fork `f` will read.
    - `high` is the number of elements pulled from `source` so far.
    - `low` is the smallest value in `positions`.
    - `buffer` holds the elements with index in `[low, high)`, oldest first.
    """

    source: Iterator[T]
    positions: list[int]
    buffer: deque[T] = field(default_factory=deque)
    low: int = 0
    high: int = 0

    def read(self, fork: int) -> T:
        i = self.positions[fork]
        if i == self.high:
            value = self.source.next()
            self.buffer.append(value)
            self.high += 1
        else:
            value = self.buffer[i - self.low]
        self.positions[fork] = i + 1
        if i == self.low and min(self.positions) > self.low:
            self.low += 1
            self.buffer.popleft()
        return value


class TeeIterator[T](Iterator[T]):
    """One of the forks returned by `tee()`.

    Forks read from a shared buffer. The buffer only holds the elements that the fastest fork has read
    and the slowest has not, so memory grows with the distance between forks, never with the stream length.
    """

    __slots__ = ("_fork", "_state")

    def __init__(self, fork: int, state: _TeeState[T]) -> None:
        self._fork = fork
        self._state = state
        self.valid = state.source.valid

    def __repr__(self) -> str:
        state = self._state
        values = get_config().items_repr(state.buffer)
        return (
            f"<{'valid' if self.valid else 'invalid'} {self.__class__.__name__} "
            f"fork={self._fork} position={state.positions[self._fork]} buffered=[{values}]>"
        )

    @property
    def buffered(self) -> int:
        """Number of elements currently held in the buffer shared by all forks."""
        return len(self._state.buffer)

    def _next(self) -> T:
        state = self._state
        value = state.read(self._fork)
        self.valid = state.positions[self._fork] != state.high or state.source.valid
        return value


def tee[T](iterable: IntoIter[T], n: int = 2) -> tuple[TeeIterator[T], ...]:
    """Return `n` independent iterators over the elements of `iterable`.

    Each element is pulled from the source once, by whichever fork reaches it first, and kept until every fork has read it.
    The source must not be used directly once it has been split.

    Forks are meant to be driven from a single thread.

    Args:
        iterable (IntoIter[T]): The source.
        n (int): Number of forks. Defaults to 2.

    Returns:
        tuple[TeeIterator[T], ...]: The forks.

    Raises:
        ValueError: If `n` is negative.

    Example:
    ```python
    >>> import lazychain as lc
    >>> a, b = lc.tee(lc.count().take(4))
    >>> a.next(), a.next(), a.buffered
    (0, 1, 2)
    >>> b.collect(), a.collect()
    ([0, 1, 2, 3], [2, 3])

    ```
    """
    if n < 0:
        msg = f"tee() needs a non-negative number of forks, got {n}"
        raise ValueError(msg)
    state = _TeeState(iter_from(iterable), [0] * n)
    logger.debug("tee: splitting %r into %d forks", state.source, n)
    return tuple(TeeIterator(i, state) for i in range(n))
