from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import asdict, dataclass, replace
from typing import Any

from ._format import items_repr

logger = logging.getLogger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(slots=True, frozen=True)
class Config:
    """Runtime options shared by every lazychain iterator.

    Args:
        strict (bool): If `True`, calling `next()` on an exhausted iterator raises `InvalidStateError`.
            If `False`, it returns `None` instead.
        repr_max_items (int): Maximum number of items shown by reprs that display buffered values.
    """

    strict: bool = True
    repr_max_items: int = 20

    @classmethod
    def from_env(cls) -> Config:
        """Build a `Config` from the `LAZYCHAIN_*` environment variables, falling back to defaults."""
        default = cls()
        strict = os.environ.get("LAZYCHAIN_STRICT")
        max_items = os.environ.get("LAZYCHAIN_REPR_MAX_ITEMS")
        return cls(
            strict=default.strict if strict is None else strict.lower() in _TRUTHY,
            repr_max_items=(
                default.repr_max_items if max_items is None else int(max_items)
            ),
        )

    def items_repr(self, values: Iterable[Any]) -> str:
        return items_repr(values, self.repr_max_items)


_CONFIG = Config.from_env()


def get_config() -> Config:
    """Return the active `Config`."""
    return _CONFIG


def configure(**changes: Any) -> Config:  # noqa: ANN401
    """Replace the active `Config` with a copy updated by `changes`.

    Args:
        **changes (Any): Fields of `Config` to override.

    Returns:
        Config: The previously active configuration.

    Example:
    ```python
    >>> import lazychain as lc
    >>> previous = lc.configure(strict=False)
    >>> lc.get_config().strict
    False
    >>> _ = lc.configure(strict=previous.strict)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = replace(_CONFIG, **changes)
    logger.debug("lazychain config changed: %r -> %r", previous, _CONFIG)
    return previous


@contextmanager
def config_context(**changes: Any) -> Iterator[Config]:  # noqa: ANN401
    """Temporarily apply `changes` to the active `Config`.

    Example:
    ```python
    >>> import lazychain as lc
    >>> with lc.config_context(strict=False):
    ...     print(lc.empty().next())
    None

    ```
    """
    previous = configure(**changes)
    try:
        yield _CONFIG
    finally:
        configure(**asdict(previous))
