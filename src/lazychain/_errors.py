class LazyChainError(Exception): ...


class EmptySequenceError(LazyChainError, ValueError):
    """Raised by `min`, `max` and `reduce` (without initial value) on an empty iterable."""


class InvalidStateError(LazyChainError, RuntimeError):
    """Raised when `next()` is called on an iterator whose `valid` is `False`."""


class UnimplementedError(LazyChainError, NotImplementedError):
    """Raised when the `Iterator` base is used without a concrete `_next` implementation."""
