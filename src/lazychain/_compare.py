from typing import Any, Literal


def cmp(a: Any, b: Any) -> Literal[-1, 0, 1]:  # noqa: ANN401
    """Three-way comparison of `a` and `b`.

    Equality is checked first, so values that only support `==` compare equal to themselves.
    Incomparable values propagate the `TypeError` raised by Python's rich comparison.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.cmp(1, 2), lc.cmp(2, 2), lc.cmp("b", "a")
    (-1, 0, 1)

    ```
    """
    if a == b:
        return 0
    return -1 if a < b else 1
