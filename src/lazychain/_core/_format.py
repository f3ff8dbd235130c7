from collections.abc import Iterable
from itertools import islice
from typing import Any


def items_repr(values: Iterable[Any], max_items: int) -> str:
    head = list(islice(values, max_items + 1))
    body = ", ".join(repr(v) for v in head[:max_items])
    return body + (", ..." if len(head) > max_items else "")
