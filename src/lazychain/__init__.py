import logging

from ._adapters import (
    MappingIterator,
    PyIterator,
    SequenceIterator,
    iter_from,
    register_adapter,
)
from ._aggregates import (
    advance,
    every,
    exhaust,
    for_each,
    materialize,
    max,
    min,
    reduce,
    reversed,
    some,
    sorted,
    sum,
)
from ._compare import cmp
from ._core import Config, config_context, configure, get_config
from ._errors import (
    EmptySequenceError,
    InvalidStateError,
    LazyChainError,
    UnimplementedError,
)
from ._generators import (
    CountIterator,
    CycleIterator,
    RepeatIterator,
    count,
    cycle,
    repeat,
)
from ._group_by import GroupByIterator, group_by
from ._option import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._protocol import EmptyIterator, IntoIter, Iterator, empty
from ._tee import TeeIterator, tee
from ._transforms import (
    ChainIterator,
    DropWhileIterator,
    FilterIterator,
    MapIterator,
    SliceIterator,
    TakeWhileIterator,
    ZipIterator,
    chain,
    drop_while,
    ifilter,
    imap,
    islice,
    izip,
    take_while,
)
from ._types import Group, Item

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "ChainIterator",
    "Config",
    "CountIterator",
    "CycleIterator",
    "DropWhileIterator",
    "EmptyIterator",
    "EmptySequenceError",
    "FilterIterator",
    "Group",
    "GroupByIterator",
    "IntoIter",
    "InvalidStateError",
    "Item",
    "Iterator",
    "LazyChainError",
    "MapIterator",
    "MappingIterator",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "PyIterator",
    "RepeatIterator",
    "SequenceIterator",
    "SliceIterator",
    "Some",
    "TakeWhileIterator",
    "TeeIterator",
    "UnimplementedError",
    "ZipIterator",
    "advance",
    "chain",
    "cmp",
    "config_context",
    "configure",
    "count",
    "cycle",
    "drop_while",
    "empty",
    "every",
    "exhaust",
    "for_each",
    "get_config",
    "group_by",
    "ifilter",
    "imap",
    "islice",
    "iter_from",
    "izip",
    "materialize",
    "max",
    "min",
    "reduce",
    "register_adapter",
    "repeat",
    "reversed",
    "some",
    "sorted",
    "sum",
    "take_while",
    "tee",
]
