"""Benchmarks for lazychain package - benchs.py."""

import itertools
import operator

import lazychain as lc

from ._registery import bench


def _is_even(x: int) -> bool:
    return x % 2 == 0


class Filter:
    """Benchmark filtering against the builtin `filter`."""

    @bench()
    @staticmethod
    def ifilter(data: list[int]) -> object:
        """Benchmark ifilter implementation."""
        return lc.ifilter(data, _is_even).collect()

    @bench()
    @staticmethod
    def builtin(data: list[int]) -> object:
        """Baseline: builtin filter."""
        return list(filter(_is_even, data))


class Chain:
    """Benchmark chaining three sources."""

    @bench()
    @staticmethod
    def chain(data: list[int]) -> object:
        """Benchmark chain implementation."""
        return lc.chain(data, data, data).collect()

    @bench()
    @staticmethod
    def itertools(data: list[int]) -> object:
        """Baseline: itertools.chain."""
        return list(itertools.chain(data, data, data))


class Tee:
    """Benchmark forks consumed in lock step and one after the other."""

    @bench()
    @staticmethod
    def lock_step(data: list[int]) -> object:
        """Forks read alternately, keeping the buffer at one element."""
        return lc.izip(*lc.tee(data, 3)).exhaust()

    @bench()
    @staticmethod
    def sequential(data: list[int]) -> object:
        """First fork drained completely before the second one."""
        a, b = lc.tee(data)
        return a.exhaust(), b.exhaust()

    @bench()
    @staticmethod
    def itertools(data: list[int]) -> object:
        """Baseline: itertools.tee."""
        return list(zip(*itertools.tee(data, 3), strict=True))


class GroupBy:
    """Benchmark grouping of adjacent runs."""

    @bench(gen=lambda size: size.map(lambda x: x // 8).collect())
    @staticmethod
    def group_by(data: list[int]) -> object:
        """Benchmark group_by implementation."""
        return lc.group_by(data).collect()

    @bench(gen=lambda size: size.map(lambda x: x // 8).collect())
    @staticmethod
    def itertools(data: list[int]) -> object:
        """Baseline: itertools.groupby."""
        return [(k, list(g)) for k, g in itertools.groupby(data)]


class Aggregates:
    """Benchmark aggregate operations."""

    @bench()
    @staticmethod
    def sum(data: list[int]) -> object:
        """Benchmark sum implementation."""
        return lc.sum(data)

    @bench()
    @staticmethod
    def reduce(data: list[int]) -> object:
        """Benchmark reduce implementation."""
        return lc.reduce(operator.mul, lc.imap(data, lambda x: x % 7 + 1), 1)

    @bench()
    @staticmethod
    def max(data: list[int]) -> object:
        """Benchmark max implementation."""
        return lc.max(data)
