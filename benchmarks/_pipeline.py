"""Benchmarks for lazychain developments."""

from rich.table import Table

import lazychain as lc

from ._registery import BENCHMARKS, Stats, collect_raw_timings, compute_stats


def run_pipeline(category: str | None = None) -> list[Stats]:
    """Run the registered benchmarks, optionally restricted to one category."""
    selected = lc.ifilter(
        BENCHMARKS, lambda b: category is None or b.category == category
    ).collect()
    if not selected:
        msg = f"No benchmarks registered for category {category!r}"
        raise LookupError(msg)
    return compute_stats(collect_raw_timings(selected))


def to_table(stats: list[Stats]) -> Table:
    """Render the median timings as a rich table."""
    table = Table(title="lazychain benchmarks")
    for column in ("category", "name", "size", "runs"):
        table.add_column(column)
    table.add_column("median (µs)", justify="right")
    lc.for_each(
        stats,
        lambda s: table.add_row(
            s.category, s.name, str(s.size), str(s.runs), f"{s.median * 1e6:.2f}"
        ),
    )
    return table
