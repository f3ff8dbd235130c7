"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._pipeline import run_pipeline, to_table
from ._registery import BENCHMARKS, CONSOLE

app = typer.Typer(help="Benchmarks for lazychain developments.")


@app.command(name="list")
def list_benchmarks() -> None:
    """Show all registered benchmarks."""
    for bench in BENCHMARKS:
        CONSOLE.print(f"{bench.category}.{bench.name}")


@app.command()
def run(
    *,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Only run this category.")
    ] = None,
) -> None:
    """Run benchmarks and print the median timings."""
    CONSOLE.print("Running benchmarks...", style="bold blue")
    CONSOLE.print(to_table(run_pipeline(category)))
    CONSOLE.print("✓ Done", style="bold green")


if __name__ == "__main__":
    app()
